"""MCP server that posts messages to Slack via an incoming webhook or a bot token."""

from slack_post_mcp.dispatcher import MessageDispatcher
from slack_post_mcp.errors import ConfigError, ConfigErrorKind
from slack_post_mcp.models import (
    BotPayload,
    DeliveryMode,
    ServerConfig,
    ToolCallResult,
    WebhookPayload,
)

__all__ = [
    "BotPayload",
    "ConfigError",
    "ConfigErrorKind",
    "DeliveryMode",
    "MessageDispatcher",
    "ServerConfig",
    "ToolCallResult",
    "WebhookPayload",
]
