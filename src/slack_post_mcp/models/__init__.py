"""Data models for the Slack posting server."""

from slack_post_mcp.models.config import DeliveryMode, ServerConfig
from slack_post_mcp.models.outcome import FailureKind, PostOutcome
from slack_post_mcp.models.slack import BotPayload, WebhookPayload
from slack_post_mcp.models.tool import TextContent, ToolCallResult, ToolDefinition

__all__ = [
    "DeliveryMode",
    "ServerConfig",
    "FailureKind",
    "PostOutcome",
    "BotPayload",
    "WebhookPayload",
    "TextContent",
    "ToolCallResult",
    "ToolDefinition",
]
