"""Slack egress: credential checks, HTTP client and the two delivery strategies."""

from slack_post_mcp.slack.bot import build_bot_payload, post_via_bot
from slack_post_mcp.slack.client import build_http_client
from slack_post_mcp.slack.validation import (
    is_valid_bot_token,
    is_valid_channel_id,
    is_valid_webhook_url,
)
from slack_post_mcp.slack.webhook import build_webhook_payload, post_via_webhook

__all__ = [
    "build_bot_payload",
    "build_http_client",
    "build_webhook_payload",
    "is_valid_bot_token",
    "is_valid_channel_id",
    "is_valid_webhook_url",
    "post_via_bot",
    "post_via_webhook",
]
