"""Delivery through chat.postMessage with a bot token.

Slack's Web API answers with JSON ``{"ok": true, ...}`` on success and
``{"ok": false, "error": "<code>"}`` otherwise, usually still with status 200.
"""

import logging

import httpx

from slack_post_mcp.models.config import ServerConfig
from slack_post_mcp.models.outcome import FailureKind, PostOutcome
from slack_post_mcp.models.slack import BotPayload
from slack_post_mcp.slack.client import (
    JSON_HEADERS,
    POST_MESSAGE_URL,
    describe_transport_error,
)

logger = logging.getLogger(__name__)

_PREFIX = "Slack bot request failed"


def build_bot_payload(config: ServerConfig, message: str) -> BotPayload:
    """Build the chat.postMessage body. Channel and text are mandatory."""
    return BotPayload(
        channel=config.default_channel,
        text=message,
        username=config.default_username or None,
        icon_emoji=config.default_icon_emoji or None,
    )


def _json_body(response: httpx.Response) -> dict | None:
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


async def post_via_bot(
    client: httpx.AsyncClient, config: ServerConfig, message: str
) -> PostOutcome:
    """POST ``message`` to chat.postMessage as the configured bot."""
    if not config.bot_token:
        return PostOutcome.failed(FailureKind.NOT_CONFIGURED, "Bot token not configured")
    if not config.default_channel:
        return PostOutcome.failed(
            FailureKind.MISSING_CHANNEL, "Channel is required for bot mode"
        )

    payload = build_bot_payload(config, message)
    headers = {**JSON_HEADERS, "Authorization": f"Bearer {config.bot_token}"}

    try:
        response = await client.post(POST_MESSAGE_URL, json=payload.to_json(), headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        no_response, reason = describe_transport_error(exc)
        logger.warning("Bot post failed before a response arrived: %s", reason)
        kind = FailureKind.NO_RESPONSE if no_response else FailureKind.REQUEST_FAILED
        return PostOutcome.failed(kind, f"{_PREFIX}: {reason}")

    data = _json_body(response)

    if response.status_code != 200:
        error = (data or {}).get("error") or response.reason_phrase
        logger.warning("chat.postMessage returned status %d: %s", response.status_code, error)
        return PostOutcome.failed(
            FailureKind.PROVIDER_ERROR,
            f"{_PREFIX}: {response.status_code} {error}",
            status_code=response.status_code,
        )

    if data is None:
        logger.warning("chat.postMessage returned an unexpected body")
        return PostOutcome.failed(
            FailureKind.PROVIDER_ERROR,
            "Slack API returned error: unexpected response body",
            status_code=response.status_code,
        )

    if not data.get("ok"):
        error = data.get("error") or "Unknown error"
        logger.warning("chat.postMessage returned error: %s", error)
        return PostOutcome.failed(
            FailureKind.PROVIDER_ERROR,
            f"Slack API returned error: {error}",
            status_code=response.status_code,
        )

    return PostOutcome.success()
