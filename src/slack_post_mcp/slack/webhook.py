"""Delivery through a Slack incoming webhook.

Slack answers a webhook POST with status 200 and the literal body ``ok``.
Anything else is a failure; the body then carries Slack's error code
(``invalid_payload``, ``no_service``, ``channel_is_archived``, ...).
"""

import logging

import httpx

from slack_post_mcp.models.config import ServerConfig
from slack_post_mcp.models.outcome import FailureKind, PostOutcome
from slack_post_mcp.models.slack import WebhookPayload
from slack_post_mcp.slack.client import JSON_HEADERS, describe_transport_error

logger = logging.getLogger(__name__)

_PREFIX = "Slack webhook request failed"


def build_webhook_payload(config: ServerConfig, message: str) -> WebhookPayload:
    """Build the webhook body, carrying only the overrides that are configured."""
    return WebhookPayload(
        text=message,
        channel=config.default_channel or None,
        username=config.default_username or None,
        icon_emoji=config.default_icon_emoji or None,
    )


async def post_via_webhook(
    client: httpx.AsyncClient, config: ServerConfig, message: str
) -> PostOutcome:
    """POST ``message`` to the configured webhook URL."""
    if not config.webhook_url:
        return PostOutcome.failed(FailureKind.NOT_CONFIGURED, "Webhook URL not configured")

    payload = build_webhook_payload(config, message)

    try:
        response = await client.post(
            config.webhook_url, json=payload.to_json(), headers=JSON_HEADERS
        )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        no_response, reason = describe_transport_error(exc)
        logger.warning("Webhook post failed before a response arrived: %s", reason)
        kind = FailureKind.NO_RESPONSE if no_response else FailureKind.REQUEST_FAILED
        return PostOutcome.failed(kind, f"{_PREFIX}: {reason}")

    body = response.text.strip()
    if response.status_code != 200:
        detail = f"{_PREFIX}: {response.status_code} {response.reason_phrase}"
        if body:
            detail = f"{detail} ({body})"
        logger.warning("Webhook returned status %d: %s", response.status_code, body)
        return PostOutcome.failed(
            FailureKind.PROVIDER_ERROR, detail, status_code=response.status_code
        )

    if response.text != "ok":
        logger.warning("Webhook returned unexpected body: %s", body)
        return PostOutcome.failed(
            FailureKind.PROVIDER_ERROR,
            f"Slack API returned error: {body or 'empty response'}",
            status_code=response.status_code,
        )

    return PostOutcome.success()
