"""Tests for delivery through an incoming webhook."""

import json

import httpx

from slack_post_mcp.models.config import DeliveryMode, ServerConfig
from slack_post_mcp.models.outcome import FailureKind
from slack_post_mcp.slack.client import build_http_client
from slack_post_mcp.slack.webhook import build_webhook_payload, post_via_webhook

WEBHOOK_URL = "https://hooks.slack.com/services/T/B/X"


async def _post(config: ServerConfig, transport: httpx.MockTransport, message: str = "hello"):
    async with build_http_client(transport) as client:
        return await post_via_webhook(client, config, message)


# -- payload --


def test_payload_includes_channel(webhook_config: ServerConfig):
    payload = build_webhook_payload(webhook_config, "hello")
    assert payload.to_json() == {"text": "hello", "mrkdwn": True, "channel": "#general"}


def test_payload_includes_username_and_icon():
    config = ServerConfig(
        mode=DeliveryMode.WEBHOOK,
        webhook_url=WEBHOOK_URL,
        default_channel="#general",
        default_username="deploy-bot",
        default_icon_emoji=":rocket:",
    )
    body = build_webhook_payload(config, "hi").to_json()
    assert body["username"] == "deploy-bot"
    assert body["icon_emoji"] == ":rocket:"


# -- posting --


async def test_success_requires_ok_body(webhook_config: ServerConfig, slack_stub):
    """Status 200 with body "ok" is a success."""
    transport = slack_stub(text="ok")

    outcome = await _post(webhook_config, transport)

    assert outcome.ok is True
    assert outcome.failure is None


async def test_request_shape(webhook_config: ServerConfig, slack_stub):
    """POSTs JSON to the configured URL with no Authorization header."""
    transport = slack_stub(text="ok")

    await _post(webhook_config, transport)

    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == WEBHOOK_URL
    assert request.headers["Content-Type"] == "application/json"
    assert "Authorization" not in request.headers
    assert json.loads(request.content) == {
        "text": "hello",
        "mrkdwn": True,
        "channel": "#general",
    }


async def test_200_with_other_body_fails(webhook_config: ServerConfig, slack_stub):
    transport = slack_stub(text="something_else")

    outcome = await _post(webhook_config, transport)

    assert outcome.ok is False
    assert outcome.failure is FailureKind.PROVIDER_ERROR
    assert outcome.detail == "Slack API returned error: something_else"
    assert outcome.status_code == 200


async def test_padded_ok_body_fails(webhook_config: ServerConfig, slack_stub):
    """Only the literal body "ok" counts; whitespace around it does not."""
    transport = slack_stub(text="  ok\n")

    outcome = await _post(webhook_config, transport)

    assert outcome.ok is False
    assert outcome.failure is FailureKind.PROVIDER_ERROR
    assert outcome.detail == "Slack API returned error: ok"


async def test_non_200_includes_status_and_body(webhook_config: ServerConfig, slack_stub):
    transport = slack_stub(status=404, text="no_service")

    outcome = await _post(webhook_config, transport)

    assert outcome.failure is FailureKind.PROVIDER_ERROR
    assert outcome.status_code == 404
    assert "404 Not Found" in outcome.detail
    assert "no_service" in outcome.detail


async def test_timeout_reports_no_response(webhook_config: ServerConfig, slack_stub):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    outcome = await _post(webhook_config, slack_stub(handler))

    assert outcome.failure is FailureKind.NO_RESPONSE
    assert "No response received" in outcome.detail
    assert outcome.detail.startswith("Slack webhook request failed")


async def test_connection_error_reports_no_response(webhook_config: ServerConfig, slack_stub):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    outcome = await _post(webhook_config, slack_stub(handler))

    assert outcome.failure is FailureKind.NO_RESPONSE
    assert outcome.detail == "Slack webhook request failed: No response received"


async def test_unsendable_request_reports_reason(webhook_config: ServerConfig, slack_stub):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.UnsupportedProtocol("unsupported protocol", request=request)

    outcome = await _post(webhook_config, slack_stub(handler))

    assert outcome.failure is FailureKind.REQUEST_FAILED
    assert outcome.detail == "Slack webhook request failed: unsupported protocol"


async def test_missing_url_is_not_configured(slack_stub):
    """A config without a URL fails before any request is made."""
    config = ServerConfig.model_construct(
        mode=DeliveryMode.WEBHOOK, webhook_url=None, default_channel="#general"
    )
    transport = slack_stub(text="ok")

    outcome = await _post(config, transport)

    assert outcome.failure is FailureKind.NOT_CONFIGURED
    assert outcome.detail == "Webhook URL not configured"
    assert transport.requests == []
