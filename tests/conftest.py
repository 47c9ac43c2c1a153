"""Shared test fixtures."""

from collections.abc import Callable

import httpx
import pytest

from slack_post_mcp.models.config import DeliveryMode, ServerConfig

WEBHOOK_URL = "https://hooks.slack.com/services/T/B/X"
BOT_TOKEN = "xoxb-1"
CHANNEL_ID = "C12345678"


@pytest.fixture()
def webhook_config() -> ServerConfig:
    """Webhook-mode config posting to #general."""
    return ServerConfig(
        mode=DeliveryMode.WEBHOOK,
        webhook_url=WEBHOOK_URL,
        default_channel="#general",
    )


@pytest.fixture()
def bot_config() -> ServerConfig:
    """Bot-mode config posting to a channel ID."""
    return ServerConfig(
        mode=DeliveryMode.BOT,
        bot_token=BOT_TOKEN,
        default_channel=CHANNEL_ID,
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it was handed."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture()
def slack_stub() -> Callable[..., RecordingTransport]:
    """Factory for a stubbed Slack endpoint.

    Pass a handler, or ``status``/``text``/``json`` for a canned response.
    """

    def _make(handler=None, *, status: int = 200, text: str | None = None, json=None):
        if handler is None:

            def handler(request: httpx.Request) -> httpx.Response:
                if json is not None:
                    return httpx.Response(status, json=json)
                return httpx.Response(status, text=text or "")

        return RecordingTransport(handler)

    return _make
