"""Startup configuration: ambient settings and the server config resolver."""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from slack_post_mcp.errors import ConfigError, ConfigErrorKind
from slack_post_mcp.models.config import DeliveryMode, ServerConfig
from slack_post_mcp.slack.validation import (
    is_valid_bot_token,
    is_valid_channel_id,
    is_valid_webhook_url,
)

logger = logging.getLogger(__name__)

USAGE_HINT = "Use --help for usage information"


class Settings(BaseSettings):
    """Diagnostics settings loaded from environment variables and .env file.

    Slack credentials are never read from here; they come from the command
    line only.
    """

    model_config = SettingsConfigDict(
        env_prefix="SLACK_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings. Lazy initialization to avoid import-time errors."""
    return Settings()


def resolve_config(
    *,
    webhook_url: str | None = None,
    bot_token: str | None = None,
    channel: str | None = None,
    username: str | None = None,
    icon_emoji: str | None = None,
) -> ServerConfig:
    """Validate parsed startup options and build the ServerConfig.

    Rules are checked in a fixed order and the first violation raises
    ConfigError:

    1. A --bot-token flag selects bot mode wherever it appears; otherwise
       webhook mode.
    2. Webhook mode: the URL must be a hooks.slack.com/services/ URL, then a
       channel is required.
    3. Bot mode: the token must start with ``xoxb-``, then a channel is
       required and must be a channel ID (``C``/``D`` + 8 or more chars).
    4. Username and icon emoji are optional and passed through as given.
    """
    if bot_token is not None:
        if webhook_url:
            logger.warning("Both --bot-token and --webhook-url given; using bot mode")
        return _resolve_bot(bot_token, channel, username, icon_emoji)
    return _resolve_webhook(webhook_url, channel, username, icon_emoji)


def _resolve_webhook(
    webhook_url: str | None,
    channel: str | None,
    username: str | None,
    icon_emoji: str | None,
) -> ServerConfig:
    if not webhook_url:
        raise ConfigError(
            ConfigErrorKind.MISSING_WEBHOOK_URL,
            "--webhook-url is required for webhook mode",
            hint=USAGE_HINT,
        )
    if not is_valid_webhook_url(webhook_url):
        raise ConfigError(
            ConfigErrorKind.INVALID_WEBHOOK_URL,
            "Invalid Slack webhook URL provided",
            hint="Must be a valid Slack webhook URL (https://hooks.slack.com/services/...)",
        )
    if not channel:
        raise ConfigError(
            ConfigErrorKind.MISSING_CHANNEL, "--channel is required for webhook mode"
        )

    return ServerConfig(
        mode=DeliveryMode.WEBHOOK,
        webhook_url=webhook_url,
        default_channel=channel,
        default_username=username or None,
        default_icon_emoji=icon_emoji or None,
    )


def _resolve_bot(
    bot_token: str,
    channel: str | None,
    username: str | None,
    icon_emoji: str | None,
) -> ServerConfig:
    if not bot_token:
        raise ConfigError(
            ConfigErrorKind.MISSING_BOT_TOKEN,
            "--bot-token is required for bot mode",
            hint=USAGE_HINT,
        )
    if not is_valid_bot_token(bot_token):
        raise ConfigError(
            ConfigErrorKind.INVALID_BOT_TOKEN,
            "Invalid Slack bot token provided",
            hint="Must be a valid Slack bot token (starts with 'xoxb-')",
        )
    if not channel:
        raise ConfigError(ConfigErrorKind.MISSING_CHANNEL, "--channel is required for bot mode")
    if not is_valid_channel_id(channel):
        raise ConfigError(
            ConfigErrorKind.INVALID_CHANNEL_ID,
            "Invalid Slack channel ID provided for bot mode",
            hint="Channel ID should start with 'C' or 'D' (e.g., CXXXXXXXXXX)",
        )

    return ServerConfig(
        mode=DeliveryMode.BOT,
        bot_token=bot_token,
        default_channel=channel,
        default_username=username or None,
        default_icon_emoji=icon_emoji or None,
    )
