"""Startup configuration errors."""

from enum import Enum


class ConfigErrorKind(str, Enum):
    """Reasons the startup configuration can be rejected."""

    INVALID_ARGUMENTS = "invalid_arguments"
    MISSING_WEBHOOK_URL = "missing_webhook_url"
    INVALID_WEBHOOK_URL = "invalid_webhook_url"
    MISSING_BOT_TOKEN = "missing_bot_token"
    INVALID_BOT_TOKEN = "invalid_bot_token"
    MISSING_CHANNEL = "missing_channel"
    INVALID_CHANNEL_ID = "invalid_channel_id"


class ConfigError(Exception):
    """Raised by the config resolver when startup arguments are unusable.

    ``message`` is the one-line diagnostic; ``hint`` is an optional second
    line pointing the operator at the fix.
    """

    def __init__(self, kind: ConfigErrorKind, message: str, hint: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.hint = hint
