"""Shape checks for Slack credentials and identifiers."""

import re
from urllib.parse import urlsplit

WEBHOOK_HOST = "hooks.slack.com"
WEBHOOK_PATH_PREFIX = "/services/"
BOT_TOKEN_PREFIX = "xoxb-"

# Public/private channel (C...) or direct message (D...) IDs
CHANNEL_ID_PATTERN = re.compile(r"^[CD][A-Z0-9]{8,}$")


def is_valid_webhook_url(url: str) -> bool:
    """Return True if ``url`` looks like a Slack incoming-webhook URL.

    Requires an http(s) URL on hooks.slack.com whose path starts with
    /services/. Unparseable input is treated as invalid.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return (
        parts.scheme in ("http", "https")
        and parts.hostname == WEBHOOK_HOST
        and parts.path.startswith(WEBHOOK_PATH_PREFIX)
    )


def is_valid_bot_token(token: str) -> bool:
    return token.startswith(BOT_TOKEN_PREFIX)


def is_valid_channel_id(channel: str) -> bool:
    """Channel IDs are ``C`` or ``D`` followed by 8+ uppercase alphanumerics.

    Channel names such as ``#general`` are not IDs and do not match.
    """
    return CHANNEL_ID_PATTERN.match(channel) is not None
