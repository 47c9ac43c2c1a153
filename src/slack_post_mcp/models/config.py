"""Server configuration record and delivery mode enum."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class DeliveryMode(str, Enum):
    """How messages reach Slack."""

    WEBHOOK = "webhook"  # Incoming webhook URL, fixed to one integration
    BOT = "bot"  # chat.postMessage with a bot token


class ServerConfig(BaseModel):
    """Immutable startup configuration, built once and shared read-only."""

    model_config = ConfigDict(frozen=True)

    mode: DeliveryMode
    webhook_url: str | None = None  # Set iff mode is WEBHOOK
    bot_token: str | None = None  # Set iff mode is BOT
    default_channel: str
    default_username: str | None = None
    default_icon_emoji: str | None = None  # e.g. ":robot_face:"

    @model_validator(mode="after")
    def _credential_matches_mode(self) -> "ServerConfig":
        if self.mode is DeliveryMode.WEBHOOK:
            if not self.webhook_url or self.bot_token is not None:
                raise ValueError("webhook mode requires webhook_url and no bot_token")
        elif not self.bot_token or self.webhook_url is not None:
            raise ValueError("bot mode requires bot_token and no webhook_url")
        return self
