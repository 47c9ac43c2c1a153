"""Outbound Slack payloads.

The two shapes are kept separate: webhooks always send ``mrkdwn`` and treat
``channel`` as optional, while chat.postMessage requires ``channel``.
"""

from pydantic import BaseModel, ConfigDict


class WebhookPayload(BaseModel):
    """Body POSTed to an incoming webhook URL."""

    model_config = ConfigDict(frozen=True)

    text: str
    mrkdwn: bool = True
    channel: str | None = None
    username: str | None = None
    icon_emoji: str | None = None

    def to_json(self) -> dict:
        """Serialize for the wire, omitting optional fields that are unset."""
        return self.model_dump(exclude_none=True)


class BotPayload(BaseModel):
    """Body POSTed to chat.postMessage."""

    model_config = ConfigDict(frozen=True)

    channel: str
    text: str
    username: str | None = None
    icon_emoji: str | None = None
    mrkdwn: bool | None = None

    def to_json(self) -> dict:
        """Serialize for the wire, omitting optional fields that are unset."""
        return self.model_dump(exclude_none=True)
