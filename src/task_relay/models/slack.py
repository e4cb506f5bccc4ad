"""Typed views of Slack Events API payloads."""

from pydantic import BaseModel, ConfigDict


class UrlVerification(BaseModel):
    """The endpoint-ownership handshake Slack sends when the webhook is registered."""

    model_config = ConfigDict(strict=True)

    type: str
    challenge: str


class MessageEvent(BaseModel):
    """The nested ``event`` object of an event callback.

    Every field is optional so that non-message events decode cleanly; a
    field present with the wrong JSON type fails validation and the event
    is dropped by the handler.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    type: str | None = None
    text: str | None = None
    channel: str | None = None
    bot_id: str | None = None  # Present on messages posted by bots
    subtype: str | None = None  # message_changed, channel_join, bot_message, ...
