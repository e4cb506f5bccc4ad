"""Channel replies through the Slack Web API.

Posting is fire-and-forget: Slack API errors and transport failures are caught
and logged, never raised, so a failed reply cannot turn a handled event into a
webhook error.
"""

import asyncio
import logging
from typing import Protocol

import aiohttp
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

logger = logging.getLogger(__name__)


class Responder(Protocol):
    """Anything that can post a plain-text message to a channel."""

    async def post_message(self, channel_id: str, text: str) -> None: ...


class SlackResponder:
    """Responder backed by an AsyncWebClient."""

    def __init__(self, client: AsyncWebClient) -> None:
        self._client = client

    @classmethod
    def from_token(cls, token: str) -> "SlackResponder":
        return cls(AsyncWebClient(token=token))

    async def post_message(self, channel_id: str, text: str) -> None:
        """Post ``text`` to ``channel_id``.

        Args:
            channel_id: Slack channel ID the triggering message came from.
            text: Plain-text reply.
        """
        try:
            await self._client.chat_postMessage(channel=channel_id, text=text)
        except SlackApiError as exc:
            error_code = exc.response.get("error", "") if exc.response else ""
            logger.warning(
                "Failed to post message to %s (%s)", channel_id, error_code, exc_info=True
            )
        except (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError):
            logger.warning("Failed to reach Slack posting to %s", channel_id, exc_info=True)
