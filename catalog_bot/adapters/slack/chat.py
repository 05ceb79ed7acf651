"""ChatPort implementation over slack_sdk's AsyncWebClient."""

from slack_sdk.web.async_client import AsyncWebClient

from catalog_bot.adapters.slack.blocks import to_slack_payload
from catalog_bot.domain.models import Message


class SlackChatAdapter:
    """Replies in-thread and manages reactions on the triggering message."""

    def __init__(self, client: AsyncWebClient):
        self._client = client

    async def post_message(self, channel: str, thread_ts: str, message: Message) -> None:
        await self._client.chat_postMessage(
            channel=channel,
            thread_ts=thread_ts,
            **to_slack_payload(message),
        )

    async def add_reaction(self, channel: str, ts: str, name: str) -> None:
        await self._client.reactions_add(channel=channel, timestamp=ts, name=name)

    async def remove_reaction(self, channel: str, ts: str, name: str) -> None:
        await self._client.reactions_remove(channel=channel, timestamp=ts, name=name)
