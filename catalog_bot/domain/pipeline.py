"""MentionPipeline — tokenizes, dispatches and answers one mention event.

Transport-agnostic: the Slack adapter builds a MentionEvent and a
ResolvedContext and hands both here.
"""

import json
import sys
from typing import Optional

from catalog_bot.domain.context import ContextEnricher
from catalog_bot.domain.dispatcher import CommandDispatcher
from catalog_bot.domain.models import ProcessingState, ResolvedContext
from catalog_bot.domain.renderer import RenderSettings, ResponseRenderer
from catalog_bot.domain.resolver import EntityResolver
from catalog_bot.domain.status import ProcessingStatus
from catalog_bot.domain.tokenizer import tokenize
from catalog_bot.ports.inbound import MentionEvent
from catalog_bot.ports.outbound import ChatPort, DirectoryPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class MentionPipeline:
    """Wires resolver, renderer, dispatcher and status protocol together.

    Holds no per-event state; concurrent events each get their own
    tokens, context and ProcessingStatus.
    """

    def __init__(
        self,
        directory: DirectoryPort,
        chat: ChatPort,
        settings: Optional[RenderSettings] = None,
    ):
        self.chat = chat
        self.resolver = EntityResolver(directory)
        self.enricher = ContextEnricher(self.resolver)
        self.renderer = ResponseRenderer(self.resolver, settings)
        self.dispatcher = CommandDispatcher(self.resolver, self.renderer)

    async def handle(
        self,
        event: MentionEvent,
        context: Optional[ResolvedContext] = None,
    ) -> Optional[ProcessingState]:
        """Answer one mention. Returns the final state, or None if ignored."""
        tokens = tokenize(event.blocks)

        if tokens is None:
            _log(f"[pipeline] malformed event: {json.dumps(event.raw, default=str)}")
            reply = self.renderer.malformed_event(event.event_ts)
            async with ProcessingStatus(self.chat, event, self.renderer.failure_apology()) as status:
                await self.chat.post_message(event.channel, event.ts, reply)
            return status.state

        if not tokens:
            return None

        if context is None:
            context = await self.enricher.enrich(event.user)

        async with ProcessingStatus(self.chat, event, self.renderer.failure_apology()) as status:
            result = await self.dispatcher.dispatch(tokens, context)
            await self.chat.post_message(event.channel, event.ts, result.message)
            if result.failed:
                status.mark_failed()
        return status.state
