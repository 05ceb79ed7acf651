"""Per-event user context enrichment."""

import sys

from catalog_bot.domain.models import ResolvedContext
from catalog_bot.domain.resolver import EntityResolver


def _log(msg: str):
    print(msg, file=sys.stderr)


class ContextEnricher:
    """Resolves the invoking chat user to a directory entity.

    Never raises: an unknown, ambiguous or unresolvable user leaves
    ``ResolvedContext.user`` unset and dispatch carries on.
    """

    def __init__(self, resolver: EntityResolver):
        self._resolver = resolver

    async def enrich(self, chat_user_id: str) -> ResolvedContext:
        context = ResolvedContext()
        if not chat_user_id:
            return context
        try:
            matches = await self._resolver.resolve_chat_id(chat_user_id)
        except Exception as e:
            _log(f"[context] identity lookup failed for {chat_user_id}: {e}")
            return context

        if not matches:
            _log(f"[context] found no catalog entry for {chat_user_id}")
        elif len(matches) > 1:
            _log(f"[context] found multiple catalog entries for {chat_user_id}")
        else:
            context.user = matches[0]
        return context
