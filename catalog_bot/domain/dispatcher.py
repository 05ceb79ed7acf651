"""Command dispatcher — maps command tokens to a reply.

Grammar (after tokenizing):
    whoami              render the invoking user's own entry
    find <query>        run the resolution cascade on <query>
    findSlack <id>      look up a tagged chat user (produced by the tokenizer)
    anything else       help menu
"""

import sys
import traceback
from enum import Enum
from typing import List, Sequence

from catalog_bot.domain.models import (
    DirectoryEntity,
    DispatchResult,
    EntityKind,
    Message,
    PlainMessage,
    ResolvedContext,
)
from catalog_bot.domain.renderer import ResponseRenderer
from catalog_bot.domain.resolver import EntityResolver
from catalog_bot.domain.tokenizer import FIND_BY_MENTION


def _log(msg: str):
    print(msg, file=sys.stderr)


class Command(str, Enum):
    HELP = "help"
    WHOAMI = "whoami"
    FIND = "find"
    FIND_BY_MENTION = FIND_BY_MENTION


def classify(tokens: Sequence[str]) -> Command:
    """Pick the command variant from the token shape.

    Any shape not listed in the grammar falls back to HELP, so an
    unrecognized request always gets the help menu instead of an error.
    """
    if len(tokens) == 1 and tokens[0] == Command.WHOAMI.value:
        return Command.WHOAMI
    if len(tokens) == 2 and tokens[0] == Command.FIND.value:
        return Command.FIND
    if len(tokens) == 2 and tokens[0] == Command.FIND_BY_MENTION.value:
        return Command.FIND_BY_MENTION
    return Command.HELP


def pick_best_match(entities: List[DirectoryEntity]) -> List[DirectoryEntity]:
    """Narrow an ambiguous result set to its System entities."""
    return [e for e in entities if e.kind_tag == EntityKind.SYSTEM]


class CommandDispatcher:
    def __init__(self, resolver: EntityResolver, renderer: ResponseRenderer):
        self._resolver = resolver
        self._renderer = renderer

    async def dispatch(self, tokens: List[str], context: ResolvedContext) -> DispatchResult:
        """Run the command and return the reply; never raises."""
        command = classify(tokens)
        try:
            if command is Command.WHOAMI:
                message = self._renderer.render_user(context.user)
            elif command is Command.FIND:
                message = await self.find(tokens[1].strip().lower())
            elif command is Command.FIND_BY_MENTION:
                message = await self.find_by_mention(tokens[1])
            else:
                message = self._renderer.help_menu()
        except Exception as e:
            _log(f"[dispatcher] {command.value} failed: {e}\n{traceback.format_exc()}")
            return DispatchResult(message=self._renderer.failure_apology(), failed=True)
        return DispatchResult(message=message)

    async def find(self, query: str) -> Message:
        matches = await self._resolver.resolve_query(query)
        if not matches:
            return PlainMessage(f"Sorry, I don't know anything about {query}!")
        if len(matches) == 1:
            return await self._renderer.render(matches[0])

        systems = pick_best_match(matches)
        if len(systems) == 1:
            return await self._renderer.render(systems[0])
        return PlainMessage(
            f"I found multiple results for {query}. I tried to pick the best one for you "
            "but I couldn't make up my mind! Try asking me when I'm smarter."
        )

    async def find_by_mention(self, chat_user_id: str) -> Message:
        matches = await self._resolver.resolve_chat_id(chat_user_id)
        if len(matches) == 1:
            return await self._renderer.render(matches[0])
        return PlainMessage(
            "Sorry, I've never met that person! Strange since their Slack ID should be "
            "present on their Backstage User entity."
        )
