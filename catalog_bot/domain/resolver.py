"""Entity resolution cascade over the directory port."""

import sys
from typing import Dict, List, Tuple

from catalog_bot.domain.models import (
    CHAT_USER_ID,
    ISSUE_TRACKER_USER_ID,
    SOURCE_HOST_LOGIN,
    DirectoryEntity,
)
from catalog_bot.ports.outbound import DirectoryPort


def _log(msg: str):
    print(msg, file=sys.stderr)


# Filter keys tried in order for a free-text query
CASCADE: Tuple[str, ...] = (
    "metadata.name",
    f"metadata.annotations.{CHAT_USER_ID}",
    f"metadata.annotations.{ISSUE_TRACKER_USER_ID}",
    f"metadata.annotations.{SOURCE_HOST_LOGIN}",
)

CHAT_ID_FILTER = f"metadata.annotations.{CHAT_USER_ID}"


class EntityResolver:
    """Looks entities up by name or external identifier.

    No retries; DirectoryError from the port propagates unchanged so callers
    can tell "nothing matched" from "the directory is unreachable".
    """

    def __init__(self, directory: DirectoryPort):
        self._directory = directory

    async def resolve_query(self, query: str) -> List[DirectoryEntity]:
        """Try each filter in CASCADE until one returns entities."""
        for key in CASCADE:
            filter: Dict[str, str] = {key: query}
            entities = await self._directory.get_entities(filter)
            if entities:
                _log(f"[resolver] {query!r} matched {len(entities)} via {key}")
                return entities
        return []

    async def resolve_chat_id(self, chat_user_id: str) -> List[DirectoryEntity]:
        """Identity lookup: chat-user-id annotation only."""
        return await self._directory.get_entities({CHAT_ID_FILTER: chat_user_id})
