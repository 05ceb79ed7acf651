"""Outbound ports — interfaces for external system adapters."""

from typing import Dict, List, Protocol, runtime_checkable

from catalog_bot.domain.models import DirectoryEntity, Message


@runtime_checkable
class DirectoryPort(Protocol):
    """Read-only access to the organizational directory.

    Implementations raise DirectoryError on transport failure; an empty
    list always means "no match".
    """

    async def get_entities(self, filter: Dict[str, str]) -> List[DirectoryEntity]: ...


@runtime_checkable
class ChatPort(Protocol):
    """Interface for replying to and marking chat events."""

    async def post_message(self, channel: str, thread_ts: str, message: Message) -> None: ...
    async def add_reaction(self, channel: str, ts: str, name: str) -> None: ...
    async def remove_reaction(self, channel: str, ts: str, name: str) -> None: ...
