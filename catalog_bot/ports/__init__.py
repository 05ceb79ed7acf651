"""Port interfaces (Hexagonal Architecture)."""

from catalog_bot.ports.inbound import MentionEvent
from catalog_bot.ports.outbound import ChatPort, DirectoryPort

__all__ = [
    "MentionEvent",
    "ChatPort",
    "DirectoryPort",
]
