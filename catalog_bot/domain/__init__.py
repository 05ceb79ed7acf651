"""Domain layer — pure Python, no framework dependencies.

Only leaf modules are re-exported here; import the pipeline pieces
(resolver, renderer, dispatcher, status, pipeline) from their modules.
"""

from catalog_bot.domain.models import (
    DirectoryEntity,
    DirectoryError,
    DispatchResult,
    EntityKind,
    Message,
    ProcessingState,
    ResolvedContext,
)
from catalog_bot.domain.tokenizer import tokenize

__all__ = [
    "DirectoryEntity",
    "DirectoryError",
    "DispatchResult",
    "EntityKind",
    "Message",
    "ProcessingState",
    "ResolvedContext",
    "tokenize",
]
