"""Catalog Bot — directory lookups from chat mentions."""

from catalog_bot.config import CONFIG, AppConfig, __version__
from catalog_bot.domain.models import DirectoryEntity, DirectoryError
from catalog_bot.ports.inbound import MentionEvent
from catalog_bot.domain.pipeline import MentionPipeline

__all__ = [
    "CONFIG",
    "AppConfig",
    "__version__",
    "DirectoryEntity",
    "DirectoryError",
    "MentionEvent",
    "MentionPipeline",
]
