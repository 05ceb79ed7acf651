"""Directory (catalog) service adapter."""

from catalog_bot.adapters.catalog.client import CatalogClient

__all__ = ["CatalogClient"]
