"""Catalog client using aiohttp — DirectoryPort implementation."""

from typing import Dict, List, Optional

import aiohttp

from catalog_bot.config import CatalogConfig
from catalog_bot.domain.models import DirectoryEntity, DirectoryError


class CatalogClient:
    """Async read-only client for the catalog's entities endpoint."""

    def __init__(self, config: Optional[CatalogConfig] = None):
        self._config = config or CatalogConfig()

    @property
    def entities_url(self) -> str:
        return f"{self._config.api_url}/entities"

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        return headers

    @staticmethod
    def encode_filter(filter: Dict[str, str]) -> List[tuple]:
        """One ``filter=key=value`` query parameter per condition (ANDed)."""
        return [("filter", f"{key}={value}") for key, value in filter.items()]

    async def get_entities(self, filter: Dict[str, str]) -> List[DirectoryEntity]:
        params = self.encode_filter(filter)
        try:
            async with aiohttp.ClientSession(headers=self._headers()) as session:
                async with session.get(self.entities_url, params=params) as resp:
                    if resp.status != 200:
                        body = await resp.text()
                        raise DirectoryError(f"catalog returned {resp.status}: {body[:200]}")
                    data = await resp.json()
        except (aiohttp.ClientError, ValueError) as e:
            raise DirectoryError(f"catalog request failed: {e}") from e

        # Newer catalog versions wrap results as {"items": [...]}
        if isinstance(data, dict):
            data = data.get("items", [])
        if not isinstance(data, list):
            raise DirectoryError(f"unexpected catalog response: {str(data)[:200]}")
        return [DirectoryEntity.from_dict(item) for item in data if isinstance(item, dict)]
