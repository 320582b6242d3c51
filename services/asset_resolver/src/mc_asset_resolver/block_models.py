"""Per-version block model documents."""

from __future__ import annotations

from typing import Any

from .assets import AssetUrls
from .cache import Cache, LRUCache
from .fetcher import Fetcher

BlockModel = dict[str, Any]


class BlockModelLoader:
    """Loads ``models/block/<block_id>.json`` for a concrete version."""

    def __init__(
        self,
        fetcher: Fetcher,
        urls: AssetUrls,
        *,
        cache: Cache[str, BlockModel] | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._urls = urls
        self._cache: Cache[str, BlockModel] = cache if cache is not None else LRUCache(4096, name="block-models")

    @property
    def cache(self) -> Cache[str, BlockModel]:
        return self._cache

    async def get(self, version: str, block_id: str) -> BlockModel:
        key = f"{version}:{block_id}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        model = await self._fetcher.fetch_json(self._urls.block_model(version, block_id))
        return self._cache.add(key, model)
