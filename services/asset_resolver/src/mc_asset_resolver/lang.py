"""Per-version language tables."""

from __future__ import annotations

from .assets import AssetUrls
from .cache import Cache, LRUCache
from .fetcher import Fetcher

TranslationTable = dict[str, str]


class LangLoader:
    """Loads ``lang/<locale>.json`` for a concrete version.

    There is no locale fallback: a missing file fails with ``FetchError``.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        urls: AssetUrls,
        *,
        cache: Cache[str, TranslationTable] | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._urls = urls
        self._cache: Cache[str, TranslationTable] = cache if cache is not None else LRUCache(64, name="lang")

    @property
    def cache(self) -> Cache[str, TranslationTable]:
        return self._cache

    async def get(self, version: str, locale: str) -> TranslationTable:
        key = f"{version}:{locale}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        table = await self._fetcher.fetch_json(self._urls.lang(version, locale))
        return self._cache.add(key, table)
