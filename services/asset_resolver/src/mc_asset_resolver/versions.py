"""Resolution of logical version tokens against the launcher manifest."""

from __future__ import annotations

import logging
from typing import Any

from .cache import Cache, LRUCache
from .config import DEFAULT_MANIFEST_URL
from .exceptions import VersionNotFound
from .fetcher import Fetcher
from .models import VersionManifest

logger = logging.getLogger(__name__)

LATEST = "latest"

VersionDocument = dict[str, Any]


class VersionResolver:
    """Maps ``"latest"`` or an explicit id to the version document.

    Documents are cached under the token the caller asked for, so a process
    keeps serving the release it saw first for ``"latest"`` until restart.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        manifest_url: str = DEFAULT_MANIFEST_URL,
        cache: Cache[str, VersionDocument] | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._manifest_url = manifest_url
        self._cache: Cache[str, VersionDocument] = cache if cache is not None else LRUCache(16, name="versions")

    @property
    def cache(self) -> Cache[str, VersionDocument]:
        return self._cache

    async def resolve(self, token: str = LATEST) -> VersionDocument:
        cached = self._cache.get(token)
        if cached is not None:
            return cached

        raw = await self._fetcher.fetch_json(self._manifest_url)
        manifest = VersionManifest.model_validate(raw)
        version_id = manifest.latest.release if token == LATEST else token

        entry = manifest.find(version_id)
        if entry is None:
            raise VersionNotFound(version_id)

        document = await self._fetcher.fetch_json(entry.url)
        logger.info("Resolved Minecraft version %s -> %s", token, version_id)
        return self._cache.add(token, document)
