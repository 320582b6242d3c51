"""Top-level item/block resolution."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

from .assets import AssetUrls, strip_namespace
from .block_models import BlockModelLoader
from .cache import LRUCache
from .config import Settings
from .fetcher import Fetcher
from .lang import LangLoader
from .models import ResolveResponse
from .textures import TextureResolution, TextureResolver
from .versions import LATEST, VersionResolver

logger = logging.getLogger(__name__)

_WORD_START = re.compile(r"\b\w")


def localized_name(clean_id: str, translations: Mapping[str, str]) -> str | None:
    """Item key first, then block key."""

    return translations.get(f"item.minecraft.{clean_id}") or translations.get(f"block.minecraft.{clean_id}") or None


def fallback_name(clean_id: str) -> str:
    """``redstone_block`` -> ``Redstone Block``."""

    return _WORD_START.sub(lambda match: match.group(0).upper(), clean_id.replace("_", " "))


@dataclass(frozen=True)
class ItemResolution:
    id: str
    version: str
    name: str
    textures: TextureResolution

    def to_response(self) -> ResolveResponse:
        return ResolveResponse(id=self.id, version=self.version, name=self.name, textures=list(self.textures.urls))


class ResolveService:
    """Pins a version, loads translations and resolves textures for one id."""

    def __init__(
        self,
        versions: VersionResolver,
        langs: LangLoader,
        textures: TextureResolver,
        *,
        version_token: str = LATEST,
    ) -> None:
        self.versions = versions
        self.langs = langs
        self.textures = textures
        self.version_token = version_token

    @classmethod
    def from_settings(cls, settings: Settings, fetcher: Fetcher) -> "ResolveService":
        """Wire loaders, URL templates and bounded caches from settings."""

        urls = AssetUrls(settings.asset_base_url)
        versions = VersionResolver(
            fetcher,
            manifest_url=settings.manifest_url,
            cache=LRUCache(settings.version_cache_size, name="versions"),
        )
        langs = LangLoader(fetcher, urls, cache=LRUCache(settings.lang_cache_size, name="lang"))
        models = BlockModelLoader(fetcher, urls, cache=LRUCache(settings.model_cache_size, name="block-models"))
        return cls(versions, langs, TextureResolver(models, urls), version_token=settings.minecraft_version)

    async def resolve(self, item_id: str, locale: str, *, version_token: str | None = None) -> ItemResolution:
        document = await self.versions.resolve(version_token or self.version_token)
        version = str(document["id"])

        translations = await self.langs.get(version, locale)
        clean = strip_namespace(item_id)
        name = localized_name(clean, translations)
        textures = await self.textures.resolve(version, item_id, translations)

        if name is None:
            logger.debug("No %s translation for %s, synthesising name", locale, clean)
            name = fallback_name(clean)
        return ItemResolution(id=item_id, version=version, name=name, textures=textures)
