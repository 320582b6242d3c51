"""Texture URL resolution for items and blocks."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from .assets import AssetUrls, normalize_block_texture, strip_namespace
from .block_models import BlockModelLoader

logger = logging.getLogger(__name__)

AssetKind = Literal["block", "item"]
TextureSource = Literal["item", "model", "fallback"]


@dataclass(frozen=True)
class TextureResolution:
    """Ordered texture URLs plus how they were obtained.

    ``source`` is ``"model"`` when the URLs come from the block model,
    ``"fallback"`` when the default block texture was substituted (``error``
    then holds the swallowed load failure, if there was one) and ``"item"``
    for the item texture tree.
    """

    kind: AssetKind
    source: TextureSource
    urls: tuple[str, ...]
    error: str | None = None


def classify(clean_id: str, translations: Mapping[str, str]) -> AssetKind:
    """Block only when a block key exists and no item key does.

    An id known under both keys is an item. This tie-break is a product rule.
    """

    has_block = bool(translations.get(f"block.minecraft.{clean_id}"))
    has_item = bool(translations.get(f"item.minecraft.{clean_id}"))
    return "block" if has_block and not has_item else "item"


class TextureResolver:
    def __init__(self, models: BlockModelLoader, urls: AssetUrls) -> None:
        self.models = models
        self._urls = urls

    async def resolve(self, version: str, namespaced_id: str, translations: Mapping[str, str]) -> TextureResolution:
        clean = strip_namespace(namespaced_id)
        if classify(clean, translations) == "item":
            return TextureResolution("item", "item", (self._urls.item_texture(version, clean),))
        return await self._resolve_block(version, clean)

    async def _resolve_block(self, version: str, clean: str) -> TextureResolution:
        fallback = (self._urls.block_texture(version, clean),)
        try:
            model = await self.models.get(version, clean)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Block model unavailable for %s@%s, using default texture: %s", clean, version, exc)
            return TextureResolution("block", "fallback", fallback, error=str(exc) or type(exc).__name__)

        textures = model.get("textures") if isinstance(model, Mapping) else None
        urls: list[str] = []
        if isinstance(textures, Mapping):
            for texture_path in textures.values():
                if isinstance(texture_path, str):
                    urls.append(self._urls.block_texture(version, normalize_block_texture(texture_path)))

        if not urls:
            return TextureResolution("block", "fallback", fallback)
        return TextureResolution("block", "model", tuple(urls))
