"""URL templates of the per-version asset host."""

from __future__ import annotations

from dataclasses import dataclass

NAMESPACE_PREFIX = "minecraft:"
BLOCK_TEXTURE_PREFIX = "minecraft:block/"


def strip_namespace(value: str) -> str:
    if value.startswith(NAMESPACE_PREFIX):
        return value[len(NAMESPACE_PREFIX) :]
    return value


def normalize_block_texture(value: str) -> str:
    """``minecraft:block/oak_log_top`` and ``oak_log_top`` name the same texture."""

    if value.startswith(BLOCK_TEXTURE_PREFIX):
        return value[len(BLOCK_TEXTURE_PREFIX) :]
    return value


@dataclass(frozen=True)
class AssetUrls:
    """Builds asset URLs rooted at ``base_url``."""

    base_url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def _root(self, version: str) -> str:
        return f"{self.base_url}/{version}/assets/minecraft"

    def lang(self, version: str, locale: str) -> str:
        return f"{self._root(version)}/lang/{locale}.json"

    def block_model(self, version: str, block_id: str) -> str:
        return f"{self._root(version)}/models/block/{block_id}.json"

    def item_texture(self, version: str, name: str) -> str:
        return f"{self._root(version)}/textures/item/{name}.png"

    def block_texture(self, version: str, name: str) -> str:
        return f"{self._root(version)}/textures/block/{name}.png"
