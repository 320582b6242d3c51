from __future__ import annotations

import httpx
import pytest

from fakes import ASSETS, FR_FR, FakeFetcher, block_texture, item_texture, model_url
from mc_asset_resolver.assets import AssetUrls, normalize_block_texture, strip_namespace
from mc_asset_resolver.block_models import BlockModelLoader
from mc_asset_resolver.textures import TextureResolver, classify


def _resolver(fetcher: FakeFetcher) -> TextureResolver:
    urls = AssetUrls(ASSETS)
    return TextureResolver(BlockModelLoader(fetcher, urls), urls)


@pytest.mark.parametrize(
    ("clean_id", "expected"),
    [
        ("oak_log", "block"),
        ("diamond", "item"),
        ("cake", "item"),  # both keys present
        ("unknown_thing", "item"),  # neither key present
    ],
)
def test_classify(clean_id: str, expected: str) -> None:
    assert classify(clean_id, FR_FR) == expected


def test_empty_translation_counts_as_absent() -> None:
    table = {"block.minecraft.glass": "Verre", "item.minecraft.glass": ""}

    assert classify("glass", table) == "block"


def test_namespace_and_texture_prefixes() -> None:
    assert strip_namespace("minecraft:diamond") == "diamond"
    assert strip_namespace("diamond") == "diamond"
    assert strip_namespace("othermod:ruby") == "othermod:ruby"
    assert normalize_block_texture("minecraft:block/oak_log_top") == normalize_block_texture("oak_log_top")


@pytest.mark.asyncio
async def test_item_gets_single_item_texture(upstream: FakeFetcher) -> None:
    result = await _resolver(upstream).resolve("1.21", "minecraft:diamond", FR_FR)

    assert result.kind == "item"
    assert result.source == "item"
    assert result.urls == (item_texture("1.21", "diamond"),)
    assert upstream.calls == []


@pytest.mark.asyncio
async def test_item_and_block_key_is_an_item(upstream: FakeFetcher) -> None:
    result = await _resolver(upstream).resolve("1.21", "minecraft:cake", FR_FR)

    assert result.urls == (item_texture("1.21", "cake"),)


@pytest.mark.asyncio
async def test_block_textures_follow_model_order(upstream: FakeFetcher) -> None:
    result = await _resolver(upstream).resolve("1.21", "minecraft:oak_log", FR_FR)

    assert result.kind == "block"
    assert result.source == "model"
    assert result.error is None
    assert result.urls == (block_texture("1.21", "oak_log_top"), block_texture("1.21", "oak_log"))
    assert all(url.startswith(f"{ASSETS}/1.21/assets/minecraft/textures/block/") for url in result.urls)


@pytest.mark.asyncio
async def test_model_textures_are_not_deduplicated_and_skip_non_strings() -> None:
    fetcher = FakeFetcher(
        {
            model_url("1.21", "grass_block"): {
                "textures": {
                    "bottom": "minecraft:block/dirt",
                    "particle": "minecraft:block/dirt",
                    "overlay": {"unexpected": True},
                    "side": "grass_block_side",
                }
            }
        }
    )
    table = {"block.minecraft.grass_block": "Bloc d'herbe"}

    result = await _resolver(fetcher).resolve("1.21", "grass_block", table)

    assert result.urls == (
        block_texture("1.21", "dirt"),
        block_texture("1.21", "dirt"),
        block_texture("1.21", "grass_block_side"),
    )


@pytest.mark.asyncio
async def test_missing_model_falls_back(upstream: FakeFetcher) -> None:
    result = await _resolver(upstream).resolve("1.21", "minecraft:stone", FR_FR)

    assert result.source == "fallback"
    assert result.urls == (block_texture("1.21", "stone"),)
    assert result.error is not None and "404" in result.error


@pytest.mark.asyncio
async def test_network_failure_falls_back() -> None:
    fetcher = FakeFetcher({model_url("1.21", "stone"): httpx.ConnectError("boom")})

    result = await _resolver(fetcher).resolve("1.21", "stone", FR_FR)

    assert result.source == "fallback"
    assert result.urls == (block_texture("1.21", "stone"),)
    assert result.error == "boom"


@pytest.mark.asyncio
async def test_model_without_textures_falls_back(upstream: FakeFetcher) -> None:
    result = await _resolver(upstream).resolve("1.21", "minecraft:dirt", FR_FR)

    assert result.source == "fallback"
    assert result.error is None
    assert result.urls == (block_texture("1.21", "dirt"),)
