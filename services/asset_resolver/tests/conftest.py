from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from fakes import FR_FR, OLD_VERSION_URL, VERSION_URL, FakeFetcher, lang_url, manifest_document, model_url
from mc_asset_resolver.config import DEFAULT_MANIFEST_URL, get_settings
from mc_asset_resolver.rate_limit import reset_buckets


@pytest.fixture
def upstream() -> FakeFetcher:
    return FakeFetcher(
        {
            DEFAULT_MANIFEST_URL: manifest_document(),
            VERSION_URL: {"id": "1.21", "type": "release"},
            OLD_VERSION_URL: {"id": "1.20.6", "type": "release"},
            lang_url("1.21", "fr_fr"): dict(FR_FR),
            lang_url("1.20.6", "fr_fr"): {"item.minecraft.diamond": "Diamant"},
            lang_url("1.21", "en_us"): {"item.minecraft.diamond": "Diamond"},
            model_url("1.21", "oak_log"): {
                "parent": "minecraft:block/cube_column",
                "textures": {"top": "minecraft:block/oak_log_top", "side": "oak_log"},
            },
            model_url("1.21", "dirt"): {"parent": "minecraft:block/cube_all"},
        }
    )


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    # keep the repo logging.json and any .env out of the tests
    monkeypatch.chdir(tmp_path)
    for name in ("MINECRAFT_VERSION", "DEFAULT_LOCALE", "RATE_LIMIT_ENABLED", "RATE_LIMIT_TRUST_FORWARDED", "ENABLE_OTEL", "ENABLE_METRICS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_buckets()
    yield
    get_settings.cache_clear()
    reset_buckets()
