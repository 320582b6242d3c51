"""Configuration for the asset resolver service."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"
DEFAULT_ASSET_BASE_URL = "https://assets.mcasset.cloud"


class Settings(BaseSettings):
    """Environment settings for the asset resolver."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_version: str = Field("1.0.0", description="API version exposed via health endpoint.")
    minecraft_version: str = Field(
        "latest",
        min_length=1,
        description="Logical version token resolved for every request ('latest' or an explicit id).",
        alias="MINECRAFT_VERSION",
    )
    default_locale: str = Field(
        "fr_fr",
        min_length=1,
        description="Locale used when the request carries no lang parameter.",
        alias="DEFAULT_LOCALE",
    )
    manifest_url: str = Field(
        DEFAULT_MANIFEST_URL,
        description="Launcher version manifest (v2).",
        alias="MANIFEST_URL",
    )
    asset_base_url: str = Field(
        DEFAULT_ASSET_BASE_URL,
        description="Host serving extracted client assets per version.",
        alias="ASSET_BASE_URL",
    )
    http_timeout_seconds: float = Field(
        10.0,
        gt=0,
        description="Transport timeout for upstream requests, seconds.",
        alias="HTTP_TIMEOUT_SECONDS",
    )
    version_cache_size: int = Field(16, ge=1, description="Version documents kept in memory.", alias="VERSION_CACHE_SIZE")
    lang_cache_size: int = Field(64, ge=1, description="Translation tables kept in memory.", alias="LANG_CACHE_SIZE")
    model_cache_size: int = Field(4096, ge=1, description="Block models kept in memory.", alias="MODEL_CACHE_SIZE")
    response_max_age: int = Field(
        86400,
        ge=0,
        description="max-age of the Cache-Control header on successful resolves.",
        alias="RESPONSE_MAX_AGE",
    )

    # Optional in-app rate limit (dev/staging)
    rate_limit_enabled: bool = Field(
        False,
        description="Enable in-app rate limit for GET /api/mc/resolve",
        alias="RATE_LIMIT_ENABLED",
    )
    rate_limit_rps: float = Field(
        5.0,
        ge=0.1,
        description="Requests per second per key",
        alias="RATE_LIMIT_RPS",
    )
    rate_limit_burst: int = Field(
        10,
        ge=1,
        description="Burst capacity for token bucket",
        alias="RATE_LIMIT_BURST",
    )
    rate_limit_trust_forwarded: bool = Field(
        False,
        description="Key buckets on X-Forwarded-For (only behind a proxy that overwrites it)",
        alias="RATE_LIMIT_TRUST_FORWARDED",
    )


class HealthPayload(BaseModel):
    """Health response payload."""

    status: Literal["ok"]
    api_version: str


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
