"""Data models for the asset resolver."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VersionDescriptor(BaseModel):
    """One entry of the launcher manifest ``versions`` list."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    type: str
    url: str
    time: datetime
    release_time: datetime = Field(..., alias="releaseTime")


class LatestVersions(BaseModel):
    release: str
    snapshot: str | None = None


class VersionManifest(BaseModel):
    """Launcher manifest v2 (only the fields the resolver reads).

    Entries stay raw; only the one picked by ``find`` is validated, so a
    malformed entry for some other version does not break resolution.
    """

    latest: LatestVersions
    versions: list[dict[str, Any]]

    def find(self, version_id: str) -> VersionDescriptor | None:
        for entry in self.versions:
            if entry.get("id") == version_id:
                return VersionDescriptor.model_validate(entry)
        return None


class ResolveResponse(BaseModel):
    """Body returned by ``GET /api/mc/resolve``."""

    id: str
    version: str
    name: str
    textures: list[str]


class ErrorPayload(BaseModel):
    error: str
    details: str | None = None
