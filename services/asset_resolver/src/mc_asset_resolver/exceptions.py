"""Exceptions raised by the asset resolver."""

from __future__ import annotations


class AssetResolverError(RuntimeError):
    """Base error for the asset resolution pipeline."""


class FetchError(AssetResolverError):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, status: int, status_text: str, url: str) -> None:
        super().__init__(f"{status} {status_text} for {url}")
        self.status = status
        self.status_text = status_text
        self.url = url


class VersionNotFound(AssetResolverError):
    """Requested version id is absent from the launcher manifest."""

    def __init__(self, version_id: str) -> None:
        super().__init__(f"Version not found: {version_id}")
        self.version_id = version_id


class MissingParameterError(AssetResolverError):
    """A required query parameter was not supplied."""

    def __init__(self, name: str, example: str | None = None) -> None:
        message = f"Missing {name} parameter"
        if example:
            message = f"{message} (e.g., {example})"
        super().__init__(message)
        self.name = name
