"""Typer-based CLI for resolving Minecraft ids and serving the API."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Optional

import httpx
import typer

from .config import Settings, get_settings
from .fetcher import RemoteFetcher
from .service import ItemResolution, ResolveService

logger = logging.getLogger(__name__)

app = typer.Typer(help="Minecraft asset resolver CLI")


@app.callback()
def main_callback() -> None:
    """Root callback, a command is required."""


async def _resolve(settings: Settings, item_id: str, locale: str, version: Optional[str]) -> ItemResolution:
    async with httpx.AsyncClient(timeout=settings.http_timeout_seconds, follow_redirects=True) as client:
        service = ResolveService.from_settings(settings, RemoteFetcher(client))
        return await service.resolve(item_id, locale, version_token=version)


def _as_payload(resolution: ItemResolution) -> dict[str, Any]:
    payload: dict[str, Any] = resolution.to_response().model_dump()
    payload["kind"] = resolution.textures.kind
    payload["textureSource"] = resolution.textures.source
    if resolution.textures.error:
        payload["textureError"] = resolution.textures.error
    return payload


@app.command(name="resolve")
def resolve(
    item_id: str = typer.Argument(..., help="Namespaced id, e.g. minecraft:diamond"),
    lang: Optional[str] = typer.Option(None, "--lang", help="Locale code (DEFAULT_LOCALE when omitted)."),
    version: Optional[str] = typer.Option(
        None,
        "--version",
        help="Version token, 'latest' or an explicit id (MINECRAFT_VERSION when omitted).",
    ),
) -> None:
    """Resolve one id and print name, version and texture URLs as JSON."""

    settings = get_settings()
    locale = lang or settings.default_locale
    try:
        resolution = asyncio.run(_resolve(settings, item_id, locale, version))
    except Exception as exc:  # pylint: disable=broad-except
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(_as_payload(resolution), ensure_ascii=False, indent=2))


@app.command(name="serve")
def serve(  # pragma: no cover - runs a server
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
) -> None:
    """Run the HTTP API with uvicorn."""

    import uvicorn

    uvicorn.run("mc_asset_resolver.app:create_app", factory=True, host=host, port=port)


if __name__ == "__main__":  # pragma: no cover
    app()
