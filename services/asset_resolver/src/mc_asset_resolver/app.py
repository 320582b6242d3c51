"""Asset resolver FastAPI application."""

from __future__ import annotations

import json
import logging
import logging.config
import time
from contextlib import asynccontextmanager
from pathlib import Path
from uuid import uuid4

import httpx
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.routes import router
from .config import get_settings
from .exceptions import MissingParameterError
from .fetcher import Fetcher, RemoteFetcher
from .observability import setup_observability
from .service import ResolveService
from .version import __version__

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    _setup_logging()
    settings = get_settings()
    fetcher: Fetcher | None = getattr(app.state, "fetcher", None)
    client: httpx.AsyncClient | None = None
    if fetcher is None:
        client = httpx.AsyncClient(timeout=settings.http_timeout_seconds, follow_redirects=True)
        fetcher = RemoteFetcher(client)
    app.state.resolve_service = ResolveService.from_settings(settings, fetcher)
    try:
        yield
    finally:
        if client is not None:
            await client.aclose()


def create_app(fetcher: Fetcher | None = None) -> FastAPI:
    """Build FastAPI app with lifespan hooks.

    Args:
        fetcher: Upstream JSON fetcher. When omitted an ``httpx.AsyncClient``
            is opened for the lifetime of the app.
    """

    settings = get_settings()
    app = FastAPI(
        title="Minecraft Asset Resolver",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=_lifespan,
    )
    app.state.fetcher = fetcher
    setup_observability(app, service_name="asset-resolver")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    @app.exception_handler(MissingParameterError)
    async def missing_parameter_handler(request: Request, exc: MissingParameterError):  # type: ignore[override]
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):  # type: ignore[override]
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)

    @app.middleware("http")
    async def inject_trace_id(request: Request, call_next):  # type: ignore[override]
        """Attach `trace_id` to request and response headers for correlation."""

        incoming = request.headers.get("x-trace-id") or request.headers.get("x-request-id")
        trace_id = incoming or uuid4().hex
        request.state.trace_id = trace_id
        response: Response = await call_next(request)
        response.headers["X-Trace-Id"] = trace_id
        response.headers.setdefault("X-Request-Id", trace_id)
        return response

    @app.middleware("http")
    async def http_logger(request: Request, call_next):  # type: ignore[override]
        """Log method, path, status and elapsedMs with traceId."""

        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            logging.getLogger("http").info(
                "method=%s path=%s status=%s elapsedMs=%s traceId=%s",
                request.method,
                request.url.path,
                response.status_code if response else 500,
                elapsed_ms,
                getattr(request.state, "trace_id", ""),
            )

    @app.get("/config", tags=["system"])
    def read_config(request: Request) -> dict[str, object]:
        """Return service config snapshot for diagnostics."""

        service: ResolveService | None = getattr(app.state, "resolve_service", None)
        caches: dict[str, object] = {}
        if service is not None:
            for name, cache in (
                ("versions", service.versions.cache),
                ("lang", service.langs.cache),
                ("blockModels", service.textures.models.cache),
            ):
                stats = getattr(cache, "stats", None)
                caches[name] = stats() if callable(stats) else {}
        return {
            "apiVersion": settings.api_version,
            "minecraftVersion": settings.minecraft_version,
            "defaultLocale": settings.default_locale,
            "caches": caches,
            "traceId": getattr(request.state, "trace_id", ""),
        }

    logger.info("Asset resolver initialised with API version %s", settings.api_version)
    return app


def _setup_logging() -> None:
    """Load JSON logging config if present."""

    config_path = Path.cwd() / "observability" / "logging.json"
    if not config_path.exists():
        return
    try:
        with config_path.open("r", encoding="utf-8") as fh:
            cfg = json.load(fh)
        logging.config.dictConfig(cfg)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring invalid logging config %s: %s", config_path, exc)
