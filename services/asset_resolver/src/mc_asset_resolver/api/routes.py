"""HTTP API for the asset resolver."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from ..config import HealthPayload, Settings, get_settings
from ..exceptions import MissingParameterError
from ..models import ErrorPayload, ResolveResponse
from ..rate_limit import rate_limit
from ..service import ResolveService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_resolve_service(request: Request) -> ResolveService:
    service = getattr(request.app.state, "resolve_service", None)
    if service is None:
        raise RuntimeError("ResolveService is not initialised")
    return service


@router.get("/health", response_model=HealthPayload, tags=["system"])
async def read_health(settings: Settings = Depends(get_settings)) -> HealthPayload:
    return HealthPayload(status="ok", api_version=settings.api_version)


@router.get(
    "/api/mc/resolve",
    response_model=ResolveResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorPayload},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorPayload},
    },
    tags=["minecraft"],
)
async def resolve_item(
    request: Request,
    item_id: str | None = Query(None, alias="id", description="Namespaced id, e.g. minecraft:diamond"),
    lang: str | None = Query(None, description="Locale code, e.g. fr_fr"),
    settings: Settings = Depends(get_settings),
    _rl: None = Depends(rate_limit),
) -> JSONResponse:
    if not item_id:
        raise MissingParameterError("id", "minecraft:diamond")
    locale = lang or settings.default_locale

    try:
        service = get_resolve_service(request)
        resolution = await service.resolve(item_id, locale)
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Error in MC resolve endpoint for %s", item_id)
        payload = ErrorPayload(error="Internal server error", details=str(exc) or "Unknown error")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload.model_dump())

    response = JSONResponse(content=resolution.to_response().model_dump())
    response.headers["Cache-Control"] = f"public, max-age={settings.response_max_age}, immutable"
    return response
