"""Observability setup: OpenTelemetry tracing and Prometheus metrics.

Enabled through environment variables:
- ENABLE_OTEL=true turns on OpenTelemetry (OTLP exporter at OTEL_EXPORTER_OTLP_ENDPOINT)
- ENABLE_METRICS=true exposes Prometheus /metrics (prometheus-fastapi-instrumentator)
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes"}


def setup_observability(app: FastAPI, *, service_name: str) -> None:
    """Attach tracing and metrics when the environment asks for them.

    Both are optional extras; a missing package is logged and skipped.
    """

    if os.environ.get("ENABLE_OTEL", "false").lower() in _TRUTHY:
        try:
            _enable_tracing(app, service_name)
        except ImportError as exc:
            logger.warning("Tracing requested but OpenTelemetry is not installed: %s", exc)

    if os.environ.get("ENABLE_METRICS", "false").lower() in _TRUTHY:
        try:
            _enable_metrics(app)
        except ImportError as exc:
            logger.warning("Metrics requested but prometheus instrumentator is not installed: %s", exc)


def _enable_tracing(app: FastAPI, service_name: str) -> None:
    from opentelemetry import trace
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
    from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor

    endpoint = os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT") or "http://localhost:4318"
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces")
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    # inbound ASGI and the upstream httpx client
    FastAPIInstrumentor.instrument_app(app)
    HTTPXClientInstrumentor().instrument()


def _enable_metrics(app: FastAPI) -> None:
    from prometheus_fastapi_instrumentator import Instrumentator

    Instrumentator().instrument(app).expose(app)
