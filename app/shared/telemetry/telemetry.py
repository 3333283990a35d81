"""OpenTelemetry tracing setup for the API process.

Spans cover inbound FastAPI requests, outbound httpx calls (Firestore REST
and Gemini) and the ``@traced`` use-case methods. Exporters: ``console``
for development, ``otlp`` for a collector, ``none`` to trace without export.
"""

import logging
import threading

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from app.core.config import Settings

logger = logging.getLogger(__name__)

# Health checks are polled constantly and carry no business data.
_UNTRACED_URLS = "/api/v1/health,/api/v1/health/ready"


def _build_exporter(kind: str, otlp_endpoint: str | None) -> SpanExporter | None:
    if kind == "none":
        return None
    if kind == "otlp":
        if not otlp_endpoint:
            logger.warning("TELEMETRY_OTLP_ENDPOINT not set; falling back to console")
            return ConsoleSpanExporter()
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    if kind != "console":
        logger.warning("Unknown telemetry exporter '%s', using console", kind)
    return ConsoleSpanExporter()


class Telemetry:
    """Owns the tracer provider and the instrumentors attached to it."""

    def __init__(self, provider: TracerProvider, exporter_name: str) -> None:
        self.provider = provider
        self.exporter_name = exporter_name
        self._httpx = HTTPXClientInstrumentor()

    def instrument(self, app: FastAPI) -> None:
        """Attach request spans to the app and client spans to every httpx client."""
        FastAPIInstrumentor.instrument_app(
            app, tracer_provider=self.provider, excluded_urls=_UNTRACED_URLS
        )
        self._httpx.instrument(tracer_provider=self.provider)

    def shutdown(self) -> None:
        """Flush pending spans and detach the httpx instrumentation."""
        if self._httpx.is_instrumented_by_opentelemetry:
            self._httpx.uninstrument()
        self.provider.shutdown()


def setup_telemetry(settings: Settings) -> Telemetry:
    """Create the tracer provider from settings and make it the global one.

    Raises whatever the SDK raises for a bad configuration; the lifespan
    lets that abort startup.
    """
    resource = Resource(
        attributes={
            SERVICE_NAME: settings.app_name,
            SERVICE_VERSION: settings.app_version,
            "deployment.environment": settings.telemetry_environment,
        }
    )
    provider = TracerProvider(
        resource=resource, sampler=TraceIdRatioBased(settings.telemetry_sample_rate)
    )
    exporter = _build_exporter(
        settings.telemetry_exporter, settings.telemetry_otlp_endpoint
    )
    if exporter is not None:
        provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    logger.info(
        "OpenTelemetry initialized: service=%s exporter=%s sample_rate=%s",
        settings.app_name,
        settings.telemetry_exporter,
        settings.telemetry_sample_rate,
    )
    return Telemetry(provider, settings.telemetry_exporter)


_telemetry: Telemetry | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> Telemetry | None:
    """Return the process telemetry set at startup, if any."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: Telemetry | None) -> None:
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
