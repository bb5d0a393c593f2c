"""OpenTelemetry tracer provider owned by one application instance."""

from __future__ import annotations

from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter

from ticket_api.core.config import Settings


def parse_otlp_headers(raw: str | None) -> dict[str, str]:
    """Parse ``key=value`` pairs separated by commas; malformed items are skipped."""

    headers: dict[str, str] = {}
    for item in (raw or "").split(","):
        key, sep, value = item.partition("=")
        if sep and key.strip():
            headers[key.strip()] = value.strip()
    return headers


def _otlp_exporter(settings: Settings) -> OTLPSpanExporter:
    options: dict[str, object] = {}
    if settings.otel_exporter_otlp_endpoint:
        options["endpoint"] = settings.otel_exporter_otlp_endpoint
    headers = parse_otlp_headers(settings.otel_exporter_otlp_headers)
    if headers:
        options["headers"] = headers
    return OTLPSpanExporter(**options)


def init_tracer(settings: Settings, exporter: SpanExporter | None = None) -> TracerProvider | None:
    """Build a tracer provider when tracing is enabled.

    Spans go to ``exporter`` when given, otherwise to an OTLP/HTTP exporter
    configured from settings. The provider is not installed globally; routes
    obtain their tracer from the provider stored on the application.
    """

    if not settings.otel_enabled:
        return None

    provider = TracerProvider(resource=Resource.create({"service.name": settings.otel_service_name}))
    provider.add_span_processor(BatchSpanProcessor(exporter or _otlp_exporter(settings)))
    return provider


def shutdown_tracer(provider: TracerProvider | None) -> None:
    if provider is not None:
        provider.shutdown()
