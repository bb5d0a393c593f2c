from fastapi.testclient import TestClient
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from ticket_api.core.config import Settings
from ticket_api.core.tracing import init_tracer, parse_otlp_headers, shutdown_tracer
from ticket_api.main import create_app


def _in_memory_provider() -> tuple[TracerProvider, InMemorySpanExporter]:
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return provider, exporter


def test_parse_otlp_headers_skips_malformed_items():
    assert parse_otlp_headers(None) == {}
    assert parse_otlp_headers("a=1, b = 2,broken,=x,") == {"a": "1", "b": "2"}


def test_tracer_disabled_by_default():
    provider = init_tracer(Settings(_env_file=None, otel_enabled=False))

    assert provider is None
    shutdown_tracer(provider)


def test_enabled_tracer_exports_spans_with_service_name():
    exporter = InMemorySpanExporter()
    provider = init_tracer(
        Settings(_env_file=None, otel_enabled=True, otel_service_name="tickets-test"),
        exporter=exporter,
    )
    assert provider is not None

    with provider.get_tracer("test").start_as_current_span("work"):
        pass
    provider.force_flush()

    spans = exporter.get_finished_spans()
    assert [span.name for span in spans] == ["work"]
    assert spans[0].resource.attributes["service.name"] == "tickets-test"
    shutdown_tracer(provider)


def test_ticket_routes_record_spans():
    provider, exporter = _in_memory_provider()
    app = create_app()

    with TestClient(app) as client:
        app.state.tracer_provider = provider
        ticket_id = client.post("/tickets", json={"title": "A", "description": "B"}).json()["id"]
        client.patch(f"/tickets/{ticket_id}", json={"status": "Done"})
        client.patch(f"/tickets/{ticket_id}", json={"title": ""})

    spans = exporter.get_finished_spans()
    assert [span.name for span in spans] == ["tickets.create", "tickets.patch", "tickets.patch"]
    created, patched, rejected = spans
    assert created.attributes["ticket.id"] == ticket_id
    assert created.attributes["ticket.outcome"] == "ok"
    assert patched.attributes["ticket.id"] == ticket_id
    assert patched.attributes["ticket.outcome"] == "ok"
    assert rejected.attributes["ticket.outcome"] == "rejected"
    provider.shutdown()
