from fastapi import APIRouter, Response

from ticket_api.core.config import get_settings
from ticket_api.dependencies import MetricsDep, TicketStoreDep
from ticket_api.metrics import PrometheusExporter

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe")
async def health_check(store: TicketStoreDep) -> dict[str, str | int]:
    return {
        "status": "healthy",
        "service": get_settings().service_name,
        "tickets": await store.count(),
    }


@router.get("/metrics", summary="Prometheus metrics")
async def metrics(registry: MetricsDep) -> Response:
    exporter = PrometheusExporter(registry)
    return Response(content=exporter.build_payload(), media_type=exporter.content_type)
