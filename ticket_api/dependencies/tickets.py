from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from opentelemetry import trace

from ticket_api.metrics import MetricsRegistry
from ticket_api.tickets.store import TicketStore


async def get_ticket_store(request: Request) -> TicketStore:
    store = getattr(request.app.state, "ticket_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Ticket store is not configured")
    return store


async def get_metrics_registry(request: Request) -> MetricsRegistry:
    return request.app.state.metrics


async def get_tracer(request: Request) -> trace.Tracer:
    # Without an application provider this falls back to the global (no-op) one.
    provider = getattr(request.app.state, "tracer_provider", None)
    return trace.get_tracer("ticket_api", tracer_provider=provider)


TicketStoreDep = Annotated[TicketStore, Depends(get_ticket_store)]
MetricsDep = Annotated[MetricsRegistry, Depends(get_metrics_registry)]
TracerDep = Annotated[trace.Tracer, Depends(get_tracer)]
