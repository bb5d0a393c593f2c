from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator
from uuid import UUID

from fastapi import APIRouter, HTTPException, status
from opentelemetry import trace
from pydantic import BaseModel

from ticket_api.dependencies import MetricsDep, TicketStoreDep, TracerDep
from ticket_api.metrics import TICKET_REQUEST_DURATION_SECONDS, TICKET_REQUESTS_TOTAL, MetricsRegistry, track_duration
from ticket_api.tickets.models import Ticket, TicketDraft, TicketPatch
from ticket_api.tickets.state import TicketStatus
from ticket_api.tickets.store import InvalidFieldError, TicketNotFoundError
from ticket_api.tickets.validation import TicketValidationError, validate_description, validate_title

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tickets", tags=["tickets"])


class TicketCreateRequest(BaseModel):
    title: str
    description: str


class TicketPatchRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    status: TicketStatus | None = None


class TicketResponse(BaseModel):
    id: UUID
    title: str
    description: str
    status: TicketStatus


class TicketListResponse(BaseModel):
    tickets: list[TicketResponse]


def _to_response(ticket: Ticket) -> TicketResponse:
    return TicketResponse(
        id=ticket.id,
        title=ticket.title.value,
        description=ticket.description.value,
        status=ticket.status,
    )


def _parse_ticket_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid ticket ID format") from exc


@contextmanager
def _record(
    registry: MetricsRegistry,
    tracer: trace.Tracer,
    operation: str,
    ticket_id: str | None = None,
) -> Iterator[trace.Span]:
    outcome = "error"
    duration = registry.distribution(TICKET_REQUEST_DURATION_SECONDS)
    with tracer.start_as_current_span(f"tickets.{operation}") as span:
        if ticket_id is not None:
            span.set_attribute("ticket.id", ticket_id)
        try:
            with track_duration(duration, labels={"operation": operation}):
                yield span
        except HTTPException as exc:
            outcome = "not_found" if exc.status_code == 404 else "rejected"
            raise
        else:
            outcome = "ok"
        finally:
            span.set_attribute("ticket.outcome", outcome)
            registry.counter(TICKET_REQUESTS_TOTAL).inc(labels={"operation": operation, "outcome": outcome})


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
async def create_ticket(
    payload: TicketCreateRequest,
    store: TicketStoreDep,
    registry: MetricsDep,
    tracer: TracerDep,
) -> TicketResponse:
    with _record(registry, tracer, "create") as span:
        try:
            draft = TicketDraft(
                title=validate_title(payload.title),
                description=validate_description(payload.description),
            )
        except TicketValidationError as exc:
            logger.warning("Rejected ticket creation: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        ticket_id = await store.add_ticket(draft)
        span.set_attribute("ticket.id", str(ticket_id))
        ticket = await store.get_ticket(ticket_id)
        logger.info("Created ticket %s", ticket_id)
        return _to_response(ticket)


@router.get("", response_model=TicketListResponse)
async def list_tickets(store: TicketStoreDep, registry: MetricsDep, tracer: TracerDep) -> TicketListResponse:
    with _record(registry, tracer, "list") as span:
        tickets = await store.list_tickets()
        span.set_attribute("ticket.count", len(tickets))
        return TicketListResponse(tickets=[_to_response(ticket) for ticket in tickets])


@router.get("/{ticket_id}", response_model=TicketResponse)
async def get_ticket(ticket_id: str, store: TicketStoreDep, registry: MetricsDep, tracer: TracerDep) -> TicketResponse:
    with _record(registry, tracer, "get", ticket_id):
        parsed_id = _parse_ticket_id(ticket_id)
        try:
            ticket = await store.get_ticket(parsed_id)
        except TicketNotFoundError as exc:
            raise HTTPException(status_code=404, detail="Ticket not found") from exc
        return _to_response(ticket)


@router.patch("/{ticket_id}", response_model=TicketResponse)
async def patch_ticket(
    ticket_id: str,
    payload: TicketPatchRequest,
    store: TicketStoreDep,
    registry: MetricsDep,
    tracer: TracerDep,
) -> TicketResponse:
    with _record(registry, tracer, "patch", ticket_id):
        parsed_id = _parse_ticket_id(ticket_id)
        patch = TicketPatch(title=payload.title, description=payload.description, status=payload.status)
        try:
            ticket = await store.patch_ticket(parsed_id, patch)
        except TicketNotFoundError as exc:
            raise HTTPException(status_code=404, detail="Ticket not found") from exc
        except InvalidFieldError as exc:
            logger.warning("Rejected update of ticket %s: %s", parsed_id, exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        logger.info("Updated ticket %s, status is %s", parsed_id, ticket.status.label)
        return _to_response(ticket)
