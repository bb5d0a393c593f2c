"""Metrics recorded by the ticket routes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

TICKET_REQUESTS_TOTAL = "ticket_requests_total"
TICKET_REQUEST_DURATION_SECONDS = "ticket_request_duration_seconds"


@dataclass(frozen=True)
class MetricDefinition:
    name: str
    metric_type: str
    description: str
    label_names: Tuple[str, ...] = ()


DEFAULT_METRIC_DEFINITIONS: Tuple[MetricDefinition, ...] = (
    MetricDefinition(
        name=TICKET_REQUESTS_TOTAL,
        metric_type="counter",
        description="Ticket operations handled, by operation and outcome.",
        label_names=("operation", "outcome"),
    ),
    MetricDefinition(
        name=TICKET_REQUEST_DURATION_SECONDS,
        metric_type="distribution",
        description="Time spent in ticket store operations in seconds.",
        label_names=("operation",),
    ),
)
