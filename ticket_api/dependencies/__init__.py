from .tickets import (
    MetricsDep,
    TicketStoreDep,
    TracerDep,
    get_metrics_registry,
    get_ticket_store,
    get_tracer,
)

__all__ = [
    "MetricsDep",
    "TicketStoreDep",
    "TracerDep",
    "get_metrics_registry",
    "get_ticket_store",
    "get_tracer",
]
