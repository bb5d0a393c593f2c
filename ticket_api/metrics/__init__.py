"""Application metrics utilities."""
from .base import CounterMetric, DistributionMetric, track_duration
from .definitions import (
    DEFAULT_METRIC_DEFINITIONS,
    TICKET_REQUEST_DURATION_SECONDS,
    TICKET_REQUESTS_TOTAL,
    MetricDefinition,
)
from .exporters import PrometheusExporter
from .registry import MetricsRegistry


def register_default_metrics(registry: MetricsRegistry) -> MetricsRegistry:
    """Ensure all default metric definitions exist in ``registry``."""
    for definition in DEFAULT_METRIC_DEFINITIONS:
        if definition.metric_type == "counter":
            registry.counter(
                definition.name,
                description=definition.description,
                label_names=definition.label_names,
            )
        elif definition.metric_type == "distribution":
            registry.distribution(
                definition.name,
                description=definition.description,
                label_names=definition.label_names,
            )
        else:
            raise ValueError(f"Unsupported metric type: {definition.metric_type}")
    return registry


__all__ = [
    "CounterMetric",
    "DistributionMetric",
    "MetricDefinition",
    "MetricsRegistry",
    "PrometheusExporter",
    "TICKET_REQUESTS_TOTAL",
    "TICKET_REQUEST_DURATION_SECONDS",
    "register_default_metrics",
    "track_duration",
]
