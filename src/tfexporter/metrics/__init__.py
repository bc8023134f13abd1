"""
Gauge batch construction and publishing.

Example usage:
    from tfexporter.metrics import PushgatewayPublisher, collect_metrics

    run = collect_metrics("plan.json", apply_log_path="apply.log", start_time=start)
    PushgatewayPublisher("http://gateway:9091", "terraform").publish(
        run.to_metric_set(), {"instance": run_id}
    )
"""

from tfexporter.metrics.collector import (
    collect_from_settings,
    collect_metrics,
    parse_start_time,
)
from tfexporter.metrics.models import ALL_GAUGES, Gauge, GaugeSpec, MetricSet, RunMetrics
from tfexporter.metrics.publisher import PushgatewayPublisher, build_registry

__all__ = [
    # Models
    "Gauge",
    "GaugeSpec",
    "MetricSet",
    "RunMetrics",
    "ALL_GAUGES",
    # Collection
    "collect_metrics",
    "collect_from_settings",
    "parse_start_time",
    # Publishing
    "PushgatewayPublisher",
    "build_registry",
]
