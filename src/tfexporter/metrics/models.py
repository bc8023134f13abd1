"""
Gauge models for a single exporter run.

`RunMetrics` holds one named field per published gauge; `MetricSet` is the
flat name -> Gauge batch handed to the publisher. A MetricSet refuses to set
the same name twice, so planned and applied counts can never overwrite each
other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tfexporter.core.errors import DuplicateGaugeError
from tfexporter.interpret.models import ApplyStats


@dataclass(frozen=True)
class Gauge:
    """A point-in-time metric value."""

    name: str
    help: str
    value: float


class MetricSet:
    """Gauges collected during one run, keyed by name."""

    def __init__(self) -> None:
        self._gauges: dict[str, Gauge] = {}

    def set(self, name: str, help: str, value: float) -> Gauge:
        if name in self._gauges:
            raise DuplicateGaugeError(
                f"Gauge {name} already set in this run",
                details={"gauge": name},
            )
        gauge = Gauge(name=name, help=help, value=float(value))
        self._gauges[name] = gauge
        return gauge

    def get(self, name: str) -> Gauge | None:
        return self._gauges.get(name)

    def as_dict(self) -> dict[str, float]:
        return {name: gauge.value for name, gauge in self._gauges.items()}

    def __iter__(self) -> Iterator[Gauge]:
        return iter(self._gauges.values())

    def __len__(self) -> int:
        return len(self._gauges)

    def __contains__(self, name: object) -> bool:
        return name in self._gauges


@dataclass(frozen=True)
class GaugeSpec:
    name: str
    help: str


# Planned changes (from the plan JSON)
RESOURCES_TOTAL = GaugeSpec("terraform_resources_total", "Total planned resource changes")
TO_ADD = GaugeSpec("terraform_to_add", "Resources planned to be added")
TO_CHANGE = GaugeSpec("terraform_to_change", "Resources planned to be changed")
TO_DESTROY = GaugeSpec("terraform_to_destroy", "Resources planned to be destroyed")
TO_IMPORT = GaugeSpec("terraform_to_import", "Resources planned to be imported")

# Run-level
DRIFT_DETECTED = GaugeSpec("terraform_drift_detected", "Drift found during plan or refresh")
TIMESTAMP = GaugeSpec("terraform_timestamp", "Unix timestamp of run")
EXECUTION_DURATION = GaugeSpec(
    "terraform_execution_duration_seconds", "Time taken for execution"
)
RESULT = GaugeSpec("terraform_result", "1=success, 0=failure")

# Actual changes (from the apply log)
ADDED = GaugeSpec("terraform_added", "Resources actually added")
CHANGED = GaugeSpec("terraform_changed", "Resources actually changed")
DESTROYED = GaugeSpec("terraform_destroyed", "Resources actually destroyed")
IMPORTED = GaugeSpec("terraform_imported", "Resources actually imported")

ALL_GAUGES: tuple[GaugeSpec, ...] = (
    RESOURCES_TOTAL,
    TO_ADD,
    TO_CHANGE,
    TO_DESTROY,
    TO_IMPORT,
    DRIFT_DETECTED,
    TIMESTAMP,
    EXECUTION_DURATION,
    ADDED,
    CHANGED,
    DESTROYED,
    IMPORTED,
    RESULT,
)


@dataclass
class RunMetrics:
    """All facts derived from one Terraform run."""

    resources_total: int
    to_add: int
    to_change: int
    to_destroy: int
    to_import: int
    drift_detected: bool
    timestamp: float
    execution_duration_seconds: float
    result: bool
    applied: ApplyStats | None = None  # None when no apply log was configured

    def to_metric_set(self) -> MetricSet:
        metrics = MetricSet()
        metrics.set(RESOURCES_TOTAL.name, RESOURCES_TOTAL.help, self.resources_total)
        metrics.set(TO_ADD.name, TO_ADD.help, self.to_add)
        metrics.set(TO_CHANGE.name, TO_CHANGE.help, self.to_change)
        metrics.set(TO_DESTROY.name, TO_DESTROY.help, self.to_destroy)
        metrics.set(TO_IMPORT.name, TO_IMPORT.help, self.to_import)
        metrics.set(DRIFT_DETECTED.name, DRIFT_DETECTED.help, 1.0 if self.drift_detected else 0.0)
        metrics.set(TIMESTAMP.name, TIMESTAMP.help, self.timestamp)
        metrics.set(
            EXECUTION_DURATION.name, EXECUTION_DURATION.help, self.execution_duration_seconds
        )

        if self.applied is not None:
            metrics.set(ADDED.name, ADDED.help, self.applied.added)
            metrics.set(CHANGED.name, CHANGED.help, self.applied.changed)
            metrics.set(DESTROYED.name, DESTROYED.help, self.applied.destroyed)
            metrics.set(IMPORTED.name, IMPORTED.help, self.applied.imported)

        metrics.set(RESULT.name, RESULT.help, 1.0 if self.result else 0.0)
        return metrics
