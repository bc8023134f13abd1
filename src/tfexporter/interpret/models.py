"""
Data models for Terraform run artifacts.

These models represent:
- Planned resource changes from `terraform show -json`
- Tallies of planned and applied changes
- The combined result of interpreting a plan
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResourceChangeRecord:
    """One planned change for one resource instance."""

    resource_type: str
    actions: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> ResourceChangeRecord:
        """Build from a `resource_changes` entry, tolerating missing fields."""
        if not isinstance(data, dict):
            return cls(resource_type="")

        resource_type = data.get("type")
        if not isinstance(resource_type, str):
            resource_type = ""

        change = data.get("change")
        actions = change.get("actions") if isinstance(change, dict) else None
        if not isinstance(actions, list):
            actions = []

        return cls(
            resource_type=resource_type,
            actions=tuple(a for a in actions if isinstance(a, str)),
        )


@dataclass(frozen=True)
class PlanDocument:
    """A decoded plan. Empty when the plan file is absent."""

    timestamp: str | None = None
    resource_changes: tuple[ResourceChangeRecord, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlanDocument:
        timestamp = data.get("timestamp")
        if not isinstance(timestamp, str) or not timestamp:
            timestamp = None

        raw_changes = data.get("resource_changes")
        if not isinstance(raw_changes, list):
            raw_changes = []

        return cls(
            timestamp=timestamp,
            resource_changes=tuple(ResourceChangeRecord.from_dict(rc) for rc in raw_changes),
        )


@dataclass
class Tally:
    """Counts of planned changes by bucket."""

    total: int = 0
    added: int = 0
    changed: int = 0
    destroyed: int = 0
    imported: int = 0


@dataclass
class ApplyStats:
    """Counts reported by the `Apply complete!` summary line."""

    added: int = 0
    changed: int = 0
    destroyed: int = 0
    imported: int = 0
    completed: bool = False  # True once the summary line was seen


@dataclass
class PlanSummary:
    """Result of interpreting a plan document."""

    tally: Tally = field(default_factory=Tally)
    drift_count: int = 0
    timestamp: float = 0.0  # Unix seconds

    @property
    def drift_detected(self) -> bool:
        return self.drift_count > 0
