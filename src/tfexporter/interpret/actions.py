"""
Classification of planned resource actions.

Terraform reports each resource change as a list of actions. A replacement
is reported as `["delete", "create"]` (or `["create", "delete"]` for
create-before-destroy) and counts in both the add and destroy buckets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

CREATE = "create"
UPDATE = "update"
DELETE = "delete"
IMPORT = "import"
NO_OP = "no-op"
READ = "read"


@dataclass(frozen=True)
class ActionTally:
    """Bucket membership for one resource change."""

    add: bool = False
    change: bool = False
    destroy: bool = False
    import_: bool = False
    drift: bool = False

    @classmethod
    def classify(cls, actions: Sequence[str]) -> ActionTally:
        return cls(
            add=CREATE in actions,
            change=UPDATE in actions,
            destroy=DELETE in actions,
            import_=IMPORT in actions,
            drift=is_drift_only(actions),
        )


def is_drift_only(actions: Sequence[str]) -> bool:
    """
    Heuristic: a lone in-place update is treated as a drift correction.

    This approximates drift detection for plans that run unattended against
    already-applied configuration, where the only expected changes are
    corrections of out-of-band edits. An update combined with other actions
    on the same resource is not flagged. The rest of the plan is not
    consulted, so a lone update inside an intentional change set is still
    counted as drift.
    """
    return len(actions) == 1 and actions[0] == UPDATE
