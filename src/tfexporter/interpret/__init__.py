"""
Interpretation of Terraform run artifacts.

Turns the JSON plan, apply log and refresh log of one run into counts and
flags:

    from tfexporter.interpret import PlanInterpreter, load_plan

    summary = PlanInterpreter().interpret(load_plan("plan.json"))
    print(summary.tally.added, summary.drift_detected)
"""

from tfexporter.interpret.actions import ActionTally, is_drift_only
from tfexporter.interpret.apply_log import (
    APPLY_COMPLETE_MARKER,
    load_apply_stats,
    parse_apply_summary,
)
from tfexporter.interpret.models import (
    ApplyStats,
    PlanDocument,
    PlanSummary,
    ResourceChangeRecord,
    Tally,
)
from tfexporter.interpret.outcome import ERROR_MARKERS, classify_outcome, is_run_successful
from tfexporter.interpret.plan import (
    PlanInterpreter,
    decode_plan,
    load_plan,
    parse_timestamp,
    tally_changes,
)
from tfexporter.interpret.refresh_log import (
    NO_CHANGES_MARKER,
    REFRESHING_MARKER,
    detect_refresh_drift,
    load_refresh_drift,
)

__all__ = [
    # Models
    "ResourceChangeRecord",
    "PlanDocument",
    "Tally",
    "ApplyStats",
    "PlanSummary",
    # Plan
    "ActionTally",
    "is_drift_only",
    "PlanInterpreter",
    "decode_plan",
    "load_plan",
    "parse_timestamp",
    "tally_changes",
    # Apply
    "APPLY_COMPLETE_MARKER",
    "parse_apply_summary",
    "load_apply_stats",
    # Refresh
    "NO_CHANGES_MARKER",
    "REFRESHING_MARKER",
    "detect_refresh_drift",
    "load_refresh_drift",
    # Outcome
    "ERROR_MARKERS",
    "is_run_successful",
    "classify_outcome",
]
