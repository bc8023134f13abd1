"""
Metric collection for one Terraform run.

Runs the interpreters in a fixed order: plan first (planned counts,
timestamp, plan drift), then the apply log and refresh log when present,
then outcome classification against the latest stage reached.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

import structlog

from tfexporter.config.settings import Settings
from tfexporter.core.errors import InputError
from tfexporter.interpret.apply_log import load_apply_stats
from tfexporter.interpret.models import PlanDocument
from tfexporter.interpret.outcome import classify_outcome
from tfexporter.interpret.plan import PlanInterpreter, load_plan
from tfexporter.interpret.refresh_log import load_refresh_drift
from tfexporter.metrics.models import RunMetrics

logger = structlog.get_logger()

PathLike = str | Path


def parse_start_time(value: str | float | None) -> float | None:
    """Parse the run start (Unix seconds). None if missing or malformed."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("start_time_invalid", value=value)
        return None


def collect_metrics(
    plan_path: PathLike | None,
    *,
    apply_log_path: PathLike | None = None,
    refresh_log_path: PathLike | None = None,
    start_time: float | None = None,
    strict_plan: bool = False,
    clock: Callable[[], float] = time.time,
) -> RunMetrics:
    """Interpret the artifacts of one run.

    Args:
        plan_path: JSON plan from `terraform show -json`
        apply_log_path: Apply transcript, if the run reached apply
        refresh_log_path: Refresh transcript, if a refresh was run
        start_time: Run start in Unix seconds; duration is 0.0 without it
        strict_plan: Propagate plan read/decode errors instead of treating
            the plan as empty
        clock: Wall-clock source (Unix seconds)

    Returns:
        RunMetrics for the run

    Raises:
        InputError: Only when strict_plan is set and the plan is unusable
    """
    interpreter = PlanInterpreter(clock=clock)

    document = PlanDocument()
    if plan_path:
        try:
            document = load_plan(plan_path)
        except InputError as e:
            if strict_plan:
                raise
            logger.warning(
                "plan_unusable",
                error_type=type(e).__name__,
                message=e.message,
                **e.details,
            )
    else:
        logger.info("plan_not_configured")

    plan = interpreter.interpret(document)
    drift = plan.drift_detected

    applied = None
    if apply_log_path:
        applied = load_apply_stats(apply_log_path)

    if refresh_log_path:
        drift = load_refresh_drift(refresh_log_path) or drift

    outcome_path = apply_log_path or plan_path
    result = classify_outcome(outcome_path) if outcome_path else False

    duration = 0.0
    if start_time is None:
        logger.warning("start_time_missing")
    else:
        duration = max(clock() - start_time, 0.0)

    metrics = RunMetrics(
        resources_total=plan.tally.total,
        to_add=plan.tally.added,
        to_change=plan.tally.changed,
        to_destroy=plan.tally.destroyed,
        to_import=plan.tally.imported,
        drift_detected=drift,
        timestamp=plan.timestamp,
        execution_duration_seconds=duration,
        result=result,
        applied=applied,
    )

    logger.info(
        "metrics_collected",
        resources_total=metrics.resources_total,
        drift_detected=metrics.drift_detected,
        result=metrics.result,
        apply_completed=applied.completed if applied else None,
    )
    return metrics


def collect_from_settings(
    settings: Settings,
    *,
    clock: Callable[[], float] = time.time,
) -> RunMetrics:
    """Collect metrics for the paths and start time in settings."""
    return collect_metrics(
        settings.terraform_plan_path,
        apply_log_path=settings.terraform_apply_log_path,
        refresh_log_path=settings.terraform_refresh_log_path,
        start_time=parse_start_time(settings.terraform_start_time),
        strict_plan=settings.strict_plan,
        clock=clock,
    )
