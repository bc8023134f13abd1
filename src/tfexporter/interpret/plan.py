"""
Plan interpretation.

Reads the JSON produced by `terraform show -json <planfile>`, tallies the
planned resource changes and derives a drift signal from them.
"""

from __future__ import annotations

import json
import re
import time
from datetime import datetime
from pathlib import Path
from typing import Callable

import structlog

from tfexporter.core.errors import InputError, PlanDecodeError
from tfexporter.interpret.actions import ActionTally
from tfexporter.interpret.models import PlanDocument, PlanSummary, Tally

logger = structlog.get_logger()

# fromisoformat on 3.10 only takes 3 or 6 fraction digits; RFC3339 allows any
_FRACTION = re.compile(r"\.(\d+)")


def decode_plan(payload: bytes | str) -> PlanDocument:
    """Decode a plan payload.

    Raises:
        PlanDecodeError: If the payload is not JSON or not a JSON object
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PlanDecodeError(f"Plan is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise PlanDecodeError(
            "Plan JSON must be an object",
            details={"found": type(data).__name__},
        )

    return PlanDocument.from_dict(data)


def load_plan(path: str | Path) -> PlanDocument:
    """Load a plan from disk.

    A missing file yields an empty document. An unreadable file raises
    InputError and undecodable contents raise PlanDecodeError, so callers
    can tell "no plan" from "broken plan".
    """
    plan_path = Path(path)
    try:
        payload = plan_path.read_bytes()
    except FileNotFoundError:
        logger.info("plan_missing", path=str(plan_path))
        return PlanDocument()
    except OSError as e:
        raise InputError(f"Cannot read plan: {e}", details={"path": str(plan_path)}) from e

    try:
        return decode_plan(payload)
    except PlanDecodeError as e:
        e.details.setdefault("path", str(plan_path))
        raise


def parse_timestamp(value: str | None) -> float | None:
    """Parse an RFC3339 timestamp into Unix seconds, or None if unusable."""
    if not value:
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0")[:6], text, count=1)

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    # RFC3339 requires an explicit offset
    if parsed.tzinfo is None:
        return None

    return float(int(parsed.timestamp()))


def tally_changes(document: PlanDocument) -> tuple[Tally, int]:
    """Tally planned changes and count drift-only records."""
    tally = Tally()
    drift_count = 0

    for record in document.resource_changes:
        classified = ActionTally.classify(record.actions)
        tally.total += 1
        if classified.add:
            tally.added += 1
        if classified.change:
            tally.changed += 1
        if classified.destroy:
            tally.destroyed += 1
        if classified.import_:
            tally.imported += 1
        if classified.drift:
            drift_count += 1

    return tally, drift_count


class PlanInterpreter:
    """Derives planned-change metrics from a plan document.

    Holds no per-run state; interpreting the same document twice gives the
    same result (apart from the wall-clock fallback timestamp).
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def interpret(self, document: PlanDocument) -> PlanSummary:
        tally, drift_count = tally_changes(document)

        timestamp = parse_timestamp(document.timestamp)
        if timestamp is None:
            if document.timestamp:
                logger.debug("plan_timestamp_unparseable", value=document.timestamp)
            timestamp = float(int(self._clock()))

        return PlanSummary(tally=tally, drift_count=drift_count, timestamp=timestamp)

    def interpret_path(self, path: str | Path) -> PlanSummary:
        return self.interpret(load_plan(path))
