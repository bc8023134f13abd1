"""
Apply log interpretation.

Terraform ends a successful apply with a summary line such as:

    Apply complete! Resources: 1 added, 0 changed, 0 destroyed.

Newer releases append `, N imported` when resources were imported. The
clauses are parsed leniently because the wording is not a stable interface.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import structlog

from tfexporter.interpret.models import ApplyStats
from tfexporter.interpret.transcript import read_lines, strip_ansi

logger = structlog.get_logger()

APPLY_COMPLETE_MARKER = "Apply complete!"

_COUNT_KEYWORDS = frozenset({"added", "changed", "destroyed", "imported"})


def parse_apply_summary(lines: Iterable[str]) -> ApplyStats:
    """Extract actual change counts from an apply transcript.

    Counts stay at zero when the summary line never appears, e.g. when the
    apply failed part way. Use the outcome classifier to tell that apart
    from a completed apply with no changes.
    """
    stats = ApplyStats()

    for raw_line in lines:
        line = strip_ansi(raw_line)
        if APPLY_COMPLETE_MARKER not in line:
            continue

        remainder = line.split(APPLY_COMPLETE_MARKER, 1)[1]
        _, sep, clause = remainder.partition(":")
        if not sep:
            continue

        stats.completed = True
        for segment in clause.split(","):
            _apply_segment(stats, segment)

    return stats


def _apply_segment(stats: ApplyStats, segment: str) -> None:
    parts = segment.split()
    if len(parts) < 2:
        return

    try:
        count = int(parts[0])
    except ValueError:
        logger.debug("apply_segment_skipped", segment=segment.strip(), reason="count")
        return

    keyword = parts[1].rstrip(".").lower()
    if keyword not in _COUNT_KEYWORDS:
        logger.debug("apply_segment_skipped", segment=segment.strip(), reason="keyword")
        return

    setattr(stats, keyword, count)


def load_apply_stats(path: str | Path) -> ApplyStats:
    """Parse an apply log on disk; an unreadable log yields zero counts."""
    try:
        lines = read_lines(path)
    except OSError as e:
        logger.warning("apply_log_unreadable", path=str(path), error=str(e))
        return ApplyStats()
    return parse_apply_summary(lines)
