"""Run outcome classification from error markers in a transcript."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import structlog

from tfexporter.interpret.transcript import read_lines, strip_ansi

logger = structlog.get_logger()

# "│ Error" is how Terraform's boxed diagnostics render an error block
ERROR_MARKERS = ("Error:", "│ Error")


def is_run_successful(lines: Iterable[str]) -> bool:
    """True unless some line carries an error marker."""
    for line in lines:
        line = strip_ansi(line)
        if any(marker in line for marker in ERROR_MARKERS):
            return False
    return True


def classify_outcome(path: str | Path) -> bool:
    """Classify the run from a transcript on disk.

    A transcript that cannot be opened is a failure, since the stage that
    should have written it did not finish.
    """
    try:
        lines = read_lines(path)
    except OSError as e:
        logger.warning("outcome_log_unreadable", path=str(path), error=str(e))
        return False
    return is_run_successful(lines)
