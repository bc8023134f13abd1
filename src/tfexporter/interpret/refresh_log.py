"""
Refresh log interpretation.

Decides whether a `terraform plan -refresh-only` (or `terraform refresh`)
transcript indicates drift between state and live infrastructure.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from tfexporter.interpret.transcript import read_text, strip_ansi

logger = structlog.get_logger()

NO_CHANGES_MARKER = "No changes. Your infrastructure still matches the configuration."
REFRESHING_MARKER = "Refreshing state..."


def detect_refresh_drift(text: str) -> bool:
    """Classify a refresh transcript.

    The explicit no-changes confirmation wins. Otherwise any refresh
    activity is conservatively treated as drift, which can report drift
    for a refresh that only logged benign state reads.
    """
    text = strip_ansi(text)
    if NO_CHANGES_MARKER in text:
        return False
    if REFRESHING_MARKER in text:
        return True
    return False


def load_refresh_drift(path: str | Path) -> bool:
    """Classify a refresh log on disk. Unreadable logs count as no drift."""
    try:
        text = read_text(path)
    except OSError as e:
        logger.warning("refresh_log_unreadable", path=str(path), error=str(e))
        return False
    return detect_refresh_drift(text)
