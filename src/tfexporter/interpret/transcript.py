"""
Reading Terraform log transcripts.

Logs captured from CI usually keep Terraform's colour codes unless the run
used `-no-color`, so markers are matched against text with ANSI escape
sequences removed.
"""

from __future__ import annotations

import re
from pathlib import Path

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


def read_text(path: str | Path) -> str:
    """Read a whole transcript. Raises OSError if the file cannot be read."""
    with open(path, encoding="utf-8", errors="replace") as f:
        return strip_ansi(f.read())


def read_lines(path: str | Path) -> list[str]:
    """Read a transcript as lines without trailing newlines."""
    return read_text(path).splitlines()
