"""Plain text persistence of reported messages."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import click


def write_log(log_path: Path | str, lines: Sequence[str]) -> Path:
    """Write lines as one newline-joined text file without terminal styling."""
    destination = Path(log_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(click.unstyle("\n".join(lines)), encoding="utf-8")
    return destination
