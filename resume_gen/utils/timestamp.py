"""Timestamp helpers for output file names and log directories."""

from datetime import datetime


def now() -> str:
    """Current local time as a filename-safe stamp, e.g. ``20251114_183045``."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
