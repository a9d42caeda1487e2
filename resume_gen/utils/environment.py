"""
Runtime environment mode.

The mode is read from ``RESUME_GEN_ENV`` on every call so tests and long-lived
processes see changes without re-importing.
"""

import os

from dotenv import load_dotenv

load_dotenv()

PRODUCTION = "production"


def current_environment() -> str:
    """Return the active environment name (defaults to ``development``)."""
    return os.getenv("RESUME_GEN_ENV", "development").strip().lower()


def is_production() -> bool:
    return current_environment() == PRODUCTION
