"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from typing import List

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_offline_findings(issues: List[str], warnings: List[str]) -> None:
    """
    Log offline compatibility findings for a rendered document.

    Blocking issues go out at WARNING level, advisory warnings at INFO.
    Nothing is logged when both lists are empty.
    """
    if issues:
        _log_warning("Offline compatibility issues detected:")
        for issue in issues:
            _log_warning(f"  - {issue}")

    if warnings:
        _log_info("Offline compatibility warnings:")
        for warning in warnings:
            _log_info(f"  - {warning}")
