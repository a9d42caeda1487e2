"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resume_gen.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, template: str, verbose: bool = False) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        template: Requested template name, recorded in the provenance header
        verbose: Echo DEBUG messages to the console as well

    Returns:
        Path to log file

    Example:
        from resume_gen.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, template="professional")
        _log_info("Starting PDF generation...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Template": template},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_pdf_start(input_file: Path, pdf_path: Path, template_key: str) -> None:
    """Log start of PDF generation with context."""
    _log_info(f"Generating PDF: {input_file.name}")
    _log_debug(f"  Template: {template_key}")
    _log_debug(f"  Output: {pdf_path}")


def log_pdf_result(result, elapsed_time: float) -> None:  # PDFResult
    """
    Log PDF generation result with diagnostics.

    Args:
        result: PDFResult from generate_resume_pdf()
        elapsed_time: Time taken to generate, in seconds
    """
    if result.success:
        _log_success(f"PDF generated ({elapsed_time:.2f}s)")
        _log_info(f"  PDF: {result.pdf_path}")
        if result.page_count is not None:
            _log_info(f"  Pages: {result.page_count}")
    else:
        _log_error(f"PDF generation failed with {len(result.errors)} errors ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")

    validation = result.validation
    if validation is not None and not validation.is_offline_compatible:
        _log_warning(f"{len(validation.issues)} offline compatibility issues in rendered HTML")
