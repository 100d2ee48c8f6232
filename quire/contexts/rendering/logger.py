"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from quire.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, template: str = None) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        template: Template name recorded in the provenance header

    Returns:
        Path to log file
    """
    extra = {"Template": template} if template else None
    return _setup_logger(context_name="render", log_dir=log_dir, extra_provenance=extra)


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


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_start(resume_title: str, template: str, profile: str) -> None:
    """Log start of an export with context."""
    _log_info(f"Exporting: {resume_title}")
    _log_debug(f"  Template: {template}")
    _log_debug(f"  Profile: {profile}")


def log_export_result(
    resume_title: str,
    result,  # ExportResult
    elapsed_time: float,
) -> None:
    """
    Log export result.

    Args:
        resume_title: Resume title
        result: ExportResult from export_resume()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(f"{resume_title}: export succeeded ({elapsed_time:.2f}s)")
        if result.page_count is not None:
            _log_info(f"  Pages: {result.page_count}")
        if result.pdf_path:
            _log_info(f"  PDF: {result.pdf_path}")
    else:
        _log_error(f"Failed to export {resume_title} ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors[:5], 1):
            _log_error(f"  Error {i}: {err}")

    # Full HTML goes to the file sink only, without the line prefix
    if result.html:
        logger.opt(raw=True).debug(f"\n{'=' * 80}\nEXPORTED HTML:\n{'=' * 80}\n{result.html}\n")
