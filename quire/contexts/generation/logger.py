"""
Generation context logger.

Provides logging interface for generation context with automatic [generate] prefix.
All generation modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from quire.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[generate]"


def setup_generation_logger(log_dir: Path, provider: str = None) -> Path:
    """
    Setup logger for generation context.

    Args:
        log_dir: Directory for this generation session
        provider: Provider name recorded in the provenance header

    Returns:
        Path to log file
    """
    extra = {"LLM provider": provider} if provider else None
    return _setup_logger(context_name="generate", log_dir=log_dir, extra_provenance=extra)


def _log_info(message: str) -> None:
    """Log info message with [generate] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [generate] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [generate] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [generate] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_generation_start(action: str, provider_name: str, tone: str) -> None:
    """Log start of a generation request."""
    _log_info(f"Processing resume {action} request ({provider_name}, tone={tone})")


def log_generation_result(
    action: str,
    response,  # LLMResponse or None
    elapsed_time: float,
    error: Optional[str] = None,
) -> None:
    """
    Log the outcome of a generation request.

    Args:
        action: "generate" or "enhance"
        response: LLMResponse from the provider (None on failure)
        elapsed_time: Time taken
        error: Failure message, if any
    """
    if error:
        _log_error(f"Resume {action} failed ({elapsed_time:.2f}s): {error}")
        return

    _log_success(f"Resume {action} succeeded ({elapsed_time:.2f}s)")
    if response is not None:
        _log_debug(
            f"  Model: {response.model}, tokens in/out: "
            f"{response.input_tokens}/{response.output_tokens}"
        )
