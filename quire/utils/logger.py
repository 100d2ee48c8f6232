"""
Session logger setup shared by the QUIRE contexts.

Each CLI run gets its own log directory holding one {context}.log file. The file
keeps full detail for debugging an export or generation request after the fact;
the console shows progress only. Context-specific wrappers live in
contexts/{context}/logger.py.

Environment:
    QUIRE_CONSOLE_LOG_LEVEL  Console threshold (default INFO)
    QUIRE_FILE_LOG_LEVEL     Log file threshold (default DEBUG)
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from quire import __version__

load_dotenv()
CONSOLE_LOG_LEVEL = os.getenv("QUIRE_CONSOLE_LOG_LEVEL", "INFO").upper()
FILE_LOG_LEVEL = os.getenv("QUIRE_FILE_LOG_LEVEL", "DEBUG").upper()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)

# Console colors for levels where loguru's defaults are too loud
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    level_colors: Optional[Dict[str, str]] = None,
    console: bool = True,
) -> Path:
    """
    Route loguru output for one session to a log file and, optionally, the console.

    Any previously configured sinks are removed, so the last session set up in a
    process owns the output.

    Args:
        context_name: Context identifier, used as the log file name ("render", "generate")
        log_dir: Session directory (e.g., outs/logs/render_20251114_123456)
        extra_provenance: Key-value pairs added to the session header
        level_colors: Console color overrides (e.g., {"INFO": "<cyan>"})
        console: Also log to stdout

    Returns:
        Path to the log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/render_20251114_123456"),
            extra_provenance={"Template": "modern"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level=FILE_LOG_LEVEL, encoding="utf-8")
    if console:
        logger.add(sys.stdout, format=CONSOLE_FORMAT, level=CONSOLE_LOG_LEVEL, colorize=True)

    log_provenance(log_dir.name, extra_provenance)

    return log_file


def log_provenance(session: str, extra_context: Optional[Dict[str, str]] = None) -> None:
    """
    Write the session header: QUIRE version, invocation, and any extra context.

    Args:
        session: Session name (the log directory name)
        extra_context: Additional key-value pairs (provider, template, ...)
    """
    header = {
        "Session": session,
        "QUIRE": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    logger.info("=" * 80)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
