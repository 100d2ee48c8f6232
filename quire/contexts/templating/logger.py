"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
Templating runs inside a render or export session, so it writes to whichever
sinks that session's logger set up.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_parse_summary(document, source_chars: int) -> None:
    """
    Log the shape of a parsed document.

    Args:
        document: Document from content_parser.parse()
        source_chars: Length of the source text
    """
    _log_debug(
        f"Parsed {source_chars} chars: title={document.title!r}, "
        f"{len(document.sections)} sections"
    )
    for i, section in enumerate(document.sections, 1):
        _log_debug(f"  Section {i}: {section.heading or '(untitled)'} ({len(section.lines)} lines)")

    if document.is_empty and source_chars:
        _log_warning("Source text produced an empty document")
