"""
Shared utilities for QUIRE.

Common functionality used across contexts:
- Logger setup
- Timestamps
- LLM providers
- Resume record storage
"""

from quire.utils.timestamp import now, now_exact, today

__all__ = ["now", "now_exact", "today"]
