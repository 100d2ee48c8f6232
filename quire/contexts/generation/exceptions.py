"""Custom exceptions for generation context."""

from typing import Optional


class GenerationError(Exception):
    """
    Exception raised when the AI collaborator cannot produce resume text.

    Attributes:
        message: Error description, safe to show to the user
        status_code: HTTP status from the provider, if known
        original_error: The provider exception
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.original_error = original_error

        parts = [message]
        if status_code is not None:
            parts.append(f"Status: {status_code}")
        if original_error is not None:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
