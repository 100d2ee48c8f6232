"""Custom exceptions for templating context."""

from typing import Iterable, Optional


class ContentParsingError(TypeError):
    """
    Exception raised when resume content cannot be parsed at all.

    Parsing is total over strings, so this only fires for non-string input.

    Attributes:
        message: Error description
        received_type: Name of the type that was passed instead of str
    """

    def __init__(self, message: str, received_type: Optional[str] = None):
        self.message = message
        self.received_type = received_type

        parts = [message]
        if received_type:
            parts.append(f"Received: {received_type}")

        super().__init__("\n".join(parts))


class StyleConfigError(ValueError):
    """
    Exception raised when a template, header style, render profile, or preset is unknown.

    Attributes:
        message: Error description
        value: The rejected value
        allowed: Accepted values, listed in the error message
    """

    def __init__(
        self,
        message: str,
        value: Optional[str] = None,
        allowed: Optional[Iterable[str]] = None,
    ):
        self.message = message
        self.value = value
        self.allowed = list(allowed) if allowed is not None else None

        parts = [message]
        if value is not None:
            parts.append(f"Got: {value!r}")
        if self.allowed:
            parts.append(f"Allowed: {', '.join(self.allowed)}")

        super().__init__("\n".join(parts))
