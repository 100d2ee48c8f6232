"""Custom exceptions for rendering context."""

from typing import Optional


class PdfExportError(Exception):
    """
    Exception raised when the hosted HTML-to-PDF converter fails.

    Attributes:
        message: Error description
        status_code: HTTP status returned by the converter, if any
        response_text: Converter response body, truncated in the message
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.response_text = response_text

        parts = [message]
        if status_code is not None:
            parts.append(f"Status: {status_code}")
        if response_text:
            snippet = response_text[:200] + "..." if len(response_text) > 200 else response_text
            parts.append(f"Response: {snippet}")

        super().__init__("\n".join(parts))
