"""
PDF Export

Sends rendered resume HTML to a hosted HTML-to-PDF converter and downloads the
resulting PDF. The converter answers with a URL to the generated file.
"""

import os
import re
from typing import Optional

import httpx
from dotenv import load_dotenv

from quire.contexts.rendering.exceptions import PdfExportError
from quire.contexts.rendering.logger import _log_debug

load_dotenv()
PDF_CONVERTER_URL = os.getenv("PDF_CONVERTER_URL", "https://api.pdf.co/v1/pdf/convert/from/html")
PDF_CONVERTER_TIMEOUT_S = float(os.getenv("PDF_CONVERTER_TIMEOUT_S", "60"))

# Converter request options
PDF_MARGINS = "10mm"
PDF_PAPER_SIZE = "Letter"
PDF_ORIENTATION = "Portrait"


def pdf_filename(title: str) -> str:
    """
    Download filename for a resume title.

    Every character outside [a-z0-9] (case-insensitive) becomes "_", then the
    whole name is lowercased.

    Example:
        >>> pdf_filename("Jane Doe CV")
        'jane_doe_cv.pdf'
    """
    return re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE).lower() + ".pdf"


class PdfExporter:
    """
    Client for the hosted HTML-to-PDF converter.

    Usage:
        exporter = PdfExporter()
        pdf_bytes = exporter.export(html, name="jane_doe.pdf")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint: str = PDF_CONVERTER_URL,
        timeout: float = PDF_CONVERTER_TIMEOUT_S,
        client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            api_key: Converter API key (default: PDFCO_API_KEY env variable)
            endpoint: Converter URL
            timeout: Request timeout in seconds
            client: Preconfigured httpx.Client (tests pass one with a mock transport)

        Raises:
            PdfExportError: If no API key is configured
        """
        if api_key is None:
            api_key = os.getenv("PDFCO_API_KEY")
        if not api_key:
            raise PdfExportError("PDFCO_API_KEY is not configured")

        self.api_key = api_key
        self.endpoint = endpoint
        self.client = client if client is not None else httpx.Client(timeout=timeout)

    def convert(self, html: str, name: str = "resume.pdf") -> str:
        """
        Ask the converter to build a PDF from HTML.

        Returns:
            URL of the generated PDF

        Raises:
            PdfExportError: On transport failure, non-2xx status, or missing URL
        """
        payload = {
            "html": html,
            "name": name,
            "margins": PDF_MARGINS,
            "paperSize": PDF_PAPER_SIZE,
            "orientation": PDF_ORIENTATION,
            "printBackground": True,
            "header": "",
            "footer": "",
        }
        _log_debug(f"Posting {len(html)} chars of HTML to {self.endpoint}")

        try:
            response = self.client.post(
                self.endpoint,
                json=payload,
                headers={"x-api-key": self.api_key},
            )
        except httpx.RequestError as e:
            raise PdfExportError(f"Failed to reach PDF converter: {e}") from e

        if not response.is_success:
            raise PdfExportError(
                "Failed to generate PDF",
                status_code=response.status_code,
                response_text=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise PdfExportError(
                "PDF converter returned invalid JSON", response_text=response.text
            ) from e

        url = data.get("url") if isinstance(data, dict) else None
        if not url:
            raise PdfExportError("No PDF URL returned", response_text=response.text)

        _log_debug(f"PDF generated at {url}")
        return url

    def download(self, url: str) -> bytes:
        """Fetch generated PDF bytes from the converter's URL."""
        try:
            response = self.client.get(url)
        except httpx.RequestError as e:
            raise PdfExportError(f"Failed to download PDF: {e}") from e

        if not response.is_success:
            raise PdfExportError(
                "Failed to download PDF",
                status_code=response.status_code,
                response_text=response.text,
            )
        return response.content

    def export(self, html: str, name: str = "resume.pdf") -> bytes:
        """Convert HTML and return the PDF bytes."""
        return self.download(self.convert(html, name=name))

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "PdfExporter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
