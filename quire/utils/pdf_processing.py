"""
PDF processing utilities.

Helper functions:
    page_count: Page count of a PDF file or in-memory PDF.
    extract_text: Plain text of every page, for enhancing uploaded resumes.
    read_upload_text: Text of an uploaded resume file (PDF or plain text).
"""

import io
from pathlib import Path
from typing import Optional, Union

import pdfplumber
from PyPDF2 import PdfReader

PdfSource = Union[Path, str, bytes]


def _as_stream(source: PdfSource):
    if isinstance(source, bytes):
        return io.BytesIO(source)
    return str(source)


def page_count(source: PdfSource) -> Optional[int]:
    """Get page count from a PDF path or PDF bytes, or None if unreadable."""
    try:
        reader = PdfReader(_as_stream(source))
        return len(reader.pages)
    except Exception:
        return None


def extract_text(source: PdfSource) -> str:
    """
    Extract text from every page, pages separated by blank lines.

    Args:
        source: PDF path or PDF bytes

    Returns:
        Extracted text (empty string if the PDF has no text layer)
    """
    with pdfplumber.open(_as_stream(source)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n\n".join(page.strip() for page in pages if page.strip())


def read_upload_text(path: Path) -> str:
    """
    Text content of an uploaded resume.

    PDFs go through text extraction; anything else is read as UTF-8 text.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Upload not found: {path}")

    if path.suffix.lower() == ".pdf":
        return extract_text(path)
    return path.read_text(encoding="utf-8", errors="replace")
