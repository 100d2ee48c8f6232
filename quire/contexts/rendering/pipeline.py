"""
Rendering Pipeline

Orchestrates text -> Document -> VisualTree -> HTML for preview, and on to PDF
for export. Parsing and rendering are re-run on every call; nothing is cached.
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

from quire.contexts.rendering.exceptions import PdfExportError
from quire.contexts.rendering.html import to_html
from quire.contexts.rendering.logger import (
    _log_debug,
    log_export_result,
    log_export_start,
)
from quire.contexts.rendering.pdf_export import PdfExporter, pdf_filename
from quire.contexts.rendering.renderer import RenderProfile, render
from quire.contexts.templating.content_parser import parse
from quire.contexts.templating.logger import log_parse_summary
from quire.contexts.templating.style import StyleConfig, Template, coerce_enum
from quire.utils.pdf_processing import page_count
from quire.utils.timestamp import today

load_dotenv()
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))


@dataclass
class ExportResult:
    """
    Result of exporting a resume to PDF.

    Attributes:
        success: Whether export succeeded
        html: HTML sent to the converter
        pdf_path: Path of the written PDF (None if failed)
        pdf_url: Converter URL of the generated PDF
        page_count: Pages in the generated PDF (None if not available)
        errors: Failure messages
    """

    success: bool
    html: str = ""
    pdf_path: Optional[Path] = None
    pdf_url: Optional[str] = None
    page_count: Optional[int] = None
    errors: List[str] = field(default_factory=list)


def preview_resume(
    text: str,
    template: Union[Template, str] = Template.CLASSIC,
    style: Optional[StyleConfig] = None,
    profile: Union[RenderProfile, str] = RenderProfile.EMPHASIS_AWARE,
    title: Optional[str] = None,
) -> str:
    """
    Render resume text as preview HTML.

    Args:
        text: Resume body text
        template: Template variant
        style: Style configuration (None: template default)
        profile: Line treatment; the preview is emphasis-aware by default
        title: HTML <title> override

    Returns:
        HTML document string

    Raises:
        ContentParsingError: If text is not a string
    """
    document = parse(text)
    log_parse_summary(document, len(text))

    tree = render(document, template=template, style=style, profile=profile)
    return to_html(tree, title=title)


def export_resume(
    text: str,
    title: str,
    template: Union[Template, str] = Template.CLASSIC,
    style: Optional[StyleConfig] = None,
    profile: Union[RenderProfile, str] = RenderProfile.PLAIN,
    exporter: Optional[PdfExporter] = None,
    output_dir: Optional[Path] = None,
) -> ExportResult:
    """
    Render resume text and export it to a PDF file.

    Converter failures are reported in the result rather than raised, so callers
    can surface a single failure notification.

    Args:
        text: Resume body text
        title: Resume title (used for the PDF filename)
        template: Template variant
        style: Style configuration (None: template default)
        profile: Line treatment; the export path is plain by default
        exporter: PDF converter client (default: PdfExporter() from environment)
        output_dir: Where to write the PDF (default: RESULTS_PATH/YYYY-MM-DD)

    Returns:
        ExportResult with success status and output location

    Raises:
        ContentParsingError: If text is not a string
    """
    template = coerce_enum(Template, template, "template")
    profile = coerce_enum(RenderProfile, profile, "render profile")

    log_export_start(title, template.value, profile.value)
    start_time = time.time()

    document = parse(text)
    log_parse_summary(document, len(text))
    html = to_html(render(document, template=template, style=style, profile=profile), title=title)

    result = ExportResult(success=False, html=html)
    filename = pdf_filename(title)

    owns_exporter = exporter is None
    try:
        if owns_exporter:
            exporter = PdfExporter()
        pdf_url = exporter.convert(html, name=filename)
        pdf_bytes = exporter.download(pdf_url)
    except PdfExportError as e:
        result.errors.append(str(e))
        log_export_result(title, result, time.time() - start_time)
        return result
    finally:
        if owns_exporter and exporter is not None:
            exporter.close()

    if output_dir is None:
        output_dir = RESULTS_PATH / today()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    pdf_path = output_dir / filename
    pdf_path.write_bytes(pdf_bytes)
    _log_debug(f"Wrote {len(pdf_bytes)} bytes")

    result.success = True
    result.pdf_path = pdf_path
    result.pdf_url = pdf_url
    result.page_count = page_count(pdf_bytes)

    log_export_result(title, result, time.time() - start_time)
    return result
