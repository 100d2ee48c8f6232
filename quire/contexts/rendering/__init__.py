"""
Rendering Context

Responsibilities:
- Renders parsed Documents into a VisualTree for a template and style
- Projects the VisualTree into HTML for preview and export
- Exports HTML to PDF through the hosted converter

Owns: VisualTree, HTML projection, PDF export
Never: Changes resume content or parsing rules
"""

from quire.contexts.rendering.exceptions import PdfExportError
from quire.contexts.rendering.html import to_html
from quire.contexts.rendering.pdf_export import PdfExporter, pdf_filename
from quire.contexts.rendering.pipeline import ExportResult, export_resume, preview_resume
from quire.contexts.rendering.renderer import RenderProfile, render
from quire.contexts.rendering.visual_tree import VisualNode, VisualTree

__all__ = [
    "render",
    "RenderProfile",
    "VisualNode",
    "VisualTree",
    "to_html",
    "preview_resume",
    "export_resume",
    "ExportResult",
    "PdfExporter",
    "PdfExportError",
    "pdf_filename",
]
