"""
Template Renderer

Projects a parsed Document into a VisualTree for a template variant and a
StyleConfig. There is exactly one rendering path; the preview and the PDF
export differ only in which render profile they ask for and in who consumes
the tree.

Render profiles:
    emphasis-aware  Lines wrapped in **bold markers** become their own emphasis
                    block with the markers stripped.
    plain           Every line is rendered verbatim, bold markers included.
"""

from enum import Enum
from typing import Dict, Optional, Union

from quire.contexts.rendering.visual_tree import (
    BODY,
    EMPHASIS,
    HEADER,
    HEADING,
    LINE,
    ROOT,
    SECTION,
    TITLE,
    TITLE_UNDERLINE,
    VisualNode,
    VisualTree,
)
from quire.contexts.templating.document_structure import Document, Line, Section
from quire.contexts.templating.presets import default_style, template_font
from quire.contexts.templating.style import HeaderStyle, StyleConfig, Template, coerce_enum

BASE_FONT_SIZE = "14px"
BASE_LINE_HEIGHT = "1.6"
BODY_TEXT_COLOR = "#1f2937"


class RenderProfile(Enum):
    """How content lines are treated."""

    PLAIN = "plain"
    EMPHASIS_AWARE = "emphasis-aware"


# Heading typography per template: modern is larger and heavier
HEADING_TYPOGRAPHY = {
    Template.CLASSIC: {"font-size": "1.25rem", "font-weight": "700", "border-width": "1px"},
    Template.MODERN: {"font-size": "1.5rem", "font-weight": "800", "border-width": "2px"},
}


def resolve_base_font(template: Template, style: StyleConfig) -> str:
    """Explicit style font if set, otherwise the template's default font stack."""
    if style.font_family:
        return style.font_family
    return template_font(template)


def header_background(style: StyleConfig) -> Dict[str, str]:
    """CSS background for the title header according to the header style."""
    if style.header_style is HeaderStyle.GRADIENT:
        return {
            "background": (
                f"linear-gradient(135deg, {style.primary_color}, {style.accent_color})"
            )
        }
    return {"background-color": style.primary_color}


def _render_header(title: str, template: Template, style: StyleConfig) -> VisualNode:
    header = VisualNode(
        kind=HEADER,
        style={
            **header_background(style),
            "color": "#ffffff",
            "padding": "2rem",
            "margin-bottom": "2rem",
            "border-radius": "0.5rem",
        },
    )
    header.children.append(
        VisualNode(
            kind=TITLE,
            text=title,
            style={"font-size": "2.25rem", "font-weight": "700", "margin-bottom": "0.5rem"},
        )
    )
    if template is Template.MODERN:
        header.children.append(
            VisualNode(
                kind=TITLE_UNDERLINE,
                style={
                    "height": "0.25rem",
                    "width": "6rem",
                    "background-color": "rgba(255, 255, 255, 0.5)",
                    "border-radius": "9999px",
                },
            )
        )
    return header


def _render_heading(heading: str, template: Template, style: StyleConfig) -> VisualNode:
    typography = HEADING_TYPOGRAPHY[template]
    return VisualNode(
        kind=HEADING,
        text=heading,
        style={
            "color": style.primary_color,
            "border-bottom": f"{typography['border-width']} solid {style.accent_color}",
            "font-size": typography["font-size"],
            "font-weight": typography["font-weight"],
            "margin-bottom": "1rem",
            "padding-bottom": "0.5rem",
        },
    )


def _render_line(line: Line, style: StyleConfig, profile: RenderProfile) -> VisualNode:
    if profile is RenderProfile.EMPHASIS_AWARE and line.emphasized:
        return VisualNode(
            kind=EMPHASIS,
            text=line.plain_text,
            style={
                "color": style.primary_color,
                "font-weight": "600",
                "margin-top": "0.75rem",
                "margin-bottom": "0.25rem",
            },
        )
    node = VisualNode(kind=LINE, text=line.text)
    if line.is_blank:
        node.style["min-height"] = "1em"
    return node


def _render_section(
    section: Section, template: Template, style: StyleConfig, profile: RenderProfile
) -> VisualNode:
    node = VisualNode(kind=SECTION, style={"margin-bottom": "2rem"})
    if section.heading:
        node.children.append(_render_heading(section.heading, template, style))

    body = VisualNode(
        kind=BODY, style={"white-space": "pre-wrap", "color": BODY_TEXT_COLOR}
    )
    body.children.extend(_render_line(line, style, profile) for line in section.lines)
    node.children.append(body)
    return node


def render(
    document: Document,
    template: Union[Template, str] = Template.CLASSIC,
    style: Optional[StyleConfig] = None,
    profile: Union[RenderProfile, str] = RenderProfile.EMPHASIS_AWARE,
) -> VisualTree:
    """
    Render a Document into a VisualTree.

    Args:
        document: Parsed resume document
        template: Template variant ("classic" or "modern")
        style: Style configuration; None uses the template's default style
        profile: Line treatment ("emphasis-aware" or "plain")

    Returns:
        Root VisualNode. An empty document yields a root with no children.

    Example:
        >>> tree = render(parse("## Jane Doe\\n### Summary\\nEngineer."), "modern")
        >>> [child.kind for child in tree.children]
        ['header', 'section']
    """
    template = coerce_enum(Template, template, "template")
    profile = coerce_enum(RenderProfile, profile, "render profile")
    if style is None:
        style = default_style(template)

    root = VisualNode(
        kind=ROOT,
        style={
            "font-family": resolve_base_font(template, style),
            "font-size": BASE_FONT_SIZE,
            "line-height": BASE_LINE_HEIGHT,
        },
    )

    if document.title:
        root.children.append(_render_header(document.title, template, style))

    for section in document.sections:
        if not section.lines:
            continue
        root.children.append(_render_section(section, template, style, profile))

    return root
