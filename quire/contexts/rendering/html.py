"""
HTML Projection

Turns a VisualTree into a standalone HTML document. The same HTML is written
out for on-screen preview and posted to the PDF converter.
"""

from typing import Optional

from quire.contexts.rendering.registries import TemplateRegistry
from quire.contexts.rendering.visual_tree import HEADING, TITLE, VisualTree

PAGE_WIDTH = "800px"
DEFAULT_DOCUMENT_TITLE = "Resume"

# HTML tag per node kind; anything not listed is a <div>
NODE_TAGS = {
    TITLE: "h1",
    HEADING: "h2",
}

_default_registry: Optional[TemplateRegistry] = None


def _get_registry() -> TemplateRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def to_html(
    tree: VisualTree,
    title: Optional[str] = None,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Render a VisualTree as an HTML document.

    Args:
        tree: Root node from renderer.render()
        title: Document <title>; defaults to the tree's title text, then "Resume"
        registry: Template registry (defaults to a shared registry)

    Returns:
        HTML string with all resume text escaped
    """
    if registry is None:
        registry = _get_registry()

    if title is None:
        title_node = tree.find(TITLE)
        title = title_node.text if title_node is not None else DEFAULT_DOCUMENT_TITLE

    template = registry.get_template("resume")
    return template.render(tree=tree, title=title, tags=NODE_TAGS, page_width=PAGE_WIDTH)
