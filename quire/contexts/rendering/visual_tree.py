"""
Visual Tree

Output structure of the template renderer. A VisualTree is a plain tree of
VisualNodes; each node has a kind, optional text, CSS-style properties, and
children. The same tree feeds the on-screen preview and the PDF export path.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

# Node kinds
ROOT = "root"
HEADER = "header"
TITLE = "title"
TITLE_UNDERLINE = "title-underline"
SECTION = "section"
HEADING = "heading"
BODY = "body"
LINE = "line"
EMPHASIS = "emphasis"

NODE_KINDS = (ROOT, HEADER, TITLE, TITLE_UNDERLINE, SECTION, HEADING, BODY, LINE, EMPHASIS)


@dataclass
class VisualNode:
    """
    One block in the rendered document.

    Attributes:
        kind: Node kind (one of NODE_KINDS)
        text: Text content for leaf nodes (title, heading, line, emphasis)
        style: CSS property -> value
        children: Child nodes in display order
    """

    kind: str
    text: Optional[str] = None
    style: Dict[str, str] = field(default_factory=dict)
    children: List["VisualNode"] = field(default_factory=list)

    def iter(self) -> Iterator["VisualNode"]:
        """Walk this node and its descendants depth-first, in display order."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, kind: str) -> List["VisualNode"]:
        """All nodes of the given kind in display order."""
        return [node for node in self.iter() if node.kind == kind]

    def find(self, kind: str) -> Optional["VisualNode"]:
        """First node of the given kind, or None."""
        return next((node for node in self.iter() if node.kind == kind), None)

    @property
    def css(self) -> str:
        """Style properties as an inline CSS declaration string."""
        return "; ".join(f"{prop}: {value}" for prop, value in self.style.items())

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind}
        if self.text is not None:
            data["text"] = self.text
        if self.style:
            data["style"] = dict(self.style)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


# The root node is the tree
VisualTree = VisualNode
