"""
Resume Document Data Structures

Defines the parsed form of a resume body: a Document made of titled or untitled
Sections, each holding an ordered run of Lines. These structures are produced by
content_parser.parse() and consumed by the Rendering context.

Documents are immutable. Any edit to the source text produces a new Document by
re-parsing.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

BOLD_MARKER = "**"


@dataclass(frozen=True)
class Line:
    """
    A single raw content line within a section.

    Attributes:
        text: Line text exactly as it appeared in the source (blank lines are "")
    """

    text: str

    @property
    def emphasized(self) -> bool:
        """True when the whole line is wrapped in bold markers (**text**)."""
        return self.text.startswith(BOLD_MARKER) and self.text.endswith(BOLD_MARKER)

    @property
    def plain_text(self) -> str:
        """Line text with every bold marker removed."""
        return self.text.replace(BOLD_MARKER, "")

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class Section:
    """
    A contiguous run of content lines, optionally introduced by a heading.

    Attributes:
        heading: Section heading text, or None for leading content before any heading
        lines: Lines in document order; never empty for sections emitted by the parser
    """

    heading: Optional[str] = None
    lines: Tuple[Line, ...] = field(default_factory=tuple)

    @property
    def texts(self) -> Tuple[str, ...]:
        """Raw text of each line, in order."""
        return tuple(line.text for line in self.lines)


@dataclass(frozen=True)
class Document:
    """
    Parsed representation of one resume body.

    Attributes:
        title: Name/header line from the last title marker, or None if absent
        sections: Sections in document order
    """

    title: Optional[str] = None
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return self.title is None and not self.sections

    def headings(self) -> Tuple[Optional[str], ...]:
        """Heading of each section, in order (None for untitled sections)."""
        return tuple(section.heading for section in self.sections)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form used by CLI output and debugging."""
        return {
            "title": self.title,
            "sections": [
                {"heading": section.heading, "lines": list(section.texts)}
                for section in self.sections
            ],
        }
