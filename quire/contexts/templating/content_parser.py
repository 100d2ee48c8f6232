"""
Resume Content Parser

Converts a flat resume body (as written by the AI collaborator) into a Document.

Grammar, checked per line in priority order:
    "### Heading"  starts a new section
    "## Name"      sets the document title (last one wins)
    "---"          separator, dropped
    blank line     kept only after content in the current section
    anything else  content line, kept verbatim
"""

from typing import List, Optional

from quire.contexts.templating.document_structure import Document, Line, Section
from quire.contexts.templating.exceptions import ContentParsingError

SECTION_MARKER = "### "
TITLE_MARKER = "## "
SEPARATOR = "---"


class _SectionAccumulator:
    """Collects lines for the section being built and the heading waiting for them."""

    def __init__(self):
        self.pending_heading: Optional[str] = None
        self.lines: List[Line] = []
        self.sections: List[Section] = []

    def add_content(self, text: str) -> None:
        self.lines.append(Line(text))

    def add_blank(self) -> None:
        # Leading blank lines in a section are dropped
        if self.lines:
            self.lines.append(Line(""))

    def flush(self) -> None:
        """
        Emit the accumulated lines as a Section.

        A heading with no content yet stays pending and is replaced by the next
        heading, so headings without content never produce empty sections.
        """
        if not self.lines:
            return
        self.sections.append(Section(heading=self.pending_heading, lines=tuple(self.lines)))
        self.pending_heading = None
        self.lines = []


def _strip_marker(line: str, marker: str) -> Optional[str]:
    """Remainder after a line marker, stripped; None if nothing is left."""
    remainder = line[len(marker):].strip()
    return remainder or None


def parse(text: str) -> Document:
    """
    Parse resume body text into a Document.

    Single forward pass with no backtracking. Parsing never fails for string
    input: unrecognized markers fall through as ordinary content lines.

    Args:
        text: Resume body (markdown-like, possibly empty)

    Returns:
        Document with title and sections in document order

    Raises:
        ContentParsingError: If text is not a string

    Example:
        >>> doc = parse("## Jane Doe\\n### Summary\\nExperienced engineer.")
        >>> doc.title
        'Jane Doe'
        >>> doc.sections[0].heading
        'Summary'
    """
    if not isinstance(text, str):
        raise ContentParsingError(
            "Resume content must be a string", received_type=type(text).__name__
        )

    title: Optional[str] = None
    accumulator = _SectionAccumulator()

    for raw_line in text.split("\n"):
        line = raw_line[:-1] if raw_line.endswith("\r") else raw_line

        if line.startswith(SECTION_MARKER):
            accumulator.flush()
            accumulator.pending_heading = _strip_marker(line, SECTION_MARKER)
        elif line.startswith(TITLE_MARKER):
            accumulator.flush()
            title = _strip_marker(line, TITLE_MARKER)
        elif line.strip() == SEPARATOR:
            continue
        elif not line.strip():
            accumulator.add_blank()
        else:
            accumulator.add_content(line)

    accumulator.flush()

    return Document(title=title, sections=tuple(accumulator.sections))
