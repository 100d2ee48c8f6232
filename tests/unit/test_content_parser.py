"""Unit tests for the resume content parser."""

import pytest

from quire.contexts.templating import ContentParsingError, Document, Line, Section, parse

JANE_DOE = """## Jane Doe
### Summary
Experienced engineer.
### Experience
**Acme Corp**
Built things."""


@pytest.mark.unit
class TestDocumentStructure:
    """Title and section assembly."""

    def test_end_to_end_example(self):
        """Title, headings, and raw lines come out in document order."""
        doc = parse(JANE_DOE)

        assert doc.title == "Jane Doe"
        assert doc.headings() == ("Summary", "Experience")
        assert doc.sections[0].texts == ("Experienced engineer.",)
        assert doc.sections[1].texts == ("**Acme Corp**", "Built things.")

    def test_to_dict(self):
        doc = parse(JANE_DOE)
        assert doc.to_dict() == {
            "title": "Jane Doe",
            "sections": [
                {"heading": "Summary", "lines": ["Experienced engineer."]},
                {"heading": "Experience", "lines": ["**Acme Corp**", "Built things."]},
            ],
        }

    def test_last_title_wins(self):
        """A later title marker overwrites the earlier one; content keeps its heading."""
        text = "### A\ncontent a\n## Name1\ncontent b\n## Name2"
        doc = parse(text)

        assert doc.title == "Name2"
        assert doc.sections == (
            Section(heading="A", lines=(Line("content a"),)),
            Section(heading=None, lines=(Line("content b"),)),
        )

    def test_title_between_heading_and_content_keeps_heading(self):
        """A title marker does not clear a heading that has no content yet."""
        doc = parse("### Skills\n## Jane\nPython")

        assert doc.title == "Jane"
        assert doc.sections == (Section(heading="Skills", lines=(Line("Python"),)),)

    def test_leading_content_is_untitled_section(self):
        doc = parse("Intro line\n### Summary\nText")

        assert doc.headings() == (None, "Summary")
        assert doc.sections[0].texts == ("Intro line",)

    def test_no_empty_leading_section(self):
        """Starting directly with a heading emits no untitled section."""
        doc = parse("### Summary\nText")
        assert len(doc.sections) == 1
        assert doc.sections[0].heading == "Summary"

    def test_marker_whitespace_is_stripped(self):
        doc = parse("##    Jane Doe   \n###   Summary  \nText")
        assert doc.title == "Jane Doe"
        assert doc.sections[0].heading == "Summary"

    def test_empty_heading_text_is_untitled(self):
        doc = parse("### \nText")
        assert doc.sections == (Section(heading=None, lines=(Line("Text"),)),)

    def test_marker_without_space_is_content(self):
        """'###Skills' and '#### Deep' are ordinary content lines."""
        doc = parse("###Skills\n#### Deep")
        assert doc.sections[0].heading is None
        assert doc.sections[0].texts == ("###Skills", "#### Deep")


@pytest.mark.unit
class TestLineHandling:
    """Separators, blank lines, and raw text preservation."""

    def test_leading_blank_lines_dropped(self):
        doc = parse("### Skills\n\n\nPython, Go")
        assert doc.sections == (Section(heading="Skills", lines=(Line("Python, Go"),)),)

    def test_inner_blank_lines_kept(self):
        doc = parse("### Experience\nfirst\n\n\nsecond")
        assert doc.sections[0].texts == ("first", "", "", "second")

    def test_whitespace_only_line_is_blank(self):
        doc = parse("### E\nfirst\n   \t\nsecond")
        assert doc.sections[0].texts == ("first", "", "second")

    def test_trailing_newline_keeps_blank_line(self):
        doc = parse("### E\nfirst\n")
        assert doc.sections[0].texts == ("first", "")

    def test_separator_never_in_lines(self):
        text = "---\n### A\none\n---\ntwo\n  ---  \n### B\n---\nthree\n---"
        doc = parse(text)

        for section in doc.sections:
            assert "---" not in [line.text.strip() for line in section.lines]
        assert doc.sections[0].texts == ("one", "two")
        assert doc.sections[1].texts == ("three",)

    def test_separator_does_not_flush(self):
        doc = parse("### A\none\n---\ntwo")
        assert len(doc.sections) == 1

    def test_raw_line_text_preserved(self):
        doc = parse("### E\n    - indented  bullet  \n**Acme**")
        assert doc.sections[0].texts == ("    - indented  bullet  ", "**Acme**")

    def test_crlf_line_endings(self):
        doc = parse("## Jane\r\n### Summary\r\nText\r\n")
        assert doc.title == "Jane"
        assert doc.sections[0].heading == "Summary"
        assert doc.sections[0].texts == ("Text", "")


@pytest.mark.unit
class TestDroppedHeadingQuirk:
    """Headings with no content before the next heading or end of input are discarded."""

    def test_consecutive_headings(self):
        doc = parse("### A\n### B\ncontent")
        assert doc.sections == (Section(heading="B", lines=(Line("content"),)),)

    def test_heading_at_end_of_input(self):
        doc = parse("### A\ncontent\n### B")
        assert doc.headings() == ("A",)

    def test_heading_followed_only_by_blank_lines(self):
        doc = parse("### A\n\n\n")
        assert doc.sections == ()


@pytest.mark.unit
class TestTotality:
    """Parsing never fails on strings and rejects everything else."""

    @pytest.mark.parametrize(
        "text",
        ["", "\n", "\n\n\n", "---", "---\n---\n", "## ", "### ", "**", "#", "   "],
    )
    def test_degenerate_inputs_parse(self, text):
        doc = parse(text)
        assert isinstance(doc, Document)
        for section in doc.sections:
            assert section.lines

    def test_empty_string(self):
        doc = parse("")
        assert doc.title is None
        assert doc.sections == ()
        assert doc.is_empty

    @pytest.mark.parametrize("value", [None, 42, b"## Jane", ["## Jane"]])
    def test_non_string_rejected(self, value):
        with pytest.raises(ContentParsingError):
            parse(value)

    def test_error_is_type_error(self):
        with pytest.raises(TypeError, match="bytes"):
            parse(b"text")

    def test_parse_is_repeatable(self):
        assert parse(JANE_DOE) == parse(JANE_DOE)


@pytest.mark.unit
class TestLine:
    """Emphasis detection on individual lines."""

    def test_fully_wrapped_line_is_emphasized(self):
        line = Line("**Acme Corp**")
        assert line.emphasized
        assert line.plain_text == "Acme Corp"

    def test_partial_bold_is_not_emphasized(self):
        assert not Line("**Acme** Corp").emphasized
        assert not Line("Acme **Corp**x").emphasized

    def test_plain_text_removes_all_markers(self):
        assert Line("**Senior** at **Acme**").plain_text == "Senior at Acme"

    def test_blank(self):
        assert Line("").is_blank
        assert not Line("x").is_blank
