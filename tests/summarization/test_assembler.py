"""Tests for summary assembly and title resolution."""

import pytest

from docdigest.summarization.assembler import (
    DISCLAIMER,
    UNTITLED,
    SummaryAssembler,
    assemble_summary,
    resolve_title,
    title_from_filename,
    title_from_text,
)
from docdigest.types.types import Document, KeyPoint, SummaryTooShortError


@pytest.fixture
def points():
    return [KeyPoint("First."), KeyPoint("Second.", page=2)]


class TestFormat:
    def test_template(self, points):
        formatted = SummaryAssembler().format(points, ["Revenue", "Pricing"])
        assert formatted == (
            "Key Points:\n\n"
            "Main Topics: Revenue, Pricing\n\n"
            "1. First.\n\n"
            "2. Second.\n\n" + DISCLAIMER
        )

    def test_no_topics_line_without_topics(self, points):
        formatted = SummaryAssembler().format(points, [])
        assert "Main Topics" not in formatted
        assert formatted.startswith("Key Points:\n\n1. First.")

    def test_topics_line_can_be_disabled(self, points):
        formatted = SummaryAssembler(include_topics_line=False).format(points, ["Revenue"])
        assert "Main Topics" not in formatted


class TestAssemble:
    def test_record_fields(self, points):
        record = SummaryAssembler().assemble("Report", points, ["Revenue"], 120, page_count=2)
        assert record.title == "Report"
        assert record.key_points == tuple(points)
        assert record.topics == ("Revenue",)
        assert record.word_count == 120
        assert record.page_count == 2
        assert record.formatted_summary.endswith(DISCLAIMER)

    def test_too_short_raises(self, points):
        with pytest.raises(SummaryTooShortError) as exc_info:
            SummaryAssembler(min_summary_length=10_000).assemble("Report", points, [], 10)
        assert exc_info.value.context["min_length"] == 10_000

    def test_convenience_function(self, points):
        record = assemble_summary("Report", points, [], 10)
        assert record.to_dict()["keyPoints"] == [{"text": "First."}, {"text": "Second.", "page": 2}]


class TestTitles:
    def test_first_line(self):
        assert title_from_text("ANNUAL REPORT\nbody text follows") == "ANNUAL REPORT"

    def test_all_caps_line_when_first_line_empty(self):
        assert title_from_text("\nQUARTERLY RESULTS 2023\nbody") == "QUARTERLY RESULTS 2023"

    def test_first_sentence_when_first_line_too_long(self):
        text = "Growth continued this year. " + "more words " * 10
        assert title_from_text(text) == "Growth continued this year"

    def test_nothing_found(self):
        assert title_from_text("") is None

    def test_filename_without_extension(self):
        assert title_from_filename("/tmp/report.final.pdf") == "report.final"
        assert title_from_filename(None) is None

    def test_explicit_title_wins(self):
        document = Document.from_text("FIRST LINE", title="  Given  ", metadata_title="Meta")
        assert resolve_title(document) == "Given"

    def test_metadata_title(self):
        assert resolve_title(Document.from_text("FIRST LINE", metadata_title="Meta")) == "Meta"

    def test_blank_title_is_ignored(self):
        assert resolve_title(Document.from_text("FIRST LINE", title="   ")) == "FIRST LINE"

    def test_filename_fallback(self):
        document = Document.from_text("", filename="/tmp/report.final.pdf")
        assert resolve_title(document) == "report.final"

    def test_untitled(self):
        assert resolve_title(Document(pages=())) == UNTITLED
        assert resolve_title(Document.from_text("")) == UNTITLED
