"""Tests for sentence segmentation."""

import pytest

from docdigest.summarization.segmenter import SentenceSegmenter, is_boilerplate_sentence
from docdigest.types.types import ConfigurationError


def test_splits_on_terminal_punctuation():
    segmenter = SentenceSegmenter(min_length=5, max_length=300)
    text = "Markets rallied today. Did bonds follow? Yes, they did!"
    assert [c.text for c in segmenter.segment(text)] == [
        "Markets rallied today.",
        "Did bonds follow?",
        "Yes, they did!",
    ]


def test_length_bounds_are_exclusive():
    segmenter = SentenceSegmenter(min_length=10, max_length=20)
    exactly_ten = "abcdefghi."
    eleven = "abcdefghij."
    exactly_twenty = "abcdefghijklmnopqrs."
    candidates = segmenter.segment(f"{exactly_ten} {eleven} {exactly_twenty}")
    assert [c.text for c in candidates] == [eleven]


def test_sentences_never_span_paragraphs():
    segmenter = SentenceSegmenter(min_length=5, max_length=300)
    text = "First paragraph without a full stop\n\nSecond paragraph sentence."
    assert [c.text for c in segmenter.segment(text)] == [
        "First paragraph without a full stop",
        "Second paragraph sentence.",
    ]


def test_lines_within_paragraph_are_joined():
    segmenter = SentenceSegmenter(min_length=5, max_length=300)
    text = "This sentence is wrapped\nacross two lines."
    assert segmenter.segment(text)[0].text == "This sentence is wrapped across two lines."


def test_repeated_periods_collapse():
    segmenter = SentenceSegmenter(min_length=3, max_length=300)
    assert segmenter.split("Wait... what happened") == ["Wait.", "what happened"]


def test_indices_assigned_after_filtering():
    segmenter = SentenceSegmenter(min_length=15, max_length=300)
    text = "Too short. This sentence is long enough. Tiny. Another sentence that is long enough."
    candidates = segmenter.segment(text)
    assert [c.index for c in candidates] == [0, 1]
    assert all(c.page is None for c in candidates)


def test_boilerplate_sentences_are_dropped():
    segmenter = SentenceSegmenter(min_length=10, max_length=300)
    text = (
        "Copyright notice for this document appears here. "
        "The meeting on 12/05/2023 approved the budget. "
        "Revenue increased across every region this quarter."
    )
    assert [c.text for c in segmenter.segment(text)] == [
        "Revenue increased across every region this quarter."
    ]


@pytest.mark.parametrize(
    "sentence",
    [
        "All rights reserved by the authors.",
        "Page 7",
        "Table of Contents",
        "Section 4 covers the methodology.",
        "Chapter 2 introduces the model.",
        "Visit www.example.com for more.",
        "Filed on 3/14/2022 by the clerk.",
        "  42  ",
    ],
)
def test_boilerplate_classifier(sentence):
    assert is_boilerplate_sentence(sentence)


def test_regular_sentence_is_not_boilerplate():
    assert not is_boilerplate_sentence("Revenue increased across every region this quarter.")


def test_pages_are_tagged_and_indexed_continuously():
    segmenter = SentenceSegmenter(min_length=10, max_length=300)
    pages = ["The first page has one sentence.", "", "The third page has another one."]
    candidates = segmenter.segment_pages(pages)
    assert [(c.index, c.page) for c in candidates] == [(0, 1), (1, 3)]


def test_zero_candidates_is_valid():
    segmenter = SentenceSegmenter(min_length=30, max_length=300)
    assert segmenter.segment("Short. Also short.") == []


@pytest.mark.parametrize("bounds", [(-1, 10), (20, 20), (50, 10)])
def test_invalid_bounds_raise(bounds):
    with pytest.raises(ConfigurationError):
        SentenceSegmenter(*bounds)
