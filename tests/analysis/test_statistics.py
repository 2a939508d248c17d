import pytest

from docdigest.analysis.statistics import (
    complexity_level,
    compute_statistics,
    count_words,
    split_sentences,
)


def test_compute_statistics():
    stats = compute_statistics("The cat sat. The dog ran.")
    assert stats.word_count == 6
    assert stats.sentence_count == 2
    assert stats.reading_time_minutes == 0
    assert stats.complexity == "Easy"


def test_reading_time():
    assert compute_statistics("word " * 440).reading_time_minutes == 2


@pytest.mark.parametrize(
    "text, level",
    [
        ("The cat sat. The dog ran.", "Easy"),
        ("abcde abcde abcde abcde abcd.", "Medium"),
        ("abcde " * 9 + "abcde.", "Moderate"),
        ("abcdefgh " * 29 + "abcdefgh.", "Complex"),
        ("", "Unknown"),
        ("...", "Unknown"),
    ],
)
def test_complexity_level(text, level):
    assert complexity_level(text) == level


def test_split_sentences_drops_empty_parts():
    assert split_sentences("One. Two!! Three?") == ["One", " Two", " Three"]


def test_count_words():
    assert count_words("  alpha\nbeta\tgamma ") == 3


def test_to_dict():
    assert compute_statistics("The cat sat. The dog ran.").to_dict() == {
        "wordCount": 6,
        "sentenceCount": 2,
        "readingTime": 0,
        "complexity": "Easy",
    }
