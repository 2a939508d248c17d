"""Reading analytics: word and sentence counts, reading time and complexity."""

from __future__ import annotations

import re
from typing import List

from ..types.types import ComplexityLevel, DocumentStatistics

WORDS_PER_MINUTE = 220
SENTENCE_SPLIT = re.compile(r"[.!?]+")

# Upper bounds (exclusive) of the complexity score for each level
COMPLEXITY_LEVELS = (
    (4.5, "Easy"),
    (6.5, "Medium"),
    (8.5, "Moderate"),
)


def count_words(text: str) -> int:
    return len(text.split())


def split_sentences(text: str) -> List[str]:
    return [s for s in SENTENCE_SPLIT.split(text) if s.strip()]


def complexity_level(text: str) -> ComplexityLevel:
    """
    Classify text by ``0.4 * avg word length + 0.6 * avg sentence length``.

    Word length is in characters, sentence length in words.
    """
    words = text.split()
    sentences = split_sentences(text)
    if not words or not sentences:
        return "Unknown"

    avg_word_length = sum(len(word) for word in words) / len(words)
    avg_sentence_length = len(words) / len(sentences)
    score = 0.4 * avg_word_length + 0.6 * avg_sentence_length

    for bound, level in COMPLEXITY_LEVELS:
        if score < bound:
            return level  # type: ignore[return-value]
    return "Complex"


def compute_statistics(text: str) -> DocumentStatistics:
    word_count = count_words(text)
    return DocumentStatistics(
        word_count=word_count,
        sentence_count=len(split_sentences(text)),
        reading_time_minutes=round(word_count / WORDS_PER_MINUTE),
        complexity=complexity_level(text),
    )
