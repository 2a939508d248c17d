"""
Term and phrase frequency analysis.

Builds one immutable ``TermFrequencyTable`` per document holding single-word
counts and weighted 2-/3-word phrase counts. The table feeds both sentence
scoring and topic extraction.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

NON_WORD = re.compile(r"[^\w\s]")

STOP_WORDS = frozenset(
    {
        "a", "an", "the", "and", "but", "or", "for", "nor", "on", "at", "to", "by",
        "is", "are", "was", "were", "be", "been", "being", "in", "of", "if", "it",
        "its", "it's", "that", "than", "then", "this", "these", "those", "what",
        "which", "who", "whom", "whose", "when", "where", "why", "how", "as", "with",
        "from", "into", "during", "including", "until", "against", "among", "throughout",
        "despite", "towards", "upon", "concerning", "about", "over", "before", "after",
        "above", "below", "up", "down", "out", "off", "through", "so", "such", "very",
        "can", "will", "just", "should", "now", "i", "me", "my", "myself", "we", "our",
        "ours", "ourselves", "you", "your", "yours", "yourself", "yourselves", "he",
        "him", "his", "himself", "she", "her", "hers", "herself", "they", "them",
        "their", "theirs", "themselves", "not", "no", "have", "has", "had",
        "having", "do", "does", "did", "doing",
    }
)

# Minimum token length for single words (exclusive) and phrase tokens (exclusive)
WORD_MIN_LENGTH = 3
PHRASE_TOKEN_MIN_LENGTH = 2
MIN_WORD_OCCURRENCES = 2

# n -> (minimum phrase length in characters, weight per occurrence)
PHRASE_RULES: Dict[int, Tuple[int, int]] = {
    2: (7, 3),
    3: (10, 5),
}


def tokenize(text: str) -> List[str]:
    """Lower-case, replace non-word characters with spaces and split."""
    return NON_WORD.sub(" ", text.lower()).split()


class TermFrequencyTable(Mapping):
    """
    Read-only mapping of term or phrase to weighted count.

    Iteration follows insertion order: single words in order of first
    occurrence, then 2-word phrases, then 3-word phrases.
    """

    def __init__(self, counts: Optional[Mapping] = None):
        self._counts = MappingProxyType(dict(counts or {}))

    def __getitem__(self, term: str) -> int:
        return self._counts[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"TermFrequencyTable({len(self)} terms)"

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        """
        Entries by count descending; ties keep insertion order.

        Args:
            n: Number of entries to return, all when None
        """
        ranked = sorted(self._counts.items(), key=lambda item: -item[1])
        return ranked if n is None else ranked[:n]

    def weight_of(self, tokens: Sequence[str]) -> int:
        """Sum of counts over tokens, missing tokens count as zero."""
        return sum(self._counts.get(token, 0) for token in tokens)


def count_words(tokens: Sequence[str]) -> Dict[str, int]:
    """Single words longer than 3 characters, not stop words, seen at least twice."""
    counts = Counter(
        token for token in tokens if len(token) > WORD_MIN_LENGTH and token not in STOP_WORDS
    )
    return {word: count for word, count in counts.items() if count >= MIN_WORD_OCCURRENCES}


def count_phrases(tokens: Sequence[str], size: int) -> Dict[str, int]:
    """
    Weighted counts of ``size``-word windows.

    Windows starting on a stop word are skipped; phrases shorter than the
    minimum character length for their size are ignored.
    """
    min_length, weight = PHRASE_RULES[size]
    counts: Dict[str, int] = {}
    for start in range(len(tokens) - size + 1):
        if tokens[start] in STOP_WORDS:
            continue
        phrase = " ".join(tokens[start : start + size])
        if len(phrase) >= min_length:
            counts[phrase] = counts.get(phrase, 0) + weight
    return counts


def build_frequency_table(text: str) -> TermFrequencyTable:
    """
    Build the frequency table for a document.

    Args:
        text: Normalized document text

    Returns:
        Immutable table of words and phrases
    """
    tokens = tokenize(text)
    phrase_tokens = [token for token in tokens if len(token) > PHRASE_TOKEN_MIN_LENGTH]

    merged: Dict[str, int] = dict(count_words(tokens))
    for size in sorted(PHRASE_RULES):
        merged.update(count_phrases(phrase_tokens, size))
    return TermFrequencyTable(merged)
