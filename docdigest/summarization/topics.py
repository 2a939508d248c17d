"""Topic labels from the document frequency table."""

from __future__ import annotations

from typing import List

from ..types.types import ConfigurationError, Topic
from .frequency import TermFrequencyTable


def capitalize_first(term: str) -> str:
    return term[:1].upper() + term[1:]


def extract_topics(table: TermFrequencyTable, max_topics: int = 10) -> List[Topic]:
    """
    Most frequent terms and phrases, capitalized for display.

    A phrase and one of its words may both appear.

    Args:
        table: Document frequency table
        max_topics: Maximum number of topics

    Returns:
        Topics ordered by descending count; ties keep table order
    """
    if max_topics < 0:
        raise ConfigurationError(
            f"max_topics must not be negative, got {max_topics}",
            context={"max_topics": max_topics},
        )
    return [capitalize_first(term) for term, _ in table.most_common(max_topics)]
