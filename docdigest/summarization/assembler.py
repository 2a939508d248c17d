"""
Summary assembly and title resolution.

The formatted summary follows a fixed template::

    Key Points:

    Main Topics: Revenue growth, Pricing

    1. First key point.

    2. Second key point.

    Note: This summary was automatically generated and highlights the key
    information from the document.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Optional, Sequence

from ..types.types import Document, KeyPoint, SummaryRecord, SummaryTooShortError, Topic

logger = logging.getLogger(__name__)

HEADING = "Key Points:"
DISCLAIMER = (
    "Note: This summary was automatically generated and highlights the key "
    "information from the document."
)
UNTITLED = "Untitled Document"

MAX_TITLE_LENGTH = 100
MIN_TITLE_LENGTH = 10
TITLE_SCAN_LINES = 5
SENTENCE_END = re.compile(r"[.!?]")


class SummaryAssembler:
    """
    Compose the display text and the final summary record.

    Args:
        min_summary_length: Shortest acceptable formatted summary
        include_topics_line: Whether to render the "Main Topics" line
    """

    def __init__(self, min_summary_length: int = 50, include_topics_line: bool = True):
        self.min_summary_length = min_summary_length
        self.include_topics_line = include_topics_line

    def format(self, key_points: Sequence[KeyPoint], topics: Sequence[Topic]) -> str:
        parts = [f"{HEADING}\n\n"]
        if self.include_topics_line and topics:
            parts.append(f"Main Topics: {', '.join(topics)}\n\n")
        for number, point in enumerate(key_points, start=1):
            parts.append(f"{number}. {point.text}\n\n")
        parts.append(DISCLAIMER)
        return "".join(parts)

    def assemble(
        self,
        title: str,
        key_points: Sequence[KeyPoint],
        topics: Sequence[Topic],
        word_count: int,
        **metadata: Any,
    ) -> SummaryRecord:
        """
        Build the summary record.

        Args:
            title: Resolved document title
            key_points: Key points in document order
            topics: Topics, most frequent first
            word_count: Words in the summarized text
            **metadata: Extra ``SummaryRecord`` fields (page_count, statistics, ...)

        Raises:
            SummaryTooShortError: Formatted text is below ``min_summary_length``
        """
        formatted = self.format(key_points, topics)
        if len(formatted) < self.min_summary_length:
            raise SummaryTooShortError(
                f"Summary has {len(formatted)} characters, below the "
                f"{self.min_summary_length} minimum",
                context={"length": len(formatted), "min_length": self.min_summary_length},
            )
        return SummaryRecord(
            title=title,
            key_points=tuple(key_points),
            topics=tuple(topics),
            formatted_summary=formatted,
            word_count=word_count,
            **metadata,
        )


def assemble_summary(
    title: str,
    key_points: Sequence[KeyPoint],
    topics: Sequence[Topic],
    word_count: int,
    min_summary_length: int = 50,
) -> SummaryRecord:
    """Convenience function using default template settings."""
    return SummaryAssembler(min_summary_length).assemble(title, key_points, topics, word_count)


def _is_title_length(text: str) -> bool:
    return MIN_TITLE_LENGTH < len(text) < MAX_TITLE_LENGTH


def title_from_text(first_page: str) -> Optional[str]:
    """
    Guess a title from the raw text of the first page.

    Tries the first line, then an all-caps line near the top, then the
    first sentence.
    """
    lines = [line.strip() for line in first_page.split("\n")]
    if lines and 0 < len(lines[0]) < MAX_TITLE_LENGTH:
        return lines[0]

    for line in lines[:TITLE_SCAN_LINES]:
        if line.upper() == line and _is_title_length(line):
            return line

    first_sentence = SENTENCE_END.split(first_page, maxsplit=1)[0].strip()
    if _is_title_length(first_sentence):
        return first_sentence
    return None


def title_from_filename(filename: Optional[str]) -> Optional[str]:
    if not filename:
        return None
    stem, _ = os.path.splitext(os.path.basename(filename))
    return stem or None


def resolve_title(document: Document) -> str:
    """
    Resolve the display title of a document.

    Order: explicit title, metadata title, first-page heuristics,
    file name without extension, then ``"Untitled Document"``.
    """
    for candidate in (document.title, document.metadata_title):
        if candidate and candidate.strip():
            return candidate.strip()

    if document.pages:
        guessed = title_from_text(document.pages[0])
        if guessed:
            return guessed

    from_file = title_from_filename(document.filename)
    if from_file:
        return from_file

    logger.debug("No title found, using placeholder")
    return UNTITLED
