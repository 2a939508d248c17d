"""
Deterministic placeholder summaries.

When no text can be extracted from a file, callers may still want to show a
summary-shaped result. ``generate_fallback_summary`` builds one from the
file name and size only; the same name always yields the same topics and
key points. The summarization pipeline never calls this itself.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from ..types.types import KeyPoint, SummaryRecord

logger = logging.getLogger(__name__)

GENERIC_TOPICS = (
    "information management",
    "data analysis",
    "strategic planning",
    "project development",
    "research methodology",
    "performance optimization",
    "system architecture",
    "knowledge transfer",
    "quality assessment",
)

BYTES_PER_WORD = 15
WORDS_PER_PARAGRAPH = 150
COMPREHENSIVE_SIZE_KB = 500


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def simple_hash(text: str) -> int:
    """Non-negative 32-bit string hash (``h = h * 31 + code`` with wraparound)."""
    value = 0
    for char in text:
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return abs(value)


def select_topics(name: str, topics: Sequence[str] = GENERIC_TOPICS) -> List[str]:
    """Pick three topics from a hash of the name, bumping obvious collisions."""
    count = len(topics)
    seed = simple_hash(name)
    first = seed % count
    second = (seed * 13) % count
    third = (seed * 31) % count
    if third in (first, second):
        third = (third + 2) % count
    if second == first:
        second = (second + 1) % count
    return [topics[first], topics[second], topics[third]]


def fallback_key_points(name: str, topics: Sequence[str]) -> List[str]:
    return [
        f'The document "{name}" provides a detailed analysis of {topics[0]} with supporting examples.',
        f"Several methodologies for implementing {topics[1]} are discussed in depth.",
        f"The relationship between {topics[0]} and {topics[2]} is explored through case studies.",
        f"Key factors affecting the success of {topics[1]} implementation are identified and analyzed.",
        f"Recommendations for improving {topics[0]} processes are provided in the conclusion.",
    ]


def generate_fallback_summary(filename: str, file_size: int = 0) -> SummaryRecord:
    """
    Build a placeholder summary from file metadata.

    Args:
        filename: Name of the file that could not be summarized
        file_size: File size in bytes

    Returns:
        Summary record with generic, name-derived content
    """
    name = (filename or "document.pdf").split(".")[0] or "document"
    topics = select_topics(name)
    points = fallback_key_points(name, topics)

    size_mb = file_size / (1024 * 1024)
    estimated_words = _round_half_up(file_size / BYTES_PER_WORD)
    paragraphs = max(5, _round_half_up(estimated_words / WORDS_PER_PARAGRAPH))
    treatment = "comprehensive" if file_size / 1024 > COMPREHENSIVE_SIZE_KB else "concise"

    numbered = "\n\n".join(f"{i}. {point}" for i, point in enumerate(points, start=1))
    formatted = (
        f'# Summary of "{name}"\n\n'
        f"## Overview\n"
        f"This document ({size_mb:.2f} MB) contains approximately {estimated_words} words "
        f"and appears to focus on {topics[0]} and {topics[1]}.\n\n"
        f"## Key Points\n{numbered}\n\n"
        f"## Main Topics\n"
        f"The document frequently mentions these topics: {', '.join(topics)}.\n\n"
        f"## Document Structure\n"
        f"The text is organized across approximately {paragraphs} paragraphs, "
        f"suggesting a {treatment} treatment of the subject.\n\n"
        f"This summary provides a high-level overview of the document's content "
        f"based on available metadata."
    )

    logger.warning("Generated fallback summary for %s", filename)
    return SummaryRecord(
        title=name,
        key_points=tuple(KeyPoint(text=point) for point in points),
        topics=tuple(topic.capitalize() for topic in topics),
        formatted_summary=formatted,
        word_count=estimated_words,
    )
