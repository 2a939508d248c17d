"""Split cleaned text into sentence candidates."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from ..data.preprocessor import FilterRule
from ..types.types import ConfigurationError, SentenceCandidate

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
REPEATED_PERIODS = re.compile(r"\.{2,}")

# Sentences matching any of these are headers, footers or dates, not content
BOILERPLATE_SENTENCE_RULES: Tuple[FilterRule, ...] = (
    FilterRule.compile("rights_notice", r"copyright|all rights reserved|confidential", flags=re.I),
    FilterRule.compile("page_label", r"^page \d+$", flags=re.I),
    FilterRule.compile("table_of_contents", r"^table of contents$", flags=re.I),
    FilterRule.compile("section_label", r"^section \d+", flags=re.I),
    FilterRule.compile("chapter_label", r"^chapter \d+", flags=re.I),
    FilterRule.compile("website", r"\bwww\.[a-zA-Z0-9-]+\.[a-zA-Z]{2,}\b"),
    FilterRule.compile("numeric_date", r"\b\d{1,4}/\d{1,2}/\d{1,4}\b"),
    FilterRule.compile("bare_number", r"^\s*\d+\s*$"),
)


def is_boilerplate_sentence(sentence: str) -> bool:
    """Check if a sentence is likely boilerplate (headers, footers, dates)."""
    return any(rule.matches(sentence) for rule in BOILERPLATE_SENTENCE_RULES)


class SentenceSegmenter:
    """
    Split text into sentence candidates with length and boilerplate filters.

    A candidate is kept when ``min_length < len(sentence) < max_length``.
    Sentences never span a paragraph break.
    """

    def __init__(self, min_length: int = 30, max_length: int = 300):
        if min_length < 0 or max_length <= min_length:
            raise ConfigurationError(
                f"Invalid sentence length bounds ({min_length}, {max_length})",
                context={"min_length": min_length, "max_length": max_length},
            )
        self.min_length = min_length
        self.max_length = max_length

    def split(self, text: str) -> List[str]:
        """Split text into raw sentences without filtering."""
        sentences: List[str] = []
        for paragraph in PARAGRAPH_BREAK.split(text):
            flat = REPEATED_PERIODS.sub(".", paragraph.replace("\n", " "))
            sentences.extend(s for s in SENTENCE_BOUNDARY.split(flat) if s.strip())
        return sentences

    def accepts(self, sentence: str) -> bool:
        trimmed = sentence.strip()
        return (
            self.min_length < len(trimmed) < self.max_length
            and not is_boilerplate_sentence(trimmed)
        )

    def segment(self, text: str, page: Optional[int] = None) -> List[SentenceCandidate]:
        """
        Segment a single text blob.

        Args:
            text: Normalized text
            page: Page number to tag candidates with

        Returns:
            Candidates in document order, indexed from 0
        """
        return self.segment_pages([text], tag_pages=page is not None, first_page=page or 1)

    def segment_pages(
        self,
        pages: Sequence[str],
        tag_pages: bool = True,
        first_page: int = 1,
    ) -> List[SentenceCandidate]:
        """
        Segment a sequence of pages into one ordered candidate list.

        Args:
            pages: Normalized text of each page
            tag_pages: Whether to record the originating page on candidates
            first_page: Number of the first page

        Returns:
            Candidates in document order; indices run across pages
        """
        candidates: List[SentenceCandidate] = []
        total = 0
        for page_number, page_text in enumerate(pages, start=first_page):
            for raw in self.split(page_text):
                total += 1
                if not self.accepts(raw):
                    continue
                candidates.append(
                    SentenceCandidate(
                        raw=raw,
                        text=raw.strip(),
                        index=len(candidates),
                        page=page_number if tag_pages else None,
                    )
                )
        logger.debug("Kept %d of %d sentences", len(candidates), total)
        return candidates
