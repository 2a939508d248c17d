"""Greedy, diversity-aware selection of key points."""

from __future__ import annotations

import logging
import re
from typing import FrozenSet, List, Sequence, Set

from ..types.types import ConfigurationError, KeyPoint, ScoredSentence

logger = logging.getLogger(__name__)

WORD = re.compile(r"\w+")
KEYWORD_MIN_LENGTH = 4
STUTTER_WORDS = frozenset({"these", "those", "their", "there", "about", "which", "where"})


def extract_keywords(sentence: str) -> FrozenSet[str]:
    """Lower-cased words longer than four characters, minus stutter words."""
    return frozenset(
        word
        for word in WORD.findall(sentence.lower())
        if len(word) > KEYWORD_MIN_LENGTH and word not in STUTTER_WORDS
    )


class KeyPointSelector:
    """
    Pick the highest scoring sentences that do not repeat a keyword.

    Args:
        limit: Maximum number of key points
        backfill: Fill slots left empty by the diversity filter with the
            best rejected sentences
    """

    def __init__(self, limit: int = 20, backfill: bool = False):
        if limit < 1:
            raise ConfigurationError(
                f"Key point limit must be positive, got {limit}", context={"limit": limit}
            )
        self.limit = limit
        self.backfill = backfill

    def rank(self, scored: Sequence[ScoredSentence]) -> List[ScoredSentence]:
        """Accepted sentences in document order."""
        ranked = sorted(scored, key=lambda s: -s.score)
        used: Set[str] = set()
        accepted: List[ScoredSentence] = []
        rejected: List[ScoredSentence] = []

        for sentence in ranked:
            if len(accepted) >= self.limit:
                break
            keywords = extract_keywords(sentence.text)
            if keywords & used:
                rejected.append(sentence)
                continue
            accepted.append(sentence)
            used |= keywords

        if self.backfill and len(accepted) < self.limit:
            # rejected is already in score order
            shortfall = self.limit - len(accepted)
            accepted.extend(rejected[:shortfall])

        logger.debug(
            "Selected %d of %d sentences (%d rejected as repetitive)",
            len(accepted),
            len(scored),
            len(rejected),
        )
        return sorted(accepted, key=lambda s: s.index)

    def select(self, scored: Sequence[ScoredSentence]) -> List[KeyPoint]:
        """
        Select key points.

        Args:
            scored: Scored sentences in any order

        Returns:
            At most ``limit`` key points, in original document order
        """
        return [KeyPoint(text=s.text, page=s.candidate.page) for s in self.rank(scored)]
