"""
Sentence scoring for extractive key-point selection.

Each candidate gets an average frequency weight per word, scaled by a
position bias and by independent multiplicative boosts for importance
markers, numeric content and main-point lead-ins.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Pattern, Sequence

import numpy as np

from ..types.types import Score, ScoredSentence, SentenceCandidate
from .frequency import TermFrequencyTable, tokenize

logger = logging.getLogger(__name__)

IMPORTANCE_MARKERS = re.compile(
    r"important|significant|key|critical|essential|fundamental|crucial|major|primary",
    re.I,
)
NUMERIC_CONTENT = re.compile(r"\d+(?:[.,]\d+)?%|\d+(?:[.,]\d+)?x|\b\d+\b")
MAIN_POINT_LEAD_IN = re.compile(
    r"^(?:the main|a key|one of the|the primary|the most|the best|the worst"
    r"|the highest|the lowest)",
    re.I,
)


@dataclass(frozen=True)
class ScoringPolicy:
    """
    Tunable constants of the sentence score.

    Attributes:
        position_decay: Fraction of the score lost by the last sentence
        importance_boost: Multiplier for sentences with an importance marker
        numeric_boost: Multiplier for sentences with numbers or percentages
        lead_in_boost: Multiplier for sentences opening with a main-point phrase
        min_token_length: Tokens must be longer than this to count
    """

    position_decay: float = 0.5
    importance_boost: float = 1.3
    numeric_boost: float = 1.2
    lead_in_boost: float = 1.25
    min_token_length: int = 2
    importance_pattern: Pattern[str] = IMPORTANCE_MARKERS
    numeric_pattern: Pattern[str] = NUMERIC_CONTENT
    lead_in_pattern: Pattern[str] = MAIN_POINT_LEAD_IN

    def boost_for(self, sentence: str) -> float:
        """Compound multiplier from all heuristics matching the sentence."""
        factor = 1.0
        if self.importance_pattern.search(sentence):
            factor *= self.importance_boost
        if self.numeric_pattern.search(sentence):
            factor *= self.numeric_boost
        if self.lead_in_pattern.match(sentence.strip()):
            factor *= self.lead_in_boost
        return factor


DEFAULT_POLICY = ScoringPolicy()


def position_boosts(total: int, decay: float = 0.5) -> np.ndarray:
    """Linear bias from 1.0 for the first sentence down towards ``1 - decay``."""
    if total <= 0:
        return np.zeros(0)
    return 1.0 - decay * np.arange(total, dtype=float) / total


class SentenceScorer:
    """Score sentence candidates against a document frequency table."""

    def __init__(self, table: TermFrequencyTable, policy: ScoringPolicy = DEFAULT_POLICY):
        self.table = table
        self.policy = policy

    def base_score(self, sentence: str) -> float:
        """Average table weight of the sentence's qualifying tokens."""
        tokens = [t for t in tokenize(sentence) if len(t) > self.policy.min_token_length]
        return self.table.weight_of(tokens) / max(1, len(tokens))

    def score_one(self, sentence: str, index: int, total: int) -> Score:
        position = 1.0 - self.policy.position_decay * index / max(1, total)
        return self.base_score(sentence) * position * self.policy.boost_for(sentence)

    def score(self, candidates: Sequence[SentenceCandidate]) -> List[ScoredSentence]:
        """
        Score candidates.

        Args:
            candidates: Sentence candidates in document order

        Returns:
            Scored sentences in the same order as the input
        """
        if not candidates:
            return []

        base = np.array([self.base_score(c.text) for c in candidates], dtype=float)
        boosts = np.array([self.policy.boost_for(c.text) for c in candidates], dtype=float)
        scores = base * position_boosts(len(candidates), self.policy.position_decay) * boosts

        logger.debug(
            "Scored %d sentences (max %.3f, mean %.3f)",
            len(candidates),
            float(scores.max()),
            float(scores.mean()),
        )
        return [
            ScoredSentence(candidate=candidate, score=float(value))
            for candidate, value in zip(candidates, scores)
        ]


def score_sentence(
    text: str,
    index: int,
    total: int,
    table: TermFrequencyTable,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> Score:
    """Convenience function scoring a single sentence."""
    return SentenceScorer(table, policy).score_one(text, index, total)
