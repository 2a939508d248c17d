"""Type definitions for docdigest."""

from .types import (
    ConfigurationError,
    DigestError,
    Document,
    DocumentStatistics,
    DocumentText,
    EmptyInputError,
    ExtractionQuality,
    InsufficientContentError,
    KeyPoint,
    NoCandidateSentencesError,
    Score,
    ScoredSentence,
    SentenceCandidate,
    SummaryRecord,
    SummaryTooShortError,
    Topic,
)

__all__ = [
    "DocumentText",
    "Score",
    "Topic",
    "Document",
    "SentenceCandidate",
    "ScoredSentence",
    "KeyPoint",
    "ExtractionQuality",
    "DocumentStatistics",
    "SummaryRecord",
    "DigestError",
    "EmptyInputError",
    "InsufficientContentError",
    "NoCandidateSentencesError",
    "SummaryTooShortError",
    "ConfigurationError",
]
