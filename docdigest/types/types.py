"""
Type system for docdigest.

This module provides the immutable records that flow through the
summarization pipeline and the exception hierarchy surfaced by it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from typing_extensions import Literal

# Type Aliases and Custom Types
DocumentText = str  # Type alias for raw document text
Topic = str  # Capitalized term or phrase
Score = float  # Type alias for sentence scores

# Constants and Literals
QualityLevel = Literal["excellent", "good", "fair", "poor"]
ComplexityLevel = Literal["Easy", "Medium", "Moderate", "Complex", "Unknown"]
SourceKind = Literal["document", "transcript"]


@dataclass(frozen=True)
class Document:
    """
    Immutable document representation.

    Attributes:
        pages: Text segments, one per source page (or a single blob)
        title: Explicit title supplied by the caller
        metadata_title: Title field from the source file metadata
        filename: Original file name, used as the last title fallback
    """

    pages: Tuple[str, ...]
    title: Optional[str] = None
    metadata_title: Optional[str] = None
    filename: Optional[str] = None

    @classmethod
    def from_text(cls, text: str, **kwargs: Any) -> Document:
        """Build a single-page document."""
        return cls(pages=(text,), **kwargs)

    @classmethod
    def from_pages(cls, pages: Sequence[str], **kwargs: Any) -> Document:
        return cls(pages=tuple(pages), **kwargs)

    @property
    def text(self) -> str:
        """Full document text with pages separated by blank lines."""
        return "\n\n".join(self.pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)


@dataclass(frozen=True)
class SentenceCandidate:
    """
    A sentence eligible for scoring.

    Attributes:
        raw: Sentence as split from the paragraph
        text: Trimmed sentence text
        index: 0-based position within the ordered document
        page: 1-based originating page, if known
    """

    raw: str
    text: str
    index: int
    page: Optional[int] = None

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class ScoredSentence:
    """A sentence candidate with its score."""

    candidate: SentenceCandidate
    score: Score

    @property
    def index(self) -> int:
        return self.candidate.index

    @property
    def text(self) -> str:
        return self.candidate.text


@dataclass(frozen=True)
class KeyPoint:
    """A selected sentence, optionally tagged with its source page."""

    text: str
    page: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"text": self.text}
        if self.page is not None:
            data["page"] = self.page
        return data


@dataclass(frozen=True)
class ExtractionQuality:
    """
    Confidence assessment of extracted (OCR or transcript) text.

    Attributes:
        quality: Coarse quality level
        confidence: Confidence in [0, 1]
        issues: Human-readable problems that lowered the confidence
    """

    quality: QualityLevel
    confidence: float
    issues: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "quality": self.quality,
            "confidence": round(self.confidence, 3),
            "issues": list(self.issues),
        }


@dataclass(frozen=True)
class DocumentStatistics:
    """Reading analytics for a document."""

    word_count: int
    sentence_count: int
    reading_time_minutes: int
    complexity: ComplexityLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "readingTime": self.reading_time_minutes,
            "complexity": self.complexity,
        }


@dataclass(frozen=True)
class SummaryRecord:
    """
    Final structured summary handed to the caller.

    Attributes:
        title: Resolved document title
        key_points: Key points in document order
        topics: Topics, most frequent first
        formatted_summary: Display text assembled from the template
        word_count: Words in the summarized source text
        page_count: Number of source pages
        statistics: Reading analytics of the source text
        extraction_quality: Quality assessment, set on the OCR and transcript paths
        used_ocr: Whether the OCR text replaced the primary text
    """

    title: str
    key_points: Tuple[KeyPoint, ...]
    topics: Tuple[Topic, ...]
    formatted_summary: str
    word_count: int
    page_count: int = 1
    statistics: Optional[DocumentStatistics] = None
    extraction_quality: Optional[ExtractionQuality] = None
    used_ocr: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to the external JSON shape."""
        data: Dict[str, Any] = {
            "title": self.title,
            "keyPoints": [point.to_dict() for point in self.key_points],
            "topics": list(self.topics),
            "formattedSummary": self.formatted_summary,
            "wordCount": self.word_count,
            "pageCount": self.page_count,
        }
        if self.statistics is not None:
            data["analytics"] = self.statistics.to_dict()
        if self.extraction_quality is not None:
            data["extractionQuality"] = self.extraction_quality.to_dict()
        return data


# Exception Hierarchy
class DigestError(Exception):
    """Base exception class for docdigest."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.cause = cause
        self.timestamp = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause else None,
        }


class EmptyInputError(DigestError):
    """Raised when the text is empty or only whitespace after normalization."""


class InsufficientContentError(DigestError):
    """
    Raised when normalized text is shorter than the content floor.

    Examples:
        - Scanned PDF with a few stray characters of extracted text
        - A document that is only headers and page numbers
    """


class NoCandidateSentencesError(DigestError):
    """
    Raised when segmentation produced no usable sentences.

    Callers are expected to substitute a placeholder key point.
    """


class SummaryTooShortError(DigestError):
    """Raised when the assembled summary is too short to be meaningful."""


class ConfigurationError(DigestError):
    """
    Raised when there's an issue with configuration.

    Examples:
        - Invalid sentence length bounds
        - Config file not found
        - Unparseable YAML
    """


__all__: List[str] = [
    "ComplexityLevel",
    "ConfigurationError",
    "DigestError",
    "Document",
    "DocumentStatistics",
    "DocumentText",
    "EmptyInputError",
    "ExtractionQuality",
    "InsufficientContentError",
    "KeyPoint",
    "NoCandidateSentencesError",
    "QualityLevel",
    "Score",
    "ScoredSentence",
    "SentenceCandidate",
    "SourceKind",
    "SummaryRecord",
    "SummaryTooShortError",
    "Topic",
]
