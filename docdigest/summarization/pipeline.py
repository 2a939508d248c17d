"""
Extractive summarization pipeline.

Wires the stages together:

    raw text -> TextNormalizer -> SentenceSegmenter -> build_frequency_table
             -> SentenceScorer -> KeyPointSelector -> SummaryAssembler

Example usage:
    >>> record = summarize(report_text, max_key_points=5)
    >>> for point in record.key_points:
    ...     print(point.text)

    >>> # Per-page text with an OCR fallback for scanned documents
    >>> summarizer = ExtractiveSummarizer(SummarizerConfig(max_key_points=12))
    >>> record = summarizer.summarize_document(
    ...     Document.from_pages(pages, filename="report.pdf"), ocr_pages=ocr_pages
    ... )
"""

from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional, Sequence, Tuple, Union

from ..analysis.quality import assess_extraction_quality, assess_transcript_quality
from ..analysis.statistics import compute_statistics
from ..data.preprocessor import TextNormalizer, ensure_content
from ..types.types import (
    Document,
    ExtractionQuality,
    KeyPoint,
    NoCandidateSentencesError,
    SourceKind,
    SummaryRecord,
    Topic,
)
from ..utils.error_handling import handle_errors
from ..utils.schema import SummarizerConfig
from .assembler import SummaryAssembler, resolve_title
from .frequency import TermFrequencyTable, build_frequency_table
from .scorer import DEFAULT_POLICY, ScoringPolicy, SentenceScorer
from .segmenter import SentenceSegmenter
from .selector import KeyPointSelector
from .topics import extract_topics

logger = logging.getLogger(__name__)

NO_CONTENT_PLACEHOLDER = "No meaningful content found in the document."


def join_pages(pages: Sequence[str]) -> str:
    return "\n\n".join(page for page in pages if page)


class ExtractiveSummarizer:
    """
    Summarize documents into key points and topics.

    Args:
        config: Thresholds and limits, defaults to ``SummarizerConfig()``
        policy: Sentence scoring constants
        source: ``"transcript"`` enables transcript cleaning and quality checks
    """

    def __init__(
        self,
        config: Optional[SummarizerConfig] = None,
        policy: ScoringPolicy = DEFAULT_POLICY,
        source: SourceKind = "document",
    ):
        self.config = config or SummarizerConfig()
        self.policy = policy
        self.source = source

        self.normalizer = TextNormalizer.for_source(source)
        self.segmenter = SentenceSegmenter(
            self.config.min_sentence_length, self.config.max_sentence_length
        )
        self.selector = KeyPointSelector(self.config.max_key_points, self.config.backfill)
        self.assembler = SummaryAssembler(
            self.config.min_summary_length, self.config.include_topics_line
        )

    def clean_pages(self, pages: Sequence[str]) -> List[str]:
        """Normalize each page; pages with no content become empty strings."""
        return [self.normalizer.normalize(page) for page in pages]

    def _select_source(
        self, document: Document, ocr_pages: Optional[Sequence[str]]
    ) -> Tuple[List[str], bool, Optional[ExtractionQuality]]:
        pages = self.clean_pages(document.pages)
        text = join_pages(pages)

        if ocr_pages and len(text) < self.config.ocr_threshold:
            logger.warning(
                "Extracted text has %d characters, below the OCR threshold of %d; using OCR text",
                len(text),
                self.config.ocr_threshold,
            )
            return self.clean_pages(ocr_pages), True, assess_extraction_quality(ocr_pages)

        quality = None
        if self.source == "transcript":
            quality = assess_transcript_quality(document.text)
        return pages, False, quality

    def extract_key_points(
        self,
        pages: Sequence[str],
        table: Optional[TermFrequencyTable] = None,
    ) -> List[KeyPoint]:
        """
        Select key points from normalized pages.

        Args:
            pages: Normalized text of each page
            table: Frequency table of the document, built from ``pages`` if None

        Returns:
            Key points in document order

        Raises:
            NoCandidateSentencesError: No sentence survived segmentation
        """
        candidates = self.segmenter.segment_pages(pages, tag_pages=len(pages) > 1)
        if not candidates:
            raise NoCandidateSentencesError(
                "No sentences within the configured length bounds",
                context={
                    "min_length": self.segmenter.min_length,
                    "max_length": self.segmenter.max_length,
                },
            )

        if table is None:
            table = build_frequency_table(join_pages(pages))
        scored = SentenceScorer(table, self.policy).score(candidates)
        return self.selector.select(scored)

    def extract_topics(self, table: TermFrequencyTable) -> List[Topic]:
        return extract_topics(table, self.config.max_topics)

    def summarize_document(
        self,
        document: Document,
        ocr_pages: Optional[Sequence[str]] = None,
    ) -> SummaryRecord:
        """
        Summarize a document.

        Args:
            document: Document to summarize
            ocr_pages: OCR text per page, used when the extracted text is
                shorter than ``ocr_threshold``

        Returns:
            Summary record

        Raises:
            EmptyInputError: Nothing left after normalization
            InsufficientContentError: Normalized text below ``min_content_length``
            SummaryTooShortError: Assembled summary below ``min_summary_length``
        """
        pages, used_ocr, quality = self._select_source(document, ocr_pages)
        text = join_pages(pages)
        ensure_content(text, self.config.min_content_length)

        table = build_frequency_table(text)
        topics = self.extract_topics(table)
        try:
            key_points = self.extract_key_points(pages, table)
        except NoCandidateSentencesError as e:
            logger.warning("%s; substituting placeholder key point", e.message)
            key_points = [KeyPoint(text=NO_CONTENT_PLACEHOLDER)]

        statistics = compute_statistics(text)
        logger.debug(
            "Summarized %d pages: %d key points, %d topics, %d terms",
            len(pages),
            len(key_points),
            len(topics),
            len(table),
        )
        return self.assembler.assemble(
            resolve_title(document),
            key_points,
            topics,
            word_count=statistics.word_count,
            page_count=len(pages),
            statistics=statistics,
            extraction_quality=quality,
            used_ocr=used_ocr,
        )


@handle_errors()
def summarize(
    text: Union[str, Sequence[str]],
    *,
    max_key_points: Optional[int] = None,
    max_topics: Optional[int] = None,
    sentence_length_bounds: Optional[Tuple[int, int]] = None,
    title: Optional[str] = None,
    filename: Optional[str] = None,
    metadata_title: Optional[str] = None,
    ocr_pages: Optional[Union[str, Sequence[str]]] = None,
    source: SourceKind = "document",
    config: Optional[SummarizerConfig] = None,
) -> SummaryRecord:
    """
    Summarize text.

    Args:
        text: Document text, or one string per page
        max_key_points: Maximum key points, overrides ``config``
        max_topics: Maximum topics, overrides ``config``
        sentence_length_bounds: ``(min, max)`` sentence length, overrides ``config``
        title: Explicit title, skips title resolution
        filename: Source file name, the last title fallback
        metadata_title: Title from the source file metadata
        ocr_pages: OCR text, as one string or one string per page
        source: ``"document"`` or ``"transcript"``
        config: Base configuration, defaults to ``SummarizerConfig()``

    Returns:
        Summary record
    """
    changes = {}
    if max_key_points is not None:
        changes["max_key_points"] = max_key_points
    if max_topics is not None:
        changes["max_topics"] = max_topics
    if sentence_length_bounds is not None:
        changes["min_sentence_length"], changes["max_sentence_length"] = sentence_length_bounds
    settings = dataclasses.replace(config or SummarizerConfig(), **changes)

    details = {"title": title, "filename": filename, "metadata_title": metadata_title}
    if isinstance(text, str):
        document = Document.from_text(text, **details)
    else:
        document = Document.from_pages(text, **details)
    if isinstance(ocr_pages, str):
        ocr_pages = [ocr_pages]

    return ExtractiveSummarizer(settings, source=source).summarize_document(document, ocr_pages)
