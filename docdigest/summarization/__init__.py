"""Extractive summarization and topic extraction."""

from .assembler import SummaryAssembler, assemble_summary, resolve_title
from .fallback import generate_fallback_summary
from .frequency import STOP_WORDS, TermFrequencyTable, build_frequency_table
from .pipeline import NO_CONTENT_PLACEHOLDER, ExtractiveSummarizer, summarize
from .scorer import DEFAULT_POLICY, ScoringPolicy, SentenceScorer, score_sentence
from .segmenter import SentenceSegmenter, is_boilerplate_sentence
from .selector import KeyPointSelector, extract_keywords
from .topics import extract_topics

__all__ = [
    "DEFAULT_POLICY",
    "NO_CONTENT_PLACEHOLDER",
    "STOP_WORDS",
    "ExtractiveSummarizer",
    "KeyPointSelector",
    "ScoringPolicy",
    "SentenceScorer",
    "SentenceSegmenter",
    "SummaryAssembler",
    "TermFrequencyTable",
    "assemble_summary",
    "build_frequency_table",
    "extract_keywords",
    "extract_topics",
    "generate_fallback_summary",
    "is_boilerplate_sentence",
    "resolve_title",
    "score_sentence",
    "summarize",
]
