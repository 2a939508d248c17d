"""
docdigest: extractive summarization and topic extraction for documents.

Turns raw document or transcript text into ranked key points, a topic list
and a formatted summary using frequency, position and keyword heuristics.
"""

__version__ = "0.1.0"

from .data.preprocessor import TextNormalizer, normalize  # noqa: F401
from .summarization import (  # noqa: F401
    ExtractiveSummarizer,
    build_frequency_table,
    extract_topics,
    generate_fallback_summary,
    summarize,
)
from .types.types import (  # noqa: F401
    DigestError,
    Document,
    EmptyInputError,
    InsufficientContentError,
    KeyPoint,
    NoCandidateSentencesError,
    SummaryRecord,
    SummaryTooShortError,
)
from .utils.schema import SummarizerConfig  # noqa: F401
