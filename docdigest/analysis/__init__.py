"""Quality assessment and reading analytics."""

from .quality import assess_extraction_quality, assess_transcript_quality, line_similarity
from .statistics import complexity_level, compute_statistics, count_words

__all__ = [
    "assess_extraction_quality",
    "assess_transcript_quality",
    "complexity_level",
    "compute_statistics",
    "count_words",
    "line_similarity",
]
