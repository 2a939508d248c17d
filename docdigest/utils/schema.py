"""
Configuration schemas for validation.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_file: Optional[str] = None
    json_format: bool = False


@dataclass
class SummarizerConfig:
    """Thresholds and limits of the summarization pipeline."""

    max_key_points: int = 20
    max_topics: int = 10
    min_sentence_length: int = 30
    max_sentence_length: int = 300
    min_content_length: int = 200
    min_summary_length: int = 50
    ocr_threshold: int = 200
    backfill: bool = False
    include_topics_line: bool = True


@dataclass
class DigestConfig:
    name: str = "docdigest"
    summarizer: SummarizerConfig = field(default_factory=SummarizerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
