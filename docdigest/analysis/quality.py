"""
Confidence assessment for machine-extracted text.

Two heuristics are provided:

- ``assess_extraction_quality`` for OCR output of scanned documents
- ``assess_transcript_quality`` for auto-generated speech transcripts

Both return an ``ExtractionQuality`` with a coarse level, a confidence in
[0, 1] and the human-readable issues that lowered it.
"""

from __future__ import annotations

import logging
import re
from typing import List, Sequence, Tuple, Union

import numpy as np

from ..types.types import ExtractionQuality, QualityLevel

logger = logging.getLogger(__name__)

# OCR heuristics
MIN_EXTRACTED_WORDS = 100
OCR_ARTIFACTS = re.compile(r"[|]{3,}|[.]{5,}|[_]{3,}|\d{10,}")
FRAGMENT = re.compile(r"\b[a-z]{1,2}\b")
MAX_FRAGMENT_RATIO = 0.1
PENALTY_PER_ISSUE = 0.15
MIN_OCR_CONFIDENCE = 0.3

# Transcript heuristics
RAW_TIMESTAMP = re.compile(r"\[\d+:\d+\]|\(\d+:\d+\)|\d+:\d+\s*-")
SPEAKER_LABEL = re.compile(r"(?:speaker|person) \d|speaker:|person \w+:", re.I)
FILLER_WORD = re.compile(r"\b(?:um|uh|ah|er|like)\b", re.I)
INAUDIBLE = re.compile(r"\binaudible\b|\[unclear\]|\(unclear\)", re.I)
NON_SPEECH = re.compile(r"\[(?:music|applause|laughter|background noise|silence)\]", re.I)
ACCENTED = re.compile(r"[áéíóúñüçãõâêîôûäëïöÿš]")
SENTENCE_BREAK = re.compile(r"[.!?]\s+")
MAX_TRANSCRIPT_ISSUES = 5


def _ocr_level(confidence: float) -> QualityLevel:
    if confidence < 0.5:
        return "poor"
    if confidence < 0.7:
        return "fair"
    if confidence < 0.9:
        return "good"
    return "excellent"


def _transcript_level(confidence: float) -> QualityLevel:
    if confidence > 0.85:
        return "excellent"
    if confidence > 0.7:
        return "good"
    if confidence > 0.5:
        return "fair"
    return "poor"


def assess_extraction_quality(pages: Union[str, Sequence[str]]) -> ExtractionQuality:
    """
    Assess OCR output.

    Each detected issue costs 0.15 confidence; the result is clamped to
    [0.3, 1.0].

    Args:
        pages: OCR text, as one string or one string per page

    Returns:
        Quality assessment
    """
    text = pages if isinstance(pages, str) else " ".join(pages)
    words = text.split()
    word_count = max(1, len(words))
    issues: List[str] = []

    if len(words) < MIN_EXTRACTED_WORDS:
        issues.append("Very little text was extracted from the document")
    if OCR_ARTIFACTS.search(text):
        issues.append("OCR artifacts detected in extracted text")
    if len(FRAGMENT.findall(text)) / word_count > MAX_FRAGMENT_RATIO:
        issues.append("Many broken or fragmented words detected")

    confidence = 1.0 - PENALTY_PER_ISSUE * len(issues)
    confidence = max(MIN_OCR_CONFIDENCE, min(confidence, 1.0))

    logger.debug("Extraction quality %.2f with %d issues", confidence, len(issues))
    return ExtractionQuality(
        quality=_ocr_level(confidence), confidence=confidence, issues=tuple(issues)
    )


def _word_set(text: str) -> set:
    return {word for word in text.lower().split() if len(word) > 3}


def line_similarity(first: str, second: str) -> float:
    """Jaccard similarity of long words, weighted by the length ratio."""
    words_a, words_b = _word_set(first), _word_set(second)
    if not words_a or not words_b:
        return 0.0
    shared = len(words_a & words_b)
    jaccard = shared / len(words_a | words_b)
    length_ratio = min(len(first), len(second)) / max(len(first), len(second))
    return jaccard * length_ratio


def _repeated_lines(lines: Sequence[str], window: int = 10) -> int:
    repeated = 0
    for index, line in enumerate(lines):
        if len(line) <= 15:
            continue
        prefix = line[: int(len(line) * 0.8)]
        following = lines[index + 1 : index + 1 + window]
        if any(prefix in other and line_similarity(line, other) > 0.8 for other in following):
            repeated += 1
    return repeated


def _sentence_length_issues(sentences: Sequence[str]) -> List[Tuple[str, float]]:
    if len(sentences) <= 5:
        return []
    lengths = np.array([len(s.split()) for s in sentences], dtype=float)
    found: List[Tuple[str, float]] = []
    if np.count_nonzero(lengths > 30) > 0.2 * len(lengths):
        found.append(("Contains unusually long sentences (possible missing punctuation)", 0.1))
    if np.count_nonzero(lengths < 3) > 0.3 * len(lengths):
        found.append(("Contains many very short sentences (possible transcription errors)", 0.1))
    if float(np.var(lengths)) > 100:
        found.append(("Contains highly variable sentence structures (inconsistent transcription)", 0.05))
    return found


def assess_transcript_quality(transcript: str) -> ExtractionQuality:
    """
    Assess an auto-generated transcript.

    Args:
        transcript: Raw transcript text

    Returns:
        Quality assessment listing at most five issues
    """
    if not transcript or not transcript.strip():
        return ExtractionQuality(quality="poor", confidence=1.0, issues=("Transcript is empty",))

    found: List[Tuple[str, float]] = []

    if len(transcript) < 300:
        found.append(("Transcript is very short and likely incomplete", 0.5))
    elif len(transcript) < 1000:
        found.append(("Transcript is short and may be missing content", 0.3))

    lines = transcript.split("\n")
    if _repeated_lines(lines) > 0.2 * len(lines):
        found.append(("Contains excessive repeated content, possibly due to auto-caption errors", 0.25))

    sentences = [s for s in SENTENCE_BREAK.split(transcript) if s.strip()]
    capitalized = sum(1 for s in sentences if s[0] == s[0].upper())
    if capitalized < 0.5 * len(sentences):
        found.append(("Many sentences lack proper capitalization", 0.15))

    if RAW_TIMESTAMP.search(transcript):
        found.append(("Contains raw timestamp markers", 0.1))

    fragments = sum(1 for s in sentences if len(s.split()) < 3)
    if fragments > 0.3 * len(sentences):
        found.append(("Contains many sentence fragments or incomplete thoughts", 0.2))

    if SPEAKER_LABEL.search(transcript):
        found.append(("Contains unformatted speaker indicators", 0.1))

    fillers = len(FILLER_WORD.findall(transcript))
    if fillers > len(transcript) / 500:
        found.append(("Excessive filler words", min(0.15, fillers / 100)))

    if len(INAUDIBLE.findall(transcript)) > 3:
        found.append(("Contains inaudible segments", 0.15))
    if len(NON_SPEECH.findall(transcript)) > 5:
        found.append(("Contains frequent non-speech annotations", 0.1))

    if len(ACCENTED.findall(transcript)) > 0.03 * len(transcript.split()):
        found.append(("May contain mixed language content", 0.15))

    long_lines = [line for line in lines if len(line) > 15]
    if sum(1 for line in long_lines if line == line.upper()) > 0.1 * len(lines):
        found.append(("Contains excessive capitalization", 0.1))
    if sum(1 for line in long_lines if line == line.lower()) > 0.3 * len(lines):
        found.append(("Lacks proper capitalization", 0.1))

    found.extend(_sentence_length_issues(sentences))

    confidence = max(0.0, min(1.0, 1.0 - sum(penalty for _, penalty in found)))
    issues = tuple(issue for issue, _ in found[:MAX_TRANSCRIPT_ISSUES])

    logger.debug("Transcript quality %.2f with %d issues", confidence, len(found))
    return ExtractionQuality(
        quality=_transcript_level(confidence), confidence=confidence, issues=issues
    )
