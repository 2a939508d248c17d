"""
Boilerplate stripping and whitespace normalization for docdigest.

Raw text extracted from PDFs and transcripts is full of non-content noise:
page numbers, running headers, copyright footers, URLs, citation markers and
captions. Each class of noise is handled by a named ``FilterRule`` so rules
can be tested, reordered or disabled individually.

Features:
- Ordered pipeline of named regex rules
- Idempotent normalization (rules are re-applied to a fixpoint)
- Optional transcript rules (timestamps, annotations, filler words)
- Content-floor validation with typed errors

Example usage:
    >>> normalizer = TextNormalizer()
    >>> cleaned = normalizer.normalize("Results improved.\\n\\n12\\n\\nPage 3 of 9")
    >>> print(cleaned)
    Results improved.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Pattern, Sequence, Tuple, Union

from ..types.types import EmptyInputError, InsufficientContentError, SourceKind

logger = logging.getLogger(__name__)

# Bounds the fixpoint loop; every rule deletes or shrinks text so this is
# never reached on real input.
MAX_PASSES = 100


@dataclass(frozen=True)
class FilterRule:
    """A named regex substitution applied to the whole text."""

    name: str
    pattern: Pattern[str]
    replacement: str = ""

    @classmethod
    def compile(cls, name: str, pattern: str, replacement: str = "", flags: int = 0) -> FilterRule:
        return cls(name=name, pattern=re.compile(pattern, flags), replacement=replacement)

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


BOILERPLATE_RULES: Tuple[FilterRule, ...] = (
    FilterRule.compile("line_endings", r"\r\n?", "\n"),
    FilterRule.compile("standalone_page_numbers", r"^[ \t]*\d{1,4}[ \t]*$", flags=re.M),
    FilterRule.compile("page_x_of_y", r"\bpage\s+\d+\s*(?:of|/)\s*\d+\b", flags=re.I),
    FilterRule.compile(
        "page_markers",
        r"(?:^|(?<=[.!?]))[ \t]*page[ \t]+\d+[ \t]*\.?[ \t]*$",
        flags=re.I | re.M,
    ),
    FilterRule.compile(
        "copyright_notices",
        r"(?:©|\(c\)|\bcopyright\b)[^\n]*?\b(?:1[89]|20)\d{2}\b[^\n]*",
        flags=re.I,
    ),
    FilterRule.compile(
        "rights_notices",
        r"^[^\n]*\b(?:all rights reserved|confidential)\b[^\n]*$",
        flags=re.I | re.M,
    ),
    FilterRule.compile("urls", r"\bhttps?://\S+|\bwww\.[a-z0-9-]+\.[a-z]{2,}\S*", flags=re.I),
    FilterRule.compile(
        "email_addresses",
        r"(?:\be-?mail:\s*)?\b[\w.+-]+@[\w-]+(?:\.[\w-]+)+\b",
        flags=re.I,
    ),
    FilterRule.compile("doi_references", r"\bdoi:\s*\S+", flags=re.I),
    FilterRule.compile(
        "citation_markers",
        r"[ \t]?(?:\[\d+(?:\s*[,–-]\s*\d+)*\]|\((?:1[89]|20)\d{2}\)(?=[\s.,;:]|$))",
    ),
    FilterRule.compile(
        "captions",
        r"^[ \t]*(?:figure|fig\.|table)[ \t]+\d+[.:][^\n]*$",
        flags=re.I | re.M,
    ),
    FilterRule.compile(
        "section_headers",
        r"^[ \t]*(?:references|bibliography|acknowledge?ments|appendix(?:[ \t]+[a-z0-9]+)?"
        r"|abstract|introduction|methodology|methods|results|discussion|conclusions?"
        r"|table of contents)[ \t]*:?[ \t]*$",
        flags=re.I | re.M,
    ),
    FilterRule.compile("line_numbers", r"^[ \t]*\d+[.:](?!\d)[ \t]*(?=\S)", flags=re.M),
    FilterRule.compile("trailing_whitespace", r"[ \t]+$", flags=re.M),
    FilterRule.compile("blank_lines", r"\n{3,}", "\n\n"),
    FilterRule.compile("spaces", r"[ \t]{3,}", " "),
)

TRANSCRIPT_RULES: Tuple[FilterRule, ...] = (
    FilterRule.compile("timestamps", r"[\[(]\d{1,2}:\d{2}(?::\d{2})?[\])]"),
    FilterRule.compile(
        "non_speech_annotations",
        r"\[(?:music|applause|laughter|background noise|silence|inaudible|unclear)\]",
        flags=re.I,
    ),
    FilterRule.compile("filler_words", r"\b(?:um+|uh+|er|ehm)\b,?", flags=re.I),
)


class TextNormalizer:
    """
    Apply an ordered list of filter rules until the text stops changing.

    Args:
        rules: Rules to apply, in order. Defaults to ``BOILERPLATE_RULES``.
        disabled: Names of rules to skip.
    """

    def __init__(
        self,
        rules: Optional[Sequence[FilterRule]] = None,
        disabled: Iterable[str] = (),
    ):
        skip = set(disabled)
        self.rules: Tuple[FilterRule, ...] = tuple(
            rule for rule in (BOILERPLATE_RULES if rules is None else rules) if rule.name not in skip
        )

    @classmethod
    def for_source(cls, source: SourceKind = "document", disabled: Iterable[str] = ()) -> TextNormalizer:
        """Build a normalizer for documents or (with extra rules) transcripts."""
        if source == "transcript":
            return cls(TRANSCRIPT_RULES + BOILERPLATE_RULES, disabled=disabled)
        return cls(disabled=disabled)

    @property
    def rule_names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)

    def _apply_once(self, text: str) -> str:
        for rule in self.rules:
            text = rule.apply(text)
        return text.strip()

    def normalize(self, text: str) -> str:
        """
        Strip boilerplate and normalize whitespace.

        Args:
            text: Raw text

        Returns:
            Cleaned text; applying ``normalize`` again returns it unchanged
        """
        current = text
        for _ in range(MAX_PASSES):
            cleaned = self._apply_once(current)
            if cleaned == current:
                return cleaned
            current = cleaned
        logger.warning("Normalization did not converge after %d passes", MAX_PASSES)
        return current

    def clean_or_raise(self, text: Union[str, Sequence[str]], min_length: int = 200) -> str:
        """
        Normalize text and reject it when nothing meaningful is left.

        Raises:
            EmptyInputError: Text is empty or whitespace after normalization
            InsufficientContentError: Text is shorter than ``min_length``
        """
        raw = text if isinstance(text, str) else "\n\n".join(text)
        cleaned = self.normalize(raw)
        ensure_content(cleaned, min_length)
        logger.debug("Normalized %d characters down to %d", len(raw), len(cleaned))
        return cleaned


def ensure_content(cleaned: str, min_length: int) -> None:
    """
    Validate normalized text against the content floor.

    Raises:
        EmptyInputError: Text is empty or whitespace
        InsufficientContentError: Text is shorter than ``min_length``
    """
    if not cleaned.strip():
        raise EmptyInputError("No extractable content: text is empty after normalization")
    if len(cleaned) < min_length:
        raise InsufficientContentError(
            f"Normalized text has {len(cleaned)} characters, below the {min_length} floor",
            context={"length": len(cleaned), "min_length": min_length},
        )


def normalize(text: str, source: SourceKind = "document") -> str:
    """Convenience function using the default rule set."""
    return TextNormalizer.for_source(source).normalize(text)
