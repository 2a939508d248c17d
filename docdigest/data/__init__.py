"""Text preprocessing for docdigest."""

from .preprocessor import (
    BOILERPLATE_RULES,
    TRANSCRIPT_RULES,
    FilterRule,
    TextNormalizer,
    ensure_content,
    normalize,
)

__all__ = [
    "BOILERPLATE_RULES",
    "TRANSCRIPT_RULES",
    "FilterRule",
    "TextNormalizer",
    "ensure_content",
    "normalize",
]
