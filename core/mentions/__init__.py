"""@mention extraction and rewriting for forum post content."""

from core.mentions.rewriter import build_rule, rewrite_content
from core.mentions.splitter import clean, split_content
from core.mentions.tokenizer import (
    MENTION_PATTERN,
    extract_candidates,
    slugify_mention,
    strip_punctuation_suffix,
    unique_slugs,
)

__all__ = [
    "MENTION_PATTERN",
    "build_rule",
    "clean",
    "extract_candidates",
    "rewrite_content",
    "slugify_mention",
    "split_content",
    "strip_punctuation_suffix",
    "unique_slugs",
]
