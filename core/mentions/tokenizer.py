"""Find ``@mention`` candidates in plain content spans."""

import re
from collections.abc import Callable, Iterable

from django.utils.text import slugify

from core.schemas.mention import ContentSpan, MentionCandidate

# "@" preceded by start of text, whitespace, ">" or ";" and followed by
# letters (any script), digits, "-", "_" or "."
MENTION_PATTERN = re.compile(r"(?<![^\s>;])@[\w\-.]+")

# Latin-only mentions get a word boundary when rewritten
LATIN_MENTION = re.compile(r"@[\w\-.]+", re.ASCII)

PUNCTUATION_SUFFIX = re.compile(r"[!?.]+$")

# Characters Django's slugify would delete; forum userslugs turn them into "-"
SLUG_SEPARATORS = re.compile(r"[^\w\s-]+")


def slugify_mention(text: str) -> str:
    """Normalize a mention (with or without the ``@``) into a lookup slug."""
    return slugify(SLUG_SEPARATORS.sub("-", text.lstrip("@")), allow_unicode=True)


def strip_punctuation_suffix(text: str) -> str:
    """Drop a trailing run of ``!``, ``?`` and ``.``."""
    return PUNCTUATION_SUFFIX.sub("", text)


def is_latin_mention(raw: str) -> bool:
    """Whether a mention is made only of ASCII word characters."""
    return LATIN_MENTION.fullmatch(raw) is not None


def find_mentions(text: str) -> list[str]:
    """Return every raw ``@mention`` match in a piece of plain text."""
    return MENTION_PATTERN.findall(text)


def extract_candidates(
    spans: Iterable[ContentSpan],
    exclude: Iterable[str] = (),
    slugify_func: Callable[[str], str] = slugify_mention,
) -> list[MentionCandidate]:
    """Collect distinct mention candidates from the plain spans.

    Args:
        spans: Output of ``split_content``.
        exclude: Slugs that can never be mentioned.
        slugify_func: Slug normalization used for lookups.

    Returns:
        Candidates in first-seen order, one per distinct raw text.
    """
    excluded = set(exclude)
    seen: set[str] = set()
    candidates = []
    for span in spans:
        if span.protected:
            continue
        for match in find_mentions(span.text):
            raw = strip_punctuation_suffix(match)
            if raw in seen:
                continue
            seen.add(raw)
            slug = slugify_func(raw)
            if not slug or slug in excluded:
                continue
            candidates.append(MentionCandidate(raw=raw, slug=slug))
    return candidates


def unique_slugs(candidates: Iterable[MentionCandidate]) -> list[str]:
    """Distinct slugs in first-seen order."""
    return list(dict.fromkeys(candidate.slug for candidate in candidates))
