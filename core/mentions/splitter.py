"""Split post content into plain and protected spans.

Mentions are only looked for in plain spans. Protected spans cover code
(inline code and code blocks) and blockquotes, so quoting someone or
pasting ``@decorator`` in a code sample never pings anybody.

Two flavours of input are handled:

* markdown, the raw text the author typed (used when notifying), and
* HTML, the rendered post (used when rewriting mentions into links).

The result always starts with a plain span and alternates plain/protected,
so the index parity of a span tells its kind. Joining the text of all spans
gives back the original content.
"""

import re

from core.schemas.mention import ContentSpan

_FENCE_OPEN = (
    r"(?P<fence>^[ ]{0,3}(?P<fence_marker>`{3,}(?![^\n]*`)|~{3,})[^\n]*$)"
)
# A code span may cross single line breaks but ends at a blank line
_INLINE_CODE = (
    r"(?P<inline>(?P<ticks>`+)(?!`)(?:(?!\n[ \t]*\n)[\s\S])*?(?<!`)(?P=ticks)(?!`))"
)
_MARKDOWN_QUOTE = r"(?P<md_quote>^[ ]{0,3}>[^\n]*(?:\n[ ]{0,3}>[^\n]*)*)"

_HTML_CODE_OPEN = r"(?P<code><(?P<code_tag>pre|code)\b[^>]*>)"
_HTML_QUOTE_OPEN = r"(?P<html_quote><blockquote\b[^>]*>)"

_HTML_QUOTE_TAG = re.compile(r"<(/?)blockquote\b[^>]*>", re.IGNORECASE)

# An inline code opening tag that never got closed
CODE_OPEN_TAG = re.compile(r"<code\b[^>]*>", re.IGNORECASE)


def _build_pattern(
    is_markdown: bool, strip_blockquote: bool, strip_code: bool
) -> re.Pattern[str] | None:
    parts = []
    if is_markdown:
        if strip_code:
            parts.extend([_FENCE_OPEN, _INLINE_CODE])
        if strip_blockquote:
            parts.append(_MARKDOWN_QUOTE)
        flags = re.MULTILINE
    else:
        if strip_code:
            parts.append(_HTML_CODE_OPEN)
        if strip_blockquote:
            parts.append(_HTML_QUOTE_OPEN)
        flags = re.IGNORECASE
    if not parts:
        return None
    return re.compile("|".join(parts), flags)


def _fence_end(content: str, match: re.Match[str]) -> int:
    marker = match.group("fence_marker")
    closing = re.compile(
        rf"^[ ]{{0,3}}{re.escape(marker[0])}{{{len(marker)},}}[ \t]*$", re.MULTILINE
    )
    close = closing.search(content, match.end())
    return close.end() if close else len(content)


def _html_code_end(content: str, match: re.Match[str]) -> int:
    tag = match.group("code_tag")
    closing = re.compile(rf"</{tag}\s*>", re.IGNORECASE)
    close = closing.search(content, match.end())
    # Unclosed: only the opening tag is protected
    return close.end() if close else match.end()


def _html_quote_end(content: str, match: re.Match[str]) -> int:
    depth = 1
    for tag in _HTML_QUOTE_TAG.finditer(content, match.end()):
        depth += -1 if tag.group(1) else 1
        if depth == 0:
            return tag.end()
    return len(content)


_REGION_END = {
    "fence": _fence_end,
    "code": _html_code_end,
    "html_quote": _html_quote_end,
}


def _region_end(content: str, match: re.Match[str]) -> int:
    handler = _REGION_END.get(match.lastgroup)
    return handler(content, match) if handler else match.end()


def split_content(
    content: str,
    is_markdown: bool = False,
    strip_blockquote: bool = False,
    strip_code: bool = False,
) -> list[ContentSpan]:
    """Segment content into alternating plain and protected spans.

    Args:
        content: Post content.
        is_markdown: True for raw markdown, False for rendered HTML.
        strip_blockquote: Protect blockquotes.
        strip_code: Protect inline code and code blocks.

    Returns:
        Spans starting with a (possibly empty) plain span.
    """
    content = content or ""
    pattern = _build_pattern(is_markdown, strip_blockquote, strip_code)
    if pattern is None:
        return [ContentSpan(text=content, protected=False)]

    spans: list[ContentSpan] = []
    position = 0
    while True:
        match = pattern.search(content, position)
        if match is None:
            break
        end = _region_end(content, match)
        spans.append(ContentSpan(text=content[position : match.start()]))
        spans.append(ContentSpan(text=content[match.start() : end], protected=True))
        position = end

    spans.append(ContentSpan(text=content[position:]))
    return spans


def clean(
    content: str,
    is_markdown: bool = False,
    strip_blockquote: bool = False,
    strip_code: bool = False,
) -> str:
    """Return content with every protected span removed."""
    spans = split_content(content, is_markdown, strip_blockquote, strip_code)
    return "".join(span.text for span in spans if not span.protected)


def is_unclosed_code_tag(span: ContentSpan) -> bool:
    """Whether a protected span is a lone inline code opening tag."""
    return span.protected and CODE_OPEN_TAG.fullmatch(span.text) is not None
