"""Rewrite resolved mentions in rendered content into profile/group links."""

import html
import re
from collections.abc import Iterable, Sequence

from django.utils.html import format_html

from core.enums.mention import DisplayMode
from core.mentions.splitter import is_unclosed_code_tag
from core.mentions.tokenizer import is_latin_mention
from core.schemas.mention import (
    ContentSpan,
    MentionCandidate,
    ResolvedIdentity,
    ResolvedUser,
)

USER_LINK_CLASS = "plugin-mentions-user plugin-mentions-a"
GROUP_LINK_CLASS = "plugin-mentions-group plugin-mentions-a"


def build_rule(raws: Iterable[str]) -> re.Pattern[str]:
    """Build the replacement pattern for every raw spelling of one slug.

    Latin mentions must end on a word boundary so ``@bob`` does not rewrite
    the start of ``@bobby``; other scripts have no reliable boundary.
    """
    alternatives = [
        re.escape(raw) + (r"\b" if is_latin_mention(raw) else "")
        for raw in sorted(set(raws), key=len, reverse=True)
    ]
    return re.compile(r"(?<![^\s>;])(?:" + "|".join(alternatives) + ")")


def display_text(matched: str, user: ResolvedUser | None, display: DisplayMode) -> str:
    """Visible text of a rewritten mention, unescaped.

    The forum returns usernames and fullnames HTML-escaped; they are decoded
    here so ``render_link`` escapes them exactly once.
    """
    if user is None:
        return matched
    if display == DisplayMode.USERNAME:
        return html.unescape(user.username)
    if display == DisplayMode.FULLNAME:
        return html.unescape(user.fullname) if user.fullname else matched
    return matched


def render_link(
    matched: str, identity: ResolvedIdentity, display: DisplayMode, forum_url: str
) -> str:
    """Render the link replacing one mention occurrence."""
    text = display_text(matched, identity.user, display)
    if identity.user is not None:
        return format_html(
            '<a class="{}" href="{}/uid/{}">{}</a>',
            USER_LINK_CLASS,
            forum_url,
            identity.user.uid,
            text,
        )
    return format_html(
        '<a class="{}" href="{}/groups/{}">{}</a>',
        GROUP_LINK_CLASS,
        forum_url,
        identity.slug,
        text,
    )


def rewrite_spans(
    spans: Sequence[ContentSpan],
    rule: re.Pattern[str],
    identity: ResolvedIdentity,
    display: DisplayMode,
    forum_url: str,
) -> list[ContentSpan]:
    """Apply one rule to the plain spans.

    The plain span right after a lone ``<code>`` opening tag is left alone,
    since its text is the unterminated code.
    """
    rewritten = []
    skip = False
    for span in spans:
        if skip or span.protected:
            skip = is_unclosed_code_tag(span)
            rewritten.append(span)
            continue
        text = rule.sub(
            lambda match: render_link(match.group(0), identity, display, forum_url),
            span.text,
        )
        rewritten.append(ContentSpan(text=text, protected=False))
    return rewritten


def rewrite_content(
    spans: Sequence[ContentSpan],
    candidates: Iterable[MentionCandidate],
    identities: dict[str, ResolvedIdentity],
    display: DisplayMode,
    forum_url: str,
) -> str:
    """Replace every resolved mention and join the spans back together.

    One rule is applied per distinct slug, in first-seen order. Slugs that
    resolved to neither a user nor a group are left untouched.
    """
    raws_by_slug: dict[str, list[str]] = {}
    for candidate in candidates:
        raws_by_slug.setdefault(candidate.slug, []).append(candidate.raw)

    spans = list(spans)
    for slug, raws in raws_by_slug.items():
        identity = identities.get(slug)
        if identity is None or identity.link_target is None:
            continue
        spans = rewrite_spans(spans, build_rule(raws), identity, display, forum_url)
    return "".join(span.text for span in spans)
