"""Service rewriting mentions in rendered post content."""

import structlog

from core.config.mentions_settings import MentionsSettings
from core.mentions import (
    clean,
    extract_candidates,
    rewrite_content,
    split_content,
    unique_slugs,
)
from core.services.identity_resolver import identity_resolver

logger = structlog.get_logger(__name__)


class MentionParserService:
    """Turns ``@mentions`` in rendered HTML into user and group links."""

    def __init__(self, resolver=identity_resolver):
        """Initialize the parser with the identity resolver to use."""
        self.resolver = resolver

    async def parse_raw(self, content: str, config: MentionsSettings) -> str:
        """Rewrite every resolvable mention outside code.

        Mentions that resolve to neither a user nor a group are left as
        they are.
        """
        spans = split_content(content, False, False, True)
        candidates = extract_candidates(spans)
        if not candidates:
            return content

        identities = await self.resolver.resolve_many(unique_slugs(candidates))
        logger.debug(
            "Rewriting mentions",
            candidates=len(candidates),
            resolved=sum(1 for i in identities.values() if i.link_target),
        )
        return rewrite_content(
            spans, candidates, identities, config.display, config.forum_url
        )

    async def parse_post(
        self, content: str | None, config: MentionsSettings
    ) -> str | None:
        """Rewrite a post body; empty bodies are returned untouched."""
        if not content:
            return content
        return await self.parse_raw(content, config)

    def clean(
        self,
        content: str,
        is_markdown: bool = False,
        strip_blockquote: bool = False,
        strip_code: bool = False,
    ) -> str:
        """Remove the protected regions selected by the flags."""
        return clean(content, is_markdown, strip_blockquote, strip_code)


mention_parser_service = MentionParserService()
