"""Turn resolved mentions into per-class notification targets."""

import html
from collections.abc import Iterable, Sequence

from core.schemas.mention import (
    USER_TARGET_LABEL,
    NotificationTarget,
    PostData,
    ResolvedGroup,
)


def escape_title(title: str | None) -> str:
    """Decode a topic title and escape it for a notification body argument."""
    decoded = html.unescape(title or "")
    return decoded.replace("%", "&#37;").replace(",", "&#44;")


def user_mention_text(author: str, title_escaped: str) -> str:
    return f"[[notifications:user_mentioned_you_in, {author}, {title_escaped}]]"


def group_mention_text(author: str, group_name: str, title_escaped: str) -> str:
    return (
        f"[[notifications:user_mentioned_group_in, {author}, {group_name}, "
        f"{title_escaped}]]"
    )


class RecipientAggregator:
    """Merges direct and group mentions into deduplicated recipient sets."""

    def direct_recipients(
        self, uids: Iterable[int], author_uid: int, followers: Iterable[int] = ()
    ) -> list[int]:
        """Deduplicate direct mentions, dropping the author and followers."""
        excluded = set(followers)
        recipients: list[int] = []
        for uid in uids:
            if uid in recipients or uid == author_uid or uid in excluded:
                continue
            recipients.append(uid)
        return recipients

    def group_recipients(
        self,
        groups: Sequence[ResolvedGroup],
        direct: Iterable[int],
        author_uid: int,
        followers: Iterable[int] = (),
    ) -> list[tuple[ResolvedGroup, list[int]]]:
        """Expand groups into member lists, each member claimed once.

        Groups are walked in the given order. The first group listing a
        member claims it, even when the member is then dropped from that
        group because they are the author, a follower or directly mentioned.
        """
        excluded = set(direct) | set(followers) | {author_uid}
        claimed: set[int] = set()
        expanded = []
        for group in groups:
            members = []
            for uid in group.member_uids:
                if not uid or uid in claimed:
                    continue
                claimed.add(uid)
                if uid not in excluded:
                    members.append(uid)
            expanded.append((group, members))
        return expanded

    def build_targets(
        self,
        post: PostData,
        direct: list[int],
        groups: Sequence[tuple[ResolvedGroup, list[int]]],
        author_username: str,
        topic_title: str | None,
    ) -> list[NotificationTarget]:
        """Build the user target followed by one target per group.

        Targets without recipients are kept; delivery skips them.
        """
        title = html.unescape(topic_title or "")
        title_escaped = escape_title(topic_title)
        common = {
            "post_id": post.pid,
            "topic_id": post.tid,
            "author_uid": post.uid,
            "topic_title": title,
            "content": post.content,
        }
        targets = [
            NotificationTarget(
                recipient_uids=direct,
                recipient_label=USER_TARGET_LABEL,
                body_text=user_mention_text(author_username, title_escaped),
                **common,
            )
        ]
        for group, members in groups:
            targets.append(
                NotificationTarget(
                    recipient_uids=members,
                    recipient_label=group.name,
                    body_text=group_mention_text(
                        author_username, group.name, title_escaped
                    ),
                    **common,
                )
            )
        return targets


recipient_aggregator = RecipientAggregator()
