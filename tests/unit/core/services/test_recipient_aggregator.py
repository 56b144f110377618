"""Tests for RecipientAggregator."""

from django.test import SimpleTestCase

from core.schemas.mention import ResolvedGroup
from core.services.recipient_aggregator import RecipientAggregator, escape_title
from tests.base import make_post


class TestRecipientAggregator(SimpleTestCase):
    """Test suite for RecipientAggregator."""

    def setUp(self):
        """Set up test fixtures."""
        self.aggregator = RecipientAggregator()

    def test_direct_recipients_exclude_author_and_duplicates(self):
        """Test the author and repeated uids are removed."""
        self.assertEqual(self.aggregator.direct_recipients([5, 1, 5, 6], 1), [5, 6])

    def test_direct_recipients_exclude_followers(self):
        """Test followers are removed when given."""
        self.assertEqual(
            self.aggregator.direct_recipients([5, 6], 1, followers=[6]), [5]
        )

    def test_group_members_are_claimed_once(self):
        """Test a member shared by two groups is notified by the first only."""
        groups = [
            ResolvedGroup(slug="artists", name="Artists", member_uids=(2, 3, 4)),
            ResolvedGroup(slug="staff", name="Staff", member_uids=(3, 5)),
        ]

        expanded = self.aggregator.group_recipients(groups, [2], 1)

        self.assertEqual([members for _, members in expanded], [[3, 4], [5]])

    def test_excluded_member_still_claimed(self):
        """Test a member dropped from the first group is not passed on."""
        groups = [
            ResolvedGroup(slug="a", name="A", member_uids=(2, 6)),
            ResolvedGroup(slug="b", name="B", member_uids=(2, 7)),
        ]

        expanded = self.aggregator.group_recipients(groups, [2], 1)

        self.assertEqual([members for _, members in expanded], [[6], [7]])

    def test_group_members_exclude_author_and_followers(self):
        """Test the author and followers are removed from groups."""
        groups = [ResolvedGroup(slug="a", name="A", member_uids=(0, 1, 8, 9))]

        expanded = self.aggregator.group_recipients(groups, [], 1, followers=[9])

        self.assertEqual(expanded[0][1], [8])

    def test_build_targets(self):
        """Test one user target and one target per group are built."""
        post = make_post(content="hi @alice @artists")
        group = ResolvedGroup(slug="artists", name="Artists", member_uids=(4,))

        targets = self.aggregator.build_targets(
            post, [5], [(group, [4])], "author", "Tips &amp; tricks, 100%"
        )

        user_target, group_target = targets
        self.assertEqual(user_target.recipient_uids, [5])
        self.assertEqual(user_target.nid, "tid:10:pid:100:uid:1:user")
        self.assertEqual(
            user_target.body_text,
            "[[notifications:user_mentioned_you_in, author, "
            "Tips & tricks&#44; 100&#37;]]",
        )
        self.assertEqual(user_target.topic_title, "Tips & tricks, 100%")
        self.assertEqual(user_target.content, "hi @alice @artists")
        self.assertEqual(group_target.recipient_uids, [4])
        self.assertEqual(group_target.nid, "tid:10:pid:100:uid:1:Artists")
        self.assertEqual(
            group_target.body_text,
            "[[notifications:user_mentioned_group_in, author, Artists, "
            "Tips & tricks&#44; 100&#37;]]",
        )

    def test_escape_title_handles_missing_title(self):
        """Test a missing title gives an empty string."""
        self.assertEqual(escape_title(None), "")
