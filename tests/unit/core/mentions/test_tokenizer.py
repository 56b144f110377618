"""Tests for the mention tokenizer."""

from django.test import SimpleTestCase

from core.mentions.tokenizer import (
    extract_candidates,
    find_mentions,
    is_latin_mention,
    slugify_mention,
    strip_punctuation_suffix,
    unique_slugs,
)
from core.schemas.mention import ContentSpan, MentionCandidate


class TestFindMentions(SimpleTestCase):
    """Test suite for the mention pattern."""

    def test_anchors(self):
        """Test @ must follow start, whitespace, > or ;."""
        text = "@ann hi @alice, mail bob@example.com >@carol;@dave x(@eve"
        self.assertEqual(find_mentions(text), ["@ann", "@alice", "@carol", "@dave"])

    def test_unicode_letters(self):
        """Test non-Latin identifiers are matched."""
        self.assertEqual(find_mentions("привет @иван и @李"), ["@иван", "@李"])

    def test_allowed_characters(self):
        """Test digits, hyphen, underscore and dot belong to the mention."""
        self.assertEqual(find_mentions("@a-b_c.d9"), ["@a-b_c.d9"])

    def test_lone_at_sign(self):
        """Test an @ without identifier is not a mention."""
        self.assertEqual(find_mentions("email me @ home"), [])


class TestHelpers(SimpleTestCase):
    """Test suite for tokenizer helpers."""

    def test_strip_punctuation_suffix(self):
        """Test a trailing run of !, ? and . is removed."""
        self.assertEqual(strip_punctuation_suffix("@bob!?."), "@bob")
        self.assertEqual(strip_punctuation_suffix("@bob.smith"), "@bob.smith")

    def test_slugify_mention(self):
        """Test slugs are lowercase and drop the @."""
        self.assertEqual(slugify_mention("@Alice"), "alice")
        self.assertEqual(slugify_mention("@Ivan_Petrov-2"), "ivan_petrov-2")
        self.assertEqual(slugify_mention("@Иван"), "иван")

    def test_slugify_mention_dots_become_hyphens(self):
        """Test dots separate words like in forum userslugs."""
        self.assertEqual(slugify_mention("@john.doe"), "john-doe")
        self.assertEqual(slugify_mention("@Jean-Luc.Picard"), "jean-luc-picard")
        self.assertEqual(slugify_mention("@a..b"), "a-b")

    def test_is_latin_mention(self):
        """Test only ASCII word mentions count as Latin."""
        self.assertTrue(is_latin_mention("@bob-smith"))
        self.assertFalse(is_latin_mention("@иван"))
        self.assertFalse(is_latin_mention("@josé"))


class TestExtractCandidates(SimpleTestCase):
    """Test suite for extract_candidates."""

    def test_duplicates_are_collapsed(self):
        """Test a repeated mention yields one candidate."""
        candidates = extract_candidates([ContentSpan(text="@alice @alice")])
        self.assertEqual(candidates, [MentionCandidate(raw="@alice", slug="alice")])

    def test_punctuation_is_stripped(self):
        """Test the raw text loses its trailing punctuation."""
        candidates = extract_candidates([ContentSpan(text="thanks @bob!")])
        self.assertEqual(candidates, [MentionCandidate(raw="@bob", slug="bob")])

    def test_dotted_mention(self):
        """Test a dotted username keeps its dots in the raw text only."""
        candidates = extract_candidates([ContentSpan(text="ping @john.doe.")])
        self.assertEqual(
            candidates, [MentionCandidate(raw="@john.doe", slug="john-doe")]
        )

    def test_protected_spans_are_skipped(self):
        """Test mentions inside protected spans are never emitted."""
        spans = [
            ContentSpan(text="hi "),
            ContentSpan(text="`@bob`", protected=True),
            ContentSpan(text=" @alice"),
        ]
        self.assertEqual(
            [candidate.slug for candidate in extract_candidates(spans)], ["alice"]
        )

    def test_excluded_slugs_are_dropped(self):
        """Test slugs of the exclusion list never become candidates."""
        candidates = extract_candidates(
            [ContentSpan(text="@guests @registered-users @mods")],
            exclude=("guests", "registered-users"),
        )
        self.assertEqual([candidate.slug for candidate in candidates], ["mods"])

    def test_first_seen_order(self):
        """Test candidates keep the order of their first occurrence."""
        candidates = extract_candidates([ContentSpan(text="@carol @alice @carol")])
        self.assertEqual([candidate.slug for candidate in candidates], ["carol", "alice"])

    def test_unique_slugs_merges_spellings(self):
        """Test two spellings of one slug give one slug."""
        candidates = extract_candidates([ContentSpan(text="@Alice @alice")])
        self.assertEqual(len(candidates), 2)
        self.assertEqual(unique_slugs(candidates), ["alice"])
