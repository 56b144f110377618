"""Tests for the content rewriter."""

from django.test import SimpleTestCase

from core.enums import DisplayMode
from core.mentions import extract_candidates, rewrite_content, split_content
from core.mentions.rewriter import build_rule, display_text
from core.schemas.mention import ResolvedGroup, ResolvedIdentity, ResolvedUser

FORUM_URL = "https://forum.example.com"

ALICE = ResolvedIdentity(
    slug="alice",
    user=ResolvedUser(uid=5, username="alice", fullname="Alice Liddell"),
)
BOB_NONE = ResolvedIdentity(slug="bob")


def rewrite(content, identities, display=DisplayMode.DEFAULT):
    spans = split_content(content, False, False, True)
    candidates = extract_candidates(spans)
    return rewrite_content(spans, candidates, identities, display, FORUM_URL)


def user_link(uid, text):
    return (
        f'<a class="plugin-mentions-user plugin-mentions-a" '
        f'href="{FORUM_URL}/uid/{uid}">{text}</a>'
    )


class TestRewriteContent(SimpleTestCase):
    """Test suite for rewrite_content."""

    def test_resolved_user_is_linked_and_unknown_left_alone(self):
        """Test only resolved mentions are rewritten, punctuation kept."""
        result = rewrite(
            "hello @alice and @bob!", {"alice": ALICE, "bob": BOB_NONE}
        )
        self.assertEqual(result, f"hello {user_link(5, '@alice')} and @bob!")

    def test_anchor_character_is_preserved(self):
        """Test the character before the @ stays outside the link."""
        result = rewrite("<p>@alice</p>", {"alice": ALICE})
        self.assertEqual(result, f"<p>{user_link(5, '@alice')}</p>")

    def test_latin_mentions_need_a_word_boundary(self):
        """Test @alice does not rewrite the start of @alicette."""
        result = rewrite("@alice @alicette", {"alice": ALICE})
        self.assertEqual(result, f"{user_link(5, '@alice')} @alicette")

    def test_group_link(self):
        """Test groups link to their page with the group class."""
        staff = ResolvedIdentity(
            slug="staff", group=ResolvedGroup(slug="staff", name="Staff")
        )
        result = rewrite("ping @staff", {"staff": staff})
        self.assertEqual(
            result,
            'ping <a class="plugin-mentions-group plugin-mentions-a" '
            f'href="{FORUM_URL}/groups/staff">@staff</a>',
        )

    def test_user_wins_over_group(self):
        """Test a slug naming a user and a group links to the user."""
        both = ResolvedIdentity(
            slug="alice",
            user=ALICE.user,
            group=ResolvedGroup(slug="alice", name="Alice fans"),
        )
        self.assertEqual(rewrite("@alice", {"alice": both}), user_link(5, "@alice"))

    def test_code_is_left_alone(self):
        """Test mentions inside code are not rewritten."""
        content = "<code>@alice</code> @alice"
        self.assertEqual(
            rewrite(content, {"alice": ALICE}),
            f"<code>@alice</code> {user_link(5, '@alice')}",
        )

    def test_text_after_a_lone_code_tag_is_skipped(self):
        """Test the plain span following an unclosed <code> is not rewritten."""
        content = "<code>@alice and @alice"
        self.assertEqual(rewrite(content, {"alice": ALICE}), content)

    def test_non_latin_mention(self):
        """Test non-Latin mentions are rewritten without a word boundary."""
        ivan = ResolvedIdentity(slug="иван", user=ResolvedUser(uid=8, username="иван"))
        self.assertEqual(rewrite("@иван!", {"иван": ivan}), user_link(8, "@иван") + "!")

    def test_display_username(self):
        """Test username display mode shows the canonical username."""
        result = rewrite("@Alice", {"alice": ALICE}, DisplayMode.USERNAME)
        self.assertEqual(result, user_link(5, "alice"))

    def test_display_fullname(self):
        """Test fullname display mode shows the fullname."""
        result = rewrite("@alice", {"alice": ALICE}, DisplayMode.FULLNAME)
        self.assertEqual(result, user_link(5, "Alice Liddell"))

    def test_display_text_is_escaped(self):
        """Test a fullname is HTML-escaped inside the link."""
        evil = ResolvedIdentity(
            slug="eve", user=ResolvedUser(uid=6, username="eve", fullname="<b>Eve</b>")
        )
        result = rewrite("@eve", {"eve": evil}, DisplayMode.FULLNAME)
        self.assertEqual(result, user_link(6, "&lt;b&gt;Eve&lt;/b&gt;"))

    def test_fullname_containing_a_mention_is_rewritten_again(self):
        """Document that link text containing @slug is matched by later rules.

        Rewriting is not idempotent: the visible text of a generated link is
        plain content for the rules applied after it.
        """
        bob = ResolvedIdentity(
            slug="bob", user=ResolvedUser(uid=7, username="bob", fullname="Bob @carol")
        )
        carol = ResolvedIdentity(slug="carol", user=ResolvedUser(uid=9, username="carol"))
        result = rewrite(
            "@bob then @carol", {"bob": bob, "carol": carol}, DisplayMode.FULLNAME
        )
        self.assertEqual(result.count(f'href="{FORUM_URL}/uid/9"'), 2)

    def test_reparsing_rewritten_content_nests_links(self):
        """Document that parsing already rewritten content links again."""
        once = rewrite("@alice", {"alice": ALICE})
        twice = rewrite(once, {"alice": ALICE})
        self.assertNotEqual(once, twice)
        self.assertEqual(twice.count("<a "), 2)


class TestRewriteHelpers(SimpleTestCase):
    """Test suite for rewriter helpers."""

    def test_build_rule_prefers_longer_spellings(self):
        """Test longer raw spellings are tried first."""
        rule = build_rule(["@bob", "@bob.smith"])
        self.assertEqual(rule.search("hi @bob.smith").group(0), "@bob.smith")

    def test_build_rule_uses_lookbehind(self):
        """Test the anchor character is not part of the match."""
        self.assertEqual(build_rule(["@bob"]).search(";@bob").group(0), "@bob")
        self.assertIsNone(build_rule(["@bob"]).search("x@bob"))

    def test_display_text_fullname_fallback(self):
        """Test fullname mode falls back to the matched text."""
        user = ResolvedUser(uid=1, username="zed")
        self.assertEqual(display_text("@Zed", user, DisplayMode.FULLNAME), "@Zed")

    def test_display_text_for_groups(self):
        """Test group mentions always show the matched text."""
        self.assertEqual(display_text("@Staff", None, DisplayMode.USERNAME), "@Staff")

    def test_forum_escaped_names_are_escaped_once(self):
        """Test names the forum returns HTML-escaped are not escaped twice."""
        obrien = ResolvedIdentity(
            slug="obrien",
            user=ResolvedUser(uid=8, username="o&#x27;brien", fullname="O&#x27;Brien"),
        )
        result = rewrite("@obrien", {"obrien": obrien}, DisplayMode.FULLNAME)
        self.assertEqual(result, user_link(8, "O&#x27;Brien"))
        self.assertEqual(
            display_text("@obrien", obrien.user, DisplayMode.USERNAME), "o'brien"
        )
