"""Tests for the content splitter."""

from django.test import SimpleTestCase

from core.mentions.splitter import clean, is_unclosed_code_tag, split_content
from core.schemas.mention import ContentSpan

SAMPLES = [
    "",
    "plain text with @alice",
    "hi `@bob` and @alice",
    "before\n```\n@bob\n```\nafter @alice",
    "before\n~~~python\n@decorator\n",
    "> @bob said\n> more\n@alice replies",
    "``double `tick` code`` then @carol",
    "<p>@alice</p><pre><code>@bob</code></pre>",
    "a <code>@bob",
    "<blockquote>x<blockquote>@bob</blockquote>@carol</blockquote>@alice",
    "<BLOCKQUOTE>@bob",
    "`unterminated @alice",
    "see `foo\n@alice` now",
]


class TestSplitContent(SimpleTestCase):
    """Test suite for split_content."""

    def _texts(self, spans):
        return [span.text for span in spans]

    def test_spans_reproduce_the_input(self):
        """Test that joining the spans gives back the original content."""
        for content in SAMPLES:
            for is_markdown in (True, False):
                for strip_blockquote in (True, False):
                    for strip_code in (True, False):
                        spans = split_content(
                            content, is_markdown, strip_blockquote, strip_code
                        )
                        self.assertEqual(
                            "".join(span.text for span in spans), content
                        )

    def test_spans_alternate_starting_with_plain(self):
        """Test that even indexes are plain and odd indexes protected."""
        for content in SAMPLES:
            spans = split_content(content, True, True, True)
            for index, span in enumerate(spans):
                self.assertEqual(span.protected, index % 2 == 1)

    def test_content_without_regions_is_a_single_plain_span(self):
        """Test content without code or quotes yields one span."""
        spans = split_content("hello @alice", True, True, True)
        self.assertEqual(spans, [ContentSpan(text="hello @alice", protected=False)])

    def test_no_flags_yields_a_single_plain_span(self):
        """Test nothing is protected when both strip flags are off."""
        spans = split_content("hi `@bob`", True, False, False)
        self.assertEqual(len(spans), 1)
        self.assertFalse(spans[0].protected)

    def test_markdown_inline_code(self):
        """Test inline code is protected."""
        spans = split_content("hi `@bob` and @alice", True, False, True)
        self.assertEqual(self._texts(spans), ["hi ", "`@bob`", " and @alice"])

    def test_markdown_inline_code_across_a_line_break(self):
        """Test an inline code span continues on the next line."""
        spans = split_content("see `foo\n@alice` now", True, True, True)
        self.assertEqual(self._texts(spans), ["see ", "`foo\n@alice`", " now"])

    def test_markdown_inline_code_stops_at_a_blank_line(self):
        """Test a paragraph break ends the search for the closing backtick."""
        spans = split_content("see `foo\n\n@alice` now", True, True, True)
        self.assertEqual(len(spans), 1)
        self.assertFalse(spans[0].protected)

    def test_markdown_fenced_code(self):
        """Test a fenced block is protected up to its closing fence."""
        spans = split_content("before\n```\n@bob\n```\nafter @alice", True, False, True)
        self.assertEqual(
            self._texts(spans), ["before\n", "```\n@bob\n```", "\nafter @alice"]
        )

    def test_unclosed_fence_runs_to_the_end(self):
        """Test an unclosed fence protects the rest of the content."""
        spans = split_content("before\n~~~python\n@decorator\n", True, False, True)
        self.assertEqual(self._texts(spans), ["before\n", "~~~python\n@decorator\n", ""])

    def test_markdown_blockquote_spans_consecutive_lines(self):
        """Test consecutive quoted lines form one protected span."""
        spans = split_content("> @bob said\n> more\n@alice replies", True, True, False)
        self.assertEqual(
            self._texts(spans), ["", "> @bob said\n> more", "\n@alice replies"]
        )

    def test_several_regions(self):
        """Test every region gets its own protected span."""
        spans = split_content("`a` `b`", True, False, True)
        self.assertEqual(self._texts(spans), ["", "`a`", " ", "`b`", ""])

    def test_back_to_back_regions(self):
        """Test adjacent regions are separated by an empty plain span."""
        spans = split_content("<code>a</code><code>b</code>", False, False, True)
        self.assertEqual(
            self._texts(spans), ["", "<code>a</code>", "", "<code>b</code>", ""]
        )

    def test_html_code_block(self):
        """Test pre/code elements are protected in rendered content."""
        spans = split_content(
            "<p>@alice</p><pre><code>@bob</code></pre>", False, False, True
        )
        self.assertEqual(
            self._texts(spans),
            ["<p>@alice</p>", "<pre><code>@bob</code></pre>", ""],
        )

    def test_unclosed_html_code_protects_only_the_tag(self):
        """Test a lone <code> tag is protected on its own."""
        spans = split_content("a <code>@bob", False, False, True)
        self.assertEqual(self._texts(spans), ["a ", "<code>", "@bob"])
        self.assertTrue(is_unclosed_code_tag(spans[1]))

    def test_nested_html_blockquotes(self):
        """Test nested blockquotes are protected up to the outer close."""
        content = (
            "<blockquote>x<blockquote>@bob</blockquote>@carol</blockquote>@alice"
        )
        spans = split_content(content, False, True, False)
        self.assertEqual(
            self._texts(spans),
            [
                "",
                "<blockquote>x<blockquote>@bob</blockquote>@carol</blockquote>",
                "@alice",
            ],
        )

    def test_html_blockquote_is_case_insensitive(self):
        """Test tag matching ignores case."""
        spans = split_content("<BLOCKQUOTE>@bob", False, True, False)
        self.assertEqual(self._texts(spans), ["", "<BLOCKQUOTE>@bob", ""])

    def test_none_content(self):
        """Test missing content is treated as empty."""
        self.assertEqual(split_content(None), [ContentSpan(text="")])


class TestClean(SimpleTestCase):
    """Test suite for clean."""

    def test_removes_code_and_quotes(self):
        """Test protected spans are dropped."""
        content = "> quoted @bob\nhello `@carol` @alice"
        self.assertEqual(clean(content, True, True, True), "\nhello  @alice")

    def test_keeps_regions_not_selected(self):
        """Test only the selected regions are dropped."""
        content = "> quoted @bob\nhello `@carol`"
        self.assertEqual(clean(content, True, False, True), "> quoted @bob\nhello ")

    def test_protected_span_helper_ignores_closed_code(self):
        """Test a complete code element is not a lone opening tag."""
        span = ContentSpan(text="<code>x</code>", protected=True)
        self.assertFalse(is_unclosed_code_tag(span))
        self.assertFalse(is_unclosed_code_tag(ContentSpan(text="<code>")))
