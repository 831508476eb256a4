"""Unit tests for the text sanitiser and splitting helpers."""

import pytest

from bloggify.utils.helpers import format_reading_time, truncate_at_boundary
from bloggify.utils.text_processing import (
    decode_entities,
    is_blank,
    remove_tags,
    sanitize,
    split_paragraphs,
    split_sentences,
    split_words,
    strip_html_tags,
)


# ===========================================================================
# 1. Tag stripping and sanitising
# ===========================================================================
class TestStripHtmlTags:
    def test_removes_tags(self, html_content):
        stripped = strip_html_tags(html_content)
        assert stripped == "This is HTML content. It should be stripped properly."

    def test_tags_become_spaces(self):
        assert strip_html_tags("one<br>two") == "one two"

    def test_none_passes_through(self):
        assert strip_html_tags(None) is None

    def test_empty_string(self):
        assert strip_html_tags("") == ""

    def test_decodes_entities(self):
        stripped = strip_html_tags("Hello&nbsp;World &amp; Friends &lt;test&gt;")
        assert stripped == "Hello World & Friends <test>"

    def test_quotes(self):
        assert strip_html_tags("&quot;hi&quot; &#39;there&#39;") == "\"hi\" 'there'"

    def test_collapses_whitespace(self):
        assert strip_html_tags("  a \t\n b\r\n\r\nc  ") == "a b c"


class TestSanitize:
    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input_gives_empty_string(self, value):
        assert sanitize(value) == ""

    def test_whitespace_only(self):
        assert sanitize(" \n\t ") == ""

    def test_tags_only(self):
        assert sanitize("<p></p><br/>") == ""

    def test_entity_decoding_is_single_pass(self):
        assert sanitize("&amp;lt;b&amp;gt;") == "&lt;b&gt;"
        assert sanitize("&amp;amp;") == "&amp;"

    def test_unknown_entities_untouched(self):
        assert sanitize("caf&eacute; &copy;") == "caf&eacute; &copy;"

    @pytest.mark.parametrize("text", [
        "<p>This is <strong>HTML</strong> content.</p>",
        "Hello&nbsp;World &amp; Friends",
        "  plain   text\nwith\tbreaks ",
        "Already clean.",
    ])
    def test_idempotent(self, text):
        once = sanitize(text)
        assert sanitize(once) == once


class TestLowLevelHelpers:
    def test_remove_tags_keeps_entities(self):
        assert remove_tags("<b>a&amp;b</b>") == " a&amp;b "

    def test_decode_entities(self):
        assert decode_entities("&lt;&gt;") == "<>"

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        ("", True),
        ("  \n", True),
        ("x", False),
    ])
    def test_is_blank(self, value, expected):
        assert is_blank(value) is expected

    def test_split_words_drops_empty_tokens(self):
        assert split_words("  one   two\nthree ") == ["one", "two", "three"]


# ===========================================================================
# 2. Sentence and paragraph splitting
# ===========================================================================
class TestSplitting:
    def test_sentences_keep_punctuation(self):
        assert split_sentences("One. Two! Three? Four") == ["One.", "Two!", "Three?", "Four"]

    def test_sentence_needs_trailing_whitespace(self):
        assert split_sentences("Version 1.5 is out.") == ["Version 1.5 is out."]

    def test_empty_text_has_no_sentences(self):
        assert split_sentences("") == []

    def test_paragraphs_unix(self):
        assert split_paragraphs("First.\n\nSecond.") == ["First.", "Second."]

    def test_paragraphs_windows(self):
        assert split_paragraphs("First.\r\n\r\nSecond.") == ["First.", "Second."]

    def test_single_newline_is_not_a_boundary(self):
        assert split_paragraphs("First.\nStill first.") == ["First.\nStill first."]


# ===========================================================================
# 3. Shared helpers
# ===========================================================================
class TestTruncateAtBoundary:
    def test_fits(self):
        assert truncate_at_boundary("short", 10) == "short"

    def test_backs_up_to_space(self):
        assert truncate_at_boundary("hello big world", 12) == "hello big"

    def test_backs_up_to_hyphen(self):
        assert truncate_at_boundary("hello-big-world", 12, "-") == "hello-big"

    def test_no_separator_keeps_raw_cut(self):
        assert truncate_at_boundary("unbreakable", 5) == "unbre"

    def test_separator_at_start_is_ignored(self):
        assert truncate_at_boundary(" abcdef", 4) == " abc"


class TestFormatReadingTime:
    def test_minutes_only(self):
        assert format_reading_time(5) == "5 min read"

    def test_with_words(self):
        assert format_reading_time(2, 400) == "2 min read (400 words)"
