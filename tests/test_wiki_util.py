"""Tests for wiki markup primitives."""

from __future__ import annotations

import pytest

from wikiast.wiki_util import (
    FRAGMENT_ESCAPES,
    clean_space,
    escape,
    remove_wiki_emphasis,
    strip_html,
    wiki_encode,
)


class TestRemoveWikiEmphasis:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("'''bold''' and ''italic''", "bold and italic"),
            ("'''''both'''''", "both"),
            ("it's fine", "it's fine"),
            ("''''bold'''", "'bold"),
            ("a''''''b", "a'b"),
            ("no markup", "no markup"),
        ],
    )
    def test_removes_quote_runs(self, text: str, expected: str) -> None:
        assert remove_wiki_emphasis(text) == expected


class TestCleanSpace:
    def test_collapses_and_trims(self) -> None:
        assert clean_space("  a   b_c d  ") == "a b c d"

    def test_empty(self) -> None:
        assert clean_space("   ") == ""


class TestEscaping:
    """Tests for escape and wiki_encode."""

    def test_space_becomes_underscore(self) -> None:
        assert wiki_encode("a b") == "a_b"

    def test_unsafe_ascii(self) -> None:
        assert wiki_encode('x"#%<>[\\]^`{|}') == "x%22%23%25%3C%3E%5B%5C%5D%5E%60%7B%7C%7D"

    def test_controls(self) -> None:
        assert wiki_encode("\x00\x1f\x7f\x9f") == "%00%1F%7F%9F"

    def test_safe_characters_untouched(self) -> None:
        assert wiki_encode("a/b?c=d&e:é") == "a/b?c=d&e:é"

    def test_table_size(self) -> None:
        # 32 C0 controls, 13 punctuation characters, 33 DEL/C1 controls, space
        assert len(FRAGMENT_ESCAPES) == 32 + 13 + 33 + 1

    def test_custom_table(self) -> None:
        assert escape("a-b-c", {"-": "+"}) == "a+b+c"


class TestStripHtml:
    def test_plain_text_returned_unchanged(self) -> None:
        assert strip_html("just text") == "just text"

    def test_tags_and_entities(self) -> None:
        assert strip_html("x <i>y</i> &lt;z&gt;") == "x y <z>"

    def test_stray_less_than_is_kept(self) -> None:
        assert strip_html("x <y and z") == "x <y and z"

    def test_comparison_next_to_tag(self) -> None:
        assert strip_html("1 < 2 <b>true</b>") == "1 < 2 true"

    def test_comment_removed(self) -> None:
        assert strip_html("a<!-- hidden -->b") == "ab"
