"""Tests for pi.lineedit.utils -- width measurement and width fitting."""

from __future__ import annotations

from pi.lineedit.utils import (
    get_segmenter,
    grapheme_width,
    prefix_length,
    suffix_length,
    text_width,
)


# ---------------------------------------------------------------------------
# grapheme_width
# ---------------------------------------------------------------------------


class TestGraphemeWidth:
    """Width of a single grapheme cluster."""

    def test_ascii_letter(self) -> None:
        assert grapheme_width("a") == 1

    def test_wide_cjk(self) -> None:
        assert grapheme_width("中") == 2

    def test_base_with_combining_mark(self) -> None:
        assert grapheme_width("e\u0301") == 1

    def test_lone_combining_mark_is_zero(self) -> None:
        assert grapheme_width("\u0301") == 0

    def test_control_char_is_zero(self) -> None:
        assert grapheme_width("\x07") == 0

    def test_emoji_is_two(self) -> None:
        assert grapheme_width("\U0001F600") == 2

    def test_empty(self) -> None:
        assert grapheme_width("") == 0


# ---------------------------------------------------------------------------
# text_width
# ---------------------------------------------------------------------------


class TestTextWidth:
    """Measure raw edit content per cluster."""

    def test_plain_ascii(self) -> None:
        assert text_width("hello") == 5

    def test_empty_string(self) -> None:
        assert text_width("") == 0

    def test_mixed_ascii_and_wide(self) -> None:
        # "A" (1) + U+4E16 (2) + "B" (1) = 4
        assert text_width("A世B") == 4

    def test_combining_marks_do_not_add_width(self) -> None:
        assert text_width("cafe\u0301") == 4

    def test_repeated_measurement_is_stable(self) -> None:
        text = "世界"
        assert text_width(text) == 4
        assert text_width(text) == 4


# ---------------------------------------------------------------------------
# prefix_length / suffix_length
# ---------------------------------------------------------------------------


class TestPrefixLength:
    """Longest cluster-aligned prefix fitting a width."""

    def test_ascii(self) -> None:
        assert prefix_length("hello", 3) == 3

    def test_everything_fits(self) -> None:
        assert prefix_length("hi", 10) == 2

    def test_wide_cluster_not_split(self) -> None:
        assert prefix_length("中a", 1) == 0

    def test_combining_cluster_counted_whole(self) -> None:
        # "e" + U+0301 is one cluster of width 1 and length 2
        assert prefix_length("e\u0301x", 1) == 2

    def test_zero_width(self) -> None:
        assert prefix_length("abc", 0) == 0


class TestSuffixLength:
    """Longest cluster-aligned suffix fitting a width."""

    def test_ascii(self) -> None:
        assert suffix_length("hello world", 4) == 4

    def test_wide_cluster_at_end(self) -> None:
        assert suffix_length("a中", 2) == 1

    def test_wide_cluster_does_not_fit(self) -> None:
        assert suffix_length("a中", 1) == 0

    def test_combining_cluster_counted_whole(self) -> None:
        assert suffix_length("ae\u0301", 1) == 2

    def test_empty(self) -> None:
        assert suffix_length("", 5) == 0


class TestSegmenter:
    """Segmenter splits text into grapheme clusters."""

    def test_combining_sequence_is_one_cluster(self) -> None:
        assert get_segmenter().segment("e\u0301a") == ["e\u0301", "a"]
