"""Tests for pi.lineedit.render -- draw runs for one frame."""

from __future__ import annotations

from pi.lineedit.render import DrawRun, make_small_stars, render_edit_view


class TestRenderContentFits:
    """Whole content drawn from column 0, the rest filled."""

    def test_content_and_fill(self) -> None:
        runs = render_edit_view("abc", 3, 0, 6, focused=False)
        assert runs == [
            DrawRun(0, "abc", "field", "content"),
            DrawRun(3, "___", "field", "fill"),
        ]

    def test_empty_content_is_all_fill(self) -> None:
        runs = render_edit_view("", 0, 0, 4, focused=False)
        assert runs == [DrawRun(0, "____", "field", "fill")]

    def test_cursor_at_end_is_trailing_marker(self) -> None:
        runs = render_edit_view("abc", 3, 0, 6, focused=True)
        assert runs[-1] == DrawRun(3, "_", "cursor", "cursor")

    def test_cursor_in_middle_draws_cluster(self) -> None:
        runs = render_edit_view("abc", 1, 0, 6, focused=True)
        assert runs[-1] == DrawRun(1, "b", "cursor", "cursor")

    def test_cursor_on_combining_cluster(self) -> None:
        runs = render_edit_view("xe\u0301y", 1, 0, 6, focused=True)
        assert runs[-1] == DrawRun(1, "e\u0301", "cursor", "cursor")

    def test_no_cursor_without_focus(self) -> None:
        runs = render_edit_view("abc", 1, 0, 6, focused=False)
        assert all(run.kind != "cursor" for run in runs)

    def test_disabled_style(self) -> None:
        runs = render_edit_view("abc", 3, 0, 6, focused=False, enabled=False)
        assert {run.style for run in runs} == {"field_disabled"}


class TestRenderScrolled:
    """Content wider than the viewport is drawn from the offset."""

    def test_tail_of_long_content(self) -> None:
        runs = render_edit_view("hello world", 11, 7, 5, focused=True)
        assert runs == [
            DrawRun(0, "orld", "field", "content"),
            DrawRun(4, "_", "field", "fill"),
            DrawRun(4, "_", "cursor", "cursor"),
        ]

    def test_visible_slice_is_truncated_to_width(self) -> None:
        runs = render_edit_view("hello world", 0, 0, 5, focused=False)
        assert runs == [DrawRun(0, "hello", "field", "content")]

    def test_wide_char_is_never_split(self) -> None:
        runs = render_edit_view("a中b", 2, 1, 3, focused=True)
        assert runs == [
            DrawRun(0, "中b", "field", "content"),
            DrawRun(2, "b", "cursor", "cursor"),
        ]

    def test_wide_char_that_does_not_fit_leaves_fill(self) -> None:
        runs = render_edit_view("ab中c", 0, 0, 3, focused=False)
        assert runs == [
            DrawRun(0, "ab", "field", "content"),
            DrawRun(2, "_", "field", "fill"),
        ]


class TestRenderSecret:
    """Secret mode only ever shows stars for content."""

    def test_content_is_masked(self) -> None:
        runs = render_edit_view("hunter2", 2, 0, 10, focused=True, secret=True)
        content = [run for run in runs if run.kind in ("content", "cursor")]
        assert "".join(run.text for run in content) == "********"
        assert DrawRun(2, "*", "cursor", "cursor") in runs

    def test_scrolled_content_is_masked(self) -> None:
        runs = render_edit_view("correct horse battery", 21, 17, 5, focused=True, secret=True)
        revealed = "".join(run.text for run in runs if run.kind == "content")
        assert set(revealed) == {"*"}

    def test_wide_cursor_cluster_masked_to_its_width(self) -> None:
        runs = render_edit_view("中", 0, 0, 5, focused=True, secret=True)
        assert runs[0] == DrawRun(0, "**", "field", "content")
        assert runs[-1] == DrawRun(0, "**", "cursor", "cursor")

    def test_small_stars_are_clamped(self) -> None:
        assert make_small_stars(1) == "*"
        assert make_small_stars(2) == "**"
        assert make_small_stars(9) == "****"
        assert make_small_stars(0) == "*"

    def test_zero_width_cursor_cluster_shows_a_star(self) -> None:
        runs = render_edit_view("\u0301a", 0, 0, 5, focused=True, secret=True)
        assert runs[-1] == DrawRun(0, "*", "cursor", "cursor")

