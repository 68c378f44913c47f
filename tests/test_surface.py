"""Tests for pi.lineedit.surface.LineCanvas -- in-memory one-row surface."""

from __future__ import annotations

import pytest

from pi.lineedit.surface import LineCanvas


class _Theme:
    @staticmethod
    def field(text: str) -> str:
        return f"[{text}]"

    @staticmethod
    def field_disabled(text: str) -> str:
        return text

    @staticmethod
    def cursor(text: str) -> str:
        return f"<{text}>"


class TestLineCanvasDrawing:
    """draw_at places clusters by display column."""

    def test_blank_canvas(self) -> None:
        assert LineCanvas(3).plain() == "   "

    def test_draw_text(self) -> None:
        canvas = LineCanvas(5)
        canvas.draw_at(0, 0, "ab", "field")
        assert canvas.plain() == "ab   "

    def test_draw_is_clipped(self) -> None:
        canvas = LineCanvas(3)
        canvas.draw_at(0, 0, "abcdef", "field")
        assert canvas.plain() == "abc"

    def test_wide_cluster_takes_two_columns(self) -> None:
        canvas = LineCanvas(3)
        canvas.draw_at(0, 0, "中", "field")
        assert canvas.plain() == "中 "
        assert canvas.styles() == ["field", None, ""]

    def test_wide_cluster_not_drawn_half(self) -> None:
        canvas = LineCanvas(2)
        canvas.draw_at(0, 0, "a中", "field")
        assert canvas.plain() == "a "

    def test_overwriting_right_half_blanks_wide_cluster(self) -> None:
        canvas = LineCanvas(3)
        canvas.draw_at(0, 0, "中b", "field")
        canvas.draw_at(1, 0, "Z", "cursor")
        assert canvas.plain() == " Zb"

    def test_overdraw_replaces_cell(self) -> None:
        canvas = LineCanvas(4)
        canvas.draw_at(0, 0, "____", "field")
        canvas.draw_at(2, 0, "_", "cursor")
        assert canvas.plain() == "____"
        assert canvas.styles() == ["field", "field", "cursor", "field"]

    def test_combining_mark_attaches_to_previous_cell(self) -> None:
        canvas = LineCanvas(3)
        canvas.draw_at(0, 0, "e", "field")
        canvas.draw_at(1, 0, "\u0301", "field")
        assert canvas.plain() == "e\u0301  "

    def test_single_row_only(self) -> None:
        with pytest.raises(AssertionError):
            LineCanvas(3).draw_at(0, 1, "a", "field")


class TestLineCanvasToLine:
    """to_line groups cells into styled runs."""

    def test_runs_are_styled_by_theme(self) -> None:
        canvas = LineCanvas(4)
        canvas.draw_at(0, 0, "ab__", "field")
        canvas.draw_at(1, 0, "b", "cursor")
        assert canvas.to_line(_Theme()) == "[a]<b>[__]"

    def test_unstyled_cells_pass_through(self) -> None:
        canvas = LineCanvas(3)
        canvas.draw_at(0, 0, "a", "field")
        assert canvas.to_line(_Theme()) == "[a]  "
