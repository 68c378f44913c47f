"""Drawing surfaces.

``Surface`` is what the edit view draws onto. ``LineCanvas`` is an in-memory
one-row surface that turns the draw calls into a terminal line, which is how
``EditView.render`` produces output for a pi-style component tree.
"""

from __future__ import annotations

from typing import Callable, Protocol

from pi.lineedit.utils import get_segmenter, grapheme_width

_segmenter = get_segmenter()


class Surface(Protocol):
    """A rectangular character grid accepting styled runs."""

    @property
    def width(self) -> int: ...

    def draw_at(self, column: int, row: int, text: str, style: str) -> None: ...


class LineTheme(Protocol):
    """Maps each run style name to a ``str -> str`` styler."""

    field: Callable[[str], str]
    field_disabled: Callable[[str], str]
    cursor: Callable[[str], str]


# A cell holds (cluster, style); ``None`` marks the right half of a wide cluster.
_Cell = tuple[str, str]


class LineCanvas:
    """In-memory single-row surface.

    Draws are clipped to ``width`` columns. A wide cluster occupies two
    cells; overwriting either half blanks the other.
    """

    def __init__(self, width: int) -> None:
        self._width = width
        self._cells: list[_Cell | None] = [(" ", "") for _ in range(width)]

    @property
    def width(self) -> int:
        return self._width

    def draw_at(self, column: int, row: int, text: str, style: str) -> None:
        assert row == 0, f"LineCanvas has a single row, got row {row}"
        col = column
        for g in _segmenter.segment(text):
            w = grapheme_width(g)
            if w == 0:
                # Attach zero-width clusters to the preceding cell
                if 0 < col <= self._width:
                    prev = self._cells[col - 1]
                    if prev is not None:
                        self._cells[col - 1] = (prev[0] + g, prev[1])
                continue
            if col < 0 or col + w > self._width:
                break
            self._clear(col)
            if w == 2:
                self._clear(col + 1)
                self._cells[col + 1] = None
            self._cells[col] = (g, style)
            col += w

    def _clear(self, col: int) -> None:
        cell = self._cells[col]
        if cell is None and col > 0:
            # Right half of a wide cluster: blank the left half
            self._cells[col - 1] = (" ", "")
        elif cell is not None and grapheme_width(cell[0]) == 2 and col + 1 < self._width:
            self._cells[col + 1] = (" ", cell[1])

    def plain(self) -> str:
        """The row's text without any styling."""
        return "".join(cell[0] for cell in self._cells if cell is not None)

    def styles(self) -> list[str | None]:
        """Per-column style names; ``None`` for the right half of wide clusters."""
        return [cell[1] if cell is not None else None for cell in self._cells]

    def to_line(self, theme: LineTheme) -> str:
        """The row as a terminal line, each style run passed through *theme*."""
        parts: list[str] = []
        run_style: str | None = None
        run: list[str] = []

        def flush() -> None:
            if not run:
                return
            text = "".join(run)
            styler = getattr(theme, run_style, None) if run_style else None
            parts.append(styler(text) if styler else text)
            run.clear()

        for cell in self._cells:
            if cell is None:
                continue
            g, style = cell
            if style != run_style:
                flush()
                run_style = style
            run.append(g)
        flush()
        return "".join(parts)
