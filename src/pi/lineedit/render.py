"""Renderer: edit state in, draw instructions out.

``render_edit_view`` is a pure function. It never touches a surface; the
widget replays the returned runs onto whatever surface the host supplies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pi.lineedit.graphemes import cluster_at
from pi.lineedit.utils import grapheme_width, prefix_length, text_width

RunStyle = Literal["field", "field_disabled", "cursor"]
RunKind = Literal["content", "fill", "cursor"]

FILL_GLYPH = "_"
END_CURSOR_GLYPH = "_"
MASK_GLYPH = "*"
# Longest star run used to mask one cluster; wider clusters are clamped.
MAX_MASK_RUN = 4


@dataclass(frozen=True)
class DrawRun:
    column: int
    text: str
    style: RunStyle
    kind: RunKind


def make_small_stars(length: int) -> str:
    """Star run masking a single cluster of display width *length*.

    Zero-width clusters still get one star so the cursor stays visible.
    """
    return MASK_GLYPH * max(1, min(length, MAX_MASK_RUN))


def render_edit_view(
    content: str,
    cursor: int,
    offset: int,
    width: int,
    *,
    focused: bool,
    secret: bool = False,
    enabled: bool = True,
) -> list[DrawRun]:
    """Build the draw runs for one frame of an edit field *width* columns wide."""
    style: RunStyle = "field" if enabled else "field_disabled"
    runs: list[DrawRun] = []

    total = text_width(content)
    if total < width:
        # Everything fits
        text = MASK_GLYPH * total if secret else content
        if text:
            runs.append(DrawRun(0, text, style, "content"))
        runs.append(DrawRun(total, FILL_GLYPH * (width - total), style, "fill"))
    else:
        tail = content[offset:]
        visible = tail[: prefix_length(tail, width)]
        visible_cols = text_width(visible)
        text = MASK_GLYPH * visible_cols if secret else visible
        if text:
            runs.append(DrawRun(0, text, style, "content"))
        if visible_cols < width:
            runs.append(
                DrawRun(visible_cols, FILL_GLYPH * (width - visible_cols), style, "fill")
            )

    if focused:
        if cursor == len(content):
            glyph = END_CURSOR_GLYPH
        else:
            selected = cluster_at(content, cursor)
            assert selected is not None, f"Found no cluster at cursor {cursor} in {content!r}"
            glyph = make_small_stars(grapheme_width(selected)) if secret else selected
        column = text_width(content[offset:cursor])
        runs.append(DrawRun(column, glyph, "cursor", "cursor"))

    return runs
