"""Horizontal scroll window for a single-line edit field.

``adjust_offset`` keeps the cursor visible inside a viewport of ``width``
columns and avoids blank space on the right whenever scrolling left could
show more content.
"""

from __future__ import annotations

from pi.lineedit.graphemes import floor_boundary, next_boundary
from pi.lineedit.utils import suffix_length, text_width


def cursor_width(content: str, cursor: int) -> int:
    """Columns taken by the cursor glyph: the cluster under it, or 1 at the end."""
    nxt = next_boundary(content, cursor)
    return nxt.width if nxt is not None else 1


def adjust_offset(content: str, cursor: int, offset: int, width: int) -> int:
    """Return the new first-visible index for *content*.

    Two phases. First, snap the window so the cursor glyph fits: moving left
    of the window pulls the window back to the cursor, otherwise the window
    starts at the longest tail of ``content[offset:cursor]`` that leaves room
    for the glyph. Second, if what remains visible is narrower than the
    viewport, recompute from the whole content so the viewport is filled,
    keeping one column for the trailing cursor.
    """
    # An edit next to the old offset can fuse it into a cluster
    offset = floor_boundary(content, offset)

    if cursor < offset:
        offset = cursor
    else:
        available = max(width - cursor_width(content, cursor), 0)
        offset = cursor - suffix_length(content[offset:cursor], available)

    assert offset <= cursor, f"Offset {offset} ended up past cursor {cursor}"

    if text_width(content[offset:]) < width:
        offset = len(content) - suffix_length(content, max(width - 1, 0))

    return offset
