"""Edit buffer: content plus a cursor that always sits on a grapheme boundary."""

from __future__ import annotations

from pi.lineedit.graphemes import (
    ceil_boundary,
    floor_boundary,
    is_boundary,
    next_boundary,
    previous_boundary,
)


class TextBuffer:
    """Single-line edit buffer.

    ``content`` is an immutable ``str``: each edit builds a new string, so any
    snapshot handed out earlier keeps its value. ``cursor`` is an index into
    ``content`` and is kept on a grapheme-cluster boundary after every
    operation.
    """

    def __init__(self, content: str = "", cursor: int = 0) -> None:
        self._content = content
        self._cursor = floor_boundary(content, cursor)

    @property
    def content(self) -> str:
        return self._content

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._content)

    def snapshot(self) -> str:
        """Return the current content; later edits never change it."""
        return self._content

    # -- Mutation -----------------------------------------------------------

    def insert(self, ch: str) -> None:
        """Insert *ch* at the cursor and move the cursor past it."""
        assert len(ch) == 1, f"insert() takes a single character, got {ch!r}"
        cursor = self._cursor
        self._content = self._content[:cursor] + ch + self._content[cursor:]
        # A joiner or regional indicator can fuse with its neighbour; step
        # over the whole fused cluster.
        self._cursor = ceil_boundary(self._content, cursor + len(ch))

    def remove(self, length: int) -> None:
        """Delete *length* characters starting at the cursor.

        For backspace the caller moves the cursor back first and passes the
        exact length of the cluster it stepped over.
        """
        start = self._cursor
        end = start + length
        assert 0 <= length and end <= len(self._content), (
            f"Cannot remove {length} characters at {start} from {len(self._content)}"
        )
        assert is_boundary(self._content, end), (
            f"Removal end {end} is not a grapheme boundary in {self._content!r}"
        )
        self._content = self._content[:start] + self._content[end:]
        self._cursor = floor_boundary(self._content, start)

    def remove_before(self, length: int) -> None:
        """Delete the *length* characters ending at the cursor.

        Undoes ``insert`` even when the inserted character fused with the
        cluster before it, where no boundary exists at the insertion point.
        """
        end = self._cursor
        start = end - length
        assert 0 <= length <= end, (
            f"Cannot remove {length} characters before {end}"
        )
        assert is_boundary(self._content, end), (
            f"Cursor {end} is not a grapheme boundary in {self._content!r}"
        )
        self._content = self._content[:start] + self._content[end:]
        self._cursor = floor_boundary(self._content, start)

    def set_content(self, content: str) -> None:
        """Replace the whole content, clamping the cursor back onto a boundary."""
        self._content = content
        self._cursor = floor_boundary(content, min(self._cursor, len(content)))

    def set_cursor(self, cursor: int) -> None:
        self._cursor = floor_boundary(self._content, cursor)

    # -- Navigation ---------------------------------------------------------

    def move_home(self) -> None:
        self._cursor = 0

    def move_end(self) -> None:
        self._cursor = len(self._content)

    def move_left(self) -> bool:
        prev = previous_boundary(self._content, self._cursor)
        if prev is None:
            return False
        self._cursor = prev.index
        return True

    def move_right(self) -> bool:
        nxt = next_boundary(self._content, self._cursor)
        if nxt is None:
            return False
        self._cursor = nxt.index
        return True

    def backspace(self) -> bool:
        """Remove the cluster before the cursor."""
        prev = previous_boundary(self._content, self._cursor)
        if prev is None:
            return False
        length = self._cursor - prev.index
        self._cursor = prev.index
        self.remove(length)
        return True

    def delete(self) -> bool:
        """Remove the cluster at the cursor."""
        nxt = next_boundary(self._content, self._cursor)
        if nxt is None:
            return False
        self.remove(nxt.index - self._cursor)
        return True
