"""EditView component - single-line text input with horizontal scrolling."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Union

from pi.lineedit.buffer import TextBuffer
from pi.lineedit.events import Char, Event, EventResult, KeyPress
from pi.lineedit.keybindings import EditAction, EditKeybindingsManager, get_edit_keybindings
from pi.lineedit.keys import Key, KeyId, is_key_release
from pi.lineedit.render import render_edit_view
from pi.lineedit.scroll import adjust_offset
from pi.lineedit.surface import LineCanvas, Surface

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EditState:
    content: str = ""
    cursor: int = 0
    offset: int = 0
    width: int = 0


@dataclass(frozen=True)
class Edited:
    content: str
    cursor: int


@dataclass(frozen=True)
class Submitted:
    content: str


Notification = Union[Edited, Submitted]


@dataclass(frozen=True)
class Transition:
    state: EditState
    consumed: bool
    notification: Notification | None = None


def _ignored(state: EditState) -> Transition:
    return Transition(state, consumed=False)


def transition(state: EditState, event: Event, *, can_submit: bool = False) -> Transition:
    """Apply *event* to *state*.

    Returns the next state, whether the event was consumed, and the
    notification the host should deliver. Moves and deletions that run into
    either end of the content are not consumed, and neither is Enter unless
    *can_submit* is set.
    """
    buf = TextBuffer(state.content, state.cursor)

    if isinstance(event, Char):
        buf.insert(event.ch)
    elif isinstance(event, KeyPress):
        key = event.key
        if key == Key.home:
            buf.move_home()
        elif key == Key.end:
            buf.move_end()
        elif key == Key.left:
            if not buf.move_left():
                return _ignored(state)
        elif key == Key.right:
            if not buf.move_right():
                return _ignored(state)
        elif key == Key.backspace:
            if not buf.backspace():
                return _ignored(state)
        elif key == Key.delete:
            if not buf.delete():
                return _ignored(state)
        elif key == Key.enter:
            if not can_submit:
                return _ignored(state)
            # Submitting leaves content, cursor and offset alone
            return Transition(state, consumed=True, notification=Submitted(state.content))
        else:
            return _ignored(state)
    else:
        return _ignored(state)

    offset = adjust_offset(buf.content, buf.cursor, state.offset, state.width)
    new_state = replace(state, content=buf.content, cursor=buf.cursor, offset=offset)
    return Transition(
        new_state,
        consumed=True,
        notification=Edited(new_state.content, new_state.cursor),
    )


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------


def _reverse(text: str) -> str:
    return f"\x1b[7m{text}\x1b[27m"


def _plain(text: str) -> str:
    return text


@dataclass
class EditViewTheme:
    """Stylers for the three run styles the renderer emits.

    The field is drawn in reverse video and the cursor without it, so the
    cursor cell stands out as the inverse of the field.
    """

    field: Callable[[str], str] = _reverse
    field_disabled: Callable[[str], str] = _plain
    cursor: Callable[[str], str] = _plain


# ---------------------------------------------------------------------------
# EditView
# ---------------------------------------------------------------------------

_ACTION_KEYS: dict[EditAction, KeyId] = {
    "cursorLeft": Key.left,
    "cursorRight": Key.right,
    "cursorLineStart": Key.home,
    "cursorLineEnd": Key.end,
    "deleteCharBackward": Key.backspace,
    "deleteCharForward": Key.delete,
    "submit": Key.enter,
}


def _is_control(ch: str) -> bool:
    cp = ord(ch)
    return cp < 32 or cp == 0x7F or 0x80 <= cp <= 0x9F


class EditView:
    """Input box where the user can enter and edit a single line of text.

    The host drives it in two passes: ``layout(width)`` then ``draw(surface,
    focused)`` (or ``render(width)`` for pi-style component trees). Events go
    through ``on_event``; the returned :class:`EventResult` carries the
    ``on_edit`` / ``on_submit`` notification for the host to ``process()``.
    """

    def __init__(
        self,
        content: str = "",
        *,
        min_length: int = 1,
        secret: bool = False,
        enabled: bool = True,
        theme: EditViewTheme | None = None,
        keybindings: EditKeybindingsManager | None = None,
    ) -> None:
        self._buffer = TextBuffer(content)
        # First visible index; content before it is scrolled out of view
        self._offset: int = 0
        # Width from the last layout pass
        self._last_length: int = 0
        self._min_length = min_length
        self._secret = secret
        self._enabled = enabled
        self._keybindings = keybindings

        # Bracketed paste state
        self._paste_buffer: str = ""
        self._is_in_paste: bool = False

        # Called with (content, cursor) after each edit or move
        self.on_edit: Callable[[str, int], None] | None = None
        # Called with the content when Enter is pressed
        self.on_submit: Callable[[str], None] | None = None

        # Focusable interface
        self.focused: bool = False

        self.theme = theme or EditViewTheme()

    # -- Flags ----------------------------------------------------------------

    def set_secret(self, secret: bool) -> None:
        """If *secret* is ``True``, the content is masked with ``*``."""
        self._secret = secret

    def is_secret(self) -> bool:
        return self._secret

    def disable(self) -> None:
        """Disables this view. A disabled view cannot take focus."""
        self._enabled = False

    def enable(self) -> None:
        self._enabled = True

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def is_enabled(self) -> bool:
        return self._enabled

    # -- Content --------------------------------------------------------------

    def set_content(self, content: str) -> None:
        """Replace the entire content; the view scrolls back to the start."""
        self._offset = 0
        self._buffer.set_content(content)

    def get_content(self) -> str:
        return self._buffer.snapshot()

    def get_cursor(self) -> int:
        return self._buffer.cursor

    def get_offset(self) -> int:
        return self._offset

    def set_cursor(self, cursor: int) -> None:
        """Move the cursor to *cursor*, snapped back onto a cluster boundary."""
        self._buffer.set_cursor(cursor)
        self._scroll()

    def insert(self, ch: str) -> None:
        """Insert *ch* at the current cursor position."""
        self._buffer.insert(ch)
        self._scroll()

    def remove(self, length: int) -> None:
        """Remove *length* characters at the current cursor position."""
        self._buffer.remove(length)
        self._scroll()

    def remove_before(self, length: int) -> None:
        """Remove *length* characters ending at the current cursor position."""
        self._buffer.remove_before(length)
        self._scroll()

    @property
    def state(self) -> EditState:
        return EditState(
            content=self._buffer.content,
            cursor=self._buffer.cursor,
            offset=self._offset,
            width=self._last_length,
        )

    def _apply(self, state: EditState) -> None:
        self._buffer = TextBuffer(state.content, state.cursor)
        self._offset = state.offset

    def _scroll(self) -> None:
        self._offset = adjust_offset(
            self._buffer.content, self._buffer.cursor, self._offset, self._last_length
        )

    # -- Layout / focus -------------------------------------------------------

    def set_min_length(self, min_length: int) -> None:
        """Sets the minimum width asked of the layout (not of the content)."""
        self._min_length = min_length

    def get_min_size(self) -> tuple[int, int]:
        return (self._min_length, 1)

    def layout(self, width: int) -> None:
        self._last_length = width
        self._scroll()

    def take_focus(self) -> bool:
        return self._enabled

    # -- Events ---------------------------------------------------------------

    def on_event(self, event: Event) -> EventResult:
        result = transition(self.state, event, can_submit=self.on_submit is not None)
        if not result.consumed:
            logger.debug("Ignoring %r at cursor %d", event, self._buffer.cursor)
            return EventResult.ignored()

        self._apply(result.state)
        note = result.notification

        if isinstance(note, Submitted):
            on_submit = self.on_submit
            assert on_submit is not None
            content = note.content
            logger.debug("Submitting %d characters", len(content))
            return EventResult.with_cb(lambda: on_submit(content))

        on_edit = self.on_edit
        if on_edit is None or not isinstance(note, Edited):
            return EventResult(consumed=True)
        content, cursor = note.content, note.cursor
        return EventResult.with_cb(lambda: on_edit(content, cursor))

    def handle_input(self, data: str) -> None:
        # Handle bracketed paste
        if "\x1b[200~" in data:
            self._is_in_paste = True
            self._paste_buffer = ""
            data = data.replace("\x1b[200~", "")

        if self._is_in_paste:
            self._paste_buffer += data
            end_index = self._paste_buffer.find("\x1b[201~")
            if end_index != -1:
                paste_content = self._paste_buffer[:end_index]
                self._handle_paste(paste_content)
                self._is_in_paste = False
                remaining = self._paste_buffer[end_index + 6:]
                self._paste_buffer = ""
                if remaining:
                    self.handle_input(remaining)
            return

        # Kitty reports releases separately; only presses act
        if is_key_release(data):
            return

        kb = self._keybindings or get_edit_keybindings()

        action = kb.action_for(data)
        if action is not None:
            self.on_event(KeyPress(_ACTION_KEYS[action])).process()
            return

        # Regular character input
        if any(_is_control(ch) for ch in data):
            logger.debug("Dropping unbound control input %r", data)
            return
        for ch in data:
            self.on_event(Char(ch)).process()

    def _handle_paste(self, pasted_text: str) -> None:
        # Single line: line breaks and other control characters are dropped
        clean_text = "".join(ch for ch in pasted_text if not _is_control(ch))
        logger.debug("Pasting %d characters", len(clean_text))
        for ch in clean_text:
            self.on_event(Char(ch)).process()

    # -- Drawing --------------------------------------------------------------

    def draw(self, surface: Surface, focused: bool) -> None:
        assert surface.width == self._last_length, (
            f"Was promised {self._last_length}, received {surface.width}"
        )
        runs = render_edit_view(
            self._buffer.content,
            self._buffer.cursor,
            self._offset,
            self._last_length,
            focused=focused,
            secret=self._secret,
            enabled=self._enabled,
        )
        for run in runs:
            surface.draw_at(run.column, 0, run.text, run.style)

    def invalidate(self) -> None:
        pass

    def render(self, width: int) -> list[str]:
        if width != self._last_length:
            self.layout(width)
        canvas = LineCanvas(width)
        self.draw(canvas, self.focused)
        return [canvas.to_line(self.theme)]
