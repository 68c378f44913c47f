"""pi-lineedit: single-line, grapheme-aware text input for character grids."""

# Edit buffer
from pi.lineedit.buffer import TextBuffer

# Controller
from pi.lineedit.edit_view import (
    EditState,
    EditView,
    EditViewTheme,
    Edited,
    Submitted,
    Transition,
    transition,
)

# Events
from pi.lineedit.events import Char, Event, EventResult, KeyPress

# Grapheme navigation
from pi.lineedit.graphemes import (
    Boundary,
    ceil_boundary,
    cluster_at,
    floor_boundary,
    is_boundary,
    next_boundary,
    previous_boundary,
    utf8_offset,
)

# Keybindings
from pi.lineedit.keybindings import (
    DEFAULT_EDIT_KEYBINDINGS,
    EditAction,
    EditKeybindingsManager,
    get_edit_keybindings,
    set_edit_keybindings,
)

# Keyboard input handling
from pi.lineedit.keys import Key, KeyId, matches_key, parse_key

# Rendering
from pi.lineedit.render import DrawRun, make_small_stars, render_edit_view

# Scroll window
from pi.lineedit.scroll import adjust_offset

# Surfaces
from pi.lineedit.surface import LineCanvas, Surface

# Utilities
from pi.lineedit.utils import prefix_length, suffix_length, text_width

__all__ = [
    # Buffer
    "TextBuffer",
    # Controller
    "EditState",
    "EditView",
    "EditViewTheme",
    "Edited",
    "Submitted",
    "Transition",
    "transition",
    # Events
    "Char",
    "Event",
    "EventResult",
    "KeyPress",
    # Graphemes
    "Boundary",
    "ceil_boundary",
    "cluster_at",
    "floor_boundary",
    "is_boundary",
    "next_boundary",
    "previous_boundary",
    "utf8_offset",
    # Keybindings
    "DEFAULT_EDIT_KEYBINDINGS",
    "EditAction",
    "EditKeybindingsManager",
    "get_edit_keybindings",
    "set_edit_keybindings",
    # Keys
    "Key",
    "KeyId",
    "matches_key",
    "parse_key",
    # Rendering
    "DrawRun",
    "make_small_stars",
    "render_edit_view",
    # Scroll
    "adjust_offset",
    # Surfaces
    "LineCanvas",
    "Surface",
    # Utilities
    "prefix_length",
    "suffix_length",
    "text_width",
]
