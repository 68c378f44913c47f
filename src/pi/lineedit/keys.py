"""Keyboard input parsing for the edit field.

Turns raw terminal input (legacy CSI/SS3 sequences, single control bytes and
kitty ``CSI u`` sequences) into key identifiers such as ``"left"``,
``"ctrl+a"`` or ``"shift+delete"``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyId = str

# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named constants for the keys the edit field reacts to."""

    enter = "enter"
    backspace = "backspace"
    delete = "delete"
    home = "home"
    end = "end"
    left = "left"
    right = "right"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

LOCK_MASK = 64 + 128

CODEPOINTS: dict[str, int] = {
    "escape": 27,
    "tab": 9,
    "enter": 13,
    "space": 32,
    "backspace": 127,
    "kp_enter": 57414,
}

# Legacy escape sequences -> key names
LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[7~": "home",
    "\x1b[8~": "end",
}

# Final byte of ``CSI 1;<mod> X`` -> key name
_CSI_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

# Number of ``CSI <n>;<mod> ~`` -> key name
_CSI_TILDE_KEYS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    7: "home",
    8: "end",
}

# ---------------------------------------------------------------------------
# Kitty protocol
# ---------------------------------------------------------------------------


@dataclass
class ParsedKittySequence:
    codepoint: int
    shifted_key: Optional[int]
    modifier: int
    event_type: int  # 1 = press, 2 = repeat, 3 = release


# CSI u format: \x1b[<codepoint>(:<shifted_key>(:<base_layout_key>))?(;<modifier>(:<event_type>))?u
_KITTY_CSI_U_RE = re.compile(
    r"\x1b\[(\d+)(?::(\d*)(?::(\d+))?)?(?:;(\d+)(?::(\d+))?)?u"
)

# Modified arrows / home / end: \x1b[1;<modifier>(:<event_type>)?[ABCDHF]
_CSI_LETTER_RE = re.compile(r"\x1b\[1;(\d+)(?::(\d+))?([ABCDHF])")

# Modified functional keys: \x1b[<number>;<modifier>(:<event_type>)?~
_CSI_TILDE_RE = re.compile(r"\x1b\[(\d+);(\d+)(?::(\d+))?~")


def parse_kitty_sequence(data: str) -> ParsedKittySequence | None:
    """Parse a full-match kitty ``CSI u`` sequence."""
    m = _KITTY_CSI_U_RE.fullmatch(data)
    if m is None:
        return None
    codepoint = int(m.group(1))
    shifted = int(m.group(2)) if m.group(2) else None
    modifier = int(m.group(4)) if m.group(4) else 1
    event_type = int(m.group(5)) if m.group(5) else 1
    return ParsedKittySequence(codepoint, shifted, modifier, event_type)


def _modifier_prefix(modifier: int) -> str:
    mod = (modifier - 1) & ~LOCK_MASK
    prefix = ""
    if mod & MODIFIERS["ctrl"]:
        prefix += "ctrl+"
    if mod & MODIFIERS["shift"]:
        prefix += "shift+"
    if mod & MODIFIERS["alt"]:
        prefix += "alt+"
    return prefix


def is_key_release(data: str) -> bool:
    """Check if *data* is a kitty key release event."""
    parsed = parse_kitty_sequence(data)
    if parsed is not None:
        return parsed.event_type == 3
    for pattern in (_CSI_LETTER_RE, _CSI_TILDE_RE):
        m = pattern.fullmatch(data)
        if m is not None:
            event = m.group(2) if pattern is _CSI_LETTER_RE else m.group(3)
            return event == "3"
    return False


# ---------------------------------------------------------------------------
# parse_key
# ---------------------------------------------------------------------------


def parse_key(data: str) -> KeyId | None:  # noqa: C901
    """Parse raw terminal input and return the key identifier, or ``None``.

    Plain printable characters come back as themselves (``"a"``), named keys
    by name (``"home"``), and modified keys with a ``ctrl+``/``shift+``/
    ``alt+`` prefix.
    """
    if not data:
        return None

    # --- Kitty protocol ---
    parsed = parse_kitty_sequence(data)
    if parsed is not None:
        prefix = _modifier_prefix(parsed.modifier)
        cp = parsed.codepoint
        for name, code in CODEPOINTS.items():
            if cp == code:
                if name == "kp_enter":
                    return prefix + "enter"
                return prefix + name
        if cp > 0:
            ch = chr(cp)
            if ch.isprintable():
                return prefix + ch.lower()
        return None

    # --- Legacy escape sequences ---
    if data in LEGACY_KEY_SEQUENCES:
        return LEGACY_KEY_SEQUENCES[data]

    m = _CSI_LETTER_RE.fullmatch(data)
    if m is not None:
        return _modifier_prefix(int(m.group(1))) + _CSI_LETTER_KEYS[m.group(3)]

    m = _CSI_TILDE_RE.fullmatch(data)
    if m is not None:
        name = _CSI_TILDE_KEYS.get(int(m.group(1)))
        if name is None:
            return None
        return _modifier_prefix(int(m.group(2))) + name

    # --- Simple single-byte keys ---
    if data == "\x1b":
        return "escape"
    if data == "\r" or data == "\n":
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data == "\x7f" or data == "\x08":
        return "backspace"
    if data == "\x1b[Z":
        return "shift+tab"

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == "\x1b":
        ch = data[1]
        if ch == "\x7f" or ch == "\x08":
            return "alt+backspace"
        if ch == "\r" or ch == "\n":
            return "alt+enter"
        if ch.isprintable():
            return "alt+" + ch.lower()

    # --- Plain printable character ---
    if len(data) == 1 and data.isprintable():
        return data

    return None


def matches_key(data: str, key_id: KeyId) -> bool:
    """Return ``True`` if raw *data* is the key identified by *key_id*."""
    parsed = parse_key(data)
    if parsed is None:
        return False
    if parsed == key_id:
        return True
    # "esc" is accepted as an alias of "escape"
    return key_id == "esc" and parsed == "escape"
