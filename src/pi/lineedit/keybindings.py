"""Edit field keybindings manager."""

from __future__ import annotations

import logging
from typing import Literal, get_args

from pi.lineedit.keys import KeyId, matches_key

logger = logging.getLogger(__name__)

EditAction = Literal[
    # Cursor movement
    "cursorLeft",
    "cursorRight",
    "cursorLineStart",
    "cursorLineEnd",
    # Deletion
    "deleteCharBackward",
    "deleteCharForward",
    # Submission
    "submit",
]

EDIT_ACTIONS: tuple[str, ...] = get_args(EditAction)

EditKeybindingsConfig = dict[EditAction, KeyId | list[KeyId]]

DEFAULT_EDIT_KEYBINDINGS: dict[EditAction, KeyId | list[KeyId]] = {
    "cursorLeft": ["left", "ctrl+b"],
    "cursorRight": ["right", "ctrl+f"],
    "cursorLineStart": ["home", "ctrl+a"],
    "cursorLineEnd": ["end", "ctrl+e"],
    "deleteCharBackward": "backspace",
    "deleteCharForward": ["delete", "ctrl+d"],
    "submit": "enter",
}


class EditKeybindingsManager:
    """Manages keybindings for the edit field."""

    def __init__(self, config: EditKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[EditAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: EditKeybindingsConfig) -> None:
        unknown = [action for action in config if action not in EDIT_ACTIONS]
        if unknown:
            raise ValueError(f"Unknown edit action(s): {', '.join(sorted(unknown))}")

        self._action_to_keys.clear()

        # Start with defaults
        for action, keys in DEFAULT_EDIT_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # Override with user config
        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            logger.debug("Rebinding %s to %s", action, key_array)
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: EditAction) -> bool:
        """Check if input matches a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        for key in keys:
            if matches_key(data, key):
                return True
        return False

    def action_for(self, data: str) -> EditAction | None:
        """Return the first action bound to *data*, in declaration order."""
        for action in self._action_to_keys:
            if self.matches(data, action):
                return action
        return None

    def get_keys(self, action: EditAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: EditKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


_global_edit_keybindings: EditKeybindingsManager | None = None


def get_edit_keybindings() -> EditKeybindingsManager:
    global _global_edit_keybindings
    if _global_edit_keybindings is None:
        _global_edit_keybindings = EditKeybindingsManager()
    return _global_edit_keybindings


def set_edit_keybindings(manager: EditKeybindingsManager) -> None:
    global _global_edit_keybindings
    _global_edit_keybindings = manager
