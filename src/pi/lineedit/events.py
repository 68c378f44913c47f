"""Input events and event results.

Events are delivered one at a time. A consumed event may carry a callback;
the host runs it with :meth:`EventResult.process` once the handler has
returned, so notifications never re-enter the widget mid-edit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from pi.lineedit.keys import KeyId


@dataclass(frozen=True)
class Char:
    """A character typed by the user."""

    ch: str


@dataclass(frozen=True)
class KeyPress:
    """A named key such as ``Key.home`` or ``Key.backspace``."""

    key: KeyId


Event = Union[Char, KeyPress]

Callback = Callable[[], None]


@dataclass(frozen=True)
class EventResult:
    consumed: bool
    callback: Callback | None = None

    @classmethod
    def ignored(cls) -> EventResult:
        return cls(consumed=False)

    @classmethod
    def with_cb(cls, callback: Callback) -> EventResult:
        return cls(consumed=True, callback=callback)

    def is_consumed(self) -> bool:
        return self.consumed

    def process(self) -> None:
        """Run the deferred callback, if any."""
        if self.callback is not None:
            self.callback()
