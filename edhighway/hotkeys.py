"""Hotkey capture state machine used by the settings editor."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional

CAPTURE_SECONDS = 10

MODIFIER_KEYS = frozenset({"", "Ctrl", "Control", "Shift", "Meta", "Alt", "AltGr"})

_UNSHIFT: Mapping[str, str] = MappingProxyType(
    {
        "!": "1", "@": "2", "#": "3", "$": "4", "%": "5", "^": "6", "&": "7",
        "*": "8", "(": "9", ")": "0", "_": "-", "+": "=", "{": "[", "}": "]",
        '"': "'", ":": ";", "|": "\\", ">": ".", "<": ",", "?": "/", "~": "`",
    }
)


def unshift(key: str) -> str:
    """Map a shifted symbol back to its unshifted key on a US layout."""
    return _UNSHIFT.get(key, key)


def is_modifier(key: Optional[str]) -> bool:
    """True for modifier keys and for an unknown (None or empty) key."""
    return key is None or key in MODIFIER_KEYS


class HotkeyPicker:
    """Captures a key combination while armed; shows a countdown meanwhile.

    ``text`` is what the picker button would display.
    """

    def __init__(self, hot: str = "", on_change: Optional[Callable[[str], None]] = None) -> None:
        self.hot = hot
        self.text = hot
        self.checked = False
        self.seconds_left = 0
        self._on_change = on_change

    def set_hot(self, value: str) -> None:
        self.hot = value
        if not self.checked:
            self.text = value
        if self._on_change is not None:
            self._on_change(value)

    def start(self) -> None:
        """Arm the picker and start the countdown."""
        self.checked = True
        self.seconds_left = CAPTURE_SECONDS
        self.text = str(self.seconds_left)

    def stop(self) -> None:
        """Disarm the picker and show the captured hotkey."""
        self.checked = False
        self.text = self.hot

    def tick(self) -> None:
        """Advance the countdown by one second; stops when it runs out."""
        self.seconds_left -= 1
        if self.seconds_left < 1:
            self.stop()
        else:
            self.text = str(self.seconds_left)

    def key_press(self, modifiers: str, key: Optional[str]) -> None:
        """Record ``modifiers`` (e.g. "Ctrl+Alt+") followed by the key."""
        if self.checked and key:
            self.hot = modifiers + unshift(key)

    def key_release(self, key: Optional[str]) -> None:
        if self.checked and not is_modifier(key):
            self.stop()