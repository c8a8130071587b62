"""Key tokens understood by the popups.

Key names follow Textual's ``events.Key.key`` vocabulary. Tests and the
state machines may pass plain strings; screens pass the key together with the
printable character Textual decoded for it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KeyPress:
    key: str
    character: str | None = None


KeyToken = KeyPress | str


_ALIASES = {
    "return": "enter",
    "ctrl+m": "enter",
    "ctrl+i": "tab",
    "esc": "escape",
    "ctrl+h": "backspace",
}

_NAMED_CHARACTERS = {
    "space": " ",
}


def as_key_press(token: KeyToken) -> KeyPress:
    """Normalize a token into a KeyPress with Textual key naming."""
    if isinstance(token, KeyPress):
        key = _ALIASES.get(token.key, token.key)
        if key == token.key:
            return token
        return KeyPress(key, token.character)

    key = _ALIASES.get(token, token)
    if len(token) == 1:
        return KeyPress(key, token)
    return KeyPress(key, _NAMED_CHARACTERS.get(key))


def matches(token: KeyToken, *names: str) -> bool:
    """Return True if ``token`` is any of the given key names.

    Single-character names also match on the decoded character, so ``"J"``
    matches both ``key="J"`` and ``key="shift+j", character="J"``.
    """
    press = as_key_press(token)
    for name in names:
        if press.key == name:
            return True
        if len(name) == 1 and press.character == name:
            return True
    return False


MOVE_UP_KEYS = ("k", "K", "shift+k", "shift+up")
MOVE_DOWN_KEYS = ("j", "J", "shift+j", "shift+down")
EDIT_KEYS = ("e", "E", "shift+e")
DELETE_KEYS = ("d", "D", "shift+d", "delete", "backspace")
