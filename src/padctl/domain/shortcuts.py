"""Shortcut encoder — human shortcut notation to macro expressions.

Application manuals list shortcuts as ``Ctrl+Shift+M`` or ``Alt+H``.
Encoding them lets a catalog of labels be written in that notation and
stored under the macro text the macropad emits (``C(S(KC_M))``).
"""

from __future__ import annotations

import re

from padctl.domain.macros import serialize
from padctl.domain.modifiers import Modifier

MODIFIER_WORDS: dict[str, Modifier] = {
    "ctrl": Modifier.CTRL,
    "control": Modifier.CTRL,
    # Catalogs written on macOS say Cmd where the pad sends Ctrl.
    "cmd": Modifier.CTRL,
    "command": Modifier.CTRL,
    "shift": Modifier.SHIFT,
    "alt": Modifier.ALT,
    "option": Modifier.ALT,
}

# Keys are matched case-insensitively.
KEY_ALIASES: dict[str, str] = {
    "enter": "ENT",
    "return": "ENT",
    "esc": "ESC",
    "escape": "ESC",
    "tab": "TAB",
    "space": "SPC",
    "backspace": "BSPC",
    "del": "DEL",
    "delete": "DEL",
    "insert": "INS",
    "home": "HOME",
    "end": "END",
    "pg up": "PGUP",
    "page up": "PGUP",
    "pgup": "PGUP",
    "pg down": "PGDN",
    "page down": "PGDN",
    "pgdn": "PGDN",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "[": "LBRC",
    "]": "RBRC",
    # Shifted forms share the physical key.
    "{": "LBRC",
    "}": "RBRC",
    ";": "SCLN",
    "'": "QUOT",
    ",": "COMM",
    ".": "DOT",
    "/": "SLSH",
    "\\": "BSLS",
    "-": "MINS",
    "=": "EQL",
    "+": "EQL",
    "`": "GRV",
    **{f"f{n}": f"F{n}" for n in range(1, 21)},
}

# Descriptions involving the mouse, holds, or alternatives have no macro.
_UNSUPPORTED = re.compile(
    r"\b(or|Hold|click|LMB|RMB|Mouse|Drag|stylus|Space Bar)\b",
    re.IGNORECASE,
)
_SEPARATOR = re.compile(r"\s*\+\s*")


def _split_parts(shortcut: str) -> list[str]:
    text = shortcut.strip()
    if text == "+":
        return ["+"]
    # A trailing "++" means the plus key itself, as in "Ctrl++".
    if text.endswith("++"):
        return [*_SEPARATOR.split(text[:-2]), "+"]
    return _SEPARATOR.split(text)


def encode_key(word: str) -> str | None:
    """Map a key word to its base key id, or None if unknown."""
    alias = KEY_ALIASES.get(word.lower())
    if alias is not None:
        return alias
    if len(word) == 1 and word.isascii() and word.isalnum():
        return word.upper()
    return None


def encode_shortcut(shortcut: str) -> str | None:
    """Encode ``"Ctrl+Shift+M"``-style text as macro text.

    Examples:
        >>> encode_shortcut("Ctrl+Shift+M")
        'C(S(KC_M))'
        >>> encode_shortcut("Alt+Shift+H")
        'LSA(KC_H)'
        >>> encode_shortcut("Ctrl+click") is None
        True
    """
    if not shortcut.strip() or _UNSUPPORTED.search(shortcut):
        return None

    mods: set[Modifier] = set()
    key_word: str | None = None
    for part in _split_parts(shortcut):
        word = part.strip()
        if not word:
            continue
        mod = MODIFIER_WORDS.get(word.lower())
        if mod is not None:
            mods.add(mod)
        elif key_word is not None:
            # Chords of two base keys have no macro form.
            return None
        else:
            key_word = word

    if key_word is None:
        return None
    key = encode_key(key_word)
    if key is None:
        return None
    return serialize(mods, key)
