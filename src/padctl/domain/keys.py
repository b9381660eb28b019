"""Key symbol table — canonical key ids to display names and categories.

The table is immutable and built once at import. Ids are stored upper-case
without the ``KC_`` prefix; lookups strip a literal ``KC_`` and match
case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

KEY_PREFIX = "KC_"

# Base key whose display is empty: callers treat it as "no label".
NO_OP_KEY = "NO"


class KeyCategory(StrEnum):
    """Coarse grouping used when listing the table."""

    LETTER = "letter"
    DIGIT = "digit"
    SYMBOL = "symbol"
    NAVIGATION = "navigation"
    EDITING = "editing"
    FUNCTION = "function"
    MODIFIER = "modifier"
    NUMPAD = "numpad"
    MEDIA = "media"
    SPECIAL = "special"


@dataclass(frozen=True)
class KeySymbol:
    """One curated entry of the key table."""

    key_id: str
    display_name: str
    category: KeyCategory


_EDITING: dict[str, str] = {
    "ESC": "Esc",
    "TAB": "Tab",
    "ENTER": "Enter",
    "ENT": "Enter",
    "SPACE": "Space",
    "SPC": "Space",
    "BSPC": "Backspace",
    "DEL": "Delete",
    "INS": "Insert",
    "CAPS": "CapsLock",
    "PSCR": "PrintScreen",
    "SLCK": "ScrollLock",
    "PAUS": "Pause",
    "APP": "Menu",
}

_NAVIGATION: dict[str, str] = {
    "HOME": "Home",
    "END": "End",
    "PGUP": "PageUp",
    "PGDN": "PageDown",
    "UP": "↑",
    "DOWN": "↓",
    "LEFT": "←",
    "RIGHT": "→",
}

_SYMBOLS: dict[str, str] = {
    "MINUS": "-",
    "MINS": "-",
    "EQUAL": "=",
    "EQL": "=",
    "LBRC": "[",
    "RBRC": "]",
    "BSLS": "\\",
    "SCLN": ";",
    "QUOT": "'",
    "GRV": "`",
    "GRAVE": "`",
    "COMM": ",",
    "DOT": ".",
    "SLSH": "/",
    "TILD": "~",
    "TILDE": "~",
    "EXLM": "!",
    "AT": "@",
    "HASH": "#",
    "DLR": "$",
    "PERC": "%",
    "CIRC": "^",
    "AMPR": "&",
    "ASTR": "*",
    "LPRN": "(",
    "RPRN": ")",
    "UNDS": "_",
    "PLUS": "+",
    "LCBR": "{",
    "RCBR": "}",
    "PIPE": "|",
    "COLN": ":",
    "DQUO": '"',
    "LABK": "<",
    "RABK": ">",
    "QUES": "?",
}

_FUNCTION: dict[str, str] = {f"F{n}": f"F{n}" for n in range(1, 21)}

_MODIFIERS: dict[str, str] = {
    "LCTL": "Left Ctrl",
    "RCTL": "Right Ctrl",
    "LSFT": "Left Shift",
    "RSFT": "Right Shift",
    "LALT": "Left Alt",
    "RALT": "Right Alt",
    "LGUI": "Left Cmd",
    "RGUI": "Right Cmd",
    "LWIN": "Left Win",
    "RWIN": "Right Win",
}

_NUMPAD: dict[str, str] = {
    **{f"P{n}": f"Num {n}" for n in range(10)},
    "PDOT": "Num .",
    "PENT": "Num Enter",
    "PPLS": "Num +",
    "PMNS": "Num -",
    "PAST": "Num *",
    "PSLS": "Num /",
    "NLCK": "NumLock",
}

_MEDIA: dict[str, str] = {
    "MUTE": "Mute",
    "VOLU": "Vol Up",
    "VOLD": "Vol Down",
    "MPLY": "Play/Pause",
    "MSTP": "Stop",
    "MPRV": "Prev Track",
    "MNXT": "Next Track",
}

_SPECIAL: dict[str, str] = {
    NO_OP_KEY: "",
    "TRNS": "▽",
}


def _build_table() -> MappingProxyType[str, KeySymbol]:
    sections: list[tuple[KeyCategory, dict[str, str]]] = [
        (KeyCategory.EDITING, _EDITING),
        (KeyCategory.NAVIGATION, _NAVIGATION),
        (KeyCategory.SYMBOL, _SYMBOLS),
        (KeyCategory.FUNCTION, _FUNCTION),
        (KeyCategory.MODIFIER, _MODIFIERS),
        (KeyCategory.NUMPAD, _NUMPAD),
        (KeyCategory.MEDIA, _MEDIA),
        (KeyCategory.SPECIAL, _SPECIAL),
    ]
    table: dict[str, KeySymbol] = {}
    for category, names in sections:
        for key_id, display in names.items():
            table[key_id] = KeySymbol(key_id=key_id, display_name=display, category=category)
    return MappingProxyType(table)


KEY_TABLE: MappingProxyType[str, KeySymbol] = _build_table()


def strip_key_prefix(key_id: str) -> str:
    """Remove a leading literal ``KC_`` if present."""
    if key_id.startswith(KEY_PREFIX):
        return key_id[len(KEY_PREFIX) :]
    return key_id


def lookup(key_id: str) -> KeySymbol | None:
    """Return the curated entry for *key_id*, or None if it is not curated."""
    return KEY_TABLE.get(strip_key_prefix(key_id).upper())


def display_name(key_id: str) -> str:
    """Display name for a base key id.

    Curated ids return their curated name (``MINS`` -> ``"-"``). Other
    single characters are upper-cased; longer unknown ids come back
    verbatim. ``NO`` returns ``""``, meaning "nothing to show".

    Examples:
        >>> display_name("KC_ENT")
        'Enter'
        >>> display_name("h")
        'H'
        >>> display_name("KC_NO")
        ''
    """
    bare = strip_key_prefix(key_id)
    symbol = KEY_TABLE.get(bare.upper())
    if symbol is not None:
        return symbol.display_name
    if len(bare) == 1:
        return bare.upper()
    return bare


def key_category(key_id: str) -> KeyCategory | None:
    """Category of *key_id*; letters and digits are classified on the fly."""
    symbol = lookup(key_id)
    if symbol is not None:
        return symbol.category
    bare = strip_key_prefix(key_id)
    if len(bare) == 1 and bare.isalpha():
        return KeyCategory.LETTER
    if len(bare) == 1 and bare.isdigit():
        return KeyCategory.DIGIT
    return None


def list_symbols(category: KeyCategory | None = None) -> list[KeySymbol]:
    """Curated entries, optionally restricted to one category.

    Letters and digits are synthesized so the listing is complete.
    """
    symbols: list[KeySymbol] = []
    if category in (None, KeyCategory.LETTER):
        symbols.extend(
            KeySymbol(key_id=ch, display_name=ch, category=KeyCategory.LETTER)
            for ch in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        )
    if category in (None, KeyCategory.DIGIT):
        symbols.extend(
            KeySymbol(key_id=ch, display_name=ch, category=KeyCategory.DIGIT)
            for ch in "0123456789"
        )
    symbols.extend(s for s in KEY_TABLE.values() if category is None or s.category == category)
    return symbols
