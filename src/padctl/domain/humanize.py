"""Humanizer — deterministic display text for a macro expression.

Pure function over the key table and modifier algebra; it never touches
persisted translations. Examples::

    KC_2        -> "2"
    C(KC_EQL)   -> "Ctrl+="
    C(S(KC_P))  -> "Ctrl+Shift+P"
    LSA(KC_L)   -> "Alt+Shift+L"
    TO(3)       -> "Layer 4"
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from padctl.domain.keys import display_name
from padctl.domain.macros import NO_OP_SENTINEL, normalize_text, parse
from padctl.domain.modifiers import display_words

# Layer-switch actions take a zero-based layer index; labels are one-based.
LAYER_ACTION_LABELS: dict[str, str] = {
    "TO": "Layer",
    "MO": "Hold Layer",
    "TG": "Toggle Layer",
    "OSL": "One-shot Layer",
}

_LAYER_ACTION_PATTERN = re.compile(r"^(TO|MO|TG|OSL)\((\d+)\)$", re.IGNORECASE)


@dataclass(frozen=True)
class LayerAction:
    """A layer-switch macro such as ``MO(1)``."""

    action: str
    layer_index: int

    @property
    def label(self) -> str:
        return f"{LAYER_ACTION_LABELS[self.action]} {self.layer_index + 1}"


def parse_layer_action(text: str) -> LayerAction | None:
    """Recognize ``TO(n)``, ``MO(n)``, ``TG(n)`` and ``OSL(n)``."""
    match = _LAYER_ACTION_PATTERN.match(normalize_text(text))
    if match is None:
        return None
    return LayerAction(action=match.group(1).upper(), layer_index=int(match.group(2)))


def humanize(macro: str) -> str | None:
    """Convert macro text to a display label.

    Returns None when there is nothing to show: empty text, ``KC_NO``, or
    a base key whose display name is empty.
    """
    text = normalize_text(macro)
    if not text or text.upper() == NO_OP_SENTINEL:
        return None

    layer = parse_layer_action(text)
    if layer is not None:
        return layer.label

    expr = parse(text)
    if expr is None:
        return None

    key_display = display_name(expr.key)
    if key_display == "":
        return None

    words = display_words(expr.mods)
    if not words:
        return key_display
    return "+".join(words) + "+" + key_display
