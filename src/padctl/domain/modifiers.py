"""Modifier algebra — the held keys that wrap a base key.

Two orderings exist and must never be mixed up:

- **Nesting order** (innermost to outermost) drives the serializer:
  ``{Ctrl, Shift, Alt}`` becomes ``C(S(A(KC_X)))``.
- **Display order** drives the humanizer: Ctrl, Alt, Shift, Cmd, so
  ``{Alt, Shift}`` reads ``"Alt+Shift+X"``.

Gui/Cmd is accepted when parsing but never receives shorthand.
"""

from __future__ import annotations

from enum import StrEnum


class Modifier(StrEnum):
    """A modifier, valued by its single-letter macro code."""

    CTRL = "C"
    SHIFT = "S"
    ALT = "A"
    GUI = "G"


ModifierSet = frozenset[Modifier]

EMPTY: ModifierSet = frozenset()

# Optional left/right hand prefix; parsed and discarded.
HAND_PREFIXES = frozenset({"L", "R"})

MODIFIER_LETTERS: frozenset[str] = frozenset(m.value for m in Modifier)

# Innermost first. Gui sits inside Alt so the three core modifiers keep
# their documented shape when Gui is present.
NESTING_ORDER: tuple[Modifier, ...] = (
    Modifier.GUI,
    Modifier.ALT,
    Modifier.SHIFT,
    Modifier.CTRL,
)

DISPLAY_ORDER: tuple[Modifier, ...] = (
    Modifier.CTRL,
    Modifier.ALT,
    Modifier.SHIFT,
    Modifier.GUI,
)

DISPLAY_NAMES: dict[Modifier, str] = {
    Modifier.CTRL: "Ctrl",
    Modifier.SHIFT: "Shift",
    Modifier.ALT: "Alt",
    Modifier.GUI: "Cmd",
}

# Combined codes the serializer emits. Every other set is nested.
SHORTHAND_CODES: dict[ModifierSet, str] = {
    frozenset({Modifier.SHIFT, Modifier.ALT}): "LSA",
    frozenset({Modifier.CTRL, Modifier.ALT}): "LCA",
}


def modifier_from_letter(letter: str) -> Modifier:
    """Return the modifier for a macro letter (``C``, ``S``, ``A``, ``G``).

    Raises:
        ValueError: If *letter* is not a modifier code.
    """
    return Modifier(letter.upper())


def modifier_set(*mods: Modifier | str) -> ModifierSet:
    """Build a ModifierSet from modifiers or their letters.

    Examples:
        >>> sorted(modifier_set("C", "S"))
        [<Modifier.CTRL: 'C'>, <Modifier.SHIFT: 'S'>]
    """
    return frozenset(m if isinstance(m, Modifier) else modifier_from_letter(m) for m in mods)


def in_nesting_order(mods: ModifierSet) -> list[Modifier]:
    """Modifiers of *mods*, innermost wrapper first."""
    return [m for m in NESTING_ORDER if m in mods]


def in_display_order(mods: ModifierSet) -> list[Modifier]:
    """Modifiers of *mods* in the order a label shows them."""
    return [m for m in DISPLAY_ORDER if m in mods]


def display_words(mods: ModifierSet) -> list[str]:
    """Display words for *mods*, e.g. ``["Ctrl", "Alt"]``."""
    return [DISPLAY_NAMES[m] for m in in_display_order(mods)]
