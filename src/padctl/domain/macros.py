"""Macro expression grammar — canonicalizing parser and serializer.

Grammar::

    MacroExpr     := CombinedWrap | NestedWrap | BaseKey
    CombinedWrap  := Hand? ModLetter{2,} "(" MacroExpr ")"    e.g. LSA(KC_H)
    NestedWrap    := Hand? ModLetter "(" MacroExpr ")"        e.g. C(S(KC_M))
    BaseKey       := ("KC_")? Identifier
    Hand          := "L" | "R"
    ModLetter     := "C" | "S" | "A" | "G"

The parser is lenient: text that matches no wrap is the base key literal.
Unwrapping is an explicit loop over a hand-written scanner, so every step
consumes input and adversarial text cannot trigger backtracking.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from padctl.domain.keys import KEY_PREFIX, strip_key_prefix
from padctl.domain.modifiers import (
    HAND_PREFIXES,
    MODIFIER_LETTERS,
    SHORTHAND_CODES,
    Modifier,
    ModifierSet,
    in_nesting_order,
    modifier_from_letter,
)

NO_OP_SENTINEL = "KC_NO"


@dataclass(frozen=True)
class MacroExpression:
    """A base key plus the set of modifiers held with it.

    Two inputs that parse to equal expressions humanize identically, but
    storage still keys translations by the literal text.
    """

    mods: ModifierSet
    key: str

    def serialize(self) -> str:
        """Canonical text for this expression."""
        return serialize(self.mods, self.key)


@dataclass(frozen=True)
class Wrap:
    """One peeled wrapper: its modifier letters and the text inside."""

    letters: str
    inner: str


def normalize_text(text: str) -> str:
    """Drop every whitespace character."""
    return "".join(text.split())


def _closing_paren(text: str, open_index: int) -> int:
    """Index of the parenthesis closing the one at *open_index*, or -1."""
    depth = 0
    for index in range(open_index, len(text)):
        ch = text[index]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return index
    return -1


def _scan_wrap(text: str) -> Wrap | None:
    """Match ``Hand? ModLetter+ "(" inner ")"`` spanning all of *text*."""
    pos = 0
    if len(text) > 1 and text[0] in HAND_PREFIXES and text[1] in MODIFIER_LETTERS:
        pos = 1
    start = pos
    while pos < len(text) and text[pos] in MODIFIER_LETTERS:
        pos += 1
    letters = text[start:pos]
    if not letters or pos >= len(text) or text[pos] != "(":
        return None
    close = _closing_paren(text, pos)
    if close != len(text) - 1:
        return None
    inner = text[pos + 1 : close]
    if not inner:
        return None
    return Wrap(letters=letters, inner=inner)


def match_combined(text: str) -> Wrap | None:
    """Combined shorthand: two or more modifier letters around one group."""
    wrap = _scan_wrap(text)
    if wrap is None or len(wrap.letters) < 2:
        return None
    return wrap


def match_single(text: str) -> Wrap | None:
    """Single-modifier wrap such as ``C(...)`` or ``RS(...)``."""
    wrap = _scan_wrap(text)
    if wrap is None or len(wrap.letters) != 1:
        return None
    return wrap


def parse(text: str) -> MacroExpression | None:
    """Parse macro text into its modifiers and base key id.

    Returns None for empty text and for the ``KC_NO`` sentinel. Anything
    else parses; unknown shapes become the base key verbatim.

    Examples:
        >>> parse("LSA(KC_H)") == parse("A(S(KC_H))")
        True
        >>> parse("  ") is None
        True
    """
    remaining = normalize_text(text)
    if not remaining or remaining.upper() == NO_OP_SENTINEL:
        return None

    mods: set[Modifier] = set()
    while True:
        wrap = match_combined(remaining)
        if wrap is None:
            wrap = match_single(remaining)
        if wrap is None:
            break
        mods.update(modifier_from_letter(letter) for letter in wrap.letters)
        remaining = wrap.inner

    return MacroExpression(mods=frozenset(mods), key=strip_key_prefix(remaining))


def serialize(mods: Iterable[Modifier], key: str) -> str:
    """Canonical macro text for *mods* held with base key *key*.

    ``{Shift, Alt}`` and ``{Ctrl, Alt}`` use the ``LSA``/``LCA`` shorthand;
    every other set nests with Alt innermost and Ctrl outermost.

    Examples:
        >>> serialize({Modifier.CTRL, Modifier.SHIFT}, "M")
        'C(S(KC_M))'
        >>> serialize({Modifier.SHIFT, Modifier.ALT}, "H")
        'LSA(KC_H)'
    """
    mod_set: ModifierSet = frozenset(mods)
    base = f"{KEY_PREFIX}{key}"

    code = SHORTHAND_CODES.get(mod_set)
    if code is not None:
        return f"{code}({base})"

    result = base
    for mod in in_nesting_order(mod_set):
        result = f"{mod.value}({result})"
    return result


def canonicalize(text: str) -> str | None:
    """Re-serialize *text* in canonical form, or None if unrecognized."""
    expr = parse(text)
    if expr is None:
        return None
    return expr.serialize()
