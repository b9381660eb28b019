"""Bulk edit entries — the two value shapes a label edit may arrive in.

A value is either a bare label string (legacy clients) or a mapping with
``label`` and optional ``icon``. Both are resolved once, here, into a
:class:`TranslationEntry`; nothing downstream re-checks the shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


class TranslationEntry(BaseModel):
    """A trimmed label edit. An empty label means "remove"."""

    model_config = {"frozen": True}

    label: str
    icon: str | None = None

    @property
    def is_removal(self) -> bool:
        return self.label == ""


def coerce_entry(value: Any) -> TranslationEntry:
    """Resolve a raw bulk value into a TranslationEntry.

    Raises:
        ValueError: If *value* is neither a string nor a mapping with a
            string ``label`` (and string-or-null ``icon``).
    """
    if isinstance(value, str):
        return TranslationEntry(label=value.strip())

    if isinstance(value, Mapping):
        label = value.get("label", "")
        icon = value.get("icon")
        if label is None:
            label = ""
        if not isinstance(label, str):
            msg = f"label must be a string, got {type(label).__name__}"
            raise ValueError(msg)
        if icon is not None and not isinstance(icon, str):
            msg = f"icon must be a string, got {type(icon).__name__}"
            raise ValueError(msg)
        cleaned_icon = icon.strip() if icon else None
        return TranslationEntry(label=label.strip(), icon=cleaned_icon or None)

    msg = f"Expected a label string or {{label, icon}} object, got {type(value).__name__}"
    raise ValueError(msg)


def macro_entries(raw: Mapping[str, Any]) -> list[tuple[str, TranslationEntry]]:
    """Normalize a ``{macro: value}`` mapping.

    Macro keys are trimmed; blank keys are dropped. Order is preserved.

    Raises:
        ValueError: On the first value with an unsupported shape.
    """
    entries: list[tuple[str, TranslationEntry]] = []
    for macro, value in raw.items():
        key = str(macro).strip()
        if not key:
            continue
        try:
            entries.append((key, coerce_entry(value)))
        except ValueError as exc:
            msg = f"{key}: {exc}"
            raise ValueError(msg) from exc
    return entries


def layer_index(raw: Any) -> int:
    """Parse a layer key (int or decimal string) into a layer index.

    Raises:
        ValueError: If *raw* is not a non-negative integer.
    """
    if isinstance(raw, bool):
        msg = f"Invalid layer index: {raw!r}"
        raise ValueError(msg)
    if isinstance(raw, int):
        index = raw
    elif isinstance(raw, str) and raw.strip().isdigit():
        index = int(raw.strip())
    else:
        msg = f"Invalid layer index: {raw!r}"
        raise ValueError(msg)
    if index < 0:
        msg = f"Invalid layer index: {raw!r}"
        raise ValueError(msg)
    return index


def layer_entries(raw: Mapping[Any, Any]) -> list[tuple[int, TranslationEntry]]:
    """Normalize a ``{layer_index: value}`` mapping.

    Raises:
        ValueError: On an invalid index or unsupported value shape.
    """
    entries: list[tuple[int, TranslationEntry]] = []
    for key, value in raw.items():
        index = layer_index(key)
        try:
            entries.append((index, coerce_entry(value)))
        except ValueError as exc:
            msg = f"layer {index}: {exc}"
            raise ValueError(msg) from exc
    return entries
