"""Pad layouts — the VIA configurator export stored on a profile.

Only the parts needed for labelling are modelled::

    {
      "name": "KB16",
      "layers": [["KC_A", "C(KC_Z)", ...], ...],
      "encoders": [[["KC_VOLD", "KC_VOLU"], ...], ...]
    }

``layers[l][i]`` is the macro on key slot *i* of layer *l*.
``encoders[e][l]`` is the ``[counter-clockwise, clockwise]`` pair of
encoder *e* on layer *l*. Missing or blank slots read as ``KC_NO``.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from padctl.domain.macros import NO_OP_SENTINEL


class PadLayout(BaseModel):
    """Validated layout export."""

    model_config = {"frozen": True, "extra": "ignore"}

    name: str | None = None
    layers: list[list[str]]
    encoders: list[list[list[str]]] = Field(default_factory=list)

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    def keys(self, layer: int) -> list[str]:
        """Macros on every key slot of *layer*."""
        if layer < 0 or layer >= len(self.layers):
            return []
        return [macro.strip() or NO_OP_SENTINEL for macro in self.layers[layer]]

    def encoder_turns(self, layer: int) -> list[tuple[str, str]]:
        """``(counter_clockwise, clockwise)`` per encoder on *layer*."""
        turns: list[tuple[str, str]] = []
        for per_layer in self.encoders:
            pair = per_layer[layer] if 0 <= layer < len(per_layer) else []
            ccw = pair[0].strip() if len(pair) > 0 else ""
            cw = pair[1].strip() if len(pair) > 1 else ""
            turns.append((ccw or NO_OP_SENTINEL, cw or NO_OP_SENTINEL))
        return turns

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


def parse_layout(raw: str | dict[str, Any]) -> PadLayout:
    """Validate a layout from JSON text or an already-decoded dict.

    Raises:
        ValueError: If the text is not JSON or lacks a ``layers`` list of
            string lists.
    """
    data: Any = raw
    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = f"Layout is not valid JSON: {exc}"
            raise ValueError(msg) from exc
    if not isinstance(data, dict):
        msg = "Layout must be a JSON object"
        raise ValueError(msg)
    try:
        return PadLayout.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid layout: {exc.error_count()} problem(s); first: {exc.errors()[0]['msg']}"
        raise ValueError(msg) from exc
