"""Command group: layer labels."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import click

from padctl.commands._base import PadGroup
from padctl.commands._context import read_json_input
from padctl.commands._options import profile_option

if TYPE_CHECKING:
    from padctl.commands._context import AppContext


@click.group(
    cls=PadGroup,
    examples="""\
  padctl layer resolve 0 -p 5
  padctl layer bulk layers.json""",
)
def layer() -> None:
    """Resolve and edit layer labels."""


@layer.command(
    examples="""\
  padctl layer resolve 1
  padctl -q layer resolve 0 --profile 5""",
)
@click.argument("index", type=click.IntRange(min=0))
@profile_option
@click.pass_obj
def resolve(app: AppContext, index: int, profile_id: int | None) -> None:
    """Resolve the label of zero-based layer INDEX."""
    from padctl.services.layers import LayerService

    app.emit(LayerService(app.store).resolve_layer(index, profile_id))


@layer.command(
    examples="""\
  padctl layer bulk layers.json

  layers.json:
    {"profile_id": 5, "layers": {"0": {"label": "Paint", "icon": "brush"}, "1": ""}}""",
)
@click.argument("source", default="-")
@profile_option
@click.pass_obj
def bulk(app: AppContext, source: str, profile_id: int | None) -> None:
    """Apply a bulk layer-label edit from a JSON file (or stdin)."""
    from padctl.services.layers import LayerService

    payload = read_json_input(source)
    if profile_id is not None and isinstance(payload, Mapping):
        payload = {**payload, "profile_id": profile_id}
    app.emit(LayerService(app.store).reconcile_request(payload))
