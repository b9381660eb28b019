"""Command: apply a label catalog."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from padctl.commands._base import PadCommand
from padctl.commands._options import profile_option

if TYPE_CHECKING:
    from padctl.commands._context import AppContext


@click.command(
    cls=PadCommand,
    examples="""\
  padctl seed
  padctl seed --file rebelle.yaml --profile 3""",
)
@click.option(
    "--file",
    "catalog",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML catalog (default: bundled Generic labels).",
)
@profile_option
@click.pass_obj
def seed(app: AppContext, catalog: Path | None, profile_id: int | None) -> None:
    """Upsert labels from a catalog into one scope."""
    from padctl.services.seed import SeedService

    app.emit(SeedService(app.store).seed(catalog, profile_id=profile_id))
