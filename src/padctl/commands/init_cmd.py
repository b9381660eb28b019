"""Command: project initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from padctl.commands._base import PadCommand

if TYPE_CHECKING:
    from padctl.commands._context import AppContext


@click.command(
    "init",
    cls=PadCommand,
    examples="""\
  padctl init
  padctl init ~/macropad
  padctl init --no-seed /tmp/pad""",
)
@click.argument("path", required=False, default=".")
@click.option("--no-seed", is_flag=True, help="Skip the bundled Generic labels.")
@click.pass_obj
def init_cmd(app: AppContext, path: str, no_seed: bool) -> None:
    """Create padctl.toml and the label database."""
    from padctl.services.init import InitService

    app.emit(InitService.init_project(Path(path), settings=app.settings, seed=not no_seed))
