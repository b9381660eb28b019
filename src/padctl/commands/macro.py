"""Commands: pure macro operations (no database access)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from padctl.commands._base import PadCommand
from padctl.domain.keys import KeyCategory
from padctl.services.translation import TranslationService

if TYPE_CHECKING:
    from padctl.commands._context import AppContext


@click.command(
    cls=PadCommand,
    examples="""\
  padctl humanize 'LSA(KC_H)'
  padctl humanize 'MO(1)'
  padctl -q humanize 'C(S(KC_M))'""",
)
@click.argument("macro")
@click.pass_obj
def humanize(app: AppContext, macro: str) -> None:
    """Show the derived display label for MACRO."""
    app.emit(TranslationService.humanize(macro))


@click.command(
    cls=PadCommand,
    examples="""\
  padctl parse 'A(S(KC_H))'
  padctl --json parse 'RCS(KC_TAB)'""",
)
@click.argument("macro")
@click.pass_obj
def parse(app: AppContext, macro: str) -> None:
    """Break MACRO into modifiers and base key, with its canonical form."""
    app.emit(TranslationService.parse(macro))


@click.command(
    cls=PadCommand,
    examples="""\
  padctl encode 'Ctrl+Shift+M'
  padctl -q encode 'Alt+Shift+H'
  padctl encode 'Ctrl++'""",
)
@click.argument("shortcut")
@click.pass_obj
def encode(app: AppContext, shortcut: str) -> None:
    """Encode human SHORTCUT notation as macro text."""
    app.emit(TranslationService.encode(shortcut))


@click.command(
    cls=PadCommand,
    examples="""\
  padctl keys
  padctl keys --category navigation""",
)
@click.option(
    "--category",
    type=click.Choice([c.value for c in KeyCategory], case_sensitive=False),
    default=None,
    help="Only keys of this category.",
)
@click.pass_obj
def keys(app: AppContext, category: str | None) -> None:
    """List known key ids and their display names."""
    app.emit(TranslationService.list_keys(category))
