"""Command group: macro label resolution and edits."""

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
  padctl translate resolve 'C(KC_Z)' -p 5
  padctl translate set 'KC_B' 'Brush Tool' -p 5
  padctl translate bulk edits.json""",
)
def translate() -> None:
    """Resolve and edit macro labels."""


@translate.command(
    examples="""\
  padctl translate resolve 'LSA(KC_H)'
  padctl -q translate resolve 'C(KC_Z)' --profile 5""",
)
@click.argument("macro")
@profile_option
@click.pass_obj
def resolve(app: AppContext, macro: str, profile_id: int | None) -> None:
    """Resolve the label for MACRO: profile, then Generic, then humanized."""
    from padctl.services.translation import TranslationService

    app.emit(TranslationService(app.store).resolve(macro, profile_id))


@translate.command(
    "list",
    examples="""\
  padctl translate list
  padctl -v translate list -p 5""",
)
@profile_option
@click.pass_obj
def list_cmd(app: AppContext, profile_id: int | None) -> None:
    """List Generic labels plus the profile's own."""
    from padctl.services.translation import TranslationService

    app.emit(TranslationService(app.store).list_translations(profile_id))


@translate.command(
    "set",
    examples="""\
  padctl translate set 'C(KC_Z)' Undo
  padctl translate set 'KC_B' 'Brush Tool' --icon brush -p 5
  padctl translate set 'KC_B' '' -p 5""",
)
@click.argument("macro")
@click.argument("label")
@click.option("--icon", default=None, help="Icon name shown with the label.")
@profile_option
@click.pass_obj
def set_cmd(
    app: AppContext,
    macro: str,
    label: str,
    icon: str | None,
    profile_id: int | None,
) -> None:
    """Set the label for MACRO. An empty LABEL removes it."""
    from padctl.services.translation import TranslationService

    app.emit(TranslationService(app.store).set_translation(macro, label, icon, profile_id))


@translate.command(
    examples="""\
  padctl translate delete 'C(KC_Z)'
  padctl translate delete 'KC_B' -p 5""",
)
@click.argument("macro")
@profile_option
@click.pass_obj
def delete(app: AppContext, macro: str, profile_id: int | None) -> None:
    """Remove the label for MACRO in one scope."""
    from padctl.services.translation import TranslationService

    app.emit(TranslationService(app.store).delete_translation(macro, profile_id))


@translate.command(
    examples="""\
  padctl translate bulk edits.json
  cat edits.json | padctl translate bulk - --profile 5

  edits.json:
    {"profile_id": 5,
     "translations": {"C(KC_Z)": {"label": ""}, "KC_B": "Brush Tool"}}""",
)
@click.argument("source", default="-")
@profile_option
@click.pass_obj
def bulk(app: AppContext, source: str, profile_id: int | None) -> None:
    """Apply a bulk edit from a JSON file (or stdin) atomically."""
    from padctl.services.reconcile import ReconcileService

    payload = read_json_input(source)
    if profile_id is not None and isinstance(payload, Mapping):
        payload = {**payload, "profile_id": profile_id}
    app.emit(ReconcileService(app.store).reconcile_request(payload))
