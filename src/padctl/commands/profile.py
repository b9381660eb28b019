"""Command group: applications, profiles and layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from padctl.commands._base import PadGroup
from padctl.commands._context import read_text_input

if TYPE_CHECKING:
    from padctl.commands._context import AppContext


def _app_ref(value: str) -> str | int:
    return int(value) if value.isdigit() else value


@click.group(
    cls=PadGroup,
    examples="""\
  padctl profile add-app Rebelle
  padctl profile add Rebelle Painting --layout kb16.json
  padctl profile show-layer 1 --layer 0""",
)
def profile() -> None:
    """Manage applications, profiles and pad layouts."""


@profile.command(
    "add-app",
    examples="""\
  padctl profile add-app Photoshop""",
)
@click.argument("name")
@click.pass_obj
def add_app(app: AppContext, name: str) -> None:
    """Register an application."""
    from padctl.services.profiles import ProfileService

    app.emit(ProfileService(app.store).add_application(name))


@profile.command(
    examples="""\
  padctl profile apps
  padctl --json profile apps""",
)
@click.pass_obj
def apps(app: AppContext) -> None:
    """List applications."""
    from padctl.services.profiles import ProfileService

    app.emit(ProfileService(app.store).list_applications())


@profile.command(
    examples="""\
  padctl profile add Rebelle Painting
  padctl profile add 2 Inking --layout kb16.json""",
)
@click.argument("application")
@click.argument("name")
@click.option("--layout", "layout_source", default=None, help="Layout JSON file ('-' for stdin).")
@click.pass_obj
def add(app: AppContext, application: str, name: str, layout_source: str | None) -> None:
    """Create profile NAME under APPLICATION (id or name)."""
    from padctl.services.profiles import ProfileService

    layout = read_text_input(layout_source) if layout_source else None
    app.emit(ProfileService(app.store).add_profile(_app_ref(application), name, layout))


@profile.command(
    "list",
    examples="""\
  padctl profile list
  padctl profile list --app Rebelle""",
)
@click.option("--app", "application", default=None, help="Only this application (id or name).")
@click.pass_obj
def list_cmd(app: AppContext, application: str | None) -> None:
    """List profiles."""
    from padctl.services.profiles import ProfileService

    ref = _app_ref(application) if application is not None else None
    app.emit(ProfileService(app.store).list_profiles(ref))


@profile.command(
    examples="""\
  padctl profile remove 3""",
)
@click.argument("profile_id", type=click.IntRange(min=1))
@click.pass_obj
def remove(app: AppContext, profile_id: int) -> None:
    """Delete a profile and every label scoped to it."""
    from padctl.services.profiles import ProfileService

    app.emit(ProfileService(app.store).remove_profile(profile_id))


@profile.command(
    "import-layout",
    examples="""\
  padctl profile import-layout 3 kb16.json
  cat kb16.json | padctl profile import-layout 3 -""",
)
@click.argument("profile_id", type=click.IntRange(min=1))
@click.argument("source", default="-")
@click.pass_obj
def import_layout(app: AppContext, profile_id: int, source: str) -> None:
    """Store the configurator layout export on a profile."""
    from padctl.services.profiles import ProfileService

    app.emit(ProfileService(app.store).import_layout(profile_id, read_text_input(source)))


@profile.command(
    "show-layer",
    examples="""\
  padctl profile show-layer 3
  padctl -v profile show-layer 3 --layer 1""",
)
@click.argument("profile_id", type=click.IntRange(min=1))
@click.option("--layer", "layer_index", type=click.IntRange(min=0), default=0, show_default=True)
@click.pass_obj
def show_layer(app: AppContext, profile_id: int, layer_index: int) -> None:
    """Label every key and encoder of one layout layer."""
    from padctl.services.profiles import ProfileService

    app.emit(ProfileService(app.store).describe_layer(profile_id, layer_index))
