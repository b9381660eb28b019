"""Subcommand modules for padctl.

register_commands() uses deferred imports to keep ``padctl --help``
fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root group."""
    # --- Groups ---
    from padctl.commands.layer import layer
    from padctl.commands.profile import profile
    from padctl.commands.translate import translate

    cli.add_command(translate)
    cli.add_command(layer)
    cli.add_command(profile)

    # --- Standalone commands ---
    from padctl.commands.init_cmd import init_cmd
    from padctl.commands.macro import encode, humanize, keys, parse
    from padctl.commands.seed import seed
    from padctl.commands.upgrade import upgrade

    cli.add_command(init_cmd)
    cli.add_command(upgrade)
    cli.add_command(humanize)
    cli.add_command(parse)
    cli.add_command(encode)
    cli.add_command(keys)
    cli.add_command(seed)
