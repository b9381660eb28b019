"""Shared Click options."""

from __future__ import annotations

import click

profile_option = click.option(
    "-p",
    "--profile",
    "profile_id",
    type=click.IntRange(min=1),
    default=None,
    help="Profile id (default: Generic).",
)
