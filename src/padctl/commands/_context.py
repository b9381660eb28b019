"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Provides lazy Store initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from padctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from padctl.config.settings import PadSettings
    from padctl.infrastructure.store import Store
    from padctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is created on first use so ``--help``, ``--version`` and
    the pure macro commands never open the database.
    """

    def __init__(self, settings: PadSettings) -> None:
        self.settings = settings
        self._store: Store | None = None

        from padctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from padctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> Store:
        """The store instance (created lazily on first access)."""
        if self._store is None:
            from padctl.infrastructure.store import Store

            self._store = Store(self.settings)
            if self.settings.plugins.enabled:
                self._store.init_plugins()
        return self._store

    def close(self) -> None:
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            placeholder=self.settings.display.placeholder,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON output already carries the warnings.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)


def read_json_input(source: str) -> Any:
    """Decode JSON from a file path, or from stdin when *source* is ``-``.

    Raises:
        click.BadParameter: If the file is missing or not valid JSON.
    """
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
        return json.loads(text)
    except OSError as exc:
        msg = f"Cannot read {source}: {exc}"
        raise click.BadParameter(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"{source} is not valid JSON: {exc}"
        raise click.BadParameter(msg) from exc


def read_text_input(source: str) -> str:
    """Read raw text from a file path, or from stdin when *source* is ``-``."""
    try:
        if source == "-":
            return sys.stdin.read()
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read {source}: {exc}"
        raise click.BadParameter(msg) from exc
