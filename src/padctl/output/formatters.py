"""Format a ServiceResult for the requested output mode.

JSON (``--json``) serializes the whole result; quiet (``-q``) prints the
bare value a script would want; the default is Rich rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from padctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from padctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags taken from the CLI context."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    placeholder: str = "—"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result, placeholder=settings.placeholder)
    return render_result(result, verbose=settings.verbose, placeholder=settings.placeholder)
