"""Rich Console factory and theme for padctl output.

Consoles render into a StringIO buffer so formatting stays a pure
``ServiceResult -> str`` step. Outside a terminal (tests, pipes) Rich
drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PAD_THEME = Theme(
    {
        "pad.ok": "bold green",
        "pad.error": "bold red",
        "pad.warning": "bold yellow",
        "pad.op": "bold cyan",
        "pad.key": "dim",
        "pad.id": "bold blue",
        "pad.macro": "magenta",
        "pad.label": "bold",
        "pad.placeholder": "dim",
        "pad.source.profile": "green",
        "pad.source.generic": "blue",
        "pad.source.humanized": "yellow",
        "pad.source.default": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=PAD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_source(source: str | None) -> str:
    """Rich style for a resolution source (profile, generic, ...)."""
    if not source:
        return "pad.placeholder"
    return f"pad.source.{source}"
