"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall through to a generic key-value renderer. A missing
label always renders as the configured placeholder.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from padctl.output.console import create_console, get_output, style_for_source

if TYPE_CHECKING:
    from rich.console import Console

    from padctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, placeholder=placeholder)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult, *, placeholder: str = "—") -> str:
    """Minimal output for ``--quiet``: the label, or one key per item."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "encode":
        return str(result.data["macro"])
    if "label" in result.data:
        return str(result.data["label"] or placeholder)

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(key for key in (_item_key(item) for item in items) if key)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _item_key(item: Any) -> str:
    if isinstance(item, dict):
        for key in ("id", "macro", "key"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="pad.ok"), Text(result.op, style="pad.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="pad.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="pad.id")
    elif key == "macro":
        v = Text(str(value), style="pad.macro")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":"), ensure_ascii=False))
    else:
        v = Text(str(value))
    console.print(k, v)


def _label_text(label: str | None, source: str | None, placeholder: str) -> Text:
    if label is None:
        return Text(placeholder, style="pad.placeholder")
    return Text(label, style=style_for_source(source))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {span_data.get('name', '?')}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="pad.error"),
        Text(f"{result.op}{code}", style="pad.op"),
        Text("—"),
        Text(msg),
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Label renderers ───────────────────────────────────────────────────


def _render_label(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> None:
    """humanize / resolve / resolve_layer: the label front and center."""
    d = result.data
    subject = d.get("macro", d.get("layer_index"))
    console.print(
        Text(str(subject), style="pad.macro"),
        Text("→"),
        _label_text(d.get("label"), d.get("source", "humanized"), placeholder),
    )
    if d.get("source"):
        _field(console, "source", d["source"])
    if d.get("icon"):
        _field(console, "icon", d["icon"])
    if verbose:
        _render_meta(console, result)


def _render_parse(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "macro", d["macro"])
    if not d.get("recognized"):
        _field(console, "recognized", "no (empty or no-op)")
        return
    if d.get("kind") == "layer":
        _field(console, "action", d["action"])
        _field(console, "layer_index", d["layer_index"])
    else:
        _field(console, "modifiers", "+".join(d["modifier_names"]) or "none")
        _field(console, "key", d["key"])
        _field(console, "canonical", d["canonical"])
    _field(console, "label", d.get("label") or placeholder)


def _render_translations(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Macro", style="pad.macro", no_wrap=True)
    table.add_column("Label", style="pad.label")
    table.add_column("Icon")
    table.add_column("Scope")
    if verbose:
        table.add_column("Humanized", style="dim")
        table.add_column("Modified", style="dim")

    for item in items:
        row: list[Any] = [
            str(item["macro"]),
            str(item["label"]),
            str(item.get("icon") or ""),
            Text(str(item["scope"]), style=style_for_source(item["scope"])),
        ]
        if verbose:
            row.append(str(item.get("humanized") or placeholder))
            row.append(str(item.get("modified", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} translations")


def _render_keys(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Macro", style="pad.macro", no_wrap=True)
    table.add_column("Display", style="pad.label")
    table.add_column("Category", style="dim")
    for item in items:
        table.add_row(item["macro"], item["display"] or placeholder, item["category"])
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} keys")


def _render_reconcile(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> None:
    _status_line(console, result)
    d = result.data
    scope = d["scope"] if d.get("profile_id") is None else f"profile {d['profile_id']}"
    _field(console, "scope", scope)
    for key in ("saved", "deleted", "applied", "skipped"):
        if key in d:
            _field(console, key, d[key])
    if verbose:
        _render_meta(console, result)


def _render_layer(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> None:
    """describe_layer: one row per key slot, then encoder turns."""
    d = result.data
    console.print(
        Text(f"{d['application']} / {d['profile']}", style="pad.label"),
        Text("  "),
        _label_text(d.get("layer_label"), d.get("layer_source"), placeholder),
    )

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Macro", style="pad.macro", no_wrap=True)
    table.add_column("Label")
    table.add_column("Source", style="dim")
    if verbose:
        table.add_column("Humanized", style="dim")
    for key in d.get("keys", []):
        row: list[Any] = [
            str(key["index"]),
            key["macro"],
            _label_text(key["label"], key["source"], placeholder),
            key["source"] or "",
        ]
        if verbose:
            row.append(key["humanized"] or placeholder)
        table.add_row(*row)
    console.print(table)

    encoders = d.get("encoders", [])
    if encoders:
        enc_table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        enc_table.add_column("Encoder", justify="right", style="dim")
        enc_table.add_column("Counter-clockwise")
        enc_table.add_column("Clockwise")
        for enc in encoders:
            enc_table.add_row(
                str(enc["index"]),
                _label_text(enc["ccw"]["label"], enc["ccw"]["source"], placeholder),
                _label_text(enc["cw"]["label"], enc["cw"]["source"], placeholder),
            )
        console.print()
        console.print(enc_table)
    if verbose:
        _render_meta(console, result)


def _render_applications(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="pad.id", justify="right")
    table.add_column("Application", style="pad.label")
    table.add_column("Profiles", justify="right")
    for item in items:
        table.add_row(str(item["id"]), item["name"], str(item.get("profile_count", 0)))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} applications")


def _render_profiles(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="pad.id", justify="right")
    table.add_column("Application")
    table.add_column("Profile", style="pad.label")
    table.add_column("Layout")
    if verbose:
        table.add_column("Modified", style="dim")
    for item in items:
        row = [
            str(item["id"]),
            item["application"],
            item["name"],
            "yes" if item.get("has_layout") else "no",
        ]
        if verbose:
            row.append(str(item.get("modified", "")))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} profiles")


def _render_upgrade(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("applied_count", "pending_count", "current", "head", "backup_path", "message"):
        if key in d:
            _field(console, key, d[key])
    if verbose and d.get("pending"):
        console.print()
        for p in d["pending"]:
            console.print(f"  {p['revision']}: {p['description']}")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    placeholder: str = "—",
) -> None:
    """Status line plus every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, placeholder if value is None and key == "label" else value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Labels
    "humanize": _render_label,
    "encode": _render_label,
    "resolve": _render_label,
    "resolve_layer": _render_label,
    "parse": _render_parse,
    "list_translations": _render_translations,
    "list_keys": _render_keys,
    # Bulk edits
    "reconcile": _render_reconcile,
    "reconcile_layers": _render_reconcile,
    "seed": _render_reconcile,
    # Profiles
    "list_applications": _render_applications,
    "list_profiles": _render_profiles,
    "describe_layer": _render_layer,
    # Upgrade
    "upgrade": _render_upgrade,
}
