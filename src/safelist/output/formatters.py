"""Rich/JSON output helpers.

The CLI renders a ServiceResult for humans (Rich), for scripts
(``--quiet``: the primary value only), or for machines (``--json``).
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from safelist.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from safelist.services.result import ServiceResult

# The one value ``--quiet`` prints for each operation.
_PRIMARY_KEYS: dict[str, str] = {
    "length": "length",
    "sum": "sum",
    "average": "average",
    "average_or_nothing": "average",
    "weighted_average": "weighted_average",
    "group": "groups",
    "stutter": "result",
}


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags resolved from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)
    return _format_human(result, verbose=settings.verbose)


def _format_quiet(result: ServiceResult) -> str:
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    key = _PRIMARY_KEYS.get(result.op)
    if key is None:
        return f"OK: {result.op}"
    value = result.data.get(key)
    if value is None:
        return ""
    if isinstance(value, list):
        return "\n".join(str(v) for v in value)
    return str(value)


def _format_human(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    if result.ok:
        console.print(Text("OK", style="sl.ok"), Text(result.op, style="sl.op"))
        for key, value in result.data.items():
            _field(console, key, value)
    else:
        msg = result.error.message if result.error else "Unknown error"
        console.print(
            Text("ERROR", style="sl.error"),
            Text(result.op, style="sl.op"),
            Text(f"— {msg}"),
        )
        if result.error is not None:
            hint = result.error.detail.get("hint")
            if hint:
                console.print(Text(f"  hint: {hint}", style="sl.hint"))
    if verbose and result.meta:
        _render_meta(console, result.meta)
    return get_output(console).rstrip("\n")


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        rendered = _json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    else:
        rendered = str(value)
    console.print(Text(f"  {key}: ", style="sl.key"), Text(rendered, style="sl.value"), sep="")


def _render_meta(console: Console, meta: dict[str, Any]) -> None:
    console.print(Text("  meta:", style="dim"))
    for key, value in meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}", markup=False)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    name = span.get("name", "?")
    duration = span.get("duration_ms", 0.0)
    console.print(f"{prefix}{name} {duration:.2f}ms", markup=False)
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)
