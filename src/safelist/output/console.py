"""Rich Console factory and theme for safelist output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract.  In non-TTY environments (tests, pipes) Rich
drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SAFELIST_THEME = Theme(
    {
        "sl.ok": "bold green",
        "sl.error": "bold red",
        "sl.op": "bold cyan",
        "sl.key": "dim",
        "sl.value": "bold",
        "sl.hint": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SAFELIST_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
