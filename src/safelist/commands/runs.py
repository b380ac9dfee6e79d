"""Commands: group, stutter — run detection over characters or words."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from click.core import ParameterSource

from safelist.commands._base import SafeListCommand

if TYPE_CHECKING:
    from safelist.commands._context import AppContext

_ignore_case = click.option(
    "--ignore-case/--match-case",
    default=False,
    help="Compare case-insensitively (default from [grouping] ignore_case).",
)
_words = click.option(
    "--words/--chars",
    "split_words",
    default=False,
    help="Treat TEXT as whitespace-separated words (default from [grouping] split_words).",
)


def _given(name: str, value: bool) -> bool | None:
    """*value* if the flag was typed on the command line, else None (use config)."""
    source = click.get_current_context().get_parameter_source(name)
    if source in (None, ParameterSource.DEFAULT, ParameterSource.DEFAULT_MAP):
        return None
    return value


@click.command(
    cls=SafeListCommand,
    examples="""\
  safelist group aaabccdd
  safelist group --words "a a b a"
  safelist --json group --ignore-case AaBb
  safelist group --match-case AaBb""",
)
@click.argument("text")
@_ignore_case
@_words
@click.pass_obj
def group(app: AppContext, text: str, ignore_case: bool, split_words: bool) -> None:
    """Split TEXT into maximal runs of equal elements."""
    app.emit(
        app.service.group(
            text,
            ignore_case=_given("ignore_case", ignore_case),
            split_words=_given("split_words", split_words),
        )
    )


@click.command(
    cls=SafeListCommand,
    examples="""\
  safelist stutter "ssstringssss liiiiiike thisss"
  safelist -q stutter --words "go go go now"
  safelist stutter --chars --match-case AaaB""",
)
@click.argument("text")
@_ignore_case
@_words
@click.pass_obj
def stutter(app: AppContext, text: str, ignore_case: bool, split_words: bool) -> None:
    """Collapse each run of repeated elements in TEXT to one."""
    app.emit(
        app.service.stutter(
            text,
            ignore_case=_given("ignore_case", ignore_case),
            split_words=_given("split_words", split_words),
        )
    )
