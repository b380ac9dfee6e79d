"""Commands: length, sum, average, weighted-average."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from safelist.commands._base import SafeListCommand

if TYPE_CHECKING:
    from safelist.commands._context import AppContext


@click.command(
    cls=SafeListCommand,
    examples="""\
  safelist length 3 1 4
  safelist length""",
)
@click.argument("values", nargs=-1, type=int)
@click.pass_obj
def length(app: AppContext, values: tuple[int, ...]) -> None:
    """Count VALUES (an empty list has length 0)."""
    app.emit(app.service.length(values))


@click.command(
    "sum",
    cls=SafeListCommand,
    examples="""\
  safelist sum 1 2 3
  safelist --json sum -- -4 10""",
)
@click.argument("values", nargs=-1, type=int)
@click.pass_obj
def sum_cmd(app: AppContext, values: tuple[int, ...]) -> None:
    """Sum VALUES. Summing an empty list is an error, not 0."""
    app.emit(app.service.total(values))


@click.command(
    cls=SafeListCommand,
    examples="""\
  safelist average 4 6
  safelist average --or-nothing""",
)
@click.argument("values", nargs=-1, type=int)
@click.option(
    "--or-nothing",
    is_flag=True,
    help="Report no average (instead of failing) for an empty list.",
)
@click.pass_obj
def average(app: AppContext, values: tuple[int, ...], or_nothing: bool) -> None:
    """Integer mean of VALUES (floor division)."""
    if or_nothing:
        app.emit(app.service.average_or_nothing(values))
    else:
        app.emit(app.service.average(values))


@click.command(
    "weighted-average",
    cls=SafeListCommand,
    examples="""\
  safelist weighted-average 2:10 3:20
  safelist -c safelist.toml weighted-average 1/5 1/7
  safelist weighted-average -- -1:5      # '--' before pairs that start with '-'""",
)
@click.argument("pairs", nargs=-1)
@click.pass_obj
def weighted_average(app: AppContext, pairs: tuple[str, ...]) -> None:
    """Weighted mean of WEIGHT:VALUE PAIRS (both parts must be > 0).

    Put ``--`` before the pairs when the first one starts with ``-``.
    """
    app.emit(app.service.weighted_average(pairs))
