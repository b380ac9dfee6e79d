"""Subcommand modules for safelist.

register_commands() imports command modules lazily so ``safelist --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from safelist.commands.runs import group, stutter
    from safelist.commands.stats import average, length, sum_cmd, weighted_average

    cli.add_command(length)
    cli.add_command(sum_cmd)
    cli.add_command(average)
    cli.add_command(weighted_average)
    cli.add_command(group)
    cli.add_command(stutter)
