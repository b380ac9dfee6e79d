"""SafeListCommand — a click Command that can print usage examples.

``--examples`` keeps ``--help`` short: the examples text is only shown
when asked for, and the command exits without running.
"""

from __future__ import annotations

from typing import Any

import click


class SafeListCommand(click.Command):
    """Command with an optional eager ``--examples`` flag.

    Pass ``examples="..."`` to ``@click.command(cls=SafeListCommand, ...)``;
    commands without examples get no extra flag.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    is_eager=True,
                    expose_value=False,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
        ctx.exit(0)
