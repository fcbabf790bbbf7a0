"""Command base class for lint-apptester subcommands.

Usage examples are kept off ``--help``. A command built with
``cls=LintCommand, examples=...`` grows an ``--examples`` flag that prints
them and exits before the command's own arguments are validated.
"""

from __future__ import annotations

from typing import Any

import click


class LintCommand(click.Command):
    """Click command carrying optional usage examples."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params = super().get_params(ctx)
        if not self.examples:
            return params
        examples_option = click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._show_examples,
            help="Show usage examples and exit.",
        )
        return [*params, examples_option]

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Usage examples ({ctx.command_path}):\n")
        click.echo(self.examples)
        ctx.exit(0)
