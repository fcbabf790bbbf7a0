"""Command: list the built-in rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lint_apptester.commands._base import LintCommand

if TYPE_CHECKING:
    from lint_apptester.commands._context import AppContext


@click.command(cls=LintCommand, examples="  lint-apptester rules\n  lint-apptester --json rules")
@click.pass_obj
def rules(app: AppContext) -> None:
    """List the rules and the directories they apply to."""
    from lint_apptester.services.check import CheckService

    app.emit(CheckService(app.settings).list_rules())
