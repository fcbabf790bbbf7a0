"""Subcommand modules for lint-apptester.

Provides register_commands() which uses deferred imports to keep
``lint-apptester --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from lint_apptester.commands.check import check
    from lint_apptester.commands.rules import rules

    cli.add_command(check)
    cli.add_command(rules)
