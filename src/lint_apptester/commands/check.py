"""Command: lint a feature's directories."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from lint_apptester.commands._base import LintCommand

if TYPE_CHECKING:
    from lint_apptester.commands._context import AppContext


@click.command(
    cls=LintCommand,
    examples="""\
  lint-apptester check Login
  lint-apptester check login --root ~/work/app-tests
  lint-apptester -v check login
  lint-apptester --json check login
  lint-apptester check login --strict""",
)
@click.argument("feature")
@click.option(
    "--root",
    "project_root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: git top-level of the current directory).",
)
@click.option("--strict", is_flag=True, help="Exit 1 when any rule fails.")
@click.pass_obj
def check(app: AppContext, feature: str, project_root: Path | None, strict: bool) -> None:
    """Check FEATURE's directories against the built-in rules."""
    from lint_apptester.services.check import CheckService

    result = CheckService(app.settings).check(feature, project_root=project_root)
    app.emit(result)
    if strict and not result.data.get("passed", True):
        raise SystemExit(1)
