"""``lint-apptester`` entry point: global flags, settings and subcommands."""

from __future__ import annotations

import click

from lint_apptester import __version__
from lint_apptester.commands import register_commands
from lint_apptester.commands._context import AppContext
from lint_apptester.config.settings import LintSettings

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="lint-apptester")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Only print failing rules.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and violating files.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Read settings from this TOML file instead of searching for one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """lint-apptester: style rules for app tester feature directories.

    Settings come from flags, LINT_APPTESTER_* environment variables, .env
    and lint-apptester.toml, in that order of precedence.
    """
    settings = LintSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    """Console-script entry point."""
    cli(prog_name="lint-apptester")
