"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from lint_apptester.output.console import create_console, get_output, outcome_style

if TYPE_CHECKING:
    from rich.console import Console

    from lint_apptester.services.result import ServiceResult

NO_RULES_LINE = "  # No rules for this directory"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_partial(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render directory reports a failed check completed before aborting."""
    directories = result.data.get("directories") or []
    if not directories:
        return ""
    console = create_console()
    _render_directories(console, directories, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Checks print only failing rules; an all-pass check prints nothing.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "check":
        return "\n".join(
            f"FAIL {directory['role']}: {rule['name']}"
            for directory in result.data.get("directories", [])
            for rule in directory["rules"]
            if not rule["passed"]
        )
    if result.op == "rules":
        return "\n".join(item["name"] for item in result.data.get("rules", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _line(console: Console, *parts: str | tuple[str, str]) -> None:
    """Print one unwrapped line assembled from plain and styled parts."""
    console.print(Text.assemble(*parts), soft_wrap=True)


def _render_directories(
    console: Console, directories: list[dict[str, Any]], *, verbose: bool = False
) -> None:
    for directory in directories:
        _line(
            console,
            (directory["role"], "lint.role"),
            " (",
            (directory["path"], "lint.path"),
            "):",
        )
        rules = directory["rules"]
        if not rules:
            _line(console, (NO_RULES_LINE, "lint.comment"))
            continue
        for rule in rules:
            label = "PASS" if rule["passed"] else "FAIL"
            _line(console, f"  - {rule['name']}: ", (label, outcome_style(rule["passed"])))
            if verbose:
                for path in rule["violations"]:
                    _line(console, (f"      {path}", "lint.path"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _render_directories(console, result.data.get("directories", []), verbose=verbose)
    if verbose:
        failed = result.data.get("failed_count", 0)
        summary = (
            Text("all rules passed", style="lint.pass")
            if failed == 0
            else Text(f"{failed} rule outcome(s) failed", style="lint.fail")
        )
        console.print()
        console.print(summary)


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Rule", style="lint.role")
    table.add_column("Directories")
    for item in result.data.get("rules", []):
        table.add_row(Text(str(item["name"])), Text(", ".join(item["roles"])))
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _line(console, ("OK", "lint.pass"), "  ", (result.op, "lint.op"))
    for key, value in result.data.items():
        _line(console, f"  {key}: {value}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console) -> None:
    """Print ``ERROR  <op> — <message>``; the message is never parsed as markup."""
    err = result.error
    msg = err.message if err else "Unknown error"
    _line(console, ("ERROR", "lint.error"), "  ", (result.op, "lint.op"), " — ", msg)


_OP_RENDERERS = {
    "check": _render_check,
    "rules": _render_rules,
}
