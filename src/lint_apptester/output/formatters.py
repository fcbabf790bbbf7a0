"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lint_apptester.output.renderers import render_partial, render_quiet, render_result

if TYPE_CHECKING:
    from lint_apptester.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)


def format_partial(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format the work a failed operation completed before aborting.

    Empty in JSON mode, where the partial data is part of the payload.
    """
    settings = settings or OutputSettings()
    if settings.json_output or settings.quiet or result.ok:
        return ""
    return render_partial(result, verbose=settings.verbose)
