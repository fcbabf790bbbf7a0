"""Project root discovery via git.

The project under test is the git work tree containing the working
directory. An optional repository name guards against linting the wrong
checkout.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from lint_apptester.errors import ProjectRootError

logger = logging.getLogger(__name__)

_TOPLEVEL_ARGS = ("rev-parse", "--show-toplevel")


def _run_git(cwd: Path, *args: str) -> subprocess.CompletedProcess[str]:
    """Run a git command in *cwd*. Raises on failure."""
    return subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )


def find_project_root(start: Path, *, repository_name: str | None = None) -> Path:
    """Return the top-level directory of the git work tree containing *start*.

    Raises:
        ProjectRootError: git is unavailable, *start* is not inside a work
            tree, or the work tree is not named *repository_name*.
    """
    command = "git " + " ".join(_TOPLEVEL_ARGS)
    try:
        result = _run_git(start, *_TOPLEVEL_ARGS)
    except OSError as exc:
        logger.debug("%s failed: %s", command, exc)
        msg = f"Could not run command '{command}'"
        raise ProjectRootError(msg) from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise ProjectRootError(detail) from exc

    toplevel = result.stdout.strip()
    if not toplevel:
        msg = f"'{command}' output is empty"
        raise ProjectRootError(msg)

    root = Path(toplevel)
    if repository_name and root.name != repository_name:
        msg = f"Not in the correct repository: expected {repository_name!r}, found {root.name!r}"
        raise ProjectRootError(msg)

    logger.debug("Discovered project root %s", root)
    return root
