"""Locate the lint-apptester.toml config file.

``LINT_APPTESTER_CONFIG`` names the file explicitly; otherwise the nearest
``lint-apptester.toml`` in the start directory or one of its ancestors is
used. ``--config`` bypasses discovery entirely (see ``LintSettings.from_cli``).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "lint-apptester.toml"
CONFIG_ENV_VAR = "LINT_APPTESTER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    An env override pointing at a missing file yields None rather than
    falling back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    candidates = (directory / CONFIG_FILENAME for directory in (origin, *origin.parents))
    return next((candidate for candidate in candidates if candidate.is_file()), None)
