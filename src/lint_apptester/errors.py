"""Exception hierarchy for lint-apptester.

Services catch these and convert them into :class:`ServiceError` payloads;
nothing above the service layer sees a raw exception.
"""

from __future__ import annotations

from pathlib import Path


class LintError(Exception):
    """Base error for every fatal lint-apptester failure."""


class ConfigurationError(LintError):
    """A required configuration value is missing or invalid."""


class ProjectRootError(LintError):
    """The project root could not be determined."""


class LayoutError(LintError):
    """The feature's directory layout could not be resolved."""


class MissingDirectoryError(LayoutError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Could not locate {path}")


class ScanError(LintError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")
