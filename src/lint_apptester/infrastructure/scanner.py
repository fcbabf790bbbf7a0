"""Directory scanner — applies role-filtered rules to one subdirectory.

Outcomes are monotonic within a scan: a rule starts out passing and any
violating file flips it to failing for the rest of the scan. Any I/O
problem is fatal; there is no partial-scan recovery.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lint_apptester.config.models import DEFAULT_EXTENSIONS
from lint_apptester.domain.roles import DirectoryRole
from lint_apptester.domain.rules import RuleSet
from lint_apptester.errors import ScanError
from lint_apptester.infrastructure.layout import Subdirectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleOutcome:
    """Whether every eligible file satisfied one rule."""

    name: str
    passed: bool
    violations: tuple[Path, ...] = ()


@dataclass(frozen=True)
class DirectoryReport:
    """Outcomes for one subdirectory.

    ``rules`` holds the applicable rule names in catalog order. An empty
    ``rules`` tuple is the "no rules for this directory" state.
    """

    role: DirectoryRole
    path: Path
    rules: tuple[str, ...] = ()
    outcomes: dict[str, RuleOutcome] = field(default_factory=dict)

    @property
    def has_rules(self) -> bool:
        return bool(self.rules)

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.label,
            "path": str(self.path),
            "rules": [
                {
                    "name": name,
                    "passed": self.outcomes[name].passed,
                    "violations": [str(p) for p in self.outcomes[name].violations],
                }
                for name in self.rules
            ],
        }


def is_eligible(path: Path, extensions: Collection[str]) -> bool:
    """True when *path*'s final extension is one of *extensions*."""
    return path.suffix[1:] in extensions


def _list_entries(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as exc:
        raise ScanError(directory, "Could not read directory") from exc


def _read_lines(path: Path) -> list[str]:
    """Split on ``\\n`` only, dropping the ``\\r`` of a CRLF ending.

    Other line-break characters (form feed, lone ``\\r``, U+2028...) stay
    inside their line.
    """
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ScanError(path, "Could not read file") from exc
    return [line.removesuffix("\r") for line in text.split("\n")]


def scan_directory(
    subdir: Subdirectory,
    rules: RuleSet,
    *,
    extensions: Collection[str] = DEFAULT_EXTENSIONS,
) -> DirectoryReport:
    """Evaluate every rule applicable to *subdir*'s role over its files.

    Raises:
        ScanError: the directory or an eligible file cannot be read.
    """
    applicable = rules.for_role(subdir.role)
    if not applicable:
        logger.debug("No rules for %s (%s)", subdir.role.label, subdir.path)
        return DirectoryReport(role=subdir.role, path=subdir.path)

    passed: dict[str, bool] = {rule.name: True for rule in applicable}
    violations: dict[str, list[Path]] = {rule.name: [] for rule in applicable}

    for entry in _list_entries(subdir.path):
        if not is_eligible(entry, extensions) or not entry.is_file():
            continue
        lines = _read_lines(entry)
        for rule in applicable:
            if not rule.evaluate(lines):
                passed[rule.name] = False
                found = violations[rule.name]
                if not found or found[-1] != entry:
                    found.append(entry)
                logger.debug("%s violates %r", entry, rule.name)

    names = tuple(rule.name for rule in applicable)
    outcomes = {
        name: RuleOutcome(name=name, passed=passed[name], violations=tuple(violations[name]))
        for name in passed
    }
    return DirectoryReport(role=subdir.role, path=subdir.path, rules=names, outcomes=outcomes)
