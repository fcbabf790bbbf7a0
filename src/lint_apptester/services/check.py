"""CheckService — lint one feature's directories.

Resolves the project root and the feature layout, then scans the role
subdirectories in order. Rule failures never make the operation fail;
only configuration, discovery and I/O errors do. A scan error stops the
remaining directories, but the reports gathered so far are returned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from lint_apptester.domain.roles import DirectoryRole
from lint_apptester.errors import (
    ConfigurationError,
    LayoutError,
    MissingDirectoryError,
    ProjectRootError,
    ScanError,
)
from lint_apptester.infrastructure.git import find_project_root
from lint_apptester.infrastructure.layout import ProjectLayout, resolve_layout
from lint_apptester.infrastructure.scanner import DirectoryReport, scan_directory
from lint_apptester.services.base import BaseService
from lint_apptester.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CheckService(BaseService):
    """Runs the rule engine over a feature's directories."""

    def resolve_project_root(self, project_root: Path | None = None) -> Path:
        """Explicit root, then configured root, then the git work tree of the CWD."""
        root = project_root or self._settings.project_root
        if root is not None:
            return root
        return find_project_root(Path.cwd(), repository_name=self._settings.project.repository_name)

    def check(self, feature: str, *, project_root: Path | None = None) -> ServiceResult:
        """Scan every role subdirectory of *feature* and collect outcomes."""
        op = "check"
        try:
            root = self.resolve_project_root(project_root)
            layout = resolve_layout(root, feature, self._settings.paths)
        except ConfigurationError as exc:
            return ServiceResult.failure(op, "CONFIG_ERROR", str(exc))
        except ProjectRootError as exc:
            return ServiceResult.failure(op, "ROOT_ERROR", str(exc))
        except MissingDirectoryError as exc:
            return ServiceResult.failure(op, "LAYOUT_ERROR", str(exc), path=str(exc.path))
        except LayoutError as exc:
            return ServiceResult.failure(op, "LAYOUT_ERROR", str(exc))

        logger.debug("Checking feature %r under %s", layout.feature, root)
        warnings = self._configuration_warnings(layout)
        reports: list[DirectoryReport] = []
        for subdir in layout.subdirectories:
            try:
                reports.append(
                    scan_directory(subdir, self.rules, extensions=self._settings.scan.extensions)
                )
            except ScanError as exc:
                logger.debug("Aborting scan at %s", exc.path)
                return ServiceResult.failure(
                    op,
                    "SCAN_ERROR",
                    str(exc),
                    data=self._payload(layout.feature, root, reports),
                    warnings=warnings,
                    path=str(exc.path),
                )

        return ServiceResult.success(
            op, self._payload(layout.feature, root, reports), warnings=warnings
        )

    def list_rules(self) -> ServiceResult:
        """Describe the active rule set in report order."""
        items = [
            {
                "name": rule.name,
                "roles": [role.label for role in DirectoryRole if role in rule.roles],
            }
            for rule in self.rules
        ]
        return ServiceResult.success("rules", {"rules": items, "count": len(items)})

    def _configuration_warnings(self, layout: ProjectLayout) -> list[str]:
        # One line per misconfigured rule that will actually run.
        warnings: list[str] = []
        for subdir in layout.subdirectories:
            for rule in self.rules.for_role(subdir.role):
                problem = rule.configuration_problem()
                if problem and problem not in warnings:
                    warnings.append(problem)
        return warnings

    @staticmethod
    def _payload(feature: str, root: Path, reports: list[DirectoryReport]) -> dict[str, Any]:
        failed = sum(
            1 for report in reports for outcome in report.outcomes.values() if not outcome.passed
        )
        return {
            "feature": feature,
            "project_root": str(root),
            "directories": [report.to_dict() for report in reports],
            "failed_count": failed,
            "passed": failed == 0,
        }
