"""Directory roles for an app tester feature.

Each feature is spread over four role-tagged subdirectories. Member
declaration order is the order in which directories are scanned and
reported.
"""

from __future__ import annotations

from enum import StrEnum


class DirectoryRole(StrEnum):
    """Functional category of a feature subdirectory."""

    FEATURES = "features"
    INTERACTIONS = "interactions"
    PAGES = "pages"
    STEPS = "steps"

    @property
    def label(self) -> str:
        """Human-readable name used in report headers (``"Steps"``)."""
        return self.value.title()
