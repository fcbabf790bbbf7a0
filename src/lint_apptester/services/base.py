"""BaseService — foundation for all lint-apptester services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lint_apptester.domain.catalog import build_catalog

if TYPE_CHECKING:
    from lint_apptester.config.settings import LintSettings
    from lint_apptester.domain.rules import RuleSet


class BaseService:
    """Base for service-layer classes.

    Every service receives the frozen :class:`LintSettings` at
    construction. The rule set defaults to the built-in catalog
    configured from those settings; callers may inject their own.
    """

    def __init__(self, settings: LintSettings, *, rules: RuleSet | None = None) -> None:
        self._settings = settings
        self._rules = rules

    @property
    def rules(self) -> RuleSet:
        if self._rules is None:
            self._rules = build_catalog(self._settings.locator.class_path)
        return self._rules
