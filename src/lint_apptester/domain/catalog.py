"""Built-in rule catalog.

Four style/hygiene rules for Java/Cucumber app tester sources. Every
predicate line-scans the stripped text; nothing is parsed structurally.

Scoping vocabulary:

* *header* — lines before the first ``public class`` declaration
  (package and import statements).
* *body* — the first ``public class`` line and everything after it.
* comment lines (``//``) are ignored by every rule.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from itertools import dropwhile, takewhile

from lint_apptester.domain.roles import DirectoryRole
from lint_apptester.domain.rules import Rule, RuleSet

logger = logging.getLogger(__name__)

CLASS_MARKER = "public class"
COMMENT_PREFIX = "//"
PRINT_PREFIX = "System.out.print"
ASSERT_TOKEN = "assert"
LOCATOR_FACTORY = "Locator."
PLATFORM_QUALIFIERS = ("Platform", "Children")


# ---------------------------------------------------------------------------
# Line scoping helpers
# ---------------------------------------------------------------------------


def _is_marker(line: str) -> bool:
    return line.startswith(CLASS_MARKER)


def _code(lines: Iterator[str]) -> Iterator[str]:
    return (line for line in lines if not line.startswith(COMMENT_PREFIX))


def header_lines(lines: Sequence[str]) -> Iterator[str]:
    """Non-comment lines before the first class declaration."""
    stripped = (line.strip() for line in lines)
    return _code(takewhile(lambda line: not _is_marker(line), stripped))


def body_lines(lines: Sequence[str]) -> Iterator[str]:
    """Non-comment lines from the first class declaration onwards."""
    stripped = (line.strip() for line in lines)
    return _code(dropwhile(lambda line: not _is_marker(line), stripped))


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class LogInsteadOfPrintRule(Rule):
    """Class bodies log through the logger, never ``System.out``."""

    name = "Log instead of sout"
    roles = frozenset({DirectoryRole.INTERACTIONS, DirectoryRole.PAGES, DirectoryRole.STEPS})

    def evaluate(self, lines: Sequence[str]) -> bool:
        return not any(line.startswith(PRINT_PREFIX) for line in body_lines(lines))


class NoAssertCallsRule(Rule):
    """Step definitions delegate assertions to interactions."""

    name = "No assert calls"
    roles = frozenset({DirectoryRole.STEPS})

    def evaluate(self, lines: Sequence[str]) -> bool:
        return not any(ASSERT_TOKEN in line for line in body_lines(lines))


class NoLocatorCallsRule(Rule):
    """Steps and interactions must not import the locator class.

    Without a configured qualifier the rule cannot decide and reports
    non-compliance for every file.
    """

    name = "No locator calls"
    roles = frozenset({DirectoryRole.STEPS, DirectoryRole.INTERACTIONS})

    def __init__(self, locator_class_path: str | None) -> None:
        self.locator_class_path = locator_class_path or None

    def configuration_problem(self) -> str | None:
        if self.locator_class_path is None:
            return f"Locator class path is not configured; {self.name!r} fails for every file"
        return None

    def evaluate(self, lines: Sequence[str]) -> bool:
        qualifier = self.locator_class_path
        if qualifier is None:
            logger.debug("Locator class path is not configured; %r fails closed", self.name)
            return False
        return not any(line.startswith(qualifier) for line in header_lines(lines))


class PlatformLocatorMethodsRule(Rule):
    """Page objects only use the platform-aware locator factories."""

    name = "Use platform Locator methods"
    roles = frozenset({DirectoryRole.PAGES})

    def evaluate(self, lines: Sequence[str]) -> bool:
        return all(
            any(q in line for q in PLATFORM_QUALIFIERS)
            for line in body_lines(lines)
            if LOCATOR_FACTORY in line
        )


def build_catalog(locator_class_path: str | None = None) -> RuleSet:
    """Return the default rule set in report order."""
    return RuleSet(
        [
            LogInsteadOfPrintRule(),
            NoAssertCallsRule(),
            NoLocatorCallsRule(locator_class_path),
            PlatformLocatorMethodsRule(),
        ]
    )
