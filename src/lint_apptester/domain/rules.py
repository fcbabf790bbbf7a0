"""Rule and RuleSet — the rule engine's core types.

A rule is a named, stateless predicate over the lines of one file, tagged
with the directory roles it applies to. Rules never read ambient state;
anything they need is passed to the constructor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence

from lint_apptester.domain.roles import DirectoryRole


class Rule(ABC):
    """Base class for every line-oriented rule.

    Subclasses set ``name`` and ``roles`` and implement :meth:`evaluate`.
    """

    name: str = ""
    roles: frozenset[DirectoryRole] = frozenset()

    def applies_to(self, role: DirectoryRole) -> bool:
        return role in self.roles

    def configuration_problem(self) -> str | None:
        """Missing configuration that makes every evaluation fail, if any."""
        return None

    @abstractmethod
    def evaluate(self, lines: Sequence[str]) -> bool:
        """Return True when the file content is compliant."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class RuleSet:
    """Ordered collection of rules.

    Insertion order is report order. Names are not checked for uniqueness;
    two rules sharing a name share one outcome slot during a scan.
    """

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: list[Rule] = list(rules)

    def add(self, rule: Rule) -> None:
        self._rules.append(rule)

    def for_role(self, role: DirectoryRole) -> list[Rule]:
        """Rules applicable to *role*, in insertion order."""
        return [rule for rule in self._rules if rule.applies_to(role)]

    @property
    def names(self) -> list[str]:
        return [rule.name for rule in self._rules]

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)
