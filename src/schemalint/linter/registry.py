"""Problem registry: maps problem names to checker functions.

Manifesto:
    The set of valid problem names is exactly the registry's key set, so
    option validation and dispatch can never disagree. A registry is built
    once and then only read; tests that need extra checkers build a new one
    with ``extend()`` instead of mutating the shared default.

Tags:
    schemalint, linter, registry, problem-discovery, lookup
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING

from schemalint.core.logging import get_logger

if TYPE_CHECKING:
    from schemalint.catalog import Schema
    from schemalint.linter.annotation import Annotation
    from schemalint.linter.options import Options
    from schemalint.source import LogicalSchema

logger = get_logger(__name__)

Checker = Callable[["Schema", "LogicalSchema", "Options"], "list[Annotation]"]


class ProblemRegistry(Mapping[str, Checker]):
    """Read-only mapping of problem name to checker."""

    def __init__(self, checkers: Mapping[str, Checker] | None = None):
        self._checkers: dict[str, Checker] = {}
        for name, checker in (checkers or {}).items():
            self._add(name, checker)

    def _add(self, name: str, checker: Checker) -> None:
        name = name.lower()
        if name in self._checkers:
            raise ValueError(f"Problem '{name}' is already registered")
        self._checkers[name] = checker

    def register(self, name: str) -> Callable[[Checker], Checker]:
        """Decorator to register a checker while the registry is being built."""

        def decorator(checker: Checker) -> Checker:
            self._add(name, checker)
            return checker

        return decorator

    def extend(self, checkers: Mapping[str, Checker]) -> ProblemRegistry:
        """Return a new registry with additional checkers; self is unchanged."""
        combined = dict(self._checkers)
        extended = ProblemRegistry(combined)
        for name, checker in checkers.items():
            extended._add(name, checker)
        logger.debug("problem_registry_extended", added=sorted(checkers), total=len(extended))
        return extended

    def names(self) -> list[str]:
        """List all registered problem names, sorted."""
        return sorted(self._checkers)

    def describe(self, name: str) -> str:
        """First docstring line of the checker, or an empty string."""
        doc = self[name].__doc__ or ""
        return doc.strip().splitlines()[0] if doc.strip() else ""

    def __getitem__(self, name: str) -> Checker:
        return self._checkers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._checkers)

    def __len__(self) -> int:
        return len(self._checkers)

    def __repr__(self) -> str:
        return f"ProblemRegistry({', '.join(self.names())})"
