"""
Linter options: severity levels and their translation from configuration.

``options_for_dir`` converts a directory's raw option strings into a
validated ``Options`` value. It is the only place problem names from
configuration are checked against the registry.

Examples:
    >>> dir = Dir("schemas/app", DirConfig({"errors": "no-pk", "warnings": ""}))
    >>> options_for_dir(dir).problem_severity
    {'no-pk': <Severity.ERROR: 'error'>}

    >>> options_for_dir(Dir("x", DirConfig({"warnings": "nope"})))
    Traceback (most recent call last):
    ...
    ConfigError: Option warnings must be a comma-separated list including these values: ...

Tags:
    schemalint, linter, options, configuration, severity
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from schemalint.core.errors import ConfigError

if TYPE_CHECKING:
    from schemalint.linter.registry import ProblemRegistry
    from schemalint.source import Dir


class Severity(str, Enum):
    """Annotation severity levels. A problem with no severity is not run."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Options:
    """
    Parsed settings controlling linter behavior for one directory.

    Attributes:
        problem_severity: Problem name -> severity, for every enabled problem
        allowed_charsets: Acceptable character sets, as configured
        allowed_engines: Acceptable storage engines, as configured
    """

    problem_severity: dict[str, Severity] = field(default_factory=dict)
    allowed_charsets: list[str] = field(default_factory=list)
    allowed_engines: list[str] = field(default_factory=list)

    def problems_with(self, severity: Severity) -> list[str]:
        """Sorted names of the problems configured at the given severity."""
        return sorted(name for name, sev in self.problem_severity.items() if sev == severity)


def options_for_dir(dir: Dir, registry: ProblemRegistry | None = None) -> Options:
    """Build Options from the configuration of dir.

    Problems listed in both ``warnings`` and ``errors`` end up as errors.

    Raises:
        ConfigError: warnings or errors names a problem the registry lacks.
    """
    if registry is None:
        from schemalint.linter.problems import DEFAULT_REGISTRY

        registry = DEFAULT_REGISTRY

    severities: dict[str, Severity] = {}
    all_allowed = ", ".join(registry.names())
    for option_name, severity in (("warnings", Severity.WARNING), ("errors", Severity.ERROR)):
        for value in dir.config.get_slice(option_name, ",", True):
            value = value.lower()
            if value not in registry:
                raise ConfigError(
                    f"Option {option_name} must be a comma-separated list "
                    f"including these values: {all_allowed}"
                )
            severities[value] = severity

    return Options(
        problem_severity=severities,
        allowed_charsets=dir.config.get_slice("allow-charset", ",", True),
        allowed_engines=dir.config.get_slice("allow-engine", ",", True),
    )
