"""
Lint results: the accumulated findings and failures of a linting run.

Manifesto:
    A Result keeps two kinds of output strictly apart:

    - **Findings** (errors, warnings, format_notices): linting completed
      and found something. These are the product.
    - **Exceptions**: linting could not be completed for some unit. A
      Result with exceptions still carries the findings of every unit that
      did complete.

    ``debug_logs`` records why things were skipped, for tracing.

Examples:
    >>> parent = Result()
    >>> parent.merge(lint_dir(child_dir, ws_opts, executor))
    >>> parent.is_clean()
    True

Tags:
    schemalint, linter, result, aggregation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from schemalint.core.errors import ConfigError
from schemalint.core.logging import get_logger
from schemalint.linter.annotation import Annotation


@dataclass
class Result:
    """Combined linter annotations and exceptions for a directory (and subdirs)."""

    errors: list[Annotation] = field(default_factory=list)  # in the linting sense, not Python's
    warnings: list[Annotation] = field(default_factory=list)
    format_notices: list[Annotation] = field(default_factory=list)
    debug_logs: list[str] = field(default_factory=list)
    exceptions: list[Exception] = field(default_factory=list)

    def merge(self, other: Result) -> None:
        """Append all of other's entries onto this result, in place."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        self.format_notices.extend(other.format_notices)
        self.debug_logs.extend(other.debug_logs)
        self.exceptions.extend(other.exceptions)

    def annotations(self) -> list[Annotation]:
        """Errors, warnings and format notices, sorted by file then line."""
        combined = self.errors + self.warnings + self.format_notices
        return sorted(combined, key=lambda a: a.location())

    def is_clean(self) -> bool:
        """True when there are no findings and no exceptions."""
        return not (self.errors or self.warnings or self.format_notices or self.exceptions)

    def log(self, logger: Any = None) -> None:
        """Emit one structured event per finding, exception and debug entry."""
        logger = logger or get_logger(__name__)
        for msg in self.debug_logs:
            logger.debug("lint_debug", detail=msg)
        for exc in self.exceptions:
            logger.error("lint_exception", error=str(exc), error_type=type(exc).__name__)
        for annotation in self.errors:
            logger.error("lint_error", summary=annotation.summary, detail=annotation.message_with_location())
        for annotation in self.warnings:
            logger.warning("lint_warning", summary=annotation.summary, detail=annotation.message_with_location())
        for annotation in self.format_notices:
            logger.info("lint_format_notice", summary=annotation.summary, detail=annotation.message_with_location())


def bad_config_result(err: Exception) -> Result:
    """Return a Result whose only content is a ConfigError in exceptions.

    err is converted to a ConfigError, keeping its message, if it is not one
    already.
    """
    if not isinstance(err, ConfigError):
        err = ConfigError(str(err), cause=err)
    return Result(exceptions=[err])
