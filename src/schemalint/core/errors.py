"""
Structured error types for schemalint.

Linting distinguishes two very different kinds of failure: a finding
("linting completed and found a problem") and an exception ("linting could
not be completed for this unit"). Findings are Annotations; exceptions are
the typed errors in this module, recorded in ``Result.exceptions``.

Manifesto:
    - **Typed errors:** Config problems are distinguishable from runtime ones
    - **Rich context:** Errors carry the directory/schema they concern
    - **Error chaining:** The underlying exception is preserved as cause

Architecture:
    ::

        ┌──────────────────────────────────────────────┐
        │                  LintError                    │
        │       (category, context, cause)              │
        ├──────────────────────────────────────────────┤
        │  ConfigError            WorkspaceError        │
        │  (CONFIG)               (WORKSPACE)           │
        └──────────────────────────────────────────────┘

Examples:
    >>> err = ConfigError("Option warnings must be ...")
    >>> err.category
    <ErrorCategory.CONFIG: 'CONFIG'>
    >>> err == ConfigError("Option warnings must be ...")
    True

    >>> try:
    ...     raise RuntimeError("instance unreachable")
    ... except RuntimeError as e:
    ...     err = WorkspaceError("Skipping schema in app", cause=e)
    >>> err.cause
    RuntimeError('instance unreachable')

Guardrails:
    ❌ DON'T: Put "linting found a problem" into an exception
    ✅ DO: Return an Annotation for findings, raise LintError for failures

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, schemalint
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and reporting.

    Attributes:
        CONFIG: Invalid linter settings (unknown problem, bad regexp)
        WORKSPACE: A logical schema could not be materialized
        INTERNAL: Bugs, unexpected state
    """

    CONFIG = "CONFIG"
    WORKSPACE = "WORKSPACE"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to a LintError.

    Only non-None fields are serialized by ``to_dict()``; anything without a
    dedicated field goes into ``metadata``.

    Attributes:
        directory: Relative path of the directory being linted
        schema: Name of the logical schema, if known
        object_key: Object the error concerns, e.g. ``table `orders```
        metadata: Additional key-value pairs
    """

    directory: str | None = None
    schema: str | None = None
    object_key: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["directory", "schema", "object_key"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class LintError(Exception):
    """
    Base exception for all schemalint errors.

    Subclasses set ``default_category``; everything else is per-instance.

    Examples:
        >>> error = LintError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.with_context(directory="schemas/app").context.directory
        'schemas/app'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> LintError:
        """
        Add context to this error (fluent API).

        Usage:
            raise WorkspaceError("Failed").with_context(directory="schemas/app")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }

        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict

        if self.cause is not None:
            result["cause"] = str(self.cause)

        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class ConfigError(LintError):
    """
    Invalid linter configuration.

    Always fatal for the directory being linted. Compared by message, so a
    ConfigError behaves like a plain string-carrying value.
    """

    default_category = ErrorCategory.CONFIG

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((ConfigError, self.message))


class WorkspaceError(LintError):
    """
    A logical schema could not be materialized in a workspace.

    Fatal for that schema only; the rest of the directory is still linted.
    """

    default_category = ErrorCategory.WORKSPACE


def categorize_error(error: Exception) -> ErrorCategory:
    """Return the category of any exception, INTERNAL for foreign ones."""
    if isinstance(error, LintError):
        return error.category
    return ErrorCategory.INTERNAL


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "LintError",
    "ConfigError",
    "WorkspaceError",
    "categorize_error",
]
