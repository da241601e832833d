"""Ambient building blocks shared by the linter: errors, logging, settings."""

from schemalint.core.errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    LintError,
    WorkspaceError,
    categorize_error,
)
from schemalint.core.logging import LogContext, configure_logging, get_logger

__all__ = [
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "LintError",
    "WorkspaceError",
    "categorize_error",
    "LogContext",
    "configure_logging",
    "get_logger",
]
