"""Workspace execution contract.

A workspace executor takes a logical schema, runs its CREATE statements in a
disposable database, and returns the introspected schema. How the database
is provisioned and torn down is entirely the executor's business; the linter
passes ``WorkspaceOptions`` through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from schemalint.catalog import ObjectKey, ObjectType, Schema
from schemalint.source import LogicalSchema, Statement


@dataclass(frozen=True)
class WorkspaceOptions:
    """Opaque settings for the workspace executor."""

    type: str = "temp-schema"
    schema_name: str = "_schemalint_tmp"
    default_char_set: str = ""
    default_collation: str = ""
    lock_wait_timeout: int = 30
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class StatementError:
    """A single CREATE statement that failed inside the workspace."""

    object_type: ObjectType
    object_name: str
    error: Exception
    statement: Statement

    def object_key(self) -> ObjectKey:
        return ObjectKey(self.object_type, self.object_name)

    def __str__(self) -> str:
        return f"Error executing {self.object_key()}: {self.error}"


class SchemaExecutor(Protocol):
    """Materializes a logical schema.

    Raises on service-level failure (workspace could not be set up). Failures
    of individual statements are returned, not raised.
    """

    def __call__(
        self, logical_schema: LogicalSchema, options: WorkspaceOptions
    ) -> tuple[Schema, list[StatementError]]: ...
