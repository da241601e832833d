"""Schema catalog model: object identity and canonical CREATE text.

These types describe a materialized (introspected) schema. They are produced
by a workspace executor and only read by the linter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ObjectType(str, Enum):
    """Kinds of schema objects that have a CREATE statement."""

    TABLE = "table"
    PROC = "procedure"
    FUNC = "function"


@dataclass(frozen=True)
class ObjectKey:
    """Identity of a schema object: type plus name.

    >>> str(ObjectKey(ObjectType.TABLE, "orders"))
    'table `orders`'
    """

    type: ObjectType
    name: str

    def __str__(self) -> str:
        return f"{self.type.value} `{self.name}`"


@dataclass
class Column:
    name: str
    type_in_db: str
    char_set: str = ""
    collation: str = ""


@dataclass
class Table:
    """An introspected table.

    ``primary_key`` lists the primary key column names, or is None when the
    table has no primary key.
    """

    name: str
    create_statement: str
    engine: str = "InnoDB"
    char_set: str = ""
    collation: str = ""
    columns: list[Column] = field(default_factory=list)
    primary_key: list[str] | None = None

    def object_key(self) -> ObjectKey:
        return ObjectKey(ObjectType.TABLE, self.name)


@dataclass
class Routine:
    name: str
    type: ObjectType
    create_statement: str

    def object_key(self) -> ObjectKey:
        return ObjectKey(self.type, self.name)


@dataclass
class Schema:
    name: str
    char_set: str = ""
    collation: str = ""
    tables: list[Table] = field(default_factory=list)
    routines: list[Routine] = field(default_factory=list)

    def table(self, name: str) -> Table | None:
        for table in self.tables:
            if table.name == name:
                return table
        return None

    def object_definitions(self) -> dict[ObjectKey, str]:
        """Map every object's key to its canonical CREATE, tables first."""
        defs = {table.object_key(): table.create_statement for table in self.tables}
        for routine in self.routines:
            defs[routine.object_key()] = routine.create_statement
        return defs
