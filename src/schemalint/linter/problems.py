"""Included problem checks and the default registry.

Each checker receives the materialized schema, the logical schema it came
from, and the directory's Options, and returns annotations located at the
filesystem CREATE statement of the offending object.
"""

from __future__ import annotations

import re

from schemalint.catalog import Schema, Table
from schemalint.linter.annotation import Annotation
from schemalint.linter.options import Options
from schemalint.linter.registry import ProblemRegistry
from schemalint.source import LogicalSchema

DEFAULT_REGISTRY = ProblemRegistry()


def _allowed(value: str, allowed: list[str]) -> bool:
    # An empty allow-list disables the check
    if not allowed:
        return True
    return value.lower() in (a.lower() for a in allowed)


def _column_line_offset(text: str, column_name: str) -> int:
    """Offset of the line defining column_name in a CREATE TABLE, else 0."""
    pattern = re.compile(rf"\s*`?{re.escape(column_name)}`?\s")
    for offset, line in enumerate(text.splitlines()):
        if offset > 0 and pattern.match(line):
            return offset
    return 0


def _statement_for(logical_schema: LogicalSchema, table: Table):
    return logical_schema.creates.get(table.object_key())


@DEFAULT_REGISTRY.register("no-pk")
def no_primary_key(schema: Schema, logical_schema: LogicalSchema, opts: Options) -> list[Annotation]:
    """Tables must define a PRIMARY KEY."""
    results = []
    for table in schema.tables:
        if table.primary_key:
            continue
        results.append(
            Annotation(
                statement=_statement_for(logical_schema, table),
                summary="No primary key",
                message=(
                    f"Table {table.name} does not define a PRIMARY KEY. Lack of a "
                    "PRIMARY KEY may cause performance problems and prevents some "
                    "replication features from working properly."
                ),
            )
        )
    return results


@DEFAULT_REGISTRY.register("bad-charset")
def bad_character_set(schema: Schema, logical_schema: LogicalSchema, opts: Options) -> list[Annotation]:
    """Tables and columns must use a character set listed in allow-charset."""
    permitted = ", ".join(opts.allowed_charsets)
    results = []
    for table in schema.tables:
        stmt = _statement_for(logical_schema, table)
        if table.char_set and not _allowed(table.char_set, opts.allowed_charsets):
            results.append(
                Annotation(
                    statement=stmt,
                    summary="Character set not permitted",
                    message=(
                        f"Table {table.name} is using character set {table.char_set}, which is "
                        f"not listed in option allow-charset. Permitted: {permitted}"
                    ),
                )
            )
        for col in table.columns:
            if not col.char_set or col.char_set == table.char_set:
                continue
            if _allowed(col.char_set, opts.allowed_charsets):
                continue
            offset = _column_line_offset(stmt.text, col.name) if stmt is not None else 0
            results.append(
                Annotation(
                    statement=stmt,
                    summary="Character set not permitted",
                    message=(
                        f"Column {col.name} of table {table.name} is using character set "
                        f"{col.char_set}, which is not listed in option allow-charset. "
                        f"Permitted: {permitted}"
                    ),
                    line_offset=offset,
                )
            )
    return results


@DEFAULT_REGISTRY.register("bad-engine")
def bad_engine(schema: Schema, logical_schema: LogicalSchema, opts: Options) -> list[Annotation]:
    """Tables must use a storage engine listed in allow-engine."""
    results = []
    for table in schema.tables:
        if _allowed(table.engine, opts.allowed_engines):
            continue
        results.append(
            Annotation(
                statement=_statement_for(logical_schema, table),
                summary="Storage engine not permitted",
                message=(
                    f"Table {table.name} is using storage engine {table.engine}, which is "
                    f"not listed in option allow-engine. Permitted: "
                    f"{', '.join(opts.allowed_engines)}"
                ),
            )
        )
    return results
