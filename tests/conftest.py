"""
Shared pytest fixtures for schemalint tests.

This module provides:
- A fake workspace executor that records which schemas it materialized
- A canonical one-table logical schema and its materialized counterpart
- A directory builder

Usage:
    def test_something(make_dir, executor, orders_schema):
        logical, schema = orders_schema
        executor.add(logical, schema)
        result = lint_dir(make_dir({"warnings": ""}, [logical]), WorkspaceOptions(), executor)
"""

import sys
from pathlib import Path

import pytest

# Ensure schemalint package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from schemalint.catalog import Schema
from schemalint.core.logging import clear_context
from schemalint.source import Dir, DirConfig, LogicalSchema
from tests._support.builders import (
    ORDERS_CANONICAL,
    FakeExecutor,
    canonical_table,
    table_statement,
)


@pytest.fixture(autouse=True)
def _clean_log_context():
    clear_context()
    yield
    clear_context()


@pytest.fixture()
def executor():
    return FakeExecutor()


@pytest.fixture()
def orders_schema():
    """Logical schema with one orders table whose file text is canonical."""
    logical = LogicalSchema(name="app")
    logical.add_create(table_statement("orders", ORDERS_CANONICAL + ";\n"))
    schema = Schema(name="app", char_set="utf8mb4", tables=[canonical_table()])
    return logical, schema


@pytest.fixture()
def make_dir():
    def _make(options=None, logical_schemas=None, path="schemas/app"):
        return Dir(path=path, config=DirConfig(options), logical_schemas=list(logical_schemas or []))

    return _make
