"""Tests for schemalint.linter.result: aggregation and bad-config results."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from schemalint.core.errors import ConfigError, WorkspaceError
from schemalint.linter.annotation import Annotation
from schemalint.linter.result import Result, bad_config_result
from schemalint.source import Statement


def _annotation(message, file="a.sql", line_no=1):
    return Annotation(statement=Statement(text="x", file=file, line_no=line_no), summary="s", message=message)


# ── merge ────────────────────────────────────────────────────────────────


class TestMerge:
    @pytest.mark.parametrize("field_name", ["errors", "warnings", "format_notices"])
    def test_annotation_fields(self, field_name):
        r = Result()
        getattr(r, field_name).extend([_annotation("a"), _annotation("b")])
        other = Result()
        getattr(other, field_name).append(_annotation("c"))

        r.merge(other)

        assert [a.message for a in getattr(r, field_name)] == ["a", "b", "c"]
        assert len(getattr(other, field_name)) == 1

    def test_debug_logs(self):
        r = Result(debug_logs=["one", "two"])
        r.merge(Result(debug_logs=["three"]))
        assert r.debug_logs == ["one", "two", "three"]

    def test_exceptions(self):
        first, second = WorkspaceError("first"), ConfigError("second")
        r = Result(exceptions=[first])
        r.merge(Result(exceptions=[second]))
        assert r.exceptions == [first, second]

    def test_fields_stay_separate(self):
        r = Result()
        r.merge(Result(errors=[_annotation("e")], warnings=[_annotation("w")]))
        assert [a.message for a in r.errors] == ["e"]
        assert [a.message for a in r.warnings] == ["w"]
        assert r.format_notices == []

    def test_merge_empty(self):
        r = Result(errors=[_annotation("e")])
        r.merge(Result())
        assert len(r.errors) == 1


# ── bad_config_result ───────────────────────────────────────────────────


class TestBadConfigResult:
    def test_keeps_config_error(self):
        err = ConfigError("Option errors must be ...")
        result = bad_config_result(err)
        assert result.exceptions == [err]
        assert result.exceptions[0] is err
        assert result.errors == [] and result.warnings == [] and result.format_notices == []
        assert result.debug_logs == []

    def test_converts_other_errors(self):
        cause = ValueError("Invalid regexp for option ignore-table: [")
        result = bad_config_result(cause)
        assert len(result.exceptions) == 1
        converted = result.exceptions[0]
        assert isinstance(converted, ConfigError)
        assert str(converted) == "Invalid regexp for option ignore-table: ["
        assert converted.__cause__ is cause


# ── reporting helpers ───────────────────────────────────────────────────


class TestReporting:
    def test_annotations_sorted_by_location(self):
        r = Result(
            errors=[_annotation("b2", "b.sql", 2)],
            warnings=[_annotation("a9", "a.sql", 9)],
            format_notices=[_annotation("a1", "a.sql", 1)],
        )
        assert [a.message for a in r.annotations()] == ["a1", "a9", "b2"]

    def test_is_clean(self):
        assert Result(debug_logs=["skipped"]).is_clean()
        assert not Result(format_notices=[_annotation("n")]).is_clean()
        assert not Result(exceptions=[ConfigError("x")]).is_clean()

    def test_log_emits_event_per_entry(self):
        logger = MagicMock()
        r = Result(
            errors=[_annotation("e")],
            warnings=[_annotation("w")],
            format_notices=[_annotation("n")],
            debug_logs=["d"],
            exceptions=[ConfigError("bad")],
        )

        r.log(logger)

        logger.error.assert_any_call("lint_error", summary="s", detail="a.sql:1: e")
        logger.error.assert_any_call("lint_exception", error="bad", error_type="ConfigError")
        logger.warning.assert_called_once_with("lint_warning", summary="s", detail="a.sql:1: w")
        logger.info.assert_called_once_with("lint_format_notice", summary="s", detail="a.sql:1: n")
        logger.debug.assert_called_once_with("lint_debug", detail="d")
