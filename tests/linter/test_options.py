"""Tests for schemalint.linter.options: severity model and option translation."""

from __future__ import annotations

import pytest

from schemalint.core.errors import ConfigError
from schemalint.linter.options import Options, Severity, options_for_dir
from schemalint.linter.registry import ProblemRegistry
from schemalint.source import Dir, DirConfig


def _dir(**options):
    return Dir(path="schemas/app", config=DirConfig(options))


# ── Severity ─────────────────────────────────────────────────────────────


class TestSeverity:
    def test_values(self):
        assert Severity.ERROR.value == "error"
        assert Severity.WARNING.value == "warning"

    def test_only_two_levels(self):
        assert len(Severity) == 2

    def test_is_string_enum(self):
        assert isinstance(Severity.WARNING, str)


# ── options_for_dir ──────────────────────────────────────────────────────


class TestOptionsForDir:
    def test_valid_config(self):
        opts = options_for_dir(
            _dir(**{
                "allow-charset": "utf8mb4,utf8",
                "allow-engine": "myisam",
                "warnings": "no-pk,bad-charset,bad-engine",
                "errors": "",
            })
        )
        assert opts == Options(
            problem_severity={
                "no-pk": Severity.WARNING,
                "bad-charset": Severity.WARNING,
                "bad-engine": Severity.WARNING,
            },
            allowed_charsets=["utf8mb4", "utf8"],
            allowed_engines=["myisam"],
        )

    def test_errors_win_over_warnings(self):
        opts = options_for_dir(
            _dir(**{
                "allow-charset": "utf8mb4,utf8",
                "allow-engine": "myisam",
                "warnings": "no-pk,bad-charset,bad-engine",
                "errors": "no-pk",
            })
        )
        assert opts == Options(
            problem_severity={
                "no-pk": Severity.ERROR,
                "bad-charset": Severity.WARNING,
                "bad-engine": Severity.WARNING,
            },
            allowed_charsets=["utf8mb4", "utf8"],
            allowed_engines=["myisam"],
        )

    def test_names_trimmed_and_lowercased(self):
        opts = options_for_dir(_dir(warnings=" No-PK ,  BAD-engine", errors=""))
        assert opts.problem_severity == {"no-pk": Severity.WARNING, "bad-engine": Severity.WARNING}

    def test_allow_lists_keep_case_and_order(self):
        opts = options_for_dir(_dir(**{"allow-charset": " UTF8MB4 , latin1 ", "allow-engine": "InnoDB,MyISAM"}))
        assert opts.allowed_charsets == ["UTF8MB4", "latin1"]
        assert opts.allowed_engines == ["InnoDB", "MyISAM"]

    def test_defaults_apply_when_unset(self):
        opts = options_for_dir(_dir())
        assert opts.problems_with(Severity.WARNING) == ["bad-charset", "bad-engine", "no-pk"]
        assert opts.problems_with(Severity.ERROR) == []
        assert opts.allowed_charsets == ["latin1", "utf8mb4"]
        assert opts.allowed_engines == ["innodb"]

    def test_empty_lists(self):
        opts = options_for_dir(_dir(warnings="", errors=""))
        assert opts.problem_severity == {}

    def test_bad_errors_option(self):
        with pytest.raises(ConfigError) as exc_info:
            options_for_dir(_dir(warnings="no-pk", errors="no-pk,made-up"))
        assert str(exc_info.value).startswith("Option errors ")

    def test_bad_warnings_option(self):
        with pytest.raises(ConfigError) as exc_info:
            options_for_dir(_dir(warnings="made-up", errors=""))
        assert str(exc_info.value).startswith("Option warnings ")

    def test_bad_warnings_reported_before_errors(self):
        with pytest.raises(ConfigError) as exc_info:
            options_for_dir(_dir(warnings="made-up", errors="also-made-up"))
        assert str(exc_info.value).startswith("Option warnings ")

    def test_error_message_lists_all_problems(self):
        with pytest.raises(ConfigError) as exc_info:
            options_for_dir(_dir(warnings="made-up"))
        assert str(exc_info.value) == (
            "Option warnings must be a comma-separated list including these values: "
            "bad-charset, bad-engine, no-pk"
        )

    def test_injected_registry(self):
        def check(schema, logical_schema, opts):
            return []

        registry = ProblemRegistry({"only-this": check})
        opts = options_for_dir(_dir(warnings="", errors="only-this"), registry)
        assert opts.problem_severity == {"only-this": Severity.ERROR}

        with pytest.raises(ConfigError, match="only-this$"):
            options_for_dir(_dir(warnings="no-pk"), registry)


class TestOptions:
    def test_frozen(self):
        opts = Options()
        with pytest.raises(AttributeError):
            opts.allowed_engines = ["innodb"]

    def test_problems_with(self):
        opts = Options(problem_severity={"b": Severity.ERROR, "a": Severity.ERROR, "c": Severity.WARNING})
        assert opts.problems_with(Severity.ERROR) == ["a", "b"]
        assert opts.problems_with(Severity.WARNING) == ["c"]
