"""Linting schemas and returning results."""

from schemalint.linter.annotation import Annotation
from schemalint.linter.lint import lint_dir, lint_tree
from schemalint.linter.options import Options, Severity, options_for_dir
from schemalint.linter.problems import DEFAULT_REGISTRY
from schemalint.linter.registry import Checker, ProblemRegistry
from schemalint.linter.result import Result, bad_config_result

__all__ = [
    "Annotation",
    "Checker",
    "DEFAULT_REGISTRY",
    "Options",
    "ProblemRegistry",
    "Result",
    "Severity",
    "bad_config_result",
    "lint_dir",
    "lint_tree",
    "options_for_dir",
]
