"""
Directory linting: materialize each logical schema and collect findings.

``lint_dir`` is the orchestrator. For one directory it resolves the ignore
patterns and Options, then for every logical schema declared there:

    1. skips it if a literal schema name matches ignore-schema
    2. materializes it through the workspace executor
    3. turns per-statement execution errors into error annotations
    4. runs every configured problem checker, partitioned by severity
    5. compares each canonical CREATE with the file's text and emits a
       reformat notice where they differ

Failure policy:
    ┌────────────────────────────┬────────────────────────────────────┐
    │ Bad ignore regexp / option │ whole directory aborted, Result    │
    │                            │ holds a single ConfigError         │
    ├────────────────────────────┼────────────────────────────────────┤
    │ Executor raised            │ WorkspaceError recorded, next      │
    │                            │ logical schema still linted        │
    ├────────────────────────────┼────────────────────────────────────┤
    │ Statement failed           │ error annotation (a finding)       │
    └────────────────────────────┴────────────────────────────────────┘

Subdirectories are not visited by ``lint_dir``; ``lint_tree`` does that and
merges the per-directory Results.

Examples:
    >>> result = lint_dir(dir, WorkspaceOptions(), executor)
    >>> for annotation in result.errors:
    ...     print(annotation.message_with_location())

Tags:
    schemalint, linter, orchestration, workspace, reformat
"""

from __future__ import annotations

import re

from schemalint.catalog import ObjectType
from schemalint.core.errors import ConfigError, WorkspaceError
from schemalint.core.logging import LogContext, get_logger
from schemalint.linter.annotation import Annotation
from schemalint.linter.options import Severity, options_for_dir
from schemalint.linter.problems import DEFAULT_REGISTRY
from schemalint.linter.registry import ProblemRegistry
from schemalint.linter.result import Result, bad_config_result
from schemalint.source import Dir, LogicalSchema
from schemalint.workspace import SchemaExecutor, WorkspaceOptions

logger = get_logger(__name__)


def _literal_schema_names(dir: Dir, logical_schema: LogicalSchema) -> list[str]:
    """Schema names that can be checked without a live instance.

    ``*`` and backtick shell-outs are only resolvable against an instance,
    so they are left out.
    """
    if logical_schema.name:
        names = [logical_schema.name]
    else:
        names = dir.config.get_slice("schema", ",", True)
    return [n for n in names if n != "*" and not (n.startswith("`") and n.endswith("`"))]


def _is_ignored_table(object_type: ObjectType, name: str, ignore_table: re.Pattern[str] | None) -> bool:
    return object_type == ObjectType.TABLE and ignore_table is not None and bool(ignore_table.search(name))


def lint_dir(
    dir: Dir,
    ws_opts: WorkspaceOptions,
    executor: SchemaExecutor,
    registry: ProblemRegistry | None = None,
) -> Result:
    """Lint the logical schemas of dir, returning its Result.

    Args:
        dir: Directory to lint; its subdirs are not visited
        ws_opts: Passed through to executor unchanged
        executor: Materializes a logical schema in a workspace
        registry: Problem checkers; the default registry when omitted
    """
    if registry is None:
        registry = DEFAULT_REGISTRY
    rel_path = dir.rel_path()

    try:
        ignore_table = dir.config.get_regexp("ignore-table")
        ignore_schema = dir.config.get_regexp("ignore-schema")
        opts = options_for_dir(dir, registry)
    except (ValueError, ConfigError) as exc:
        logger.warning("lint_dir_bad_config", directory=rel_path, error=str(exc))
        return bad_config_result(exc)

    result = Result()
    with LogContext(directory=rel_path):
        logger.debug("lint_dir_started", logical_schemas=len(dir.logical_schemas))

        for logical_schema in dir.logical_schemas:
            if ignore_schema is not None:
                names = _literal_schema_names(dir, logical_schema)
                if any(ignore_schema.search(name) for name in names):
                    result.debug_logs.append(
                        f"Skipping schema in {rel_path} because ignore-schema='{ignore_schema.pattern}'"
                    )
                    logger.debug("schema_skipped", schema_names=names, ignore_schema=ignore_schema.pattern)
                    continue

            # Convert the logical schema from the filesystem into a real schema
            try:
                schema, statement_errors = executor(logical_schema, ws_opts)
            except Exception as exc:
                err = WorkspaceError(
                    f"Skipping schema in {rel_path} due to error: {exc}", cause=exc
                ).with_context(directory=rel_path, schema=logical_schema.name or None)
                result.exceptions.append(err)
                logger.warning("workspace_failed", **err.to_dict())
                continue

            for stmt_err in statement_errors:
                if _is_ignored_table(stmt_err.object_type, stmt_err.object_name, ignore_table):
                    result.debug_logs.append(
                        f"Skipping {stmt_err.object_key()} because ignore-table='{ignore_table.pattern}'"
                    )
                    continue
                result.errors.append(
                    Annotation(
                        statement=stmt_err.statement,
                        summary="SQL statement returned an error",
                        message=str(stmt_err.error),
                    )
                )

            for problem_name, severity in opts.problem_severity.items():
                annotations = registry[problem_name](schema, logical_schema, opts)
                if severity == Severity.WARNING:
                    result.warnings.extend(annotations)
                else:
                    result.errors.extend(annotations)

            # Any canonical CREATE that differs from the file needs reformatting
            for key, inst_create_text in schema.object_definitions().items():
                if _is_ignored_table(key.type, key.name, ignore_table):
                    result.debug_logs.append(f"Skipping {key} because ignore-table='{ignore_table.pattern}'")
                    continue
                fs_stmt = logical_schema.creates.get(key)
                if fs_stmt is None:
                    result.debug_logs.append(f"Skipping {key} because it has no CREATE statement in {rel_path}")
                    continue
                fs_body, fs_suffix = fs_stmt.split_text_body()
                if inst_create_text != fs_body:
                    result.format_notices.append(
                        Annotation(
                            statement=fs_stmt,
                            summary="SQL statement should be reformatted",
                            message=f"{inst_create_text}{fs_suffix}",
                        )
                    )

        logger.debug(
            "lint_dir_finished",
            errors=len(result.errors),
            warnings=len(result.warnings),
            format_notices=len(result.format_notices),
            exceptions=len(result.exceptions),
        )
    return result


def lint_tree(
    dir: Dir,
    ws_opts: WorkspaceOptions,
    executor: SchemaExecutor,
    registry: ProblemRegistry | None = None,
) -> Result:
    """Lint dir and all of its subdirs depth-first, parents first."""
    result = lint_dir(dir, ws_opts, executor, registry)
    for subdir in dir.subdirs:
        result.merge(lint_tree(subdir, ws_opts, executor, registry))
    return result
