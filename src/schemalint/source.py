"""Filesystem schema source contract.

The linter never reads SQL files itself. A filesystem source parses a
directory tree into ``Dir`` objects, each carrying its resolved option
configuration and the logical schemas declared in that directory. The types
here are that contract in its minimal concrete form.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from schemalint.catalog import ObjectKey
from schemalint.core.settings import DEFAULT_OPTIONS

if TYPE_CHECKING:
    from schemalint.core.settings import LinterSettings


@dataclass(eq=False)
class Statement:
    """One SQL statement as it appears on disk.

    ``line_no`` and ``char_no`` are 1-based; 0 means unknown. Statements are
    shared by reference, so equality is identity.
    """

    text: str
    file: str = ""
    line_no: int = 0
    char_no: int = 0
    delimiter: str = ";"
    object_key: ObjectKey | None = None

    def split_text_body(self) -> tuple[str, str]:
        """Split text into the statement body and its trailing suffix.

        The suffix holds the delimiter and any trailing whitespace, so that
        ``body + suffix == text`` always holds.

        >>> Statement("CREATE TABLE t (id int);\\n").split_text_body()
        ('CREATE TABLE t (id int)', ';\\n')
        """
        body = self.text.rstrip(";\r\n\t ")
        if self.delimiter not in ("", ";") and body.endswith(self.delimiter):
            body = body[: -len(self.delimiter)].rstrip(";\r\n\t ")
        return body, self.text[len(body):]


@dataclass(eq=False)
class LogicalSchema:
    """The CREATE statements of one schema, as found on disk.

    ``name`` is set when the files name their schema explicitly; otherwise the
    directory's ``schema`` option supplies the name(s).
    """

    name: str = ""
    char_set: str = ""
    collation: str = ""
    creates: dict[ObjectKey, Statement] = field(default_factory=dict)

    def add_create(self, statement: Statement) -> None:
        if statement.object_key is None:
            raise ValueError(f"Statement has no object key: {statement.text!r}")
        self.creates[statement.object_key] = statement


class DirConfig:
    """Resolved option values for one directory, layered over defaults.

    Args:
        options: Options explicitly set for this directory
        defaults: Fallback values; DEFAULT_OPTIONS when omitted
    """

    def __init__(
        self,
        options: Mapping[str, str] | None = None,
        defaults: Mapping[str, str] | None = None,
    ):
        self._options = dict(options or {})
        self._defaults = dict(DEFAULT_OPTIONS if defaults is None else defaults)

    @classmethod
    def from_settings(
        cls, settings: LinterSettings, options: Mapping[str, str] | None = None
    ) -> DirConfig:
        return cls(options, defaults=settings.option_defaults())

    def changed(self, name: str) -> bool:
        """True if the option was set explicitly for this directory."""
        return name in self._options

    def get(self, name: str) -> str:
        if name in self._options:
            return self._options[name]
        if name in self._defaults:
            return self._defaults[name]
        raise KeyError(f"Unknown option {name}")

    def get_slice(self, name: str, delimiter: str = ",", unwrap_quotes: bool = True) -> list[str]:
        """Split an option value on delimiter, trimming each item.

        Empty items are dropped. With unwrap_quotes, an item wrapped in
        matching single or double quotes is unwrapped.
        """
        items = []
        for item in self.get(name).split(delimiter):
            item = item.strip()
            if unwrap_quotes and len(item) >= 2 and item[0] == item[-1] and item[0] in "'\"":
                item = item[1:-1]
            if item:
                items.append(item)
        return items

    def get_regexp(self, name: str) -> re.Pattern[str] | None:
        """Compile an option value as a regexp; None if the option is empty."""
        value = self.get(name)
        if value == "":
            return None
        try:
            return re.compile(value)
        except re.error as exc:
            raise ValueError(f"Invalid regexp for option {name}: {value}") from exc


@dataclass(eq=False)
class Dir:
    """A directory of schema files with its configuration."""

    path: str
    config: DirConfig = field(default_factory=DirConfig)
    logical_schemas: list[LogicalSchema] = field(default_factory=list)
    subdirs: list[Dir] = field(default_factory=list)

    def rel_path(self) -> str:
        return os.path.relpath(self.path)
