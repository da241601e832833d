"""Annotations: single linter findings tied to a source statement."""

from __future__ import annotations

from dataclasses import dataclass

from schemalint.source import Statement


@dataclass(frozen=True)
class Annotation:
    """
    An error, warning, or reformat notice about a single SQL statement.

    The statement is referenced, not copied: many annotations may point at the
    same Statement owned by a LogicalSchema.

    Attributes:
        statement: Statement the finding concerns; None if unknown
        summary: Short stable category label, e.g. "No primary key"
        message: Human-readable detail
        line_offset: Lines to add to the statement's line number, for
            findings about a later line of a multi-line statement
    """

    statement: Statement | None
    summary: str
    message: str
    line_offset: int = 0

    def location(self) -> tuple[str, int]:
        """Return (file, line) for sorting; ("", 0) when unknown."""
        if self.statement is None or self.statement.line_no == 0:
            return ("", 0)
        return (self.statement.file, self.statement.line_no + self.line_offset)

    def message_with_location(self) -> str:
        """Prepend location to the message, or append the full SQL if unknown.

        A column is only shown for findings at the statement's own line; any
        line offset suppresses it.
        """
        stmt = self.statement
        if stmt is None or stmt.file == "" or stmt.line_no == 0:
            text = stmt.text if stmt is not None else ""
            return f"{self.message} [Full SQL: {text}]"
        if self.line_offset == 0 and stmt.char_no > 1:
            return f"{stmt.file}:{stmt.line_no}:{stmt.char_no}: {self.message}"
        return f"{stmt.file}:{stmt.line_no + self.line_offset}: {self.message}"
