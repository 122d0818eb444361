"""Errors raised while turning source files into domain relations."""
from __future__ import annotations


class ParseError(ValueError):
    """Base class for input errors that abort a verification run."""

    kind = "parse-error"


class MissingColumnError(ParseError):
    kind = "missing-column"

    def __init__(self, column: str) -> None:
        super().__init__(f"Missing required column: {column}")
        self.column = column


class BadDeletionValueError(ParseError):
    kind = "bad-deletion-value"

    def __init__(self, value: str) -> None:
        super().__init__(f"Unrecognized deletion marker: {value!r}")
        self.value = value


class MissingCellError(ParseError):
    kind = "missing-cell"

    def __init__(self, cell: str, sheet_name: str) -> None:
        super().__init__(f"Missing {cell} cell in sheet {sheet_name!r}")
        self.cell = cell
        self.sheet_name = sheet_name


class MalformedCsvError(ParseError):
    kind = "malformed-csv"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Malformed CSV input: {detail}")
        self.detail = detail


class UnreadableWorkbookError(ParseError):
    kind = "unreadable-workbook"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Unreadable workbook: {detail}")
        self.detail = detail
