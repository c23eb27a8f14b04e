"""CSS parser error types."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a CSS parse failure."""

    UNEXPECTED_CHARACTER = "unexpected_character"
    UNEXPECTED_EOF = "unexpected_eof"
    INVALID_NUMBER = "invalid_number"
    UNKNOWN_UNIT = "unknown_unit"
    INVALID_COLOR = "invalid_color"


class CSSParseError(Exception):
    """Raised when CSS source cannot be parsed.

    Attributes:
        kind: What went wrong.
        position: Character offset into the source, if known.
        line: 1-based line of *position*.
        column: 1-based column of *position*.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.message = message
        self.kind = kind
        self.position = position
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
