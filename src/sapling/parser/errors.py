"""Parser error types."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Why a parse was aborted."""

    UNEXPECTED_CHARACTER = "unexpected_character"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    UNTERMINATED_COMMENT = "unterminated_comment"
    UNTERMINATED_TAG = "unterminated_tag"
    UNTERMINATED_QUOTED_VALUE = "unterminated_quoted_value"
    INVALID_QUOTE = "invalid_quote"
    CLOSING_TAG_MISMATCH = "closing_tag_mismatch"
    EMPTY_SELECTOR_LIST = "empty_selector_list"
    UNTERMINATED_BLOCK = "unterminated_block"
    INVALID_DECLARATION = "invalid_declaration"
    NESTING_TOO_DEEP = "nesting_too_deep"


class ParseError(Exception):
    """Raised when HTML or CSS source cannot be parsed.

    Parsing never returns a partial result: any structural violation aborts
    the whole call with one of these.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNEXPECTED_CHARACTER,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.kind = kind
        self.position = position
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is not None and self.column is not None:
            return f"{message} (line {self.line}, column {self.column})"
        return message
