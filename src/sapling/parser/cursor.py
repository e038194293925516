"""Character cursor shared by the HTML and CSS scanners."""

from __future__ import annotations

from collections.abc import Callable

from sapling.parser.errors import ErrorKind, ParseError


class Cursor:
    """A forward-only scan position over an immutable source string.

    ``pos`` is a code-point index into ``source`` and always satisfies
    ``0 <= pos <= len(source)``. Each parser instance owns one cursor;
    cursors are never shared.
    """

    def __init__(self, source: str, pos: int = 0):
        self.source = source
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def starts_with(self, literal: str) -> bool:
        return self.source.startswith(literal, self.pos)

    def peek_char(self, eof_kind: ErrorKind = ErrorKind.UNEXPECTED_END_OF_INPUT) -> str:
        """Return the next character without consuming it."""
        if self.at_end():
            raise self.error("unexpected end of input", eof_kind)
        return self.source[self.pos]

    def advance_char(self, eof_kind: ErrorKind = ErrorKind.UNEXPECTED_END_OF_INPUT) -> str:
        """Consume and return the next character."""
        ch = self.peek_char(eof_kind)
        self.pos += 1
        return ch

    def consume_while(self, test: Callable[[str], bool]) -> str:
        """Consume characters while *test* holds; return them (maybe empty)."""
        start = self.pos
        while not self.at_end() and test(self.source[self.pos]):
            self.pos += 1
        return self.source[start:self.pos]

    def skip_whitespace(self) -> None:
        self.consume_while(str.isspace)

    def expect(
        self,
        literal: str,
        eof_kind: ErrorKind = ErrorKind.UNEXPECTED_END_OF_INPUT,
    ) -> None:
        """Consume *literal* one character at a time or raise."""
        for wanted in literal:
            start = self.pos
            got = self.advance_char(eof_kind)
            if got != wanted:
                raise self.error(
                    f"expected {wanted!r}, found {got!r}",
                    ErrorKind.UNEXPECTED_CHARACTER,
                    position=start,
                )

    # --- error reporting ------------------------------------------------------

    def location(self, position: int | None = None) -> tuple[int, int]:
        """Return the 1-based (line, column) of *position* (default: ``pos``)."""
        if position is None:
            position = self.pos
        consumed = self.source[:position]
        line = consumed.count("\n") + 1
        column = position - (consumed.rfind("\n") + 1) + 1
        return line, column

    def error(
        self,
        message: str,
        kind: ErrorKind,
        position: int | None = None,
    ) -> ParseError:
        """Build a ParseError pinned to *position* (default: ``pos``)."""
        if position is None:
            position = self.pos
        line, column = self.location(position)
        return ParseError(message, kind=kind, position=position, line=line, column=column)
