"""Lark Transformer that converts a rule block body into Declarations."""

from __future__ import annotations

import functools
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from sapling.parser.errors import ErrorKind, ParseError
from sapling.stylesheet.model import (
    Color,
    ColorValue,
    Declaration,
    Keyword,
    Length,
    Unit,
    Value,
)

__all__ = ["DeclarationTransformer", "parse_declarations"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


class DeclarationTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Declaration objects."""

    # ---- values ----

    def length(self, items: list[Token]) -> Length:
        return Length(float(items[0]), Unit.PX)

    def color(self, items: list[Token]) -> ColorValue:
        raw = str(items[0])[1:]
        r, g, b = (int(raw[i:i + 2], 16) for i in (0, 2, 4))
        return ColorValue(Color(r, g, b, 255))

    def keyword(self, items: list[Token]) -> Keyword:
        return Keyword(str(items[0]))

    # ---- structural ----

    def declaration(self, items: list[object]) -> Declaration:
        value: Value = items[1]  # type: ignore[assignment]
        return Declaration(name=str(items[0]), value=value)

    def start(self, items: list[Declaration]) -> list[Declaration]:
        return list(items)


def parse_declarations(
    body: str, line_offset: int = 0, column_offset: int = 0
) -> list[Declaration]:
    """Parse the text between ``{`` and ``}`` into Declarations.

    *line_offset* and *column_offset* shift reported error locations so they
    point into the enclosing stylesheet rather than into *body*.
    """
    try:
        tree = _parser().parse(body)
        return DeclarationTransformer().transform(tree)
    except UnexpectedInput as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        if isinstance(line, int) and isinstance(column, int) and line > 0:
            if line == 1:
                column += column_offset
            line += line_offset
        else:
            line, column = None, None
        raise ParseError(
            f"invalid declaration: {e}",
            kind=ErrorKind.INVALID_DECLARATION,
            line=line,
            column=column,
        ) from e
    except VisitError as e:
        raise ParseError(
            f"invalid declaration value: {e.orig_exc}",
            kind=ErrorKind.INVALID_DECLARATION,
        ) from e
