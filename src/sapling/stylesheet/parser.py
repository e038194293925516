"""Hand-written recursive-descent parser for a restricted subset of CSS.

Syntax example:
    h1, h2#title { display: block; }
    .note.warning { color: #cc0000; margin: 10px; }
    * { display: inline }

Only simple selectors are supported: a tag name, an id and any number of
classes, with no combinators. Each rule's selectors come back sorted most
specific first.
"""

from __future__ import annotations

import logging

from sapling.parser.cursor import Cursor
from sapling.parser.errors import ErrorKind
from sapling.stylesheet.declarations import parse_declarations
from sapling.stylesheet.model import Rule, Selector, Simple, SimpleSelector, Stylesheet

__all__ = ["CssParser", "parse_selectors", "parse_stylesheet"]

logger = logging.getLogger(__name__)


def valid_identifier_char(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c in "-_"


class CssParser(Cursor):
    """Scanner that turns a style sheet string into Rules."""

    def parse_identifier(self) -> str:
        return self.consume_while(valid_identifier_char)

    def parse_simple_selector(self) -> SimpleSelector:
        """Parse tag, ``#id``, ``.class`` and ``*`` parts until anything else.

        A second bare identifier replaces the first as the tag name.
        """
        tag_name: str | None = None
        id_: str | None = None
        classes: list[str] = []
        while not self.at_end():
            c = self.peek_char()
            if c == "#":
                self.advance_char()
                id_ = self.parse_identifier()
            elif c == ".":
                self.advance_char()
                classes.append(self.parse_identifier())
            elif c == "*":
                # universal selector
                self.advance_char()
            elif valid_identifier_char(c):
                tag_name = self.parse_identifier()
            else:
                break
        return SimpleSelector(tag_name=tag_name, id=id_, classes=tuple(classes))

    def parse_selectors(self) -> list[Selector]:
        """Parse a comma separated selector list, stopping before ``{``."""
        if self.at_end():
            raise self.error("expected a selector list", ErrorKind.EMPTY_SELECTOR_LIST)

        selectors: list[Selector] = []
        while True:
            selectors.append(Simple(self.parse_simple_selector()))
            self.skip_whitespace()
            c = self.peek_char()
            if c == ",":
                self.advance_char()
                self.skip_whitespace()
            elif c == "{":
                break
            else:
                raise self.error(
                    f"unexpected character {c!r} in selector list",
                    ErrorKind.UNEXPECTED_CHARACTER,
                )

        # sorted() is stable, so equal specificities keep source order.
        return sorted(selectors, key=lambda s: s.specificity(), reverse=True)

    def parse_rule(self) -> Rule:
        selectors = self.parse_selectors()
        self.expect("{")
        body_start = self.pos
        body = self.consume_while(lambda c: c != "}")
        if self.at_end():
            raise self.error(
                "rule block is never closed",
                ErrorKind.UNTERMINATED_BLOCK,
                position=body_start - 1,
            )
        self.expect("}")

        line, column = self.location(body_start)
        declarations = parse_declarations(
            body, line_offset=line - 1, column_offset=column - 1
        )
        return Rule(selectors=selectors, declarations=declarations)

    def parse_rules(self) -> list[Rule]:
        rules: list[Rule] = []
        while True:
            self.skip_whitespace()
            if self.at_end():
                break
            rules.append(self.parse_rule())
        return rules


def parse_selectors(source: str) -> list[Selector]:
    """Parse a selector list such as ``#id, p, .a {`` into ranked Selectors."""
    return CssParser(source).parse_selectors()


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse a style sheet string into a Stylesheet.

    Returns a Stylesheet containing all parsed rules in source order.
    """
    rules = CssParser(source).parse_rules()
    logger.debug("Parsed %d rule(s) from %d chars", len(rules), len(source))
    return Stylesheet(rules=rules)
