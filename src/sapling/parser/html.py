"""Recursive-descent parser for a restricted subset of HTML.

Supported syntax:
    <tag key="value" other='value'>children</tag>
    plain text
    <!-- comments -->, dropped from the tree and from surrounding text

Every element needs an explicit, matching closing tag and every attribute
needs a quoted value. Anything else aborts the parse with a ParseError.
"""

from __future__ import annotations

import logging

from sapling.dom.node import AttrMap, Node
from sapling.parser.cursor import Cursor
from sapling.parser.errors import ErrorKind, ParseError

__all__ = ["HtmlParser", "parse_html"]

logger = logging.getLogger(__name__)

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
ROOT_TAG = "html"


def _is_tag_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


class HtmlParser(Cursor):
    """Scanner that turns one HTML document string into Nodes."""

    def parse_tag_name(self) -> str:
        """Parse a tag or attribute name: ASCII letters and digits."""
        return self.consume_while(_is_tag_char)

    # --- nodes ------------------------------------------------------------------

    def parse_nodes(self) -> list[Node]:
        """Parse sibling nodes until end of input or a closing tag."""
        nodes: list[Node] = []
        while True:
            self.skip_whitespace()
            if self.starts_with(COMMENT_OPEN):
                self.parse_comment()
                continue
            if self.at_end() or self.starts_with("</"):
                break
            node = self.parse_node()
            if node is not None:
                nodes.append(node)
        return nodes

    def parse_node(self) -> Node | None:
        """Parse one node; None for a comment or a closing tag."""
        if self.starts_with(COMMENT_OPEN):
            self.parse_comment()
            return None
        if self.starts_with("</"):
            return None
        if self.peek_char() == "<":
            return self.parse_element()
        return self.parse_text()

    def parse_text(self) -> Node:
        """Parse a run of text, splicing out any embedded comments."""
        parts: list[str] = []
        while True:
            parts.append(self.consume_while(lambda c: c != "<"))
            if self.starts_with(COMMENT_OPEN):
                self.parse_comment()
            else:
                break
        return Node.new_text("".join(parts))

    def parse_element(self) -> Node:
        """Parse ``<tag attrs>children</tag>``."""
        self.expect("<", ErrorKind.UNTERMINATED_TAG)
        tag_name = self.parse_tag_name()
        attributes = self.parse_attributes()
        self.expect(">", ErrorKind.UNTERMINATED_TAG)

        children = self.parse_nodes()

        self.expect("</", ErrorKind.UNTERMINATED_TAG)
        closing_start = self.pos
        closing_name = self.parse_tag_name()
        if closing_name != tag_name:
            raise self.error(
                f"closing tag </{closing_name}> does not match <{tag_name}>",
                ErrorKind.CLOSING_TAG_MISMATCH,
                position=closing_start,
            )
        self.expect(">", ErrorKind.UNTERMINATED_TAG)

        return Node.new_element(tag_name, attributes, children)

    # --- attributes -------------------------------------------------------------

    def parse_attributes(self) -> AttrMap:
        """Parse ``key="value"`` pairs up to (not including) the ``>``."""
        attributes: AttrMap = {}
        while True:
            self.skip_whitespace()
            if self.peek_char(ErrorKind.UNTERMINATED_TAG) == ">":
                break
            key, value = self.parse_attr()
            attributes[key] = value
        return attributes

    def parse_attr(self) -> tuple[str, str]:
        key = self.parse_tag_name()
        self.expect("=", ErrorKind.UNTERMINATED_TAG)
        value = self.parse_attr_value()
        return key, value

    def parse_attr_value(self) -> str:
        start = self.pos
        open_quote = self.advance_char(ErrorKind.UNTERMINATED_TAG)
        if open_quote not in ('"', "'"):
            raise self.error(
                f"attribute value must be quoted, found {open_quote!r}",
                ErrorKind.INVALID_QUOTE,
                position=start,
            )
        value = self.consume_while(lambda c: c != open_quote)
        if self.at_end():
            raise self.error(
                "attribute value is missing its closing quote",
                ErrorKind.UNTERMINATED_QUOTED_VALUE,
                position=start,
            )
        self.expect(open_quote)
        return value

    # --- comments ---------------------------------------------------------------

    def parse_comment(self) -> None:
        """Consume ``<!-- ... -->``. Comments do not nest."""
        start = self.pos
        self.expect(COMMENT_OPEN, ErrorKind.UNTERMINATED_COMMENT)
        while not self.starts_with(COMMENT_CLOSE):
            if self.at_end():
                raise self.error(
                    "comment is never closed",
                    ErrorKind.UNTERMINATED_COMMENT,
                    position=start,
                )
            self.advance_char()
        self.expect(COMMENT_CLOSE, ErrorKind.UNTERMINATED_COMMENT)


def parse_html(source: str) -> Node:
    """Parse an HTML document string and return its root Node.

    A document with exactly one top-level node returns that node. Otherwise
    the top-level nodes are wrapped in a synthetic ``html`` element so
    callers always get a single root.
    """
    parser = HtmlParser(source)
    try:
        nodes = parser.parse_nodes()
    except RecursionError as e:
        raise parser.error(
            "element nesting too deep", ErrorKind.NESTING_TOO_DEEP
        ) from e
    except ParseError as e:
        logger.debug("HTML parse failed: %s", e)
        raise

    logger.debug("Parsed %d top-level node(s) from %d chars", len(nodes), len(source))
    if len(nodes) == 1:
        return nodes[0]
    return Node.new_element(ROOT_TAG, {}, nodes)
