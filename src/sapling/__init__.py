"""Sapling - restricted HTML to DOM tree, restricted CSS to ranked rules."""

__version__ = "0.1.0"

from sapling.dom import Node, NodeKind  # noqa: E402
from sapling.parser import ErrorKind, ParseError, parse_html  # noqa: E402
from sapling.stylesheet import (  # noqa: E402
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    parse_selectors,
    parse_stylesheet,
)

__all__ = [
    "__version__",
    "Node",
    "NodeKind",
    "ErrorKind",
    "ParseError",
    "parse_html",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Stylesheet",
    "parse_selectors",
    "parse_stylesheet",
]
