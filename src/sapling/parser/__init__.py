from sapling.parser.cursor import Cursor
from sapling.parser.errors import ErrorKind, ParseError
from sapling.parser.html import HtmlParser, parse_html

__all__ = ["Cursor", "ErrorKind", "HtmlParser", "ParseError", "parse_html"]
