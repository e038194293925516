from sapling.stylesheet.declarations import parse_declarations
from sapling.stylesheet.model import (
    Color,
    ColorValue,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    Simple,
    SimpleSelector,
    Specificity,
    Stylesheet,
    Unit,
    Value,
)
from sapling.stylesheet.parser import CssParser, parse_selectors, parse_stylesheet

__all__ = [
    "parse_declarations",
    "parse_selectors",
    "parse_stylesheet",
    "Color",
    "ColorValue",
    "CssParser",
    "Declaration",
    "Keyword",
    "Length",
    "Rule",
    "Selector",
    "Simple",
    "SimpleSelector",
    "Specificity",
    "Stylesheet",
    "Unit",
    "Value",
]
