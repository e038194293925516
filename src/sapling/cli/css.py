"""CLI command: sapling css -- parse a stylesheet and list its rules."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from sapling.config import SaplingConfig
from sapling.parser import ParseError
from sapling.stylesheet import ColorValue, Keyword, Length, Value, parse_stylesheet


def _format_value(value: Value) -> str:
    if isinstance(value, Keyword):
        return value.value
    if isinstance(value, Length):
        return f"{value.value:g}{value.unit.value}"
    if isinstance(value, ColorValue):
        c = value.color
        return f"rgba({c.r}, {c.g}, {c.b}, {c.a})"
    return repr(value)


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def css(config: SaplingConfig | None, cssfile: str) -> None:
    """Parse a CSS file and display each rule's selectors and declarations.

    Selectors are listed most specific first, with their (id, class, tag)
    specificity.
    """
    config = config or SaplingConfig()
    css_path = Path(cssfile)

    try:
        source = css_path.read_text(encoding=config.encoding)
        stylesheet = parse_stylesheet(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Rules: {len(stylesheet.rules)}")
    for index, rule in enumerate(stylesheet.rules, start=1):
        click.echo()
        click.echo(f"Rule {index}:")
        for selector in rule.selectors:
            weight = selector.specificity()
            click.echo(f"  {selector}  specificity=({weight.ids}, {weight.classes}, {weight.tags})")
        for decl in rule.declarations:
            click.echo(f"    {decl.name}: {_format_value(decl.value)}")
