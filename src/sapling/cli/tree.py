"""CLI command: sapling tree -- parse an HTML file and print its DOM."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from sapling.config import SaplingConfig
from sapling.dom import format_tree, to_dict
from sapling.parser import ParseError, parse_html


@click.command()
@click.argument("htmlfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the tree as JSON")
@click.pass_obj
def tree(config: SaplingConfig | None, htmlfile: str, as_json: bool) -> None:
    """Parse an HTML file and display its node tree."""
    config = config or SaplingConfig()
    html_path = Path(htmlfile)

    try:
        source = html_path.read_text(encoding=config.encoding)
        root = parse_html(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(to_dict(root), indent=2, ensure_ascii=False))
    else:
        click.echo(format_tree(root, indent=config.indent))
