"""CLI command: stylecascade parse -- parse a CSS file and print its rules."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylecascade.css import CSSParseError, parse_stylesheet
from stylecascade.style import render_stylesheet


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
def parse(cssfile: str) -> None:
    """Parse a CSS file and display its rules.

    Selectors within each rule are shown most specific first. Exits with
    code 1 if the file cannot be parsed.
    """
    css_path = Path(cssfile)

    try:
        source = css_path.read_text(encoding="utf-8")
        stylesheet = parse_stylesheet(source)
    except CSSParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(render_stylesheet(stylesheet))
    click.echo()
    click.echo(f"Rules: {len(stylesheet.rules)}")
