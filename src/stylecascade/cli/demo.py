"""CLI command: stylecascade demo -- style a built-in sample document."""

from __future__ import annotations

import click

from stylecascade.config import CascadeConfig
from stylecascade.css import parse_stylesheet
from stylecascade.dom import Element, elem, text
from stylecascade.style import render_styled_tree, style_tree

SAMPLE_CSS = "div { text-align: center; color: #000; } p, .class, #id { color: #fff; }"


def sample_document() -> Element:
    """Return the tree for the sample markup.

    <div id="id">aaaa<img src="image.png" alt="some image" /></div>
    <p style="color: #222; text-color: #111;">aa</p>
    """
    return elem(
        "html",
        children=[
            elem(
                "div",
                {"id": "id"},
                [
                    text("aaaa"),
                    elem("img", {"src": "image.png", "alt": "some image"}),
                ],
            ),
            elem("p", {"style": "color: #222; text-color: #111;"}, [text("aa")]),
        ],
    )


@click.command()
@click.pass_obj
def demo(config: CascadeConfig | None) -> None:
    """Resolve the sample stylesheet against the sample document."""
    config = config or CascadeConfig()
    stylesheet = parse_stylesheet(SAMPLE_CSS)
    styled = style_tree(sample_document(), stylesheet, config)
    click.echo(render_styled_tree(styled, indent=config.indent))
