"""Human-readable renderings of stylesheets and styled trees.

Debugging output only; the format is not stable and does not round-trip.
"""

from __future__ import annotations

from stylecascade.css.model import Selector, SimpleSelector, StyleSheet
from stylecascade.dom.node import Element
from stylecascade.style.cascade import StyledNode


def render_selector(selector: Selector) -> str:
    if isinstance(selector, SimpleSelector):
        parts = [selector.tag_name or ""]
        parts.extend(f".{c}" for c in sorted(selector.classes))
        if selector.id is not None:
            parts.append(f"#{selector.id}")
        return "".join(parts) or "*"
    raise TypeError(f"Unsupported selector: {selector!r}")


def render_stylesheet(stylesheet: StyleSheet) -> str:
    lines: list[str] = []
    for rule in stylesheet.rules:
        selectors = ", ".join(render_selector(s) for s in rule.selectors)
        lines.append(f"{selectors} {{")
        for declaration in rule.declarations:
            lines.append(f"    {declaration.name}: {declaration.value};")
        lines.append("}")
    return "\n".join(lines)


def render_styled_tree(styled: StyledNode, indent: int = 2) -> str:
    """Render each node with its specified values, children indented."""
    lines: list[str] = []
    _render(styled, 0, indent, lines)
    return "\n".join(lines)


def _render(styled: StyledNode, depth: int, indent: int, lines: list[str]) -> None:
    pad = " " * (depth * indent)
    node = styled.node
    if isinstance(node, Element):
        attrs = "".join(f' {k}="{v}"' for k, v in node.attributes.items())
        lines.append(f"{pad}<{node.tag_name}{attrs}>")
    else:
        lines.append(f"{pad}{node.data}")
    for name in sorted(styled.specified_values):
        lines.append(f"{pad} {name}: {styled.specified_values[name]};")
    for child in styled.children:
        _render(child, depth + 1, indent, lines)
