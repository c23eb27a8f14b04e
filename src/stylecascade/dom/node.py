"""Document tree model consumed by the style resolver.

Trees are produced by an HTML parser outside this package; only the node
interface and a few builders live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Text:
    """A run of character data."""

    data: str

    @property
    def children(self) -> tuple[()]:
        return ()


@dataclass(frozen=True)
class Element:
    """An element with a tag name, attributes, and ordered children."""

    tag_name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def get_attr(self, name: str) -> str | None:
        return self.attributes.get(name)

    def id(self) -> str | None:
        return self.attributes.get("id")

    def classes(self) -> set[str]:
        """Class names from the ``class`` attribute, split on single spaces."""
        class_list = self.attributes.get("class")
        if class_list is None:
            return set()
        return set(class_list.split(" "))


Node = Union[Text, Element]


def text(data: str) -> Text:
    return Text(data)


def elem(
    name: str,
    attrs: dict[str, str] | None = None,
    children: list[Node] | None = None,
) -> Element:
    return Element(tag_name=name, attributes=dict(attrs or {}), children=list(children or []))


def render_dom(node: Node, indent: int = 0, step: int = 2) -> str:
    """Render *node* as indented markup for debugging."""
    return "\n".join(_render_lines(node, indent, step))


def _render_lines(node: Node, indent: int, step: int) -> list[str]:
    pad = " " * indent
    if isinstance(node, Text):
        return [f"{pad}{node.data}"]
    attrs = "".join(f' {k}="{v}"' for k, v in node.attributes.items())
    if not node.children:
        return [f"{pad}<{node.tag_name}{attrs} />"]
    lines = [f"{pad}<{node.tag_name}{attrs}>"]
    for child in node.children:
        lines.extend(_render_lines(child, indent + step, step))
    lines.append(f"{pad}</{node.tag_name}>")
    return lines
