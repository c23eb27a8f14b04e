"""Cascade resolution: build a styled tree from a document and a stylesheet."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from stylecascade.config import CascadeConfig
from stylecascade.css.model import Rule, Specificity, StyleSheet, Value
from stylecascade.css.parser import parse_declarations
from stylecascade.dom.node import Element, Node, Text
from stylecascade.style.matching import matches, specificity

logger = logging.getLogger("stylecascade.style")

PropertyMap = dict[str, Value]
MatchedRule = tuple[Specificity, Rule]

_DEFAULT_CONFIG = CascadeConfig()


@dataclass(frozen=True)
class StyledNode:
    """A document node paired with its specified values.

    ``node`` is the document node itself, not a copy. The styled tree is
    only meaningful while the document and stylesheet it was built from
    stay unchanged.
    """

    node: Node
    specified_values: PropertyMap = field(default_factory=dict)
    children: list[StyledNode] = field(default_factory=list)

    def value(self, name: str, default: Value | None = None) -> Value | None:
        """Return the specified value for *name*, or *default* if unset."""
        return self.specified_values.get(name, default)


def match_rule(element: Element, rule: Rule) -> MatchedRule | None:
    """Return the specificity of the first selector in *rule* matching *element*.

    Selectors are stored most specific first, so the first match is also
    the most specific match.
    """
    for selector in rule.selectors:
        if matches(element, selector):
            return specificity(selector), rule
    return None


def matching_rules(element: Element, stylesheet: StyleSheet) -> list[MatchedRule]:
    """Return every rule matching *element*, in stylesheet order."""
    matched: list[MatchedRule] = []
    for rule in stylesheet.rules:
        result = match_rule(element, rule)
        if result is not None:
            matched.append(result)
    return matched


def specified_values(
    element: Element,
    stylesheet: StyleSheet,
    config: CascadeConfig | None = None,
) -> PropertyMap:
    """Fold the declarations that apply to *element* into one property map.

    Rules are applied in ascending specificity, ties in source order, so
    later writes win. Inline style declarations are applied last and
    override everything from the stylesheet.
    """
    config = config or _DEFAULT_CONFIG
    values: PropertyMap = {}

    rules = sorted(matching_rules(element, stylesheet), key=lambda m: m[0])
    logger.debug("<%s>: %d matching rule(s)", element.tag_name, len(rules))
    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value

    inline = element.get_attr(config.inline_style_attr)
    if inline is not None:
        for declaration in parse_declarations(inline):
            values[declaration.name] = declaration.value

    return values


def style_tree(
    root: Node,
    stylesheet: StyleSheet,
    config: CascadeConfig | None = None,
) -> StyledNode:
    """Build the styled tree for *root* and all its descendants."""
    if isinstance(root, Text):
        return StyledNode(node=root)
    if isinstance(root, Element):
        return StyledNode(
            node=root,
            specified_values=specified_values(root, stylesheet, config),
            children=[style_tree(child, stylesheet, config) for child in root.children],
        )
    raise TypeError(f"Unsupported node: {root!r}")
