from stylecascade.style.cascade import (
    StyledNode,
    match_rule,
    matching_rules,
    specified_values,
    style_tree,
)
from stylecascade.style.matching import matches, specificity
from stylecascade.style.printer import render_styled_tree, render_stylesheet

__all__ = [
    "StyledNode",
    "match_rule",
    "matches",
    "matching_rules",
    "render_styled_tree",
    "render_stylesheet",
    "specificity",
    "specified_values",
    "style_tree",
]
