"""stylecascade - CSS parsing, selector matching, and cascade resolution."""

__version__ = "0.1.0"

from stylecascade.css import CSSParseError, StyleSheet, parse_stylesheet  # noqa: E402
from stylecascade.style import StyledNode, style_tree  # noqa: E402

__all__ = [
    "CSSParseError",
    "StyleSheet",
    "StyledNode",
    "__version__",
    "parse_stylesheet",
    "style_tree",
]
