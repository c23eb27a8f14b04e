from stylecascade.css.errors import CSSParseError, ErrorKind
from stylecascade.css.model import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Specificity,
    StyleSheet,
    Unit,
    Value,
)
from stylecascade.css.parser import Parser, parse_declarations, parse_stylesheet

__all__ = [
    "CSSParseError",
    "Color",
    "Declaration",
    "ErrorKind",
    "Keyword",
    "Length",
    "Parser",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Specificity",
    "StyleSheet",
    "Unit",
    "Value",
    "parse_declarations",
    "parse_stylesheet",
]
