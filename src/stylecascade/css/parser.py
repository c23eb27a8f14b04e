"""Hand-written recursive-descent parser for a small subset of CSS.

Syntax example:
    div { text-align: center; color: #000; }
    p, .note, #main { color: #fff; width: 120px; }
"""

from __future__ import annotations

import logging
from typing import Callable

from stylecascade.css.errors import CSSParseError, ErrorKind
from stylecascade.css.model import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    StyleSheet,
    Unit,
    Value,
)

__all__ = ["Parser", "parse_declarations", "parse_stylesheet"]

logger = logging.getLogger("stylecascade.css")

_HEX_DIGITS = "0123456789abcdefABCDEF"
_NUMBER_CHARS = "0123456789.-+"


def _valid_identifier_char(c: str) -> bool:
    return c.isascii() and (c.isalnum() or c in "_-")


def _hex_to_dec(high: str, low: str | None = None) -> int:
    """Convert one or two hex digits to a channel value.

    A lone digit is scaled to the full 0-255 range rather than
    bit-replicated, so ``1`` becomes 17 and ``f`` becomes 255.
    """
    n = int(high, 16)
    if low is None:
        return n * 255 // 15
    return n * 16 + int(low, 16)


class Parser:
    """Cursor over CSS source text.

    The cursor indexes a Python ``str``, so it always advances by whole
    characters regardless of how the text was encoded.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    # --- scanning ---------------------------------------------------------

    def eof(self) -> bool:
        return self.pos >= len(self.source)

    def next_char(self) -> str:
        if self.eof():
            raise self._error("Unexpected end of input", ErrorKind.UNEXPECTED_EOF)
        return self.source[self.pos]

    def consume_char(self) -> str:
        c = self.next_char()
        self.pos += 1
        return c

    def consume_while(self, test: Callable[[str], bool]) -> str:
        start = self.pos
        while not self.eof() and test(self.source[self.pos]):
            self.pos += 1
        return self.source[start : self.pos]

    def consume_whitespace(self) -> None:
        self.consume_while(str.isspace)

    def parse_identifier(self) -> str:
        return self.consume_while(_valid_identifier_char)

    def expect(self, expected: str) -> None:
        """Consume *expected* or raise an unexpected-character error."""
        start = self.pos
        c = self.consume_char()
        if c != expected:
            raise self._error(
                f"Unexpected character {c!r}, expected {expected!r}",
                ErrorKind.UNEXPECTED_CHARACTER,
                start,
            )

    def _error(
        self, message: str, kind: ErrorKind, position: int | None = None
    ) -> CSSParseError:
        if position is None:
            position = self.pos
        consumed = self.source[:position]
        line = consumed.count("\n") + 1
        column = position - (consumed.rfind("\n") + 1) + 1
        return CSSParseError(message, kind, position=position, line=line, column=column)

    # --- rules ------------------------------------------------------------

    def parse_rules(self) -> list[Rule]:
        rules: list[Rule] = []
        self.consume_whitespace()
        while not self.eof():
            rules.append(self.parse_rule())
            self.consume_whitespace()
        return rules

    def parse_rule(self) -> Rule:
        return Rule(
            selectors=self.parse_selectors(),
            declarations=self.parse_block(),
        )

    def parse_selectors(self) -> list[Selector]:
        selectors: list[Selector] = []
        while True:
            selectors.append(self.parse_simple_selector())
            self.consume_whitespace()
            c = self.next_char()
            if c == ",":
                self.consume_char()
                self.consume_whitespace()
            elif c == "{":
                break
            else:
                raise self._error(
                    f"Unexpected character {c!r} in selector list",
                    ErrorKind.UNEXPECTED_CHARACTER,
                )
        # Stable, so equally specific selectors keep their source order.
        selectors.sort(key=lambda s: s.specificity(), reverse=True)
        return selectors

    def parse_simple_selector(self) -> SimpleSelector:
        tag_name: str | None = None
        id_: str | None = None
        classes: set[str] = set()
        while not self.eof():
            c = self.next_char()
            if c == "#":
                self.consume_char()
                id_ = self.parse_identifier()
            elif c == ".":
                self.consume_char()
                classes.add(self.parse_identifier())
            elif c == "*":
                # universal selector
                self.consume_char()
            elif _valid_identifier_char(c):
                tag_name = self.parse_identifier()
            else:
                break
        return SimpleSelector(tag_name=tag_name, id=id_, classes=frozenset(classes))

    # --- declarations -----------------------------------------------------

    def parse_block(self) -> list[Declaration]:
        self.expect("{")
        declarations = self.parse_declaration_list(terminator="}")
        self.expect("}")
        return declarations

    def parse_declaration_list(self, terminator: str | None = None) -> list[Declaration]:
        """Parse declarations up to *terminator*, or to end of input if None.

        The terminator itself is left unconsumed.
        """
        declarations: list[Declaration] = []
        self.consume_whitespace()
        while True:
            if terminator is None:
                if self.eof():
                    break
            elif self.next_char() == terminator:
                break
            declarations.append(self.parse_declaration())
            self.consume_whitespace()
        return declarations

    def parse_declaration(self) -> Declaration:
        name = self.parse_identifier()
        self.consume_whitespace()
        self.expect(":")
        self.consume_whitespace()
        value = self.parse_value()
        self.consume_whitespace()
        self.expect(";")
        return Declaration(name=name, value=value)

    # --- values -----------------------------------------------------------

    def parse_value(self) -> Value:
        c = self.next_char()
        if c == "#":
            return self.parse_color()
        if c in "0123456789+-":
            return self.parse_length()
        return Keyword(self.parse_identifier())

    def parse_color(self) -> Color:
        start = self.pos
        self.expect("#")
        digits = self.consume_while(lambda c: c in _HEX_DIGITS)
        if len(digits) in (3, 4):
            channels = [_hex_to_dec(d) for d in digits]
        elif len(digits) in (6, 8):
            channels = [
                _hex_to_dec(digits[i], digits[i + 1]) for i in range(0, len(digits), 2)
            ]
        else:
            raise self._error(
                f"Invalid color #{digits}: expected 3, 4, 6 or 8 hex digits",
                ErrorKind.INVALID_COLOR,
                start,
            )
        return Color(*channels)

    def parse_length(self) -> Length:
        start = self.pos
        text = self.consume_while(lambda c: c in _NUMBER_CHARS)
        try:
            number = float(text)
        except ValueError:
            raise self._error(
                f"Invalid number {text!r}", ErrorKind.INVALID_NUMBER, start
            ) from None
        unit_start = self.pos
        try:
            unit = Unit.parse(self.parse_identifier())
        except CSSParseError as exc:
            raise self._error(exc.message, exc.kind, unit_start) from exc
        return Length(number, unit)


def parse_stylesheet(source: str) -> StyleSheet:
    """Parse CSS *source* into a StyleSheet.

    The whole input must be well formed; the first problem raises
    ``CSSParseError`` and no partial stylesheet is returned.
    """
    rules = Parser(source).parse_rules()
    logger.debug("Parsed stylesheet with %d rule(s)", len(rules))
    return StyleSheet(rules=rules)


def parse_declarations(source: str) -> list[Declaration]:
    """Parse a bare declaration list, e.g. the text of a ``style`` attribute."""
    return Parser(source).parse_declaration_list()
