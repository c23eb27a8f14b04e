"""Stylesheet model: values, selectors, declarations, rules, and stylesheets."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Union

from stylecascade.css.errors import CSSParseError, ErrorKind

# (id count, class count, tag count), compared lexicographically.
Specificity = tuple[int, int, int]


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


class Unit(Enum):
    """Length units understood by the parser."""

    PX = "px"

    @classmethod
    def parse(cls, text: str) -> Unit:
        """Return the unit spelled *text*, or raise ``CSSParseError``."""
        for unit in cls:
            if unit.value == text:
                return unit
        raise CSSParseError(f"Unknown unit {text!r}", ErrorKind.UNKNOWN_UNIT)

    def __str__(self) -> str:
        return self.value


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    # Shortest round-trip digits, written positionally rather than as 1e-05.
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True)
class Keyword:
    """A bare identifier value such as ``center`` or ``block``."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Length:
    """A numeric length with a unit."""

    value: float
    unit: Unit = Unit.PX

    def __str__(self) -> str:
        return f"{_format_number(self.value)}{self.unit}"


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def __str__(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"


Value = Union[Keyword, Length, Color]


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimpleSelector:
    """A selector constraining a single element's tag, id, and classes.

    Absent fields impose no constraint. Every present field must match.
    """

    tag_name: str | None = None
    id: str | None = None
    classes: frozenset[str] = field(default_factory=frozenset)

    def specificity(self) -> Specificity:
        return (
            1 if self.id is not None else 0,
            len(self.classes),
            1 if self.tag_name is not None else 0,
        )


# Closed set of selector kinds. Only simple selectors exist today.
Selector = Union[SimpleSelector]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` pair."""

    name: str
    value: Value


@dataclass(frozen=True)
class Rule:
    """A selector list sharing one declaration block.

    ``selectors`` is ordered by descending specificity, so the first
    selector that matches an element is also the most specific one.
    """

    selectors: list[Selector]
    declarations: list[Declaration]


@dataclass(frozen=True)
class StyleSheet:
    """A collection of rules in source order."""

    rules: list[Rule]
