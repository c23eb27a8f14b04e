"""Tests for the stylesheet value and selector model."""

import pytest

from stylecascade.css import (
    Color,
    CSSParseError,
    ErrorKind,
    Keyword,
    Length,
    Rule,
    SimpleSelector,
    StyleSheet,
    Unit,
)


# ---------------------------------------------------------------------------
# Value rendering
# ---------------------------------------------------------------------------


class TestValueText:
    def test_keyword(self):
        assert str(Keyword("center")) == "center"

    def test_integral_length(self):
        assert str(Length(10.0, Unit.PX)) == "10px"

    def test_fractional_length(self):
        assert str(Length(1.5, Unit.PX)) == "1.5px"

    def test_negative_length(self):
        assert str(Length(-0.5, Unit.PX)) == "-0.5px"

    def test_small_length_is_positional(self):
        assert str(Length(0.00001, Unit.PX)) == "0.00001px"
        assert str(Length(-0.000125, Unit.PX)) == "-0.000125px"

    def test_color_upper_hex_with_alpha(self):
        assert str(Color(255, 255, 255)) == "#FFFFFFFF"
        assert str(Color(0x11, 0x11, 0x11, 0xFF)) == "#111111FF"
        assert str(Color(0x12, 0x34, 0x56, 0x78)) == "#12345678"


class TestColor:
    def test_default_alpha_opaque(self):
        assert Color(1, 2, 3).a == 255

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
    def test_channel_out_of_range(self, channels):
        with pytest.raises(ValueError):
            Color(*channels)


class TestUnit:
    def test_parse_px(self):
        assert Unit.parse("px") is Unit.PX

    def test_parse_unknown(self):
        with pytest.raises(CSSParseError) as excinfo:
            Unit.parse("em")
        assert excinfo.value.kind is ErrorKind.UNKNOWN_UNIT
        assert excinfo.value.position is None


# ---------------------------------------------------------------------------
# Specificity
# ---------------------------------------------------------------------------


class TestSelectorSpecificity:
    def test_empty(self):
        assert SimpleSelector().specificity() == (0, 0, 0)

    def test_counts(self):
        sel = SimpleSelector(tag_name="p", id="x", classes=frozenset({"a", "b"}))
        assert sel.specificity() == (1, 2, 1)

    def test_id_beats_classes(self):
        many_classes = SimpleSelector(classes=frozenset({"a", "b", "c", "d"}))
        assert SimpleSelector(id="x").specificity() > many_classes.specificity()

    def test_class_beats_tag(self):
        assert SimpleSelector(classes=frozenset({"a"})).specificity() > SimpleSelector(
            tag_name="p"
        ).specificity()


# ---------------------------------------------------------------------------
# Immutability
# ---------------------------------------------------------------------------


class TestFrozen:
    def test_stylesheet_is_frozen(self):
        ss = StyleSheet(rules=[])
        with pytest.raises(AttributeError):
            ss.rules = []  # type: ignore[misc]

    def test_rule_is_frozen(self):
        rule = Rule(selectors=[], declarations=[])
        with pytest.raises(AttributeError):
            rule.selectors = []  # type: ignore[misc]

    def test_selector_is_frozen(self):
        sel = SimpleSelector(tag_name="p")
        with pytest.raises(AttributeError):
            sel.tag_name = "div"  # type: ignore[misc]
