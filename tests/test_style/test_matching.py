"""Tests for selector specificity and matching."""

import pytest

from stylecascade.css import SimpleSelector, parse_stylesheet
from stylecascade.dom import elem
from stylecascade.style import matches, specificity


def _selector(source: str) -> SimpleSelector:
    return parse_stylesheet(f"{source} {{}}").rules[0].selectors[0]


# ---------------------------------------------------------------------------
# Specificity
# ---------------------------------------------------------------------------


class TestSpecificity:
    def test_id_class_tag_ordering(self):
        assert specificity(_selector("#x")) > specificity(_selector(".x"))
        assert specificity(_selector(".x")) > specificity(_selector("x"))

    def test_lexicographic(self):
        assert specificity(_selector("#x")) > specificity(_selector("p.a.b.c"))
        assert specificity(_selector("p.a")) > specificity(_selector(".a"))

    def test_triple(self):
        assert specificity(_selector("div#main.a.b")) == (1, 2, 1)

    def test_unknown_selector_kind(self):
        with pytest.raises(TypeError):
            specificity("div")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


class TestMatches:
    def test_tag(self):
        assert matches(elem("div"), _selector("div"))
        assert not matches(elem("p"), _selector("div"))

    def test_id(self):
        assert matches(elem("div", {"id": "main"}), _selector("#main"))
        assert not matches(elem("div", {"id": "other"}), _selector("#main"))
        assert not matches(elem("div"), _selector("#main"))

    def test_classes_all_required(self):
        node = elem("p", {"class": "a b"})
        assert matches(node, _selector(".a"))
        assert matches(node, _selector(".a.b"))
        assert not matches(node, _selector(".a.c"))

    def test_universal_matches_everything(self):
        assert matches(elem("span"), _selector("*"))

    def test_compound(self):
        sel = _selector("p#intro.lead")
        assert matches(elem("p", {"id": "intro", "class": "lead x"}), sel)
        assert not matches(elem("div", {"id": "intro", "class": "lead"}), sel)

    def test_unknown_selector_kind(self):
        with pytest.raises(TypeError):
            matches(elem("p"), object())  # type: ignore[arg-type]
