"""Tests for the document node model."""

from stylecascade.dom import Element, Text, elem, render_dom, text


class TestElementAccessors:
    def test_id(self):
        assert elem("div", {"id": "main"}).id() == "main"

    def test_missing_id(self):
        assert elem("div").id() is None

    def test_classes_split_on_spaces(self):
        assert elem("p", {"class": "a b c"}).classes() == {"a", "b", "c"}

    def test_missing_class_attribute(self):
        assert elem("p").classes() == set()

    def test_get_attr(self):
        node = elem("img", {"src": "image.png"})
        assert node.get_attr("src") == "image.png"
        assert node.get_attr("alt") is None


class TestBuilders:
    def test_text(self):
        assert text("hello") == Text("hello")
        assert text("hello").children == ()

    def test_elem_defaults(self):
        node = elem("div")
        assert node == Element(tag_name="div", attributes={}, children=[])

    def test_elem_copies_inputs(self):
        attrs = {"id": "x"}
        node = elem("div", attrs)
        attrs["id"] = "y"
        assert node.id() == "x"


class TestRenderDom:
    def test_nested(self):
        tree = elem(
            "div",
            {"id": "id"},
            [text("aaaa"), elem("img", {"src": "image.png"})],
        )
        assert render_dom(tree) == (
            '<div id="id">\n'
            "  aaaa\n"
            '  <img src="image.png" />\n'
            "</div>"
        )

    def test_indent(self):
        assert render_dom(text("hi"), indent=4) == "    hi"
