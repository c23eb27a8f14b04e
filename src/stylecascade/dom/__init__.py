from stylecascade.dom.node import Element, Node, Text, elem, render_dom, text

__all__ = ["Element", "Node", "Text", "elem", "render_dom", "text"]
