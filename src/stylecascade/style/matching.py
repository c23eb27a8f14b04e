"""Selector specificity and single-element matching."""

from __future__ import annotations

from stylecascade.css.model import Selector, SimpleSelector, Specificity
from stylecascade.dom.node import Element


def specificity(selector: Selector) -> Specificity:
    """Return the (id, class, tag) count triple for *selector*.

    An id outranks any number of classes, and a class outranks a tag.
    """
    if isinstance(selector, SimpleSelector):
        return selector.specificity()
    raise TypeError(f"Unsupported selector: {selector!r}")


def matches(element: Element, selector: Selector) -> bool:
    """Check whether *selector* matches *element*, ignoring ancestry."""
    if isinstance(selector, SimpleSelector):
        return _matches_simple_selector(element, selector)
    raise TypeError(f"Unsupported selector: {selector!r}")


def _matches_simple_selector(element: Element, selector: SimpleSelector) -> bool:
    if selector.tag_name is not None and element.tag_name != selector.tag_name:
        return False
    if selector.id is not None and element.id() != selector.id:
        return False
    if selector.classes:
        return selector.classes <= element.classes()
    return True
