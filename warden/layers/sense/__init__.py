"""Sense Layer - Element lookup within page and shadow-root contexts."""

from warden.layers.sense.element_finder import ElementFinder, ElementState
from warden.layers.sense.elements import Button, Element, Label, Link, TextBox
from warden.layers.sense.element_factory import ElementFactory

__all__ = [
    "ElementFinder",
    "ElementState",
    "Element",
    "Button",
    "Label",
    "Link",
    "TextBox",
    "ElementFactory",
]
