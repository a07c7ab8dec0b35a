"""
Warden - Resilient DOM actions over Selenium.

Performs element actions (click, scroll, set value, read text, measure
position, expand a shadow root) by injecting JavaScript, retrying
transient failures and resolving elements hosted inside shadow DOM.
"""

__version__ = "0.1.0"

from warden.core.services import Services
from warden.core.settings import BrowserProfile, JsonSettings, RetryPolicy, Timeouts
from warden.layers.action import HighlightState, JsActions, JavaScript, Point
from warden.layers.sense import Button, ElementState, Label, Link, TextBox

__all__ = [
    "Services",
    "BrowserProfile",
    "JsonSettings",
    "RetryPolicy",
    "Timeouts",
    "HighlightState",
    "JsActions",
    "JavaScript",
    "Point",
    "Button",
    "ElementState",
    "Label",
    "Link",
    "TextBox",
    "__version__",
]
