"""
Script Catalog - Named JavaScript snippets run against one element.

Every script receives the target element as ``arguments[0]`` followed
by its own arguments, touches nothing but that element (and the scroll
position its action implies), and returns a plain value or nothing.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ScriptDescriptor:
    """An immutable (name, body) pair."""
    name: str
    body: str

    def __str__(self) -> str:
        return self.name


class JavaScript(Enum):
    """
    All scripts the action engine can inject.

    Example:
        >>> JavaScript.CLICK_ELEMENT.script_name
        'clickElement'
        >>> driver.execute_script(JavaScript.GET_ELEMENT_TEXT.body, element)
        'Hello'
    """

    CLICK_ELEMENT = ScriptDescriptor("clickElement", "arguments[0].click();")

    SCROLL_TO_ELEMENT = ScriptDescriptor(
        "scrollToElement",
        "arguments[0].scrollIntoView(arguments[1]);",
    )

    SCROLL_BY = ScriptDescriptor(
        "scrollBy",
        "arguments[0].scrollBy(arguments[1], arguments[2]);",
    )

    SCROLL_TO_ELEMENT_CENTER = ScriptDescriptor(
        "scrollToElementCenter",
        r"""
        var rect = arguments[0].getBoundingClientRect();
        var viewHeight = window.innerHeight || document.documentElement.clientHeight;
        window.scrollBy(0, rect.top - viewHeight / 2);
        """,
    )

    SET_VALUE = ScriptDescriptor(
        "setValue",
        r"""
        var element = arguments[0];
        element.value = arguments[1];
        element.dispatchEvent(new Event('input', {bubbles: true}));
        element.dispatchEvent(new Event('change', {bubbles: true}));
        """,
    )

    SET_FOCUS = ScriptDescriptor("setFocus", "arguments[0].focus();")

    BORDER_ELEMENT = ScriptDescriptor(
        "borderElement",
        "arguments[0].style.border = '3px solid red';",
    )

    GET_ELEMENT_TEXT = ScriptDescriptor(
        "getElementText",
        r"""
        var element = arguments[0];
        var text = element.innerText;
        if (text === undefined || text === null || text === '') {
            text = element.textContent;
        }
        return text === null || text === undefined ? '' : String(text);
        """,
    )

    GET_ELEMENT_XPATH = ScriptDescriptor(
        "getElementXPath",
        r"""
        function getXPath(node) {
            if (!node || node.nodeType !== Node.ELEMENT_NODE) {
                return '';
            }
            var parent = node.parentNode;
            if (!parent || parent.nodeType !== Node.ELEMENT_NODE) {
                return '/' + node.tagName.toLowerCase();
            }
            var index = 1;
            var sibling = node.previousElementSibling;
            while (sibling) {
                if (sibling.tagName === node.tagName) {
                    index++;
                }
                sibling = sibling.previousElementSibling;
            }
            return getXPath(parent) + '/' + node.tagName.toLowerCase() + '[' + index + ']';
        }
        return getXPath(arguments[0]);
        """,
    )

    GET_VIEWPORT_COORDINATES = ScriptDescriptor(
        "getViewPortCoordinates",
        r"""
        var rect = arguments[0].getBoundingClientRect();
        return [rect.left, rect.top];
        """,
    )

    MOUSE_HOVER = ScriptDescriptor(
        "mouseHover",
        r"""
        var element = arguments[0];
        ['mouseenter', 'mouseover', 'mousemove'].forEach(function (type) {
            element.dispatchEvent(new MouseEvent(type, {bubbles: type !== 'mouseenter', cancelable: true, view: window}));
        });
        """,
    )

    EXPAND_SHADOW_ROOT = ScriptDescriptor(
        "expandShadowRoot",
        "return arguments[0].shadowRoot;",
    )

    ELEMENT_IS_ON_SCREEN = ScriptDescriptor(
        "elementIsOnScreen",
        r"""
        var rect = arguments[0].getBoundingClientRect();
        var viewHeight = window.innerHeight || document.documentElement.clientHeight;
        var viewWidth = window.innerWidth || document.documentElement.clientWidth;
        return rect.width > 0 && rect.height > 0
            && rect.bottom > 0 && rect.right > 0
            && rect.top < viewHeight && rect.left < viewWidth;
        """,
    )

    @property
    def script_name(self) -> str:
        return self.value.name

    @property
    def body(self) -> str:
        return self.value.body

    @classmethod
    def by_name(cls, name: str) -> "JavaScript":
        """Look a script up by its descriptor name."""
        for member in cls:
            if member.value.name == name:
                return member
        raise KeyError(f"Unknown script '{name}'")
