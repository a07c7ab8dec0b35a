"""
Localization - Message templates for element action logs.

Log calls carry a message key ("loc.clicking.js") rather than text so
the same call site can be rendered in any supported language.
"""

from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "loc.clicking.js": "Clicking by JavaScript",
        "loc.scrolling.js": "Scrolling by JavaScript",
        "loc.scrolling.center.js": "Scrolling to the center by JavaScript",
        "loc.setting.value": "Setting value '{}'",
        "loc.focusing": "Focusing",
        "loc.hover.js": "Hovering by JavaScript",
        "loc.is.present.js": "Checking whether element is present on screen by JavaScript",
        "loc.is.present.value": "Is element present on screen: {}",
        "loc.get.text.js": "Getting text by JavaScript",
        "loc.text.value": "Element's text: '{}'",
        "loc.get.xpath.js": "Getting XPath by JavaScript",
        "loc.xpath.value": "XPath: '{}'",
        "loc.get.viewport.coordinates.js": "Getting viewport coordinates by JavaScript",
        "loc.viewport.coordinates.value": "Viewport coordinates: {}",
        "loc.shadowroot.expand.js": "Expanding shadow root by JavaScript",
        "loc.search.of.elements": "Looking for element '{}' located by {} in state [{}]",
        "loc.browser.page.wait": "Waiting for the page to load",
        "loc.browser.navigate": "Navigating to '{}'",
    },
    "ru": {
        "loc.clicking.js": "Клик с помощью JavaScript",
        "loc.scrolling.js": "Скроллинг с помощью JavaScript",
        "loc.scrolling.center.js": "Скроллинг в центр с помощью JavaScript",
        "loc.setting.value": "Установка значения '{}'",
        "loc.focusing": "Взятие в фокус",
        "loc.hover.js": "Наведение курсора с помощью JavaScript",
        "loc.is.present.js": "Проверка, находится ли элемент на экране, с помощью JavaScript",
        "loc.is.present.value": "Находится ли элемент на экране: {}",
        "loc.get.text.js": "Получение текста с помощью JavaScript",
        "loc.text.value": "Текст элемента: '{}'",
        "loc.get.xpath.js": "Получение XPath с помощью JavaScript",
        "loc.xpath.value": "XPath: '{}'",
        "loc.get.viewport.coordinates.js": "Получение координат относительно области просмотра с помощью JavaScript",
        "loc.viewport.coordinates.value": "Координаты относительно области просмотра: {}",
        "loc.shadowroot.expand.js": "Раскрытие shadow root с помощью JavaScript",
        "loc.search.of.elements": "Поиск элемента '{}' по локатору {} в состоянии [{}]",
        "loc.browser.page.wait": "Ожидание загрузки страницы",
        "loc.browser.navigate": "Переход по адресу '{}'",
    },
}

DEFAULT_LANGUAGE = "en"


class LocalizationManager:
    """
    Render message keys into text.

    Keys missing in the selected language fall back to English, and keys
    missing everywhere render as the key followed by its arguments.

    Example:
        >>> LocalizationManager().get_localized_message("loc.text.value", "Hi")
        "Element's text: 'Hi'"
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        if language not in MESSAGES:
            logger.warning(f"Unsupported language '{language}', falling back to '{DEFAULT_LANGUAGE}'")
            language = DEFAULT_LANGUAGE
        self.language = language

    def get_localized_message(self, message_key: str, *args: Any) -> str:
        template = MESSAGES[self.language].get(message_key) or MESSAGES[DEFAULT_LANGUAGE].get(message_key)
        if template is None:
            return " ".join([message_key, *(str(arg) for arg in args)])
        try:
            return template.format(*args)
        except (IndexError, KeyError, ValueError):
            return " ".join([template, *(str(arg) for arg in args)])
