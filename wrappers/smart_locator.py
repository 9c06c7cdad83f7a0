import inspect
import logging
import re
import time
from playwright.sync_api import Locator
from utils.web_utils import highlight_element, reset_element_style

KEYWORD_PLACEHOLDER = "#KEYWORD"

# Locator methods that interact with the element and get highlight / step delay
ACTION_METHODS = {"click", "dblclick", "fill", "type", "press", "check", "uncheck",
                  "select_option", "hover", "set_input_files"}

logger = logging.getLogger(__name__)


class SmartLocator:
    """
    SmartLocator is a lazy wrapper around Playwright's Locator that provides:
    - Transparent proxying of locator methods (e.g. .fill(), .click(), .count()).
    - Keyword substitution: '#KEYWORD' in the selector is replaced with the
      keyword currently set on the owner page object.
    - Optional element highlight and step delay before every action.
    """

    def __init__(self, owner, selector):
        self.page = owner.page
        self.config = owner.config
        self.owner = owner
        self.selector = str(selector)

        self.field_name = self._get_field_name()
        self.cache_key = f"{self.owner.__class__.__name__}.{self.field_name}"

    def _get_field_name(self):
        for frame_info in inspect.stack():
            if frame_info.code_context:
                line = frame_info.code_context[0].strip()
                match = re.match(r"self\.(\w+)\s*=\s*SmartLocator", line)
                if match:
                    return match.group(1)
        return "unknown_field"

    def resolve_selector(self) -> str:
        keyword = self.owner.get_keyword()

        if keyword and KEYWORD_PLACEHOLDER in self.selector:
            return self.selector.replace(KEYWORD_PLACEHOLDER, keyword)
        return self.selector

    @property
    def locator(self) -> Locator:
        return self.page.locator(self.resolve_selector())

    def __getattr__(self, item):
        if item in ("page", "config", "owner", "selector") or item.startswith("__"):
            raise AttributeError(item)

        target = getattr(self.locator, item)

        if callable(target) and item in ACTION_METHODS:
            def wrapper(*args, **kwargs):
                locator = self.locator
                logger.debug("%s.%s%s", self.cache_key, item, args)
                element_style = self._highlight_element_with_delay(locator)

                try:
                    return getattr(locator, item)(*args, **kwargs)
                finally:
                    self._restore_element_style(locator, element_style)
            return wrapper
        return target

    def __str__(self):
        return f"<SmartLocator field='{self.field_name}' selector='{self.resolve_selector()}'>"

    __repr__ = __str__

    def _get_step_delay_seconds(self) -> float:
        try:
            return float(self.config.get("step_delay") or 0) / 1000.0
        except (TypeError, ValueError):
            return 0.0

    def _highlight_element_with_delay(self, locator: Locator):
        step_delay_seconds = self._get_step_delay_seconds()
        element_style = None

        if self.config.get("highlight"):
            element_style = highlight_element(locator)

        if step_delay_seconds > 0.0:
            time.sleep(step_delay_seconds)

        return element_style

    def _restore_element_style(self, locator: Locator, element_style):
        # Actions like click() may navigate away and detach the element
        if self.config.get("highlight") and locator.count() > 0:
            reset_element_style(locator, element_style)
