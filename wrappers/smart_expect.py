import logging
from playwright.sync_api import expect as pw_expect, Page, Locator
from wrappers.smart_locator import SmartLocator

logger = logging.getLogger(__name__)


class SmartExpect:
    """Playwright expect() that also accepts SmartLocator and logs every assertion."""

    def __init__(self, actual, message: str = None):
        if isinstance(actual, SmartLocator):
            self.description = actual.cache_key
            unwrapped = actual.locator
        elif isinstance(actual, Locator):
            self.description = str(actual)
            unwrapped = actual
        elif isinstance(actual, Page):
            self.description = "page"
            unwrapped = actual
        else:
            raise ValueError(f"Unsupported type: {type(actual)}")

        self._inner = pw_expect(unwrapped, message)

    def __getattr__(self, item):
        target = getattr(self._inner, item)

        if callable(target) and item.startswith(("to_", "not_to_")):
            def wrapper(*args, **kwargs):
                logger.debug("expect(%s).%s%s", self.description, item, args)
                return target(*args, **kwargs)
            return wrapper
        return target

    def __dir__(self):
        return dir(self._inner)


def expect(actual, message: str = None):
    """Public entry point: works with SmartLocator or native Playwright objects."""
    return SmartExpect(actual, message)
