import logging
from playwright.sync_api import Page

logger = logging.getLogger(__name__)


class SmartPage:
    """
    SmartPage is a wrapper around Playwright's Page that provides:
    - Transparent proxying of page methods (e.g. .goto(), .locator(), .wait_for_url()).
    - A keyword that its SmartLocator fields substitute for '#KEYWORD'
      (e.g. the sort option label to pick).
    """

    def __init__(self, page: Page, config: dict):
        self.page = page
        self.config = config
        self.keyword = None
        self.class_name = self.__class__.__name__

    def set_keyword(self, keyword: str):
        if not keyword:
            raise ValueError(f"{self.class_name}: keyword must not be empty")
        self.keyword = keyword

    def get_keyword(self):
        return self.keyword

    def clear_keyword(self):
        self.keyword = None

    def __getattr__(self, item):
        # Guard against recursion before __init__ has set self.page
        if item == "page":
            raise AttributeError(item)

        target = getattr(self.page, item)

        if callable(target):
            def wrapper(*args, **kwargs):
                logger.debug("%s.%s%s", self.class_name, item, args)
                return target(*args, **kwargs)

            return wrapper
        return target

    def __str__(self):
        return f"<SmartPage {self.class_name}>"

    __repr__ = __str__
