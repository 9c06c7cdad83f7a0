import logging
from enum import Enum
from typing import Optional

from playwright.sync_api import Page

from helpers.errors import RegionTimeoutError
from utils.wait_utils import DEFAULT_POLL_INTERVAL_MS, WaitResult, wait_until

logger = logging.getLogger(__name__)


class Region(Enum):
    """Named UI regions of the inventory page."""
    SIDEBAR = "sidebar"
    CART = "cart"
    SORT_SELECTOR = "sort_selector"
    PRODUCT_LIST = "product_list"


REGION_SELECTORS = {
    Region.SIDEBAR: "div.bm-menu-wrap",
    Region.CART: "#shopping_cart_container",
    Region.SORT_SELECTOR: ".select_container",
    Region.PRODUCT_LIST: "div#inventory_container",
}

REGION_MESSAGES = {
    Region.SIDEBAR: "Sidebar should be displayed",
    Region.CART: "Shopping cart button container should be displayed",
    Region.SORT_SELECTOR: "Sort container should be displayed",
    Region.PRODUCT_LIST: "Products container should be displayed",
}


class ReadinessProber:
    """
    Turns asynchronous page rendering into a synchronous precondition.

    A region is ready when its selector matches at least one element and the
    first match is visible. Each probe is bounded by its own timeout.
    """

    def __init__(self, page: Page, poll_interval_ms: float = DEFAULT_POLL_INTERVAL_MS,
                 selectors: Optional[dict] = None):
        self.page = page
        self.poll_interval_ms = poll_interval_ms
        self.selectors = dict(REGION_SELECTORS)
        if selectors:
            self.selectors.update(selectors)

    def _is_ready(self, region: Region) -> bool:
        locator = self.page.locator(self.selectors[region])
        return locator.count() > 0 and locator.first.is_visible()

    def probe(self, region: Region, timeout_ms: float) -> WaitResult:
        """Wait for a region without raising; the result tells if it became ready."""
        result = wait_until(lambda: self._is_ready(region), timeout_ms, self.poll_interval_ms)
        logger.info("Region '%s' %s after %.0f ms",
                    region.value, "ready" if result else "not ready", result.elapsed_ms)
        return result

    def wait_until_ready(self, region: Region, timeout_ms: float) -> WaitResult:
        """
        Block until a region is present and visible.

        Raises:
            RegionTimeoutError: If the region is not ready within timeout_ms.
        """
        result = self.probe(region, timeout_ms)
        if not result:
            raise RegionTimeoutError(region.value, self.selectors[region],
                                     REGION_MESSAGES[region], timeout_ms, result)
        return result
