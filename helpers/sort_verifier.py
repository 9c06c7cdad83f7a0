import logging
from dataclasses import dataclass
from enum import Enum

from playwright.sync_api import Error as PlaywrightError

from helpers.errors import SortConvergenceError, SortOrderError
from helpers.readiness_prober import ReadinessProber, Region
from pages.inventory_page import InventoryPage
from utils.text_utils import is_monotonic
from utils.wait_utils import DEFAULT_POLL_INTERVAL_MS, wait_until

SORT_PRICE_BY_ASC = "Price (low to high)"
SORT_PRICE_BY_DESC = "Price (high to low)"

logger = logging.getLogger(__name__)


class SortState(Enum):
    IDLE = "idle"
    DROPDOWN_OPENED = "dropdown_opened"
    OPTION_SELECTED = "option_selected"
    CONFIRMED = "confirmed"


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def from_label(cls, label: str) -> "SortOrder":
        if label == SORT_PRICE_BY_ASC:
            return cls.ASCENDING
        if label == SORT_PRICE_BY_DESC:
            return cls.DESCENDING
        raise ValueError(
            f"Unsupported sort label '{label}', expected '{SORT_PRICE_BY_ASC}' or '{SORT_PRICE_BY_DESC}'")

    @property
    def failure_message(self) -> str:
        if self is SortOrder.ASCENDING:
            return "Products are not sorted by price low to high"
        return "Products are not sorted by price high to low"


@dataclass
class SortCheckResult:
    label: str
    order: SortOrder
    prices: list
    expected: list

    @property
    def ok(self) -> bool:
        return self.prices == self.expected


class SortVerifier:
    """
    Drives the product sort control and checks the resulting price order.

    Transitions: IDLE -> DROPDOWN_OPENED -> OPTION_SELECTED -> CONFIRMED.
    Every step waits for its precondition with a bounded timeout; nothing is retried.
    """

    def __init__(self, inventory_page: InventoryPage, prober: ReadinessProber,
                 timeouts: dict, poll_interval_ms: float = DEFAULT_POLL_INTERVAL_MS):
        self.inventory_page = inventory_page
        self.prober = prober
        self.timeouts = timeouts
        self.poll_interval_ms = poll_interval_ms
        self.state = SortState.IDLE
        self.label = None

    def _require_state(self, expected: SortState, action: str):
        if self.state is not expected:
            raise RuntimeError(f"Cannot {action} in state {self.state.value}, expected {expected.value}")

    def open_dropdown(self):
        self.prober.wait_until_ready(Region.SORT_SELECTOR, self.timeouts["sort_selector"])
        self.inventory_page.open_sort_dropdown()
        self.state = SortState.DROPDOWN_OPENED

    def select_option(self, label: str):
        self._require_state(SortState.DROPDOWN_OPENED, "select a sort option")
        self.inventory_page.choose_sort_option(label)
        self.label = label
        self.state = SortState.OPTION_SELECTED

    def confirm(self, label: str):
        self._require_state(SortState.OPTION_SELECTED, "confirm the sort option")
        timeout_ms = self.timeouts["active_option"]
        result = wait_until(lambda: self.inventory_page.get_active_option_text() == label,
                            timeout_ms, self.poll_interval_ms)
        if not result:
            # Read once more for the failure message; the page may be gone already
            try:
                actual = self.inventory_page.get_active_option_text()
            except PlaywrightError:
                actual = None
            raise SortConvergenceError(label, actual, timeout_ms, result)
        self.state = SortState.CONFIRMED
        logger.info("Sort option '%s' confirmed after %.0f ms", label, result.elapsed_ms)

    def choose(self, label: str):
        """Run the full state machine for one label, ending in CONFIRMED."""
        SortOrder.from_label(label)
        self.state = SortState.IDLE
        self.open_dropdown()
        self.select_option(label)
        self.confirm(label)

    def check_order(self, label: str) -> SortCheckResult:
        """
        Read the displayed prices and check they follow the label's direction.

        Raises:
            SortOrderError: If the prices are not monotonic in that direction.
        """
        order = SortOrder.from_label(label)
        self.prober.wait_until_ready(Region.PRODUCT_LIST, self.timeouts["product_list"])
        prices = self.inventory_page.get_item_prices()
        descending = order is SortOrder.DESCENDING
        # sorted() is stable, so equal prices keep their displayed order
        expected = sorted(prices, reverse=descending)
        result = SortCheckResult(label, order, prices, expected)

        if not is_monotonic(prices, descending=descending):
            raise SortOrderError(order.failure_message, label, prices, expected)
        logger.info("Prices sorted %s: %s", order.value, prices)
        return result

    def verify(self, label: str) -> SortCheckResult:
        self.choose(label)
        return self.check_order(label)
