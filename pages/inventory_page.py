from playwright.sync_api import Page
from urllib.parse import urljoin
from utils.text_utils import normalize_whitespace, parse_price
from utils.web_utils import get_all_text_contents, get_text_content
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage

INVENTORY_PAGE_HEADER = 'Swag Labs'
SIDE_NAV_ITEMS = ["All Items", "About", "Logout", "Reset App State"]
PRODUCT_COUNT = 6
PRICE_SELECTOR = ".inventory_item_description .pricebar .inventory_item_price"


class InventoryPage(SmartPage):

    def __init__(self, page: Page, config: dict):
        super().__init__(page, config)
        # Header and sidebar menu
        self.header = SmartLocator(self, "div[class='app_logo']")
        self.nav_items = SmartLocator(self, ".bm-item-list .bm-item.menu-item")
        self.logout_link = SmartLocator(self, "#logout_sidebar_link")
        # Cart
        self.cart_link = SmartLocator(self, ".shopping_cart_link")
        # Sorting
        self.sort_select = SmartLocator(self, "select.product_sort_container")
        self.sort_options = SmartLocator(self, "select.product_sort_container > option")
        self.sort_option = SmartLocator(self, "xpath=//select[@class='product_sort_container']/option[normalize-space(text())='#KEYWORD']")
        self.active_option = SmartLocator(self, ".active_option")
        # Products
        self.inventory_items = SmartLocator(self, ".inventory_list .inventory_item")
        self.inventory_page_url = urljoin(config['demo_base_url'], 'inventory.html')

    def get_nav_item_texts(self) -> list[str]:
        return get_all_text_contents(self.nav_items.locator)

    def get_logout_text(self) -> str:
        return get_text_content(self.logout_link.locator)

    def is_cart_link_visible(self) -> bool:
        return self.cart_link.is_visible()

    def get_active_option_text(self) -> str:
        return normalize_whitespace(self.active_option.inner_text())

    def get_first_option_text(self) -> str:
        return get_text_content(self.sort_options.first)

    def get_sort_option_labels(self) -> list[str]:
        return get_all_text_contents(self.sort_options.locator)

    def open_sort_dropdown(self):
        self.sort_select.click()

    def choose_sort_option(self, label: str):
        """Pick the <option> whose text is exactly the given label."""
        self.set_keyword(label)
        try:
            if self.sort_option.count() == 0:
                raise ValueError(
                    f"Sort option '{label}' is not offered, available: {self.get_sort_option_labels()}")
            self.sort_select.select_option(label=label)
        finally:
            self.clear_keyword()

    def count_inventory_items(self) -> int:
        return self.inventory_items.count()

    def get_item_prices(self) -> list[float]:
        """Read the price of every product item, in display order."""
        return [parse_price(item.locator(PRICE_SELECTOR).inner_text())
                for item in self.inventory_items.all()]
