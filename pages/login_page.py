from playwright.sync_api import Page
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage

INVENTORY_PATH = "inventory.html"


class LoginPage(SmartPage):

    def __init__(self, page: Page, config: dict):
        super().__init__(page, config)

        # Locators
        self.username_input = SmartLocator(self, "input#user-name")
        self.password_input = SmartLocator(self, "input#password")
        self.login_button = SmartLocator(self, "input#login-button")
        self.error_message = SmartLocator(self, "[data-test='error']")

    def wait_for_form(self, timeout: float):
        self.username_input.wait_for(state="visible", timeout=timeout)
        self.password_input.wait_for(state="visible", timeout=timeout)
        self.login_button.wait_for(state="visible", timeout=timeout)

    def fill_form(self, username, password):
        self.username_input.fill(username)
        self.password_input.fill(password)

    def submit_form(self):
        self.login_button.click()

    def login(self, username, password, timeout: float):
        """Log in and wait until the inventory page is loaded."""
        self.wait_for_form(timeout)
        self.fill_form(username, password)
        self.submit_form()
        self.wait_for_url(f"**/{INVENTORY_PATH}", timeout=timeout)
