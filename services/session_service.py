import logging
from contextlib import contextmanager

from playwright.sync_api import Browser, BrowserContext, Page, Playwright
from playwright.sync_api import Error as PlaywrightError

from helpers.browser_variants import BrowserVariant
from helpers.errors import SessionSetupError
from pages.login_page import LoginPage

DEFAULT_TIMEOUT = 30000
DEFAULT_LOGIN_TIMEOUT = 5000

logger = logging.getLogger(__name__)


class Session:
    """One browser bound to a variant, with the page every step works on."""

    def __init__(self, variant: BrowserVariant, browser: Browser,
                 context: BrowserContext, page: Page, config: dict):
        self.variant = variant
        self.browser = browser
        self.context = context
        self.page = page
        self.config = config
        self.closed = False

    def close(self):
        if self.closed:
            return
        self.closed = True
        try:
            self.context.close()
        finally:
            self.browser.close()
        logger.info("[%s] Session closed", self.variant.name)

    def __str__(self):
        return f"<Session variant='{self.variant.name}' closed={self.closed}>"

    __repr__ = __str__


def launch_browser(playwright: Playwright, variant: BrowserVariant, config: dict) -> Browser:
    options = variant.launch_options(config)
    logger.info("[%s] Launching %s with %s", variant.name, variant.browser_type, options)
    try:
        return getattr(playwright, variant.browser_type).launch(**options)
    except PlaywrightError as e:
        raise SessionSetupError(variant.name, f"browser could not be started: {e}") from e


def login(session: Session):
    config = session.config
    login_page = LoginPage(session.page, config)
    timeout = config.get("login_timeout", DEFAULT_LOGIN_TIMEOUT)

    try:
        login_page.goto(config["demo_base_url"])
        login_page.login(config["username"], config["password"], timeout)
    except PlaywrightError as e:
        reason = str(e).splitlines()[0]
        try:
            if login_page.error_message.count() > 0:
                reason = login_page.error_message.inner_text()
        except PlaywrightError:
            logger.debug("[%s] Login error banner could not be read", session.variant.name)
        raise SessionSetupError(session.variant.name, f"login failed: {reason}") from e

    logger.info("[%s] Logged in as '%s'", session.variant.name, config["username"])


def start_session(playwright: Playwright, variant: BrowserVariant, config: dict) -> Session:
    """
    Start a browser for the variant, open the target page and log in.

    Raises:
        SessionSetupError: The browser did not start or the login step failed.
            Nothing is retried and the browser is closed before raising.
    """
    browser = launch_browser(playwright, variant, config)

    try:
        context = browser.new_context()
        context.set_default_timeout(config.get("timeout", DEFAULT_TIMEOUT))
        page = context.new_page()
    except PlaywrightError as e:
        browser.close()
        raise SessionSetupError(variant.name, f"browser page could not be opened: {e}") from e
    except BaseException:
        browser.close()
        raise

    session = Session(variant, browser, context, page, config)
    try:
        login(session)
    except BaseException:
        session.close()
        raise
    return session


@contextmanager
def open_session(playwright: Playwright, variant: BrowserVariant, config: dict):
    """Authenticated session that is closed on exit, whatever the outcome."""
    session = start_session(playwright, variant, config)
    try:
        yield session
    finally:
        session.close()
