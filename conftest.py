import json
import re
import time
from datetime import datetime
from pathlib import Path
import pytest
from playwright.sync_api import sync_playwright
from helpers.browser_variants import get_enabled_variants
from helpers.readiness_prober import ReadinessProber
from helpers.sort_verifier import SortVerifier
from pages.inventory_page import InventoryPage
from services.session_service import open_session
from utils.code_utils import as_bool, get_effective_config_value


ROOT_DIR = Path(__file__).parent
REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"
DEFAULT_SCENARIO = "inventory"


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
with open(ROOT_DIR / "config.json", encoding="utf-8") as f:
    CONFIG = json.load(f)


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--variant",
        action="append",
        default=[],
        help="Browser variant to run (chrome, msedge). Repeat for several; default from config.json",
    )

    parser.addoption(
        "--highlight",
        action="store",
        choices=["true", "false"],
        help="Highlight elements during tests",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        choices=["true", "false"],
        help="Capture screenshot on test failure",
    )

    parser.addoption(
        "--step_delay",
        action="store",
        type=int,
        help="Delay (in ms) between steps",
    )

    parser.addoption(
        "--username",
        action="store",
        help="Custom username override",
    )

    parser.addoption(
        "--password",
        action="store",
        help="Custom password override",
    )


# ---------------------------------------------------------------------------
# Config fixture
# ---------------------------------------------------------------------------
def build_config(pytestconfig) -> dict:
    cfg = CONFIG.copy()

    # Headless unless --headed (pytest-playwright option) is given
    headed = pytestconfig.getoption("headed", default=False)
    cfg["headless"] = not bool(headed) and as_bool(cfg.get("headless"), True)

    # Credentials: CLI option, then --name=value / config.json / environment
    for name in ("username", "password"):
        cfg[name] = pytestconfig.getoption(name) or get_effective_config_value(name, CONFIG)

    # Highlight mode
    cfg["highlight"] = as_bool(pytestconfig.getoption("highlight"), as_bool(cfg.get("highlight")))

    # Screenshot on error
    cfg["screenshot_on_error"] = as_bool(pytestconfig.getoption("screenshot_on_error"),
                                         as_bool(cfg.get("screenshot_on_error")))

    # Step delay
    step_delay = pytestconfig.getoption("step_delay")
    if step_delay is not None:
        cfg["step_delay"] = float(step_delay)
    else:
        cfg["step_delay"] = float(cfg.get("step_delay", 0.0))

    return cfg


@pytest.fixture(scope="session")
def config(pytestconfig):
    return build_config(pytestconfig)


# ---------------------------------------------------------------------------
# One suite per browser variant
# ---------------------------------------------------------------------------
def pytest_generate_tests(metafunc):
    if "variant" in metafunc.fixturenames:
        names = metafunc.config.getoption("variant") or CONFIG.get("variants")
        variants = get_enabled_variants(names)
        metafunc.parametrize("variant", variants, ids=[v.name for v in variants], scope="module")


@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="module")
def session(playwright_instance, config, variant):
    """Logged-in browser session owned by one test module and variant."""
    with open_session(playwright_instance, variant, config) as s:
        yield s


@pytest.fixture(scope="module")
def scenario_timeouts(request, config):
    """Timeout budgets (ms) of the scenario named by the module's SCENARIO constant."""
    name = getattr(request.module, "SCENARIO", DEFAULT_SCENARIO)
    return config["scenarios"][name]


@pytest.fixture
def inventory_page(session, config):
    return InventoryPage(session.page, config)


@pytest.fixture
def prober(session, config):
    return ReadinessProber(session.page, config.get("poll_interval", 100))


@pytest.fixture
def sort_verifier(inventory_page, prober, scenario_timeouts, config):
    return SortVerifier(inventory_page, prober, scenario_timeouts, config.get("poll_interval", 100))


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------
def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    config.option.htmlpath = str(REPORT_FILE)
    print(f"[INFO] HTML report → {REPORT_FILE}")


def pytest_sessionstart(session):
    """Delete old report & screenshots before the session begins."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    for f in REPORT_DIR.glob("*"):
        try:
            f.unlink()
        except OSError as e:
            print(f"[WARN] Could not remove {f}: {e}")


def safe_filename(name: str) -> str:
    """
    Convert any string (like test names or parameterized values)
    into a filesystem-safe filename.
    Keeps letters, digits, underscore, dash, and dot only.
    """
    # Replace all invalid filename chars with '_'
    name = re.sub(r'[<>:"/\\|?*\s,=#@!%^&;{}()\[\]+]+', '_', name)
    # Collapse consecutive underscores
    name = re.sub(r'_+', '_', name)
    # Trim leading/trailing underscores or dots
    name = name.strip('._')
    return name[:150]  # limit length to avoid OS path length issues


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()

    # Run only when the test itself failed
    if rep.when != "call" or not rep.failed:
        return

    session = item.funcargs.get("session", None)
    if session is None or session.closed:
        return

    try:
        config = item.funcargs.get("config", CONFIG)
        if not as_bool(config.get("screenshot_on_error")):
            return

        # Build unique name: {test-name}-yyyy-MM-dd-hh-mm-ss-sss.png
        ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
        screenshot_name = f"{safe_filename(item.name)}-{ts}.png"
        screenshot_path = REPORT_DIR / screenshot_name

        # Give browser time to render any failure overlay
        time.sleep(0.2)

        session.page.screenshot(path=str(screenshot_path), full_page=True)
        print(f"[INFO] Screenshot saved → {screenshot_path}")

        # Attach to pytest-html report
        import pytest_html
        extras = getattr(rep, "extras", [])
        extras.append(pytest_html.extras.html(
            f'<a href="{screenshot_name}" target="_blank">Open Screenshot</a>'))
        extras.append(pytest_html.extras.image(screenshot_name))
        rep.extras = extras

    except Exception as e:
        print(f"[WARN] Screenshot capture failed: {e}")
