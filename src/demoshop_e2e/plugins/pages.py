"""
Pytest plugin providing the browser, the page objects and the checkout flow.

Enable it from a conftest with::

    pytest_plugins = ["demoshop_e2e.plugins.pages"]

Browser journeys are marked ``e2e`` and only run with ``--e2e``.
"""

import logging

import pytest
from playwright.sync_api import sync_playwright
from tenacity import Retrying, before_sleep_log, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..adapters.playwright_driver import PlaywrightDriver
from ..checkout import CheckoutFlow
from ..config import load_config
from ..errors import DriverTimeoutError
from ..ledger import CartLedger
from ..navigation import CategoryTable
from ..pages import CartPage, CheckoutPage, HomePage, LoginPage, ProductPage
from ..testdata import load_order_data

log = logging.getLogger(__name__)


def pytest_addoption(parser):
    group = parser.getgroup("demoshop", "Demo Web Shop e2e suite")
    group.addoption("--e2e", action="store_true", default=False, help="Run browser journeys marked e2e")


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: browser journey against the live storefront")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="browser journey; run with --e2e")
    for item in items:
        if item.get_closest_marker("e2e"):
            item.add_marker(skip_e2e)


def open_storefront(home_page: HomePage, attempts: int) -> HomePage:
    """Open the home page, retrying when the storefront is slow to answer."""
    for attempt in Retrying(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(DriverTimeoutError),
        before_sleep=before_sleep_log(log, logging.WARNING),
        reraise=True,
    ):
        with attempt:
            home_page.open()
            home_page.wait_until_loaded()
    return home_page


# Session resources


@pytest.fixture(scope="session")
def demoshop_config():
    """Suite configuration (YAML file + DEMO_WEBSHOP_* environment)."""
    return load_config()


@pytest.fixture(scope="session")
def order_data(demoshop_config):
    return load_order_data(demoshop_config.order_data)


@pytest.fixture(scope="session")
def browser(demoshop_config):
    """One browser per session."""
    settings = demoshop_config.browser
    with sync_playwright() as playwright:
        launcher = getattr(playwright, settings.name)
        browser = launcher.launch(headless=settings.headless, slow_mo=settings.slow_mo_ms)
        yield browser
        browser.close()


# Per-test resources


@pytest.fixture
def browser_context(browser, demoshop_config):
    """Fresh context per test, so cookies and cart never leak between tests."""
    settings = demoshop_config.browser
    context = browser.new_context(
        viewport={"width": settings.viewport_width, "height": settings.viewport_height},
    )
    yield context
    context.close()


@pytest.fixture
def reset_storage_state(browser_context):
    """Callable that clears cookies and permissions mid-test."""
    def reset() -> None:
        browser_context.clear_cookies()
        browser_context.clear_permissions()
    return reset


@pytest.fixture
def page_driver(browser_context, demoshop_config):
    page = browser_context.new_page()
    yield PlaywrightDriver(page, demoshop_config.url, demoshop_config.timeouts)
    page.close()


@pytest.fixture
def home_page(page_driver):
    return HomePage(page_driver)


@pytest.fixture
def login_page(page_driver):
    return LoginPage(page_driver)


@pytest.fixture
def product_page(page_driver):
    return ProductPage(page_driver, CategoryTable())


@pytest.fixture
def cart_page(page_driver):
    return CartPage(page_driver)


@pytest.fixture
def checkout_page(page_driver):
    return CheckoutPage(page_driver)


@pytest.fixture
def storefront(home_page, reset_storage_state, demoshop_config):
    """Home page, opened with a clean storage state."""
    reset_storage_state()
    return open_storefront(home_page, demoshop_config.timeouts.open_attempts)


@pytest.fixture
def cart_ledger(demoshop_config):
    return CartLedger(tolerance=demoshop_config.ledger.tolerance)


@pytest.fixture
def checkout_flow(cart_ledger, checkout_page):
    return CheckoutFlow(cart_ledger, checkout_page)
