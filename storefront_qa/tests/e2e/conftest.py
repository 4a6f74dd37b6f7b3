"""Fixtures for the live suites.

Every test gets its own Playwright driver, browser context and page so cart
state never leaks between tests.
"""

import logging

import pytest
import pytest_asyncio

from storefront_qa.browser.playwright_integration import PlaywrightManager
from storefront_qa.config.suite_config import configure_logging, get_suite_config
from storefront_qa.data.test_data_factory import TestDataFactory
from storefront_qa.helpers import (
    AccessibilityHelper,
    ComplianceHelper,
    PerformanceHelper,
    SecurityHelper,
    TestUtil,
)
from storefront_qa.pages import CartPage, CheckoutPage, HomePage, LoginPage

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def suite_logging():
    configure_logging(get_suite_config().log_level)


@pytest.fixture(scope="session")
def suite_config():
    return get_suite_config()


@pytest.fixture(scope="session")
def test_data():
    return TestDataFactory()


@pytest_asyncio.fixture
async def manager(suite_config):
    async with PlaywrightManager(suite_config) as manager:
        yield manager


@pytest_asyncio.fixture
async def context(manager, suite_config):
    browser = await manager.launch_browser()
    return await manager.create_context(browser, viewport=suite_config.viewport())


@pytest_asyncio.fixture
async def page(manager, context, request):
    page = await manager.create_page(context)
    logger.info(f"Starting {request.node.nodeid}")
    return page


@pytest.fixture
def home_page(page):
    return HomePage(page)


@pytest.fixture
def cart_page(page):
    return CartPage(page)


@pytest.fixture
def checkout_page(page):
    return CheckoutPage(page)


@pytest.fixture
def login_page(page):
    return LoginPage(page)


@pytest.fixture
def util(page):
    return TestUtil(page)


@pytest.fixture
def accessibility(page):
    return AccessibilityHelper(page)


@pytest.fixture
def compliance(page):
    return ComplianceHelper(page)


@pytest.fixture
def security(page):
    return SecurityHelper(page)


@pytest.fixture
def performance(page):
    return PerformanceHelper(page)


@pytest.fixture
def dialogs(page):
    """Messages of every dialog the page opens; each one is dismissed."""
    messages = []

    async def record(dialog):
        messages.append(dialog.message)
        await dialog.dismiss()

    page.on("dialog", record)
    return messages
