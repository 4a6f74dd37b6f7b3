"""Mock Playwright objects for the unit tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock, create_autospec
from playwright.async_api import Page, BrowserContext

from storefront_qa.config.suite_config import reset_suite_config

STOREFRONT_URL = "https://rahulshettyacademy.com/seleniumPractise/"


@pytest.fixture(autouse=True)
def fresh_config():
    """Re-read the environment for every test."""
    reset_suite_config()
    yield
    reset_suite_config()


@pytest.fixture
def mock_locator():
    """Create a locator whose chaining methods return itself."""
    locator = MagicMock()
    locator.nth = MagicMock(return_value=locator)
    locator.locator = MagicMock(return_value=locator)
    locator.first = locator
    locator.click = AsyncMock()
    locator.fill = AsyncMock()
    locator.press = AsyncMock()
    locator.clear = AsyncMock()
    locator.text_content = AsyncMock(return_value="")
    locator.input_value = AsyncMock(return_value="1")
    locator.is_visible = AsyncMock(return_value=True)
    locator.is_checked = AsyncMock(return_value=False)
    locator.count = AsyncMock(return_value=0)
    locator.all = AsyncMock(return_value=[])
    locator.get_attribute = AsyncMock(return_value=None)
    locator.select_option = AsyncMock()
    locator.scroll_into_view_if_needed = AsyncMock()
    locator.wait_for = AsyncMock()
    return locator


@pytest.fixture
def mock_context():
    """Create an autospecced BrowserContext so call signatures are checked."""
    context = create_autospec(BrowserContext, instance=True)
    context.cookies.return_value = []
    return context


@pytest.fixture
def mock_page(mock_locator, mock_context):
    """Create a mock Page instance wired to the locator and context mocks."""
    page = MagicMock(spec=Page)
    page.url = STOREFRONT_URL
    page.context = mock_context
    page.locator = MagicMock(return_value=mock_locator)
    page.goto = AsyncMock()
    page.reload = AsyncMock()
    page.go_back = AsyncMock()
    page.go_forward = AsyncMock()
    page.title = AsyncMock(return_value="GreenKart - veg and fruits kart")
    page.content = AsyncMock(return_value="<html><body></body></html>")
    page.evaluate = AsyncMock()
    page.add_script_tag = AsyncMock()
    page.screenshot = AsyncMock(return_value=b"png")
    page.set_viewport_size = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.wait_for_selector = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.route = AsyncMock()
    page.unroute = AsyncMock()
    page.request = MagicMock()
    page.request.get = AsyncMock()
    return page


@pytest.fixture
def make_response():
    """Build a fake APIResponse carrying the given headers."""

    def _make(headers):
        response = MagicMock()
        response.headers = headers
        return response

    return _make
