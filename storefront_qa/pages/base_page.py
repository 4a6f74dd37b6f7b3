"""Shared base for the storefront page objects."""

from playwright.async_api import Page, Locator
from typing import Optional
from urllib.parse import urljoin
import logging

from ..config.suite_config import get_suite_config

logger = logging.getLogger(__name__)


class BasePage:
    """Base page object.

    Subclasses declare their selectors as upper-case class attributes and
    wrap one interaction per method. Actions let Playwright errors
    propagate; lookups documented as returning a default catch
    ``playwright.async_api.Error`` themselves.
    """

    def __init__(self, page: Page, base_url: Optional[str] = None):
        """Initialize the page object.

        Args:
            page: Playwright page to drive
            base_url: Storefront root; defaults to the configured one
        """
        self.page = page
        self.base_url = base_url or get_suite_config().base_url

    def url_for(self, path: str = "") -> str:
        """Resolve a path or fragment against the storefront root."""
        return urljoin(self.base_url, path)

    def locator(self, selector: str) -> Locator:
        return self.page.locator(selector)

    async def wait_for_network_idle(self) -> None:
        await self.page.wait_for_load_state("networkidle")

    @staticmethod
    def parse_amount(text: Optional[str], *tokens: str) -> float:
        """Parse a displayed amount into a float.

        Args:
            text: Raw text content, e.g. ``"Rs. 120"``
            *tokens: Literal substrings to strip before parsing

        Returns:
            Parsed amount

        Raises:
            ValueError: If nothing numeric remains
        """
        cleaned = text or ""
        for token in tokens:
            cleaned = cleaned.replace(token, "")
        return float(cleaned.strip())
