"""Product listing page of the storefront."""

from playwright.async_api import Locator, Error as PlaywrightError
from typing import List, Optional
import logging

from .base_page import BasePage

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    """Product grid, search box, quantity steppers and the cart icon."""

    PRODUCT_LIST = '//div[@class="product"]'
    ADD_TO_CART_BUTTONS = '//button[text()="ADD TO CART"]'
    SEARCH_INPUT = "input.search-keyword"
    PRODUCT_TITLE = '//h4[@class="product-name"]'
    PRODUCT_PRICE = '//p[@class="product-price"]'
    INCREASE_QUANTITY = "a.increment"
    DECREASE_QUANTITY = "a.decrement"
    QUANTITY_INPUT = 'input[type="number"]'
    VEG_FILTER = '//label//input[@value="Veg"]/../span'
    ERROR_MESSAGE = '[class*="error"]'

    # Tried in order by go_to_cart()
    CART_SELECTORS = (
        '[aria-label="Cart Icone"]',
        "a.cart-icon",
        'button:has-text("PROCEED TO CHECKOUT")',
    )

    ADD_TO_CART_SETTLE_MS = 500

    async def goto(self) -> None:
        await self.page.goto(self.url_for())
        await self.wait_for_network_idle()
        logger.info(f"Opened home page {self.page.url}")

    async def get_products(self) -> List[Locator]:
        """Wait for the product grid and return one locator per product card."""
        await self.page.wait_for_selector(self.PRODUCT_LIST)
        return await self.locator(self.PRODUCT_LIST).all()

    async def get_product_count(self) -> int:
        return await self.locator(self.PRODUCT_LIST).count()

    async def add_product_to_cart(self, index: int) -> None:
        """Click the ADD TO CART button of the product at ``index``."""
        await self.locator(self.ADD_TO_CART_BUTTONS).nth(index).click()
        await self.page.wait_for_timeout(self.ADD_TO_CART_SETTLE_MS)
        logger.debug(f"Added product #{index} to cart")

    async def add_product_to_cart_by_name(self, name: str) -> None:
        """Add the first product whose title contains ``name``."""
        button = self.locator(
            f"//h4[contains(text(), '{name}')]/following::button[text()='ADD TO CART']"
        ).first
        await button.click()
        await self.page.wait_for_timeout(self.ADD_TO_CART_SETTLE_MS)
        logger.debug(f"Added '{name}' to cart")

    async def search_product(self, term: str) -> None:
        search_field = self.locator(self.SEARCH_INPUT)
        await search_field.fill(term)
        await search_field.press("Enter")
        await self.wait_for_network_idle()
        logger.debug(f"Searched for '{term}'")

    async def click_product_by_index(self, index: int) -> None:
        await self.locator(self.PRODUCT_LIST).nth(index).click()
        await self.wait_for_network_idle()

    async def get_product_price(self, index: int) -> float:
        """Price of the product at ``index``.

        Raises:
            ValueError: If the price cell is not numeric
        """
        text = await self.locator(self.PRODUCT_PRICE).nth(index).text_content()
        return self.parse_amount(text, "$")

    async def get_product_title(self, index: int) -> Optional[str]:
        return await self.locator(self.PRODUCT_TITLE).nth(index).text_content()

    async def go_to_cart(self) -> None:
        """Open the cart, trying each known cart control in turn.

        Raises:
            playwright.async_api.Error: The last failure when no control worked
        """
        last_error: Optional[PlaywrightError] = None
        for selector in self.CART_SELECTORS:
            try:
                await self.locator(selector).first.click()
                await self.wait_for_network_idle()
                logger.info(f"Opened cart via {selector}")
                return
            except PlaywrightError as e:
                logger.debug(f"Cart control {selector} failed: {e}")
                last_error = e
        raise last_error

    async def filter_by_veg_only(self) -> None:
        await self.locator(self.VEG_FILTER).click()
        await self.wait_for_network_idle()

    async def clear_search(self) -> None:
        await self.locator(self.SEARCH_INPUT).clear()
        await self.wait_for_network_idle()

    async def wait_for_page_load(self) -> None:
        await self.wait_for_network_idle()

    async def increase_quantity_by_index(self, index: int) -> None:
        await self.locator(self.INCREASE_QUANTITY).nth(index).click()

    async def decrease_quantity_by_index(self, index: int) -> None:
        await self.locator(self.DECREASE_QUANTITY).nth(index).click()

    async def get_page_title(self) -> str:
        return await self.page.title()

    async def is_product_visible(self, index: int) -> bool:
        return await self.locator(self.PRODUCT_LIST).nth(index).is_visible()

    async def scroll_to_product(self, index: int) -> None:
        await self.locator(self.PRODUCT_LIST).nth(index).scroll_into_view_if_needed()

    async def get_visible_products_count(self) -> int:
        visible = 0
        for product in await self.locator(self.PRODUCT_LIST).all():
            if await product.is_visible():
                visible += 1
        return visible

    async def has_error_message(self) -> bool:
        """Whether an error banner is shown; False when it cannot be read."""
        try:
            return await self.locator(self.ERROR_MESSAGE).first.is_visible()
        except PlaywrightError as e:
            logger.warning(f"Could not read error banner: {e}")
            return False
