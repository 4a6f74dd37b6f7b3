"""Cart page of the storefront."""

from playwright.async_api import Error as PlaywrightError
from typing import List
import logging

from .base_page import BasePage
from ..models.page_models import CartItem

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    """Cart table, quantity controls, promo code box and checkout button."""

    CART_ITEMS = "tr.cartItem"
    CART_ITEM_NAME = ".product-name"
    CART_ITEM_PRICE = ".product-price"
    CART_ITEM_QUANTITY = 'input[type="number"]'
    REMOVE_BUTTON = 'button:has-text("Remove")'
    SUBTOTAL_AMOUNT = ".totAmt"
    PROCEED_BUTTON = 'button:has-text("PROCEED TO CHECKOUT")'
    CONTINUE_SHOPPING_BUTTON = 'button:has-text("Continue Shopping")'
    EMPTY_CART_MESSAGE = ".empty-message"
    INCREASE_QUANTITY = "button.increment"
    DECREASE_QUANTITY = "button.decrement"
    PROMO_CODE_INPUT = 'input[placeholder="Promo code"]'
    APPLY_PROMO_BUTTON = 'button:has-text("Apply")'

    PROMO_SETTLE_MS = 1000

    async def get_cart_items_count(self) -> int:
        return await self.locator(self.CART_ITEMS).count()

    async def get_cart_items(self) -> List[CartItem]:
        """Read every cart row.

        Returns:
            One CartItem per row, in table order
        """
        items = []
        for row in await self.locator(self.CART_ITEMS).all():
            name = await row.locator(self.CART_ITEM_NAME).text_content()
            price_text = await row.locator(self.CART_ITEM_PRICE).text_content()
            quantity = await row.locator(self.CART_ITEM_QUANTITY).input_value()
            items.append(
                CartItem(
                    name=(name or "").strip(),
                    price=self.parse_amount(price_text, "$"),
                    quantity=int(quantity or 0),
                )
            )
        logger.debug(f"Read {len(items)} cart rows")
        return items

    async def remove_cart_item_by_index(self, index: int) -> None:
        await self.locator(self.REMOVE_BUTTON).nth(index).click()
        await self.wait_for_network_idle()

    async def remove_cart_item_by_name(self, name: str) -> None:
        await self.locator(
            f"//h4[text()='{name}']/ancestor::tr//button[@class='delete']"
        ).click()
        await self.wait_for_network_idle()
        logger.debug(f"Removed '{name}' from cart")

    async def get_subtotal(self) -> float:
        text = await self.locator(self.SUBTOTAL_AMOUNT).text_content()
        return self.parse_amount(text, "Rs. ")

    async def proceed_to_checkout(self) -> None:
        await self.locator(self.PROCEED_BUTTON).click()
        await self.wait_for_network_idle()
        logger.info("Proceeded to checkout")

    async def continue_shopping(self) -> None:
        await self.locator(self.CONTINUE_SHOPPING_BUTTON).click()
        await self.wait_for_network_idle()

    async def is_cart_empty(self) -> bool:
        """Whether the empty-cart message is shown; False when it cannot be read."""
        try:
            return await self.locator(self.EMPTY_CART_MESSAGE).is_visible()
        except PlaywrightError as e:
            logger.warning(f"Could not read empty-cart message: {e}")
            return False

    async def cart_item_exists(self, name: str) -> bool:
        return await self.locator(f"//h4[contains(text(), '{name}')]").first.is_visible()

    async def increase_quantity_by_index(self, index: int) -> None:
        await self.locator(self.INCREASE_QUANTITY).nth(index).click()
        await self.wait_for_network_idle()

    async def decrease_quantity_by_index(self, index: int) -> None:
        await self.locator(self.DECREASE_QUANTITY).nth(index).click()
        await self.wait_for_network_idle()

    async def calculate_total_price(self) -> float:
        """Sum of price times quantity over every cart row."""
        return sum(item.line_total for item in await self.get_cart_items())

    async def wait_for_cart_load(self) -> None:
        await self.wait_for_network_idle()

    async def get_item_quantity_by_index(self, index: int) -> int:
        quantity = await self.locator(self.CART_ITEM_QUANTITY).nth(index).input_value()
        return int(quantity)

    async def apply_promo_code(self, code: str) -> None:
        await self.locator(self.PROMO_CODE_INPUT).fill(code)
        await self.locator(self.APPLY_PROMO_BUTTON).click()
        await self.page.wait_for_timeout(self.PROMO_SETTLE_MS)
        logger.debug(f"Applied promo code {code}")
