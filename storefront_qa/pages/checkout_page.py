"""Checkout form of the storefront."""

from playwright.async_api import Error as PlaywrightError
from typing import Dict, Optional, Union, Any
import logging
import time

from .base_page import BasePage
from ..models.page_models import CheckoutDetails, PaymentDetails

logger = logging.getLogger(__name__)


class CheckoutPage(BasePage):
    """Customer details, payment details, terms and the Place Order button."""

    FIRST_NAME_INPUT = '[placeholder="First name"]'
    LAST_NAME_INPUT = '[placeholder="Last name"]'
    EMAIL_INPUT = '[placeholder="Email address"]'
    PHONE_INPUT = '[placeholder="Phone number"]'
    ADDRESS_INPUT = '[placeholder="Address"]'
    COUNTRY_INPUT = '[placeholder="Country"]'
    STATE_INPUT = '[placeholder="State"]'
    ZIP_INPUT = '[placeholder="Zip code"]'
    PLACE_ORDER_BUTTON = '//button[text()="Place Order"]'
    PAYMENT_METHOD_DROPDOWN = "#payment-method"
    CARD_NUMBER_INPUT = '[placeholder="Card number"]'
    EXPIRY_INPUT = '[placeholder="MM/YY"]'
    CVV_INPUT = '[placeholder="CVV"]'
    TERMS_CHECKBOX = '[class*="terms"] input'
    ERROR_MESSAGE = '[class*="error"]'
    SUCCESS_MESSAGE = '[class*="success"]'
    ORDER_SUMMARY = '[class*="summary"]'
    TOTAL_AMOUNT = '[class*="total"]'
    PROMO_CODE_INPUT = "#promo-code"
    APPLY_PROMO_BUTTON = '//button[text()="Apply"]'
    DISCOUNT_AMOUNT = '[class*="discount"]'

    # CheckoutDetails field -> input selector, in form order
    FIELD_SELECTORS = {
        "first_name": FIRST_NAME_INPUT,
        "last_name": LAST_NAME_INPUT,
        "email": EMAIL_INPUT,
        "phone": PHONE_INPUT,
        "address": ADDRESS_INPUT,
        "country": COUNTRY_INPUT,
        "state": STATE_INPUT,
        "zip_code": ZIP_INPUT,
    }
    REQUIRED_FIELDS = ("first_name", "last_name", "email", "phone", "address")

    PROMO_SETTLE_MS = 1000
    QUERY_TIMEOUT_MS = 2000
    PAGE_LOAD_TIMEOUT_MS = 5000

    async def fill_checkout_form(self, details: Union[CheckoutDetails, Dict[str, Any]]) -> None:
        """Type customer details into the form, skipping empty values.

        Args:
            details: CheckoutDetails or a mapping with the same keys
        """
        if isinstance(details, dict):
            details = CheckoutDetails.model_validate(details)

        filled = 0
        for field_name, selector in self.FIELD_SELECTORS.items():
            value = getattr(details, field_name)
            if value:
                await self.locator(selector).fill(value)
                filled += 1
        logger.debug(f"Filled {filled} checkout fields")

    async def select_payment_method(self, method: str) -> None:
        await self.locator(self.PAYMENT_METHOD_DROPDOWN).select_option(method)

    async def fill_payment_details(self, payment: Union[PaymentDetails, Dict[str, Any]]) -> None:
        if isinstance(payment, dict):
            payment = PaymentDetails.model_validate(payment)

        if payment.card_number:
            await self.locator(self.CARD_NUMBER_INPUT).fill(payment.card_number)
        if payment.expiry:
            await self.locator(self.EXPIRY_INPUT).fill(payment.expiry)
        if payment.cvv:
            await self.locator(self.CVV_INPUT).fill(payment.cvv)

    async def accept_terms(self) -> None:
        """Tick the terms checkbox unless it is already ticked."""
        checkbox = self.locator(self.TERMS_CHECKBOX)
        if not await checkbox.is_checked():
            await checkbox.click()

    async def apply_promo_code(self, code: str) -> None:
        await self.locator(self.PROMO_CODE_INPUT).fill(code)
        await self.locator(self.APPLY_PROMO_BUTTON).click()
        await self.page.wait_for_timeout(self.PROMO_SETTLE_MS)

    async def get_discount_amount(self) -> float:
        """Displayed discount as a positive number, 0.0 when none can be read."""
        try:
            text = await self.locator(self.DISCOUNT_AMOUNT).first.text_content(
                timeout=self.QUERY_TIMEOUT_MS
            )
            return self.parse_amount(text, "$", "-")
        except (PlaywrightError, ValueError) as e:
            logger.warning(f"Could not read discount amount: {e}")
            return 0.0

    async def get_total_amount(self) -> float:
        text = await self.locator(self.TOTAL_AMOUNT).first.text_content()
        return self.parse_amount(text, "$", "Total: ")

    async def place_order(self) -> float:
        """Click Place Order and wait for the network to settle.

        Returns:
            Elapsed time in milliseconds
        """
        start = time.perf_counter()
        await self.locator(self.PLACE_ORDER_BUTTON).click()
        await self.wait_for_network_idle()
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"Order placed in {elapsed_ms:.0f}ms")
        return elapsed_ms

    async def _message_text(self, selector: str) -> Optional[str]:
        try:
            return await self.locator(selector).first.text_content(
                timeout=self.QUERY_TIMEOUT_MS
            )
        except PlaywrightError as e:
            logger.warning(f"No message found for {selector}: {e}")
            return None

    async def get_error_message(self) -> Optional[str]:
        return await self._message_text(self.ERROR_MESSAGE)

    async def get_success_message(self) -> Optional[str]:
        return await self._message_text(self.SUCCESS_MESSAGE)

    async def verify_required_fields_visible(self) -> Dict[str, bool]:
        """Visibility of each required customer field, keyed by field name."""
        return {
            field_name: await self.locator(self.FIELD_SELECTORS[field_name]).is_visible()
            for field_name in self.REQUIRED_FIELDS
        }

    async def clear_all_fields(self) -> None:
        for field_name in self.REQUIRED_FIELDS:
            await self.locator(self.FIELD_SELECTORS[field_name]).clear()

    async def has_valid_email_field(self) -> bool:
        """Whether the email input is declared as ``type="email"``."""
        return await self.locator(self.EMAIL_INPUT).get_attribute("type") == "email"

    async def try_submit_empty_form(self) -> bool:
        """Click Place Order without filling anything.

        Returns:
            True if the click went through, False if the button could not be clicked
        """
        try:
            await self.locator(self.PLACE_ORDER_BUTTON).click(timeout=self.QUERY_TIMEOUT_MS)
            return True
        except PlaywrightError as e:
            logger.warning(f"Place Order could not be clicked: {e}")
            return False

    async def wait_for_checkout_page_load(self) -> None:
        await self.wait_for_network_idle()
        await self.locator(self.FIRST_NAME_INPUT).wait_for(timeout=self.PAGE_LOAD_TIMEOUT_MS)

    async def get_order_summary(self) -> Optional[str]:
        return await self.locator(self.ORDER_SUMMARY).first.text_content()

    async def is_terms_checkbox_visible(self) -> bool:
        return await self.locator(self.TERMS_CHECKBOX).is_visible()

    async def scroll_to_field(self, selector: str) -> None:
        await self.locator(selector).scroll_into_view_if_needed()
