"""Login practice page."""

from playwright.async_api import Error as PlaywrightError
from typing import Dict, Optional, Union, Any
import logging
import time

from .base_page import BasePage
from ..config.suite_config import get_suite_config
from ..models.page_models import Credentials

logger = logging.getLogger(__name__)

SQL_INJECTION_PAYLOAD = "' OR '1'='1"
XSS_PAYLOAD = '<script>alert("XSS")</script>'


class LoginPage(BasePage):
    """Username/password form with its links and remember-me checkbox."""

    USERNAME_INPUT = "#username"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#signInBtn"
    FORGOT_PASSWORD_LINK = '//a[text()="Forgot Password"]'
    SIGNUP_LINK = '//a[text()="Sign up"]'
    LOGIN_TITLE = '//h1[contains(text(), "Login")]'
    ERROR_MESSAGE = '[class*="error"], .alert-danger'
    REMEMBER_ME_CHECKBOX = '[type="checkbox"]'

    QUERY_TIMEOUT_MS = 2000
    PAGE_LOAD_TIMEOUT_MS = 5000

    def __init__(self, page, login_url: Optional[str] = None):
        """Initialize the login page object.

        Args:
            page: Playwright page to drive
            login_url: Login page URL; defaults to the configured one
        """
        super().__init__(page)
        self.login_url = login_url or get_suite_config().login_url

    async def goto(self) -> None:
        await self.page.goto(self.login_url)
        await self.wait_for_network_idle()
        logger.info(f"Opened login page {self.login_url}")

    async def enter_username(self, username: str) -> None:
        await self.locator(self.USERNAME_INPUT).fill(username)

    async def enter_password(self, password: str) -> None:
        await self.locator(self.PASSWORD_INPUT).fill(password)

    async def click_login(self) -> float:
        """Click the login button and wait for the network to settle.

        Returns:
            Elapsed time in milliseconds
        """
        start = time.perf_counter()
        await self.locator(self.LOGIN_BUTTON).click()
        await self.wait_for_network_idle()
        return (time.perf_counter() - start) * 1000

    async def login(self, username: str, password: str) -> float:
        await self.enter_username(username)
        await self.enter_password(password)
        elapsed_ms = await self.click_login()
        logger.info(f"Submitted login for '{username}' in {elapsed_ms:.0f}ms")
        return elapsed_ms

    async def is_login_page_displayed(self) -> bool:
        return await self.locator(self.LOGIN_TITLE).is_visible()

    async def get_error_message(self) -> Optional[str]:
        """Text of the error banner, None when no banner can be read."""
        try:
            return await self.locator(self.ERROR_MESSAGE).first.text_content(
                timeout=self.QUERY_TIMEOUT_MS
            )
        except PlaywrightError as e:
            logger.warning(f"No login error message found: {e}")
            return None

    async def click_forgot_password(self) -> None:
        await self.locator(self.FORGOT_PASSWORD_LINK).click()
        await self.wait_for_network_idle()

    async def click_signup(self) -> None:
        await self.locator(self.SIGNUP_LINK).click()
        await self.wait_for_network_idle()

    async def check_remember_me(self) -> None:
        checkbox = self.locator(self.REMEMBER_ME_CHECKBOX).first
        if not await checkbox.is_checked():
            await checkbox.click()

    async def verify_login_page_elements(self) -> Dict[str, bool]:
        return {
            "username_input": await self.locator(self.USERNAME_INPUT).is_visible(),
            "password_input": await self.locator(self.PASSWORD_INPUT).is_visible(),
            "login_button": await self.locator(self.LOGIN_BUTTON).is_visible(),
            "forgot_password_link": await self.locator(self.FORGOT_PASSWORD_LINK).is_visible(),
        }

    async def test_sql_injection(self) -> float:
        """Submit a classic tautology payload in both fields."""
        await self.enter_username(SQL_INJECTION_PAYLOAD)
        await self.enter_password(SQL_INJECTION_PAYLOAD)
        return await self.click_login()

    async def test_xss_payload(self) -> float:
        """Submit a script tag as the username."""
        await self.enter_username(XSS_PAYLOAD)
        return await self.click_login()

    async def fill_login_form(self, credentials: Union[Credentials, Dict[str, Any]]) -> None:
        if isinstance(credentials, dict):
            credentials = Credentials.model_validate(credentials)

        if credentials.username:
            await self.enter_username(credentials.username)
        if credentials.password:
            await self.enter_password(credentials.password)

    async def wait_for_login_page_load(self) -> None:
        await self.wait_for_network_idle()
        await self.locator(self.LOGIN_TITLE).wait_for(timeout=self.PAGE_LOAD_TIMEOUT_MS)
