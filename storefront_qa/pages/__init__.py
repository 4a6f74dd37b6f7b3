"""Page objects for the storefront.

Each page object wraps a Playwright page with the selectors and one-step
interactions of one screen.
"""

from .base_page import BasePage
from .home_page import HomePage
from .cart_page import CartPage
from .checkout_page import CheckoutPage
from .login_page import LoginPage

__all__ = [
    "BasePage",
    "HomePage",
    "CartPage",
    "CheckoutPage",
    "LoginPage",
]
