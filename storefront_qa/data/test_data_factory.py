"""Fixture and randomized input data for the suites."""

import json
import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config.suite_config import get_suite_config
from ..models.page_models import (
    CheckoutDetails,
    PaymentDetails,
    PromoCode,
    CheckoutScenario,
    SecurityScenario,
)
from ..helpers.security_helper import XSS_PAYLOADS, SQL_INJECTION_PAYLOADS

logger = logging.getLogger(__name__)

FIRST_NAMES = ["John", "Jane", "Robert", "Mary", "Michael", "Patricia"]
LAST_NAMES = ["Doe", "Smith", "Johnson", "Williams", "Brown", "Jones"]
STATES = ["California", "New York", "Texas", "Florida", "Illinois"]

INVALID_EMAILS = [
    "test",
    "test@",
    "@example.com",
    "test @example.com",
    "test@example",
    "test..test@example.com",
]
INVALID_PHONES = ["123", "abc", "!@#$%", "12", ""]
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;:'\",.<>?/~`"

DEFAULT_SEARCH_TERM = "Tomato"
DEFAULT_PROMO_CODE = PromoCode(code="SAVE10", discount=10)
TEST_CARD_NUMBER = "4111111111111111"
TEST_CARD_EXPIRY = "12/25"


class TestDataFactory:
    """Serve fixture data from JSON and generate random inputs.

    The fixture holds ``valid_users``, ``invalid_users``, ``search_terms``,
    ``promo_codes`` and ``payment_methods``. Indexed getters fall back to a
    generated or default value when the index is out of range.

    PATTERN: Own a ``random.Random`` so a seed makes runs reproducible.
    """

    __test__ = False

    def __init__(self, data_path: Optional[Path] = None, seed: Optional[int] = None):
        """Initialize the factory and load the fixture.

        Args:
            data_path: JSON fixture; defaults to the configured one
            seed: Seed for the random generator
        """
        self.data_path = Path(data_path or get_suite_config().test_data_path)
        self.random = random.Random(seed)
        self.data: Dict[str, Any] = self._load_test_data()

    def _load_test_data(self) -> Dict[str, Any]:
        """Read the fixture; a missing or broken file yields empty data."""
        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            logger.debug(f"Loaded test data from {self.data_path}")
            return data
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load test data from {self.data_path}: {e}")
            return {}

    def _entry(self, key: str, index: int) -> Optional[Any]:
        entries = self.data.get(key) or []
        if 0 <= index < len(entries):
            return entries[index]
        return None

    def _digits(self, count: int) -> str:
        return "".join(self.random.choice("0123456789") for _ in range(count))

    def get_valid_user(self, index: int = 0) -> CheckoutDetails:
        entry = self._entry("valid_users", index)
        if entry is None:
            return self.generate_random_user()
        return CheckoutDetails.model_validate(entry)

    def get_all_valid_users(self) -> List[CheckoutDetails]:
        return [CheckoutDetails.model_validate(u) for u in self.data.get("valid_users", [])]

    def get_invalid_user(self, index: int = 0) -> CheckoutDetails:
        entry = self._entry("invalid_users", index)
        if entry is None:
            return self.generate_random_user()
        return CheckoutDetails.model_validate(entry)

    def get_all_invalid_users(self) -> List[CheckoutDetails]:
        return [CheckoutDetails.model_validate(u) for u in self.data.get("invalid_users", [])]

    def generate_random_user(self) -> CheckoutDetails:
        """A plausible US customer with a 10-digit phone and 5-digit zip code."""
        first_name = self.random.choice(FIRST_NAMES)
        last_name = self.random.choice(LAST_NAMES)
        return CheckoutDetails(
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name.lower()}.{last_name.lower()}@example.com",
            phone=self._digits(10),
            address=f"{self.random.randint(1, 999)} Main Street",
            country="USA",
            state=self.random.choice(STATES),
            zip_code=self._digits(5),
        )

    def get_search_term(self, index: int = 0) -> str:
        return self._entry("search_terms", index) or DEFAULT_SEARCH_TERM

    def get_all_search_terms(self) -> List[str]:
        return list(self.data.get("search_terms", []))

    def get_random_search_term(self) -> Optional[str]:
        terms = self.get_all_search_terms()
        if not terms:
            return None
        return self.random.choice(terms)

    def get_promo_code(self, index: int = 0) -> PromoCode:
        entry = self._entry("promo_codes", index)
        if entry is None:
            return DEFAULT_PROMO_CODE.model_copy()
        return PromoCode.model_validate(entry)

    def get_all_promo_codes(self) -> List[PromoCode]:
        return [PromoCode.model_validate(p) for p in self.data.get("promo_codes", [])]

    def get_payment_method(self, index: int = 0) -> PaymentDetails:
        entry = self._entry("payment_methods", index)
        if entry is None:
            return self.generate_credit_card()
        return PaymentDetails.model_validate(entry)

    def get_all_payment_methods(self) -> List[PaymentDetails]:
        return [PaymentDetails.model_validate(p) for p in self.data.get("payment_methods", [])]

    def generate_credit_card(self) -> PaymentDetails:
        """The Visa test number with a fixed expiry and a random 3-digit CVV."""
        return PaymentDetails(
            card_number=TEST_CARD_NUMBER,
            expiry=TEST_CARD_EXPIRY,
            cvv=self._digits(3),
        )

    def generate_invalid_email(self) -> str:
        return self.random.choice(INVALID_EMAILS)

    def generate_invalid_phone(self) -> str:
        return self.random.choice(INVALID_PHONES)

    def generate_xss_payload(self) -> str:
        return self.random.choice(XSS_PAYLOADS[:5])

    def generate_sql_injection_payload(self) -> str:
        return self.random.choice(SQL_INJECTION_PAYLOADS[:5])

    def generate_long_string(self, length: int = 1000) -> str:
        return "a" * length

    def generate_special_characters(self) -> str:
        return SPECIAL_CHARACTERS

    def generate_bulk_users(self, count: int = 10) -> List[CheckoutDetails]:
        return [self.generate_random_user() for _ in range(count)]

    def export_as_json(self) -> str:
        return json.dumps(self.data, indent=2)

    def create_checkout_scenario(self) -> CheckoutScenario:
        """First valid user, payment method and promo code plus up to three search terms."""
        return CheckoutScenario(
            user=self.get_valid_user(0),
            payment_method=self.get_payment_method(0),
            promo_code=self.get_promo_code(0),
            search_items=self.get_all_search_terms()[:3],
        )

    def create_security_test_scenario(self) -> SecurityScenario:
        return SecurityScenario(
            xss_payloads=list(XSS_PAYLOADS[:3]),
            sql_payloads=list(SQL_INJECTION_PAYLOADS[:3]),
            invalid_inputs=[
                self.generate_invalid_email(),
                self.generate_invalid_phone(),
                self.generate_long_string(500),
            ],
        )
