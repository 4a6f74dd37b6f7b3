"""Plain records passed between specs, page objects and the data factory."""

from pydantic import BaseModel, Field
from typing import List, Optional


class CheckoutDetails(BaseModel):
    """Customer details typed into the checkout form.

    Every field is optional; page objects skip empty values.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None


class PaymentDetails(BaseModel):
    """Card details for the payment section."""

    card_number: Optional[str] = None
    expiry: Optional[str] = None
    cvv: Optional[str] = None
    method: Optional[str] = Field(default=None, description="Payment method option value")


class PromoCode(BaseModel):
    """Promo code and the discount percentage it is expected to grant."""

    code: str
    discount: float = 0.0


class Credentials(BaseModel):
    """Login form credentials."""

    username: Optional[str] = None
    password: Optional[str] = None


class CartItem(BaseModel):
    """One row of the cart table."""

    name: str
    price: float
    quantity: int = 1

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class CheckoutScenario(BaseModel):
    """Everything one end-to-end checkout run needs."""

    user: CheckoutDetails
    payment_method: PaymentDetails
    promo_code: PromoCode
    search_items: List[str] = Field(default_factory=list)


class SecurityScenario(BaseModel):
    """Hostile inputs for form-level security runs."""

    xss_payloads: List[str] = Field(default_factory=list)
    sql_payloads: List[str] = Field(default_factory=list)
    invalid_inputs: List[str] = Field(default_factory=list)
