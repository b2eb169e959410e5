"""Core data models for the Demo Web Shop suite."""

import re
from dataclasses import dataclass, fields
from decimal import Decimal
from enum import Enum

from .errors import ValidationError

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


class CheckoutState(Enum):
    """Steps of the one-page checkout."""

    CREATED = "created"
    BILLING_ENTERED = "billing_entered"
    SHIPPING_ADDRESS_CONFIRMED = "shipping_address_confirmed"
    SHIPPING_METHOD_SELECTED = "shipping_method_selected"
    PAYMENT_METHOD_SELECTED = "payment_method_selected"
    PAYMENT_INFO_CONFIRMED = "payment_info_confirmed"
    CONFIRMED = "confirmed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES = frozenset({CheckoutState.CONFIRMED, CheckoutState.FAILED})


class ShippingMethod(Enum):
    """Shipping methods the suite knows how to select."""

    GROUND = "ground"


class PaymentMethod(Enum):
    """Payment methods the suite knows how to select."""

    CASH_ON_DELIVERY = "cash-on-delivery"


@dataclass(frozen=True)
class LineItem:
    """One product entry in the shopping cart."""

    product_name: str
    unit_price: Decimal
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass
class Address:
    """Billing address entered during checkout (reused for shipping)."""

    first_name: str
    last_name: str
    email: str
    country: str
    city: str
    address1: str
    zip_code: str
    phone_number: str
    company: str | None = None

    def validate(self) -> None:
        """
        Check that every required field is filled and the email looks valid.

        Raises:
            ValidationError: naming the first offending field
        """
        for f in fields(self):
            if f.name == "company":
                continue
            value = getattr(self, f.name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError("required field is empty", field=f.name)

        if not EMAIL_PATTERN.fullmatch(self.email.strip()):
            raise ValidationError(f"not a valid email address: {self.email!r}", field="email")
