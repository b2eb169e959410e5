"""Demo Web Shop end-to-end suite: page objects, cart ledger and checkout flow."""

from .checkout import CheckoutFlow
from .ledger import CartLedger, parse_money_string
from .models import Address, CheckoutState, LineItem, PaymentMethod, ShippingMethod

__version__ = "0.1.0"

__all__ = [
    "Address",
    "CartLedger",
    "CheckoutFlow",
    "CheckoutState",
    "LineItem",
    "PaymentMethod",
    "ShippingMethod",
    "parse_money_string",
]
