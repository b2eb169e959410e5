"""
Order test data - the products to buy and the address to ship them to.

The data file mirrors the storefront's own vocabulary (camelCase keys):

    {
      "products": [
        {"category": "Books", "name": "Fiction", "quantity": 2, "expectedPrice": 24.00}
      ],
      "shippingDetails": {"firstName": "...", "zipCode": "...", ...}
    }
"""

import json
from decimal import Decimal
from pathlib import Path

import pydantic
import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .errors import ValidationError
from .ledger import DEFAULT_TOLERANCE, CartLedger, round_money
from .models import Address

DEFAULT_ORDER_DATA = Path(__file__).parent / "data" / "order_data.json"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductOrder(_CamelModel):
    """A product the journey adds to the cart."""

    category: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    expected_price: Decimal = Field(..., ge=0)

    @property
    def expected_subtotal(self) -> Decimal:
        return round_money(self.expected_price * self.quantity)


class ShippingDetails(_CamelModel):
    """Billing/shipping address as stored in the data file."""

    first_name: str
    last_name: str
    email: str
    company: str | None = None
    country: str
    city: str
    address1: str
    zip_code: str
    phone_number: str

    def to_address(self) -> Address:
        return Address(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            company=self.company,
            country=self.country,
            city=self.city,
            address1=self.address1,
            zip_code=self.zip_code,
            phone_number=self.phone_number,
        )


class OrderData(_CamelModel):
    """Everything the guest-checkout journey needs."""

    products: list[ProductOrder] = Field(..., min_length=1)
    shipping_details: ShippingDetails

    @property
    def expected_subtotal(self) -> Decimal:
        return round_money(sum((p.expected_price * p.quantity for p in self.products), Decimal("0")))

    def build_ledger(self, tolerance: Decimal = DEFAULT_TOLERANCE) -> CartLedger:
        """Ledger of what the cart should contain once every product is added."""
        ledger = CartLedger(tolerance=tolerance)
        for product in self.products:
            ledger.add_line_item(product.name, product.expected_price, product.quantity)
        return ledger


def load_order_data(path: Path | None = None) -> OrderData:
    """
    Load order data from a JSON or YAML file.

    Raises:
        ValidationError: if the file content does not describe a valid order
    """
    path = Path(path) if path else DEFAULT_ORDER_DATA

    with open(path) as f:
        if path.suffix in (".yaml", ".yml"):
            raw = yaml.safe_load(f)
        else:
            raw = json.load(f)

    try:
        return OrderData.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(f"invalid order data in {path}:\n{e}") from e
