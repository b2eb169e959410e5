"""Cart ledger - tracks line items and verifies the subtotal shown by the cart."""

import logging
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterator

from .errors import MismatchError, NotFoundError, ParseError, ValidationError
from .models import LineItem

log = logging.getLogger(__name__)

MONEY_QUANTUM = Decimal("0.01")
DEFAULT_TOLERANCE = Decimal("0.01")

_CURRENCY_CHARS = re.compile(r"[$,]")
_NUMERIC = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def parse_money_string(text: str) -> Decimal:
    """
    Parse a price as rendered by the storefront, e.g. "$1,234.56".

    Raises:
        ParseError: if anything but a plain number remains after stripping
            currency symbols, thousands separators and whitespace
    """
    if not isinstance(text, str):
        raise ParseError(text, "expected a string")

    cleaned = _CURRENCY_CHARS.sub("", text.strip()).strip()
    if not _NUMERIC.fullmatch(cleaned):
        raise ParseError(text, "non-numeric residue")

    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ParseError(text) from e


def round_money(value: Decimal) -> Decimal:
    """Round to cents, half-up."""
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def to_decimal(value, field: str | None = None) -> Decimal:
    """Coerce a price given as Decimal, int, float or money string."""
    if isinstance(value, bool):
        raise ValidationError(f"not a price: {value!r}", field=field)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # str() keeps 9.5 as Decimal("9.5") instead of its binary expansion
        result = Decimal(str(value))
    elif isinstance(value, str):
        result = parse_money_string(value)
    else:
        raise ValidationError(f"not a price: {value!r}", field=field)

    # NaN and Infinity cannot be compared or rounded to cents
    if not result.is_finite():
        raise ValidationError(f"not a price: {value!r}", field=field)
    return result


class CartLedger:
    """Line items added to the cart, in the order they were added."""

    def __init__(self, tolerance: Decimal = DEFAULT_TOLERANCE):
        self.tolerance = Decimal(tolerance)
        self._items: dict[str, LineItem] = {}

    def add_line_item(self, product_name: str, unit_price, quantity: int) -> LineItem:
        """
        Record a product added to the cart.

        Adding a product that is already in the ledger merges the quantities,
        the same way the storefront merges repeated "Add to cart" clicks.

        Raises:
            ValidationError: for a blank name, negative price, a quantity
                below 1, or a repeat add at a different unit price
        """
        if not isinstance(product_name, str) or not product_name.strip():
            raise ValidationError("product name must not be empty", field="product_name")
        price = to_decimal(unit_price, field="unit_price")
        if price < 0:
            raise ValidationError(f"unit price must not be negative, got {price}", field="unit_price")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError(f"quantity must be a positive integer, got {quantity!r}", field="quantity")

        existing = self._items.get(product_name)
        if existing is not None:
            if existing.unit_price != price:
                raise ValidationError(
                    f"{product_name!r} already recorded at {existing.unit_price}, not {price}",
                    field="unit_price",
                )
            quantity += existing.quantity

        item = LineItem(product_name=product_name, unit_price=price, quantity=quantity)
        self._items[product_name] = item
        log.debug("Ledger: %s x%d @ %s", product_name, quantity, price)
        return item

    def subtotal_of(self, product_name: str) -> Decimal:
        """Subtotal of one line item."""
        item = self._items.get(product_name)
        if item is None:
            raise NotFoundError(product_name)
        return round_money(item.subtotal)

    def computed_subtotal(self) -> Decimal:
        """Sum of all line-item subtotals, rounded to cents."""
        return round_money(sum((item.subtotal for item in self._items.values()), Decimal("0")))

    def verify_against(self, reported_subtotal) -> Decimal:
        """
        Check a reported subtotal against the ledger.

        Returns:
            The computed subtotal

        Raises:
            MismatchError: if the two differ by the tolerance or more
        """
        reported = to_decimal(reported_subtotal)
        computed = self.computed_subtotal()
        if abs(computed - reported) >= self.tolerance:
            raise MismatchError("cart subtotal", expected=computed, actual=reported)
        return computed

    def clear(self) -> None:
        self._items.clear()

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items)

    def __contains__(self, product_name: object) -> bool:
        return product_name in self._items

    def __repr__(self) -> str:
        return f"CartLedger(items={len(self)}, subtotal={self.computed_subtotal()})"
