"""Shopping cart page."""

from decimal import Decimal

from ..errors import MismatchError, ParseError
from ..ledger import DEFAULT_TOLERANCE, CartLedger, parse_money_string, round_money, to_decimal
from ..models import LineItem
from .base import BasePage, quoted


class CartPage(BasePage):
    """Cart table, totals and the way into checkout."""

    PAGE_HEADING = 'role=heading[name="Shopping cart"]'
    TERMS_OF_SERVICE_CHECKBOX = "#termsofservice"
    CHECKOUT_BUTTON = "#checkout"
    PRODUCT_ROWS = ".cart tbody tr"
    PRODUCT_NAMES = ".cart tbody tr .product-name"
    PRODUCT_SUBTOTALS = ".cart tbody tr .product-subtotal"

    # Dynamic selectors

    def product_row(self, name: str) -> str:
        return f"{self.PRODUCT_ROWS}:has(.product-name:text-is({quoted(name)}))"

    def unit_price_cell(self, name: str) -> str:
        return f"{self.product_row(name)} .product-unit-price"

    def quantity_input(self, name: str) -> str:
        return f"{self.product_row(name)} .qty-input"

    def subtotal_cell(self, name: str) -> str:
        return f"{self.product_row(name)} .product-subtotal"

    def totals_value(self, label: str) -> str:
        """Value cell of a row in the totals box, e.g. "Sub-Total:"."""
        return f".cart-total tr:has(.cart-total-left:text-is({quoted(label)})) .cart-total-right"

    # Reading

    def is_loaded(self) -> bool:
        return self.driver.is_visible(self.PAGE_HEADING)

    def product_names(self) -> list[str]:
        return [name for name in self.driver.read_all_texts(self.PRODUCT_NAMES) if name]

    def read_line_item(self, name: str) -> LineItem:
        unit_price = parse_money_string(self.driver.read_text(self.unit_price_cell(name)))
        raw_quantity = self.driver.input_value(self.quantity_input(name)).strip()
        if not raw_quantity.isdigit():
            raise ParseError(raw_quantity, f"quantity of {name!r}")
        return LineItem(product_name=name, unit_price=unit_price, quantity=int(raw_quantity))

    def read_row_subtotal(self, name: str) -> Decimal:
        return parse_money_string(self.driver.read_text(self.subtotal_cell(name)))

    def read_subtotal(self) -> Decimal:
        return parse_money_string(self.driver.read_text(self.totals_value("Sub-Total:")))

    def read_shipping(self) -> Decimal:
        return parse_money_string(self.driver.read_text(self.totals_value("Shipping:")))

    def read_tax(self) -> Decimal:
        return parse_money_string(self.driver.read_text(self.totals_value("Tax:")))

    def read_total(self) -> Decimal:
        return parse_money_string(self.driver.read_text(self.totals_value("Total:")))

    # Verification

    def verify_product_in_cart(self, name: str, expected_price, expected_quantity: int) -> LineItem:
        """
        Check a cart row against what the test added.

        Verifies the unit price, the quantity and that the row subtotal is
        price x quantity.

        Returns:
            The line item as read from the row

        Raises:
            MismatchError: naming the first value that disagrees
        """
        self.driver.wait_visible(self.product_row(name))
        item = self.read_line_item(name)

        expected_price = to_decimal(expected_price)
        if item.unit_price != expected_price:
            raise MismatchError(f"unit price of {name!r}", expected=expected_price, actual=item.unit_price)
        if item.quantity != expected_quantity:
            raise MismatchError(f"quantity of {name!r}", expected=expected_quantity, actual=item.quantity)

        expected_subtotal = round_money(expected_price * expected_quantity)
        row_subtotal = self.read_row_subtotal(name)
        if abs(row_subtotal - expected_subtotal) >= DEFAULT_TOLERANCE:
            raise MismatchError(f"subtotal of {name!r}", expected=expected_subtotal, actual=row_subtotal)

        return item

    def collect_ledger(self, tolerance: Decimal = DEFAULT_TOLERANCE) -> CartLedger:
        """Build a ledger from every row currently in the cart."""
        ledger = CartLedger(tolerance=tolerance)
        for name in self.product_names():
            item = self.read_line_item(name)
            ledger.add_line_item(item.product_name, item.unit_price, item.quantity)
        return ledger

    def verify_cart_totals(self, ledger: CartLedger) -> Decimal:
        """Check the cart's Sub-Total against the ledger."""
        return ledger.verify_against(self.read_subtotal())

    def calculate_total_from_products(self) -> Decimal:
        """Sum the subtotal column of the cart table."""
        subtotals = self.driver.read_all_texts(self.PRODUCT_SUBTOTALS)
        return round_money(sum((parse_money_string(text) for text in subtotals), Decimal("0")))

    # Actions

    def proceed_to_checkout(self) -> None:
        """Accept the terms of service and start checkout."""
        self.driver.check(self.TERMS_OF_SERVICE_CHECKBOX)
        self.driver.click_and_wait(self.CHECKOUT_BUTTON)
