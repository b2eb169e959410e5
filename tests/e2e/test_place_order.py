"""Guest checkout journey against the live Demo Web Shop."""

import re

import pytest

from demoshop_e2e.models import CheckoutState

pytestmark = pytest.mark.e2e


class TestGuestCheckout:
    """Add products, verify the cart, check out as a guest."""

    @pytest.fixture
    def filled_cart(self, storefront, product_page, cart_page, cart_ledger, order_data):
        """Add every product from the order data and open the cart."""
        for product in order_data.products:
            product_page.add_product_to_cart_with_quantity(product.category, product.name, product.quantity)
            cart_ledger.add_line_item(product.name, product.expected_price, product.quantity)

        product_page.go_to_shopping_cart()
        assert cart_page.is_loaded()
        return cart_page

    def test_storefront_loads(self, storefront):
        assert storefront.is_loaded()

    def test_cart_matches_ledger(self, filled_cart, product_page, cart_ledger, order_data):
        for product in order_data.products:
            filled_cart.verify_product_in_cart(product.name, product.expected_price, product.quantity)

        assert filled_cart.verify_cart_totals(cart_ledger) == order_data.expected_subtotal
        assert filled_cart.calculate_total_from_products() == order_data.expected_subtotal
        assert product_page.read_cart_quantity() == sum(p.quantity for p in order_data.products)

    def test_place_order(self, filled_cart, login_page, checkout_page, checkout_flow, order_data):
        filled_cart.proceed_to_checkout()
        login_page.checkout_as_guest()

        address = order_data.shipping_details.to_address()
        checkout_flow.submit_billing_address(address)
        checkout_flow.confirm_shipping_address()
        checkout_flow.select_shipping_method()
        checkout_flow.select_payment_method()
        checkout_flow.confirm_payment_info()

        assert checkout_page.verify_order_confirmation() >= order_data.expected_subtotal

        order_number = checkout_flow.confirm_order(order_data.expected_subtotal)

        assert re.fullmatch(r"[0-9]+", order_number)
        assert checkout_flow.state is CheckoutState.CONFIRMED
