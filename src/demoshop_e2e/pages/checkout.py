"""One-page checkout."""

import logging
import re
from decimal import Decimal

from ..adapters.base import CheckoutSteps
from ..errors import MismatchError
from ..ledger import parse_money_string
from ..models import Address, PaymentMethod, ShippingMethod
from .base import BasePage

log = logging.getLogger(__name__)

ORDER_NUMBER_TEXT = re.compile(r"Order number:\s*(.*)", re.IGNORECASE | re.DOTALL)


class CheckoutPage(BasePage, CheckoutSteps):
    """
    The accordion-style checkout.

    Each "Continue" posts the section and opens the next one in place, so the
    page does not navigate; every step waits for the next section's controls
    to become visible instead.
    """

    # Billing address
    BILLING_FIRST_NAME = "#BillingNewAddress_FirstName"
    BILLING_LAST_NAME = "#BillingNewAddress_LastName"
    BILLING_EMAIL = "#BillingNewAddress_Email"
    BILLING_COMPANY = "#BillingNewAddress_Company"
    BILLING_COUNTRY = "#BillingNewAddress_CountryId"
    BILLING_CITY = "#BillingNewAddress_City"
    BILLING_ADDRESS1 = "#BillingNewAddress_Address1"
    BILLING_ZIP_CODE = "#BillingNewAddress_ZipPostalCode"
    BILLING_PHONE = "#BillingNewAddress_PhoneNumber"
    BILLING_CONTINUE = "#billing-buttons-container .button-1"

    # Shipping address
    SHIPPING_CONTINUE = "#shipping-buttons-container .button-1"

    # Shipping method
    SHIPPING_METHOD_CONTINUE = "#shipping-method-buttons-container .button-1"
    SHIPPING_OPTIONS = {ShippingMethod.GROUND: "#shippingoption_0"}

    # Payment method
    PAYMENT_METHOD_CONTINUE = "#payment-method-buttons-container .button-1"
    PAYMENT_OPTIONS = {PaymentMethod.CASH_ON_DELIVERY: "#paymentmethod_0"}

    # Payment info
    PAYMENT_INFO_CONTINUE = "#payment-info-buttons-container .button-1"

    # Confirm order
    CONFIRM_ORDER_BUTTON = "#confirm-order-buttons-container .button-1"
    CONFIRM_ORDER_TOTAL = ".order-total strong"
    ORDER_SUCCESS_MESSAGE = 'text="Your order has been successfully processed!"'
    ORDER_NUMBER = "text=/Order number: \\d+/"

    def fill_billing_address(self, address: Address) -> None:
        self.driver.fill_field(self.BILLING_FIRST_NAME, address.first_name)
        self.driver.fill_field(self.BILLING_LAST_NAME, address.last_name)
        self.driver.fill_field(self.BILLING_EMAIL, address.email)

        if address.company:
            self.driver.fill_field(self.BILLING_COMPANY, address.company)

        self.driver.select_option(self.BILLING_COUNTRY, address.country)
        self.driver.fill_field(self.BILLING_CITY, address.city)
        self.driver.fill_field(self.BILLING_ADDRESS1, address.address1)
        self.driver.fill_field(self.BILLING_ZIP_CODE, address.zip_code)
        self.driver.fill_field(self.BILLING_PHONE, address.phone_number)
        self.driver.click(self.BILLING_CONTINUE)
        self.driver.wait_visible(self.SHIPPING_CONTINUE)

    def continue_shipping_address(self) -> None:
        self.driver.click(self.SHIPPING_CONTINUE)
        self.driver.wait_visible(self.SHIPPING_METHOD_CONTINUE)

    def select_shipping_method(self, method: ShippingMethod = ShippingMethod.GROUND) -> None:
        self.driver.check(self.SHIPPING_OPTIONS[method])
        self.driver.click(self.SHIPPING_METHOD_CONTINUE)
        self.driver.wait_visible(self.PAYMENT_METHOD_CONTINUE)

    def select_payment_method(self, method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY) -> None:
        self.driver.check(self.PAYMENT_OPTIONS[method])
        self.driver.click(self.PAYMENT_METHOD_CONTINUE)
        self.driver.wait_visible(self.PAYMENT_INFO_CONTINUE)

    def continue_payment_info(self) -> None:
        self.driver.click(self.PAYMENT_INFO_CONTINUE)
        self.driver.wait_visible(self.CONFIRM_ORDER_BUTTON)

    def place_order(self) -> str:
        """Confirm the order and return what follows "Order number:"."""
        self.driver.click(self.CONFIRM_ORDER_BUTTON)
        self.driver.wait_visible(self.ORDER_SUCCESS_MESSAGE)

        text = self.driver.read_text(self.ORDER_NUMBER).strip()
        if match := ORDER_NUMBER_TEXT.search(text):
            text = match.group(1).strip()
        log.info("Order placed: %s", text)
        return text

    def read_confirmation_total(self) -> Decimal:
        return parse_money_string(self.driver.read_text(self.CONFIRM_ORDER_TOTAL))

    def verify_order_confirmation(self) -> Decimal:
        """
        Check the order total on the confirm step is positive.

        The total includes shipping and tax, so it is not compared with the
        cart subtotal here.
        """
        total = self.read_confirmation_total()
        if total <= 0:
            raise MismatchError("order total", expected="> 0", actual=total)
        return total
