"""Checkout flow - drives the one-page checkout through its steps in order."""

import logging
import re
from contextlib import contextmanager

from .adapters.base import CheckoutSteps
from .errors import InvalidStateError, ProtocolError, ValidationError
from .ledger import CartLedger
from .models import Address, CheckoutState, PaymentMethod, ShippingMethod

log = logging.getLogger(__name__)

ORDER_NUMBER_PATTERN = re.compile(r"[0-9]+")

# operation -> (required state, resulting state)
TRANSITIONS: dict[str, tuple[CheckoutState, CheckoutState]] = {
    "submit_billing_address": (CheckoutState.CREATED, CheckoutState.BILLING_ENTERED),
    "confirm_shipping_address": (
        CheckoutState.BILLING_ENTERED,
        CheckoutState.SHIPPING_ADDRESS_CONFIRMED,
    ),
    "select_shipping_method": (
        CheckoutState.SHIPPING_ADDRESS_CONFIRMED,
        CheckoutState.SHIPPING_METHOD_SELECTED,
    ),
    "select_payment_method": (
        CheckoutState.SHIPPING_METHOD_SELECTED,
        CheckoutState.PAYMENT_METHOD_SELECTED,
    ),
    "confirm_payment_info": (
        CheckoutState.PAYMENT_METHOD_SELECTED,
        CheckoutState.PAYMENT_INFO_CONFIRMED,
    ),
    "confirm_order": (CheckoutState.PAYMENT_INFO_CONFIRMED, CheckoutState.CONFIRMED),
}


class CheckoutFlow:
    """
    One checkout attempt, from billing address to placed order.

    Each operation is only allowed from the state the previous one left the
    flow in. Any error raised while performing a step moves the flow to
    FAILED and is re-raised unchanged. A call made in the wrong state raises
    InvalidStateError; with ``fail_on_misuse`` (the default) it also fails
    the flow, otherwise the state is left as it was.

    A flow instance belongs to a single scenario and must not be driven from
    more than one thread.
    """

    def __init__(
        self,
        ledger: CartLedger,
        steps: CheckoutSteps,
        *,
        fail_on_misuse: bool = True,
    ):
        self.ledger = ledger
        self.steps = steps
        self.fail_on_misuse = fail_on_misuse

        self.state = CheckoutState.CREATED
        self.history: list[CheckoutState] = [self.state]
        self.address: Address | None = None
        self.shipping_method: ShippingMethod | None = None
        self.payment_method: PaymentMethod | None = None
        self.order_number: str | None = None
        self.error: BaseException | None = None

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal

    def submit_billing_address(self, address: Address) -> None:
        with self._step("submit_billing_address"):
            address.validate()
            self.steps.fill_billing_address(address)
            self.address = address

    def confirm_shipping_address(self) -> None:
        """Ship to the billing address."""
        with self._step("confirm_shipping_address"):
            self.steps.continue_shipping_address()

    def select_shipping_method(self, method: ShippingMethod | str = ShippingMethod.GROUND) -> None:
        with self._step("select_shipping_method"):
            selected = _coerce(ShippingMethod, method, "shipping_method")
            self.steps.select_shipping_method(selected)
            self.shipping_method = selected

    def select_payment_method(
        self, method: PaymentMethod | str = PaymentMethod.CASH_ON_DELIVERY
    ) -> None:
        with self._step("select_payment_method"):
            selected = _coerce(PaymentMethod, method, "payment_method")
            self.steps.select_payment_method(selected)
            self.payment_method = selected

    def confirm_payment_info(self) -> None:
        """Cash on delivery needs no payment details."""
        with self._step("confirm_payment_info"):
            self.steps.continue_payment_info()

    def confirm_order(self, expected_total) -> str:
        """
        Verify the cart against the expected total and place the order.

        Returns:
            The order number

        Raises:
            MismatchError: if the ledger does not match ``expected_total``
            ProtocolError: if the confirmation page shows a malformed number
        """
        with self._step("confirm_order"):
            self.ledger.verify_against(expected_total)
            raw = self.steps.place_order()
            if not isinstance(raw, str) or not ORDER_NUMBER_PATTERN.fullmatch(raw):
                raise ProtocolError("Unexpected order number", raw)
            self.order_number = raw
        return self.order_number

    def complete(self, address: Address, expected_total) -> str:
        """Run every step with the default shipping and payment methods."""
        self.submit_billing_address(address)
        self.confirm_shipping_address()
        self.select_shipping_method()
        self.select_payment_method()
        self.confirm_payment_info()
        return self.confirm_order(expected_total)

    @contextmanager
    def _step(self, operation: str):
        required, target = TRANSITIONS[operation]

        if self.state is not required:
            error = InvalidStateError(operation, self.state, required)
            if self.fail_on_misuse and not self.is_terminal:
                self._fail(error)
            raise error

        try:
            yield
        except Exception as e:
            self._fail(e)
            raise

        self._move_to(target)

    def _move_to(self, state: CheckoutState) -> None:
        log.info("Checkout: %s -> %s", self.state.name, state.name)
        self.state = state
        self.history.append(state)

    def _fail(self, error: BaseException) -> None:
        log.warning("Checkout failed in %s: %s", self.state.name, error)
        self.error = error
        self._move_to(CheckoutState.FAILED)


def _coerce(enum_cls, value, field: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        supported = ", ".join(repr(m.value) for m in enum_cls)
        raise ValidationError(f"unsupported value {value!r} (supported: {supported})", field=field) from None
