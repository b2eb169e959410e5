"""Collaborator interfaces the page objects and checkout flow are written against."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..models import Address, PaymentMethod, ShippingMethod


class PageDriver(ABC):
    """
    Abstract browser capability.

    Selectors are plain strings resolved on every call; implementations must
    not cache element handles between calls since the page changes under them.
    """

    @abstractmethod
    def goto(self, path: str = "") -> None:
        """Navigate to a path relative to the configured base URL."""
        pass

    @abstractmethod
    def click(self, selector: str) -> None:
        pass

    @abstractmethod
    def click_and_wait(self, selector: str) -> None:
        """Click and wait for the resulting page load."""
        pass

    @abstractmethod
    def fill_field(self, selector: str, value: str) -> None:
        pass

    @abstractmethod
    def select_option(self, selector: str, label: str) -> None:
        pass

    @abstractmethod
    def check(self, selector: str) -> None:
        """Check a checkbox or radio button and confirm it is checked."""
        pass

    @abstractmethod
    def read_text(self, selector: str) -> str:
        pass

    @abstractmethod
    def read_all_texts(self, selector: str) -> list[str]:
        pass

    @abstractmethod
    def input_value(self, selector: str) -> str:
        pass

    @abstractmethod
    def wait_visible(self, selector: str) -> None:
        pass

    @abstractmethod
    def is_visible(self, selector: str) -> bool:
        pass

    @abstractmethod
    def count(self, selector: str) -> int:
        pass

    @abstractmethod
    def content(self) -> str:
        """Return the current page HTML."""
        pass

    @abstractmethod
    def screenshot(self, path: Path) -> Path:
        pass


class CheckoutSteps(ABC):
    """UI side of each checkout step, including placing the order."""

    @abstractmethod
    def fill_billing_address(self, address: Address) -> None:
        pass

    @abstractmethod
    def continue_shipping_address(self) -> None:
        pass

    @abstractmethod
    def select_shipping_method(self, method: ShippingMethod) -> None:
        pass

    @abstractmethod
    def select_payment_method(self, method: PaymentMethod) -> None:
        pass

    @abstractmethod
    def continue_payment_info(self) -> None:
        pass

    @abstractmethod
    def place_order(self) -> str:
        """
        Confirm the order.

        Returns:
            The raw order number shown on the confirmation page
        """
        pass
