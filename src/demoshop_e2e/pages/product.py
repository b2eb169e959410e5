"""Category listing and product detail pages."""

import logging

from ..adapters.base import PageDriver
from ..errors import NotFoundError, ParseError, ValidationError
from ..navigation import CategoryTable
from .base import BasePage, quoted

log = logging.getLogger(__name__)


class ProductPage(BasePage):
    """Browse categories and add products to the cart."""

    SHOPPING_CART_LINK = ".header-links .ico-cart"
    CART_QUANTITY = ".header-links .cart-qty"
    SUCCESS_NOTIFICATION = ".bar-notification.success"
    CLOSE_NOTIFICATION = ".bar-notification .close"
    SUB_CATEGORY_ITEM = ".sub-category-item"
    QUANTITY_INPUT = ".product-essential .qty-input"
    ADD_TO_CART_DETAIL = '.product-essential input[value="Add to cart"]'

    def __init__(self, driver: PageDriver, categories: CategoryTable | None = None):
        super().__init__(driver)
        self.categories = categories if categories is not None else CategoryTable()

    # Dynamic selectors

    def category_link(self, name: str) -> str:
        """Top-level entry of the main menu."""
        return f".top-menu > li > a:text-is({quoted(name)})"

    def subcategory_link(self, name: str) -> str:
        return f"{self.SUB_CATEGORY_ITEM} a:text-is({quoted(name)}) >> nth=0"

    def product_link(self, name: str) -> str:
        return f".product-title a:text-is({quoted(name)})"

    def add_to_cart_button(self, name: str) -> str:
        return f'.product-item:has-text({quoted(name)}) input[value="Add to cart"]'

    # Actions

    def navigate_to_category(self, name: str) -> None:
        """
        Open a category page.

        Top-level categories are clicked directly in the menu. Subcategories
        are reached through their parent's page using the category table.

        Raises:
            NotFoundError: if the category is neither in the menu nor the table
        """
        if self.driver.count(self.category_link(name)) > 0:
            self.driver.click_and_wait(self.category_link(name))
            return

        parent = self.categories.parent_of(name)
        if parent is None:
            raise NotFoundError(name, kind="category")

        log.debug("Reaching subcategory %r through %r", name, parent)
        self.driver.click_and_wait(self.category_link(parent))
        self.driver.wait_visible(self.SUB_CATEGORY_ITEM)
        self.driver.click_and_wait(self.subcategory_link(name))

    def add_product_to_cart_from_listing(self, name: str) -> None:
        self.driver.click(self.add_to_cart_button(name))
        self._dismiss_success_notification()

    def add_product_to_cart_with_quantity(self, category: str, name: str, quantity: int) -> None:
        """Open the product's detail page, set the quantity and add it to the cart."""
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError(f"quantity must be a positive integer, got {quantity!r}", field="quantity")

        self.navigate_to_category(category)
        self.driver.click_and_wait(self.product_link(name))

        if quantity > 1:
            self.driver.fill_field(self.QUANTITY_INPUT, str(quantity))

        self.driver.click(self.ADD_TO_CART_DETAIL)
        self._dismiss_success_notification()
        log.info("Added %d x %r to cart", quantity, name)

    def read_cart_quantity(self) -> int:
        """Item count shown next to the header cart link, e.g. "(3)"."""
        text = self.driver.read_text(self.CART_QUANTITY).strip().strip("()")
        if not text.isdigit():
            raise ParseError(text, "cart quantity")
        return int(text)

    def go_to_shopping_cart(self) -> None:
        self.driver.click_and_wait(self.SHOPPING_CART_LINK)

    def _dismiss_success_notification(self) -> None:
        self.driver.wait_visible(self.SUCCESS_NOTIFICATION)
        self.driver.click(self.CLOSE_NOTIFICATION)
