"""Home page of the Demo Web Shop."""

from .base import BasePage


class HomePage(BasePage):
    """Landing page with the header links."""

    WELCOME_MESSAGE = 'text="Welcome to our store"'
    LOGIN_LINK = ".header-links .ico-login"
    SHOPPING_CART_LINK = ".header-links .ico-cart"

    def open(self) -> None:
        self.driver.goto()

    def is_loaded(self) -> bool:
        return self.driver.is_visible(self.WELCOME_MESSAGE)

    def wait_until_loaded(self) -> None:
        self.driver.wait_visible(self.WELCOME_MESSAGE)

    def go_to_shopping_cart(self) -> None:
        self.driver.click_and_wait(self.SHOPPING_CART_LINK)

    def go_to_login(self) -> None:
        self.driver.click_and_wait(self.LOGIN_LINK)
