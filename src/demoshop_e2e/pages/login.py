"""Login page of the Demo Web Shop."""

from ..errors import MismatchError
from .base import BasePage


class LoginPage(BasePage):
    """Sign-in form, also shown before checkout to anonymous visitors."""

    LOGIN_LINK = ".header-links .ico-login"
    LOGOUT_LINK = ".header-links .ico-logout"
    ACCOUNT_EMAIL = ".header-links .account"
    EMAIL_INPUT = "#Email"
    PASSWORD_INPUT = "#Password"
    LOGIN_BUTTON = 'role=button[name="Log in"]'
    WELCOME_SIGN_IN = 'text="Welcome, Please Sign In!"'
    CHECKOUT_AS_GUEST_BUTTON = 'role=button[name="Checkout as Guest"]'

    def open(self) -> None:
        self.driver.goto()

    def login(self, email: str, password: str) -> None:
        """Sign in and wait for the logout link to confirm it worked."""
        self.driver.click_and_wait(self.LOGIN_LINK)
        self.driver.fill_field(self.EMAIL_INPUT, email)
        self.driver.fill_field(self.PASSWORD_INPUT, password)
        self.driver.click_and_wait(self.LOGIN_BUTTON)
        self.driver.wait_visible(self.LOGOUT_LINK)

    def login_and_verify(self, email: str, password: str) -> None:
        self.login(email, password)
        shown = self.driver.read_text(self.ACCOUNT_EMAIL).strip()
        if email not in shown:
            raise MismatchError("account email", expected=email, actual=shown)

    def checkout_as_guest(self) -> None:
        self.driver.click_and_wait(self.CHECKOUT_AS_GUEST_BUTTON)
