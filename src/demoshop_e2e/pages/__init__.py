"""Page objects for the Demo Web Shop."""

from .cart import CartPage
from .checkout import CheckoutPage
from .home import HomePage
from .login import LoginPage
from .product import ProductPage

__all__ = ["CartPage", "CheckoutPage", "HomePage", "LoginPage", "ProductPage"]
