"""Page driver adapters."""

from .base import CheckoutSteps, PageDriver
from .playwright_driver import PlaywrightDriver

__all__ = ["CheckoutSteps", "PageDriver", "PlaywrightDriver"]
