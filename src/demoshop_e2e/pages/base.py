"""Shared plumbing for page objects."""

import json

from ..adapters.base import PageDriver


def quoted(text: str) -> str:
    """Quote text for use inside a selector, e.g. :text-is("...")."""
    return json.dumps(text)


class BasePage:
    """A page object holds a driver and the selectors of one page."""

    def __init__(self, driver: PageDriver):
        self.driver = driver
