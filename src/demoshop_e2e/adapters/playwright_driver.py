"""Playwright implementation of the page driver."""

import logging
from contextlib import contextmanager
from pathlib import Path
from urllib.parse import urljoin

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..config import TimeoutConfig
from ..errors import DriverTimeoutError
from .base import PageDriver

log = logging.getLogger(__name__)


class PlaywrightDriver(PageDriver):
    """Drive a Playwright page with string selectors."""

    def __init__(self, page: Page, base_url: str, timeouts: TimeoutConfig | None = None):
        self.page = page
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeouts = timeouts or TimeoutConfig()

        page.set_default_timeout(self.timeouts.action_ms)
        page.set_default_navigation_timeout(self.timeouts.navigation_ms)

    def goto(self, path: str = "") -> None:
        url = urljoin(self.base_url, path.lstrip("/"))
        log.debug("goto %s", url)
        with self._translate("goto", url, self.timeouts.navigation_ms):
            self.page.goto(url, wait_until="domcontentloaded")

    def click(self, selector: str) -> None:
        log.debug("click %s", selector)
        with self._translate("click", selector):
            self._locate(selector).click()

    def click_and_wait(self, selector: str) -> None:
        log.debug("click and wait %s", selector)
        with self._translate("click", selector):
            self._locate(selector).click()
        with self._translate("page load", selector, self.timeouts.navigation_ms):
            self.page.wait_for_load_state("domcontentloaded")

    def fill_field(self, selector: str, value: str) -> None:
        log.debug("fill %s", selector)
        with self._translate("fill", selector):
            self._locate(selector).fill(value)

    def select_option(self, selector: str, label: str) -> None:
        log.debug("select %r in %s", label, selector)
        with self._translate("select", selector):
            self._locate(selector).select_option(label=label)

    def check(self, selector: str) -> None:
        log.debug("check %s", selector)
        with self._translate("check", selector):
            # Playwright's check() raises if the element did not end up checked
            self._locate(selector).check()

    def read_text(self, selector: str) -> str:
        with self._translate("read text", selector):
            return self._locate(selector).text_content() or ""

    def read_all_texts(self, selector: str) -> list[str]:
        with self._translate("read texts", selector):
            return [text.strip() for text in self._locate(selector).all_text_contents()]

    def input_value(self, selector: str) -> str:
        with self._translate("read value", selector):
            return self._locate(selector).input_value()

    def wait_visible(self, selector: str) -> None:
        log.debug("wait for %s", selector)
        with self._translate("wait for visibility", selector):
            self._locate(selector).wait_for(state="visible")

    def is_visible(self, selector: str) -> bool:
        return self._locate(selector).is_visible()

    def count(self, selector: str) -> int:
        return self._locate(selector).count()

    def content(self) -> str:
        return self.page.content()

    def screenshot(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(path), full_page=True)
        return path

    def _locate(self, selector: str) -> Locator:
        return self.page.locator(selector)

    @contextmanager
    def _translate(self, action: str, selector: str, timeout_ms: float | None = None):
        """Surface Playwright timeouts as DriverTimeoutError."""
        try:
            yield
        except PlaywrightTimeoutError as e:
            raise DriverTimeoutError(
                action, selector, timeout_ms if timeout_ms is not None else self.timeouts.action_ms
            ) from e
