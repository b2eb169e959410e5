"""Shared fixtures for the suite's own tests."""

import os
from pathlib import Path

import pytest

from demoshop_e2e.adapters.base import PageDriver
from demoshop_e2e.errors import DriverTimeoutError

pytest_plugins = ["demoshop_e2e.plugins.pages", "demoshop_e2e.plugins.capture"]


class FakeDriver(PageDriver):
    """In-memory page driver: canned texts in, recorded actions out."""

    def __init__(self):
        self.texts: dict[str, str] = {}
        self.text_lists: dict[str, list[str]] = {}
        self.values: dict[str, str] = {}
        self.counts: dict[str, int] = {}
        self.hidden: set[str] = set()
        self.html = "<html><body><h1>Demo Web Shop</h1></body></html>"
        self.actions: list[tuple] = []

    def goto(self, path: str = "") -> None:
        self.actions.append(("goto", path))

    def click(self, selector: str) -> None:
        self.actions.append(("click", selector))

    def click_and_wait(self, selector: str) -> None:
        self.actions.append(("click_and_wait", selector))

    def fill_field(self, selector: str, value: str) -> None:
        self.actions.append(("fill", selector, value))

    def select_option(self, selector: str, label: str) -> None:
        self.actions.append(("select", selector, label))

    def check(self, selector: str) -> None:
        self.actions.append(("check", selector))

    def read_text(self, selector: str) -> str:
        if selector not in self.texts:
            raise DriverTimeoutError("read text", selector, 10_000)
        return self.texts[selector]

    def read_all_texts(self, selector: str) -> list[str]:
        return list(self.text_lists.get(selector, []))

    def input_value(self, selector: str) -> str:
        if selector not in self.values:
            raise DriverTimeoutError("read value", selector, 10_000)
        return self.values[selector]

    def wait_visible(self, selector: str) -> None:
        if selector in self.hidden:
            raise DriverTimeoutError("wait for visibility", selector, 10_000)
        self.actions.append(("wait_visible", selector))

    def is_visible(self, selector: str) -> bool:
        return selector not in self.hidden

    def count(self, selector: str) -> int:
        return self.counts.get(selector, 0)

    def content(self) -> str:
        return self.html

    def screenshot(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x89PNG")
        return path

    def performed(self, kind: str) -> list[str]:
        """Selectors of every recorded action of one kind."""
        return [action[1] for action in self.actions if action[0] == kind]


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No DEMO_WEBSHOP_* variables and no config file in the working directory."""
    for name in list(os.environ):
        if name.startswith("DEMO_WEBSHOP_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
