"""Pytest plugin to capture HTML snapshots and screenshots on test failure."""

import logging
import re
from datetime import datetime
from pathlib import Path

from ..adapters.base import PageDriver
from ..config import ArtifactsConfig

log = logging.getLogger(__name__)


def pytest_runtest_makereport(item, call):
    """Hook to execute after each test phase."""
    if call.when == "call" and call.excinfo is not None:
        driver = item.funcargs.get("page_driver")
        if isinstance(driver, PageDriver):
            config = item.funcargs.get("demoshop_config")
            artifacts = config.artifacts if config is not None else ArtifactsConfig()
            if artifacts.capture_on_failure:
                for name, path in capture_failure(driver, item.nodeid, artifacts):
                    item.user_properties.append((name, str(path)))


def capture_failure(driver: PageDriver, test_id: str, artifacts: ArtifactsConfig) -> list[tuple[str, Path]]:
    """
    Save the page HTML (and a screenshot) for a failed test.

    Returns:
        (kind, path) pairs for every artifact written
    """
    artifacts.directory.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    clean_name = re.sub(r"[^A-Za-z0-9_.-]+", "_", test_id)
    stem = f"{clean_name}_{timestamp}"

    saved = []
    try:
        html_path = artifacts.directory / f"{stem}.html"
        html_path.write_text(driver.content(), encoding="utf-8")
        saved.append(("snapshot_path", html_path))

        if artifacts.screenshot:
            saved.append(("screenshot_path", driver.screenshot(artifacts.directory / f"{stem}.png")))
    except Exception as e:
        # page may already be closed
        log.warning("Could not capture failure artifacts for %s: %s", test_id, e)

    return saved
