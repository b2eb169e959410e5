"""Run the browser suite through pytest in a subprocess."""

import os
import re
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .config import Config

DEFAULT_SUITE = Path("tests/e2e")

# FAILED tests/e2e/test_place_order.py::TestGuestCheckout::test_x - MismatchError: ...
FAILED_LINE = re.compile(r"^(?:FAILED|ERROR)\s+(\S+?)::(\S+)(?:\s+-\s+(.+))?$", re.MULTILINE)

# demoshop_e2e.errors.MismatchError: ... -> MismatchError
ERROR_TYPE = re.compile(r"(?:[\w.]+\.)?(\w+(?:Error|Exception))\b")


@dataclass
class FailedTest:
    """A failing test as reported in pytest's short summary."""

    test_file: Path
    test_name: str
    error_message: str

    @property
    def error_type(self) -> str:
        """Exception class name at the start of the message, if any."""
        if match := ERROR_TYPE.match(self.error_message):
            return match.group(1)
        return "-"


@dataclass
class RunResult:
    """Outcome of a suite run."""

    return_code: int
    output: str
    failures: list[FailedTest] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.return_code == 0


class SuiteRunner:
    """Build the pytest command line for the e2e suite and run it."""

    def __init__(self, config: Config):
        self.config = config

    def build_command(
        self,
        suite: Path = DEFAULT_SUITE,
        keyword: str | None = None,
    ) -> list[str]:
        cmd = [sys.executable, "-m", "pytest", str(suite), "--e2e", "-rfE", "-vv"]
        if keyword:
            cmd += ["-k", keyword]
        return cmd

    def build_env(self, headed: bool = False, browser: str | None = None) -> dict[str, str]:
        """Pass settings to the child process through DEMO_WEBSHOP_* variables."""
        env = {**os.environ, "DEMO_WEBSHOP_URL": self.config.url}
        if headed:
            env["DEMO_WEBSHOP_BROWSER__HEADLESS"] = "false"
        if browser:
            env["DEMO_WEBSHOP_BROWSER__NAME"] = browser
        if self.config.order_data:
            env["DEMO_WEBSHOP_ORDER_DATA"] = str(self.config.order_data)
        return env

    def run(
        self,
        suite: Path = DEFAULT_SUITE,
        keyword: str | None = None,
        headed: bool = False,
        browser: str | None = None,
    ) -> RunResult:
        result = subprocess.run(
            self.build_command(suite, keyword),
            capture_output=True,
            cwd=Path.cwd(),
            text=True,
            env=self.build_env(headed, browser),
        )
        output = result.stdout + "\n" + result.stderr
        return RunResult(
            return_code=result.returncode,
            output=output,
            failures=parse_failures(output),
        )


def parse_failures(output: str) -> list[FailedTest]:
    """Extract failing tests from pytest's short test summary."""
    failures = []
    for match in FAILED_LINE.finditer(output):
        failures.append(FailedTest(
            test_file=Path(match.group(1)),
            test_name=match.group(2),
            error_message=(match.group(3) or "").strip(),
        ))
    return failures
