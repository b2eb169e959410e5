"""Tests for the suite runner."""

import sys
from pathlib import Path

import pytest

from demoshop_e2e.config import Config
from demoshop_e2e.runner import FailedTest, SuiteRunner, parse_failures

SUMMARY = """
=========================== short test summary info ============================
FAILED tests/e2e/test_place_order.py::TestGuestCheckout::test_place_order - demoshop_e2e.errors.MismatchError: cart subtotal mismatch
ERROR tests/e2e/test_place_order.py::TestGuestCheckout::test_cart - DriverTimeoutError: Timed out
FAILED tests/e2e/test_login.py::test_bare
========================= 2 failed, 1 error in 12.34s ==========================
"""


class TestParseFailures:
    def test_summary_lines(self):
        failures = parse_failures(SUMMARY)

        assert [f.test_name for f in failures] == [
            "TestGuestCheckout::test_place_order",
            "TestGuestCheckout::test_cart",
            "test_bare",
        ]
        assert failures[0].test_file == Path("tests/e2e/test_place_order.py")
        assert failures[0].error_type == "MismatchError"
        assert failures[1].error_type == "DriverTimeoutError"
        assert failures[2].error_message == ""

    def test_error_type(self):
        assert FailedTest(Path("t.py"), "t", "DriverTimeoutError: Timed out").error_type == "DriverTimeoutError"
        assert FailedTest(Path("t.py"), "t", "assert 1 == 2").error_type == "-"
        qualified = "demoshop_e2e.errors.ParseError: Cannot parse money value"
        assert FailedTest(Path("t.py"), "t", qualified).error_type == "ParseError"

    def test_clean_output(self):
        assert parse_failures("3 passed in 1.00s") == []


class TestSuiteRunner:
    @pytest.fixture
    def runner(self, clean_env):
        return SuiteRunner(Config())

    def test_build_command(self, runner):
        cmd = runner.build_command(Path("tests/e2e"), keyword="place_order")

        assert cmd[:3] == [sys.executable, "-m", "pytest"]
        assert "--e2e" in cmd
        assert "-vv" in cmd
        assert cmd[-2:] == ["-k", "place_order"]

    def test_build_env(self, runner):
        env = runner.build_env(headed=True, browser="firefox")

        assert env["DEMO_WEBSHOP_URL"] == runner.config.url
        assert env["DEMO_WEBSHOP_BROWSER__HEADLESS"] == "false"
        assert env["DEMO_WEBSHOP_BROWSER__NAME"] == "firefox"
        assert "DEMO_WEBSHOP_ORDER_DATA" not in env

    def test_build_env_passes_order_data(self, clean_env):
        runner = SuiteRunner(Config(order_data=Path("orders/big.json")))

        env = runner.build_env()

        assert env["DEMO_WEBSHOP_ORDER_DATA"] == str(Path("orders/big.json"))
        assert "DEMO_WEBSHOP_BROWSER__HEADLESS" not in env
