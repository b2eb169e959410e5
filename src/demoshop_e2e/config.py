"""Configuration management for the Demo Web Shop suite."""

from decimal import Decimal
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file at import time
load_dotenv()

DEFAULT_URL = "https://demowebshop.tricentis.com/"
CONFIG_FILE_NAMES = ["demoshop_e2e.yaml", "demoshop_e2e.yml", ".demoshop_e2e.yaml"]


class BrowserConfig(BaseModel):
    """Browser launch configuration."""

    name: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
    slow_mo_ms: float = 0
    viewport_width: int = 1280
    viewport_height: int = 800


class TimeoutConfig(BaseModel):
    """Page driver timeouts."""

    action_ms: float = 10_000
    navigation_ms: float = 30_000
    open_attempts: int = Field(default=3, ge=1)


class LedgerConfig(BaseModel):
    """Cart verification configuration."""

    tolerance: Decimal = Decimal("0.01")


class ArtifactsConfig(BaseModel):
    """Failure artifact capture."""

    directory: Path = Path("test-results")
    capture_on_failure: bool = True
    screenshot: bool = True


class Config(BaseSettings):
    """Main configuration for the suite."""

    model_config = SettingsConfigDict(
        env_prefix="DEMO_WEBSHOP_",
        env_nested_delimiter="__",
    )

    # Core settings
    url: str = DEFAULT_URL
    order_data: Path | None = None
    log_level: str = "INFO"

    # Sub-configurations
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    timeouts: TimeoutConfig = Field(default_factory=TimeoutConfig)
    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    artifacts: ArtifactsConfig = Field(default_factory=ArtifactsConfig)


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from a YAML file and environment variables.

    Values given in the YAML file win over environment variables, which win
    over defaults.
    """
    config_data: dict = {}

    # Try to find config file
    if config_path is None:
        for name in CONFIG_FILE_NAMES:
            if Path(name).exists():
                config_path = Path(name)
                break

    if config_path and config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if raw and "demoshop_e2e" in raw:
                config_data = raw["demoshop_e2e"] or {}
            elif raw:
                config_data = raw

    return Config(**config_data)
