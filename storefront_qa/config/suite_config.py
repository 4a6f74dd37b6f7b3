"""Suite configuration with environment variable loading."""

import os
import logging
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from ..models.browser_models import BrowserType, Viewport

# Load environment variables from .env file
load_dotenv()

DEFAULT_TEST_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "test_data.json"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class SuiteConfig(BaseModel):
    """Configuration for the storefront acceptance suite."""

    # Target site
    base_url: str = Field(
        default_factory=lambda: os.getenv(
            "STOREFRONT_BASE_URL", "https://rahulshettyacademy.com/seleniumPractise/"
        ),
        description="Storefront home page URL",
    )
    login_url: str = Field(
        default_factory=lambda: os.getenv(
            "STOREFRONT_LOGIN_URL", "https://rahulshettyacademy.com/loginpagePractise/"
        ),
        description="Login practice page URL",
    )

    # Browser
    browser: BrowserType = Field(
        default_factory=lambda: BrowserType(os.getenv("STOREFRONT_BROWSER", "chromium")),
        description="Browser engine to launch",
    )
    headless: bool = Field(
        default_factory=lambda: _env_flag("STOREFRONT_HEADLESS", "true"),
        description="Run the browser headless",
    )
    slow_mo_ms: int = Field(
        default_factory=lambda: int(os.getenv("STOREFRONT_SLOW_MO", "0")),
        description="Delay inserted between browser operations",
    )

    # Timeouts
    default_timeout_ms: int = Field(
        default_factory=lambda: int(os.getenv("STOREFRONT_TIMEOUT_MS", "10000")),
        description="Default action timeout",
    )
    navigation_timeout_ms: int = Field(
        default_factory=lambda: int(os.getenv("STOREFRONT_NAVIGATION_TIMEOUT_MS", "30000")),
        description="Default navigation timeout",
    )
    load_time_threshold_ms: int = Field(
        default_factory=lambda: int(os.getenv("LOAD_TIME_THRESHOLD", "3000")),
        description="Maximum acceptable page load time",
    )

    # Artifacts
    screenshot_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("STOREFRONT_SCREENSHOT_DIR", "screenshots")),
        description="Directory for screenshots",
    )
    test_data_path: Path = Field(
        default_factory=lambda: Path(
            os.getenv("STOREFRONT_TEST_DATA", str(DEFAULT_TEST_DATA_PATH))
        ),
        description="JSON fixture read by TestDataFactory",
    )

    # Execution
    run_e2e: bool = Field(
        default_factory=lambda: _env_flag("STOREFRONT_RUN_E2E", "false"),
        description="Run the live suites against the storefront",
    )
    log_level: str = Field(
        default_factory=lambda: os.getenv("STOREFRONT_LOG_LEVEL", "INFO").upper(),
        description="Root log level for suite runs",
    )

    def viewport(self) -> Viewport:
        """Default desktop viewport for new contexts."""
        return Viewport()


_config: Optional[SuiteConfig] = None


def get_suite_config() -> SuiteConfig:
    """Return the process-wide suite configuration."""
    global _config
    if _config is None:
        _config = SuiteConfig()
    return _config


def reset_suite_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _config
    _config = None


def configure_logging(level: str = "INFO") -> None:
    """Configure a single stream handler for suite runs."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    # asyncio logs event loop selector setup at DEBUG
    logging.getLogger("asyncio").setLevel(logging.WARNING)
