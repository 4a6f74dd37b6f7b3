"""Configuration for the storefront suite."""

from .suite_config import (
    SuiteConfig,
    get_suite_config,
    reset_suite_config,
    configure_logging,
)

__all__ = ["SuiteConfig", "get_suite_config", "reset_suite_config", "configure_logging"]
