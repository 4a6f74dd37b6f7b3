"""Browser lifecycle and network interception.

This package provides Playwright-based browser management for the suites:
- PlaywrightManager: browser, context and page lifecycle
- NetworkInterceptor: request throttling and mocking
"""

from .playwright_integration import PlaywrightManager
from .network_interceptor import NetworkInterceptor

__all__ = [
    "PlaywrightManager",
    "NetworkInterceptor",
]
