"""Browser-driven acceptance suite for the GreenKart demo storefront.

Provides page objects for the storefront pages, heuristic helpers for
accessibility, compliance, security and performance signals, a test data
factory, and the live pytest suites that drive them.
"""

__version__ = "0.1.0"
