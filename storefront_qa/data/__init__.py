"""Test data for the storefront suites."""

from .test_data_factory import TestDataFactory

__all__ = ["TestDataFactory"]
