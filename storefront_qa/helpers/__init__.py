"""Heuristic check helpers.

Each helper wraps one Playwright page and returns pydantic report models:
- AccessibilityHelper: WCAG 2.1 signals and axe-core scans
- ComplianceHelper: GDPR, PCI-DSS, CCPA and related indicators
- SecurityHelper: headers, cookies and markup heuristics
- PerformanceHelper: navigation timing, web vitals, page weight
- TestUtil: screenshots, storage, cookies, network toggles
"""

from .accessibility_helper import AccessibilityHelper
from .compliance_helper import ComplianceHelper
from .security_helper import SecurityHelper
from .performance_helper import PerformanceHelper
from .test_util import TestUtil

__all__ = [
    "AccessibilityHelper",
    "ComplianceHelper",
    "SecurityHelper",
    "PerformanceHelper",
    "TestUtil",
]
