"""Models package for the storefront suite."""

from .browser_models import (
    BrowserType,
    Viewport,
    NetworkMock,
    MOBILE_VIEWPORT,
    TABLET_VIEWPORT,
    DESKTOP_VIEWPORT,
    RESPONSIVE_VIEWPORTS,
)
from .page_models import (
    CheckoutDetails,
    PaymentDetails,
    PromoCode,
    Credentials,
    CartItem,
)
from .accessibility_models import AccessibilityReport
from .compliance_models import ComplianceReport
from .security_models import SecurityReport
from .performance_models import (
    NavigationTiming,
    PageTiming,
    CoreWebVitals,
    PageSize,
)

__all__ = [
    "BrowserType",
    "Viewport",
    "NetworkMock",
    "MOBILE_VIEWPORT",
    "TABLET_VIEWPORT",
    "DESKTOP_VIEWPORT",
    "RESPONSIVE_VIEWPORTS",
    "CheckoutDetails",
    "PaymentDetails",
    "PromoCode",
    "Credentials",
    "CartItem",
    "AccessibilityReport",
    "ComplianceReport",
    "SecurityReport",
    "NavigationTiming",
    "PageTiming",
    "CoreWebVitals",
    "PageSize",
]
