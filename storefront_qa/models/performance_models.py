"""Performance measurement models.

All durations are milliseconds as reported by the browser Performance API.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class NavigationTiming(BaseModel):
    """Phase breakdown of the navigation entry."""

    dns: float = 0.0
    tcp: float = 0.0
    ttfb: float = 0.0
    download: float = 0.0
    dom_interactive: float = 0.0
    dom_complete: float = 0.0
    load_complete: float = 0.0


class PageTiming(BaseModel):
    """Coarse timings used by TestUtil.get_navigation_timing()."""

    dom_content_loaded: float = 0.0
    load_complete: float = 0.0
    total_time: float = 0.0


class CoreWebVitals(BaseModel):
    lcp: float = Field(default=0.0, description="Largest Contentful Paint (ms)")
    fid: float = Field(default=0.0, description="First Input Delay (ms)")
    cls: float = Field(default=0.0, description="Cumulative Layout Shift")
    fcp: float = Field(default=0.0, description="First Contentful Paint (ms)")


class ApiTiming(BaseModel):
    url: str
    duration: float = 0.0
    transfer_size: int = 0
    decoded_body_size: int = 0


class ResourceTypeStats(BaseModel):
    count: int = 0
    size: int = 0


class PageSize(BaseModel):
    total_size: int = 0
    by_type: Dict[str, ResourceTypeStats] = Field(default_factory=dict)
    resource_count: int = 0


class JsExecutionTime(BaseModel):
    script_evaluate_time: float = 0.0
    total_js_time: float = 0.0


class ShiftSource(BaseModel):
    node: Optional[str] = None
    previous_rect: Optional[Dict[str, float]] = None
    current_rect: Optional[Dict[str, float]] = None


class LayoutShift(BaseModel):
    value: float
    time: float
    sources: List[ShiftSource] = Field(default_factory=list)
