"""Browser configuration models shared by the suite.

Defines the browser engines the suite can launch, viewport presets used by
the responsive checks, and the network mock description consumed by
NetworkInterceptor.
"""

from pydantic import BaseModel, Field
from typing import Dict, Any, Optional
from enum import Enum


class BrowserType(str, Enum):
    """Supported browser engines."""

    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"


class Viewport(BaseModel):
    """Browser viewport configuration."""

    name: str = Field(default="Desktop", description="Preset name")
    width: int = Field(default=1280, description="Viewport width")
    height: int = Field(default=720, description="Viewport height")
    device_scale_factor: float = Field(default=1.0, description="Device pixel ratio")
    is_mobile: bool = Field(default=False, description="Mobile viewport")
    has_touch: bool = Field(default=False, description="Touch support")

    def size(self) -> Dict[str, int]:
        """Return the size mapping expected by page.set_viewport_size()."""
        return {"width": self.width, "height": self.height}


MOBILE_VIEWPORT = Viewport(name="Mobile", width=375, height=667, is_mobile=True, has_touch=True)
TABLET_VIEWPORT = Viewport(name="Tablet", width=768, height=1024, has_touch=True)
DESKTOP_VIEWPORT = Viewport(name="Desktop", width=1920, height=1080)

RESPONSIVE_VIEWPORTS = [MOBILE_VIEWPORT, TABLET_VIEWPORT, DESKTOP_VIEWPORT]


class NetworkMock(BaseModel):
    """Network request mock configuration."""

    url_pattern: str = Field(description="URL pattern to match")
    method: Optional[str] = Field(default=None, description="HTTP method, None for any")

    # Response
    status: int = Field(default=200, description="Response status code")
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Response headers"
    )
    body: Optional[Any] = Field(default=None, description="Response body")

    # Behavior
    delay_ms: int = Field(default=0, description="Response delay")
    abort: bool = Field(default=False, description="Abort request")
