"""Accessibility report models.

Each model mirrors the shape of one heuristic check run by
AccessibilityHelper. The full report aggregates them with a summary block.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Any, Optional


class ImageAltIssue(BaseModel):
    """Image rendered without usable alt text."""

    src: str = Field(description="Image source URL")
    has_alt: bool = Field(description="Whether an alt attribute exists at all")


class FormLabelIssue(BaseModel):
    """Form control with no label, wrapping label or aria-label."""

    type: str = Field(description="Element tag name")
    id: str = Field(default="no-id")
    name: str = Field(default="no-name")


class HeadingInfo(BaseModel):
    level: int
    text: str


class HeadingHierarchy(BaseModel):
    """Heading outline and whether it starts at h1 without skipping levels."""

    headings: List[HeadingInfo] = Field(default_factory=list)
    is_valid_hierarchy: bool = True
    issues: List[str] = Field(default_factory=list)


class ContrastIssue(BaseModel):
    """Text element whose contrast ratio is below the WCAG AA minimum."""

    element: str = Field(description="Element tag name")
    text: str = Field(description="Leading text of the element")
    color: str
    background_color: str
    ratio: float = Field(description="Computed contrast ratio")
    required_ratio: float = Field(description="Minimum ratio for this text size")


class FocusableElement(BaseModel):
    tag: str
    has_tab_index: bool = False
    tab_index: Optional[str] = None
    is_hidden: bool = False


class KeyboardNavigation(BaseModel):
    focusable_elements_count: int = 0
    elements: List[FocusableElement] = Field(
        default_factory=list, description="First ten focusable elements"
    )


class AriaAttribute(BaseModel):
    tag: str
    role: Optional[str] = None
    aria_label: Optional[str] = None
    aria_described_by: Optional[str] = None


class WcagViolation(BaseModel):
    """Condensed axe-core violation."""

    id: str
    description: str = ""
    impact: Optional[str] = None
    nodes: int = Field(default=0, description="Number of offending nodes")


class WcagCompliance(BaseModel):
    is_compliant: bool
    violation_count: int
    violations: List[WcagViolation] = Field(default_factory=list)
    scan_completed: bool = Field(default=True, description="False when axe-core could not run")
    note: Optional[str] = None


class PageStructure(BaseModel):
    title: str = ""
    has_landmarks: bool = False


class ScreenReaderSupport(BaseModel):
    has_title: bool = False
    has_main_content: bool = False
    has_navigation: bool = False
    page_structure: PageStructure = Field(default_factory=PageStructure)


class ReadabilityIssue(BaseModel):
    element: str
    issue: str
    font_size: Optional[float] = None
    line_height: Optional[float] = Field(
        default=None, description="Line height to font size ratio"
    )


class TextReadability(BaseModel):
    issues: List[ReadabilityIssue] = Field(default_factory=list)
    total_text_elements: int = 0


class AccessibilitySummary(BaseModel):
    has_image_alt_issues: bool
    has_form_label_issues: bool
    has_heading_hierarchy_issues: bool
    has_contrast_issues: bool
    is_wcag_compliant: bool


class AccessibilityReport(BaseModel):
    """Aggregate of every accessibility check for one page."""

    url: str = ""
    image_alt_issues: List[ImageAltIssue] = Field(default_factory=list)
    form_labels: List[FormLabelIssue] = Field(default_factory=list)
    heading_hierarchy: HeadingHierarchy
    contrast_issues: List[ContrastIssue] = Field(default_factory=list)
    keyboard_navigation: KeyboardNavigation
    aria_attributes: List[AriaAttribute] = Field(default_factory=list)
    wcag_compliance: WcagCompliance
    screen_reader_support: ScreenReaderSupport
    text_readability: TextReadability
    summary: AccessibilitySummary

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
