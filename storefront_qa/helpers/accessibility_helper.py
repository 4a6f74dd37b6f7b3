"""Accessibility heuristics for WCAG 2.1 signals on a rendered page.

This module provides the AccessibilityHelper class. Most checks run one DOM
query in the browser and return a pydantic model; the axe-core scan injects
the library from a CDN, and colour contrast ratios are computed here from
the computed styles the browser reports.
"""

import asyncio
import logging
import re
from typing import List, Optional, Dict, Any, Tuple

from playwright.async_api import Page, Error as PlaywrightError

from ..models.accessibility_models import (
    ImageAltIssue,
    FormLabelIssue,
    HeadingInfo,
    HeadingHierarchy,
    ContrastIssue,
    KeyboardNavigation,
    AriaAttribute,
    WcagViolation,
    WcagCompliance,
    ScreenReaderSupport,
    TextReadability,
    AccessibilitySummary,
    AccessibilityReport,
)

logger = logging.getLogger(__name__)

_RGB_PATTERN = re.compile(r"rgba?\(\s*([\d.]+)[,\s]+([\d.]+)[,\s]+([\d.]+)(?:[,\s/]+([\d.]+))?\s*\)")

_IMAGE_ALT_SCRIPT = """
() => Array.from(document.querySelectorAll('img'))
    .filter(img => !img.alt || img.alt.trim() === '')
    .map(img => ({ src: img.src, has_alt: img.hasAttribute('alt') }))
"""

_FORM_LABEL_SCRIPT = """
() => {
    const issues = [];
    document.querySelectorAll('input, textarea, select').forEach(input => {
        const id = input.id;
        const associatedLabel = id ? document.querySelector(`label[for="${id}"]`) : null;
        const parentLabel = input.closest('label');
        if (!associatedLabel && !parentLabel && !input.getAttribute('aria-label')) {
            issues.push({ type: input.tagName, id: id || 'no-id', name: input.name || 'no-name' });
        }
    });
    return issues;
}
"""

_HEADINGS_SCRIPT = """
() => Array.from(document.querySelectorAll('h1, h2, h3, h4, h5, h6')).map(h => ({
    level: parseInt(h.tagName[1]),
    text: h.textContent.trim(),
}))
"""

_CONTRAST_SCRIPT = """
() => {
    const transparent = c => c === 'transparent' || /rgba\\(.*,\\s*0\\)$/.test(c);
    const backgroundOf = el => {
        for (let node = el; node && node.nodeType === 1; node = node.parentElement) {
            const bg = window.getComputedStyle(node).backgroundColor;
            if (bg && !transparent(bg)) return bg;
        }
        return 'rgb(255, 255, 255)';
    };
    const samples = [];
    document.querySelectorAll('body *').forEach(el => {
        const ownText = Array.from(el.childNodes)
            .filter(n => n.nodeType === 3)
            .map(n => n.textContent)
            .join('')
            .trim();
        if (!ownText || el.offsetParent === null) return;
        const style = window.getComputedStyle(el);
        samples.push({
            element: el.tagName,
            text: ownText.slice(0, 50),
            color: style.color,
            background_color: backgroundOf(el),
            font_size: parseFloat(style.fontSize) || 16,
            font_weight: parseInt(style.fontWeight) || 400,
        });
    });
    return samples;
}
"""

_KEYBOARD_SCRIPT = """
() => {
    const focusable = document.querySelectorAll(
        'a, button, input, select, textarea, [tabindex]:not([tabindex="-1"])'
    );
    const elements = Array.from(focusable).map(el => ({
        tag: el.tagName,
        has_tab_index: el.hasAttribute('tabindex'),
        tab_index: el.getAttribute('tabindex'),
        is_hidden: el.offsetParent === null,
    }));
    return { focusable_elements_count: elements.length, elements: elements.slice(0, 10) };
}
"""

_ARIA_SCRIPT = """
() => Array.from(document.querySelectorAll('[role], [aria-label], [aria-describedby]')).map(el => ({
    tag: el.tagName,
    role: el.getAttribute('role'),
    aria_label: el.getAttribute('aria-label'),
    aria_described_by: el.getAttribute('aria-describedby'),
}))
"""

_SCREEN_READER_SCRIPT = """
() => {
    const title = document.title;
    const main = document.querySelector('main') || document.querySelector('[role="main"]');
    const nav = document.querySelector('nav') || document.querySelector('[role="navigation"]');
    return {
        has_title: !!title,
        has_main_content: !!main,
        has_navigation: !!nav,
        page_structure: { title: title, has_landmarks: !!main || !!nav },
    };
}
"""

_READABILITY_SCRIPT = """
() => {
    const textElements = document.querySelectorAll('p, span, div, h1, h2, h3, h4, h5, h6');
    const issues = [];
    textElements.forEach(el => {
        if (el.textContent.trim().length < 3) return;
        const style = window.getComputedStyle(el);
        const fontSize = parseInt(style.fontSize);
        const lineHeight = parseInt(style.lineHeight);
        if (fontSize < 12) {
            issues.push({ element: el.tagName, font_size: fontSize, issue: 'Font size too small' });
        }
        if (!isNaN(lineHeight) && fontSize > 0 && lineHeight / fontSize < 1.4) {
            issues.push({
                element: el.tagName,
                line_height: lineHeight / fontSize,
                issue: 'Line height too tight',
            });
        }
    });
    return { issues: issues, total_text_elements: textElements.length };
}
"""


def parse_css_color(value: str) -> Optional[Tuple[float, float, float, float]]:
    """Parse ``rgb()``/``rgba()`` computed colours.

    Returns:
        (r, g, b, alpha) or None when the value is not an rgb colour
    """
    match = _RGB_PATTERN.search(value or "")
    if not match:
        return None
    r, g, b, alpha = match.groups()
    return float(r), float(g), float(b), float(alpha) if alpha is not None else 1.0


def relative_luminance(rgb: Tuple[float, float, float]) -> float:
    """WCAG 2.1 relative luminance of an sRGB colour."""
    channels = []
    for channel in rgb:
        c = channel / 255.0
        channels.append(c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4)
    r, g, b = channels
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(
    foreground: Tuple[float, float, float], background: Tuple[float, float, float]
) -> float:
    """Contrast ratio between two colours, from 1.0 to 21.0."""
    lighter, darker = sorted(
        (relative_luminance(foreground), relative_luminance(background)), reverse=True
    )
    return (lighter + 0.05) / (darker + 0.05)


def is_large_text(font_size_px: float, font_weight: int) -> bool:
    """Large text is 18pt (24px), or 14pt (18.66px) when bold."""
    return font_size_px >= 24 or (font_size_px >= 18.66 and font_weight >= 700)


class AccessibilityHelper:
    """Run accessibility checks against one page.

    Example:
        helper = AccessibilityHelper(page)
        report = await helper.get_full_accessibility_report()
        assert not report.summary.has_image_alt_issues
    """

    AXE_CORE_CDN = "https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.7.2/axe.min.js"
    WCAG_AA_TAGS = ["wcag2a", "wcag2aa", "wcag21a", "wcag21aa"]

    NORMAL_TEXT_RATIO = 4.5
    LARGE_TEXT_RATIO = 3.0

    def __init__(self, page: Page):
        self.page = page

    async def _inject_axe(self) -> None:
        if await self.page.evaluate("() => typeof axe !== 'undefined'"):
            return
        logger.info(f"Injecting axe-core library from {self.AXE_CORE_CDN}")
        await self.page.add_script_tag(url=self.AXE_CORE_CDN)

    async def run_axe_scan(self) -> Optional[Dict[str, Any]]:
        """Inject axe-core and run a WCAG 2.1 AA scan.

        Returns:
            Raw axe results (``violations``, ``passes``...), or None if the
            library could not be loaded or the scan failed
        """
        try:
            await self._inject_axe()
            results = await self.page.evaluate(
                """
                (tags) => axe.run(document, { runOnly: { type: 'tag', values: tags } })
                """,
                self.WCAG_AA_TAGS,
            )
            logger.info(
                f"axe scan completed: {len(results.get('violations', []))} violations"
            )
            return results
        except PlaywrightError as e:
            logger.warning(f"axe scan failed: {e}")
            return None

    async def get_accessibility_violations(self) -> List[Dict[str, Any]]:
        """axe violations, empty when the scan could not run."""
        results = await self.run_axe_scan()
        if not results:
            return []
        return results.get("violations", [])

    async def verify_image_alt_text(self) -> List[ImageAltIssue]:
        issues = await self.page.evaluate(_IMAGE_ALT_SCRIPT)
        return [ImageAltIssue.model_validate(issue) for issue in issues]

    async def verify_form_labels(self) -> List[FormLabelIssue]:
        issues = await self.page.evaluate(_FORM_LABEL_SCRIPT)
        return [FormLabelIssue.model_validate(issue) for issue in issues]

    async def verify_heading_hierarchy(self) -> HeadingHierarchy:
        """Check the outline starts at h1 and never skips a level going down."""
        headings = [
            HeadingInfo.model_validate(h) for h in await self.page.evaluate(_HEADINGS_SCRIPT)
        ]

        is_valid = True
        if headings and headings[0].level != 1:
            is_valid = False
        for previous, current in zip(headings, headings[1:]):
            if current.level > previous.level + 1:
                is_valid = False

        return HeadingHierarchy(
            headings=headings,
            is_valid_hierarchy=is_valid,
            issues=[] if is_valid else ["Invalid heading hierarchy detected"],
        )

    async def check_color_contrast(self) -> List[ContrastIssue]:
        """Find visible text whose contrast is below WCAG AA.

        Returns:
            One issue per element below 4.5:1 (3:1 for large text)
        """
        samples = await self.page.evaluate(_CONTRAST_SCRIPT)
        issues = []

        for sample in samples:
            foreground = parse_css_color(sample["color"])
            background = parse_css_color(sample["background_color"])
            if foreground is None or background is None or foreground[3] == 0:
                continue

            ratio = contrast_ratio(foreground[:3], background[:3])
            required = (
                self.LARGE_TEXT_RATIO
                if is_large_text(sample["font_size"], sample["font_weight"])
                else self.NORMAL_TEXT_RATIO
            )
            if ratio < required:
                issues.append(
                    ContrastIssue(
                        element=sample["element"],
                        text=sample["text"],
                        color=sample["color"],
                        background_color=sample["background_color"],
                        ratio=round(ratio, 2),
                        required_ratio=required,
                    )
                )

        logger.info(f"Contrast check: {len(issues)} of {len(samples)} text elements below AA")
        return issues

    async def verify_keyboard_navigation(self) -> KeyboardNavigation:
        return KeyboardNavigation.model_validate(await self.page.evaluate(_KEYBOARD_SCRIPT))

    async def verify_aria_attributes(self) -> List[AriaAttribute]:
        return [AriaAttribute.model_validate(a) for a in await self.page.evaluate(_ARIA_SCRIPT)]

    async def check_wcag21_compliance_aa(self) -> WcagCompliance:
        """Summarise an axe scan; a scan that did not run is never compliant."""
        results = await self.run_axe_scan()
        if results is None:
            return WcagCompliance(
                is_compliant=False,
                violation_count=0,
                scan_completed=False,
                note="axe-core scan did not run; compliance unknown",
            )

        violations = results.get("violations", [])
        return WcagCompliance(
            is_compliant=not violations,
            violation_count=len(violations),
            violations=[
                WcagViolation(
                    id=v.get("id", ""),
                    description=v.get("description", ""),
                    impact=v.get("impact"),
                    nodes=len(v.get("nodes", [])),
                )
                for v in violations
            ],
        )

    async def verify_screen_reader_support(self) -> ScreenReaderSupport:
        return ScreenReaderSupport.model_validate(
            await self.page.evaluate(_SCREEN_READER_SCRIPT)
        )

    async def verify_text_readability(self) -> TextReadability:
        """Flag text under 12px and line heights under 1.4x the font size."""
        return TextReadability.model_validate(await self.page.evaluate(_READABILITY_SCRIPT))

    async def get_full_accessibility_report(self) -> AccessibilityReport:
        """Run every check concurrently and summarise them."""
        (
            image_alt_issues,
            form_labels,
            headings,
            contrast_issues,
            keyboard_navigation,
            aria_attributes,
            wcag_compliance,
            screen_reader_support,
            text_readability,
        ) = await asyncio.gather(
            self.verify_image_alt_text(),
            self.verify_form_labels(),
            self.verify_heading_hierarchy(),
            self.check_color_contrast(),
            self.verify_keyboard_navigation(),
            self.verify_aria_attributes(),
            self.check_wcag21_compliance_aa(),
            self.verify_screen_reader_support(),
            self.verify_text_readability(),
        )

        report = AccessibilityReport(
            url=self.page.url,
            image_alt_issues=image_alt_issues,
            form_labels=form_labels,
            heading_hierarchy=headings,
            contrast_issues=contrast_issues,
            keyboard_navigation=keyboard_navigation,
            aria_attributes=aria_attributes,
            wcag_compliance=wcag_compliance,
            screen_reader_support=screen_reader_support,
            text_readability=text_readability,
            summary=AccessibilitySummary(
                has_image_alt_issues=bool(image_alt_issues),
                has_form_label_issues=bool(form_labels),
                has_heading_hierarchy_issues=not headings.is_valid_hierarchy,
                has_contrast_issues=bool(contrast_issues),
                is_wcag_compliant=wcag_compliance.is_compliant,
            ),
        )
        logger.info(f"Accessibility report for {report.url}: {report.summary.model_dump()}")
        return report
