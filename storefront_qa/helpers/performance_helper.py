"""Browser-side performance measurements.

This module provides the PerformanceHelper class which reads the Navigation
Timing, Resource Timing and PerformanceObserver APIs of the current page.
"""

import logging
from typing import List, Optional

from playwright.async_api import Page

from ..config.suite_config import get_suite_config
from ..models.performance_models import (
    NavigationTiming,
    CoreWebVitals,
    ApiTiming,
    PageSize,
    JsExecutionTime,
    LayoutShift,
)

logger = logging.getLogger(__name__)

_NAVIGATION_TIMING_SCRIPT = """
() => {
    const t = performance.getEntriesByType('navigation')[0];
    if (!t) return null;
    return {
        dns: t.domainLookupEnd - t.domainLookupStart,
        tcp: t.connectEnd - t.connectStart,
        ttfb: t.responseStart - t.requestStart,
        download: t.responseEnd - t.responseStart,
        dom_interactive: t.domInteractive - t.fetchStart,
        dom_complete: t.domComplete - t.fetchStart,
        load_complete: t.loadEventEnd - t.fetchStart,
    };
}
"""

_WEB_VITALS_SCRIPT = """
(waitMs) => new Promise((resolve) => {
    const metrics = { lcp: 0, fid: 0, cls: 0, fcp: 0 };
    const observers = [];
    const observe = (type, callback) => {
        try {
            const observer = new PerformanceObserver(list => callback(list.getEntries()));
            observer.observe({ type: type, buffered: true });
            observers.push(observer);
        } catch (e) {
            // entry type not supported by this engine
        }
    };

    const fcp = performance.getEntriesByType('paint')
        .find(entry => entry.name === 'first-contentful-paint');
    if (fcp) metrics.fcp = fcp.startTime;

    observe('largest-contentful-paint', entries => {
        const last = entries[entries.length - 1];
        metrics.lcp = last.renderTime || last.loadTime || last.startTime;
    });
    observe('first-input', entries => {
        if (entries.length) metrics.fid = entries[0].processingStart - entries[0].startTime;
    });
    observe('layout-shift', entries => {
        entries.forEach(entry => {
            if (!entry.hadRecentInput) metrics.cls += entry.value;
        });
    });

    setTimeout(() => {
        observers.forEach(observer => observer.disconnect());
        resolve(metrics);
    }, waitMs);
})
"""

_API_TIMING_SCRIPT = """
(fragment) => performance.getEntriesByType('resource')
    .filter(r => r.name.includes(fragment))
    .map(r => ({
        url: r.name,
        duration: r.duration,
        transfer_size: r.transferSize || 0,
        decoded_body_size: r.decodedBodySize || 0,
    }))
"""

_PAGE_SIZE_SCRIPT = """
() => {
    const resources = performance.getEntriesByType('resource');
    const byType = {};
    let totalSize = 0;
    resources.forEach(resource => {
        const type = resource.initiatorType;
        const size = resource.transferSize || 0;
        totalSize += size;
        byType[type] = byType[type] || { count: 0, size: 0 };
        byType[type].count += 1;
        byType[type].size += size;
    });
    return { total_size: totalSize, by_type: byType, resource_count: resources.length };
}
"""

_JS_EXECUTION_SCRIPT = """
() => {
    const t = performance.getEntriesByType('navigation')[0];
    if (!t) return null;
    return {
        script_evaluate_time: t.domContentLoadedEventEnd - t.domInteractive,
        total_js_time: t.domComplete - t.responseEnd,
    };
}
"""

_LAYOUT_SHIFT_SCRIPT = """
(durationMs) => new Promise((resolve) => {
    const shifts = [];
    let observer = null;
    try {
        observer = new PerformanceObserver(list => {
            list.getEntries().forEach(entry => {
                if (entry.hadRecentInput) return;
                shifts.push({
                    value: entry.value,
                    time: entry.startTime,
                    sources: (entry.sources || []).map(s => ({
                        node: s.node ? s.node.nodeName : null,
                        previous_rect: s.previousRect ? s.previousRect.toJSON() : null,
                        current_rect: s.currentRect ? s.currentRect.toJSON() : null,
                    })),
                });
            });
        });
        observer.observe({ type: 'layout-shift', buffered: true });
    } catch (e) {
        // layout-shift not supported by this engine
    }
    setTimeout(() => {
        if (observer) observer.disconnect();
        resolve(shifts);
    }, durationMs);
})
"""


class PerformanceHelper:
    """Collect timing and size metrics from one page.

    Example:
        helper = PerformanceHelper(page)
        timing = await helper.measure_page_load_time()
        assert timing.load_complete < 3000
    """

    # Core Web Vitals "good" thresholds
    LCP_THRESHOLD = 2500
    FID_THRESHOLD = 100
    CLS_THRESHOLD = 0.1

    def __init__(self, page: Page):
        self.page = page

    async def measure_page_load_time(self) -> NavigationTiming:
        """Phase breakdown of the last navigation, zeros if none is recorded."""
        timing = await self.page.evaluate(_NAVIGATION_TIMING_SCRIPT)
        if timing is None:
            logger.warning(f"No navigation timing entry for {self.page.url}")
            return NavigationTiming()
        result = NavigationTiming.model_validate(timing)
        logger.info(f"Page load for {self.page.url}: {result.load_complete:.0f}ms")
        return result

    async def get_core_web_vitals(self, wait_ms: int = 3000) -> CoreWebVitals:
        """Observe LCP, FID and CLS for ``wait_ms`` and report what was seen.

        Metrics the engine does not support stay at 0.

        Args:
            wait_ms: How long observers stay connected
        """
        vitals = CoreWebVitals.model_validate(
            await self.page.evaluate(_WEB_VITALS_SCRIPT, wait_ms)
        )
        logger.info(
            f"Web vitals - LCP: {vitals.lcp:.2f}ms, FID: {vitals.fid:.2f}ms, "
            f"CLS: {vitals.cls:.3f}, FCP: {vitals.fcp:.2f}ms"
        )
        return vitals

    def passes_core_web_vitals(self, vitals: CoreWebVitals) -> bool:
        return (
            vitals.lcp <= self.LCP_THRESHOLD
            and vitals.fid <= self.FID_THRESHOLD
            and vitals.cls <= self.CLS_THRESHOLD
        )

    async def measure_api_response_time(self, url_fragment: str = "api") -> List[ApiTiming]:
        """Resource timings whose URL contains ``url_fragment``."""
        entries = await self.page.evaluate(_API_TIMING_SCRIPT, url_fragment)
        return [ApiTiming.model_validate(entry) for entry in entries]

    async def get_page_size(self) -> PageSize:
        """Transferred bytes per initiator type."""
        return PageSize.model_validate(await self.page.evaluate(_PAGE_SIZE_SCRIPT))

    async def is_page_load_within_threshold(self, threshold_ms: Optional[float] = None) -> bool:
        if threshold_ms is None:
            threshold_ms = get_suite_config().load_time_threshold_ms
        timing = await self.measure_page_load_time()
        return timing.load_complete < threshold_ms

    async def get_js_execution_time(self) -> JsExecutionTime:
        timing = await self.page.evaluate(_JS_EXECUTION_SCRIPT)
        if timing is None:
            return JsExecutionTime()
        return JsExecutionTime.model_validate(timing)

    async def monitor_layout_shifts(self, duration_ms: int = 5000) -> List[LayoutShift]:
        """Record layout shifts not caused by user input for ``duration_ms``."""
        shifts = await self.page.evaluate(_LAYOUT_SHIFT_SCRIPT, duration_ms)
        logger.info(f"Observed {len(shifts)} layout shifts over {duration_ms}ms")
        return [LayoutShift.model_validate(shift) for shift in shifts]
