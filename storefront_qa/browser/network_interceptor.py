"""Network request interception for the storefront suite.

This module provides the NetworkInterceptor class used to slow down,
mock or abort requests through Playwright's route API. TestUtil uses it
for throttling; the load suites use it to stub third-party endpoints.
"""

import asyncio
import fnmatch
import json
import logging
from typing import List, Dict, Any, Optional, Union, Callable
from datetime import datetime

from playwright.async_api import Route, Request, BrowserContext, Page

from ..models.browser_models import NetworkMock

logger = logging.getLogger(__name__)


class NetworkInterceptor:
    """Intercept requests on a page or context.

    Every handled request is recorded in ``intercepted_requests`` so specs
    can assert on what the page tried to fetch.

    Example:
        interceptor = NetworkInterceptor()
        await interceptor.throttle(page, delay_ms=1000)
        ...
        await interceptor.clear(page)
    """

    def __init__(self):
        """Initialize the network interceptor."""
        self.intercepted_requests: List[Dict[str, Any]] = []
        self._routes: List[tuple] = []
        self._mock_call_counts: Dict[str, int] = {}

    def _record(self, request: Request, handled_by: str) -> None:
        self.intercepted_requests.append(
            {
                "url": request.url,
                "method": request.method,
                "resource_type": request.resource_type,
                "timestamp": datetime.now().isoformat(),
                "handled_by": handled_by,
            }
        )

    async def throttle(
        self,
        target: Union[BrowserContext, Page],
        delay_ms: int,
        url_pattern: str = "**/*",
    ) -> None:
        """Delay every matching request before letting it through.

        Args:
            target: Browser context or page to throttle
            delay_ms: Delay applied to each request
            url_pattern: Glob of URLs to throttle
        """

        async def handler(route: Route, request: Request) -> None:
            self._record(request, f"throttle:{delay_ms}")
            await asyncio.sleep(delay_ms / 1000.0)
            await route.continue_()

        await self._register(target, url_pattern, handler)
        logger.info(f"Throttling {url_pattern} by {delay_ms}ms per request")

    async def mock(
        self,
        target: Union[BrowserContext, Page],
        mock: NetworkMock,
    ) -> None:
        """Fulfil or abort requests matching the mock's URL pattern.

        Args:
            target: Browser context or page
            mock: Network mock to apply
        """
        mock_id = f"{mock.url_pattern}:{mock.method or '*'}"
        self._mock_call_counts[mock_id] = 0
        handler = self._create_mock_handler(mock, mock_id)
        await self._register(target, mock.url_pattern, handler)
        logger.info(f"Added mock for {mock.url_pattern} ({mock.method or 'any method'})")

    def _create_mock_handler(self, mock: NetworkMock, mock_id: str) -> Callable:
        """Create a route handler function for the given mock."""

        async def handler(route: Route, request: Request) -> None:
            if mock.method and request.method.upper() != mock.method.upper():
                logger.debug(
                    f"Method mismatch for {request.url}: expected {mock.method}, "
                    f"got {request.method}. Continuing without mock."
                )
                await route.continue_()
                return

            self._record(request, mock_id)
            self._mock_call_counts[mock_id] = self._mock_call_counts.get(mock_id, 0) + 1

            if mock.abort:
                logger.debug(f"Aborting request to {request.url}")
                await route.abort()
                return

            if mock.delay_ms > 0:
                await asyncio.sleep(mock.delay_ms / 1000.0)

            await route.fulfill(
                status=mock.status,
                headers={"Content-Type": "application/json", **mock.headers},
                body=self._prepare_response_body(mock.body),
            )
            logger.debug(f"Fulfilled {request.url} with status {mock.status}")

        return handler

    def _prepare_response_body(self, body: Any) -> str:
        """JSON-encode dicts and lists, stringify anything else."""
        if body is None:
            return ""
        if isinstance(body, (dict, list)):
            return json.dumps(body)
        return str(body)

    async def _register(
        self,
        target: Union[BrowserContext, Page],
        url_pattern: str,
        handler: Callable,
    ) -> None:
        await target.route(url_pattern, handler)
        self._routes.append((target, url_pattern, handler))

    async def clear(self, target: Union[BrowserContext, Page]) -> None:
        """Remove the routes this interceptor registered on ``target``.

        Routes registered on other pages or contexts stay in place.
        """
        owned = [route for route in self._routes if route[0] is target]
        logger.info(f"Clearing {len(owned)} network routes")
        for _, pattern, handler in owned:
            await target.unroute(pattern, handler)
        self._routes = [route for route in self._routes if route[0] is not target]
        if not self._routes:
            self._mock_call_counts.clear()

    def get_intercepted_requests(
        self,
        url_pattern: Optional[str] = None,
        method: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Get intercepted requests with optional glob and method filters."""
        requests = self.intercepted_requests

        if method:
            requests = [r for r in requests if r["method"].upper() == method.upper()]

        if url_pattern:
            requests = [r for r in requests if fnmatch.fnmatch(r["url"], url_pattern)]

        return requests

    def get_mock_stats(self) -> Dict[str, int]:
        """Mapping of mock id to the number of requests it fulfilled."""
        return dict(self._mock_call_counts)
