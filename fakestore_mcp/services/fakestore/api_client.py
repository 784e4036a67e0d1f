"""
HTTP client for the Fake Store API
All transport and upstream failures surface as ApiError subclasses
"""

import logging
from typing import Any, Dict, Optional

import httpx

from fakestore_mcp.config import settings
from fakestore_mcp.services.fakestore.errors import ApiError, TransportError, UpstreamError
from fakestore_mcp.services.fakestore.rate_limiter import RequestRateLimiter

logger = logging.getLogger(__name__)


class FakeStoreClient:
    """Thin async wrapper around the upstream REST API.

    Args:
        base_url: Upstream address, defaults to FAKESTORE_API_URL
        timeout: Per-request timeout in seconds, defaults to FAKESTORE_TIMEOUT
        rate_limiter: Optional soft cap consulted before every request
        http_client: Pre-built httpx.AsyncClient (tests pass one with a MockTransport)
        monitoring: Optional MonitoringService receiving request outcomes
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 rate_limiter: Optional[RequestRateLimiter] = None,
                 http_client: Optional[httpx.AsyncClient] = None,
                 monitoring=None):
        self.base_url = (base_url or settings.FAKESTORE_API_URL).rstrip("/")
        self.timeout = timeout or settings.FAKESTORE_TIMEOUT
        self.rate_limiter = rate_limiter
        self.monitoring = monitoring
        self._client = http_client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self._client.aclose()

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, data: Any = None) -> Any:
        return await self._request("POST", path, json=data)

    async def put(self, path: str, data: Any = None) -> Any:
        return await self._request("PUT", path, json=data)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    def _record(self, method: str, status: str):
        if self.monitoring:
            self.monitoring.record_upstream_request(method, status)

    async def _request(self, method: str, path: str,
                       params: Optional[Dict[str, Any]] = None, json: Any = None) -> Any:
        try:
            request = self._client.build_request(method, path, params=params or None, json=json)
        except (TypeError, ValueError) as e:
            logger.warning(f"{method} {path} body could not be encoded: {e}")
            raise ApiError(f"Request body is not valid JSON: {e}", code="INVALID_BODY") from e

        # Counted only once the request is ready to go out
        if self.rate_limiter:
            self.rate_limiter.acquire()

        logger.debug(f"{method} {path} params={params}")

        try:
            response = await self._client.send(request)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            self._record(method, str(status))
            logger.warning(f"{method} {path} failed with status {status}")
            raise UpstreamError(f"Request failed with status code {status}", status=status) from e
        except httpx.TimeoutException as e:
            self._record(method, "timeout")
            logger.warning(f"{method} {path} timed out after {self.timeout}s")
            raise TransportError(
                f"Request timed out after {self.timeout:g}s", code=type(e).__name__
            ) from e
        except httpx.RequestError as e:
            self._record(method, "transport_error")
            logger.warning(f"{method} {path} transport error: {e!r}")
            raise TransportError(str(e) or "API request failed", code=type(e).__name__) from e

        self._record(method, str(response.status_code))

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"{method} {path} returned a body that is not JSON")
            raise UpstreamError(
                "Upstream returned a malformed JSON body", status=response.status_code
            ) from e
