"""
Tests for the Fake Store HTTP client wrapper
"""

import httpx
import pytest

from fakestore_mcp.services.fakestore.errors import ApiError, RateLimitError, TransportError, UpstreamError
from fakestore_mcp.services.fakestore.rate_limiter import RequestRateLimiter
from fakestore_mcp.services.monitoring.monitoring_service import MonitoringService


class TestRequests:

    @pytest.mark.asyncio
    async def test_get_passes_query_parameters(self, client, upstream):
        upstream.payload = [{"id": 1}]

        result = await client.get("/products", {"limit": 5, "sort": "desc"})

        assert result == [{"id": 1}]
        assert upstream.last.method == "GET"
        assert upstream.last.url.path == "/products"
        assert dict(upstream.last.url.params) == {"limit": "5", "sort": "desc"}

    @pytest.mark.asyncio
    async def test_get_without_params_sends_no_query(self, client, upstream):
        await client.get("/products", {})
        assert upstream.last.url.query == b""

    @pytest.mark.asyncio
    async def test_post_and_put_send_json_body(self, client, upstream):
        upstream.payload = {"id": 21}

        assert await client.post("/products", {"title": "Lamp"}) == {"id": 21}
        assert upstream.last.method == "POST"
        assert upstream.last_json() == {"title": "Lamp"}

        await client.put("/products/3", {"price": 5})
        assert upstream.last.method == "PUT"
        assert upstream.last.url.path == "/products/3"
        assert upstream.last_json() == {"price": 5}

    @pytest.mark.asyncio
    async def test_delete_has_no_body(self, client, upstream):
        await client.delete("/carts/2")
        assert upstream.last.method == "DELETE"
        assert upstream.last.content == b""

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self, client, upstream):
        upstream.responder = lambda request: httpx.Response(200, content=b"")
        assert await client.get("/products/999") is None


class TestErrorNormalization:

    @pytest.mark.asyncio
    async def test_server_error_becomes_upstream_error(self, client, upstream):
        upstream.status_code = 500

        with pytest.raises(UpstreamError) as exc_info:
            await client.get("/products")

        assert exc_info.value.status == 500
        assert exc_info.value.message == "Request failed with status code 500"

    @pytest.mark.asyncio
    async def test_not_found_becomes_upstream_error(self, client, upstream):
        upstream.status_code = 404
        with pytest.raises(UpstreamError) as exc_info:
            await client.delete("/users/1")
        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_timeout_becomes_transport_error(self, client, upstream):
        def timeout(request):
            raise httpx.ReadTimeout("timed out", request=request)
        upstream.responder = timeout

        with pytest.raises(TransportError) as exc_info:
            await client.get("/carts")

        assert exc_info.value.code == "ReadTimeout"
        assert exc_info.value.status is None
        assert "timed out" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_connection_failure_becomes_transport_error(self, client, upstream):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)
        upstream.responder = refuse

        with pytest.raises(TransportError) as exc_info:
            await client.get("/users")

        assert exc_info.value.code == "ConnectError"
        assert exc_info.value.message == "Connection refused"

    @pytest.mark.asyncio
    async def test_malformed_json_becomes_upstream_error(self, client, upstream):
        upstream.responder = lambda request: httpx.Response(200, content=b"<html>oops</html>")

        with pytest.raises(UpstreamError) as exc_info:
            await client.get("/products")

        assert exc_info.value.status == 200
        assert "malformed JSON" in exc_info.value.message

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"price": float("nan")}, {"price": float("inf")}, {"when": object()}])
    async def test_unencodable_body_becomes_api_error(self, make_client, upstream, clock, body):
        limiter = RequestRateLimiter(max_requests=5, window_seconds=60, clock=clock)
        client = make_client(rate_limiter=limiter)

        with pytest.raises(ApiError) as exc_info:
            await client.post("/products", body)

        assert exc_info.value.code == "INVALID_BODY"
        assert exc_info.value.message.startswith("Request body is not valid JSON")
        assert upstream.requests == []
        assert limiter.sent_in_window == 0

    def test_error_to_dict(self):
        error = UpstreamError("Request failed with status code 502", status=502)
        assert error.to_dict() == {
            "message": "Request failed with status code 502",
            "status": 502,
            "code": None,
        }


class TestRateLimiting:

    @pytest.mark.asyncio
    async def test_refused_request_never_reaches_upstream(self, make_client, upstream, clock):
        client = make_client(rate_limiter=RequestRateLimiter(max_requests=2, window_seconds=60, clock=clock))

        await client.get("/products")
        await client.get("/products")
        with pytest.raises(RateLimitError) as exc_info:
            await client.get("/products")

        assert len(upstream.requests) == 2
        assert exc_info.value.code == "RATE_LIMITED"

        clock.advance(60)
        await client.get("/products")
        assert len(upstream.requests) == 3


class TestMonitoring:

    @pytest.mark.asyncio
    async def test_outcomes_are_counted(self, make_client, upstream):
        monitoring = MonitoringService()
        client = make_client(monitoring=monitoring)

        await client.get("/products")
        upstream.status_code = 503
        with pytest.raises(UpstreamError):
            await client.post("/carts", {"userId": 1})

        assert monitoring.sample_value("upstream_requests_total", {"method": "GET", "status": "200"}) == 1.0
        assert monitoring.sample_value("upstream_requests_total", {"method": "POST", "status": "503"}) == 1.0
