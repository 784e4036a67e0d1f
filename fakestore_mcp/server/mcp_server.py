#!/usr/bin/env python3
"""
Fake Store MCP Server
Serves the Fake Store API tools over the MCP stdio transport
"""
import asyncio
import logging
import sys
from typing import List, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from fakestore_mcp.config import settings
from fakestore_mcp.server.dispatcher import ToolDispatcher
from fakestore_mcp.services.fakestore.api_client import FakeStoreClient
from fakestore_mcp.services.fakestore.rate_limiter import RequestRateLimiter
from fakestore_mcp.services.monitoring.monitoring_service import MonitoringService, configure_logging

logger = logging.getLogger(__name__)


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Build the MCP server around a dispatcher"""
    server = Server(settings.APP_NAME, version=settings.APP_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return dispatcher.list_tools()

    # Registered directly so the dispatcher's envelope reaches the host as-is,
    # without the SDK's own input schema validation in front of our validators.
    async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


def create_client(monitoring: Optional[MonitoringService] = None) -> FakeStoreClient:
    rate_limiter = None
    if settings.RATE_LIMIT_ENABLED:
        rate_limiter = RequestRateLimiter(
            max_requests=settings.RATE_LIMIT_REQUESTS,
            window_seconds=settings.RATE_LIMIT_WINDOW,
        )
    return FakeStoreClient(rate_limiter=rate_limiter, monitoring=monitoring)


async def serve(monitoring: Optional[MonitoringService] = None):
    monitoring = monitoring or MonitoringService()

    async with create_client(monitoring) as client:
        dispatcher = ToolDispatcher(client, monitoring=monitoring)
        server = create_server(dispatcher)

        async with stdio_server() as (read_stream, write_stream):
            logger.info(f"Fake Store MCP Server running on stdio ({len(dispatcher.tools)} tools, "
                        f"upstream {client.base_url})")
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    # Log to stderr since stdout is used for MCP communication
    configure_logging()

    monitoring = MonitoringService()
    if settings.ENABLE_METRICS:
        monitoring.start_exporter(settings.METRICS_PORT)

    try:
        asyncio.run(serve(monitoring))
    except KeyboardInterrupt:
        logger.info("Fake Store MCP Server stopped")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
