"""
Routes tool calls to the resource handlers and wraps every outcome in an
MCP CallToolResult envelope
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from mcp import types

from fakestore_mcp.services.fakestore.api_client import FakeStoreClient
from fakestore_mcp.services.fakestore.errors import FakeStoreError, UnknownToolError, ValidationError
from fakestore_mcp.services.monitoring.monitoring_service import MonitoringService
from fakestore_mcp.tools import ALL_TOOLS, ToolDefinition

logger = logging.getLogger(__name__)


def success_result(result: Any) -> types.CallToolResult:
    text = json.dumps(result, indent=2, ensure_ascii=False)
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)])


def error_result(message: str) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


class ToolDispatcher:
    """Lookup table from tool name to handler"""

    def __init__(self, client: FakeStoreClient, tools: Optional[Iterable[ToolDefinition]] = None,
                 monitoring: Optional[MonitoringService] = None):
        self.client = client
        self.monitoring = monitoring or MonitoringService()
        self.tools: Dict[str, ToolDefinition] = {}
        for tool in (ALL_TOOLS if tools is None else tools):
            if tool.name in self.tools:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            self.tools[tool.name] = tool

    def list_tools(self) -> List[types.Tool]:
        return [tool.to_mcp_tool() for tool in self.tools.values()]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> types.CallToolResult:
        """Run one tool. Never raises: failures come back with isError set."""
        logger.info(f"Tool call: {name}")
        try:
            tool = self.tools.get(name)
            if tool is None:
                raise UnknownToolError(f"Unknown tool: {name}")

            if arguments is None:
                arguments = {}
            if not isinstance(arguments, dict):
                raise ValidationError("Tool arguments must be an object")

            async with self.monitoring.track_tool_execution(name):
                result = await tool.handler(self.client, arguments)

            return success_result(result)

        except FakeStoreError as e:
            logger.warning(f"Tool {name} failed: {e.message}")
            return error_result(e.message)
        except Exception as e:
            logger.error(f"Unexpected error in tool {name}: {e}", exc_info=True)
            return error_result(str(e) or "Unknown error occurred")
