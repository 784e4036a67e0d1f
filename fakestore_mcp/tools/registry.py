"""
Tool catalog entries shared by the resource modules
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from mcp import types

from fakestore_mcp.tools.validators import SORT_ORDERS

ToolHandler = Callable[[Any, Dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """A named operation the MCP host can call"""
    name: str
    description: str
    input_schema: Dict[str, Any]
    handler: ToolHandler

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


def object_schema(properties: Dict[str, Any], required: Optional[List[str]] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = list(required)
    return schema


def prop(type_: str, description: str) -> Dict[str, Any]:
    return {"type": type_, "description": description}


def list_schema(resource: str, sort_description: str) -> Dict[str, Any]:
    """limit + sort parameters of the list tools"""
    return object_schema({
        "limit": prop("integer", f"Limit the number of {resource} returned"),
        "sort": {
            "type": "string",
            "enum": list(SORT_ORDERS),
            "description": sort_description,
        },
    })


def id_schema(description: str, key: str = "id") -> Dict[str, Any]:
    return object_schema({key: prop("integer", description)}, required=[key])
