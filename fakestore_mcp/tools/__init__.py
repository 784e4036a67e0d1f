"""
MCP tool catalog for the Fake Store API
"""

from .registry import ToolDefinition
from .products import product_tools
from .carts import cart_tools
from .users import user_tools

ALL_TOOLS = [*product_tools, *cart_tools, *user_tools]

__all__ = [
    'ToolDefinition',
    'product_tools',
    'cart_tools',
    'user_tools',
    'ALL_TOOLS'
]
