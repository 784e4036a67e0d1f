"""
Fake Store MCP Server
Exposes the Fake Store e-commerce API (products, carts, users) as MCP tools
"""

__version__ = "1.0.0"
