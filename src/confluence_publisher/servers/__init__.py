"""MCP server for the Confluence publisher."""

from .confluence import confluence_mcp
from .dependencies import get_confluence_fetcher, reset_confluence_fetcher
from .dispatcher import call_tool, get_registered_tools, to_tool_result, to_tool_text

main_mcp = confluence_mcp

__all__ = [
    "main_mcp",
    "call_tool",
    "get_registered_tools",
    "to_tool_result",
    "to_tool_text",
    "get_confluence_fetcher",
    "reset_confluence_fetcher",
]
