"""Confluence publisher MCP tools.

This package contains the MCP server and its tools organized into modules:
- _server.py: FastMCP instance and lifespan
- pages.py: Page tools (publish_markdown, sync_markdown)
- search.py: Search tools (search_content, fetch_latest_articles)
"""

# Import all tool modules to register them with confluence_mcp and the dispatcher
from . import pages, search
from ._server import confluence_mcp
from .pages import publish_markdown_impl, sync_markdown_impl
from .search import (
    export_search_result,
    export_search_results,
    fetch_latest_articles_impl,
    search_content_impl,
)

__all__ = [
    "confluence_mcp",
    "pages",
    "search",
    # Page tools
    "publish_markdown_impl",
    "sync_markdown_impl",
    # Search tools
    "search_content_impl",
    "fetch_latest_articles_impl",
    "export_search_result",
    "export_search_results",
]
