"""Confluence API module for the publisher.

This module provides the Confluence client used by the MCP tools.
"""

from .client import ConfluenceClient
from .config import ConfluenceConfig
from .pages import PagesMixin
from .search import SearchMixin


class ConfluenceFetcher(SearchMixin, PagesMixin):
    """Main entry point for Confluence operations.

    This class combines functionality from the page and search mixins.
    """

    pass


__all__ = ["ConfluenceFetcher", "ConfluenceConfig", "ConfluenceClient"]
