"""
Pydantic models for the Confluence publisher.

This package provides type-safe models for Confluence API responses, search
queries, exported articles and the arguments of the published tools.
"""

from .base import ApiModel
from .confluence import (
    ConfluencePage,
    ConfluenceSearchResultItem,
    ExportedArticle,
    SearchQuery,
)
from .constants import (  # noqa: F401 - Keep constants available
    CONFLUENCE_DEFAULT_ID,
    CONFLUENCE_DEFAULT_VERSION,
    DEFAULT_SEARCH_EXPAND,
    DEFAULT_SEARCH_LIMIT,
    EMPTY_STRING,
)
from .tools import (
    FetchLatestArticlesArgs,
    PublishMarkdownArgs,
    SearchContentArgs,
    SyncMarkdownArgs,
    ToolArguments,
)

__all__ = [
    # Base models
    "ApiModel",
    # Constants
    "CONFLUENCE_DEFAULT_ID",
    "CONFLUENCE_DEFAULT_VERSION",
    "DEFAULT_SEARCH_EXPAND",
    "DEFAULT_SEARCH_LIMIT",
    "EMPTY_STRING",
    # Confluence models
    "ConfluencePage",
    "ConfluenceSearchResultItem",
    "ExportedArticle",
    "SearchQuery",
    # Tool arguments
    "ToolArguments",
    "PublishMarkdownArgs",
    "SyncMarkdownArgs",
    "SearchContentArgs",
    "FetchLatestArticlesArgs",
]
