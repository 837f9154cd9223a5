"""
Confluence entity models.

Pydantic models for the small slice of the Confluence content API used by
the publisher: pages, search hits, search queries and exported articles.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from .base import ApiModel
from .constants import (
    CONFLUENCE_DEFAULT_ID,
    CONFLUENCE_DEFAULT_VERSION,
    DEFAULT_SEARCH_EXPAND,
    DEFAULT_SEARCH_LIMIT,
    EMPTY_STRING,
)

logger = logging.getLogger(__name__)


def _version_number(data: dict[str, Any]) -> int:
    version = data.get("version") or {}
    if isinstance(version, dict):
        return int(version.get("number", CONFLUENCE_DEFAULT_VERSION))
    return CONFLUENCE_DEFAULT_VERSION


def _space_key(data: dict[str, Any]) -> str:
    space = data.get("space") or {}
    if isinstance(space, dict):
        return space.get("key", EMPTY_STRING)
    return EMPTY_STRING


class ConfluencePage(ApiModel):
    """A Confluence page.

    The id is assigned by Confluence on creation. `version` starts at 1 and is
    incremented by exactly one on every successful update. `parent_id` is only
    populated when the response includes expanded ancestors.
    """

    id: str = CONFLUENCE_DEFAULT_ID
    title: str = EMPTY_STRING
    space_key: str = EMPTY_STRING
    version: int = CONFLUENCE_DEFAULT_VERSION
    parent_id: str | None = None
    content: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], *, include_body: bool = False, **kwargs: Any
    ) -> "ConfluencePage":
        """
        Create a ConfluencePage from a Confluence content response.

        Args:
            data: The content data from the Confluence API
            include_body: Whether to read body.storage.value into `content`

        Returns:
            A ConfluencePage instance
        """
        if not data:
            return cls()

        parent_id = None
        ancestors = data.get("ancestors") or []
        if ancestors:
            parent_id = str(ancestors[-1].get("id"))

        content = None
        if include_body:
            try:
                content = data["body"]["storage"]["value"]
            except (KeyError, TypeError):
                logger.warning(
                    f"Page {data.get('id', 'unknown')} missing body.storage.value"
                )
                content = EMPTY_STRING

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            title=data.get("title", EMPTY_STRING),
            space_key=_space_key(data),
            version=_version_number(data),
            parent_id=parent_id,
            content=content,
        )


class ConfluenceSearchResultItem(ApiModel):
    """A search hit: a read-only projection of a page that may be stale."""

    id: str
    title: str = EMPTY_STRING
    space_key: str = EMPTY_STRING
    version: int = CONFLUENCE_DEFAULT_VERSION

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSearchResultItem":
        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            title=data.get("title", EMPTY_STRING),
            space_key=_space_key(data),
            version=_version_number(data),
        )


class SearchQuery(BaseModel):
    """Parameters of a single content search."""

    query_text: str
    is_structured_query: bool = True
    limit: int = DEFAULT_SEARCH_LIMIT
    expand: str = DEFAULT_SEARCH_EXPAND

    def to_cql(self) -> str:
        """Return the CQL sent to Confluence.

        Structured queries pass through verbatim. Plain text is wrapped into
        a full-text match.
        """
        if self.is_structured_query:
            return self.query_text
        escaped = self.query_text.replace("\\", "\\\\").replace('"', '\\"')
        return f'text ~ "{escaped}"'

    def to_params(self) -> dict[str, Any]:
        return {"cql": self.to_cql(), "limit": self.limit, "expand": self.expand}


class ExportedArticle(ApiModel):
    """A page written to disk by an export."""

    id: str
    title: str
    filename: str = Field(description="Path of the written Markdown file")
