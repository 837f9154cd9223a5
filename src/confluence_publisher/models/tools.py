"""
Argument models for the publisher tools.

Tool arguments arrive from the agent as a loosely typed JSON object. These
models give each tool a typed view of its arguments, using the camelCase
field names of the published tool schemas as aliases.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_SEARCH_LIMIT


class ToolArguments(BaseModel):
    """Base class for tool argument models."""

    # strict: "5" is not a limit and "false" is not a flag
    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", frozen=True, strict=True
    )


class PublishMarkdownArgs(ToolArguments):
    markdown_path: str = Field(alias="markdownPath", min_length=1)
    title: str = Field(min_length=1)
    space_key: str = Field(alias="spaceKey", min_length=1)
    parent_id: str | None = Field(default=None, alias="parentId")


class SyncMarkdownArgs(ToolArguments):
    markdown_path: str = Field(alias="markdownPath", min_length=1)
    page_id: str = Field(alias="pageId", min_length=1)


class SearchContentArgs(ToolArguments):
    query: str = Field(min_length=1)
    limit: int = Field(default=DEFAULT_SEARCH_LIMIT, ge=1)
    cql: bool = True
    output_path: str | None = Field(default=None, alias="outputPath")


class FetchLatestArticlesArgs(ToolArguments):
    query: str = Field(min_length=1)
    output_path: str = Field(alias="outputPath", min_length=1)
    limit: int = Field(default=DEFAULT_SEARCH_LIMIT, ge=0)
    cql: bool = True

    @field_validator("limit")
    @classmethod
    def default_zero_limit(cls, limit: int) -> int:
        """A limit of 0 means the default limit."""
        return limit or DEFAULT_SEARCH_LIMIT
