"""Confluence page tools - publish_markdown, sync_markdown."""

import logging
from typing import Annotated, Any

from pydantic import Field

from confluence_publisher.confluence import ConfluenceFetcher
from confluence_publisher.local_storage import read_markdown_file
from confluence_publisher.models.tools import PublishMarkdownArgs, SyncMarkdownArgs
from confluence_publisher.servers.dispatcher import call_tool, register_tool, to_tool_result
from confluence_publisher.utils.urls import build_page_url

from ._server import confluence_mcp

logger = logging.getLogger(__name__)


def _load_storage_content(fetcher: ConfluenceFetcher, markdown_path: str) -> str:
    markdown_content = read_markdown_file(markdown_path)
    return fetcher.preprocessor.markdown_to_confluence_storage(markdown_content)


@register_tool("publish_markdown", PublishMarkdownArgs, writes=True)
def publish_markdown_impl(
    fetcher: ConfluenceFetcher, args: PublishMarkdownArgs
) -> dict[str, Any]:
    """Create a new page from a Markdown file."""
    storage_content = _load_storage_content(fetcher, args.markdown_path)

    page = fetcher.create_page(
        title=args.title,
        body=storage_content,
        space_key=args.space_key,
        parent_id=args.parent_id,
    )
    logger.info(f"Published {args.markdown_path} as page {page.id}")

    return {
        "pageId": page.id,
        "title": page.title,
        "url": build_page_url(fetcher.config.base_url, args.space_key, page.id),
    }


@register_tool("sync_markdown", SyncMarkdownArgs, writes=True)
def sync_markdown_impl(fetcher: ConfluenceFetcher, args: SyncMarkdownArgs) -> dict[str, Any]:
    """Overwrite an existing page with the content of a Markdown file.

    The page keeps its current title. Every call creates a new version, even
    when the content did not change.
    """
    storage_content = _load_storage_content(fetcher, args.markdown_path)

    current = fetcher.get_page(args.page_id)
    updated = fetcher.update_page(args.page_id, current.title, storage_content)
    logger.info(f"Synced {args.markdown_path} to page {updated.id} (version {updated.version})")

    space_key = updated.space_key or current.space_key
    return {
        "pageId": updated.id,
        "title": updated.title,
        "version": updated.version,
        "url": build_page_url(fetcher.config.base_url, space_key, updated.id),
    }


@confluence_mcp.tool(name="publish_markdown", tags={"confluence", "write"})
async def publish_markdown(
    markdownPath: Annotated[str, Field(description="Path to the Markdown file")],
    title: Annotated[str, Field(description="Title for the Confluence page")],
    spaceKey: Annotated[str, Field(description="Space key to create the page in")],
    parentId: Annotated[
        str | None, Field(description="Parent page ID (optional)")
    ] = None,
) -> str:
    """Convert and publish Markdown content to Confluence.

    Returns:
        JSON with status, pageId, title and url of the new page.
    """
    envelope = await call_tool(
        "publish_markdown",
        {
            "markdownPath": markdownPath,
            "title": title,
            "spaceKey": spaceKey,
            "parentId": parentId,
        },
    )
    return to_tool_result(envelope)


@confluence_mcp.tool(name="sync_markdown", tags={"confluence", "write"})
async def sync_markdown(
    markdownPath: Annotated[str, Field(description="Path to the Markdown file")],
    pageId: Annotated[str, Field(description="Confluence page ID to update")],
) -> str:
    """Sync changes in a Markdown file to an existing Confluence page.

    The page keeps its current title.

    Returns:
        JSON with status, pageId, title, the new version and url.
    """
    envelope = await call_tool(
        "sync_markdown", {"markdownPath": markdownPath, "pageId": pageId}
    )
    return to_tool_result(envelope)
