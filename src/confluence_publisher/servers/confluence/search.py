"""Confluence search tools - search_content, fetch_latest_articles."""

import logging
from typing import Annotated, Any

from pydantic import Field

from confluence_publisher.confluence import ConfluenceFetcher
from confluence_publisher.local_storage import render_exported_page, save_exported_page
from confluence_publisher.models.confluence import (
    ConfluenceSearchResultItem,
    ExportedArticle,
)
from confluence_publisher.models.tools import FetchLatestArticlesArgs, SearchContentArgs
from confluence_publisher.servers.dispatcher import call_tool, register_tool, to_tool_result
from confluence_publisher.utils.urls import build_page_url

from ._server import confluence_mcp

logger = logging.getLogger(__name__)


def export_search_result(
    fetcher: ConfluenceFetcher, item: ConfluenceSearchResultItem, output_path: str
) -> ExportedArticle:
    """Fetch the full content of a search hit and write it to <output_path>/<id>.md."""
    page = fetcher.get_page_content(item.id)
    content = render_exported_page(
        title=page.title,
        space_key=item.space_key,
        page_id=item.id,
        version=page.version,
        url=build_page_url(fetcher.config.base_url, item.space_key, item.id),
        body=page.content or "",
    )
    filename = save_exported_page(output_path, item.id, content)
    return ExportedArticle(id=item.id, title=page.title, filename=filename)


def export_search_results(
    fetcher: ConfluenceFetcher,
    items: list[ConfluenceSearchResultItem],
    output_path: str,
) -> list[ExportedArticle]:
    """Export every search hit, one after the other.

    The first failure aborts the batch; files already written are kept.
    """
    articles = [export_search_result(fetcher, item, output_path) for item in items]
    logger.info(f"Exported {len(articles)} pages to {output_path}")
    return articles


@register_tool("search_content", SearchContentArgs)
def search_content_impl(fetcher: ConfluenceFetcher, args: SearchContentArgs) -> dict[str, Any]:
    """Search Confluence, exporting the hits when an output path is given."""
    items = fetcher.search(args.query, args.limit, is_structured_query=args.cql)

    if args.output_path and items:
        export_search_results(fetcher, items, args.output_path)

    return {
        "results": [
            {
                "id": item.id,
                "title": item.title,
                "version": item.version,
                "space": item.space_key,
                "url": build_page_url(fetcher.config.base_url, item.space_key, item.id),
            }
            for item in items
        ]
    }


@register_tool("fetch_latest_articles", FetchLatestArticlesArgs)
def fetch_latest_articles_impl(
    fetcher: ConfluenceFetcher, args: FetchLatestArticlesArgs
) -> dict[str, Any]:
    """Search Confluence and export every hit."""
    items = fetcher.search(args.query, args.limit, is_structured_query=args.cql)
    articles = export_search_results(fetcher, items, args.output_path)

    return {
        "message": f"{len(articles)} articles have been saved",
        "articles": [article.to_simplified_dict() for article in articles],
    }


@confluence_mcp.tool(name="search_content", tags={"confluence", "read"})
async def search_content(
    query: Annotated[str, Field(description="Search keyword or CQL query")],
    limit: Annotated[
        int | None,
        Field(description="Maximum number of results to return (optional)"),
    ] = None,
    cql: Annotated[
        bool | None,
        Field(description="Whether to treat the query as CQL (optional)"),
    ] = None,
    outputPath: Annotated[
        str | None,
        Field(description="Directory path to save the search results (optional)"),
    ] = None,
) -> str:
    """Search Confluence content.

    When outputPath is given, each result is saved as <outputPath>/<pageId>.md
    with a metadata header followed by the page body in storage format.

    Returns:
        JSON with status and the list of results (id, title, version, space, url).
    """
    envelope = await call_tool(
        "search_content",
        _drop_unset({"query": query, "limit": limit, "cql": cql, "outputPath": outputPath}),
    )
    return to_tool_result(envelope)


@confluence_mcp.tool(name="fetch_latest_articles", tags={"confluence", "read"})
async def fetch_latest_articles(
    query: Annotated[str, Field(description="Search keyword or CQL query")],
    outputPath: Annotated[
        str, Field(description="Directory path to save the search results (required)")
    ],
    limit: Annotated[
        int | None,
        Field(description="Maximum number of results to return (optional)"),
    ] = None,
    cql: Annotated[
        bool | None,
        Field(description="Whether to treat the query as CQL (optional)"),
    ] = None,
) -> str:
    """Fetch and save latest articles about specified topic.

    Every result is saved as <outputPath>/<pageId>.md.

    Returns:
        JSON with status, a summary message and the saved articles.
    """
    envelope = await call_tool(
        "fetch_latest_articles",
        _drop_unset({"query": query, "outputPath": outputPath, "limit": limit, "cql": cql}),
    )
    return to_tool_result(envelope)


def _drop_unset(arguments: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in arguments.items() if value is not None}
