"""Confluence publisher MCP server instance."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from confluence_publisher.utils.environment import is_confluence_configured

logger = logging.getLogger(__name__)


@asynccontextmanager
async def publisher_lifespan(app: FastMCP) -> AsyncIterator[dict]:
    logger.info("Confluence publisher server lifespan starting...")
    if not is_confluence_configured():
        logger.warning(
            "Confluence configuration is incomplete. Every tool call will report "
            "a configuration error until it is fixed."
        )
    try:
        yield {}
    finally:
        logger.info("Confluence publisher server lifespan shutdown complete.")


# FastMCP server instance
confluence_mcp = FastMCP(
    name="confluence-publisher",
    instructions=(
        "Publishes Markdown files to Confluence, syncs them onto existing pages, "
        "and searches or exports Confluence content."
    ),
    lifespan=publisher_lifespan,
)
