"""Dependency provider for the shared ConfluenceFetcher.

The fetcher is built lazily on the first tool call, from the environment,
and reused for the lifetime of the process.
"""

from __future__ import annotations

import logging
import threading

from confluence_publisher.confluence import ConfluenceConfig, ConfluenceFetcher

logger = logging.getLogger("confluence-publisher.servers.dependencies")

_fetcher: ConfluenceFetcher | None = None
_fetcher_lock = threading.Lock()


def get_confluence_fetcher() -> ConfluenceFetcher:
    """Return the process-wide ConfluenceFetcher, creating it on first use.

    A failed construction is not cached, so every later call re-reads the
    environment until one succeeds.

    Returns:
        The shared ConfluenceFetcher instance.

    Raises:
        ConfigurationError: If required Confluence environment variables are missing.
    """
    global _fetcher

    if _fetcher is not None:
        return _fetcher

    with _fetcher_lock:
        if _fetcher is None:
            logger.debug("get_confluence_fetcher: creating ConfluenceFetcher from environment")
            config = ConfluenceConfig.from_env()
            _fetcher = ConfluenceFetcher(config=config)
            logger.info(f"Confluence client initialized for {config.base_url}")

    return _fetcher


def reset_confluence_fetcher() -> None:
    """Drop the shared fetcher so the next call re-reads the environment."""
    global _fetcher

    with _fetcher_lock:
        _fetcher = None
