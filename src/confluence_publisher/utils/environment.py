"""Utility functions related to environment checking."""

import logging
import os

logger = logging.getLogger("confluence-publisher.utils.environment")

REQUIRED_CONFLUENCE_VARS = (
    "CONFLUENCE_BASE_URL",
    "CONFLUENCE_USERNAME",
    "CONFLUENCE_API_TOKEN",
)


def get_missing_confluence_vars() -> list[str]:
    """Return the required Confluence variables that are unset or empty."""
    return [name for name in REQUIRED_CONFLUENCE_VARS if not os.getenv(name)]


def is_confluence_configured() -> bool:
    """Determine whether Confluence can be reached based on environment variables."""
    missing = get_missing_confluence_vars()
    if missing:
        logger.info(
            "Confluence is not configured or required environment variables are missing: "
            f"{', '.join(missing)}"
        )
        return False

    logger.info("Using Confluence Basic Authentication (API Token)")
    return True
