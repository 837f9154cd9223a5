"""Configuration module for the Confluence client."""

import logging
import os
from dataclasses import dataclass

from ..exceptions import ConfigurationError
from ..utils.env import is_env_truthy
from ..utils.environment import get_missing_confluence_vars

logger = logging.getLogger("confluence-publisher.confluence.config")


@dataclass(frozen=True)
class ConfluenceConfig:
    """Connection settings for a Confluence Cloud site.

    Built once from the environment and never mutated afterwards.
    """

    base_url: str  # Root URL of the site, e.g. https://your-domain.atlassian.net
    username: str  # Email address of the API token owner
    api_token: str
    ssl_verify: bool = True
    read_only: bool = False

    @property
    def wiki_url(self) -> str:
        """URL of the Confluence application (<base_url>/wiki)."""
        return f"{self.base_url}/wiki"

    @classmethod
    def from_env(cls) -> "ConfluenceConfig":
        """Create configuration from environment variables.

        Returns:
            ConfluenceConfig with values from environment variables

        Raises:
            ConfigurationError: If any of CONFLUENCE_BASE_URL, CONFLUENCE_USERNAME
                or CONFLUENCE_API_TOKEN is missing
        """
        missing = get_missing_confluence_vars()
        if missing:
            raise ConfigurationError(missing)

        base_url = os.environ["CONFLUENCE_BASE_URL"].rstrip("/")
        logger.debug(f"Loaded Confluence configuration for {base_url}")
        return cls(
            base_url=base_url,
            username=os.environ["CONFLUENCE_USERNAME"],
            api_token=os.environ["CONFLUENCE_API_TOKEN"],
            ssl_verify=is_env_truthy("CONFLUENCE_SSL_VERIFY", "true"),
            read_only=is_env_truthy("READ_ONLY_MODE", "false"),
        )
