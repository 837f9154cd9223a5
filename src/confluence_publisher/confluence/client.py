"""Base client module for Confluence API interactions."""

import logging
from collections.abc import Callable
from typing import Any

import requests
from atlassian import Confluence
from requests.exceptions import HTTPError

from ..exceptions import RemoteApiError
from ..preprocessing import ConfluencePreprocessor
from ..utils.request_logging import install_request_logging
from .config import ConfluenceConfig

logger = logging.getLogger("confluence-publisher")


class ConfluenceClient:
    """Base client for Confluence API interactions.

    Owns the authenticated session. Every REST call goes through `_get`,
    `_post` or `_put`, which turn any transport or HTTP failure into a
    RemoteApiError.
    """

    def __init__(self, config: ConfluenceConfig | None = None) -> None:
        """Initialize the Confluence client with the given or environment config.

        Args:
            config: Configuration for the Confluence client. If not provided,
                will load from environment.

        Raises:
            ConfigurationError: If no config is given and the environment is incomplete
        """
        self.config = config or ConfluenceConfig.from_env()

        self.session = requests.Session()
        install_request_logging(self.session)

        logger.debug(f"Initializing Confluence client for {self.config.wiki_url}")
        self.confluence = Confluence(
            url=self.config.wiki_url,
            username=self.config.username,
            password=self.config.api_token,
            cloud=True,
            verify_ssl=self.config.ssl_verify,
            session=self.session,
        )

        self.preprocessor = ConfluencePreprocessor()

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._call(self.confluence.get, "GET", path, params=params)

    def _post(self, path: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._call(self.confluence.post, "POST", path, data=data)

    def _put(self, path: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._call(self.confluence.put, "PUT", path, data=data)

    def _call(
        self, method: Callable[..., Any], verb: str, path: str, **kwargs: Any
    ) -> dict[str, Any]:
        logger.debug(f"{verb} {path}")
        try:
            response = method(path, **kwargs)
        except HTTPError as http_err:
            status_code = (
                http_err.response.status_code if http_err.response is not None else None
            )
            detail = _error_detail(http_err)
            logger.error(f"HTTP error during {verb} {path} ({status_code}): {detail}")
            raise RemoteApiError(detail, status_code=status_code) from http_err
        except requests.RequestException as e:
            logger.error(f"Transport error during {verb} {path}: {e}")
            raise RemoteApiError(str(e) or type(e).__name__) from e

        if not isinstance(response, dict):
            raise RemoteApiError(f"Unexpected response to {verb} {path}: {response!r}")
        return response


def _error_detail(http_err: HTTPError) -> str:
    """Return the message Confluence sent with an error response, if any."""
    response = http_err.response
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    return str(http_err) or "Request failed"
