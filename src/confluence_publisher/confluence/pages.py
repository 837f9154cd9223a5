"""Module for Confluence page operations."""

import logging
from typing import Any

from ..exceptions import RemoteApiError
from ..models.confluence import ConfluencePage
from ..models.constants import (
    CONTENT_TYPE_PAGE,
    PAGE_CONTENT_EXPAND,
    PAGE_METADATA_EXPAND,
    STORAGE_REPRESENTATION,
)
from .client import ConfluenceClient

logger = logging.getLogger("confluence-publisher")

CONTENT_PATH = "rest/api/content"


def _storage_body(body: str) -> dict[str, Any]:
    return {"storage": {"value": body, "representation": STORAGE_REPRESENTATION}}


class PagesMixin(ConfluenceClient):
    """Mixin for Confluence page operations."""

    def get_page(self, page_id: str) -> ConfluencePage:
        """
        Get the metadata of a page (id, title, version), without its body.

        Args:
            page_id: The ID of the page to retrieve

        Returns:
            ConfluencePage model without content

        Raises:
            RemoteApiError: If the page does not exist or the call fails
        """
        logger.debug(f"Getting page metadata for page '{page_id}'")
        page = self._get(f"{CONTENT_PATH}/{page_id}", params={"expand": PAGE_METADATA_EXPAND})
        return ConfluencePage.from_api_response(page)

    def get_page_content(self, page_id: str) -> ConfluencePage:
        """
        Get a page including its body in storage format.

        Args:
            page_id: The ID of the page to retrieve

        Returns:
            ConfluencePage model with `content` set to the raw storage markup

        Raises:
            RemoteApiError: If the page does not exist or the call fails
        """
        logger.debug(f"Getting page content for page '{page_id}'")
        page = self._get(f"{CONTENT_PATH}/{page_id}", params={"expand": PAGE_CONTENT_EXPAND})
        return ConfluencePage.from_api_response(page, include_body=True)

    def create_page(
        self,
        title: str,
        body: str,
        space_key: str,
        parent_id: str | None = None,
    ) -> ConfluencePage:
        """
        Create a new page in a Confluence space.

        Args:
            title: The title of the new page
            body: The content of the page in storage format
            space_key: The key of the space to create the page in
            parent_id: Optional ID of the page to nest the new page under

        Returns:
            ConfluencePage model containing the new page's data

        Raises:
            RemoteApiError: If Confluence rejects the page (unknown space,
                duplicate title, missing permission, ...)
        """
        return self._create_or_update_page(
            title=title, body=body, space_key=space_key, parent_id=parent_id
        )

    def update_page(self, page_id: str, title: str, body: str) -> ConfluencePage:
        """
        Replace the title and body of an existing page.

        Reads the current version and writes version + 1. The two calls are
        not atomic: a concurrent writer in between makes Confluence reject the
        write, which surfaces as a RemoteApiError and is not retried.

        Args:
            page_id: The ID of the page to update
            title: The title to store
            body: The new content in storage format

        Returns:
            ConfluencePage model containing the updated page's data

        Raises:
            RemoteApiError: If either call fails, including version conflicts
        """
        return self._create_or_update_page(title=title, body=body, page_id=page_id)

    def read_current_version(self, page_id: str) -> int:
        """First phase of an update: fetch the current version number."""
        current = self._get(f"{CONTENT_PATH}/{page_id}", params={"expand": PAGE_METADATA_EXPAND})
        try:
            return int(current["version"]["number"])
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteApiError(
                f"Page {page_id} response did not include a version number"
            ) from e

    def write_page_version(
        self, page_id: str, title: str, body: str, version: int
    ) -> ConfluencePage:
        """Second phase of an update: write the page as the given version."""
        logger.debug(f"Updating page {page_id} to version {version} with title '{title}'")
        payload = {
            "type": CONTENT_TYPE_PAGE,
            "title": title,
            "version": {"number": version},
            "body": _storage_body(body),
        }
        result = self._put(f"{CONTENT_PATH}/{page_id}", data=payload)
        return ConfluencePage.from_api_response(result)

    def _create_or_update_page(
        self,
        title: str,
        body: str,
        space_key: str | None = None,
        parent_id: str | None = None,
        page_id: str | None = None,
    ) -> ConfluencePage:
        if page_id:
            current_version = self.read_current_version(page_id)
            return self.write_page_version(page_id, title, body, current_version + 1)

        logger.debug(f"Creating page '{title}' in space '{space_key}'")
        payload: dict[str, Any] = {
            "type": CONTENT_TYPE_PAGE,
            "title": title,
            "space": {"key": space_key},
            "body": _storage_body(body),
        }
        if parent_id:
            payload["ancestors"] = [{"id": parent_id}]

        result = self._post(CONTENT_PATH, data=payload)
        page = ConfluencePage.from_api_response(result)
        if page.parent_id is None and parent_id:
            page = page.model_copy(update={"parent_id": parent_id})
        logger.info(f"Created page {page.id} '{page.title}' in space {space_key}")
        return page
