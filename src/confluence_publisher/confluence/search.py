"""Module for Confluence search operations."""

import logging

from ..models.confluence import ConfluenceSearchResultItem, SearchQuery
from ..models.constants import DEFAULT_SEARCH_EXPAND, DEFAULT_SEARCH_LIMIT
from .client import ConfluenceClient

logger = logging.getLogger("confluence-publisher")

SEARCH_PATH = "rest/api/content/search"


class SearchMixin(ConfluenceClient):
    """Mixin for Confluence search operations."""

    # Confluence Cloud API max limit per request
    MAX_CQL_LIMIT = 250

    def search(
        self,
        query: str,
        limit: int = DEFAULT_SEARCH_LIMIT,
        *,
        is_structured_query: bool = True,
        expand: str = DEFAULT_SEARCH_EXPAND,
    ) -> list[ConfluenceSearchResultItem]:
        """
        Search content, returning a single page of results.

        Args:
            query: CQL string, or plain text when is_structured_query is False
            limit: Maximum number of results to return (capped at 250)
            is_structured_query: Pass the query through as CQL when True,
                wrap it in a full-text match when False (keyword-only)
            expand: Sub-resources to include in each result (keyword-only)

        Returns:
            Search hits in the order Confluence returned them

        Raises:
            RemoteApiError: On malformed queries or transport failure
        """
        search_query = SearchQuery(
            query_text=query,
            is_structured_query=is_structured_query,
            limit=min(limit, self.MAX_CQL_LIMIT),
            expand=expand,
        )
        params = search_query.to_params()
        logger.debug(f"Searching with CQL: {params['cql']} (limit={params['limit']})")

        response = self._get(SEARCH_PATH, params=params)
        results = [
            ConfluenceSearchResultItem.from_api_response(item)
            for item in response.get("results", [])
        ]
        logger.info(f"Search returned {len(results)} results")
        return results
