"""
Recipe search controller.

RecipeSearchController owns the search box text and the most recent result
list for one UI session, and runs the async lookup against the recipe service.

Search flow: Streamlit search box -> set_query_text() -> search() ->
RecipeServiceClient.find_recipes() -> GET /find-recipe -> List[RecipeResult]

Result policy:
- A successful search replaces the result list wholesale.
- A failed search raises SearchFailed and leaves the previous results visible.
- Overlapping searches are not cancelled. Each successful one writes the result
  list when it resolves, so the response that arrives last wins, even if it
  belongs to the search that was issued first. This is a known limitation.
"""

import logging
from typing import List, Optional

from recipe_browser.client import RecipeServiceClient
from recipe_browser.exceptions import SearchFailed
from recipe_browser.models import RecipeResult

logger = logging.getLogger(__name__)


class RecipeSearchController:
    """Search lifecycle state for one UI session."""

    def __init__(self, client: Optional[RecipeServiceClient] = None):
        self.client = client or RecipeServiceClient()
        self._query_text = ""
        self._results: List[RecipeResult] = []
        self._in_flight = 0
        self._last_error: Optional[SearchFailed] = None
        self._has_searched = False

    @property
    def query_text(self) -> str:
        """Ingredient text the next search() will send."""
        return self._query_text

    @property
    def results(self) -> List[RecipeResult]:
        """Results of the most recent successful search (a copy)."""
        return list(self._results)

    @property
    def is_searching(self) -> bool:
        """True while at least one search is awaiting its response."""
        return self._in_flight > 0

    @property
    def last_error(self) -> Optional[SearchFailed]:
        """The most recent failure, cleared by the next successful search."""
        return self._last_error

    @property
    def has_searched(self) -> bool:
        """True once any search has completed successfully."""
        return self._has_searched

    def set_query_text(self, text: str) -> None:
        """Store the ingredient text for the next search. No validation is done."""
        self._query_text = text

    async def search(self) -> List[RecipeResult]:
        """
        Search the recipe service for the current query text.

        Returns:
            The new result list

        Raises:
            SearchFailed: If the lookup fails. The previous result list is kept.
        """
        query = self._query_text
        logger.info("Recipe search request: key_ingredient=%r", query)

        self._in_flight += 1
        try:
            results = await self.client.find_recipes(query)
        except SearchFailed as e:
            logger.warning("Recipe search for %r failed: %s", query, e)
            self._last_error = e
            raise
        finally:
            self._in_flight -= 1

        # Last response to resolve wins
        self._results = results
        self._last_error = None
        self._has_searched = True
        logger.info("Recipe search for %r returned %d results", query, len(results))
        return list(results)
