"""
Recipe service client.

This module is the single place that talks HTTP to the recipe service. The
service exposes one endpoint:

    GET /find-recipe?key-ingredient=<ingredient>

which returns a JSON array of {"Name", "Img", "Url"} objects.

Every failure mode (timeouts, connection errors, non-2xx responses, bodies that
are not JSON or do not match the expected shape) is converted to SearchFailed
so callers only ever handle one exception type.
"""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from recipe_browser.config import RecipeServiceConfig
from recipe_browser.exceptions import SearchFailed
from recipe_browser.models import RecipeResult, parse_result_list

logger = logging.getLogger(__name__)

FIND_RECIPE_PATH = "/find-recipe"
KEY_INGREDIENT_PARAM = "key-ingredient"


class RecipeServiceClient:
    """
    Async client for the recipe service.

    If no http_client is given, a short-lived httpx.AsyncClient is opened for
    each request. Pass a shared client to reuse connections, or one built on
    httpx.MockTransport in tests.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or RecipeServiceConfig.get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else RecipeServiceConfig.get_timeout()
        self._http_client = http_client

    @property
    def find_recipe_url(self) -> str:
        return f"{self.base_url}{FIND_RECIPE_PATH}"

    async def find_recipes(self, key_ingredient: str) -> List[RecipeResult]:
        """
        Look up recipes by key ingredient.

        Args:
            key_ingredient: Free-text ingredient (may be empty)

        Returns:
            List of RecipeResult in the order the service returned them

        Raises:
            SearchFailed: On any transport, status or decoding failure
        """
        params = {KEY_INGREDIENT_PARAM: key_ingredient}

        try:
            if self._http_client is not None:
                response = await self._http_client.get(self.find_recipe_url, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(self.find_recipe_url, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise SearchFailed("Recipe service timed out") from e
        except httpx.HTTPStatusError as e:
            raise SearchFailed(
                f"Recipe service returned an error: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise SearchFailed(f"Could not reach recipe service: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise SearchFailed("Recipe service returned a body that is not JSON", status_code=response.status_code) from e

        try:
            return parse_result_list(payload)
        except ValidationError as e:
            logger.debug("Undecodable recipe payload: %s", e)
            raise SearchFailed(
                "Recipe service returned an unexpected response shape",
                status_code=response.status_code,
            ) from e
