"""Exceptions raised by the recipe browser core."""

from typing import Optional


class RecipeBrowserError(Exception):
    """Base class for recipe browser errors."""


class SearchFailed(RecipeBrowserError):
    """
    A recipe search could not produce a result list.

    Raised for transport errors, non-2xx responses and undecodable response
    bodies. The underlying exception is chained as __cause__.

    Attributes:
        status_code: HTTP status of the response, if one was received
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
