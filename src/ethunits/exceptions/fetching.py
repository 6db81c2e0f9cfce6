"""
Data fetching exceptions for the ethunits package.

This module contains exceptions related to the external gas price and token price lookups.
"""

from typing import Any

from ethunits.exceptions.base import ExternalServiceError


class FetchingError(ExternalServiceError):
    """
    Base exception for data fetching errors.
    """


class NetworkError(FetchingError):
    """
    Raised when an external endpoint cannot be reached, fails, or returns an unusable payload.
    """

    def __init__(self, error: str, url: str | None = None) -> None:
        """
        Initialize NetworkError.

        Args:
            error: A description of the failure
            url: The endpoint that was requested, if known
        """
        self.url = url
        super().__init__(error=error if url is None else f"{error} ({url})")
        self.error = error

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.error, self.url)
