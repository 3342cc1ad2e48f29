"""
Exception hierarchy raised by the checkout client.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

__all__ = [
    "ConfigError",
    "MaibCheckoutApiError",
    "MaibCheckoutError",
    "MaibCheckoutValidationError",
]


class MaibCheckoutError(Exception):
    """Base class for every error raised by this package."""


class MaibCheckoutValidationError(MaibCheckoutError):
    """Raised before any network call when caller input is invalid."""


class MaibCheckoutApiError(MaibCheckoutError):
    """
    Raised when the API answered but the envelope reports a failure or is malformed.

    ``response`` is the raw :class:`requests.Response` and ``errors`` the list of
    ``{"errorCode", "errorMessage"}`` objects reported by the server, if any.
    """

    def __init__(
        self,
        message: str,
        response: Optional[requests.Response] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.response = response
        self.errors = list(errors or [])

    @property
    def status_code(self) -> Optional[int]:
        if self.response is None:
            return None
        return self.response.status_code


class ConfigError(MaibCheckoutError):
    """Raised when the supplied configuration is invalid."""
