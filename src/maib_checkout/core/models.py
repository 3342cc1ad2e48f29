"""
Typed wrappers around selected API results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import MaibCheckoutApiError

__all__ = ["AccessToken"]


@dataclass(frozen=True)
class AccessToken:
    access_token: str
    expires_in: Optional[int]
    token_type: Optional[str]
    raw: Dict[str, Any]

    @classmethod
    def from_result(cls, result: Dict[str, Any]) -> "AccessToken":
        access_token = result.get("accessToken")
        if not access_token:
            raise MaibCheckoutApiError("Token result is missing the 'accessToken' field")
        return cls(
            access_token=access_token,
            expires_in=result.get("expiresIn"),
            token_type=result.get("tokenType"),
            raw=result,
        )
