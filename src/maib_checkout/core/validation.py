"""
Precondition checks applied before a request leaves the process.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from .errors import MaibCheckoutValidationError

__all__ = [
    "validate_access_token",
    "validate_credentials",
    "validate_id_param",
    "validate_params",
]


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def validate_access_token(token: Optional[str]) -> None:
    if _is_blank(token):
        raise MaibCheckoutValidationError("Access token is required")


def validate_credentials(client_id: Optional[str], client_secret: Optional[str]) -> None:
    if _is_blank(client_id) or _is_blank(client_secret):
        raise MaibCheckoutValidationError("Client ID and Client Secret are required")


def validate_id_param(entity_id: Any) -> None:
    if _is_blank(entity_id):
        raise MaibCheckoutValidationError("ID parameter is required")


def validate_params(
    data: Optional[Mapping[str, Any]],
    required_params: Optional[Sequence[str]],
) -> None:
    """
    Ensure every name in ``required_params`` is present and not ``None`` in ``data``.

    All missing names are reported at once, in the order they were declared.
    """
    if not required_params:
        return

    if data is None:
        raise MaibCheckoutValidationError(
            f"Missing required parameters: {', '.join(required_params)}"
        )
    if not isinstance(data, Mapping):
        raise MaibCheckoutValidationError(
            f"Request data must be a mapping, got {type(data).__name__}"
        )

    missing = [name for name in required_params if data.get(name) is None]
    if missing:
        raise MaibCheckoutValidationError(
            f"Missing required parameters: {', '.join(missing)}"
        )
