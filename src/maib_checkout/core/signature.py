"""
Verification of signed callback notifications.

maib signs each callback with ``base64(HMAC-SHA256(key, body + "." + timestamp))``
and sends it as ``X-Signature: sha256=<value>`` next to ``X-Signature-Timestamp``.
The body must be the exact bytes received: parsing and re-serialising the JSON
changes the signed message.

https://docs.maibmerchants.md/checkout/api-reference/callback-notifications
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from typing import Mapping, Optional, Union

from requests.structures import CaseInsensitiveDict

from .constants import SIGNATURE_HEADER, SIGNATURE_PREFIX, SIGNATURE_TIMESTAMP_HEADER
from .errors import MaibCheckoutValidationError

__all__ = [
    "compute_callback_signature",
    "validate_callback_headers",
    "validate_callback_signature",
]

BytesLike = Union[str, bytes]


def _to_bytes(value: Union[BytesLike, int]) -> bytes:
    if isinstance(value, bytes):
        return value
    return str(value).encode("utf-8")


def compute_callback_signature(
    callback_body: BytesLike,
    signature_timestamp: Union[str, int],
    signature_key: BytesLike,
) -> str:
    message = _to_bytes(callback_body) + b"." + _to_bytes(signature_timestamp)
    digest = hmac.new(_to_bytes(signature_key), message, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def validate_callback_signature(
    callback_body: BytesLike,
    signature_header: Optional[str],
    signature_timestamp: Union[str, int, None],
    signature_key: Optional[BytesLike],
) -> bool:
    """
    Return ``True`` when ``signature_header`` matches the signature of the callback.

    Raises :class:`MaibCheckoutValidationError` when an argument is empty or the
    header does not carry a ``sha256=`` signature.
    """
    if not callback_body or not signature_header or not signature_timestamp or not signature_key:
        raise MaibCheckoutValidationError("Invalid arguments")

    received = ""
    if signature_header.startswith(SIGNATURE_PREFIX):
        received = signature_header[len(SIGNATURE_PREFIX):]
    if not received:
        raise MaibCheckoutValidationError("Invalid callback signature")

    expected = compute_callback_signature(callback_body, signature_timestamp, signature_key)
    return hmac.compare_digest(expected.encode("ascii"), received.encode("utf-8"))


def validate_callback_headers(
    callback_body: BytesLike,
    headers: Mapping[str, str],
    signature_key: Optional[BytesLike],
) -> bool:
    """Validate a callback using its ``X-Signature`` and ``X-Signature-Timestamp`` headers."""
    lookup = CaseInsensitiveDict(headers)
    return validate_callback_signature(
        callback_body,
        lookup.get(SIGNATURE_HEADER),
        lookup.get(SIGNATURE_TIMESTAMP_HEADER),
        signature_key,
    )
