"""
Public, high-level helpers for the maib e-Commerce Checkout API.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import CheckoutClient
from .core.config import CheckoutConfig, load_checkout_config
from .core.errors import MaibCheckoutValidationError
from .core.models import AccessToken
from .core.signature import BytesLike, validate_callback_headers

__all__ = [
    "authenticate",
    "create_checkout_client",
    "verify_callback",
]


def create_checkout_client(
    *,
    config: Optional[CheckoutConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    base_url: Optional[str] = None,
    sandbox: Optional[bool] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> CheckoutClient:
    """
    Construct a :class:`CheckoutClient`.

    Callers either supply a ready-made :class:`CheckoutConfig` or let the helper
    assemble one from environment data.
    """
    if config is not None:
        extras = (overrides, base, base_url, sandbox, timeout_seconds)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built CheckoutConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_checkout_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            base_url=base_url,
            sandbox=sandbox,
            timeout_seconds=timeout_seconds,
        )
    return CheckoutClient.from_config(cfg, session=session)


def authenticate(
    config: CheckoutConfig,
    *,
    session: Optional[requests.Session] = None,
) -> AccessToken:
    """Obtain an access token using the credentials held by ``config``."""
    client = CheckoutClient.from_config(config, session=session)
    result = client.generate_token(config.client_id, config.client_secret)
    return AccessToken.from_result(result)


def verify_callback(
    callback_body: BytesLike,
    headers: Mapping[str, str],
    *,
    signature_key: Optional[str] = None,
    config: Optional[CheckoutConfig] = None,
) -> bool:
    """
    Check the signature headers of a callback notification.

    ``callback_body`` must be the raw request body exactly as received. The key
    is taken from ``signature_key`` or, failing that, from ``config``.
    """
    key = signature_key
    if key is None and config is not None:
        key = config.signature_key
    if not key:
        raise MaibCheckoutValidationError("Signature key is required")
    return validate_callback_headers(callback_body, headers, key)
