"""
Static values shared by the maib e-Commerce Checkout client.

Base URLs and endpoint lists follow
https://docs.maibmerchants.md/checkout/getting-started/api-fundamentals
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "REQUIRED_PARAMS",
    "SANDBOX_BASE_URL",
    "SDK_NAME",
    "SDK_VERSION",
    "SIGNATURE_HEADER",
    "SIGNATURE_PREFIX",
    "SIGNATURE_TIMESTAMP_HEADER",
    "USER_AGENT",
]

SDK_NAME = "maib-checkout-python"
SDK_VERSION = "1.0.0"
USER_AGENT = f"{SDK_NAME}/{SDK_VERSION}"

DEFAULT_BASE_URL = "https://api.maibmerchants.md/v2/"
SANDBOX_BASE_URL = "https://sandbox.maibmerchants.md/v2/"

# seconds
DEFAULT_TIMEOUT = 30

REQUIRED_PARAMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "AUTH_TOKEN_PARAMS": ("clientId", "clientSecret"),
    # https://docs.maibmerchants.md/checkout/api-reference/endpoints/register-a-new-hosted-checkout-session#request
    "CHECKOUT_PARAMS": ("amount", "currency", "orderInfo", "callbackUrl"),
    # https://docs.maibmerchants.md/mia-qr-api/en/payment-simulation-sandbox
    "MIA_TEST_PAY_PARAMS": ("qrId", "amount", "iban", "currency", "payerName"),
})

# https://docs.maibmerchants.md/checkout/api-reference/callback-notifications
SIGNATURE_HEADER = "X-Signature"
SIGNATURE_TIMESTAMP_HEADER = "X-Signature-Timestamp"
SIGNATURE_PREFIX = "sha256="
