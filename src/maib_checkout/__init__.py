"""
Python client for the maib e-Commerce Checkout API.

The most useful pieces are re-exported here so integrators can
``from maib_checkout import ...`` without navigating the package.
"""

from .api import authenticate, create_checkout_client, verify_callback
from .core import (
    API_ENDPOINTS,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    REQUIRED_PARAMS,
    SANDBOX_BASE_URL,
    SIGNATURE_HEADER,
    SIGNATURE_TIMESTAMP_HEADER,
    AccessToken,
    CheckoutClient,
    CheckoutConfig,
    CheckoutEnvironment,
    CheckoutTransport,
    ConfigError,
    EndpointTemplate,
    MaibCheckoutApiError,
    MaibCheckoutError,
    MaibCheckoutValidationError,
    OperationRequest,
    build_environment,
    build_operation,
    compute_callback_signature,
    load_checkout_config,
    load_env_file,
    validate_callback_headers,
    validate_callback_signature,
)
from .core.constants import SDK_VERSION as __version__

__all__ = (
    "API_ENDPOINTS",
    "AccessToken",
    "CheckoutClient",
    "CheckoutConfig",
    "CheckoutEnvironment",
    "CheckoutTransport",
    "ConfigError",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "EndpointTemplate",
    "MaibCheckoutApiError",
    "MaibCheckoutError",
    "MaibCheckoutValidationError",
    "OperationRequest",
    "REQUIRED_PARAMS",
    "SANDBOX_BASE_URL",
    "SIGNATURE_HEADER",
    "SIGNATURE_TIMESTAMP_HEADER",
    "authenticate",
    "build_environment",
    "build_operation",
    "compute_callback_signature",
    "create_checkout_client",
    "load_checkout_config",
    "load_env_file",
    "validate_callback_headers",
    "validate_callback_signature",
    "verify_callback",
)
