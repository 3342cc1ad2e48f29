"""
Core primitives of the maib e-Commerce Checkout client.
"""

from .client import CheckoutClient
from .config import CheckoutConfig, load_checkout_config
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    REQUIRED_PARAMS,
    SANDBOX_BASE_URL,
    SIGNATURE_HEADER,
    SIGNATURE_TIMESTAMP_HEADER,
)
from .endpoints import API_ENDPOINTS, EndpointTemplate
from .environment import CheckoutEnvironment, build_environment, load_env_file
from .errors import (
    ConfigError,
    MaibCheckoutApiError,
    MaibCheckoutError,
    MaibCheckoutValidationError,
)
from .models import AccessToken
from .operations import OperationRequest, build_operation
from .signature import (
    compute_callback_signature,
    validate_callback_headers,
    validate_callback_signature,
)
from .transport import CheckoutTransport

__all__ = [
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
    "build_environment",
    "build_operation",
    "compute_callback_signature",
    "load_checkout_config",
    "load_env_file",
    "validate_callback_headers",
    "validate_callback_signature",
]
