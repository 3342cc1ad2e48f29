"""
Client for the maib e-Commerce Checkout API endpoints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Sequence

import requests

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, REQUIRED_PARAMS
from .endpoints import API_ENDPOINTS, EndpointTemplate
from .operations import build_operation
from .transport import CheckoutTransport
from .validation import validate_credentials

if TYPE_CHECKING:
    from .config import CheckoutConfig

__all__ = ["CheckoutClient"]


class CheckoutClient:
    """
    One method per checkout API operation.

    Every method validates its inputs before any network call, sends a single
    request and returns the ``result`` object of the response envelope.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.transport = CheckoutTransport(base_url, timeout, session=session)

    @classmethod
    def from_config(
        cls,
        config: "CheckoutConfig",
        *,
        session: Optional[requests.Session] = None,
    ) -> "CheckoutClient":
        return cls(config.base_url, config.timeout_seconds, session=session)

    @property
    def base_url(self) -> str:
        return self.transport.base_url

    @property
    def timeout(self) -> float:
        return self.transport.timeout

    @property
    def session(self) -> requests.Session:
        return self.transport.session

    def setup_logging(self) -> None:
        self.transport.setup_logging()

    def _execute_operation(
        self,
        endpoint: EndpointTemplate,
        auth_token: Optional[str],
        data: Optional[Mapping[str, Any]] = None,
        required_params: Optional[Sequence[str]] = None,
        method: str = "POST",
        params: Optional[Mapping[str, Any]] = None,
        path_params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        operation = build_operation(
            method,
            endpoint,
            token=auth_token,
            data=data,
            required_params=required_params,
            params=params,
            path_params=path_params,
        )
        return self.transport.send(operation)

    # Auth

    def generate_token(self, client_id: str, client_secret: str) -> Dict[str, Any]:
        """
        Obtain an access token.

        https://docs.maibmerchants.md/checkout/api-reference/endpoints/authentication/obtain-authentication-token
        """
        validate_credentials(client_id, client_secret)
        operation = build_operation(
            "POST",
            API_ENDPOINTS["AUTH_TOKEN"],
            data={"clientId": client_id, "clientSecret": client_secret},
            required_params=REQUIRED_PARAMS["AUTH_TOKEN_PARAMS"],
            authenticated=False,
        )
        return self.transport.send(operation)

    # Checkout sessions

    def checkout_register(self, checkout_data: Mapping[str, Any], auth_token: str) -> Dict[str, Any]:
        """
        Register a new hosted checkout session.

        ``checkout_data`` must contain ``amount``, ``currency``, ``orderInfo`` and
        ``callbackUrl``. The result carries ``checkoutId`` and ``checkoutUrl``.
        """
        return self._execute_operation(
            API_ENDPOINTS["CHECKOUTS"],
            auth_token,
            checkout_data,
            REQUIRED_PARAMS["CHECKOUT_PARAMS"],
        )

    def checkout_cancel(self, checkout_id: str, auth_token: str) -> Dict[str, Any]:
        return self._execute_operation(
            API_ENDPOINTS["CHECKOUTS_CANCEL"],
            auth_token,
            path_params={"checkoutId": checkout_id},
        )

    def checkout_details(self, checkout_id: str, auth_token: str) -> Dict[str, Any]:
        return self._execute_operation(
            API_ENDPOINTS["CHECKOUTS_DETAILS"],
            auth_token,
            method="GET",
            path_params={"checkoutId": checkout_id},
        )

    def checkout_list(
        self,
        checkout_list_params: Optional[Mapping[str, Any]],
        auth_token: str,
    ) -> Dict[str, Any]:
        """
        Retrieve checkouts matching the given filter.

        Filter and sort keys (``count``, ``offset``, ``sortBy``, ``order``, ...)
        are sent as query parameters without validation.
        """
        return self._execute_operation(
            API_ENDPOINTS["CHECKOUTS"],
            auth_token,
            method="GET",
            params=checkout_list_params,
        )

    # Payments

    def payment_details(self, payment_id: str, auth_token: str) -> Dict[str, Any]:
        return self._execute_operation(
            API_ENDPOINTS["PAYMENTS_ID"],
            auth_token,
            method="GET",
            path_params={"payId": payment_id},
        )

    def payment_list(
        self,
        payment_list_params: Optional[Mapping[str, Any]],
        auth_token: str,
    ) -> Dict[str, Any]:
        return self._execute_operation(
            API_ENDPOINTS["PAYMENTS"],
            auth_token,
            method="GET",
            params=payment_list_params,
        )

    def payment_refund(
        self,
        payment_id: str,
        refund_data: Optional[Mapping[str, Any]],
        auth_token: str,
    ) -> Dict[str, Any]:
        """
        Refund a payment.

        Leave ``amount`` out of ``refund_data`` to refund the full payment.
        """
        return self._execute_operation(
            API_ENDPOINTS["PAYMENTS_REFUND"],
            auth_token,
            refund_data,
            path_params={"payId": payment_id},
        )

    # Sandbox

    def mia_test_pay(self, test_pay_data: Mapping[str, Any], auth_token: str) -> Dict[str, Any]:
        """
        Simulate a MIA QR payment. Only available on the sandbox environment.
        """
        return self._execute_operation(
            API_ENDPOINTS["MIA_TEST_PAY"],
            auth_token,
            test_pay_data,
            REQUIRED_PARAMS["MIA_TEST_PAY_PARAMS"],
        )
