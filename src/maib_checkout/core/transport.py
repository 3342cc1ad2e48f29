"""
HTTP transport for the checkout API and interpretation of its response envelope.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SDK_NAME, USER_AGENT
from .errors import MaibCheckoutApiError
from .operations import OperationRequest

__all__ = ["CheckoutTransport"]


def _format_error(error: Any) -> str:
    if isinstance(error, dict):
        return f"{error.get('errorMessage')} ({error.get('errorCode')})"
    return str(error)


def _log_data(response: requests.Response) -> Dict[str, Any]:
    request = response.request
    return {
        "method": request.method if request is not None else None,
        "url": response.url,
        "status": response.status_code,
        "data": response.text,
    }


def _log_response(response: requests.Response, *args: Any, **kwargs: Any) -> requests.Response:
    data = _log_data(response)
    if response.status_code >= 400:
        logging.error(
            "%s Error: %s %s %s %s",
            SDK_NAME,
            data["status"],
            data["method"],
            data["url"],
            data["data"],
        )
    else:
        logging.debug(
            "%s Response: %s %s %s %s",
            SDK_NAME,
            data["status"],
            data["method"],
            data["url"],
            data["data"],
        )
    return response


class CheckoutTransport:
    """
    Sends one request per call and unwraps the ``{ok, result, errors}`` envelope.

    Every HTTP status is handed to :meth:`handle_response`; the envelope, not the
    status code, decides whether a call succeeded.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.session = session or requests.Session()

    def setup_logging(self) -> None:
        """Log every response (status, URL and body) through a session hook."""
        hooks = self.session.hooks.setdefault("response", [])
        if _log_response not in hooks:
            hooks.append(_log_response)

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint.lstrip('/')}"

    def send(self, operation: OperationRequest) -> Any:
        url = self.url_for(operation.endpoint)
        headers = {"User-Agent": USER_AGENT}
        headers.update(operation.headers)

        logging.info("Sending %s request to %s", operation.method, url)
        response = self.session.request(
            operation.method,
            url,
            json=operation.data,
            params=operation.params,
            headers=headers,
            timeout=self.timeout,
        )
        return self.handle_response(response, operation.endpoint)

    @staticmethod
    def handle_response(response: requests.Response, endpoint: str) -> Any:
        invalid = f"Invalid response received from server for endpoint {endpoint}"
        if not response.content:
            raise MaibCheckoutApiError(invalid, response)
        try:
            payload = response.json()
        except ValueError as exc:
            raise MaibCheckoutApiError(invalid, response) from exc
        if not isinstance(payload, dict):
            raise MaibCheckoutApiError(invalid, response)

        if payload.get("ok"):
            result = payload.get("result")
            if result is not None:
                return result
            raise MaibCheckoutApiError(f"{invalid}: missing 'result' field", response)

        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            messages = "; ".join(_format_error(error) for error in errors)
            raise MaibCheckoutApiError(
                f"Error sending request to endpoint {endpoint}: {messages}",
                response,
                errors,
            )

        raise MaibCheckoutApiError(
            f"{invalid}: missing 'ok' and 'errors' fields", response
        )
