import json
import os
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

from maib_checkout import SANDBOX_BASE_URL, CheckoutClient, CheckoutTransport


ACCESS_TOKEN = "test-access-token"
SIGNATURE_KEY = "test-signature-key"
TIMEOUT = 10


class ResponseFactory:
    """Builds real requests.Response objects without touching the network."""

    @staticmethod
    def create(
        payload: Any = None,
        status_code: int = 200,
        *,
        body: Optional[bytes] = None,
        url: str = SANDBOX_BASE_URL,
    ) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        if body is None:
            body = b"" if payload is None else json.dumps(payload).encode("utf-8")
        response._content = body
        response.encoding = "utf-8"
        response.url = url
        return response

    @classmethod
    def ok(cls, result: Any, status_code: int = 200) -> requests.Response:
        return cls.create({"ok": True, "result": result}, status_code)

    @classmethod
    def failed(cls, *errors: tuple, status_code: int = 400) -> requests.Response:
        return cls.create(
            {
                "ok": False,
                "errors": [
                    {"errorCode": code, "errorMessage": message} for code, message in errors
                ],
            },
            status_code,
        )


@pytest.fixture
def responses():
    return ResponseFactory


@pytest.fixture
def access_token():
    return ACCESS_TOKEN


@pytest.fixture
def signature_key():
    return SIGNATURE_KEY


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def transport(session):
    return CheckoutTransport(SANDBOX_BASE_URL, TIMEOUT, session=session)


@pytest.fixture
def client(session):
    return CheckoutClient(SANDBOX_BASE_URL, TIMEOUT, session=session)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep MAIB_CHECKOUT_* variables of the host out of configuration tests."""
    for key in list(os.environ):
        if key.startswith("MAIB_CHECKOUT_"):
            monkeypatch.delenv(key)
