"""
Command-line interface for exercising the checkout API.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Tuple

import requests

from .api import authenticate, create_checkout_client
from .core.config import CheckoutConfig, load_checkout_config
from .core.errors import ConfigError, MaibCheckoutError
from .core.signature import validate_callback_signature


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    return {key: value for key, value in pairs}


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maib-checkout",
        description="Call the maib e-Commerce Checkout API",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MAIB_CHECKOUT_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("token", help="Obtain an access token with the configured credentials")

    checkout = commands.add_parser("checkout-details", help="Show a checkout session")
    checkout.add_argument("checkout_id")
    checkout.add_argument("--token", help="Access token (obtained from credentials when omitted)")

    payment = commands.add_parser("payment-details", help="Show a payment")
    payment.add_argument("payment_id")
    payment.add_argument("--token", help="Access token (obtained from credentials when omitted)")

    verify = commands.add_parser("verify-callback", help="Check the signature of a saved callback body")
    verify.add_argument("--body-file", required=True, type=Path, help="File holding the raw callback body")
    verify.add_argument("--signature", required=True, help="X-Signature header value (sha256=...)")
    verify.add_argument("--timestamp", required=True, help="X-Signature-Timestamp header value")

    return parser


def _access_token(config: CheckoutConfig, token: Optional[str], session: requests.Session) -> str:
    if token:
        return token
    return authenticate(config, session=session).access_token


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_checkout_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    if args.command == "verify-callback":
        return _verify_callback(config, args.body_file, args.signature, args.timestamp)

    session = requests.Session()
    client = create_checkout_client(config=config, session=session)

    try:
        if args.command == "token":
            result = client.generate_token(config.client_id, config.client_secret)
        elif args.command == "checkout-details":
            token = _access_token(config, args.token, session)
            result = client.checkout_details(args.checkout_id, token)
        else:
            token = _access_token(config, args.token, session)
            result = client.payment_details(args.payment_id, token)
    except (MaibCheckoutError, requests.RequestException) as exc:
        logging.error("Request failed: %s", exc)
        return 1

    _print_json(result)
    return 0


def _verify_callback(config: CheckoutConfig, body_file: Path, signature: str, timestamp: str) -> int:
    try:
        body = body_file.read_bytes()
    except OSError as exc:
        logging.error("Cannot read callback body: %s", exc)
        return 1

    try:
        valid = validate_callback_signature(body, signature, timestamp, config.signature_key)
    except MaibCheckoutError as exc:
        logging.error("Cannot verify callback: %s", exc)
        return 1

    if not valid:
        logging.error("Callback signature does not match")
        return 1

    logging.info("Callback signature is valid")
    return 0
