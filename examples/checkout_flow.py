"""
Sandbox walkthrough: register a hosted checkout, inspect it, then cancel it.
"""

from __future__ import annotations

import argparse
import logging
import sys
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Tuple

from maib_checkout import (
    ConfigError,
    MaibCheckoutError,
    authenticate,
    create_checkout_client,
    load_checkout_config,
)


def _override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _build_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    return {key: value for key, value in pairs}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Register and cancel a sandbox checkout session")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MAIB_CHECKOUT_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--amount", type=Decimal, default=Decimal("50.61"))
    parser.add_argument("--currency", default="MDL")
    parser.add_argument("--callback-url", default="https://example.com/callback")
    parser.add_argument(
        "--keep-open",
        action="store_true",
        help="Leave the checkout session open instead of cancelling it",
    )
    return parser.parse_args()


def build_checkout_data(amount: Decimal, currency: str, callback_url: str) -> dict[str, object]:
    return {
        "amount": float(amount),
        "currency": currency,
        "orderInfo": {
            "id": uuid.uuid4().hex[:10].upper(),
            "description": "Sandbox order",
            "date": datetime.now(timezone.utc).isoformat(),
            "items": [
                {
                    "externalId": "1",
                    "title": "Sample product",
                    "amount": float(amount),
                    "currency": currency,
                    "quantity": 1,
                },
            ],
        },
        "language": "ro",
        "callbackUrl": callback_url,
        "successUrl": callback_url,
        "failUrl": callback_url,
    }


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_checkout_config(
            env_file=args.env_file,
            overrides=_build_overrides(args.set or ()),
            sandbox=True,
        )
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_checkout_client(config=config)
    client.setup_logging()

    try:
        token = authenticate(config, session=client.session).access_token
        registered = client.checkout_register(
            build_checkout_data(args.amount, args.currency, args.callback_url),
            token,
        )
        checkout_id = registered["checkoutId"]
        logging.info("Checkout %s registered: %s", checkout_id, registered.get("checkoutUrl"))

        details = client.checkout_details(checkout_id, token)
        logging.info("Checkout %s status: %s", checkout_id, details.get("status"))

        if args.keep_open:
            return 0

        cancelled = client.checkout_cancel(checkout_id, token)
        logging.info("Checkout %s status: %s", checkout_id, cancelled.get("status"))
    except MaibCheckoutError as exc:
        logging.error("Checkout flow failed: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
