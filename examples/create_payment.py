"""
Minimal script that uses the public API to create, fetch and cancel a payment.

Reads ``MOLLIE_ACCESS_TOKEN`` (and the other ``MOLLIE_*`` settings) from the
environment or a ``.env`` file. Use a test-mode token.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Tuple

from mollie_payments import (
    Amount,
    ConfigError,
    PaymentRequest,
    create_client,
    load_client_config,
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
    return dict(pairs)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a Mollie payment using the client API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MOLLIE_* settings",
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
    parser.add_argument("--amount", default="10.50", help="Payment amount (default: 10.50)")
    parser.add_argument("--currency", default="EUR", help="ISO 4217 currency (default: EUR)")
    parser.add_argument("--description", default="A red bucket")
    parser.add_argument("--redirect-url", default="http://localhost/payment")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Leave the payment open instead of canceling it afterwards",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_client_config(
            env_file=args.env_file,
            overrides=_build_overrides(args.set or ()),
        )
        amount = Amount(args.currency, args.amount)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config)
    payment, response, error = client.payments.create(
        PaymentRequest(
            amount=amount,
            description=args.description,
            redirect_url=args.redirect_url,
        )
    )
    if error is not None:
        logging.error("Payment creation failed: %s", error)
        return 1
    logging.info(
        "Created payment %s (%s, HTTP %s), checkout at %s",
        payment.id,
        payment.status,
        response.status_code,
        payment.checkout_url,
    )

    fetched, _, error = client.payments.fetch(payment.id)
    if error is not None:
        logging.error("Fetching payment %s failed: %s", payment.id, error)
        return 1
    if fetched.amount != payment.amount:
        logging.error("Fetched amount %s differs from %s", fetched.amount, payment.amount)
        return 1

    if args.keep:
        return 0

    canceled, _, error = client.payments.cancel(payment.id)
    if error is not None:
        logging.error("Canceling payment %s failed: %s", payment.id, error)
        return 1
    logging.info("Payment %s is now %s", canceled.id, canceled.status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
