"""
The top-level client that bundles one instance of every service.
"""

from __future__ import annotations

from typing import Any, List, Optional

import requests

from .chargebacks import ChargebackService
from .config import ClientConfig
from .customers import CustomerService
from .mandates import MandateService
from .methods import MethodService
from .orders import OrderService
from .payments import PaymentService
from .refunds import RefundService
from .subscriptions import SubscriptionService
from .transport import Transport, new_transport

__all__ = ["Client", "new_client"]


class Client:
    """
    Entry point to the Mollie API for one access token.

    Each service gets its own transport. The client keeps no other state, so
    one instance can be shared for the life of the process; rotating the
    token means building a new client. Sessions the client creates itself are
    released by :meth:`close` or by leaving a ``with`` block.
    """

    def __init__(
        self,
        access_token: str,
        *,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._transports: List[Transport] = []

        def transport() -> Transport:
            built = new_transport(access_token, config=config, session=session)
            self._transports.append(built)
            return built

        self.methods = MethodService(transport())
        self.payments = PaymentService(transport())
        self.refunds = RefundService(transport())
        self.chargebacks = ChargebackService(transport())
        self.customers = CustomerService(transport())
        self.mandates = MandateService(transport())
        self.subscriptions = SubscriptionService(transport())
        self.orders = OrderService(transport())

    def close(self) -> None:
        """Close the sessions the client created; an injected session stays open."""
        for transport in self._transports:
            transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def new_client(
    access_token: str,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
) -> Client:
    return Client(access_token, config=config, session=session)
