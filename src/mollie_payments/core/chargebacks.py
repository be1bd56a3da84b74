"""
Chargebacks received for a payment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from .transport import Result, Transport
from .types import (
    Amount,
    Link,
    ListParams,
    ListResult,
    parse_amount,
    parse_datetime,
    parse_links,
)

__all__ = ["Chargeback", "ChargebackService"]


@dataclass(frozen=True)
class Chargeback:
    id: str
    resource: Optional[str] = None
    amount: Optional[Amount] = None
    settlement_amount: Optional[Amount] = None
    created_at: Optional[datetime] = None
    reversed_at: Optional[datetime] = None
    payment_id: Optional[str] = None
    links: Dict[str, Link] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Chargeback":
        return cls(
            id=payload["id"],
            resource=payload.get("resource"),
            amount=parse_amount(payload.get("amount")),
            settlement_amount=parse_amount(payload.get("settlementAmount")),
            created_at=parse_datetime(payload.get("createdAt")),
            reversed_at=parse_datetime(payload.get("reversedAt")),
            payment_id=payload.get("paymentId"),
            links=parse_links(payload),
            raw=dict(payload),
        )


_CHARGEBACK_LIST = ListResult.decoder("chargebacks", Chargeback.from_response)


class ChargebackService:
    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, payment_id: str, params: Optional[ListParams] = None) -> Result:
        return self.transport.get(
            f"payments/{payment_id}/chargebacks", params=params, decode=_CHARGEBACK_LIST
        )

    def fetch(self, payment_id: str, chargeback_id: str) -> Result:
        return self.transport.get(
            f"payments/{payment_id}/chargebacks/{chargeback_id}",
            decode=Chargeback.from_response,
        )
