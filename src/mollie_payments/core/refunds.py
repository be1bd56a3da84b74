"""
Refunds issued against a payment.

Order refunds share the :class:`Refund` model; they are created through
:class:`mollie_payments.core.orders.OrderService`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from .transport import Result, Transport, no_content
from .types import (
    UNSET,
    Amount,
    Link,
    ListParams,
    ListResult,
    RequestBody,
    Unset,
    parse_amount,
    parse_datetime,
    parse_links,
)

__all__ = ["Refund", "RefundRequest", "RefundService"]


@dataclass(frozen=True)
class Refund:
    id: str
    resource: Optional[str] = None
    amount: Optional[Amount] = None
    settlement_amount: Optional[Amount] = None
    description: Optional[str] = None
    metadata: Any = None
    status: Optional[str] = None
    lines: List[Dict[str, Any]] = field(default_factory=list)
    payment_id: Optional[str] = None
    order_id: Optional[str] = None
    created_at: Optional[datetime] = None
    links: Dict[str, Link] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Refund":
        return cls(
            id=payload["id"],
            resource=payload.get("resource"),
            amount=parse_amount(payload.get("amount")),
            settlement_amount=parse_amount(payload.get("settlementAmount")),
            description=payload.get("description"),
            metadata=payload.get("metadata"),
            status=payload.get("status"),
            lines=list(payload.get("lines") or []),
            payment_id=payload.get("paymentId"),
            order_id=payload.get("orderId"),
            created_at=parse_datetime(payload.get("createdAt")),
            links=parse_links(payload),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class RefundRequest(RequestBody):
    amount: Amount
    description: str | Unset = UNSET
    metadata: Any = UNSET


REFUND_LIST = ListResult.decoder("refunds", Refund.from_response)


class RefundService:
    """Refunds for a single payment, under ``payments/<id>/refunds``."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, payment_id: str, params: Optional[ListParams] = None) -> Result:
        return self.transport.get(
            f"payments/{payment_id}/refunds", params=params, decode=REFUND_LIST
        )

    def fetch(self, payment_id: str, refund_id: str) -> Result:
        return self.transport.get(
            f"payments/{payment_id}/refunds/{refund_id}", decode=Refund.from_response
        )

    def create(self, payment_id: str, request: RefundRequest) -> Result:
        return self.transport.post(
            f"payments/{payment_id}/refunds", body=request, decode=Refund.from_response
        )

    def cancel(self, payment_id: str, refund_id: str) -> Result:
        # The API answers 204 with no body, so the value is always None.
        return self.transport.delete(
            f"payments/{payment_id}/refunds/{refund_id}", decode=no_content
        )
