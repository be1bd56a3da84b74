"""
Payments: create, read, update and cancel single payments.

The status of a payment (``open``, ``pending``, ``authorized``, ``paid``,
``canceled``, ``expired``, ``failed``) is owned by the API. The models here
mirror whatever the server reports and never validate transitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from .transport import Result, Transport
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

__all__ = [
    "ApplicationFee",
    "Payment",
    "PaymentRequest",
    "PaymentService",
    "PaymentUpdateRequest",
]


@dataclass(frozen=True)
class ApplicationFee:
    amount: Amount
    description: Optional[str] = None


@dataclass(frozen=True)
class Payment:
    id: str
    resource: Optional[str] = None
    mode: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    is_cancelable: bool = False
    authorized_at: Optional[datetime] = None
    paid_at: Optional[datetime] = None
    canceled_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    expired_at: Optional[datetime] = None
    failed_at: Optional[datetime] = None
    amount: Optional[Amount] = None
    amount_refunded: Optional[Amount] = None
    amount_remaining: Optional[Amount] = None
    amount_captured: Optional[Amount] = None
    settlement_amount: Optional[Amount] = None
    description: Optional[str] = None
    redirect_url: Optional[str] = None
    webhook_url: Optional[str] = None
    method: Optional[str] = None
    details: Any = None
    metadata: Any = None
    locale: Optional[str] = None
    country_code: Optional[str] = None
    profile_id: Optional[str] = None
    settlement_id: Optional[str] = None
    customer_id: Optional[str] = None
    sequence_type: Optional[str] = None
    mandate_id: Optional[str] = None
    subscription_id: Optional[str] = None
    order_id: Optional[str] = None
    application_fee: Optional[ApplicationFee] = None
    links: Dict[str, Link] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def checkout_url(self) -> Optional[str]:
        """Hosted checkout URL; only present while the payment is open."""
        link = self.links.get("checkout")
        return link.href if link is not None else None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Payment":
        fee = payload.get("applicationFee")
        return cls(
            id=payload["id"],
            resource=payload.get("resource"),
            mode=payload.get("mode"),
            status=payload.get("status"),
            created_at=parse_datetime(payload.get("createdAt")),
            is_cancelable=bool(payload.get("isCancelable", False)),
            authorized_at=parse_datetime(payload.get("authorizedAt")),
            paid_at=parse_datetime(payload.get("paidAt")),
            canceled_at=parse_datetime(payload.get("canceledAt")),
            expires_at=parse_datetime(payload.get("expiresAt")),
            expired_at=parse_datetime(payload.get("expiredAt")),
            failed_at=parse_datetime(payload.get("failedAt")),
            amount=parse_amount(payload.get("amount")),
            amount_refunded=parse_amount(payload.get("amountRefunded")),
            amount_remaining=parse_amount(payload.get("amountRemaining")),
            amount_captured=parse_amount(payload.get("amountCaptured")),
            settlement_amount=parse_amount(payload.get("settlementAmount")),
            description=payload.get("description"),
            redirect_url=payload.get("redirectUrl"),
            webhook_url=payload.get("webhookUrl"),
            method=payload.get("method"),
            details=payload.get("details"),
            metadata=payload.get("metadata"),
            locale=payload.get("locale"),
            country_code=payload.get("countryCode"),
            profile_id=payload.get("profileId"),
            settlement_id=payload.get("settlementId"),
            customer_id=payload.get("customerId"),
            sequence_type=payload.get("sequenceType"),
            mandate_id=payload.get("mandateId"),
            subscription_id=payload.get("subscriptionId"),
            order_id=payload.get("orderId"),
            application_fee=(
                ApplicationFee(
                    amount=Amount.from_response(fee["amount"]),
                    description=fee.get("description"),
                )
                if fee
                else None
            ),
            links=parse_links(payload),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class PaymentRequest(RequestBody):
    amount: Amount
    description: str
    redirect_url: str
    webhook_url: str | Unset = UNSET
    locale: str | Unset = UNSET
    method: str | Unset = UNSET
    metadata: Any = UNSET
    sequence_type: str | Unset = UNSET
    customer_id: str | Unset = UNSET
    mandate_id: str | Unset = UNSET


@dataclass(frozen=True)
class PaymentUpdateRequest(RequestBody):
    description: str | Unset = UNSET
    redirect_url: str | Unset = UNSET
    webhook_url: str | Unset = UNSET
    metadata: Any = UNSET


PAYMENT_LIST = ListResult.decoder("payments", Payment.from_response)


class PaymentService:
    """Create, read, update and cancel payments."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, params: Optional[ListParams] = None) -> Result:
        return self.transport.get("payments", params=params, decode=PAYMENT_LIST)

    def fetch(self, payment_id: str) -> Result:
        return self.transport.get(f"payments/{payment_id}", decode=Payment.from_response)

    def create(self, request: PaymentRequest) -> Result:
        return self.transport.post("payments", body=request, decode=Payment.from_response)

    def update(self, payment_id: str, request: PaymentUpdateRequest) -> Result:
        return self.transport.patch(
            f"payments/{payment_id}", body=request, decode=Payment.from_response
        )

    def cancel(self, payment_id: str) -> Result:
        """Cancel the payment; the result carries its post-cancellation state."""
        return self.transport.delete(f"payments/{payment_id}", decode=Payment.from_response)
