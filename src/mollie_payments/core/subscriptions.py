"""
Recurring subscriptions attached to a customer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
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

__all__ = ["Subscription", "SubscriptionRequest", "SubscriptionService"]


@dataclass(frozen=True)
class Subscription:
    id: str
    resource: Optional[str] = None
    mode: Optional[str] = None
    created_at: Optional[datetime] = None
    status: Optional[str] = None
    amount: Optional[Amount] = None
    times: Optional[int] = None
    times_remaining: Optional[int] = None
    interval: Optional[str] = None
    start_date: Optional[str] = None
    next_payment_date: Optional[str] = None
    description: Optional[str] = None
    method: Optional[str] = None
    mandate_id: Optional[str] = None
    canceled_at: Optional[datetime] = None
    webhook_url: Optional[str] = None
    metadata: Any = None
    customer_id: Optional[str] = None
    links: Dict[str, Link] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Subscription":
        return cls(
            id=payload["id"],
            resource=payload.get("resource"),
            mode=payload.get("mode"),
            created_at=parse_datetime(payload.get("createdAt")),
            status=payload.get("status"),
            amount=parse_amount(payload.get("amount")),
            times=payload.get("times"),
            times_remaining=payload.get("timesRemaining"),
            interval=payload.get("interval"),
            start_date=payload.get("startDate"),
            next_payment_date=payload.get("nextPaymentDate"),
            description=payload.get("description"),
            method=payload.get("method"),
            mandate_id=payload.get("mandateId"),
            canceled_at=parse_datetime(payload.get("canceledAt")),
            webhook_url=payload.get("webhookUrl"),
            metadata=payload.get("metadata"),
            customer_id=payload.get("customerId"),
            links=parse_links(payload),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class SubscriptionRequest(RequestBody):
    """
    Body for creating or updating a subscription.

    Creating requires ``amount``, ``interval`` and ``description``; an update
    sends only the fields that were set.
    """

    amount: Amount | Unset = UNSET
    interval: str | Unset = UNSET
    description: str | Unset = UNSET
    times: int | Unset = UNSET
    start_date: date | str | Unset = UNSET
    method: str | Unset = UNSET
    mandate_id: str | Unset = UNSET
    webhook_url: str | Unset = UNSET
    metadata: Any = UNSET


_SUBSCRIPTION_LIST = ListResult.decoder("subscriptions", Subscription.from_response)


class SubscriptionService:
    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, customer_id: str, params: Optional[ListParams] = None) -> Result:
        return self.transport.get(
            f"customers/{customer_id}/subscriptions",
            params=params,
            decode=_SUBSCRIPTION_LIST,
        )

    def fetch(self, customer_id: str, subscription_id: str) -> Result:
        return self.transport.get(
            f"customers/{customer_id}/subscriptions/{subscription_id}",
            decode=Subscription.from_response,
        )

    def create(self, customer_id: str, request: SubscriptionRequest) -> Result:
        return self.transport.post(
            f"customers/{customer_id}/subscriptions",
            body=request,
            decode=Subscription.from_response,
        )

    def update(
        self,
        customer_id: str,
        subscription_id: str,
        request: SubscriptionRequest,
    ) -> Result:
        return self.transport.patch(
            f"customers/{customer_id}/subscriptions/{subscription_id}",
            body=request,
            decode=Subscription.from_response,
        )

    def cancel(self, customer_id: str, subscription_id: str) -> Result:
        return self.transport.delete(
            f"customers/{customer_id}/subscriptions/{subscription_id}",
            decode=Subscription.from_response,
        )
