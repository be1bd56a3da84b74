"""
Customers, plus the payments and mandates that hang off a customer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from .mandates import MANDATE_LIST, Mandate, MandateRequest
from .payments import PAYMENT_LIST, Payment, PaymentRequest
from .transport import Result, Transport, no_content
from .types import (
    UNSET,
    Link,
    ListParams,
    ListResult,
    RequestBody,
    Unset,
    parse_datetime,
    parse_links,
)

__all__ = ["Customer", "CustomerRequest", "CustomerService"]


@dataclass(frozen=True)
class Customer:
    id: str
    resource: Optional[str] = None
    mode: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    locale: Optional[str] = None
    metadata: Any = None
    created_at: Optional[datetime] = None
    links: Dict[str, Link] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Customer":
        return cls(
            id=payload["id"],
            resource=payload.get("resource"),
            mode=payload.get("mode"),
            name=payload.get("name"),
            email=payload.get("email"),
            locale=payload.get("locale"),
            metadata=payload.get("metadata"),
            created_at=parse_datetime(payload.get("createdAt")),
            links=parse_links(payload),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class CustomerRequest(RequestBody):
    name: str | Unset = UNSET
    email: str | Unset = UNSET
    locale: str | Unset = UNSET
    metadata: Any = UNSET


_CUSTOMER_LIST = ListResult.decoder("customers", Customer.from_response)


class CustomerService:
    """Customer records and their nested payments and mandates."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, params: Optional[ListParams] = None) -> Result:
        return self.transport.get("customers", params=params, decode=_CUSTOMER_LIST)

    def fetch(self, customer_id: str) -> Result:
        return self.transport.get(f"customers/{customer_id}", decode=Customer.from_response)

    def create(self, request: CustomerRequest) -> Result:
        return self.transport.post("customers", body=request, decode=Customer.from_response)

    def update(self, customer_id: str, request: CustomerRequest) -> Result:
        return self.transport.patch(
            f"customers/{customer_id}", body=request, decode=Customer.from_response
        )

    def delete(self, customer_id: str) -> Result:
        return self.transport.delete(f"customers/{customer_id}", decode=no_content)

    def payment_list(self, customer_id: str, params: Optional[ListParams] = None) -> Result:
        return self.transport.get(
            f"customers/{customer_id}/payments", params=params, decode=PAYMENT_LIST
        )

    def create_payment(self, customer_id: str, request: PaymentRequest) -> Result:
        return self.transport.post(
            f"customers/{customer_id}/payments", body=request, decode=Payment.from_response
        )

    def mandate_list(self, customer_id: str, params: Optional[ListParams] = None) -> Result:
        return self.transport.get(
            f"customers/{customer_id}/mandates", params=params, decode=MANDATE_LIST
        )

    def create_mandate(self, customer_id: str, request: MandateRequest) -> Result:
        return self.transport.post(
            f"customers/{customer_id}/mandates", body=request, decode=Mandate.from_response
        )

    def fetch_mandate(self, customer_id: str, mandate_id: str) -> Result:
        return self.transport.get(
            f"customers/{customer_id}/mandates/{mandate_id}", decode=Mandate.from_response
        )
