"""
Customer mandates: the authorisation to charge a customer's account later.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

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

__all__ = ["Mandate", "MandateDetails", "MandateRequest", "MandateService"]


@dataclass(frozen=True)
class MandateDetails:
    consumer_name: Optional[str] = None
    consumer_account: Optional[str] = None
    consumer_bic: Optional[str] = None
    card_holder: Optional[str] = None
    card_number: Optional[str] = None
    card_label: Optional[str] = None
    card_fingerprint: Optional[str] = None
    card_expiry_date: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Optional[Mapping[str, Any]]) -> "MandateDetails":
        payload = payload or {}
        return cls(
            consumer_name=payload.get("consumerName"),
            consumer_account=payload.get("consumerAccount"),
            consumer_bic=payload.get("consumerBic"),
            card_holder=payload.get("cardHolder"),
            card_number=payload.get("cardNumber"),
            card_label=payload.get("cardLabel"),
            card_fingerprint=payload.get("cardFingerprint"),
            card_expiry_date=payload.get("cardExpiryDate"),
        )


@dataclass(frozen=True)
class Mandate:
    id: str
    resource: Optional[str] = None
    mode: Optional[str] = None
    status: Optional[str] = None
    method: Optional[str] = None
    details: MandateDetails = field(default_factory=MandateDetails)
    mandate_reference: Optional[str] = None
    signature_date: Optional[str] = None
    created_at: Optional[datetime] = None
    links: Dict[str, Link] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Mandate":
        return cls(
            id=payload["id"],
            resource=payload.get("resource"),
            mode=payload.get("mode"),
            status=payload.get("status"),
            method=payload.get("method"),
            details=MandateDetails.from_response(payload.get("details")),
            mandate_reference=payload.get("mandateReference"),
            signature_date=payload.get("signatureDate"),
            created_at=parse_datetime(payload.get("createdAt")),
            links=parse_links(payload),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class MandateRequest(RequestBody):
    method: str
    consumer_name: str
    consumer_account: str | Unset = UNSET
    consumer_bic: str | Unset = UNSET
    signature_date: date | str | Unset = UNSET
    mandate_reference: str | Unset = UNSET


MANDATE_LIST = ListResult.decoder("mandates", Mandate.from_response)


class MandateService:
    """Mandates of one customer, under ``customers/<id>/mandates``."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, customer_id: str, params: Optional[ListParams] = None) -> Result:
        return self.transport.get(
            f"customers/{customer_id}/mandates", params=params, decode=MANDATE_LIST
        )

    def create(self, customer_id: str, request: MandateRequest) -> Result:
        return self.transport.post(
            f"customers/{customer_id}/mandates", body=request, decode=Mandate.from_response
        )

    def fetch(self, customer_id: str, mandate_id: str) -> Result:
        return self.transport.get(
            f"customers/{customer_id}/mandates/{mandate_id}", decode=Mandate.from_response
        )

    def revoke(self, customer_id: str, mandate_id: str) -> Result:
        return self.transport.delete(
            f"customers/{customer_id}/mandates/{mandate_id}", decode=no_content
        )
