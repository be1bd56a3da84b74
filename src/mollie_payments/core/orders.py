"""
Orders and their lines, order payments and order refunds.

An order's ``amount`` must equal the sum of its lines' ``total_amount``
values, discount lines included. The API enforces this and rejects
mismatches with an error envelope; the client does no arithmetic of its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .payments import Payment
from .refunds import REFUND_LIST, Refund
from .transport import Result, Transport
from .types import (
    UNSET,
    Address,
    Amount,
    Link,
    ListParams,
    ListResult,
    RequestBody,
    Unset,
    parse_address,
    parse_amount,
    parse_datetime,
    parse_links,
)

__all__ = [
    "Order",
    "OrderLine",
    "OrderLineRequest",
    "OrderPaymentRequest",
    "OrderRefundLine",
    "OrderRefundRequest",
    "OrderRequest",
    "OrderRequestPayment",
    "OrderService",
    "OrderUpdateRequest",
]


@dataclass(frozen=True)
class OrderLine:
    id: Optional[str] = None
    resource: Optional[str] = None
    order_id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    quantity: Optional[int] = None
    unit_price: Optional[Amount] = None
    discount_amount: Optional[Amount] = None
    total_amount: Optional[Amount] = None
    vat_rate: Optional[str] = None
    vat_amount: Optional[Amount] = None
    sku: Optional[str] = None
    image_url: Optional[str] = None
    product_url: Optional[str] = None
    metadata: Any = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "OrderLine":
        links = parse_links(payload)
        image = links.get("imageUrl")
        product = links.get("productUrl")
        return cls(
            id=payload.get("id"),
            resource=payload.get("resource"),
            order_id=payload.get("orderId"),
            type=payload.get("type"),
            name=payload.get("name"),
            status=payload.get("status"),
            quantity=payload.get("quantity"),
            unit_price=parse_amount(payload.get("unitPrice")),
            discount_amount=parse_amount(payload.get("discountAmount")),
            total_amount=parse_amount(payload.get("totalAmount")),
            vat_rate=payload.get("vatRate"),
            vat_amount=parse_amount(payload.get("vatAmount")),
            sku=payload.get("sku"),
            image_url=payload.get("imageUrl") or (image.href if image else None),
            product_url=payload.get("productUrl") or (product.href if product else None),
            metadata=payload.get("metadata"),
        )


@dataclass(frozen=True)
class Order:
    id: str
    resource: Optional[str] = None
    profile_id: Optional[str] = None
    method: Optional[str] = None
    mode: Optional[str] = None
    amount: Optional[Amount] = None
    amount_captured: Optional[Amount] = None
    amount_refunded: Optional[Amount] = None
    status: Optional[str] = None
    is_cancelable: bool = False
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    consumer_date_of_birth: Optional[str] = None
    order_number: Optional[str] = None
    lines: List[OrderLine] = field(default_factory=list)
    locale: Optional[str] = None
    metadata: Any = None
    redirect_url: Optional[str] = None
    webhook_url: Optional[str] = None
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    expired_at: Optional[datetime] = None
    paid_at: Optional[datetime] = None
    authorized_at: Optional[datetime] = None
    canceled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    payments: List[Payment] = field(default_factory=list)
    refunds: List[Refund] = field(default_factory=list)
    links: Dict[str, Link] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def checkout_url(self) -> Optional[str]:
        link = self.links.get("checkout")
        return link.href if link is not None else None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Order":
        embedded = payload.get("_embedded") or {}
        return cls(
            id=payload["id"],
            resource=payload.get("resource"),
            profile_id=payload.get("profileId"),
            method=payload.get("method"),
            mode=payload.get("mode"),
            amount=parse_amount(payload.get("amount")),
            amount_captured=parse_amount(payload.get("amountCaptured")),
            amount_refunded=parse_amount(payload.get("amountRefunded")),
            status=payload.get("status"),
            is_cancelable=bool(payload.get("isCancelable", False)),
            billing_address=parse_address(payload.get("billingAddress")),
            shipping_address=parse_address(payload.get("shippingAddress")),
            consumer_date_of_birth=payload.get("consumerDateOfBirth"),
            order_number=payload.get("orderNumber"),
            lines=[OrderLine.from_response(line) for line in payload.get("lines") or []],
            locale=payload.get("locale"),
            metadata=payload.get("metadata"),
            redirect_url=payload.get("redirectUrl"),
            webhook_url=payload.get("webhookUrl"),
            created_at=parse_datetime(payload.get("createdAt")),
            expires_at=parse_datetime(payload.get("expiresAt")),
            expired_at=parse_datetime(payload.get("expiredAt")),
            paid_at=parse_datetime(payload.get("paidAt")),
            authorized_at=parse_datetime(payload.get("authorizedAt")),
            canceled_at=parse_datetime(payload.get("canceledAt")),
            completed_at=parse_datetime(payload.get("completedAt")),
            payments=[Payment.from_response(p) for p in embedded.get("payments") or []],
            refunds=[Refund.from_response(r) for r in embedded.get("refunds") or []],
            links=parse_links(payload),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class OrderLineRequest(RequestBody):
    """
    One order line, used both when creating an order and when updating a line.

    On update only the fields that are set are changed, so a line priced at
    ``Amount("EUR", "0.00")`` is sent while an unset price is left alone.
    """

    type: str | Unset = UNSET
    name: str | Unset = UNSET
    quantity: int | Unset = UNSET
    unit_price: Amount | Unset = UNSET
    discount_amount: Amount | Unset = UNSET
    total_amount: Amount | Unset = UNSET
    vat_rate: str | Unset = UNSET
    vat_amount: Amount | Unset = UNSET
    sku: str | Unset = UNSET
    image_url: str | Unset = UNSET
    product_url: str | Unset = UNSET
    metadata: Any = UNSET


@dataclass(frozen=True)
class OrderRequestPayment(RequestBody):
    consumer_account: str | Unset = UNSET
    customer_id: str | Unset = UNSET
    customer_reference: str | Unset = UNSET
    issuer: str | Unset = UNSET
    mandate_id: str | Unset = UNSET
    sequence_type: str | Unset = UNSET
    voucher_number: str | Unset = UNSET
    voucher_pin: str | Unset = UNSET
    webhook_url: str | Unset = UNSET


@dataclass(frozen=True)
class OrderRequest(RequestBody):
    amount: Amount
    order_number: str
    lines: Sequence[OrderLineRequest]
    billing_address: Address
    shipping_address: Address | Unset = UNSET
    consumer_date_of_birth: date | str | Unset = UNSET
    redirect_url: str | Unset = UNSET
    webhook_url: str | Unset = UNSET
    locale: str | Unset = UNSET
    method: str | Sequence[str] | Unset = UNSET
    payment: OrderRequestPayment | Unset = UNSET
    metadata: Any = UNSET


@dataclass(frozen=True)
class OrderUpdateRequest(RequestBody):
    order_number: str | Unset = UNSET
    billing_address: Address | Unset = UNSET
    shipping_address: Address | Unset = UNSET
    redirect_url: str | Unset = UNSET
    webhook_url: str | Unset = UNSET


@dataclass(frozen=True)
class OrderPaymentRequest(RequestBody):
    method: str | Sequence[str] | Unset = UNSET
    customer_id: str | Unset = UNSET
    mandate_id: str | Unset = UNSET


@dataclass(frozen=True)
class OrderRefundLine(RequestBody):
    id: str
    quantity: int | Unset = UNSET
    amount: Amount | Unset = UNSET


@dataclass(frozen=True)
class OrderRefundRequest(RequestBody):
    """An empty ``lines`` list refunds every line of the order."""

    lines: Sequence[OrderRefundLine] = ()
    description: str | Unset = UNSET
    metadata: Any = UNSET


_ORDER_LIST = ListResult.decoder("orders", Order.from_response)


class OrderService:
    """Orders, order lines and the payments and refunds scoped to an order."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, params: Optional[ListParams] = None) -> Result:
        return self.transport.get("orders", params=params, decode=_ORDER_LIST)

    def fetch(self, order_id: str, embed: Optional[str] = None) -> Result:
        """
        Fetch an order, optionally embedding sub-resources.

        ``embed`` is passed through untouched (for example ``"payments"`` or
        ``"payments,refunds"``); the API decides which values it accepts.
        """
        params = {"embed": embed} if embed is not None else None
        return self.transport.get(
            f"orders/{order_id}", params=params, decode=Order.from_response
        )

    def create(self, request: OrderRequest) -> Result:
        return self.transport.post("orders", body=request, decode=Order.from_response)

    def update(self, order_id: str, request: OrderUpdateRequest) -> Result:
        return self.transport.patch(
            f"orders/{order_id}", body=request, decode=Order.from_response
        )

    def cancel(self, order_id: str) -> Result:
        return self.transport.delete(f"orders/{order_id}", decode=Order.from_response)

    def update_line(self, order_id: str, line_id: str, request: OrderLineRequest) -> Result:
        return self.transport.patch(
            f"orders/{order_id}/lines/{line_id}", body=request, decode=Order.from_response
        )

    def create_payment(self, order_id: str, request: OrderPaymentRequest) -> Result:
        return self.transport.post(
            f"orders/{order_id}/payments", body=request, decode=Payment.from_response
        )

    def create_refund(self, order_id: str, request: OrderRefundRequest) -> Result:
        return self.transport.post(
            f"orders/{order_id}/refunds", body=request, decode=Refund.from_response
        )

    def fetch_refund(self, order_id: str, refund_id: str) -> Result:
        return self.transport.get(
            f"orders/{order_id}/refunds/{refund_id}", decode=Refund.from_response
        )

    def refund_list(self, order_id: str, params: Optional[ListParams] = None) -> Result:
        return self.transport.get(
            f"orders/{order_id}/refunds", params=params, decode=REFUND_LIST
        )
