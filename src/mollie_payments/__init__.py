"""
Public facade for the Mollie payments client package.

The most useful pieces are re-exported here so integrators can
``from mollie_payments import ...`` without navigating the package.
"""

from .api import create_client
from .core import (
    UNSET,
    Address,
    Amount,
    ApiError,
    Chargeback,
    Client,
    ClientConfig,
    ConfigError,
    Customer,
    CustomerRequest,
    DecodeError,
    Link,
    ListLinks,
    ListMetadata,
    ListParams,
    ListResult,
    Mandate,
    MandateRequest,
    Method,
    MollieError,
    Order,
    OrderLine,
    OrderLineRequest,
    OrderPaymentRequest,
    OrderRefundLine,
    OrderRefundRequest,
    OrderRequest,
    OrderRequestPayment,
    OrderUpdateRequest,
    Payment,
    PaymentRequest,
    PaymentUpdateRequest,
    Refund,
    RefundRequest,
    Result,
    Subscription,
    SubscriptionRequest,
    load_client_config,
    new_client,
    new_transport,
)

__version__ = "0.1.0"

__all__ = (
    "UNSET",
    "Address",
    "Amount",
    "ApiError",
    "Chargeback",
    "Client",
    "ClientConfig",
    "ConfigError",
    "Customer",
    "CustomerRequest",
    "DecodeError",
    "Link",
    "ListLinks",
    "ListMetadata",
    "ListParams",
    "ListResult",
    "Mandate",
    "MandateRequest",
    "Method",
    "MollieError",
    "Order",
    "OrderLine",
    "OrderLineRequest",
    "OrderPaymentRequest",
    "OrderRefundLine",
    "OrderRefundRequest",
    "OrderRequest",
    "OrderRequestPayment",
    "OrderUpdateRequest",
    "Payment",
    "PaymentRequest",
    "PaymentUpdateRequest",
    "Refund",
    "RefundRequest",
    "Result",
    "Subscription",
    "SubscriptionRequest",
    "create_client",
    "load_client_config",
    "new_client",
    "new_transport",
)
