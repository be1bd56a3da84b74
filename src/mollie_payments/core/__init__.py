"""
Core primitives: configuration, transport, shared types and the services.
"""

from .chargebacks import Chargeback, ChargebackService
from .client import Client, new_client
from .config import ClientConfig, ConfigError, load_client_config
from .customers import Customer, CustomerRequest, CustomerService
from .environment import ClientEnvironment, build_environment, load_env_file
from .mandates import Mandate, MandateDetails, MandateRequest, MandateService
from .methods import Method, MethodImage, MethodService
from .orders import (
    Order,
    OrderLine,
    OrderLineRequest,
    OrderPaymentRequest,
    OrderRefundLine,
    OrderRefundRequest,
    OrderRequest,
    OrderRequestPayment,
    OrderService,
    OrderUpdateRequest,
)
from .payments import Payment, PaymentRequest, PaymentService, PaymentUpdateRequest
from .refunds import Refund, RefundRequest, RefundService
from .subscriptions import Subscription, SubscriptionRequest, SubscriptionService
from .transport import Result, Transport, new_transport, resolve_error
from .types import (
    UNSET,
    Address,
    Amount,
    ApiError,
    DecodeError,
    Link,
    ListLinks,
    ListMetadata,
    ListParams,
    ListResult,
    MollieError,
)

__all__ = [
    "UNSET",
    "Address",
    "Amount",
    "ApiError",
    "Chargeback",
    "ChargebackService",
    "Client",
    "ClientConfig",
    "ClientEnvironment",
    "ConfigError",
    "Customer",
    "CustomerRequest",
    "CustomerService",
    "DecodeError",
    "Link",
    "ListLinks",
    "ListMetadata",
    "ListParams",
    "ListResult",
    "Mandate",
    "MandateDetails",
    "MandateRequest",
    "MandateService",
    "Method",
    "MethodImage",
    "MethodService",
    "MollieError",
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
    "Payment",
    "PaymentRequest",
    "PaymentService",
    "PaymentUpdateRequest",
    "Refund",
    "RefundRequest",
    "RefundService",
    "Result",
    "Subscription",
    "SubscriptionRequest",
    "SubscriptionService",
    "Transport",
    "build_environment",
    "load_client_config",
    "load_env_file",
    "new_client",
    "new_transport",
    "resolve_error",
]
