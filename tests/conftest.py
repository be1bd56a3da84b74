"""
Pytest fixtures for the Mollie client tests.

Sections:
    - Fake session that records requests and replays prepared responses
    - Client fixtures
    - Response payload factories
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import pytest
import requests

from mollie_payments import ClientConfig, new_client

API_ROOT = "https://api.mollie.test/v2"


# =============================================================================
# Fake Session
# =============================================================================


def make_response(
    status: int,
    payload: Any = None,
    *,
    text: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    if text is not None:
        response._content = text.encode("utf-8")
    elif payload is None:
        response._content = b""
    else:
        response._content = json.dumps(payload).encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/hal+json"
    response.headers.update(headers or {})
    return response


@dataclass
class RecordedCall:
    method: str
    url: str
    params: Optional[Dict[str, str]]
    json: Any
    headers: Dict[str, str]
    timeout: Any


class FakeSession:
    """Stands in for ``requests.Session``; raises queued exceptions as-is."""

    def __init__(self) -> None:
        self.calls: List[RecordedCall] = []
        self._queue: List[Union[requests.Response, BaseException]] = []
        self.closed = False

    def queue(self, status: int, payload: Any = None, **kwargs: Any) -> requests.Response:
        response = make_response(status, payload, **kwargs)
        self._queue.append(response)
        return response

    def queue_exception(self, exc: BaseException) -> None:
        self._queue.append(exc)

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append(
            RecordedCall(
                method=method,
                url=url,
                params=kwargs.get("params"),
                json=kwargs.get("json"),
                headers=kwargs.get("headers") or {},
                timeout=kwargs.get("timeout"),
            )
        )
        if not self._queue:
            raise AssertionError(f"Unexpected request: {method} {url}")
        item = self._queue.pop(0)
        if isinstance(item, BaseException):
            raise item
        item.url = url
        return item

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(access_token="unused", base_url="https://api.mollie.test")


@pytest.fixture
def client(session, config):
    return new_client("test_token", config=config, session=session)


# =============================================================================
# Payload Factories
# =============================================================================


def amount(value: str, currency: str = "EUR") -> Dict[str, str]:
    return {"currency": currency, "value": value}


def link(href: str, type_: str = "application/hal+json") -> Dict[str, str]:
    return {"href": href, "type": type_}


def payment_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "resource": "payment",
        "id": "tr_WDqYK6vllg",
        "mode": "test",
        "createdAt": "2018-03-20T13:13:37+00:00",
        "amount": amount("10.50"),
        "description": "A red bucket",
        "method": None,
        "metadata": {"order_id": "12345"},
        "status": "open",
        "isCancelable": False,
        "expiresAt": "2018-03-20T13:28:37+00:00",
        "profileId": "pfl_QkEhN94Ba",
        "sequenceType": "oneoff",
        "redirectUrl": "http://localhost/payment",
        "_links": {
            "self": link(f"{API_ROOT}/payments/tr_WDqYK6vllg"),
            "checkout": link("https://www.mollie.com/payscreen/select-method/WDqYK6vllg", "text/html"),
            "documentation": link("https://docs.mollie.com/reference/v2/payments-api/get-payment", "text/html"),
        },
    }
    payload.update(overrides)
    return payload


def address_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "streetAndNumber": "1 Riverview",
        "postalCode": "1234CD",
        "city": "Riverville",
        "country": "NL",
        "givenName": "Brian",
        "familyName": "Brown",
        "email": "brian@brown.com",
    }
    payload.update(overrides)
    return payload


def order_line_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "resource": "orderline",
        "id": "odl_dgtxyl",
        "orderId": "ord_pbjz8x",
        "type": "physical",
        "name": "Grape",
        "status": "created",
        "quantity": 1,
        "unitPrice": amount("10.50"),
        "totalAmount": amount("10.50"),
        "vatRate": "21.00",
        "vatAmount": amount("1.82"),
    }
    payload.update(overrides)
    return payload


def order_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "resource": "order",
        "id": "ord_pbjz8x",
        "profileId": "pfl_URR55HPMGx",
        "mode": "test",
        "amount": amount("10.50"),
        "status": "created",
        "isCancelable": True,
        "metadata": None,
        "createdAt": "2018-08-02T09:29:56+00:00",
        "expiresAt": "2018-08-30T09:29:56+00:00",
        "locale": "en_GB",
        "orderNumber": "12345abcde",
        "billingAddress": address_payload(),
        "shippingAddress": address_payload(),
        "redirectUrl": "http://www.brown.com/payment",
        "webhookUrl": "http://www.brown.com/hook",
        "lines": [order_line_payload()],
        "_links": {
            "self": link(f"{API_ROOT}/orders/ord_pbjz8x"),
            "checkout": link("https://www.mollie.com/payscreen/order/checkout/pbjz8x", "text/html"),
        },
    }
    payload.update(overrides)
    return payload


def error_payload(status: int, title: str, detail: str, **extra: Any) -> Dict[str, Any]:
    payload = {
        "status": status,
        "title": title,
        "detail": detail,
        "_links": {
            "documentation": link("https://docs.mollie.com/overview/handling-errors", "text/html"),
        },
    }
    payload.update(extra)
    return payload


def list_payload(key: str, items: List[Dict[str, Any]], **links: Any) -> Dict[str, Any]:
    return {
        "count": len(items),
        "_embedded": {key: items},
        "_links": {
            "self": link(f"{API_ROOT}/{key}"),
            "previous": links.get("previous"),
            "next": links.get("next"),
            "documentation": link("https://docs.mollie.com/reference/v2", "text/html"),
        },
    }
