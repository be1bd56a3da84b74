"""Tests for payments, payment refunds, chargebacks and methods."""

from decimal import Decimal

from mollie_payments import (
    Amount,
    ApiError,
    ListParams,
    Payment,
    PaymentRequest,
    PaymentUpdateRequest,
    RefundRequest,
)

from conftest import API_ROOT, amount, error_payload, link, list_payload, payment_payload


def _payment_request() -> PaymentRequest:
    return PaymentRequest(
        amount=Amount("EUR", "10.50"),
        description="A red bucket",
        redirect_url="http://localhost/payment",
    )


def test_create_payment(client, session):
    session.queue(201, payment_payload())

    payment, response, error = client.payments.create(_payment_request())

    assert error is None
    assert response.status_code == 201
    assert payment.amount == Amount("EUR", "10.50")
    assert payment.amount.value_str == "10.50"
    assert payment.status == "open"
    assert payment.checkout_url.startswith("https://www.mollie.com/payscreen/")
    assert session.last.method == "POST"
    assert session.last.url == f"{API_ROOT}/payments"
    assert session.last.json == {
        "amount": {"currency": "EUR", "value": "10.50"},
        "description": "A red bucket",
        "redirectUrl": "http://localhost/payment",
    }


def test_status_is_mirrored_not_validated(client, session):
    session.queue(201, payment_payload(status="something-new"))

    payment, _, error = client.payments.create(_payment_request())

    assert error is None
    assert payment.status == "something-new"


def test_create_then_fetch_returns_same_payment(client, session):
    body = payment_payload()
    session.queue(201, body)
    session.queue(200, body)

    created, _, _ = client.payments.create(_payment_request())
    fetched, _, error = client.payments.fetch(created.id)

    assert error is None
    assert session.last.url == f"{API_ROOT}/payments/{created.id}"
    assert fetched.id == created.id
    assert fetched.amount == created.amount
    assert fetched.description == created.description
    assert fetched is not created


def test_fetch_missing_payment(client, session):
    session.queue(404, error_payload(404, "Not Found", "No payment exists with token tr_missing."))

    payment, response, error = client.payments.fetch("tr_missing")

    assert payment is None
    assert response.status_code == 404
    assert isinstance(error, ApiError)
    assert error.detail == "No payment exists with token tr_missing."


def test_transition_timestamps_only_when_present(client, session):
    session.queue(
        200,
        payment_payload(status="paid", paidAt="2018-03-20T13:20:00+00:00", _links={}),
    )

    payment, _, _ = client.payments.fetch("tr_WDqYK6vllg")

    assert payment.paid_at is not None
    assert payment.canceled_at is None
    assert payment.checkout_url is None


def test_list_payments_with_limit(client, session):
    session.queue(
        200,
        list_payload(
            "payments",
            [payment_payload(id="tr_1")],
            next=link(f"{API_ROOT}/payments?from=tr_2&limit=1"),
        ),
    )

    payments, _, error = client.payments.list(ListParams(limit=1))

    assert error is None
    assert session.last.params == {"limit": "1"}
    assert len(payments) <= 1
    assert [p.id for p in payments] == ["tr_1"]
    assert isinstance(payments.items[0], Payment)
    assert payments.links.next.href.endswith("from=tr_2&limit=1")


def test_list_payments_without_params(client, session):
    session.queue(200, list_payload("payments", []))

    payments, _, error = client.payments.list()

    assert error is None
    assert session.last.params is None
    assert payments.count == 0


def test_update_payment_sends_only_set_fields(client, session):
    session.queue(200, payment_payload(description="A blue bucket"))

    payment, _, error = client.payments.update(
        "tr_WDqYK6vllg", PaymentUpdateRequest(description="A blue bucket")
    )

    assert error is None
    assert session.last.method == "PATCH"
    assert session.last.json == {"description": "A blue bucket"}
    assert payment.description == "A blue bucket"
    assert payment.redirect_url == "http://localhost/payment"


def test_cancel_payment(client, session):
    session.queue(
        200,
        payment_payload(status="canceled", canceledAt="2018-03-20T13:30:00+00:00"),
    )

    payment, _, error = client.payments.cancel("tr_WDqYK6vllg")

    assert error is None
    assert session.last.method == "DELETE"
    assert session.last.url == f"{API_ROOT}/payments/tr_WDqYK6vllg"
    assert payment.status == "canceled"
    assert payment.canceled_at is not None


def test_payment_refunds(client, session):
    refund = {
        "resource": "refund",
        "id": "re_4qqhO89gsT",
        "amount": amount("5.95"),
        "status": "pending",
        "description": "Order #33",
        "paymentId": "tr_WDqYK6vllg",
        "createdAt": "2018-03-14T17:09:02+00:00",
    }
    session.queue(201, refund)
    session.queue(200, list_payload("refunds", [refund]))
    session.queue(204)

    created, _, error = client.refunds.create(
        "tr_WDqYK6vllg", RefundRequest(amount=Amount("EUR", "5.95"), description="Order #33")
    )
    assert error is None
    assert created.amount.value == Decimal("5.95")
    assert session.calls[0].json == {
        "amount": {"currency": "EUR", "value": "5.95"},
        "description": "Order #33",
    }

    refunds, _, error = client.refunds.list("tr_WDqYK6vllg")
    assert error is None
    assert [r.id for r in refunds] == ["re_4qqhO89gsT"]

    value, response, error = client.refunds.cancel("tr_WDqYK6vllg", "re_4qqhO89gsT")
    assert (value, error) == (None, None)
    assert response.status_code == 204
    assert session.last.url == f"{API_ROOT}/payments/tr_WDqYK6vllg/refunds/re_4qqhO89gsT"


def test_chargebacks(client, session):
    chargeback = {
        "resource": "chargeback",
        "id": "chb_n9z0tp",
        "amount": amount("43.38", "USD"),
        "settlementAmount": amount("-35.07"),
        "createdAt": "2018-03-14T17:00:52Z",
        "reversedAt": None,
        "paymentId": "tr_WDqYK6vllg",
    }
    session.queue(200, chargeback)
    session.queue(200, list_payload("chargebacks", [chargeback]))

    fetched, _, error = client.chargebacks.fetch("tr_WDqYK6vllg", "chb_n9z0tp")
    assert error is None
    assert fetched.settlement_amount == Amount("EUR", "-35.07")
    assert fetched.reversed_at is None
    assert session.last.url == f"{API_ROOT}/payments/tr_WDqYK6vllg/chargebacks/chb_n9z0tp"

    listed, _, error = client.chargebacks.list("tr_WDqYK6vllg", ListParams(limit=5))
    assert error is None
    assert listed.items == [fetched]
    assert session.last.params == {"limit": "5"}


def test_methods(client, session):
    ideal = {
        "resource": "method",
        "id": "ideal",
        "description": "iDEAL",
        "minimumAmount": amount("0.01"),
        "maximumAmount": amount("50000.00"),
        "image": {
            "size1x": "https://www.mollie.com/external/icons/payment-methods/ideal.png",
            "size2x": "https://www.mollie.com/external/icons/payment-methods/ideal%402x.png",
            "svg": "https://www.mollie.com/external/icons/payment-methods/ideal.svg",
        },
        "status": "activated",
    }
    session.queue(200, list_payload("methods", [ideal]))
    session.queue(200, ideal)

    methods, _, error = client.methods.list()
    assert error is None
    assert methods.items[0].maximum_amount.value_str == "50000.00"
    assert session.last.url == f"{API_ROOT}/methods"

    method, _, error = client.methods.fetch("ideal")
    assert error is None
    assert method.image.svg.endswith("ideal.svg")
    assert session.last.url == f"{API_ROOT}/methods/ideal"
