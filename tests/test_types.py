"""Unit tests for the shared value types and request serialisation."""

import copy
from decimal import Decimal

import pytest

from mollie_payments import (
    UNSET,
    Address,
    Amount,
    ApiError,
    ListParams,
    ListResult,
    OrderLineRequest,
    OrderUpdateRequest,
    PaymentRequest,
)
from mollie_payments.core.types import camel_case, parse_datetime, parse_links


def test_amount_keeps_string_scale():
    value = Amount("EUR", "10.50")

    assert value.value == Decimal("10.50")
    assert value.to_payload() == {"currency": "EUR", "value": "10.50"}


def test_amount_from_response_keeps_trailing_zero():
    decoded = Amount.from_response({"currency": "EUR", "value": "10.50"})

    assert decoded == Amount("EUR", Decimal("10.50"))
    assert decoded.value_str == "10.50"


def test_amount_rejects_float():
    with pytest.raises(TypeError):
        Amount("EUR", 10.5)


def test_amount_rejects_garbage():
    with pytest.raises(ValueError):
        Amount("EUR", "ten euro")


def test_amount_never_uses_exponent_notation():
    assert Amount("EUR", Decimal("1E+1")).value_str == "10"


def test_camel_case():
    assert camel_case("redirect_url") == "redirectUrl"
    assert camel_case("consumer_date_of_birth") == "consumerDateOfBirth"
    assert camel_case("from_") == "from"
    assert camel_case("sku") == "sku"


def test_unset_is_a_falsy_singleton():
    assert not UNSET
    assert copy.deepcopy(UNSET) is UNSET
    assert repr(UNSET) == "UNSET"


def test_request_body_drops_unset_but_keeps_null_and_empty_values():
    request = OrderLineRequest(
        name="",
        unit_price=Amount("EUR", "0.00"),
        metadata=None,
    )

    assert request.to_payload() == {
        "name": "",
        "unitPrice": {"currency": "EUR", "value": "0.00"},
        "metadata": None,
    }


def test_partial_update_only_sends_what_was_set():
    assert OrderUpdateRequest(order_number="X").to_payload() == {"orderNumber": "X"}


def test_payment_request_payload():
    request = PaymentRequest(
        amount=Amount("EUR", "10.50"),
        description="A red bucket",
        redirect_url="http://localhost/payment",
        metadata={"order_id": "12345"},
    )

    assert request.to_payload() == {
        "amount": {"currency": "EUR", "value": "10.50"},
        "description": "A red bucket",
        "redirectUrl": "http://localhost/payment",
        "metadata": {"order_id": "12345"},
    }


def test_address_payload_skips_missing_fields():
    address = Address(street_and_number="1 Riverview", city="Riverville", country="NL")

    assert address.to_payload() == {
        "streetAndNumber": "1 Riverview",
        "city": "Riverville",
        "country": "NL",
    }
    assert Address.from_response(address.to_payload()) == address


def test_list_params_query_omits_absent_fields():
    assert ListParams().as_query() == {}
    assert ListParams(limit=5).as_query() == {"limit": "5"}
    assert ListParams(from_="tr_123", limit=1).as_query() == {"from": "tr_123", "limit": "1"}


@pytest.mark.parametrize("limit", [0, -1, True, "5"])
def test_list_params_rejects_non_positive_limit(limit):
    with pytest.raises(ValueError):
        ListParams(limit=limit)


def test_parse_links_accepts_both_conventions_and_skips_empty():
    links = parse_links(
        {
            "_links": {
                "self": {"href": "https://api/x", "type": "application/hal+json"},
                "checkout": None,
                "paymentUrl": "https://legacy/pay",
            }
        }
    )

    assert set(links) == {"self", "paymentUrl"}
    assert links["self"].type == "application/hal+json"
    assert links["paymentUrl"].href == "https://legacy/pay"


def test_parse_datetime_handles_zulu_suffix():
    assert parse_datetime("2018-03-20T13:13:37Z").utcoffset().total_seconds() == 0
    assert parse_datetime(None) is None


def test_list_result_decoder():
    decode = ListResult.decoder("things", lambda entry: entry["id"])

    result = decode(
        {
            "count": 2,
            "_embedded": {"things": [{"id": "a"}, {"id": "b"}]},
            "_links": {"next": {"href": "https://api/things?from=c", "type": "x"}, "previous": None},
        }
    )

    assert list(result) == ["a", "b"]
    assert len(result) == 2
    assert result.count == 2
    assert result.links.next.href == "https://api/things?from=c"
    assert result.links.previous is None


def test_api_error_message():
    error = ApiError(422, "Unprocessable Entity", "The amount is too low", field="amount")

    assert str(error) == (
        "Mollie API error 422 (Unprocessable Entity): The amount is too low [field: amount]"
    )


@pytest.mark.parametrize(
    "raw, microsecond",
    [
        ("2018-03-14T17:00:52.0Z", 0),
        ("2018-03-14T17:00:52.12+00:00", 120000),
        ("2018-03-14T17:00:52.1234567+00:00", 123456),
    ],
)
def test_parse_datetime_accepts_any_fraction_length(raw, microsecond):
    parsed = parse_datetime(raw)

    assert parsed.microsecond == microsecond
    assert parsed.utcoffset().total_seconds() == 0
