"""
Shared value types used by every Mollie service.

Request objects use :data:`UNSET` to mark fields that should not be sent at
all, which keeps "leave this untouched" apart from "set this to an empty
value" on partial updates. Monetary values are carried as
:class:`decimal.Decimal` and serialised as fixed-point strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    TypeVar,
)

__all__ = [
    "UNSET",
    "Unset",
    "Amount",
    "Address",
    "Link",
    "ListLinks",
    "ListMetadata",
    "ListParams",
    "ListResult",
    "RequestBody",
    "MollieError",
    "ApiError",
    "DecodeError",
    "camel_case",
    "to_wire",
    "parse_address",
    "parse_amount",
    "parse_datetime",
    "parse_links",
]

T = TypeVar("T")

_FRACTION = re.compile(r"\.(\d+)")


class Unset:
    """Marker type for request fields that must be left out of the body."""

    _instance: Optional["Unset"] = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "Unset":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Unset":
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET = Unset()


class MollieError(Exception):
    """Base class for the errors produced by this package."""


class ApiError(MollieError):
    """
    A failure reported by the Mollie API inside an otherwise complete exchange.
    """

    def __init__(
        self,
        status: int,
        title: str = "",
        detail: str = "",
        *,
        field: Optional[str] = None,
        links: Optional[Dict[str, "Link"]] = None,
    ) -> None:
        self.status = status
        self.title = title
        self.detail = detail
        self.field = field
        self.links = links or {}
        super().__init__(str(self))

    def __str__(self) -> str:
        message = f"Mollie API error {self.status}"
        if self.title:
            message += f" ({self.title})"
        if self.detail:
            message += f": {self.detail}"
        if self.field:
            message += f" [field: {self.field}]"
        return message

    @property
    def documentation_url(self) -> Optional[str]:
        link = self.links.get("documentation")
        return link.href if link is not None else None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any], status: int) -> "ApiError":
        return cls(
            status=status,
            title=str(payload.get("title") or ""),
            detail=str(payload.get("detail") or ""),
            field=payload.get("field"),
            links=parse_links(payload),
        )


class DecodeError(MollieError):
    """Raised when a response body does not match the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def camel_case(name: str) -> str:
    head, *rest = name.rstrip("_").split("_")
    return head + "".join(part.capitalize() for part in rest)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise TypeError("Amount values must be Decimal, str or int")
    if isinstance(value, float):
        raise TypeError(
            "Amount values must not be floats; pass a Decimal or a string such as '10.50'"
        )
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (str, int)):
        try:
            result = Decimal(value)
        except InvalidOperation as exc:
            raise ValueError(f"'{value}' is not a valid decimal amount") from exc
    else:
        raise TypeError(f"Unsupported amount value type: {type(value).__name__}")
    if not result.is_finite():
        raise ValueError(f"Amount value must be finite, got '{value}'")
    return result


@dataclass(frozen=True)
class Amount:
    """A currency code plus an exact decimal value."""

    currency: str
    value: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_decimal(self.value))

    @property
    def value_str(self) -> str:
        return format(self.value, "f")

    def to_payload(self) -> Dict[str, str]:
        return {"currency": self.currency, "value": self.value_str}

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Amount":
        value = payload["value"]
        if isinstance(value, float):
            # Only reachable when a caller decodes JSON without parse_float=Decimal.
            value = repr(value)
        return cls(currency=payload["currency"], value=value)


@dataclass(frozen=True)
class Address:
    """
    Postal and contact details for billing or shipping.

    All fields are optional here; the API decides which ones it needs.
    """

    organization_name: Optional[str] = None
    title: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    street_and_number: Optional[str] = None
    street_additional: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        payload: Dict[str, str] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            payload[camel_case(item.name)] = value
        return payload

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Address":
        return cls(**{item.name: payload.get(camel_case(item.name)) for item in fields(cls)})


@dataclass(frozen=True)
class Link:
    href: str
    type: Optional[str] = None


def parse_links(payload: Mapping[str, Any], key: str = "_links") -> Dict[str, Link]:
    """
    Decode a ``_links`` map, skipping entries the API left empty.

    Older responses carried plain URL strings instead of ``{href, type}``
    objects; both forms are accepted.
    """
    links: Dict[str, Link] = {}
    for name, value in (payload.get(key) or {}).items():
        if not value:
            continue
        if isinstance(value, str):
            links[name] = Link(href=value)
        else:
            links[name] = Link(href=value["href"], type=value.get("type"))
    return links


def parse_amount(value: Optional[Mapping[str, Any]]) -> Optional[Amount]:
    if not value:
        return None
    return Amount.from_response(value)


def _pad_fraction(match: "re.Match[str]") -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    # fromisoformat on 3.10 only takes 3 or 6 fractional digits.
    value = _FRACTION.sub(_pad_fraction, value, count=1)
    return datetime.fromisoformat(value)


def parse_address(value: Optional[Mapping[str, Any]]) -> Optional[Address]:
    if not value:
        return None
    return Address.from_response(value)


def to_wire(value: Any) -> Any:
    """Convert a request value into something ``json`` can serialise."""
    if hasattr(value, "to_payload"):
        return value.to_payload()
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    if isinstance(value, Mapping):
        return {key: to_wire(item) for key, item in value.items()}
    return value


class RequestBody:
    """
    Serialisation shared by the request dataclasses.

    Field names are sent in camelCase; :data:`UNSET` fields are dropped while
    ``None`` is sent as an explicit ``null``.
    """

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for item in fields(self):  # type: ignore[arg-type]
            value = getattr(self, item.name)
            if value is UNSET:
                continue
            payload[camel_case(item.name)] = to_wire(value)
        return payload


@dataclass(frozen=True)
class ListParams:
    """
    Cursor pagination for list endpoints.

    ``from_`` is the id of the first entity to return and ``limit`` caps the
    page size. ``None`` leaves the parameter out of the query string.
    """

    from_: Optional[str] = None
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                raise ValueError("limit must be an integer")
            if self.limit < 1:
                raise ValueError("limit must be a positive integer")

    def as_query(self) -> Dict[str, str]:
        query: Dict[str, str] = {}
        if self.from_ is not None:
            query["from"] = self.from_
        if self.limit is not None:
            query["limit"] = str(self.limit)
        return query


@dataclass(frozen=True)
class ListLinks:
    self_: Optional[Link] = None
    previous: Optional[Link] = None
    next: Optional[Link] = None
    documentation: Optional[Link] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "ListLinks":
        links = parse_links(payload)
        return cls(
            self_=links.get("self"),
            previous=links.get("previous"),
            next=links.get("next"),
            documentation=links.get("documentation"),
        )


@dataclass(frozen=True)
class ListMetadata:
    count: int
    links: ListLinks = field(default_factory=ListLinks)


@dataclass(frozen=True)
class ListResult(Generic[T]):
    """
    One page of a list endpoint.

    Continuation is left to the caller; ``links.next`` holds the URL of the
    following page when there is one.
    """

    items: List[T]
    metadata: ListMetadata

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def count(self) -> int:
        return self.metadata.count

    @property
    def links(self) -> ListLinks:
        return self.metadata.links

    @classmethod
    def decoder(
        cls,
        key: str,
        item: Callable[[Mapping[str, Any]], T],
    ) -> Callable[[Mapping[str, Any]], "ListResult[T]"]:
        """Build a decoder for the ``_embedded.<key>`` list envelope."""

        def decode(payload: Mapping[str, Any]) -> "ListResult[T]":
            embedded = payload.get("_embedded") or {}
            items = [item(entry) for entry in embedded.get(key) or []]
            return cls(
                items=items,
                metadata=ListMetadata(
                    count=int(payload.get("count", len(items))),
                    links=ListLinks.from_response(payload),
                ),
            )

        return decode
