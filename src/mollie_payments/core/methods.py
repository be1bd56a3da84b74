"""
Payment methods available to the account.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .transport import Result, Transport
from .types import Amount, Link, ListParams, ListResult, parse_amount, parse_links

__all__ = ["Method", "MethodImage", "MethodService"]


@dataclass(frozen=True)
class MethodImage:
    size1x: Optional[str] = None
    size2x: Optional[str] = None
    svg: Optional[str] = None


@dataclass(frozen=True)
class Method:
    id: str
    resource: Optional[str] = None
    description: Optional[str] = None
    minimum_amount: Optional[Amount] = None
    maximum_amount: Optional[Amount] = None
    image: MethodImage = field(default_factory=MethodImage)
    status: Optional[str] = None
    links: Dict[str, Link] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Method":
        image = payload.get("image") or {}
        return cls(
            id=payload["id"],
            resource=payload.get("resource"),
            description=payload.get("description"),
            minimum_amount=parse_amount(payload.get("minimumAmount")),
            maximum_amount=parse_amount(payload.get("maximumAmount")),
            image=MethodImage(
                size1x=image.get("size1x"),
                size2x=image.get("size2x"),
                svg=image.get("svg"),
            ),
            status=payload.get("status"),
            links=parse_links(payload),
            raw=dict(payload),
        )


_METHOD_LIST = ListResult.decoder("methods", Method.from_response)


class MethodService:
    """Read the payment methods enabled for the profile."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def list(self, params: Optional[ListParams] = None) -> Result:
        return self.transport.get("methods", params=params, decode=_METHOD_LIST)

    def fetch(self, method_id: str) -> Result:
        return self.transport.get(f"methods/{method_id}", decode=Method.from_response)
