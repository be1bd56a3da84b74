"""
HTTP plumbing shared by all Mollie services.

Every call goes through :meth:`Transport.request`, which performs exactly one
round trip and turns the outcome into a :class:`Result`. The API answers
errors with the same JSON envelope it uses for data, so a finished HTTP
exchange is only a success once :func:`resolve_error` has found no error in
the body.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Union

import requests

from .config import ClientConfig
from .types import ApiError, DecodeError, ListParams

__all__ = [
    "Result",
    "Transport",
    "new_transport",
    "no_content",
    "resolve_error",
]

Decoder = Callable[[Any], Any]
Query = Union[ListParams, Mapping[str, str], None]

_BODY_EXCERPT = 500

# Raised by decoders when a body does not have the expected shape.
_SHAPE_ERRORS = (KeyError, TypeError, ValueError, ArithmeticError, AttributeError)


class Result(NamedTuple):
    """
    Outcome of a single API call: ``(value, response, error)``.

    ``value`` is ``None`` whenever ``error`` is set. ``response`` is the raw
    :class:`requests.Response` and is available for domain and decode errors
    too, but is ``None`` when the transport itself failed.
    """

    value: Any
    response: Optional[requests.Response]
    error: Optional[Exception]

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or raise the error the call produced."""
        if self.error is not None:
            raise self.error
        return self.value


def resolve_error(payload: Any, status_code: int) -> Optional[ApiError]:
    """
    Decide whether a decoded body is a domain error.

    The envelope's numeric ``status`` is the discriminant; bodies without one
    (or with a string ``status`` such as ``"open"``) fall back to the HTTP
    status code. Anything at or above 300 is an error.
    """
    status = status_code
    if isinstance(payload, Mapping):
        envelope_status = payload.get("status")
        if isinstance(envelope_status, int) and not isinstance(envelope_status, bool):
            status = envelope_status
    if status < 300:
        return None
    if not isinstance(payload, Mapping):
        payload = {}
    return ApiError.from_response(payload, status)


def _excerpt(response: requests.Response) -> str:
    return response.text[:_BODY_EXCERPT]


def _decode_body(response: requests.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json(parse_float=Decimal)
    except ValueError as exc:
        raise DecodeError(
            f"Response from {response.url} is not valid JSON: {exc}",
            status_code=response.status_code,
            body=_excerpt(response),
        ) from exc


class Transport:
    """
    A request builder bound to one API root, token and user agent.

    The transport holds no per-call state: headers are copied into every
    request and the session is only used to send it.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.headers: Dict[str, str] = {
            "Authorization": f"Bearer {config.access_token}",
            "User-Agent": config.user_agent,
            "Accept": "application/json",
        }

    def url_for(self, path: str) -> str:
        return f"{self.config.api_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        decode: Decoder,
        params: Query = None,
        body: Optional[Any] = None,
    ) -> Result:
        url = self.url_for(path)
        if isinstance(params, ListParams):
            params = params.as_query()
        if body is not None and hasattr(body, "to_payload"):
            body = body.to_payload()

        logging.info("Submitting %s request to %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                params=params or None,
                json=body,
                headers=dict(self.headers),
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            logging.error("%s %s failed before a response arrived: %s", method, url, exc)
            return Result(None, None, exc)

        try:
            payload = _decode_body(response)
        except DecodeError as exc:
            logging.error("%s %s returned an undecodable body: %s", method, url, exc)
            return Result(None, response, exc)

        try:
            error = resolve_error(payload, response.status_code)
            if error is not None:
                logging.warning("%s %s was rejected: %s", method, url, error)
                return Result(None, response, error)
            value = decode(payload)
        except _SHAPE_ERRORS as exc:
            error = DecodeError(
                f"Unexpected response shape from {url}: {exc!r}",
                status_code=response.status_code,
                body=_excerpt(response),
            )
            error.__cause__ = exc
            logging.error("%s %s returned an unexpected body: %s", method, url, error)
            return Result(None, response, error)

        return Result(value, response, None)

    def close(self) -> None:
        """Close the session, unless it was handed in by the caller."""
        if self._owns_session:
            self.session.close()

    def get(self, path: str, *, decode: Decoder, params: Query = None) -> Result:
        return self.request("GET", path, decode=decode, params=params)

    def post(self, path: str, *, decode: Decoder, body: Any) -> Result:
        return self.request("POST", path, decode=decode, body=body)

    def patch(self, path: str, *, decode: Decoder, body: Any) -> Result:
        return self.request("PATCH", path, decode=decode, body=body)

    def delete(self, path: str, *, decode: Decoder, body: Any = None) -> Result:
        return self.request("DELETE", path, decode=decode, body=body)


def no_content(payload: Any) -> None:
    """Decoder for endpoints that answer ``204 No Content``."""
    return None


def new_transport(
    access_token: str,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
) -> Transport:
    """
    Build a :class:`Transport` for ``access_token``.

    The token is not inspected; a bad token surfaces as an authentication
    error from the API. ``config`` supplies the base URL, API version, user
    agent and timeout, defaulting to the public API.
    """
    if config is None:
        config = ClientConfig(access_token=access_token)
    else:
        config = replace(config, access_token=access_token)
    return Transport(config, session=session)
