"""Turn operation inputs into wire-level requests.

`resolve_request_url` fills path templates, `build_request` seeds a
`PreparedRequest` with the SDK headers, and the ``add_*`` helpers attach the
optional headers and query parameters an operation needs.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from .config import DEFAULT_SERVICE_NAME, SERVICE_VERSION, USER_AGENT
from .exceptions import InvalidArgumentError

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


@dataclass(slots=True)
class PreparedRequest:
    """Bundle together prepared request details."""

    method: str
    url: str
    operation_id: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None
    has_body: bool = False

    @property
    def transaction_id(self) -> str | None:
        return self.headers.get("Transaction-Id")


def resolve_request_url(
    base_url: str,
    path_template: str,
    path_params: Mapping[str, Any] | None = None,
) -> str:
    """Substitute ``{name}`` placeholders and join the result to ``base_url``."""
    if not base_url:
        raise InvalidArgumentError("service URL cannot be empty")
    params = path_params or {}

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None or value == "":
            raise InvalidArgumentError(f"path parameter '{name}' cannot be empty")
        return quote(str(value), safe="")

    path = _PLACEHOLDER.sub(_substitute, path_template)
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def sdk_headers(operation_id: str, service_name: str = DEFAULT_SERVICE_NAME) -> dict[str, str]:
    return {
        "User-Agent": USER_AGENT,
        "X-IBMCloud-SDK-Analytics": (
            f"service_name={service_name};"
            f"service_version={SERVICE_VERSION};"
            f"operation_id={operation_id}"
        ),
    }


def build_request(
    base_url: str,
    method: str,
    path_template: str,
    path_params: Mapping[str, Any] | None = None,
    *,
    operation_id: str,
    service_name: str = DEFAULT_SERVICE_NAME,
) -> PreparedRequest:
    url = resolve_request_url(base_url, path_template, path_params)
    return PreparedRequest(
        method=method.upper(),
        url=url,
        operation_id=operation_id,
        headers=sdk_headers(operation_id, service_name),
    )


# Header and query assembly ----------------------------------------------------
def accept_json(request: PreparedRequest) -> PreparedRequest:
    request.headers["Accept"] = "application/json"
    return request


def add_transaction_id(request: PreparedRequest, transaction_id: str | None) -> PreparedRequest:
    """Attach ``Transaction-Id`` when the caller supplied one; the server generates it otherwise."""
    if transaction_id is not None:
        request.headers["Transaction-Id"] = transaction_id
    return request


def add_if_match(request: PreparedRequest, if_match: str | None) -> PreparedRequest:
    if if_match is None:
        raise InvalidArgumentError("if_match cannot be None")
    request.headers["If-Match"] = if_match
    return request


def add_custom_headers(
    request: PreparedRequest, headers: Mapping[str, str] | None
) -> PreparedRequest:
    """Merge caller headers last so they override the SDK defaults."""
    if headers:
        request.headers.update(headers)
    return request


def add_query(request: PreparedRequest, pairs: Iterable[tuple[str, Any]]) -> PreparedRequest:
    """Add each query parameter whose value is not None."""
    for name, value in pairs:
        if value is None:
            continue
        request.params[name] = _query_value(value)
    return request


def set_body(request: PreparedRequest, body: dict[str, Any]) -> PreparedRequest:
    request.body = body
    request.has_body = True
    return request


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
