"""HTTP utilities for NBAC admin API access."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from requests import Response, Session

from .exceptions import ApiError, UnexpectedResponseError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HttpResponse:
    """Typed response wrapper with helper accessors."""

    status_code: int
    data: Any
    headers: Mapping[str, str]


def error_details(response: Response) -> Any:
    """Return the parsed JSON error payload, or the raw text when it is not JSON."""

    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def error_message(response: Response, details: Any) -> str:
    summary: Any = None
    if isinstance(details, Mapping):
        summary = details.get("message")
        errors = details.get("errors")
        if summary is None and isinstance(errors, list) and errors:
            first = errors[0]
            if isinstance(first, Mapping):
                summary = first.get("message")
    if summary is None:
        summary = response.text[:200] or response.reason
    return f"NBAC API error {response.status_code}: {summary}"


def ensure_success(response: Response) -> None:
    """Raise `ApiError` if the response signals a failure."""

    if 200 <= response.status_code < 300:
        return
    details = error_details(response)
    raise ApiError(
        error_message(response, details),
        status_code=response.status_code,
        details=details,
        transaction_id=response.headers.get("Transaction-Id"),
    )


def parse_json(response: Response) -> Any:
    """Parse JSON with helpful error context."""

    try:
        return response.json()
    except ValueError as exc:
        raise UnexpectedResponseError(
            "Response did not contain valid JSON",
            status_code=response.status_code,
            details=response.text[:200],
        ) from exc


def request(
    session: Session,
    method: str,
    url: str,
    *,
    params: Mapping[str, str] | None = None,
    headers: MutableMapping[str, str] | None = None,
    json_payload: Mapping[str, Any] | None = None,
    expect_json: bool = True,
    timeout: float | tuple[float, float] | None = None,
    verify: bool | str = True,
) -> HttpResponse:
    """Make a request and return a parsed response envelope."""

    response = session.request(
        method=method,
        url=url,
        params=params,
        headers=headers,
        json=json_payload,
        timeout=timeout,
        verify=verify,
    )
    logger.debug("NBAC response %s for %s %s", response.status_code, method, url)
    ensure_success(response)

    data: Any = None
    if expect_json and response.content:
        data = parse_json(response)

    return HttpResponse(status_code=response.status_code, data=data, headers=response.headers)
