"""Map raw HTTP responses onto typed results."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import ValidationError

from .exceptions import UnexpectedResponseError
from .http import HttpResponse
from .models.base import NBACModel, describe_errors

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=NBACModel)
R = TypeVar("R")


@dataclass(slots=True)
class DetailedResponse(Generic[R]):
    """Result of an operation together with the HTTP status and headers."""

    result: R
    status_code: int
    headers: Mapping[str, str]

    def get_result(self) -> R:
        return self.result

    @property
    def etag(self) -> str | None:
        """Concurrency token to pass as ``if_match`` on the next update."""
        return self.headers.get("ETag")

    @property
    def transaction_id(self) -> str | None:
        return self.headers.get("Transaction-Id")


def convert(response: HttpResponse, model_cls: type[T]) -> DetailedResponse[T]:
    """Validate the response body into ``model_cls``.

    Unknown fields are ignored and absent fields stay None. A missing body or a
    body of the wrong shape raises `UnexpectedResponseError`.
    """
    context = model_cls.__name__
    if response.data is None:
        raise UnexpectedResponseError(
            f"Missing response body for {context}", status_code=response.status_code
        )
    try:
        result = model_cls.model_validate(response.data)
    except ValidationError as exc:
        logger.warning("Failed to parse %s: %s", context, exc)
        raise UnexpectedResponseError(
            f"Failed to parse {context}: {describe_errors(exc)}",
            status_code=response.status_code,
            details=exc.errors(include_url=False),
        ) from exc
    return DetailedResponse(result=result, status_code=response.status_code, headers=response.headers)


def convert_void(response: HttpResponse) -> DetailedResponse[None]:
    return DetailedResponse(result=None, status_code=response.status_code, headers=response.headers)
