"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from ..converter import DetailedResponse, convert, convert_void
from ..exceptions import InvalidArgumentError
from ..models.base import NBACModel
from ..models.options import Options
from ..request import (
    PreparedRequest,
    accept_json,
    add_custom_headers,
    add_if_match,
    add_transaction_id,
    build_request,
)

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import NBACAdminClient

T = TypeVar("T", bound=NBACModel)
O = TypeVar("O", bound=Options)


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, client: NBACAdminClient) -> None:
        self._client = client

    def _prepare(
        self,
        method: str,
        path_template: str,
        *,
        operation_id: str,
        options: Options | None = None,
        path_params: Mapping[str, Any] | None = None,
        if_match: str | None = None,
        expects_body: bool = True,
    ) -> PreparedRequest:
        config = self._client.config
        request = build_request(
            config.base_url,
            method,
            path_template,
            path_params,
            operation_id=operation_id,
            service_name=config.service_name,
        )
        if expects_body:
            accept_json(request)
        if if_match is not None:
            add_if_match(request, if_match)
        if options is None:
            return request
        add_transaction_id(request, options.transaction_id)
        return add_custom_headers(request, options.headers)

    def _fetch(self, request: PreparedRequest, model_cls: type[T]) -> DetailedResponse[T]:
        return convert(self._client.send(request), model_cls)

    def _execute_void(self, request: PreparedRequest) -> DetailedResponse[None]:
        return convert_void(self._client.send(request, expect_json=False))

    @staticmethod
    def _check_options(options: Any, options_cls: type[O], name: str) -> O:
        if options is None:
            raise InvalidArgumentError(f"{name} cannot be None")
        if not isinstance(options, options_cls):
            raise InvalidArgumentError(
                f"{name} must be {options_cls.__name__}, got {type(options).__name__}"
            )
        return options
