"""High-level NBAC admin REST client."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .auth import AuthStrategy, authenticator_from_properties
from .config import (
    DEFAULT_SERVICE_NAME,
    DEFAULT_SERVICE_URL,
    ClientConfig,
    config_from_properties,
    load_service_properties,
)
from .converter import DetailedResponse
from .exceptions import InvalidArgumentError, RequestError
from .http import HttpResponse
from .http import request as http_request
from .models.account import OutAccountSettings
from .models.options import (
    CreatePolicyOptions,
    CreateZoneOptions,
    DeletePolicyOptions,
    DeleteZoneOptions,
    GetAccountSettingsOptions,
    GetPolicyOptions,
    GetZoneOptions,
    ListPoliciesOptions,
    ListZonesOptions,
    UpdatePolicyOptions,
    UpdateZoneOptions,
)
from .models.policies import OutPolicy, PolicyPage
from .models.zones import OutZone, ZonePage
from .request import PreparedRequest
from .resources import AccountSettingsResource, PoliciesResource, ZonesResource


logger = logging.getLogger(__name__)


class NBACAdminClient:
    """Wrap the Network-based Access Control admin endpoints.

    With this client you can create, list, get, update and delete zones and
    policies, and read the settings of an account. Each method performs exactly
    one HTTP request and returns a `DetailedResponse`.
    """

    def __init__(
        self,
        *,
        auth_strategy: AuthStrategy,
        base_url: str = DEFAULT_SERVICE_URL,
        verify_ssl: bool | str = True,
        timeout: float = 30.0,
        default_headers: Mapping[str, str] | None = None,
        service_name: str = DEFAULT_SERVICE_NAME,
        session: requests.Session | None = None,
    ) -> None:
        if auth_strategy is None:
            raise InvalidArgumentError("auth_strategy cannot be None")
        if not base_url:
            raise InvalidArgumentError("base_url cannot be empty")
        self.config = ClientConfig(
            base_url=base_url.rstrip("/"),
            verify_ssl=verify_ssl,
            timeout=timeout,
            default_headers=default_headers,
            service_name=service_name,
        )
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self._auth = auth_strategy
        self._auth.validate()
        self.zones = ZonesResource(self)
        self.policies = PoliciesResource(self)
        self.account_settings = AccountSettingsResource(self)

    @classmethod
    def from_environment(
        cls,
        service_name: str = DEFAULT_SERVICE_NAME,
        *,
        environ: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> NBACAdminClient:
        """Build a client from ``<SERVICE_NAME>_*`` environment variables."""
        properties = load_service_properties(service_name, environ)
        config = config_from_properties(properties, service_name=service_name)
        return cls(
            auth_strategy=authenticator_from_properties(properties),
            base_url=config.base_url,
            verify_ssl=config.verify_ssl,
            service_name=service_name,
            session=session,
        )

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> NBACAdminClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Zones -------------------------------------------------------------------
    def create_zone(self, options: CreateZoneOptions | None = None) -> DetailedResponse[OutZone]:
        return self.zones.create(options)

    def list_zones(self, options: ListZonesOptions) -> DetailedResponse[ZonePage]:
        return self.zones.list(options)

    def get_zone(self, options: GetZoneOptions) -> DetailedResponse[OutZone]:
        return self.zones.get(options)

    def update_zone(self, options: UpdateZoneOptions) -> DetailedResponse[OutZone]:
        return self.zones.update(options)

    def delete_zone(self, options: DeleteZoneOptions) -> DetailedResponse[None]:
        return self.zones.delete(options)

    # Policies ----------------------------------------------------------------
    def create_policy(
        self, options: CreatePolicyOptions | None = None
    ) -> DetailedResponse[OutPolicy]:
        return self.policies.create(options)

    def list_policies(self, options: ListPoliciesOptions) -> DetailedResponse[PolicyPage]:
        return self.policies.list(options)

    def get_policy(self, options: GetPolicyOptions) -> DetailedResponse[OutPolicy]:
        return self.policies.get(options)

    def update_policy(self, options: UpdatePolicyOptions) -> DetailedResponse[OutPolicy]:
        return self.policies.update(options)

    def delete_policy(self, options: DeletePolicyOptions) -> DetailedResponse[None]:
        return self.policies.delete(options)

    # Account settings --------------------------------------------------------
    def get_account_settings(
        self, options: GetAccountSettingsOptions
    ) -> DetailedResponse[OutAccountSettings]:
        return self.account_settings.get(options)

    # Transport ---------------------------------------------------------------
    def send(self, request: PreparedRequest, *, expect_json: bool = True) -> HttpResponse:
        """Authenticate and transmit a prepared request."""
        headers = self._prepare_headers(request.headers)
        self._log_request(request)
        return self._perform_request(
            request.method,
            request.url,
            params=request.params or None,
            headers=headers,
            json_payload=request.body if request.has_body else None,
            expect_json=expect_json,
        )

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _prepare_headers(self, request_headers: Mapping[str, str]) -> MutableMapping[str, str]:
        headers = self.config.resolved_headers()
        headers.update(request_headers)
        self._auth.apply(headers)
        return headers

    def _perform_request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None,
        headers: MutableMapping[str, str],
        json_payload: Mapping[str, Any] | None,
        expect_json: bool,
    ) -> HttpResponse:
        try:
            return http_request(
                self._session,
                method,
                url,
                params=params,
                headers=headers,
                json_payload=json_payload,
                expect_json=expect_json,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise RequestError(
                f"Failed to communicate with NBAC admin API: {reason}", details=reason
            ) from exc

    def _log_request(self, request: PreparedRequest) -> None:
        logger.info(
            "NBAC request %s %s (operation=%s, transaction_id=%s)",
            request.method,
            request.url,
            request.operation_id,
            request.transaction_id or "unspecified",
        )

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
