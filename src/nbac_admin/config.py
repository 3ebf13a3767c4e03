"""Configuration helpers for the NBAC admin client."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_SERVICE_NAME = "network_based_access_control_admin_api"
DEFAULT_SERVICE_URL = "https://network-based-access-control-admin-api.cloud.ibm.com"
SERVICE_VERSION = "v1"
SDK_VERSION = "0.1.0"
USER_AGENT = f"nbac-admin-client/{SDK_VERSION}"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `NBACAdminClient`."""

    base_url: str = DEFAULT_SERVICE_URL
    verify_ssl: bool | str = True
    timeout: float = 30.0
    default_headers: Mapping[str, str] | None = None
    service_name: str = DEFAULT_SERVICE_NAME

    def resolved_headers(self) -> dict[str, str]:
        return dict(self.default_headers or {})


def load_service_properties(
    service_name: str = DEFAULT_SERVICE_NAME,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Collect `<SERVICE_NAME>_*` environment variables into a property map.

    Keys are lower-cased with the prefix removed, so
    ``NETWORK_BASED_ACCESS_CONTROL_ADMIN_API_AUTH_TYPE`` becomes ``auth_type``.
    Empty values are skipped.
    """
    env = os.environ if environ is None else environ
    prefix = service_name.upper().replace("-", "_") + "_"
    properties: dict[str, str] = {}
    for key, value in env.items():
        if not key.startswith(prefix) or not value:
            continue
        properties[key[len(prefix):].lower()] = value
    return properties


def config_from_properties(
    properties: Mapping[str, str],
    *,
    service_name: str = DEFAULT_SERVICE_NAME,
) -> ClientConfig:
    disable_ssl = properties.get("disable_ssl", "").strip().lower() in _TRUTHY
    return ClientConfig(
        base_url=properties.get("url", DEFAULT_SERVICE_URL).rstrip("/"),
        verify_ssl=not disable_ssl,
        service_name=service_name,
    )
