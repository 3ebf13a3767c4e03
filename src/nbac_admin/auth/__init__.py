"""Authentication strategies for the NBAC admin API."""
from __future__ import annotations

from collections.abc import Mapping

from ..exceptions import InvalidArgumentError
from .base import AuthStrategy
from .basic import BasicAuth
from .bearer import BearerTokenAuth
from .noauth import NoAuth

AUTH_TYPE_NOAUTH = "noauth"
AUTH_TYPE_BASIC = "basic"
AUTH_TYPE_BEARER = "bearertoken"


def authenticator_from_properties(properties: Mapping[str, str]) -> AuthStrategy:
    """Build an authenticator from external configuration properties.

    ``auth_type`` selects the strategy; ``username``/``password`` feed basic
    auth and ``bearer_token`` feeds bearer auth.
    """
    auth_type = properties.get("auth_type", "").strip().lower()
    if not auth_type:
        raise InvalidArgumentError("auth_type is required to configure an authenticator.")
    if auth_type == AUTH_TYPE_NOAUTH:
        strategy: AuthStrategy = NoAuth()
    elif auth_type == AUTH_TYPE_BASIC:
        strategy = BasicAuth(
            username=properties.get("username", ""),
            password=properties.get("password", ""),
        )
    elif auth_type == AUTH_TYPE_BEARER:
        strategy = BearerTokenAuth(token=properties.get("bearer_token", ""))
    else:
        raise InvalidArgumentError(f"Unsupported auth_type '{auth_type}'.")
    strategy.validate()
    return strategy


__all__ = [
    "AuthStrategy",
    "BasicAuth",
    "BearerTokenAuth",
    "NoAuth",
    "authenticator_from_properties",
]
