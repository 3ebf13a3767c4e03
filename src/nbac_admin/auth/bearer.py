"""Bearer token authentication."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass

from ..exceptions import AuthenticationError
from .base import AuthStrategy


@dataclass(slots=True)
class BearerTokenAuth(AuthStrategy):
    """Apply an already issued access token."""

    token: str

    def validate(self) -> None:
        if not self.token:
            raise AuthenticationError("Bearer token authentication requires a token.")

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = f"Bearer {self.token}"

    def update_token(self, token: str) -> None:
        self.token = token
