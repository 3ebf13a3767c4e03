"""Authenticator that sends no credentials."""
from __future__ import annotations

from collections.abc import MutableMapping

from .base import AuthStrategy


class NoAuth(AuthStrategy):
    """Leave headers untouched; useful against local mocks and test servers."""

    def apply(self, headers: MutableMapping[str, str]) -> None:
        return None
