"""Custom exception hierarchy for the NBAC admin client."""
from __future__ import annotations

from typing import Any


class NBACError(RuntimeError):
    """Base error for NBAC admin failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class InvalidArgumentError(NBACError, ValueError):
    """Raised when a required argument or option field is missing or malformed."""


class AuthenticationError(NBACError):
    """Raised when an authenticator cannot produce credentials."""


class RequestError(NBACError):
    """Raised when an HTTP request cannot be fulfilled."""


class ApiError(RequestError):
    """Raised when the service answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
        transaction_id: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, details=details)
        self.transaction_id = transaction_id


class UnexpectedResponseError(NBACError):
    """Raised when the API returns an unexpected payload structure."""
