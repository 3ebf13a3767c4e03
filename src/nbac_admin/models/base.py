"""SDK-wide base pydantic model and shared field types."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    ValidationError,
)

from ..exceptions import InvalidArgumentError, UnexpectedResponseError

M = TypeVar("M", bound="NBACModel")


def to_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    return to_utc(value).isoformat().replace("+00:00", "Z")


NonEmptyStr = Annotated[str, Field(min_length=1)]
Timestamp = Annotated[
    datetime,
    AfterValidator(to_utc),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


def describe_errors(exc: ValidationError) -> str:
    """Condense a pydantic error into ``field: message`` pairs."""
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "value"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


class NBACModel(BaseModel):
    """Base model for every value exchanged with the API (pydantic v2).

    - Instances are immutable and sequences are stored as tuples.
    - Unknown response fields are ignored.
    - Invalid constructor arguments raise `InvalidArgumentError`; invalid
      payloads passed to `from_dict` raise `UnexpectedResponseError`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidArgumentError(
                f"Invalid {type(self).__name__}: {describe_errors(exc)}",
                details=exc.errors(include_url=False),
            ) from exc

    def to_dict(self) -> dict[str, Any]:
        """Serialize to JSON-ready data, leaving out unset (None) fields."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_dict(cls: type[M], data: Any) -> M:
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise UnexpectedResponseError(
                f"Invalid {cls.__name__} payload: {describe_errors(exc)}",
                details=exc.errors(include_url=False),
            ) from exc

    def evolve(self: M, **changes: Any) -> M:
        """Return a copy with ``changes`` applied; validation runs again."""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self)(**values)
