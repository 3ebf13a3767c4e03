"""Network location matchers used by zones.

Addresses form a closed set of variants tagged by their ``type`` field and are
validated as a pydantic discriminated union.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter, ValidationError

from ..exceptions import UnexpectedResponseError
from .base import NBACModel, NonEmptyStr, describe_errors


class ServiceRefValue(NBACModel):
    """Reference to a service, optionally narrowed to an account and instance."""

    service_name: str
    account_id: str | None = None
    service_instance: str | None = None


class AddressIPAddress(NBACModel):
    """A single IP address."""

    type: Literal["ipAddress"] = "ipAddress"
    value: NonEmptyStr


class AddressIPAddressRange(NBACModel):
    """An inclusive IP address range such as ``169.23.22.0-169.23.22.255``."""

    type: Literal["ipRange"] = "ipRange"
    value: NonEmptyStr


class AddressSubnet(NBACModel):
    """A subnet in CIDR notation."""

    type: Literal["subnet"] = "subnet"
    value: NonEmptyStr


class AddressVPC(NBACModel):
    """A VPC, identified by its CRN."""

    type: Literal["vpc"] = "vpc"
    value: NonEmptyStr


class AddressServiceRef(NBACModel):
    """Traffic originating from a service."""

    type: Literal["serviceRef"] = "serviceRef"
    value: ServiceRefValue


Address = Annotated[
    Union[
        AddressIPAddress,
        AddressIPAddressRange,
        AddressSubnet,
        AddressVPC,
        AddressServiceRef,
    ],
    Field(discriminator="type"),
]

_ADDRESS_ADAPTER: TypeAdapter[Any] = TypeAdapter(Address)


def address_from_dict(data: Any) -> Any:
    """Decode one address, picking the variant from its ``type`` tag."""
    try:
        return _ADDRESS_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise UnexpectedResponseError(
            f"Invalid address payload: {describe_errors(exc)}",
            details=exc.errors(include_url=False),
        ) from exc
