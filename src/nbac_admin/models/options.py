"""Per-operation option objects.

Each options class carries the path identifiers, query filters, headers and
body fields of one API operation. Required fields are checked when the object
is constructed, so an invalid request never reaches the network.
"""

from __future__ import annotations

from typing import Any, ClassVar

from .addresses import Address
from .base import NBACModel, NonEmptyStr
from .policies import Environment, Resource


class Options(NBACModel):
    """Base for option objects.

    ``headers`` holds extra request headers for this one call; they are merged
    after the SDK headers and win on conflicts.
    """

    body_fields: ClassVar[tuple[str, ...]] = ()
    query_fields: ClassVar[tuple[str, ...]] = ()

    transaction_id: str | None = None
    headers: dict[str, str] | None = None

    def body_values(self) -> dict[str, Any]:
        """Return the set body fields as JSON-ready data."""
        return self.model_dump(mode="json", include=set(self.body_fields), exclude_none=True)

    def query_values(self) -> list[tuple[str, Any]]:
        return [(name, getattr(self, name)) for name in self.query_fields]


# Zones ------------------------------------------------------------------------
class CreateZoneOptions(Options):
    body_fields: ClassVar[tuple[str, ...]] = (
        "name",
        "account_id",
        "description",
        "addresses",
        "excluded",
    )

    name: str
    account_id: str
    description: str | None = None
    addresses: tuple[Address, ...] | None = None
    excluded: tuple[Address, ...] | None = None


class ListZonesOptions(Options):
    query_fields: ClassVar[tuple[str, ...]] = ("account_id", "name", "sort")

    account_id: str
    name: str | None = None
    sort: str | None = None


class GetZoneOptions(Options):
    zone_id: NonEmptyStr


class UpdateZoneOptions(Options):
    """Replace the given fields of a zone; unset fields are left out of the body."""

    body_fields: ClassVar[tuple[str, ...]] = CreateZoneOptions.body_fields

    zone_id: NonEmptyStr
    if_match: str
    name: str | None = None
    account_id: str | None = None
    description: str | None = None
    addresses: tuple[Address, ...] | None = None
    excluded: tuple[Address, ...] | None = None


class DeleteZoneOptions(Options):
    zone_id: NonEmptyStr


# Policies ---------------------------------------------------------------------
class CreatePolicyOptions(Options):
    body_fields: ClassVar[tuple[str, ...]] = ("description", "environments", "resources")

    description: str | None = None
    environments: tuple[Environment, ...] | None = None
    resources: tuple[Resource, ...] | None = None


class ListPoliciesOptions(Options):
    """Filters for listing policies; only ``account_id`` is mandatory."""

    query_fields: ClassVar[tuple[str, ...]] = (
        "account_id",
        "region",
        "resource",
        "resource_type",
        "service_instance",
        "service_name",
        "service_type",
        "zone_id",
        "sort",
    )

    account_id: str
    region: str | None = None
    resource: str | None = None
    resource_type: str | None = None
    service_instance: str | None = None
    service_name: str | None = None
    service_type: str | None = None
    zone_id: str | None = None
    sort: str | None = None


class GetPolicyOptions(Options):
    policy_id: NonEmptyStr


class UpdatePolicyOptions(Options):
    body_fields: ClassVar[tuple[str, ...]] = CreatePolicyOptions.body_fields

    policy_id: NonEmptyStr
    if_match: str
    description: str | None = None
    environments: tuple[Environment, ...] | None = None
    resources: tuple[Resource, ...] | None = None


class DeletePolicyOptions(Options):
    policy_id: NonEmptyStr


# Account settings -------------------------------------------------------------
class GetAccountSettingsOptions(Options):
    account_id: NonEmptyStr
