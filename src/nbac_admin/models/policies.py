"""Policy models: environment conditions, resource conditions, and policy outputs."""

from __future__ import annotations

from pydantic import Field

from .base import NBACModel, Timestamp


class EnvironmentAttribute(NBACModel):
    """A name/value context condition such as ``networkZoneId``."""

    name: str
    value: str


class Environment(NBACModel):
    """Context in which a request must originate for a policy to apply."""

    attributes: tuple[EnvironmentAttribute, ...] = Field(min_length=1)


class ResourceAttribute(NBACModel):
    """Match on a resource attribute. A missing operator means equality."""

    name: str
    value: str
    operator: str | None = None


class ResourceTagAttribute(NBACModel):
    name: str
    value: str
    operator: str | None = None


class Resource(NBACModel):
    """Target of a policy: attribute matchers plus optional tag matchers."""

    attributes: tuple[ResourceAttribute, ...] = Field(min_length=1)
    tags: tuple[ResourceTagAttribute, ...] | None = None


class OutPolicy(NBACModel):
    """A policy as returned by the service."""

    id: str | None = None
    crn: str | None = None
    description: str | None = None
    environments: tuple[Environment, ...] | None = None
    resources: tuple[Resource, ...] | None = None
    href: str | None = None
    created_at: Timestamp | None = None
    created_by_id: str | None = None
    last_modified_at: Timestamp | None = None
    last_modified_by_id: str | None = None


class PolicyPage(NBACModel):
    """All policies matching a list request; the service does not paginate further."""

    count: int | None = None
    policies: tuple[OutPolicy, ...] | None = None
