"""Zone outputs."""

from __future__ import annotations

from .addresses import Address
from .base import NBACModel, Timestamp


class OutZone(NBACModel):
    """A zone as returned by create, get and update."""

    id: str | None = None
    crn: str | None = None
    name: str | None = None
    account_id: str | None = None
    description: str | None = None
    addresses: tuple[Address, ...] | None = None
    excluded: tuple[Address, ...] | None = None
    href: str | None = None
    created_at: Timestamp | None = None
    created_by_id: str | None = None
    last_modified_at: Timestamp | None = None
    last_modified_by_id: str | None = None


class OutZoneSummary(NBACModel):
    """Abbreviated zone listing entry with a preview of its addresses."""

    id: str | None = None
    crn: str | None = None
    name: str | None = None
    description: str | None = None
    addresses_preview: tuple[Address, ...] | None = None
    address_count: int | None = None
    excluded_count: int | None = None
    href: str | None = None
    created_at: Timestamp | None = None
    created_by_id: str | None = None
    last_modified_at: Timestamp | None = None
    last_modified_by_id: str | None = None


class ZonePage(NBACModel):
    count: int | None = None
    zones: tuple[OutZoneSummary, ...] | None = None
