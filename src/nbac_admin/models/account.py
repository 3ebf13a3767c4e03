"""Account-level limits and usage."""

from __future__ import annotations

from .base import NBACModel, Timestamp


class OutAccountSettings(NBACModel):
    """Zone and policy limits for an account together with current usage."""

    id: str | None = None
    crn: str | None = None
    policy_count_limit: int | None = None
    zone_count_limit: int | None = None
    current_policy_count: int | None = None
    current_zone_count: int | None = None
    href: str | None = None
    created_at: Timestamp | None = None
    created_by_id: str | None = None
    last_modified_at: Timestamp | None = None
    last_modified_by_id: str | None = None
