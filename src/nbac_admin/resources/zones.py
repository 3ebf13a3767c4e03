"""Zone operations."""

from __future__ import annotations

from ..converter import DetailedResponse
from ..models.options import (
    CreateZoneOptions,
    DeleteZoneOptions,
    GetZoneOptions,
    ListZonesOptions,
    UpdateZoneOptions,
)
from ..models.zones import OutZone, ZonePage
from ..request import add_query, set_body
from ..serialization import serialize_options
from .base import ResourceBase

ZONES_PATH = "/v1/zones"
ZONE_PATH = "/v1/zones/{zone_id}"


class ZonesResource(ResourceBase):
    """Create, list, read, update and delete zones."""

    def create(self, options: CreateZoneOptions | None = None) -> DetailedResponse[OutZone]:
        """Create a zone.

        Called without options, the request carries no body at all so the
        service applies its own defaults.
        """
        if options is not None:
            self._check_options(options, CreateZoneOptions, "create_zone_options")
        request = self._prepare("POST", ZONES_PATH, operation_id="createZone", options=options)
        if options is not None:
            set_body(request, serialize_options(options))
        return self._fetch(request, OutZone)

    def list(self, options: ListZonesOptions) -> DetailedResponse[ZonePage]:
        options = self._check_options(options, ListZonesOptions, "list_zones_options")
        request = self._prepare("GET", ZONES_PATH, operation_id="listZones", options=options)
        add_query(request, options.query_values())
        return self._fetch(request, ZonePage)

    def get(self, options: GetZoneOptions) -> DetailedResponse[OutZone]:
        options = self._check_options(options, GetZoneOptions, "get_zone_options")
        request = self._prepare(
            "GET",
            ZONE_PATH,
            operation_id="getZone",
            options=options,
            path_params={"zone_id": options.zone_id},
        )
        return self._fetch(request, OutZone)

    def update(self, options: UpdateZoneOptions) -> DetailedResponse[OutZone]:
        """Replace the fields set on ``options``; unset fields are not sent."""
        options = self._check_options(options, UpdateZoneOptions, "update_zone_options")
        request = self._prepare(
            "PUT",
            ZONE_PATH,
            operation_id="updateZone",
            options=options,
            path_params={"zone_id": options.zone_id},
            if_match=options.if_match,
        )
        set_body(request, serialize_options(options))
        return self._fetch(request, OutZone)

    def delete(self, options: DeleteZoneOptions) -> DetailedResponse[None]:
        options = self._check_options(options, DeleteZoneOptions, "delete_zone_options")
        request = self._prepare(
            "DELETE",
            ZONE_PATH,
            operation_id="deleteZone",
            options=options,
            path_params={"zone_id": options.zone_id},
            expects_body=False,
        )
        return self._execute_void(request)
