"""Value objects exchanged with the NBAC admin API."""
from .account import OutAccountSettings
from .addresses import (
    Address,
    AddressIPAddress,
    AddressIPAddressRange,
    AddressServiceRef,
    AddressSubnet,
    AddressVPC,
    ServiceRefValue,
    address_from_dict,
)
from .base import NBACModel
from .options import (
    CreatePolicyOptions,
    CreateZoneOptions,
    DeletePolicyOptions,
    DeleteZoneOptions,
    GetAccountSettingsOptions,
    GetPolicyOptions,
    GetZoneOptions,
    ListPoliciesOptions,
    ListZonesOptions,
    Options,
    UpdatePolicyOptions,
    UpdateZoneOptions,
)
from .policies import (
    Environment,
    EnvironmentAttribute,
    OutPolicy,
    PolicyPage,
    Resource,
    ResourceAttribute,
    ResourceTagAttribute,
)
from .zones import OutZone, OutZoneSummary, ZonePage

__all__ = [
    "Address",
    "AddressIPAddress",
    "AddressIPAddressRange",
    "AddressServiceRef",
    "AddressSubnet",
    "AddressVPC",
    "CreatePolicyOptions",
    "CreateZoneOptions",
    "DeletePolicyOptions",
    "DeleteZoneOptions",
    "Environment",
    "EnvironmentAttribute",
    "GetAccountSettingsOptions",
    "GetPolicyOptions",
    "GetZoneOptions",
    "ListPoliciesOptions",
    "ListZonesOptions",
    "NBACModel",
    "Options",
    "OutAccountSettings",
    "OutPolicy",
    "OutZone",
    "OutZoneSummary",
    "PolicyPage",
    "Resource",
    "ResourceAttribute",
    "ResourceTagAttribute",
    "ServiceRefValue",
    "UpdatePolicyOptions",
    "UpdateZoneOptions",
    "ZonePage",
    "address_from_dict",
]
