"""Resource-specific convenience wrappers."""
from .account_settings import AccountSettingsResource
from .policies import PoliciesResource
from .zones import ZonesResource

__all__ = [
    "AccountSettingsResource",
    "PoliciesResource",
    "ZonesResource",
]
