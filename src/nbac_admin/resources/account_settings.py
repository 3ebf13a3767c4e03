"""Account settings lookup."""

from __future__ import annotations

from ..converter import DetailedResponse
from ..models.account import OutAccountSettings
from ..models.options import GetAccountSettingsOptions
from .base import ResourceBase

ACCOUNT_SETTINGS_PATH = "/v1/account_settings/{account_id}"


class AccountSettingsResource(ResourceBase):
    """Read zone and policy limits for an account."""

    def get(self, options: GetAccountSettingsOptions) -> DetailedResponse[OutAccountSettings]:
        options = self._check_options(
            options, GetAccountSettingsOptions, "get_account_settings_options"
        )
        request = self._prepare(
            "GET",
            ACCOUNT_SETTINGS_PATH,
            operation_id="getAccountSettings",
            options=options,
            path_params={"account_id": options.account_id},
        )
        return self._fetch(request, OutAccountSettings)
