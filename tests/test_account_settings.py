import pytest

from nbac_admin import NBACAdminClient
from nbac_admin.auth import NoAuth
from nbac_admin.exceptions import InvalidArgumentError, UnexpectedResponseError
from nbac_admin.models import GetAccountSettingsOptions

BASE_URL = "https://nbac.test"


def build_client():
    return NBACAdminClient(base_url=BASE_URL, auth_strategy=NoAuth())


def test_get_account_settings(requests_mock):
    client = build_client()
    matcher = requests_mock.get(
        f"{BASE_URL}/v1/account_settings/testString",
        json={
            "id": "testString",
            "crn": "crn:v1:bluemix:public:network-based-access-control::a/testString::account-settings:testString",
            "policy_count_limit": 500,
            "zone_count_limit": 500,
            "current_policy_count": 3,
            "current_zone_count": 2,
            "href": "https://nbac.test/v1/account_settings/testString",
            "created_at": "2019-01-01T12:00:00.000Z",
        },
    )

    response = client.get_account_settings(GetAccountSettingsOptions(account_id="testString"))

    settings = response.result
    assert matcher.last_request.method == "GET"
    assert settings.policy_count_limit == 500
    assert settings.current_zone_count == 2
    assert settings.last_modified_at is None


def test_account_id_is_required():
    with pytest.raises(InvalidArgumentError):
        GetAccountSettingsOptions(account_id="")


def test_non_integer_limit_is_rejected(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/v1/account_settings/acct",
        json={"id": "acct", "zone_count_limit": "many"},
    )

    with pytest.raises(UnexpectedResponseError):
        client.get_account_settings(GetAccountSettingsOptions(account_id="acct"))
