import pytest
import requests
from urllib3.exceptions import InsecureRequestWarning

from nbac_admin import NBACAdminClient
from nbac_admin.auth import BasicAuth, BearerTokenAuth, NoAuth
from nbac_admin.exceptions import (
    ApiError,
    AuthenticationError,
    InvalidArgumentError,
    RequestError,
    UnexpectedResponseError,
)
from nbac_admin.models import GetAccountSettingsOptions, GetZoneOptions, ListZonesOptions

BASE_URL = "https://nbac.test"


def build_client(**kwargs):
    kwargs.setdefault("auth_strategy", NoAuth())
    return NBACAdminClient(base_url=BASE_URL, **kwargs)


def test_bearer_auth_header_is_sent(requests_mock):
    client = build_client(auth_strategy=BearerTokenAuth(token="abc123"))
    matcher = requests_mock.get(f"{BASE_URL}/v1/zones", json={"count": 0, "zones": []})

    client.list_zones(ListZonesOptions(account_id="acct"))

    assert matcher.last_request.headers["Authorization"] == "Bearer abc123"


def test_basic_auth_header_is_sent(requests_mock):
    client = build_client(auth_strategy=BasicAuth("admin", "secret"))
    matcher = requests_mock.get(f"{BASE_URL}/v1/zones/z1", json={"id": "z1"})

    client.get_zone(GetZoneOptions(zone_id="z1"))

    assert matcher.last_request.headers["Authorization"] == "Basic YWRtaW46c2VjcmV0"


def test_noauth_sends_no_authorization(requests_mock):
    client = build_client()
    matcher = requests_mock.get(f"{BASE_URL}/v1/zones/z1", json={"id": "z1"})

    client.get_zone(GetZoneOptions(zone_id="z1"))

    assert "Authorization" not in matcher.last_request.headers


def test_sdk_headers_and_default_headers(requests_mock):
    client = build_client(default_headers={"X-Custom": "yes"})
    matcher = requests_mock.get(f"{BASE_URL}/v1/zones/z1", json={"id": "z1"})

    client.get_zone(GetZoneOptions(zone_id="z1"))

    headers = matcher.last_request.headers
    assert headers["X-Custom"] == "yes"
    assert headers["Accept"] == "application/json"
    assert headers["User-Agent"].startswith("nbac-admin-client/")
    assert "operation_id=getZone" in headers["X-IBMCloud-SDK-Analytics"]
    assert "service_version=v1" in headers["X-IBMCloud-SDK-Analytics"]


def test_missing_authenticator_is_rejected():
    with pytest.raises(InvalidArgumentError):
        NBACAdminClient(base_url=BASE_URL, auth_strategy=None)


def test_empty_base_url_is_rejected():
    with pytest.raises(InvalidArgumentError):
        NBACAdminClient(base_url="", auth_strategy=NoAuth())


def test_empty_bearer_token_is_rejected():
    with pytest.raises(AuthenticationError):
        build_client(auth_strategy=BearerTokenAuth(token=""))


def test_trailing_slash_on_base_url_is_ignored(requests_mock):
    client = NBACAdminClient(base_url=f"{BASE_URL}/", auth_strategy=NoAuth())
    matcher = requests_mock.get(f"{BASE_URL}/v1/account_settings/acct", json={"id": "acct"})

    client.get_account_settings(GetAccountSettingsOptions(account_id="acct"))

    assert matcher.last_request.path == "/v1/account_settings/acct"


def test_request_logging_includes_operation_and_transaction(caplog, requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/v1/zones/z1", json={"id": "z1"})

    with caplog.at_level("INFO", logger="nbac_admin.client"):
        client.get_zone(GetZoneOptions(zone_id="z1", transaction_id="tx-42"))

    assert "operation=getZone" in caplog.text
    assert "transaction_id=tx-42" in caplog.text


def test_request_error_includes_root_cause():
    class ExplodingSession:
        def request(self, *args, **kwargs):  # pragma: no cover - helper
            raise requests.exceptions.SSLError("CERTIFICATE_VERIFY_FAILED")

        def close(self):  # pragma: no cover - helper
            pass

    client = build_client(session=ExplodingSession())

    with pytest.raises(RequestError) as excinfo:
        client.get_zone(GetZoneOptions(zone_id="z1"))

    assert "CERTIFICATE_VERIFY_FAILED" in str(excinfo.value)
    assert not isinstance(excinfo.value, ApiError)


def test_api_error_carries_status_details_and_transaction(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE_URL}/v1/zones/missing",
        status_code=404,
        json={
            "errors": [{"code": "not_found", "message": "Zone not found"}],
            "status_code": 404,
        },
        headers={"Transaction-Id": "tx-404"},
    )

    with pytest.raises(ApiError) as excinfo:
        client.get_zone(GetZoneOptions(zone_id="missing"))

    error = excinfo.value
    assert error.status_code == 404
    assert error.transaction_id == "tx-404"
    assert error.details["errors"][0]["code"] == "not_found"
    assert "Zone not found" in str(error)


def test_api_error_with_plain_text_body(requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/v1/zones/z1", status_code=503, text="upstream down")

    with pytest.raises(RequestError) as excinfo:
        client.get_zone(GetZoneOptions(zone_id="z1"))

    assert excinfo.value.status_code == 503
    assert excinfo.value.details == "upstream down"


def test_invalid_json_raises_unexpected_response(requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/v1/zones/z1", text="not json")

    with pytest.raises(UnexpectedResponseError) as excinfo:
        client.get_zone(GetZoneOptions(zone_id="z1"))

    assert excinfo.value.status_code == 200


def test_wrong_payload_shape_logs_and_raises(caplog, requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/v1/zones/z1", json=["not", "an", "object"])

    with caplog.at_level("WARNING", logger="nbac_admin.converter"):
        with pytest.raises(UnexpectedResponseError):
            client.get_zone(GetZoneOptions(zone_id="z1"))

    assert "Failed to parse OutZone" in caplog.text


def test_disables_insecure_warning_when_verify_disabled(monkeypatch):
    captured: list[object] = []

    def fake_disable(warning):  # pragma: no cover - helper
        captured.append(warning)

    monkeypatch.setattr(
        "nbac_admin.client.urllib3.disable_warnings",
        fake_disable,
    )

    build_client(verify_ssl=False)

    assert captured and captured[0] is InsecureRequestWarning


def test_from_environment_builds_configured_client(requests_mock):
    environ = {
        "NETWORK_BASED_ACCESS_CONTROL_ADMIN_API_URL": f"{BASE_URL}/",
        "NETWORK_BASED_ACCESS_CONTROL_ADMIN_API_AUTH_TYPE": "bearerToken",
        "NETWORK_BASED_ACCESS_CONTROL_ADMIN_API_BEARER_TOKEN": "env-token",
        "UNRELATED": "ignored",
    }
    client = NBACAdminClient.from_environment(environ=environ)
    matcher = requests_mock.get(f"{BASE_URL}/v1/zones/z1", json={"id": "z1"})

    client.get_zone(GetZoneOptions(zone_id="z1"))

    assert client.config.base_url == BASE_URL
    assert matcher.last_request.headers["Authorization"] == "Bearer env-token"


def test_from_environment_requires_auth_type():
    with pytest.raises(InvalidArgumentError):
        NBACAdminClient.from_environment(
            environ={"NETWORK_BASED_ACCESS_CONTROL_ADMIN_API_URL": BASE_URL}
        )


def test_from_environment_rejects_unknown_auth_type():
    with pytest.raises(InvalidArgumentError):
        NBACAdminClient.from_environment(
            environ={"NETWORK_BASED_ACCESS_CONTROL_ADMIN_API_AUTH_TYPE": "iam"}
        )
