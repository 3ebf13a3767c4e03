import json
from urllib.parse import parse_qs, urlsplit

import pytest
import typer
from typer.testing import CliRunner

from nbac_admin.cli import _build_client, app

runner = CliRunner()

BASE_URL = "https://nbac.test"
AUTH_ARGS = ["--base-url", BASE_URL, "--token", "tok"]

ZONE_SUMMARY = {
    "id": "z1",
    "name": "office",
    "addresses_preview": [{"type": "ipAddress", "value": "169.23.56.234"}],
    "address_count": 1,
    "excluded_count": 0,
}


def test_zones_list_cli(requests_mock):
    requests_mock.get(f"{BASE_URL}/v1/zones", json={"count": 1, "zones": [ZONE_SUMMARY]})

    result = runner.invoke(app, ["zones", "list", "--account-id", "acct", *AUTH_ARGS])

    assert result.exit_code == 0
    assert "Zones" in result.stdout
    assert "office" in result.stdout


def test_zones_list_cli_json_output(requests_mock):
    matcher = requests_mock.get(
        f"{BASE_URL}/v1/zones", json={"count": 1, "zones": [ZONE_SUMMARY]}
    )

    result = runner.invoke(
        app,
        ["zones", "list", "--account-id", "acct", "--name", "office", "--json", *AUTH_ARGS],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload[0]["id"] == "z1"
    assert payload[0]["addresses_preview"][0]["type"] == "ipAddress"
    query = parse_qs(urlsplit(matcher.last_request.url).query)
    assert query == {"account_id": ["acct"], "name": ["office"]}
    assert matcher.last_request.headers["Authorization"] == "Bearer tok"


def test_zones_get_cli_includes_etag(requests_mock):
    requests_mock.get(
        f"{BASE_URL}/v1/zones/z1",
        json={"id": "z1", "name": "office"},
        headers={"ETag": "W/\"v3\""},
    )

    result = runner.invoke(app, ["zones", "get", "z1", *AUTH_ARGS])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"id": "z1", "name": "office", "etag": "W/\"v3\""}


def test_zones_delete_cli(requests_mock):
    matcher = requests_mock.delete(f"{BASE_URL}/v1/zones/z1", status_code=204)

    result = runner.invoke(
        app, ["zones", "delete", "z1", "--transaction-id", "tx-cli", *AUTH_ARGS]
    )

    assert result.exit_code == 0
    assert "Zone z1 deleted." in result.stdout
    assert matcher.last_request.headers["Transaction-Id"] == "tx-cli"


def test_policies_list_cli_passes_filters(requests_mock):
    matcher = requests_mock.get(
        f"{BASE_URL}/v1/policies",
        json={
            "count": 1,
            "policies": [
                {
                    "id": "p1",
                    "description": "office only",
                    "resources": [
                        {"attributes": [{"name": "serviceName", "value": "iam"}]}
                    ],
                }
            ],
        },
    )

    result = runner.invoke(
        app,
        [
            "policies",
            "list",
            "--account-id",
            "acct",
            "--service-name",
            "iam",
            "--zone-id",
            "z1",
            *AUTH_ARGS,
        ],
    )

    assert result.exit_code == 0
    assert "Policies" in result.stdout
    assert "p1" in result.stdout
    query = parse_qs(urlsplit(matcher.last_request.url).query)
    assert query == {"account_id": ["acct"], "service_name": ["iam"], "zone_id": ["z1"]}


def test_policies_get_cli_reports_api_error(requests_mock):
    requests_mock.get(
        f"{BASE_URL}/v1/policies/missing",
        status_code=404,
        json={"errors": [{"code": "not_found", "message": "Policy not found"}]},
    )

    result = runner.invoke(app, ["policies", "get", "missing", *AUTH_ARGS])

    assert result.exit_code == 1
    assert "Request failed (status 404)" in result.output
    assert "Policy not found" in result.output


def test_policies_delete_cli(requests_mock):
    requests_mock.delete(f"{BASE_URL}/v1/policies/p1", status_code=204)

    result = runner.invoke(app, ["policies", "delete", "p1", *AUTH_ARGS])

    assert result.exit_code == 0
    assert "Policy p1 deleted." in result.stdout


def test_account_settings_get_cli_with_basic_auth(requests_mock):
    matcher = requests_mock.get(
        f"{BASE_URL}/v1/account_settings/acct",
        json={"id": "acct", "zone_count_limit": 500, "current_zone_count": 2},
    )

    result = runner.invoke(
        app,
        [
            "account-settings",
            "get",
            "acct",
            "--base-url",
            BASE_URL,
            "--auth",
            "basic",
            "--username",
            "admin",
            "--password",
            "secret",
        ],
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)["zone_count_limit"] == 500
    assert matcher.last_request.headers["Authorization"].startswith("Basic ")


def test_missing_token_is_rejected(requests_mock):
    result = runner.invoke(app, ["zones", "get", "z1", "--base-url", BASE_URL])

    assert result.exit_code != 0
    assert requests_mock.call_count == 0


def test_build_client_accepts_cert_path(monkeypatch, tmp_path):
    cert = tmp_path / "ca.pem"
    cert.write_text("dummy", encoding="utf-8")
    captured: dict[str, object] = {}

    class DummyClient:
        def __init__(self, **kwargs):
            captured.update(kwargs)

        def __enter__(self):  # pragma: no cover - helper
            return self

        def __exit__(self, exc_type, exc, tb):  # pragma: no cover - helper
            return False

    monkeypatch.setattr("nbac_admin.cli.NBACAdminClient", DummyClient)

    _build_client(
        base_url=BASE_URL,
        auth="bearer",
        username=None,
        password=None,
        token="tok",
        verify_ssl=True,
        cert_path=cert,
        timeout=30.0,
    )

    assert captured["verify_ssl"] == str(cert)


def test_build_client_rejects_cert_with_no_verify(tmp_path):
    cert = tmp_path / "ca.pem"
    cert.write_text("dummy", encoding="utf-8")

    with pytest.raises(typer.BadParameter):
        _build_client(
            base_url=BASE_URL,
            auth="basic",
            username="admin",
            password="secret",
            token=None,
            verify_ssl=False,
            cert_path=cert,
            timeout=30.0,
        )


def test_build_client_rejects_unknown_auth():
    with pytest.raises(typer.BadParameter):
        _build_client(
            base_url=BASE_URL,
            auth="saml",
            username=None,
            password=None,
            token=None,
            verify_ssl=True,
            cert_path=None,
            timeout=30.0,
        )


def test_empty_base_url_exits_cleanly(requests_mock):
    result = runner.invoke(app, ["zones", "get", "z1", "--base-url", "", "--token", "tok"])

    assert result.exit_code == 1
    assert "base_url cannot be empty" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert requests_mock.call_count == 0


def test_invalid_identifier_exits_cleanly(requests_mock):
    result = runner.invoke(app, ["policies", "get", "", *AUTH_ARGS])

    assert result.exit_code == 1
    assert "policy_id" in result.output
    assert requests_mock.call_count == 0


def test_list_commands_report_local_errors(requests_mock):
    for command in (["zones", "list"], ["policies", "list"]):
        result = runner.invoke(
            app, [*command, "--account-id", "acct", "--base-url", "", "--token", "tok"]
        )

        assert result.exit_code == 1
        assert "base_url cannot be empty" in result.output

    assert requests_mock.call_count == 0
