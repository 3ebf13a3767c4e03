"""Command-line interface for the NBAC admin API."""
from __future__ import annotations

import json
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import typer

try:  # pragma: no cover - exercised in runtime environments
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Rich for table rendering. Install the CLI extras via "
        "'pip install nbac-admin-client[cli]' to enable this command."
    ) from exc

from . import NBACAdminClient
from .auth import AuthStrategy, BasicAuth, BearerTokenAuth
from .config import DEFAULT_SERVICE_URL
from .cli_schema import CLI_TABLE_VIEWS, TableView
from .exceptions import NBACError, RequestError
from .models import (
    DeletePolicyOptions,
    DeleteZoneOptions,
    GetAccountSettingsOptions,
    GetPolicyOptions,
    GetZoneOptions,
    ListPoliciesOptions,
    ListZonesOptions,
)

app = typer.Typer(help="Network-based access control administration CLI.", no_args_is_help=True)

zones_app = typer.Typer(help="Zone operations.")
policies_app = typer.Typer(help="Policy operations.")
account_app = typer.Typer(help="Account settings operations.")
app.add_typer(zones_app, name="zones")
app.add_typer(policies_app, name="policies")
app.add_typer(account_app, name="account-settings")


def _build_client(
    base_url: str,
    auth: str,
    username: str | None,
    password: str | None,
    token: str | None,
    verify_ssl: bool,
    cert_path: Path | None,
    timeout: float,
) -> NBACAdminClient:
    auth = auth.lower()
    if auth not in {"bearer", "basic"}:
        raise typer.BadParameter("--auth must be either 'bearer' or 'basic'.")

    strategy: AuthStrategy
    if auth == "bearer":
        if not token:
            raise typer.BadParameter("--token is required when --auth bearer is selected.")
        strategy = BearerTokenAuth(token=token)
    else:
        if not username or not password:
            raise typer.BadParameter("--username and --password are required for basic auth.")
        strategy = BasicAuth(username=username, password=password)

    verify_target: bool | str
    if cert_path:
        expanded_cert = cert_path.expanduser()
        if not expanded_cert.exists():
            raise typer.BadParameter("Certificate file not found for --cert option.")
        if not verify_ssl:
            raise typer.BadParameter("Cannot combine --cert with --no-verify.")
        verify_target = str(expanded_cert)
    else:
        verify_target = verify_ssl

    return NBACAdminClient(
        base_url=base_url,
        auth_strategy=strategy,
        verify_ssl=verify_target,
        timeout=timeout,
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


console = Console(force_terminal=False, color_system=None)


def _render_rich_table(view: TableView, rows: Sequence[Mapping[str, Any]]) -> None:
    table = Table(
        title=view.title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in view.columns:
        table.add_column(column.header, justify=column.justify)
    ordered_rows = list(rows)
    if view.sort_key:
        ordered_rows.sort(key=view.sort_key)
    for row in ordered_rows:
        table.add_row(*(column.render(row) for column in view.columns))
    console.print(table)


def _present_output(payload: Any, *, view_id: str | None, json_output: bool) -> None:
    if json_output or view_id is None:
        _echo_json(payload)
        return
    view = CLI_TABLE_VIEWS.get(view_id)
    if not view:
        _echo_json(payload)
        return
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        _echo_json(payload)
        return
    rows = [item for item in payload if isinstance(item, Mapping)]
    if not rows:
        _echo_json(payload)
        return
    _render_rich_table(view, rows)


def _handle_request_error(exc: RequestError) -> None:
    message = f"Request failed (status {exc.status_code}): {exc}"
    if exc.details:
        message += f"\nDetails: {exc.details}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _handle_local_error(exc: Exception) -> None:
    typer.secho(str(exc), err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    # Accept common truthy/falsey representations (1/0, true/false, yes/no).
    env_verify = os.getenv("NBAC_VERIFY_SSL")
    if env_verify is None:
        default_verify = True
    else:
        default_verify = env_verify.strip().lower() not in {"0", "false", "no", "off"}

    return {
        "base_url": typer.Option(
            DEFAULT_SERVICE_URL,
            "--base-url",
            envvar="NBAC_BASE_URL",
            help="NBAC admin API base URL.",
        ),
        "username": typer.Option(
            None,
            "--username",
            "-u",
            envvar="NBAC_USERNAME",
            help="Username for basic auth.",
        ),
        "password": typer.Option(
            None,
            "--password",
            "-p",
            envvar="NBAC_PASSWORD",
            help="Password for basic auth.",
            hide_input=True,
        ),
        "token": typer.Option(
            None,
            "--token",
            envvar="NBAC_TOKEN",
            help="Bearer access token when --auth=bearer.",
        ),
        "auth": typer.Option(
            "bearer",
            "--auth",
            "-a",
            envvar="NBAC_AUTH",
            case_sensitive=False,
            help="Authentication strategy to use (bearer or basic).",
        ),
        "verify_ssl": typer.Option(
            default_verify,
            "--verify/--no-verify",
            envvar="NBAC_VERIFY_SSL",
            help="Enable or disable TLS certificate verification.",
            show_default=True,
        ),
        "cert_path": typer.Option(
            None,
            "--cert",
            envvar="NBAC_CA_CERT",
            help="Path to a custom CA bundle for TLS verification.",
        ),
        "timeout": typer.Option(30.0, help="Request timeout (seconds).", show_default=True),
        "transaction_id": typer.Option(
            None,
            "--transaction-id",
            help="Correlation id sent as the Transaction-Id header.",
        ),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
    }


_SHARED_OPTIONS = _shared_options()


@zones_app.command("list")
def zones_list(
    account_id: str = typer.Option(..., "--account-id", help="Account that owns the zones."),
    name: str | None = typer.Option(None, "--name", help="Only zones with this name."),
    sort: str | None = typer.Option(None, "--sort", help="Sort field, e.g. name or -created_at."),
    base_url: str = _SHARED_OPTIONS["base_url"],
    username: str | None = _SHARED_OPTIONS["username"],
    password: str | None = _SHARED_OPTIONS["password"],
    token: str | None = _SHARED_OPTIONS["token"],
    auth: str = _SHARED_OPTIONS["auth"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    transaction_id: str | None = _SHARED_OPTIONS["transaction_id"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List the zones of an account."""

    try:
        options = ListZonesOptions(
            account_id=account_id, name=name, sort=sort, transaction_id=transaction_id
        )
        with _build_client(
            base_url=base_url,
            auth=auth,
            username=username,
            password=password,
            token=token,
            verify_ssl=verify_ssl,
            cert_path=cert_path,
            timeout=timeout,
        ) as client:
            page = client.list_zones(options).result
    except RequestError as exc:
        _handle_request_error(exc)
        return
    except NBACError as exc:
        _handle_local_error(exc)
        return

    zones = [zone.to_dict() for zone in page.zones or ()]
    _present_output(zones, view_id="zones.list", json_output=output_json)


@zones_app.command("get")
def zones_get(
    zone_id: str = typer.Argument(..., help="Zone identifier."),
    base_url: str = _SHARED_OPTIONS["base_url"],
    username: str | None = _SHARED_OPTIONS["username"],
    password: str | None = _SHARED_OPTIONS["password"],
    token: str | None = _SHARED_OPTIONS["token"],
    auth: str = _SHARED_OPTIONS["auth"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    transaction_id: str | None = _SHARED_OPTIONS["transaction_id"],
) -> None:
    """Show a zone, including the ETag needed to update it."""

    try:
        options = GetZoneOptions(zone_id=zone_id, transaction_id=transaction_id)
        with _build_client(
            base_url=base_url,
            auth=auth,
            username=username,
            password=password,
            token=token,
            verify_ssl=verify_ssl,
            cert_path=cert_path,
            timeout=timeout,
        ) as client:
            response = client.get_zone(options)
    except RequestError as exc:
        _handle_request_error(exc)
        return
    except NBACError as exc:
        _handle_local_error(exc)
        return

    payload = response.result.to_dict()
    if response.etag:
        payload["etag"] = response.etag
    _echo_json(payload)


@zones_app.command("delete")
def zones_delete(
    zone_id: str = typer.Argument(..., help="Zone identifier."),
    base_url: str = _SHARED_OPTIONS["base_url"],
    username: str | None = _SHARED_OPTIONS["username"],
    password: str | None = _SHARED_OPTIONS["password"],
    token: str | None = _SHARED_OPTIONS["token"],
    auth: str = _SHARED_OPTIONS["auth"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    transaction_id: str | None = _SHARED_OPTIONS["transaction_id"],
) -> None:
    """Delete a zone."""

    try:
        options = DeleteZoneOptions(zone_id=zone_id, transaction_id=transaction_id)
        with _build_client(
            base_url=base_url,
            auth=auth,
            username=username,
            password=password,
            token=token,
            verify_ssl=verify_ssl,
            cert_path=cert_path,
            timeout=timeout,
        ) as client:
            client.delete_zone(options)
    except RequestError as exc:
        _handle_request_error(exc)
        return
    except NBACError as exc:
        _handle_local_error(exc)
        return

    typer.secho(f"Zone {zone_id} deleted.", fg=typer.colors.GREEN)


@policies_app.command("list")
def policies_list(
    account_id: str = typer.Option(..., "--account-id", help="Account that owns the policies."),
    region: str | None = typer.Option(None, "--region", help="Filter by region."),
    resource: str | None = typer.Option(None, "--resource", help="Filter by resource."),
    resource_type: str | None = typer.Option(None, "--resource-type", help="Filter by resource type."),
    service_instance: str | None = typer.Option(
        None, "--service-instance", help="Filter by service instance."
    ),
    service_name: str | None = typer.Option(None, "--service-name", help="Filter by service name."),
    service_type: str | None = typer.Option(None, "--service-type", help="Filter by service type."),
    zone_id: str | None = typer.Option(None, "--zone-id", help="Only policies referencing this zone."),
    sort: str | None = typer.Option(None, "--sort", help="Sort field."),
    base_url: str = _SHARED_OPTIONS["base_url"],
    username: str | None = _SHARED_OPTIONS["username"],
    password: str | None = _SHARED_OPTIONS["password"],
    token: str | None = _SHARED_OPTIONS["token"],
    auth: str = _SHARED_OPTIONS["auth"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    transaction_id: str | None = _SHARED_OPTIONS["transaction_id"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List the policies of an account."""

    try:
        options = ListPoliciesOptions(
            account_id=account_id,
            region=region,
            resource=resource,
            resource_type=resource_type,
            service_instance=service_instance,
            service_name=service_name,
            service_type=service_type,
            zone_id=zone_id,
            sort=sort,
            transaction_id=transaction_id,
        )
        with _build_client(
            base_url=base_url,
            auth=auth,
            username=username,
            password=password,
            token=token,
            verify_ssl=verify_ssl,
            cert_path=cert_path,
            timeout=timeout,
        ) as client:
            page = client.list_policies(options).result
    except RequestError as exc:
        _handle_request_error(exc)
        return
    except NBACError as exc:
        _handle_local_error(exc)
        return

    policies = [policy.to_dict() for policy in page.policies or ()]
    _present_output(policies, view_id="policies.list", json_output=output_json)


@policies_app.command("get")
def policies_get(
    policy_id: str = typer.Argument(..., help="Policy identifier."),
    base_url: str = _SHARED_OPTIONS["base_url"],
    username: str | None = _SHARED_OPTIONS["username"],
    password: str | None = _SHARED_OPTIONS["password"],
    token: str | None = _SHARED_OPTIONS["token"],
    auth: str = _SHARED_OPTIONS["auth"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    transaction_id: str | None = _SHARED_OPTIONS["transaction_id"],
) -> None:
    """Show a policy, including the ETag needed to update it."""

    try:
        options = GetPolicyOptions(policy_id=policy_id, transaction_id=transaction_id)
        with _build_client(
            base_url=base_url,
            auth=auth,
            username=username,
            password=password,
            token=token,
            verify_ssl=verify_ssl,
            cert_path=cert_path,
            timeout=timeout,
        ) as client:
            response = client.get_policy(options)
    except RequestError as exc:
        _handle_request_error(exc)
        return
    except NBACError as exc:
        _handle_local_error(exc)
        return

    payload = response.result.to_dict()
    if response.etag:
        payload["etag"] = response.etag
    _echo_json(payload)


@policies_app.command("delete")
def policies_delete(
    policy_id: str = typer.Argument(..., help="Policy identifier."),
    base_url: str = _SHARED_OPTIONS["base_url"],
    username: str | None = _SHARED_OPTIONS["username"],
    password: str | None = _SHARED_OPTIONS["password"],
    token: str | None = _SHARED_OPTIONS["token"],
    auth: str = _SHARED_OPTIONS["auth"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    transaction_id: str | None = _SHARED_OPTIONS["transaction_id"],
) -> None:
    """Delete a policy."""

    try:
        options = DeletePolicyOptions(policy_id=policy_id, transaction_id=transaction_id)
        with _build_client(
            base_url=base_url,
            auth=auth,
            username=username,
            password=password,
            token=token,
            verify_ssl=verify_ssl,
            cert_path=cert_path,
            timeout=timeout,
        ) as client:
            client.delete_policy(options)
    except RequestError as exc:
        _handle_request_error(exc)
        return
    except NBACError as exc:
        _handle_local_error(exc)
        return

    typer.secho(f"Policy {policy_id} deleted.", fg=typer.colors.GREEN)


@account_app.command("get")
def account_settings_get(
    account_id: str = typer.Argument(..., help="Account identifier."),
    base_url: str = _SHARED_OPTIONS["base_url"],
    username: str | None = _SHARED_OPTIONS["username"],
    password: str | None = _SHARED_OPTIONS["password"],
    token: str | None = _SHARED_OPTIONS["token"],
    auth: str = _SHARED_OPTIONS["auth"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    cert_path: Path | None = _SHARED_OPTIONS["cert_path"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    transaction_id: str | None = _SHARED_OPTIONS["transaction_id"],
) -> None:
    """Display zone and policy limits and current usage for an account."""

    try:
        options = GetAccountSettingsOptions(account_id=account_id, transaction_id=transaction_id)
        with _build_client(
            base_url=base_url,
            auth=auth,
            username=username,
            password=password,
            token=token,
            verify_ssl=verify_ssl,
            cert_path=cert_path,
            timeout=timeout,
        ) as client:
            settings = client.get_account_settings(options).result
    except RequestError as exc:
        _handle_request_error(exc)
        return
    except NBACError as exc:
        _handle_local_error(exc)
        return

    _echo_json(settings.to_dict())
