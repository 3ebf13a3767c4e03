"""Schema describing important fields for CLI table rendering."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
ValueExtractor = Callable[[Row], Any]
ValueFormatter = Callable[[Any], str]
SortKey = Callable[[Row], Any]


@dataclass(frozen=True)
class Column:
    """Describe how to pull and format a column for Rich tables."""

    header: str
    keys: tuple[str, ...] = ()
    extractor: ValueExtractor | None = None
    formatter: ValueFormatter | None = None
    justify: str = "left"

    def render(self, row: Row) -> str:
        value: Any | None = None
        if self.keys:
            for key in self.keys:
                if key in row:
                    value = row.get(key)
                    if value is not None:
                        break
        if value is None and self.extractor:
            value = self.extractor(row)
        if value is None:
            return ""
        if self.formatter:
            formatted = self.formatter(value)
            return "" if formatted is None else str(formatted)
        return str(value)


@dataclass(frozen=True)
class TableView:
    """Describe a Rich table for a CLI command."""

    title: str
    columns: tuple[Column, ...]
    sort_key: SortKey | None = None


def _list_formatter(*, max_chars: int = 40, sep: str = ", ") -> ValueFormatter:
    def _formatter(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            s = sep.join(str(v) for v in value)
        else:
            s = str(value)
        return s if len(s) <= max_chars else s[: max_chars - 1] + "…"

    return _formatter


def _address_label(address: Any) -> str:
    if not isinstance(address, Mapping):
        return str(address)
    value = address.get("value")
    if isinstance(value, Mapping):
        value = value.get("service_name")
    return f"{address.get('type')}:{value}"


def _addresses_preview(row: Row) -> Any:
    preview = row.get("addresses_preview")
    if not isinstance(preview, list):
        return None
    return [_address_label(item) for item in preview]


def _attribute_pairs(conditions: Any) -> list[str]:
    pairs: list[str] = []
    if not isinstance(conditions, list):
        return pairs
    for condition in conditions:
        if not isinstance(condition, Mapping):
            continue
        for attribute in condition.get("attributes") or ():
            if isinstance(attribute, Mapping):
                operator = attribute.get("operator") or "="
                if operator != "=":
                    operator = f" {operator} "
                pairs.append(f"{attribute.get('name')}{operator}{attribute.get('value')}")
    return pairs


def _policy_environments(row: Row) -> Any:
    return _attribute_pairs(row.get("environments")) or None


def _policy_resources(row: Row) -> Any:
    return _attribute_pairs(row.get("resources")) or None


def _sort_name(row: Row) -> str:
    return str(row.get("name") or row.get("id") or "").lower()


CLI_TABLE_VIEWS: dict[str, TableView] = {
    "zones.list": TableView(
        title="Zones",
        columns=(
            Column("Name", keys=("name",)),
            Column("Zone ID", keys=("id",)),
            Column("Addresses", keys=("address_count",), justify="right"),
            Column("Excluded", keys=("excluded_count",), justify="right"),
            Column("Preview", extractor=_addresses_preview, formatter=_list_formatter()),
            Column("Description", keys=("description",)),
        ),
        sort_key=_sort_name,
    ),
    "policies.list": TableView(
        title="Policies",
        columns=(
            Column("Policy ID", keys=("id",)),
            Column("Description", keys=("description",)),
            Column("Environments", extractor=_policy_environments, formatter=_list_formatter()),
            Column("Resources", extractor=_policy_resources, formatter=_list_formatter()),
            Column("Modified", keys=("last_modified_at", "created_at")),
        ),
        sort_key=lambda row: str(row.get("id") or ""),
    ),
}
