from __future__ import annotations

import json
from typing import Any, Literal

import yaml
from rich.console import Console
from rich.table import Table

from jwoc.utils.serialization import to_plain_data

OutputFormat = Literal["json", "yaml", "table"]


def _flatten(value: Any, prefix: str = "") -> list[tuple[str, str]]:
    if isinstance(value, dict) and value:
        rows: list[tuple[str, str]] = []
        for key, item in value.items():
            rows.extend(_flatten(item, f"{prefix}{key}."))
        return rows
    return [(prefix.rstrip("."), "" if value is None else str(value))]


def emit(value: Any, *, output: OutputFormat = "json", console: Console | None = None) -> None:
    """Write CLI results to stdout as json, yaml, or a field/value table."""

    plain = to_plain_data(value)
    if output == "json":
        print(json.dumps(plain, indent=2))
        return
    if output == "yaml":
        print(yaml.safe_dump(plain, sort_keys=False), end="")
        return

    target = console or Console()
    if not isinstance(plain, dict):
        target.print(str(plain))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("field")
    table.add_column("value")
    for key, text in _flatten(plain):
        table.add_row(key, text)
    target.print(table)
