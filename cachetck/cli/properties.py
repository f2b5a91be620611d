"""cachetck/cli/properties.py

Show the property map applied by ``cachetck.testing.setup`` and whether each
key is already present in the current environment (pre-set keys are never
overwritten).
"""

from __future__ import annotations

import json

import typer

app = typer.Typer(
    name="properties",
    help="Show the compliance property map for a provider type.",
    no_args_is_help=True,
)

def _console():
    """Return a rich Console if available, else None (lazy import)."""
    try:
        from rich.console import Console  # type: ignore

        return Console(stderr=False)
    except Exception:
        return None


def _validate_provider_type(value: str) -> str:
    from cachetck.constants.property_constants import provider_type_of

    try:
        return provider_type_of(value).value
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None


@app.command("show")
def cmd_show(
    provider_type: str = typer.Option(
        None, "--provider-type", "-t", help="server | client (default: configured default)."
    ),
    json_out: bool = typer.Option(False, "--json", help="Output JSON instead of a table."),
) -> None:
    from cachetck.constants.property_constants import jsr_properties
    from cachetck.core.config import get_config
    from cachetck.core.properties import SystemProperties

    ptype = _validate_provider_type(provider_type or get_config().default_provider_type)
    props = SystemProperties()
    rows = [
        {"key": key, "value": value, "current": props.get_property(key)}
        for key, value in jsr_properties(ptype).items()
    ]

    if json_out:
        typer.echo(json.dumps({"provider_type": ptype, "properties": rows}, ensure_ascii=False, indent=2))
        return

    con = _console()
    if con is None:
        for row in rows:
            status = "preset" if row["current"] is not None else "unset"
            typer.echo(f"{row['key']}\t{row['value']}\t{status}")
        return

    from rich import box
    from rich.table import Table

    table = Table(title=f"{ptype} properties", box=box.SIMPLE_HEAVY)
    table.add_column("Key", overflow="fold")
    table.add_column("Value", overflow="fold")
    table.add_column("Current", overflow="fold")
    for row in rows:
        current = row["current"]
        table.add_row(row["key"], row["value"], "[dim]unset[/dim]" if current is None else current)
    con.print(table)
