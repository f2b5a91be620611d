"""cachetck/cli/providers.py

List the caching providers registered under the configured entry point group.
"""

from __future__ import annotations

import json

import typer

app = typer.Typer(
    name="providers",
    help="List caching providers discoverable through entry points.",
    no_args_is_help=True,
)


@app.command("ls")
def cmd_ls(
    group: str = typer.Option(None, "--group", "-g", help="Entry point group (default: configured group)."),
    json_out: bool = typer.Option(False, "--json", help="Output JSON instead of plain lines."),
) -> None:
    from importlib import metadata

    from cachetck.core.config import get_config

    group = group or get_config().provider_group
    entries = [
        {"name": ep.name, "target": ep.value}
        for ep in sorted(metadata.entry_points(group=group), key=lambda e: e.name)
    ]

    if json_out:
        typer.echo(json.dumps({"group": group, "providers": entries}, ensure_ascii=False, indent=2))
        return

    if not entries:
        typer.echo(f"No providers registered under '{group}'.")
        return
    for e in entries:
        typer.echo(f"{e['name']}\t{e['target']}")
