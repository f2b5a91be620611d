# cachetck/cli/main.py
from __future__ import annotations

import typer

from cachetck import __version__
from cachetck.cli.properties import app as properties_app
from cachetck.cli.providers import app as providers_app

app = typer.Typer(
    name="cachetck",
    add_completion=False,
    help="Inspect the caching compliance test environment (properties, providers).",
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"cachetck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """cachetck CLI main callback."""
    pass


app.add_typer(
    properties_app,
    name="properties",
    help="Show the compliance property map and which keys are already set.",
)

app.add_typer(
    providers_app,
    name="providers",
    help="List caching providers discoverable through entry points.",
)

if __name__ == "__main__":
    app()
