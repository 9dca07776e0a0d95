"""Device and volume discovery commands."""

import json
from typing import Annotated

import typer
from rich.markup import escape

from explorefs.cli.types import OutputFormat, get_explorer
from explorefs.utils.formatting import (
    console,
    create_device_table,
    create_entry_table,
    format_entry_row,
    print_info,
    print_warning,
)

app = typer.Typer(
    help="Attached devices, filesystem roots and mounted volumes.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command("list")
def list_devices(
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """List Android devices attached over adb."""
    explorer = get_explorer()
    if not explorer.client.is_available():
        print_warning("adb not found. Set adb_path with 'explorefs config init --adb-path'.")

    devices = explorer.list_devices()

    if output_format == OutputFormat.JSON:
        data = [
            {"serial": d.serial, "name": d.name, "path": explorer.device_root(d)}
            for d in devices
        ]
        console.print_json(json.dumps(data))
        return

    if not devices:
        print_info("No devices attached.")
        return

    console.print(create_device_table(devices))
    for device in devices:
        root = escape(explorer.device_root(device))
        console.print(f"[dim]{escape(device.name)}: {root}[/dim]")


@app.command("roots")
def list_roots() -> None:
    """List filesystem roots and mounted removable volumes."""
    explorer = get_explorer()
    items = explorer.list_roots() + explorer.list_volumes()

    table = create_entry_table("Roots and Volumes")
    for item in items:
        table.add_row(*format_entry_row(item))
    console.print(table)
