"""Settings commands."""

from typing import Annotated

import typer
from rich.markup import escape

from explorefs.bridge.discovery import find_bridge_binary
from explorefs.core.config import (
    ConfigError,
    ExplorerConfig,
    load_config_or_default,
    save_config,
)
from explorefs.core.paths import get_config_path
from explorefs.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command("show")
def show() -> None:
    """Show the effective settings and the adb binary in use."""
    path = get_config_path()
    try:
        config = load_config_or_default(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = escape(str(path)) if path.exists() else "defaults (no config file)"
    found = config.adb_path or find_bridge_binary()
    adb = escape(found) if found else "[error]not found[/]"

    console.print(f"[bold_header]Settings[/] [dim]({source})[/dim]")
    console.print(f"  adb:                  {adb}")
    console.print(f"  scheme:               {config.scheme}://")
    console.print(f"  repair_double_prefix: {config.repair_double_prefix}")
    console.print(f"  show_hidden:          {config.show_hidden}")
    console.print(f"  command_timeout:      {config.command_timeout}s")


@app.command("init")
def init(
    adb_path: Annotated[
        str | None,
        typer.Option("--adb-path", help="Path to adb (default: discover and store it)."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file, recording the adb location."""
    path = get_config_path()
    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    resolved = adb_path or find_bridge_binary()
    if resolved is None:
        print_info("adb not found; leaving adb_path unset (discovery runs at startup).")

    try:
        saved = save_config(ExplorerConfig(adb_path=resolved), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_success(f"Wrote {saved}")
