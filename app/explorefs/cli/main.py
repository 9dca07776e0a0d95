"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from explorefs import __version__
from explorefs.cli.commands import config, devices, fs
from explorefs.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="explorefs",
    help="Browse and manage local and Android device files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"explorefs version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every adb command and file operation.",
        ),
    ] = False,
) -> None:
    """explorefs - one view over local disk and attached Android devices.

    Device paths look like [bold]adb://SERIAL/sdcard/DCIM[/bold];
    everything else is a local path.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


# Register commands
app.add_typer(fs.app, name="fs")
app.add_typer(devices.app, name="devices")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
