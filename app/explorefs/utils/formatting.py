"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from explorefs.models.items import AndroidDevice, FileSystemItem

_THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "#f53263",
        "info": "#0ec1c8",
        "entry_dir": "bold #69B9A1",
        "entry_file": "#ffffff",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=_THEME, color_system=_detect_color_system())
err_console = Console(theme=_THEME, stderr=True, color_system=_detect_color_system())


def create_entry_table(title: str) -> Table:
    """Create a pre-configured table for displaying directory entries.

    Args:
        title: Table title, usually the listed path.

    Returns:
        Rich Table with type, name and path columns.
    """
    table = Table(
        title=escape(title),
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("", width=2, justify="center")
    table.add_column("Name", no_wrap=True)
    table.add_column("Path", style="muted", overflow="fold")
    return table


def format_entry_row(item: FileSystemItem) -> tuple[str, str, str]:
    """Format a listing entry as a table row.

    Args:
        item: The entry to format.

    Returns:
        Tuple of (icon, name, path) with Rich markup; name and path are escaped.
    """
    if item.is_directory:
        return ("[entry_dir]▸[/]", f"[entry_dir]{escape(item.name)}/[/]", escape(item.path))
    return ("[muted]·[/]", f"[entry_file]{escape(item.name)}[/]", escape(item.path))


def create_device_table(devices: list[AndroidDevice]) -> Table:
    """Build a table of attached devices.

    Args:
        devices: Devices reported by the bridge.

    Returns:
        Rich Table with serial and model columns.
    """
    table = Table(
        title="Attached Devices",
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Serial", no_wrap=True)
    table.add_column("Model", style="info")
    for device in devices:
        table.add_row(escape(device.serial), escape(device.name))
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
