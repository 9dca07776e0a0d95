"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from explorefs.core.config import ConfigError, load_config_or_default
from explorefs.core.explorer import FileExplorer
from explorefs.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for listing commands."""

    TABLE = "table"
    JSON = "json"


def get_explorer() -> FileExplorer:
    """Build a FileExplorer from the user's settings.

    Raises:
        typer.Exit: With code 1 if the settings file is invalid.
    """
    try:
        config = load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    return FileExplorer.from_config(config)
