"""CLI commands for explorefs.

This package contains all subcommand implementations.
"""

from explorefs.cli.commands import config, devices, fs

__all__ = ["config", "devices", "fs"]
