"""CLI package for explorefs.

This package contains the Typer application and all subcommands.
"""

from explorefs.cli.main import app

__all__ = ["app"]
