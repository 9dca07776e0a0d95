"""Utility modules for explorefs.

This module exports commonly used utility functions.
"""

from explorefs.utils.formatting import (
    console,
    create_device_table,
    create_entry_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from explorefs.utils.shell import CommandResult, run_command

__all__ = [
    "CommandResult",
    "console",
    "create_device_table",
    "create_entry_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
