"""Utility modules for fstally.

This module exports commonly used utility functions.
"""

from fstally.utils.formatting import (
    console,
    create_group_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
    printable,
)

__all__ = [
    "console",
    "create_group_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "printable",
]
