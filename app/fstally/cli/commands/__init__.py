"""CLI commands for fstally.

This package contains all subcommand implementations.
"""

from fstally.cli.commands import delete, find, group, size

__all__ = ["delete", "find", "group", "size"]
