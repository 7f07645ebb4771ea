"""CLI package for fstally.

This package contains the Typer application and all subcommands.
"""

from fstally.cli.main import app

__all__ = ["app"]
