"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path
from typing import NoReturn

import typer

from fstally.core.config import TallyConfig, load_config
from fstally.core.errors import ConfigError, FstallyError
from fstally.filesystem.models import PathStyle
from fstally.utils.formatting import print_error, print_warning


class PathStyleChoice(str, Enum):
    """Manifest path patterns selectable on the command line."""

    ANY = "any"
    DRIVE = "drive"
    POSIX = "posix"

    def to_path_style(self) -> PathStyle:
        """Convert to the domain PathStyle."""
        return PathStyle(self.value)


def get_config(ctx: typer.Context) -> TallyConfig:
    """Load the configuration selected by the global ``--config`` option.

    The result is cached on the context so each invocation reads the
    file at most once.

    Args:
        ctx: Typer context carrying the global options.

    Returns:
        Loaded TallyConfig (defaults when no config file exists).
    """
    obj = ctx.ensure_object(dict)
    config = obj.get("config")
    if isinstance(config, TallyConfig):
        return config

    config_path: Path | None = obj.get("config_path")
    try:
        config = load_config(config_path)
    except ConfigError as e:
        fail(e)

    obj["config"] = config
    return config


def resolve_flag(value: bool | None, default: bool) -> bool:
    """Use a command-line flag when given, otherwise the configured default."""
    return default if value is None else value


def warn_skipped(ctx: typer.Context, skipped: int) -> None:
    """Summarize entries the walk could not read, unless ``--quiet`` is set."""
    if skipped and not ctx.ensure_object(dict).get("quiet"):
        print_warning(f"{skipped} unreadable entries skipped (use --verbose for details)")


def fail(error: FstallyError) -> NoReturn:
    """Report a fatal error and exit with code 1."""
    print_error(str(error))
    raise typer.Exit(code=1) from error
