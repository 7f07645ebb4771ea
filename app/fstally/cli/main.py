"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from fstally import __version__
from fstally.cli.commands import delete, find, group, size
from fstally.core.logging_config import setup_logging

# Create main Typer app
app = typer.Typer(
    name="fstally",
    help="Folder size, extension reports, and manifest-driven cleanup.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fstally version {__version__}")
        raise typer.Exit()


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
            help="Enable verbose output, including skipped entries.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file (default: ~/.config/fstally/config.toml).",
        ),
    ] = None,
) -> None:
    """fstally - Folder size and extension reporting.

    Measure directories, break their size down by file extension,
    list files of one type, and delete the files named in a manifest.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path

    setup_logging(verbose=verbose, quiet=quiet)


# Register commands
app.command(name="size")(size.size)
app.command(name="group")(group.group)
app.command(name="find")(find.find)
app.command(name="delete")(delete.delete)


if __name__ == "__main__":
    app()
