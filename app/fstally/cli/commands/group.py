"""Group command implementation.

Breaks the size of a directory down by file extension.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from fstally.cli.types import fail, get_config, resolve_flag, warn_skipped
from fstally.core.errors import ExportWriteError, FstallyError
from fstally.filesystem.grouping import (
    GroupOptions,
    export_groups_csv,
    format_mb,
    group_by_extension,
)
from fstally.filesystem.models import ExtensionGroup
from fstally.filesystem.walker import SkipCounter
from fstally.utils.formatting import (
    console,
    create_group_table,
    print_error,
    print_info,
    print_success,
    printable,
)


def group(
    ctx: typer.Context,
    root: Annotated[Path, typer.Argument(help="Directory to analyze.")],
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export the groups to a CSV file instead of printing them.",
        ),
    ] = None,
    follow_symlinks: Annotated[
        bool | None,
        typer.Option(
            "--follow-symlinks/--no-follow-symlinks",
            help="Follow symbolic links (default from config: off).",
        ),
    ] = None,
    ignore_case: Annotated[
        bool | None,
        typer.Option(
            "--ignore-case/--match-case",
            help="Group extensions case-insensitively (default from config: match case).",
        ),
    ] = None,
) -> None:
    """Show file count and total MB per extension, largest first.

    Examples:
        fstally group ~/Projects
        fstally group ~/Projects --export sizes.csv
        fstally group /mnt/share --ignore-case
    """
    config = get_config(ctx)
    case_sensitive = config.case_sensitive if ignore_case is None else not ignore_case
    options = GroupOptions(
        root=root,
        export_path=export_path,
        follow_symlinks=resolve_flag(follow_symlinks, config.follow_symlinks),
        case_sensitive=case_sensitive,
    )

    skipped = SkipCounter()
    try:
        groups = group_by_extension(options, on_error=skipped)
    except FstallyError as e:
        fail(e)

    if options.export_path is None:
        _print_groups(groups)
        warn_skipped(ctx, skipped.count)
        return

    try:
        written = export_groups_csv(groups, options.export_path)
    except ExportWriteError as e:
        print_error(str(e))
        print_info("Showing results on the console instead.")
        _print_groups(groups)
        warn_skipped(ctx, skipped.count)
        raise typer.Exit(code=1) from e

    print_success(f"Exported {len(groups)} extension groups to {written}")
    warn_skipped(ctx, skipped.count)


# === Private helper functions ===


def _print_groups(groups: list[ExtensionGroup]) -> None:
    """Display groups as a Rich table with a summary line."""
    if not groups:
        print_info("No files found.")
        return

    table = create_group_table()
    for g in groups:
        name = escape(printable(g.display_name))
        table.add_row(name, str(g.file_count), format_mb(g.total_size_bytes))
    console.print(table)

    total_files = sum(g.file_count for g in groups)
    total_bytes = sum(g.total_size_bytes for g in groups)
    console.print(
        f"\n[dim]{total_files} files in {len(groups)} groups ({format_mb(total_bytes)} total)[/dim]"
    )
