"""Size command implementation.

Reports the total size of all files below a directory.
"""

from pathlib import Path
from typing import Annotated

import typer

from fstally.cli.types import fail, get_config, resolve_flag, warn_skipped
from fstally.core.errors import FstallyError
from fstally.filesystem.size import SizeOptions, compute_folder_size, format_size_report
from fstally.utils.formatting import console


def size(
    ctx: typer.Context,
    root: Annotated[Path, typer.Argument(help="Directory to measure.")],
    follow_symlinks: Annotated[
        bool | None,
        typer.Option(
            "--follow-symlinks/--no-follow-symlinks",
            help="Follow symbolic links (default from config: off).",
        ),
    ] = None,
) -> None:
    """Show the total size of a directory in MB.

    Examples:
        fstally size ~/Downloads
        fstally size /srv/data --follow-symlinks
    """
    config = get_config(ctx)
    options = SizeOptions(
        root=root,
        follow_symlinks=resolve_flag(follow_symlinks, config.follow_symlinks),
    )

    try:
        report = compute_folder_size(options)
    except FstallyError as e:
        fail(e)

    console.print(format_size_report(report), markup=False, highlight=False, soft_wrap=True)

    warn_skipped(ctx, report.skipped)
