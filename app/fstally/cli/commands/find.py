"""Find command implementation.

Lists the files with one extension, optionally writing them to a
manifest that the delete command can consume.
"""

from pathlib import Path
from typing import Annotated

import typer

from fstally.cli.types import fail, get_config, resolve_flag, warn_skipped
from fstally.core.errors import ExportWriteError, FstallyError
from fstally.filesystem.finder import (
    FindOptions,
    find_by_extension,
    format_manifest_header,
    write_manifest,
)
from fstally.filesystem.models import FindResult
from fstally.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    printable,
)


def find(
    ctx: typer.Context,
    root: Annotated[Path, typer.Argument(help="Directory to search.")],
    extension: Annotated[
        str,
        typer.Argument(help="Extension to match, without the dot (e.g. 'log')."),
    ],
    output_path: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the header and paths to this manifest file.",
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
            help="Match the extension case-insensitively (default from config: match case).",
        ),
    ] = None,
) -> None:
    """List files with an extension, with their total size in KB.

    Examples:
        fstally find ~/Downloads tmp
        fstally find ~/Downloads tmp --output tmp-files.txt
        fstally delete tmp-files.txt
    """
    config = get_config(ctx)
    case_sensitive = config.case_sensitive if ignore_case is None else not ignore_case
    options = FindOptions(
        root=root,
        extension=extension,
        output_path=output_path,
        follow_symlinks=resolve_flag(follow_symlinks, config.follow_symlinks),
        case_sensitive=case_sensitive,
    )

    try:
        result = find_by_extension(options)
    except FstallyError as e:
        fail(e)

    if options.output_path is None:
        _print_result(result)
        warn_skipped(ctx, result.skipped)
        return

    try:
        written = write_manifest(result, options.output_path)
    except ExportWriteError as e:
        print_error(str(e))
        print_info("Showing results on the console instead.")
        _print_result(result)
        warn_skipped(ctx, result.skipped)
        raise typer.Exit(code=1) from e

    print_success(f"Wrote {result.file_count} path(s) to {written}")
    warn_skipped(ctx, result.skipped)


# === Private helper functions ===


def _print_result(result: FindResult) -> None:
    """Print the manifest header and one path per line."""
    # Bare carriage returns would overwrite the line on a terminal
    header = format_manifest_header(result).replace("\r\n", "\n").replace("\r", "\n")
    console.print(header, markup=False, highlight=False, soft_wrap=True)
    for path in result.paths:
        console.print(printable(path), markup=False, highlight=False, soft_wrap=True)
