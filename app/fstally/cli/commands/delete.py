"""Delete command implementation.

Deletes every file listed in a manifest. There is no confirmation
prompt and no dry-run: deleted files are gone.
"""

from pathlib import Path
from typing import Annotated

import typer

from fstally.cli.types import PathStyleChoice, fail, get_config
from fstally.core.errors import FstallyError
from fstally.filesystem.manifest import ManifestDeleter
from fstally.filesystem.models import DeletionResult
from fstally.utils.formatting import (
    console,
    print_info,
    print_success,
    print_warning,
    printable,
)


def delete(
    ctx: typer.Context,
    manifest: Annotated[Path, typer.Argument(help="Manifest file listing paths to delete.")],
    style: Annotated[
        PathStyleChoice | None,
        typer.Option(
            "--style",
            "-s",
            help="Which absolute paths count as targets: any, drive, or posix.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Delete the files listed in a manifest, one line at a time.

    Only lines that look like absolute paths are used; headers,
    comments, and blank lines are skipped. A failed line is reported
    and the remaining lines are still processed.

    Examples:
        fstally delete tmp-files.txt
        fstally delete cleanup.txt --style drive
    """
    config = get_config(ctx)
    path_style = style.to_path_style() if style is not None else config.path_style
    deleter = ManifestDeleter(style=path_style)

    results: list[DeletionResult] = []
    try:
        for result in deleter.iter_delete(manifest):
            _print_line_status(result)
            results.append(result)
    except FstallyError as e:
        fail(e)

    _print_summary(results)

    # Exit with error if any deletion failed
    if any(r.failed for r in results):
        raise typer.Exit(code=1)


# === Private helper functions ===


def _print_line_status(result: DeletionResult) -> None:
    """Print the outcome of a single manifest line."""
    if result.success:
        console.print(
            f"Deleted: {printable(result.path)}", markup=False, highlight=False, soft_wrap=True
        )
    else:
        print_warning(f"line {result.line_number}: {printable(result.path)}: {result.error}")


def _print_summary(results: list[DeletionResult]) -> None:
    """Print totals for the whole manifest run."""
    if not results:
        print_info("No paths found in manifest.")
        return

    success_count = sum(1 for r in results if r.success)
    fail_count = len(results) - success_count

    if fail_count:
        print_warning(f"{success_count} deleted, {fail_count} failed")
    else:
        print_success(f"All {success_count} file(s) deleted.")
