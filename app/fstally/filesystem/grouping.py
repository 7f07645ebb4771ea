"""Group file sizes by extension.

Partitions every file below a root by its extension, sums count and
size per group, and exports the result as CSV when requested.
"""

import csv
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fstally.core.errors import ExportWriteError
from fstally.filesystem.models import ExtensionGroup, FileEntry, bytes_to_mb
from fstally.filesystem.walker import EnumerationErrorHandler, iter_files, require_directory

logger = logging.getLogger(__name__)

CSV_HEADER: tuple[str, str, str] = ("Name", "FileCount", "TotalSizeMB")


@dataclass(frozen=True, slots=True)
class GroupOptions:
    """Options for the group command.

    Attributes:
        root: Directory to walk.
        export_path: CSV destination. None renders to the console instead.
        follow_symlinks: Follow symbolic links during the walk.
        case_sensitive: Treat ``.TXT`` and ``.txt`` as different groups.
    """

    root: Path
    export_path: Path | None = None
    follow_symlinks: bool = False
    case_sensitive: bool = True


def extension_key(path: str, case_sensitive: bool = True) -> str:
    """Return the grouping key for a file path.

    Uses os.path.splitext, so dotfiles such as ``.bashrc`` have no
    extension and land in the empty-string group.
    """
    ext = os.path.splitext(os.path.basename(path))[1]
    return ext if case_sensitive else ext.lower()


def build_groups(
    entries: Iterable[FileEntry],
    case_sensitive: bool = True,
) -> list[ExtensionGroup]:
    """Aggregate file entries into sorted extension groups."""
    counts: dict[str, int] = {}
    sizes: dict[str, int] = {}
    for entry in entries:
        key = extension_key(entry.path, case_sensitive)
        counts[key] = counts.get(key, 0) + 1
        sizes[key] = sizes.get(key, 0) + entry.size_bytes

    groups = [
        ExtensionGroup(extension=key, file_count=counts[key], total_size_bytes=sizes[key])
        for key in counts
    ]
    return sort_groups(groups)


def sort_groups(groups: Iterable[ExtensionGroup]) -> list[ExtensionGroup]:
    """Sort groups by total size descending, then extension ascending."""
    return sorted(groups, key=lambda g: (-g.total_size_bytes, g.extension))


def group_by_extension(
    options: GroupOptions,
    on_error: EnumerationErrorHandler | None = None,
) -> list[ExtensionGroup]:
    """Walk options.root and group its files by extension.

    Args:
        options: Walk and grouping options.
        on_error: Called once per entry that cannot be read. Defaults to
            debug logging.

    Raises:
        PathNotFoundError: If the root does not exist.
    """
    root = require_directory(options.root)
    entries = iter_files(root, follow_symlinks=options.follow_symlinks, on_error=on_error)
    groups = build_groups(entries, case_sensitive=options.case_sensitive)
    logger.debug("Found %d extension groups under %s", len(groups), root)
    return groups


def format_mb(size_bytes: int) -> str:
    """Format a byte count as the ``"<N.NN> MB"`` string used in exports."""
    return f"{bytes_to_mb(size_bytes):.2f} MB"


def export_groups_csv(groups: list[ExtensionGroup], export_path: Path) -> Path:
    """Write groups to a CSV file, replacing any existing file.

    The header row is unquoted; in data rows the string fields are
    quoted and the file count is left bare. Extensions that are not
    valid UTF-8 are written back as their original bytes.

    Args:
        groups: Groups in display order.
        export_path: Destination file. Missing parent directories are created.

    Returns:
        Absolute path of the written file.

    Raises:
        ExportWriteError: If the file cannot be created or written.
    """
    export_path = export_path.expanduser().absolute()
    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        with open(
            export_path, "w", newline="", encoding="utf-8", errors="surrogateescape"
        ) as f:
            csv.writer(f).writerow(CSV_HEADER)
            rows = csv.writer(f, quoting=csv.QUOTE_NONNUMERIC)
            for group in groups:
                rows.writerow(
                    [group.extension, group.file_count, format_mb(group.total_size_bytes)]
                )
    except OSError as e:
        raise ExportWriteError(export_path, e) from e

    logger.info("Exported %d groups to %s", len(groups), export_path)
    return export_path
