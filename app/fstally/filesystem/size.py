"""Aggregate folder size.

Sums the sizes of every file below a root directory and reports the
total in megabytes.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from fstally.filesystem.models import SizeReport
from fstally.filesystem.walker import SkipCounter, iter_files, require_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SizeOptions:
    """Options for the size command.

    Attributes:
        root: Directory to measure.
        follow_symlinks: Follow symbolic links during the walk.
    """

    root: Path
    follow_symlinks: bool = False


def compute_folder_size(options: SizeOptions) -> SizeReport:
    """Sum the sizes of all files under options.root.

    Unreadable entries are skipped and counted in SizeReport.skipped.

    Raises:
        PathNotFoundError: If the root does not exist.
    """
    root = require_directory(options.root)
    skipped = SkipCounter()
    total_bytes = 0
    file_count = 0
    for entry in iter_files(root, follow_symlinks=options.follow_symlinks, on_error=skipped):
        total_bytes += entry.size_bytes
        file_count += 1

    logger.debug("Summed %d files under %s (%d skipped)", file_count, root, skipped.count)
    return SizeReport(
        root=str(root),
        total_bytes=total_bytes,
        file_count=file_count,
        skipped=skipped.count,
    )


def format_size_report(report: SizeReport) -> str:
    """Render the one-line size report."""
    return f"Total size of {report.root}: {report.total_mb:.2f} MB"
