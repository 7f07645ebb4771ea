"""Recursive file enumeration shared by all directory commands.

Walks a root directory depth-first, yielding one FileEntry per regular
file. Entries that cannot be read are reported to an error callback and
skipped; the walk itself never aborts because of a single entry.
"""

import logging
import os
import stat
from collections.abc import Callable, Iterator
from pathlib import Path

from fstally.core.errors import EntryEnumerationError, PathNotFoundError
from fstally.filesystem.models import FileEntry

logger = logging.getLogger(__name__)

EnumerationErrorHandler = Callable[[EntryEnumerationError], None]


def log_enumeration_error(error: EntryEnumerationError) -> None:
    """Default error handler: record the skipped entry at debug level."""
    logger.debug("Skipping unreadable entry: %s", error)


class SkipCounter:
    """Error handler that counts skipped entries and logs each one."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self, error: EntryEnumerationError) -> None:
        self.count += 1
        log_enumeration_error(error)


def require_directory(path: Path | str) -> Path:
    """Resolve a root path and make sure it is an existing directory.

    Args:
        path: Root path as given by the user.

    Returns:
        Absolute path to the directory.

    Raises:
        PathNotFoundError: If the path does not exist or is not a directory.
    """
    root = Path(path).expanduser()
    if not root.is_dir():
        raise PathNotFoundError(root, kind="Directory")
    return root.absolute()


def iter_files(
    root: Path,
    *,
    follow_symlinks: bool = False,
    on_error: EnumerationErrorHandler | None = None,
) -> Iterator[FileEntry]:
    """Yield every regular file below root.

    Directory and file names are visited in sorted order so repeated
    walks over an unchanged tree produce identical output. Symbolic
    links are skipped unless follow_symlinks is set; cycles are not
    detected.

    Args:
        root: Directory to walk. Callers validate it with require_directory.
        follow_symlinks: Descend into linked directories and count linked files.
        on_error: Called once per entry that cannot be read. Defaults to
            log_enumeration_error.

    Yields:
        FileEntry for each file, with an absolute path.
    """
    handler = on_error if on_error is not None else log_enumeration_error

    def _walk_error(exc: OSError) -> None:
        handler(EntryEnumerationError(exc.filename or root, exc))

    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_walk_error, followlinks=follow_symlinks
    ):
        dirnames.sort()
        for name in sorted(filenames):
            full_path = os.path.join(dirpath, name)
            try:
                if os.path.islink(full_path) and not follow_symlinks:
                    continue
                stat_result = os.stat(full_path, follow_symlinks=follow_symlinks)
            except OSError as e:
                handler(EntryEnumerationError(full_path, e))
                continue
            if not stat.S_ISREG(stat_result.st_mode):
                continue
            yield FileEntry(path=os.path.abspath(full_path), size_bytes=stat_result.st_size)
