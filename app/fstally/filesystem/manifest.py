"""Delete the files listed in a text manifest.

A manifest is plain text with one candidate path per line. Only lines
that look like absolute paths are treated as deletion targets; headers,
comments, and blank lines are skipped. Deletion is irreversible and has
no dry-run mode.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from fstally.core.errors import EntryDeletionError, PathNotFoundError
from fstally.filesystem.models import DeletionResult, PathStyle

logger = logging.getLogger(__name__)

# One uppercase drive letter, a colon, and a path separator: C:\ or C:/
DRIVE_PATH_PATTERN = re.compile(r"^[A-Z]:[\\/]")
# A single leading slash; "//" comment lines are rejected
POSIX_PATH_PATTERN = re.compile(r"^/(?!/)")

_PATTERNS: dict[PathStyle, tuple[re.Pattern[str], ...]] = {
    PathStyle.DRIVE: (DRIVE_PATH_PATTERN,),
    PathStyle.POSIX: (POSIX_PATH_PATTERN,),
    PathStyle.ANY: (DRIVE_PATH_PATTERN, POSIX_PATH_PATTERN),
}


def looks_like_absolute_path(line: str, style: PathStyle = PathStyle.ANY) -> bool:
    """Check whether a manifest line names an absolute path.

    Args:
        line: Manifest line without its line terminator.
        style: Which absolute-path pattern(s) to accept.

    Returns:
        True if the line matches one of the patterns for style.
    """
    return any(pattern.match(line) for pattern in _PATTERNS[style])


def iter_manifest_targets(
    manifest_path: Path,
    style: PathStyle = PathStyle.ANY,
) -> Iterator[tuple[int, str]]:
    """Yield (line_number, path) for each target line of a manifest.

    Lines are split with universal newlines, so a bare carriage return
    inside a header also starts a new line. Bytes that are not valid
    UTF-8 decode the same way os.fsdecode does, so such paths still name
    the file on disk.

    Raises:
        PathNotFoundError: If the manifest does not exist.
    """
    if not manifest_path.is_file():
        raise PathNotFoundError(manifest_path, kind="Manifest")

    with open(manifest_path, encoding="utf-8-sig", errors="surrogateescape") as f:
        for line_number, raw_line in enumerate(f, start=1):
            line = raw_line.rstrip("\n")
            if looks_like_absolute_path(line, style):
                yield line_number, line


class ManifestDeleter:
    """Deletes the files named in a manifest, one line at a time.

    A failure on one line is recorded in its DeletionResult; processing
    always continues with the next line. Callers report the outcome of
    each line, so this class only logs at debug level.

    Args:
        style: Which absolute-path pattern selects target lines.
    """

    def __init__(self, style: PathStyle = PathStyle.ANY) -> None:
        self._style = style

    def iter_delete(self, manifest_path: Path) -> Iterator[DeletionResult]:
        """Delete the files listed in manifest_path, yielding each outcome.

        Each result is yielded right after its deletion attempt, so
        callers can report progress while the manifest is processed.

        Raises:
            PathNotFoundError: If the manifest does not exist. Raised
                before any line is processed.
        """
        for line_number, path in iter_manifest_targets(manifest_path, self._style):
            try:
                self._delete_single(path, line_number)
            except EntryDeletionError as e:
                logger.debug("Deletion failed: %s", e)
                yield DeletionResult(
                    line_number=line_number,
                    path=path,
                    success=False,
                    error=e.reason,
                )
                continue

            logger.debug("Deleted %s", path)
            yield DeletionResult(line_number=line_number, path=path, success=True)

    def delete_manifest(self, manifest_path: Path) -> list[DeletionResult]:
        """Delete every file listed in manifest_path.

        Args:
            manifest_path: Manifest file to process.

        Returns:
            One DeletionResult per target line, in manifest order.

        Raises:
            PathNotFoundError: If the manifest does not exist.
        """
        return list(self.iter_delete(manifest_path))

    def _delete_single(self, path: str, line_number: int) -> None:
        """Delete one file.

        Raises:
            EntryDeletionError: If the path is a directory or unlink fails.
        """
        target = Path(path)
        if target.is_dir() and not target.is_symlink():
            raise EntryDeletionError(path, "Is a directory", line_number)

        try:
            target.unlink()
        except OSError as e:
            raise EntryDeletionError(path, e, line_number) from e
