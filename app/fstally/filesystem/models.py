"""Filesystem domain models for size and extension reporting.

This module defines the immutable records produced by directory walks
and the aggregates derived from them. None of them are persisted; each
operation builds its own fresh set.
"""

from dataclasses import dataclass, field
from enum import Enum

# Binary units: 1 KB = 1024 bytes, 1 MB = 1024 KB
BYTES_PER_KB = 1024
BYTES_PER_MB = 1024 * 1024

NO_EXTENSION_LABEL = "(none)"


def bytes_to_kb(size_bytes: int) -> float:
    """Convert a byte count to kilobytes (unrounded)."""
    return size_bytes / BYTES_PER_KB


def bytes_to_mb(size_bytes: int) -> float:
    """Convert a byte count to megabytes (unrounded)."""
    return size_bytes / BYTES_PER_MB


class PathStyle(str, Enum):
    """Absolute-path pattern used to pick deletion targets from a manifest.

    Attributes:
        DRIVE: Drive-root paths such as ``C:\\temp\\a.txt``.
        POSIX: Root-anchored POSIX paths such as ``/tmp/a.txt``.
        ANY: Either of the above.
    """

    DRIVE = "drive"
    POSIX = "posix"
    ANY = "any"


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A regular file discovered during a directory walk.

    Attributes:
        path: Absolute path to the file.
        size_bytes: File size in bytes.
    """

    path: str
    size_bytes: int

    def __post_init__(self) -> None:
        """Validate file entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size_bytes < 0:
            msg = f"Size cannot be negative, got {self.size_bytes}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ExtensionGroup:
    """Aggregated size and count for all files sharing one extension.

    Attributes:
        extension: Extension key including the leading dot (``".txt"``),
            or an empty string for files without an extension.
        file_count: Number of files in the group.
        total_size_bytes: Sum of the file sizes in the group.
    """

    extension: str
    file_count: int
    total_size_bytes: int

    def __post_init__(self) -> None:
        """Validate group data after initialization."""
        if self.file_count < 0:
            msg = f"File count cannot be negative, got {self.file_count}"
            raise ValueError(msg)
        if self.total_size_bytes < 0:
            msg = f"Size cannot be negative, got {self.total_size_bytes}"
            raise ValueError(msg)

    @property
    def display_name(self) -> str:
        """Extension as shown to users; files without one show as ``(none)``."""
        return self.extension or NO_EXTENSION_LABEL

    @property
    def total_size_mb(self) -> float:
        """Total size in megabytes, unrounded."""
        return bytes_to_mb(self.total_size_bytes)


@dataclass(frozen=True, slots=True)
class SizeReport:
    """Result of summing all file sizes under a root directory.

    Attributes:
        root: Absolute path of the walked directory.
        total_bytes: Sum of all file sizes.
        file_count: Number of files counted.
        skipped: Number of entries skipped because they could not be read.
    """

    root: str
    total_bytes: int
    file_count: int
    skipped: int = 0

    @property
    def total_mb(self) -> float:
        """Total size in megabytes rounded to 2 decimals."""
        return round(bytes_to_mb(self.total_bytes), 2)


@dataclass(frozen=True, slots=True)
class FindResult:
    """Files under a root that carry a given extension.

    Attributes:
        root: Absolute path of the walked directory.
        extension: Extension searched for, without the leading dot.
        paths: Absolute paths of the matching files, in walk order.
        total_bytes: Sum of the sizes of the matching files.
        skipped: Number of entries skipped because they could not be read.
    """

    root: str
    extension: str
    paths: tuple[str, ...] = field(default_factory=tuple)
    total_bytes: int = 0
    skipped: int = 0

    @property
    def file_count(self) -> int:
        """Number of matching files."""
        return len(self.paths)

    @property
    def total_kb(self) -> float:
        """Total size in kilobytes rounded to 2 decimals."""
        return round(bytes_to_kb(self.total_bytes), 2)


@dataclass(frozen=True, slots=True)
class DeletionResult:
    """Result of deleting a single manifest entry.

    Attributes:
        line_number: 1-based line of the manifest the path came from.
        path: Path taken from the manifest line.
        success: Whether the file was deleted.
        error: Reason for the failure, None on success.
    """

    line_number: int
    path: str
    success: bool
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the deletion failed."""
        return not self.success
