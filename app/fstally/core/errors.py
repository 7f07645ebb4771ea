"""Error types for fstally operations.

Fatal errors (missing paths, invalid extensions, failed exports) abort an
operation and are reported once by the CLI. Entry-level errors describe a
single file or directory that failed during a batch; callers log them and
continue with the remaining entries.
"""

from pathlib import Path


class FstallyError(Exception):
    """Base exception for all fstally errors."""


class PathNotFoundError(FstallyError):
    """Raised when a root directory or manifest file does not exist."""

    def __init__(self, path: Path | str, kind: str = "Path") -> None:
        self.path = str(path)
        super().__init__(f"{kind} not found: {self.path}")


class InvalidExtensionError(FstallyError):
    """Raised when an extension argument is empty or malformed."""

    def __init__(self, extension: str, reason: str = "extension cannot be empty") -> None:
        self.extension = extension
        super().__init__(f"Invalid extension {extension!r}: {reason}")


class ExportWriteError(FstallyError):
    """Raised when an export or manifest file cannot be written."""

    def __init__(self, path: Path | str, cause: OSError) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Failed to write {self.path}: {cause.strerror or cause}")


class EntryEnumerationError(FstallyError):
    """A single entry could not be read during a directory walk.

    Never raised out of a walk; handed to the walk's error callback.
    """

    def __init__(self, path: Path | str, cause: OSError) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Cannot read {self.path}: {cause.strerror or cause}")


class EntryDeletionError(FstallyError):
    """A single manifest entry could not be deleted."""

    def __init__(self, path: str, cause: OSError | str, line_number: int | None = None) -> None:
        self.path = path
        self.cause = cause
        self.line_number = line_number
        reason = (cause.strerror or str(cause)) if isinstance(cause, OSError) else cause
        self.reason = reason
        prefix = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{prefix}{path}: {reason}")


class ConfigError(FstallyError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when a config file cannot be parsed."""
