"""Find files by extension and write them as a deletion manifest.

The manifest starts with a header encoding total size and file count,
followed by one absolute path per line. ManifestDeleter reads this
format back and skips the header lines.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from fstally.core.errors import ExportWriteError, InvalidExtensionError
from fstally.filesystem.models import FindResult
from fstally.filesystem.walker import SkipCounter, iter_files, require_directory

logger = logging.getLogger(__name__)

# Header shape consumed by ManifestDeleter: "size: <N.NN> KB,\rfiles: <n>\r\n---"
MANIFEST_HEADER_TEMPLATE = "size: {size_kb:.2f} KB,\rfiles: {count}\r\n---"


@dataclass(frozen=True, slots=True)
class FindOptions:
    """Options for the find command.

    Attributes:
        root: Directory to walk.
        extension: Extension to match, without the leading dot.
        output_path: Manifest destination. None prints to the console instead.
        follow_symlinks: Follow symbolic links during the walk.
        case_sensitive: Require the extension's case to match exactly.
    """

    root: Path
    extension: str
    output_path: Path | None = None
    follow_symlinks: bool = False
    case_sensitive: bool = True


def normalize_extension(extension: str) -> str:
    """Validate an extension argument and strip surrounding whitespace.

    Raises:
        InvalidExtensionError: If the extension is empty, starts with a
            dot, or contains a path separator.
    """
    ext = extension.strip()
    if not ext:
        raise InvalidExtensionError(extension)
    if ext.startswith("."):
        raise InvalidExtensionError(extension, "give the extension without a leading dot")
    if "/" in ext or "\\" in ext:
        raise InvalidExtensionError(extension, "extension cannot contain a path separator")
    return ext


def matches_extension(name: str, extension: str, case_sensitive: bool = True) -> bool:
    """Check whether a file name ends with ``.<extension>``."""
    suffix = f".{extension}"
    if case_sensitive:
        return name.endswith(suffix)
    return name.lower().endswith(suffix.lower())


def find_by_extension(options: FindOptions) -> FindResult:
    """Collect all files under options.root with the requested extension.

    Zero matches is a valid result with count 0 and size 0. Unreadable
    entries are skipped and counted in FindResult.skipped.

    Raises:
        PathNotFoundError: If the root does not exist.
        InvalidExtensionError: If the extension is malformed.
    """
    extension = normalize_extension(options.extension)
    root = require_directory(options.root)

    skipped = SkipCounter()
    paths: list[str] = []
    total_bytes = 0
    for entry in iter_files(root, follow_symlinks=options.follow_symlinks, on_error=skipped):
        if matches_extension(Path(entry.path).name, extension, options.case_sensitive):
            paths.append(entry.path)
            total_bytes += entry.size_bytes

    logger.debug("Found %d *.%s files under %s", len(paths), extension, root)
    return FindResult(
        root=str(root),
        extension=extension,
        paths=tuple(paths),
        total_bytes=total_bytes,
        skipped=skipped.count,
    )


def format_manifest_header(result: FindResult) -> str:
    """Render the manifest header for a find result."""
    return MANIFEST_HEADER_TEMPLATE.format(size_kb=result.total_kb, count=result.file_count)


def render_manifest(result: FindResult) -> str:
    """Render the full manifest text: header, then one path per line."""
    lines = [format_manifest_header(result), *result.paths]
    return "".join(f"{line}\n" for line in lines)


def write_manifest(result: FindResult, output_path: Path) -> Path:
    """Write the manifest for a find result, replacing any existing file.

    Line endings are written exactly as rendered, without platform
    newline translation. Paths that are not valid UTF-8 are written back
    as their original bytes, so the delete command can read them again.

    Returns:
        Absolute path of the written file.

    Raises:
        ExportWriteError: If the file cannot be created or written.
    """
    output_path = output_path.expanduser().absolute()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(
            output_path, "w", newline="", encoding="utf-8", errors="surrogateescape"
        ) as f:
            f.write(render_manifest(result))
    except OSError as e:
        raise ExportWriteError(output_path, e) from e

    logger.info("Wrote manifest with %d paths to %s", result.file_count, output_path)
    return output_path
