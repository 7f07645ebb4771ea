"""Filesystem reporting and cleanup module.

This module provides the recursive file walk and the four operations
built on it: folder size, size by extension, find by extension, and
manifest-driven deletion.
"""

from fstally.filesystem.finder import FindOptions, find_by_extension, write_manifest
from fstally.filesystem.grouping import GroupOptions, export_groups_csv, group_by_extension
from fstally.filesystem.manifest import ManifestDeleter, looks_like_absolute_path
from fstally.filesystem.models import (
    DeletionResult,
    ExtensionGroup,
    FileEntry,
    FindResult,
    PathStyle,
    SizeReport,
)
from fstally.filesystem.size import SizeOptions, compute_folder_size
from fstally.filesystem.walker import iter_files, require_directory

__all__ = [
    "DeletionResult",
    "ExtensionGroup",
    "FileEntry",
    "FindOptions",
    "FindResult",
    "GroupOptions",
    "ManifestDeleter",
    "PathStyle",
    "SizeOptions",
    "SizeReport",
    "compute_folder_size",
    "export_groups_csv",
    "find_by_extension",
    "group_by_extension",
    "iter_files",
    "looks_like_absolute_path",
    "require_directory",
    "write_manifest",
]
