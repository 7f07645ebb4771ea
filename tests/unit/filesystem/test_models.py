"""Tests for filesystem domain models."""

import pytest
from fstally.filesystem.models import (
    BYTES_PER_KB,
    BYTES_PER_MB,
    DeletionResult,
    ExtensionGroup,
    FileEntry,
    FindResult,
    PathStyle,
    SizeReport,
    bytes_to_kb,
    bytes_to_mb,
)


class TestUnits:
    """Tests for binary unit conversion."""

    def test_binary_units(self) -> None:
        """KB and MB are powers of 1024."""
        assert BYTES_PER_KB == 1024
        assert BYTES_PER_MB == 1_048_576

    def test_conversions_are_unrounded(self) -> None:
        """Conversions keep full precision."""
        assert bytes_to_kb(1536) == 1.5
        assert bytes_to_mb(1) == 1 / 1_048_576


class TestFileEntry:
    """Tests for FileEntry."""

    def test_valid_entry(self) -> None:
        """Entry keeps path and size."""
        entry = FileEntry(path="/tmp/a.txt", size_bytes=10)
        assert entry.path == "/tmp/a.txt"
        assert entry.size_bytes == 10

    def test_empty_path_rejected(self) -> None:
        """Empty path raises ValueError."""
        with pytest.raises(ValueError, match="Path cannot be empty"):
            FileEntry(path="", size_bytes=0)

    def test_negative_size_rejected(self) -> None:
        """Negative size raises ValueError."""
        with pytest.raises(ValueError, match="negative"):
            FileEntry(path="/tmp/a.txt", size_bytes=-1)

    def test_immutable(self) -> None:
        """FileEntry is frozen."""
        entry = FileEntry(path="/tmp/a.txt", size_bytes=10)
        with pytest.raises(AttributeError):
            entry.size_bytes = 20  # type: ignore[misc]


class TestExtensionGroup:
    """Tests for ExtensionGroup."""

    def test_display_name_for_no_extension(self) -> None:
        """Files without extension display as (none)."""
        group = ExtensionGroup(extension="", file_count=1, total_size_bytes=5)
        assert group.display_name == "(none)"

    def test_display_name_keeps_extension(self) -> None:
        """Regular extensions display unchanged."""
        group = ExtensionGroup(extension=".txt", file_count=1, total_size_bytes=5)
        assert group.display_name == ".txt"

    def test_total_size_mb(self) -> None:
        """total_size_mb converts with the binary divisor."""
        group = ExtensionGroup(extension=".iso", file_count=1, total_size_bytes=3 * BYTES_PER_MB)
        assert group.total_size_mb == 3.0

    def test_negative_count_rejected(self) -> None:
        """Negative file count raises ValueError."""
        with pytest.raises(ValueError):
            ExtensionGroup(extension=".txt", file_count=-1, total_size_bytes=0)


class TestSizeReport:
    """Tests for SizeReport."""

    def test_total_mb_rounded(self) -> None:
        """total_mb rounds to two decimals."""
        report = SizeReport(root="/tmp", total_bytes=1_500_000, file_count=1)
        assert report.total_mb == 1.43

    def test_zero(self) -> None:
        """An empty report is zero MB."""
        report = SizeReport(root="/tmp", total_bytes=0, file_count=0)
        assert report.total_mb == 0.0
        assert report.skipped == 0


class TestFindResult:
    """Tests for FindResult."""

    def test_defaults_are_empty(self) -> None:
        """A result without paths has count 0 and size 0."""
        result = FindResult(root="/tmp", extension="log")
        assert result.file_count == 0
        assert result.total_kb == 0.0

    def test_total_kb_rounded(self) -> None:
        """total_kb rounds to two decimals."""
        result = FindResult(root="/tmp", extension="log", paths=("/tmp/a.log",), total_bytes=500)
        assert result.file_count == 1
        assert result.total_kb == 0.49


class TestDeletionResult:
    """Tests for DeletionResult."""

    def test_failed_property(self) -> None:
        """failed mirrors success."""
        ok = DeletionResult(line_number=1, path="/tmp/a", success=True)
        bad = DeletionResult(line_number=2, path="/tmp/b", success=False, error="gone")
        assert not ok.failed
        assert bad.failed
        assert bad.error == "gone"


class TestPathStyle:
    """Tests for PathStyle enum."""

    def test_values(self) -> None:
        """Enum values match the config strings."""
        assert PathStyle("any") is PathStyle.ANY
        assert PathStyle("drive") is PathStyle.DRIVE
        assert PathStyle("posix") is PathStyle.POSIX
