"""Unit tests for the find command."""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from fstally.cli.main import app
from fstally.core.errors import ExportWriteError
from typer.testing import CliRunner

runner = CliRunner()

_real_stat = os.stat


class TestFindCommand:
    """Tests for fstally find."""

    def test_console_output(self, sample_tree: Path) -> None:
        """Header lines then one path per line."""
        result = runner.invoke(app, ["find", str(sample_tree), "txt"])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[:3] == ["size: 0.49 KB,", "files: 3", "---"]
        assert str(sample_tree / "a.txt") in lines
        assert str(sample_tree / "sub" / "deeper" / "e.txt") in lines
        assert len(lines) == 6

    def test_zero_matches(self, sample_tree: Path) -> None:
        """No matches still prints a valid header."""
        result = runner.invoke(app, ["find", str(sample_tree), "mp4"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["size: 0.00 KB,", "files: 0", "---"]

    def test_output_file(self, sample_tree: Path, tmp_path: Path) -> None:
        """--output writes the manifest and confirms."""
        output = tmp_path / "logs.txt"

        result = runner.invoke(app, ["find", str(sample_tree), "log", "--output", str(output)])

        assert result.exit_code == 0
        assert "Wrote 1 path(s)" in result.stdout
        assert output.read_bytes() == (
            f"size: 0.39 KB,\rfiles: 1\r\n---\n{sample_tree / 'c.log'}\n".encode()
        )

    def test_invalid_extension(self, sample_tree: Path) -> None:
        """An empty extension exits 1."""
        result = runner.invoke(app, ["find", str(sample_tree), ""])

        assert result.exit_code == 1
        assert "Invalid extension" in result.output

    def test_leading_dot_rejected(self, sample_tree: Path) -> None:
        """Extensions are given without the dot."""
        result = runner.invoke(app, ["find", str(sample_tree), ".txt"])

        assert result.exit_code == 1
        assert "without a leading dot" in result.output

    def test_missing_root(self, tmp_path: Path) -> None:
        """A missing root exits 1 naming the path."""
        missing = tmp_path / "missing"

        result = runner.invoke(app, ["find", str(missing), "txt"])

        assert result.exit_code == 1
        assert f"Directory not found: {missing}" in result.output

    def test_write_failure_falls_back_to_console(self, sample_tree: Path, tmp_path: Path) -> None:
        """A failed manifest write is reported, paths still printed, exit 1."""
        output = tmp_path / "logs.txt"
        error = ExportWriteError(output, OSError(28, "No space left on device"))

        with patch("fstally.cli.commands.find.write_manifest", side_effect=error):
            result = runner.invoke(app, ["find", str(sample_tree), "log", "-o", str(output)])

        assert result.exit_code == 1
        assert "No space left on device" in result.output
        assert str(sample_tree / "c.log") in result.stdout

    def test_skipped_entries_warned(self, sample_tree: Path) -> None:
        """Unreadable entries are summarized in a warning, like size does."""
        bad = str(sample_tree / "a.txt")

        def _stat(path: str, *args: object, **kwargs: object) -> os.stat_result:
            if str(path) == bad:
                raise PermissionError(13, "Permission denied", path)
            return _real_stat(path, *args, **kwargs)  # type: ignore[arg-type]

        with patch("fstally.filesystem.walker.os.stat", side_effect=_stat):
            result = runner.invoke(app, ["find", str(sample_tree), "txt"])

        assert result.exit_code == 0
        assert "files: 2" in result.stdout
        assert "1 unreadable entries skipped" in result.output

    @pytest.mark.skipif(sys.platform != "linux", reason="needs filenames that are not valid UTF-8")
    def test_undecodable_file_name(self, tmp_path: Path) -> None:
        """Non-UTF-8 names are written raw to the manifest and shown with a replacement."""
        root = tmp_path / "tree"
        root.mkdir()
        (root / os.fsdecode(b"bad\xff.log")).write_bytes(b"\0" * 10)
        output = tmp_path / "logs.txt"

        written = runner.invoke(app, ["find", str(root), "log", "-o", str(output)])
        shown = runner.invoke(app, ["find", str(root), "log"])

        assert written.exit_code == 0
        assert "Wrote 1 path(s)" in written.stdout
        assert output.read_bytes().endswith(os.fsencode(root) + b"/bad\xff.log\n")
        assert shown.exit_code == 0
        assert "bad\ufffd.log" in shown.stdout
