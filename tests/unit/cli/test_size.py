"""Unit tests for the size command."""

import os
from pathlib import Path
from unittest.mock import patch

from fstally.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

_real_stat = os.stat


class TestSizeCommand:
    """Tests for fstally size."""

    def test_reports_megabytes(self, tmp_path: Path) -> None:
        """The total is printed in MB with two decimals."""
        (tmp_path / "blob.bin").write_bytes(b"\0" * (3 * 1024 * 1024))

        result = runner.invoke(app, ["size", str(tmp_path)])

        assert result.exit_code == 0
        assert f"Total size of {tmp_path}: 3.00 MB" in result.stdout

    def test_empty_directory(self, empty_dir: Path) -> None:
        """An empty directory reports 0.00 MB."""
        result = runner.invoke(app, ["size", str(empty_dir)])

        assert result.exit_code == 0
        assert "0.00 MB" in result.stdout

    def test_missing_root(self) -> None:
        """A missing root exits 1 with a single error and no report."""
        result = runner.invoke(app, ["size", "/definitely/missing/path"])

        assert result.exit_code == 1
        assert "Directory not found: /definitely/missing/path" in result.output
        assert "Total size" not in result.output

    def test_skipped_entries_warned(self, sample_tree: Path) -> None:
        """Unreadable entries are summarized in a warning."""
        bad = str(sample_tree / "a.txt")

        def _stat(path: str, *args: object, **kwargs: object) -> os.stat_result:
            if str(path) == bad:
                raise PermissionError(13, "Permission denied", path)
            return _real_stat(path, *args, **kwargs)  # type: ignore[arg-type]

        with patch("fstally.filesystem.walker.os.stat", side_effect=_stat):
            result = runner.invoke(app, ["size", str(sample_tree)])

        assert result.exit_code == 0
        assert "1 unreadable entries skipped" in result.output

    def test_follow_symlinks_flag(self, tmp_path: Path) -> None:
        """--follow-symlinks counts linked files."""
        outside = tmp_path / "outside.bin"
        outside.write_bytes(b"\0" * (1024 * 1024))
        root = tmp_path / "root"
        root.mkdir()
        (root / "link.bin").symlink_to(outside)

        default = runner.invoke(app, ["size", str(root)])
        followed = runner.invoke(app, ["size", str(root), "--follow-symlinks"])

        assert "0.00 MB" in default.stdout
        assert "1.00 MB" in followed.stdout

    def test_follow_symlinks_from_config(self, tmp_path: Path) -> None:
        """The config file supplies the default for --follow-symlinks."""
        outside = tmp_path / "outside.bin"
        outside.write_bytes(b"\0" * (1024 * 1024))
        root = tmp_path / "root"
        root.mkdir()
        (root / "link.bin").symlink_to(outside)
        config = tmp_path / "config.toml"
        config.write_text("follow_symlinks = true\n")

        result = runner.invoke(app, ["--config", str(config), "size", str(root)])
        overridden = runner.invoke(
            app, ["--config", str(config), "size", str(root), "--no-follow-symlinks"]
        )

        assert "1.00 MB" in result.stdout
        assert "0.00 MB" in overridden.stdout
