"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest

# name -> size in bytes, relative to the sample tree root
SAMPLE_FILES: dict[str, int] = {
    "a.txt": 100,
    "b.txt": 300,
    "c.log": 400,
    ".hidden": 25,
    "sub/d.py": 400,
    "sub/README": 50,
    "sub/deeper/e.txt": 100,
}


def make_file(path: Path, size: int) -> Path:
    """Create a file of exactly size bytes, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree with known file sizes.

    Totals per extension:
        .txt -> 3 files, 500 bytes
        .log -> 1 file, 400 bytes
        .py  -> 1 file, 400 bytes
        ""   -> 2 files, 75 bytes (README, .hidden)
    """
    root = tmp_path / "tree"
    root.mkdir()
    for name, size in SAMPLE_FILES.items():
        make_file(root / name, size)
    (root / "empty_dir").mkdir()
    return root


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Create an empty directory."""
    root = tmp_path / "empty"
    root.mkdir()
    return root
