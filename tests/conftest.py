"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path as StdPath
from unittest.mock import MagicMock

import pytest

from crossfs.platforms import PosixPlatform, WindowsPlatform


# ============================================================================
# Platform Fixtures
# ============================================================================


@pytest.fixture
def posix() -> PosixPlatform:
    """POSIX path rules."""
    return PosixPlatform()


@pytest.fixture
def windows() -> WindowsPlatform:
    """Windows path rules."""
    return WindowsPlatform()


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.is_file.return_value = False
    fs.list_names.return_value = []
    fs.getenv.return_value = None
    fs.user_home.return_value = None
    return fs


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def sample_tree(tmp_path: StdPath) -> StdPath:
    """Create a directory with 2 files and 1 subdirectory holding 1 file.

    Layout:
        root/
            a.txt
            b.txt
            sub/
                c.txt
    """
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "b.txt").write_text("b")
    (root / "sub" / "c.txt").write_text("c")
    return root


@pytest.fixture
def nested_tree(tmp_path: StdPath) -> StdPath:
    """Create a multi-level tree with a file at every level.

    Layout:
        nested/
            top.txt
            one/
                one.txt
                deep/
                    deep.txt
            two/
                two.txt
    """
    root = tmp_path / "nested"
    (root / "one" / "deep").mkdir(parents=True)
    (root / "two").mkdir()
    (root / "top.txt").write_text("top")
    (root / "one" / "one.txt").write_text("one")
    (root / "one" / "deep" / "deep.txt").write_text("deep")
    (root / "two" / "two.txt").write_text("two")
    return root
