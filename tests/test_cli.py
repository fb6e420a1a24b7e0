"""Tests for CLI commands using context injection.

Commands accept a _context parameter for dependency injection, so most
tests call them directly with a context wired to a real temp directory.
"""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import typer
from rich.logging import RichHandler
from typer.testing import CliRunner

from crossfs import __version__, cli
from crossfs.context import FsContext
from crossfs.filesystem import RealFileSystem
from crossfs.platforms import PosixPlatform

runner = CliRunner()


@pytest.fixture
def context() -> FsContext:
    """Create a context over the real filesystem with POSIX rules."""
    return FsContext(platform=PosixPlatform(), filesystem=RealFileSystem())


@pytest.fixture
def mock_context(mock_filesystem: MagicMock) -> FsContext:
    """Create a context over a mock filesystem."""
    return FsContext(platform=PosixPlatform(), filesystem=mock_filesystem)


class TestInfoCommand:
    """Tests for the info command."""

    def test_info(self, mock_context: FsContext, capsys: pytest.CaptureFixture[str]) -> None:
        """Test locations are printed."""
        mock_context.filesystem.getcwd.return_value = "/work"
        mock_context.filesystem.getenv.side_effect = {"HOME": "/home/me"}.get

        cli.info(_context=mock_context)

        out = capsys.readouterr().out
        assert "/work" in out
        assert "/home/me" in out
        assert "/tmp" in out

    def test_info_home_unavailable(
        self, mock_context: FsContext, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a failed lookup exits with status 1."""
        mock_context.filesystem.getcwd.return_value = "/work"

        with pytest.raises(typer.Exit) as exc_info:
            cli.info(_context=mock_context)

        assert exc_info.value.exit_code == 1
        assert "DirectoryUnavailable" in capsys.readouterr().out


class TestReadCommands:
    """Tests for ls, cat and size."""

    def test_ls(
        self, context: FsContext, sample_tree: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test immediate entries are listed."""
        cli.list_directory(str(sample_tree), recursive=False, _context=context)

        out = capsys.readouterr().out
        assert "a.txt" in out
        assert "sub" in out
        assert "c.txt" not in out

    def test_ls_recursive(
        self, context: FsContext, sample_tree: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test nested entries are listed relative to the root."""
        cli.list_directory(str(sample_tree), recursive=True, _context=context)

        out = capsys.readouterr().out
        assert "sub/c.txt" in out
        assert "Directory" in out

    def test_ls_missing(
        self, context: FsContext, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a missing directory lists as empty without failing."""
        cli.list_directory(str(tmp_path / "missing"), recursive=False, _context=context)
        assert "No entries" in capsys.readouterr().out

    def test_cat(
        self, context: FsContext, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test file text is printed verbatim."""
        (tmp_path / "f.txt").write_text("[bold]not markup[/bold]\n")

        cli.cat(str(tmp_path / "f.txt"), _context=context)

        assert capsys.readouterr().out == "[bold]not markup[/bold]\n"

    def test_cat_missing(self, context: FsContext, tmp_path: Path) -> None:
        """Test a missing file exits with status 1."""
        with pytest.raises(typer.Exit) as exc_info:
            cli.cat(str(tmp_path / "missing"), _context=context)
        assert exc_info.value.exit_code == 1

    def test_size(
        self, context: FsContext, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test size prints the byte count."""
        (tmp_path / "f.bin").write_bytes(b"12345")

        cli.size(str(tmp_path / "f.bin"), _context=context)

        assert capsys.readouterr().out.strip() == "5"


class TestMutatingCommands:
    """Tests for mkdir, rm, cp and mv."""

    def test_mkdir_twice(self, context: FsContext, tmp_path: Path) -> None:
        """Test mkdir is idempotent."""
        cli.make_directory(str(tmp_path / "d"), parents=False, _context=context)
        cli.make_directory(str(tmp_path / "d"), parents=False, _context=context)
        assert (tmp_path / "d").is_dir()

    def test_mkdir_parents(self, context: FsContext, tmp_path: Path) -> None:
        """Test --parents creates ancestors."""
        cli.make_directory(str(tmp_path / "a" / "b"), parents=True, _context=context)
        assert (tmp_path / "a" / "b").is_dir()

    def test_mkdir_missing_parent(self, context: FsContext, tmp_path: Path) -> None:
        """Test a missing parent fails without --parents."""
        with pytest.raises(typer.Exit):
            cli.make_directory(str(tmp_path / "a" / "b"), parents=False, _context=context)

    def test_rm_file(self, context: FsContext, tmp_path: Path) -> None:
        """Test removing a file."""
        (tmp_path / "f.txt").touch()
        cli.remove(str(tmp_path / "f.txt"), recursive=False, _context=context)
        assert not (tmp_path / "f.txt").exists()

    def test_rm_directory_recursive(self, context: FsContext, nested_tree: Path) -> None:
        """Test removing a tree."""
        cli.remove(str(nested_tree), recursive=True, _context=context)
        assert not nested_tree.exists()

    def test_rm_non_empty_directory(
        self, context: FsContext, sample_tree: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a non-empty directory needs --recursive."""
        with pytest.raises(typer.Exit):
            cli.remove(str(sample_tree), recursive=False, _context=context)
        assert "DirectoryRemoveFailed" in capsys.readouterr().out
        assert sample_tree.exists()

    def test_cp(self, context: FsContext, tmp_path: Path) -> None:
        """Test copying a file."""
        (tmp_path / "src.txt").write_text("payload")
        cli.copy(str(tmp_path / "src.txt"), str(tmp_path / "dst.txt"), _context=context)
        assert (tmp_path / "src.txt").exists()
        assert (tmp_path / "dst.txt").read_text() == "payload"

    def test_mv(self, context: FsContext, tmp_path: Path) -> None:
        """Test moving a file."""
        (tmp_path / "src.txt").write_text("payload")
        cli.move(str(tmp_path / "src.txt"), str(tmp_path / "dst.txt"), _context=context)
        assert not (tmp_path / "src.txt").exists()
        assert (tmp_path / "dst.txt").read_text() == "payload"

    def test_mv_failure(self, mock_context: FsContext) -> None:
        """Test a failed move exits with status 1."""
        mock_context.filesystem.rename.side_effect = PermissionError(errno.EACCES, "denied")
        with pytest.raises(typer.Exit):
            cli.move("/a", "/b", _context=mock_context)
        mock_context.filesystem.copy_file.assert_not_called()


class TestDemoCommand:
    """Tests for the demo walk-through."""

    def test_demo_cleans_up(
        self,
        context: FsContext,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test the demo leaves nothing behind."""
        monkeypatch.setenv("TMPDIR", str(tmp_path))

        cli.demo(keep=False, _context=context)

        assert not (tmp_path / cli.DEMO_DIR_NAME).exists()

    def test_demo_keep(
        self, context: FsContext, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test --keep leaves the tree for inspection."""
        monkeypatch.setenv("TMPDIR", str(tmp_path))

        cli.demo(keep=True, _context=context)

        root = tmp_path / cli.DEMO_DIR_NAME
        assert (root / "test1.txt").read_text() == "Hello from crossfs!\nThis is a test file."
        assert (root / "test1-copy.txt").exists()
        assert not (root / "test2.txt").exists()
        assert (root / "subdir" / "moved.txt").exists()

    def test_demo_replaces_existing(
        self, context: FsContext, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a leftover demo directory is removed first."""
        monkeypatch.setenv("TMPDIR", str(tmp_path))
        leftover = tmp_path / cli.DEMO_DIR_NAME / "old"
        leftover.mkdir(parents=True)

        cli.demo(keep=True, _context=context)

        assert not leftover.exists()


class TestCliRunner:
    """Tests through the Typer application."""

    def test_version(self) -> None:
        """Test --version prints the version."""
        result = runner.invoke(cli.app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_ls(self, sample_tree: Path) -> None:
        """Test ls through the app."""
        result = runner.invoke(cli.app, ["ls", str(sample_tree)])
        assert result.exit_code == 0
        assert "a.txt" in result.output

    def test_cat_missing_exit_code(self, tmp_path: Path) -> None:
        """Test errors map to exit status 1."""
        result = runner.invoke(cli.app, ["cat", str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "FileReadFailed" in result.output

    def test_bad_config(self, tmp_path: Path) -> None:
        """Test a missing settings file exits with status 1."""
        result = runner.invoke(cli.app, ["--config", str(tmp_path / "nope.yaml"), "ls"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_foreign_platform_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test path rules that cannot drive the host filesystem exit with status 1."""
        foreign = "posix" if os.sep == "\\" else "windows"
        monkeypatch.setenv("CROSSFS_PLATFORM", foreign)
        result = runner.invoke(cli.app, ["ls"])
        assert result.exit_code == 1
        assert "cannot drive the real filesystem" in result.output

    def test_logging_uses_configured_level(self, sample_tree: Path) -> None:
        """Test commands route logs through Rich at the configured level."""
        result = runner.invoke(cli.app, ["ls", str(sample_tree)])
        assert result.exit_code == 0
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(handler, RichHandler) for handler in root.handlers)

    def test_verbose_logs_debug(self, sample_tree: Path) -> None:
        """Test --verbose lowers the level to DEBUG."""
        result = runner.invoke(cli.app, ["--verbose", "ls", str(sample_tree)])
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_injected_context_leaves_logging_alone(
        self, context: FsContext, sample_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test direct calls with a context do not configure logging."""
        configure = MagicMock()
        monkeypatch.setattr(cli, "configure_logging", configure)
        cli.list_directory(str(sample_tree), recursive=False, _context=context)
        configure.assert_not_called()
