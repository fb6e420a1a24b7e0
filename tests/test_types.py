"""Tests for FsResult and the error taxonomy."""

from __future__ import annotations

from pathlib import Path as StdPath

import pytest

from crossfs.directory import Directory
from crossfs.exceptions import (
    DirectoryRemoveFailed,
    DirectoryUnavailable,
    FileReadFailed,
    FileSystemError,
    error_for_kind,
)
from crossfs.files import File
from crossfs.types import ErrorKind, FsResult


class TestFsResultInvariants:
    """Tests for FsResult validation."""

    def test_success(self) -> None:
        """Test a plain success."""
        result = FsResult.ok(3)
        assert result.success is True
        assert result.value == 3
        assert result.kind is None

    def test_failure(self) -> None:
        """Test a plain failure."""
        result: FsResult[int] = FsResult.fail(ErrorKind.FILE_READ_FAILED, "boom")
        assert result.success is False
        assert result.kind is ErrorKind.FILE_READ_FAILED

    def test_success_with_error_rejected(self) -> None:
        """Test success=True cannot carry an error."""
        with pytest.raises(ValueError, match="success=True"):
            FsResult(success=True, error="boom")

    def test_failure_without_kind_rejected(self) -> None:
        """Test success=False requires kind and message."""
        with pytest.raises(ValueError, match="success=False"):
            FsResult(success=False, error="boom")

    def test_failure_with_value_rejected(self) -> None:
        """Test success=False cannot carry a value."""
        with pytest.raises(ValueError, match="value"):
            FsResult(success=False, value=1, kind=ErrorKind.FILE_READ_FAILED, error="x")


class TestFsResultCapture:
    """Tests for FsResult.capture."""

    def test_capture_success(self, tmp_path: StdPath) -> None:
        """Test a successful read is wrapped."""
        (tmp_path / "f.txt").write_text("hi")

        result = FsResult.capture(File(str(tmp_path / "f.txt")).read_text)

        assert result == FsResult.ok("hi")

    def test_capture_failure(self, tmp_path: StdPath) -> None:
        """Test a taxonomy error becomes a tagged failure."""
        result = FsResult.capture(Directory(str(tmp_path / "missing")).remove, recursive=True)

        assert result.success is False
        assert result.kind is ErrorKind.DIRECTORY_REMOVE_FAILED
        assert result.error

    def test_capture_propagates_other_errors(self) -> None:
        """Test non-taxonomy exceptions are not captured."""

        def broken() -> None:
            raise KeyError("bug")

        with pytest.raises(KeyError):
            FsResult.capture(broken)

    def test_unwrap(self) -> None:
        """Test unwrap returns values and re-raises failures."""
        assert FsResult.ok(5).unwrap() == 5
        with pytest.raises(FileReadFailed, match="boom"):
            FsResult.fail(ErrorKind.FILE_READ_FAILED, "boom").unwrap()

    def test_capture_keeps_path(self, tmp_path: StdPath) -> None:
        """Test the failing path survives capture and unwrap."""
        missing = str(tmp_path / "missing")

        result = FsResult.capture(Directory(missing).remove)

        assert result.path == missing
        with pytest.raises(DirectoryRemoveFailed) as exc_info:
            result.unwrap()
        assert exc_info.value.path == missing

    def test_unwrap_without_kind(self) -> None:
        """Test a failure stripped of its kind is reported, not asserted."""
        result: FsResult[int] = FsResult.fail(ErrorKind.FILE_READ_FAILED, "boom", "/f")
        result.kind = None
        with pytest.raises(ValueError, match="no error kind"):
            result.unwrap()


class TestErrorTaxonomy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_every_kind_has_an_exception(self, kind: ErrorKind) -> None:
        """Test each kind maps to a FileSystemError subclass with that kind."""
        cls = error_for_kind(kind)
        assert issubclass(cls, FileSystemError)
        assert cls.kind is kind
        assert cls.__name__ == kind.value

    def test_path_is_kept(self) -> None:
        """Test the failing path travels with the error."""
        error = DirectoryUnavailable("no home", "/home/x")
        assert error.path == "/home/x"
        assert str(error) == "no home"
