"""Shared data types for crossfs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

__all__ = ["ErrorKind", "FsResult"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Kinds of filesystem failure surfaced to callers."""

    DIRECTORY_UNAVAILABLE = "DirectoryUnavailable"
    DIRECTORY_CREATE_FAILED = "DirectoryCreateFailed"
    DIRECTORY_REMOVE_FAILED = "DirectoryRemoveFailed"
    FILE_READ_FAILED = "FileReadFailed"
    FILE_WRITE_FAILED = "FileWriteFailed"
    FILE_COPY_FAILED = "FileCopyFailed"
    FILE_MOVE_FAILED = "FileMoveFailed"
    FILE_REMOVE_FAILED = "FileRemoveFailed"
    FILE_SIZE_UNAVAILABLE = "FileSizeUnavailable"


@dataclass
class FsResult(Generic[T]):
    """Result of a filesystem operation.

    Either a success carrying ``value`` or a failure tagged with the
    ``kind`` of error that occurred.

    Attributes:
        success: True if the operation succeeded.
        value: Return value of the operation (None on failure).
        kind: Error kind (None on success).
        error: Error message (None on success).
        path: Path the failure concerns, when known.
    """

    success: bool
    value: T | None = None
    kind: ErrorKind | None = None
    error: str | None = None
    path: str = ""

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.success and (self.kind is not None or self.error is not None):
            raise ValueError("success=True but an error is set")
        if not self.success and (self.kind is None or self.error is None):
            raise ValueError("success=False requires an error kind and message")
        if not self.success and self.value is not None:
            raise ValueError("success=False cannot carry a value")

    @classmethod
    def ok(cls, value: T | None = None) -> FsResult[T]:
        """Build a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, error: str, path: str = "") -> FsResult[T]:
        """Build a failed result."""
        return cls(success=False, kind=kind, error=error, path=path)

    @classmethod
    def capture(cls, func: Callable[..., T], *args: Any, **kwargs: Any) -> FsResult[T]:
        """Run an operation and convert taxonomy errors into a failed result.

        Only ``FileSystemError`` subclasses are captured; anything else
        propagates to the caller.

        Args:
            func: Operation to run, typically a bound handle method.
            *args: Positional arguments for ``func``.
            **kwargs: Keyword arguments for ``func``.

        Returns:
            FsResult holding the return value or the error kind.

        Example:
            >>> result = FsResult.capture(File("missing.txt").read_text)
            >>> result.kind
            <ErrorKind.FILE_READ_FAILED: 'FileReadFailed'>
        """
        from crossfs.exceptions import FileSystemError

        try:
            return cls.ok(func(*args, **kwargs))
        except FileSystemError as e:
            logger.exception("Operation failed with %s", e.kind.value)
            return cls.fail(e.kind, str(e), e.path)

    def unwrap(self) -> T | None:
        """Return the value or raise the matching taxonomy error."""
        if self.success:
            return self.value

        from crossfs.exceptions import error_for_kind

        if self.kind is None:
            raise ValueError("Failed result has no error kind")
        raise error_for_kind(self.kind)(self.error or "", self.path)
