"""Error taxonomy for filesystem operations.

Every OS failure reaches the caller as one of these exceptions. Each
carries the ``ErrorKind`` it represents and the path it concerns; the
originating ``OSError`` is chained as ``__cause__``.
"""

from __future__ import annotations

from crossfs.types import ErrorKind

__all__ = [
    "FileSystemError",
    "DirectoryUnavailable",
    "DirectoryCreateFailed",
    "DirectoryRemoveFailed",
    "FileReadFailed",
    "FileWriteFailed",
    "FileCopyFailed",
    "FileMoveFailed",
    "FileRemoveFailed",
    "FileSizeUnavailable",
    "error_for_kind",
]


class FileSystemError(Exception):
    """Base class for all crossfs errors."""

    kind: ErrorKind

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class DirectoryUnavailable(FileSystemError):
    """An OS or environment directory lookup yielded nothing."""

    kind = ErrorKind.DIRECTORY_UNAVAILABLE


class DirectoryCreateFailed(FileSystemError):
    """Directory could not be created."""

    kind = ErrorKind.DIRECTORY_CREATE_FAILED


class DirectoryRemoveFailed(FileSystemError):
    """Directory could not be removed."""

    kind = ErrorKind.DIRECTORY_REMOVE_FAILED


class FileReadFailed(FileSystemError):
    """File could not be read."""

    kind = ErrorKind.FILE_READ_FAILED


class FileWriteFailed(FileSystemError):
    """File could not be written."""

    kind = ErrorKind.FILE_WRITE_FAILED


class FileCopyFailed(FileSystemError):
    """File could not be copied."""

    kind = ErrorKind.FILE_COPY_FAILED


class FileMoveFailed(FileSystemError):
    """File could not be moved."""

    kind = ErrorKind.FILE_MOVE_FAILED


class FileRemoveFailed(FileSystemError):
    """File could not be removed."""

    kind = ErrorKind.FILE_REMOVE_FAILED


class FileSizeUnavailable(FileSystemError):
    """File size could not be queried."""

    kind = ErrorKind.FILE_SIZE_UNAVAILABLE


_BY_KIND: dict[ErrorKind, type[FileSystemError]] = {
    cls.kind: cls
    for cls in (
        DirectoryUnavailable,
        DirectoryCreateFailed,
        DirectoryRemoveFailed,
        FileReadFailed,
        FileWriteFailed,
        FileCopyFailed,
        FileMoveFailed,
        FileRemoveFailed,
        FileSizeUnavailable,
    )
}


def error_for_kind(kind: ErrorKind) -> type[FileSystemError]:
    """Get the exception class for an error kind.

    Args:
        kind: Error kind.

    Returns:
        The matching FileSystemError subclass.
    """
    return _BY_KIND[kind]
