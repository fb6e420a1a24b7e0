"""Cross-platform Path, File and Directory abstraction."""

__version__ = "0.1.0"

# Export the public surface for callers and type hints
from crossfs.directory import Directory
from crossfs.exceptions import (
    DirectoryCreateFailed,
    DirectoryRemoveFailed,
    DirectoryUnavailable,
    FileCopyFailed,
    FileMoveFailed,
    FileReadFailed,
    FileRemoveFailed,
    FileSizeUnavailable,
    FileSystemError,
    FileWriteFailed,
)
from crossfs.files import File
from crossfs.path import Path
from crossfs.protocols import FileSystem
from crossfs.types import ErrorKind, FsResult

__all__ = [
    "__version__",
    "Directory",
    "DirectoryCreateFailed",
    "DirectoryRemoveFailed",
    "DirectoryUnavailable",
    "ErrorKind",
    "File",
    "FileCopyFailed",
    "FileMoveFailed",
    "FileReadFailed",
    "FileRemoveFailed",
    "FileSizeUnavailable",
    "FileSystem",
    "FileSystemError",
    "FileWriteFailed",
    "FsResult",
    "Path",
]
