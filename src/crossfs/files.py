"""File handle: single-entry operations resolved at call time."""

from __future__ import annotations

import errno
import logging

from crossfs.exceptions import (
    FileCopyFailed,
    FileMoveFailed,
    FileReadFailed,
    FileRemoveFailed,
    FileSizeUnavailable,
    FileWriteFailed,
)
from crossfs.filesystem import RealFileSystem
from crossfs.path import PathLike, as_path
from crossfs.protocols import FileSystem
from crossfs.traversal import remove_file

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class File:
    """Handle for a file at a path.

    The handle holds only the path; every method queries the OS afresh.
    """

    def __init__(
        self,
        path: PathLike,
        filesystem: FileSystem | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Initialize a file handle.

        Args:
            path: Location of the file.
            filesystem: Filesystem capability. Defaults to RealFileSystem.
            encoding: Default text encoding for read_text/write_text.
        """
        self.path = as_path(path)
        self.fs = filesystem or RealFileSystem()
        self.encoding = encoding

    def __repr__(self) -> str:
        return f"File({self.path.value!r})"

    def exists(self) -> bool:
        """Check that the path exists and is a regular file."""
        target = str(self.path)
        return self.fs.exists(target) and self.fs.is_file(target)

    def size(self) -> int:
        """Get the file size in bytes.

        Raises:
            FileSizeUnavailable: If the file cannot be stat'ed.
        """
        try:
            return self.fs.size(str(self.path))
        except OSError as e:
            raise FileSizeUnavailable(
                f"Could not get file size of {self.path}: {e}", str(self.path)
            ) from e

    def read_text(self, encoding: str | None = None) -> str:
        """Read the whole file as text.

        Raises:
            FileReadFailed: If the file cannot be opened or decoded.
        """
        try:
            return self.fs.read_text(str(self.path), encoding or self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadFailed(f"Could not read file {self.path}: {e}", str(self.path)) from e

    def read_binary(self) -> bytes:
        """Read the whole file as bytes.

        Raises:
            FileReadFailed: If the file cannot be opened.
        """
        try:
            return self.fs.read_bytes(str(self.path))
        except OSError as e:
            raise FileReadFailed(f"Could not read file {self.path}: {e}", str(self.path)) from e

    def write_text(self, content: str, encoding: str | None = None) -> None:
        """Replace the file's content with text.

        Raises:
            FileWriteFailed: If the file cannot be opened for writing.
        """
        try:
            self.fs.write_text(str(self.path), content, encoding or self.encoding)
        except (OSError, UnicodeEncodeError) as e:
            raise FileWriteFailed(
                f"Could not write to file {self.path}: {e}", str(self.path)
            ) from e

    def write_binary(self, content: bytes) -> None:
        """Replace the file's content with bytes.

        Raises:
            FileWriteFailed: If the file cannot be opened for writing.
        """
        try:
            self.fs.write_bytes(str(self.path), bytes(content))
        except OSError as e:
            raise FileWriteFailed(
                f"Could not write to file {self.path}: {e}", str(self.path)
            ) from e

    def copy(self, destination: PathLike) -> None:
        """Copy the file's bytes to ``destination``, overwriting it.

        Raises:
            FileCopyFailed: If either side cannot be opened.
        """
        dest = as_path(destination, self.path.platform)
        try:
            self.fs.copy_file(str(self.path), str(dest))
        except OSError as e:
            raise FileCopyFailed(
                f"Could not copy file {self.path} to {dest}: {e}", str(self.path)
            ) from e

    def move(self, destination: PathLike) -> None:
        """Move the file to ``destination``.

        Tries an atomic rename first. Only when the OS reports that the two
        paths are on different devices does it fall back to copying and then
        removing the source; the source is removed only after the copy has
        completed.

        Raises:
            FileMoveFailed: If the rename fails for any other reason, or if
                either step of the fallback fails.
        """
        dest = as_path(destination, self.path.platform)
        try:
            self.fs.rename(str(self.path), str(dest))
            return
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise FileMoveFailed(
                    f"Could not move file {self.path} to {dest}: {e}", str(self.path)
                ) from e

        logger.debug("Cross-device move of %s to %s, copying instead", self.path, dest)
        try:
            self.copy(dest)
            self.remove()
        except (FileCopyFailed, FileRemoveFailed) as e:
            raise FileMoveFailed(
                f"Could not move file {self.path} to {dest}: {e}", str(self.path)
            ) from e

    def remove(self) -> None:
        """Delete the file.

        Raises:
            FileRemoveFailed: If the OS refuses the removal.
        """
        remove_file(self.path, self.fs)
