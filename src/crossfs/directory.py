"""Directory handle: creation, listing and (recursive) removal."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from crossfs.exceptions import DirectoryCreateFailed
from crossfs.filesystem import RealFileSystem
from crossfs.path import Path, PathLike, as_path
from crossfs.protocols import FileSystem
from crossfs.traversal import iter_entries, list_entries, remove_empty_directory, remove_tree

logger = logging.getLogger(__name__)


class Directory:
    """Handle for a directory at a path.

    The handle holds only the path; every method queries the OS afresh.
    Concurrent operations on overlapping trees are not coordinated.
    """

    def __init__(self, path: PathLike, filesystem: FileSystem | None = None) -> None:
        """Initialize a directory handle.

        Args:
            path: Location of the directory.
            filesystem: Filesystem capability. Defaults to RealFileSystem.
        """
        self.path = as_path(path)
        self.fs = filesystem or RealFileSystem()

    def __repr__(self) -> str:
        return f"Directory({self.path.value!r})"

    def exists(self) -> bool:
        """Check that the path exists and is a directory."""
        target = str(self.path)
        return self.fs.exists(target) and self.fs.is_dir(target)

    def create(self, recursive: bool = False) -> None:
        """Create the directory.

        Creating a directory that already exists is not an error.

        Args:
            recursive: Also create missing ancestors.

        Raises:
            DirectoryCreateFailed: On any OS failure other than "already exists".
        """
        try:
            self.fs.mkdir(str(self.path), parents=recursive)
        except FileExistsError:
            logger.debug("Directory %s already exists", self.path)
        except OSError as e:
            raise DirectoryCreateFailed(
                f"Could not create directory {self.path}: {e}", str(self.path)
            ) from e

    def remove(self, recursive: bool = False) -> None:
        """Remove the directory.

        Args:
            recursive: Remove all contents first, bottom-up.

        Raises:
            DirectoryRemoveFailed: If the directory is missing, non-empty
                (without ``recursive``), or cannot be removed.
            FileRemoveFailed: If a file below it cannot be removed.
        """
        if recursive:
            remove_tree(self.path, self.fs)
        else:
            remove_empty_directory(self.path, self.fs)

    def list(self, recursive: bool = False) -> list[Path]:
        """List the directory's entries.

        Order follows OS enumeration and is not alphabetic. With
        ``recursive``, each subdirectory is followed by its own entries.
        A missing or unreadable directory lists as empty.
        """
        return list_entries(self.path, self.fs, recursive=recursive)

    def iter(self, recursive: bool = False) -> Iterator[Path]:
        """Lazily yield the same entries as ``list``."""
        return iter_entries(self.path, self.fs, recursive=recursive)
