"""Protocol definitions for the platform I/O capability.

The path model and traversal logic never touch the operating system
directly. Every OS primitive goes through a ``FileSystem`` implementation,
which enables:
- Substituting test doubles for real I/O
- Swapping in other backends without touching traversal code

All concrete implementations satisfy the protocol structurally (duck typing).
Paths are plain strings already normalized by ``crossfs.path.Path``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for operating-system filesystem primitives.

    Implementations report failures as ``OSError`` (with ``errno`` set);
    translating them into crossfs errors is the caller's job.
    """

    def exists(self, path: str) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file.

        Args:
            path: Path to check.

        Returns:
            True if path is a regular file, False otherwise.
        """
        ...

    def list_names(self, path: str) -> list[str]:
        """List the names of a directory's immediate entries.

        Args:
            path: Directory to enumerate.

        Returns:
            Entry names in OS enumeration order, without ``.`` and ``..``.

        Raises:
            OSError: If the directory cannot be opened.
        """
        ...

    def mkdir(self, path: str, parents: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create missing ancestors as well.

        Raises:
            FileExistsError: If the path already exists.
        """
        ...

    def rmdir(self, path: str) -> None:
        """Remove an empty directory.

        Args:
            path: Directory to remove.
        """
        ...

    def unlink(self, path: str) -> None:
        """Remove a file.

        Args:
            path: File to remove.
        """
        ...

    def rename(self, src: str, dst: str) -> None:
        """Atomically rename a file on the same device.

        Args:
            src: Source path.
            dst: Destination path.

        Raises:
            OSError: With ``errno.EXDEV`` when src and dst are on different devices.
        """
        ...

    def copy_file(self, src: str, dst: str) -> None:
        """Copy a file's bytes to a new location.

        Args:
            src: Source file.
            dst: Destination file (overwritten if present).
        """
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file without newline translation."""
        ...

    def read_bytes(self, path: str) -> bytes:
        """Read binary content from a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file without newline translation."""
        ...

    def write_bytes(self, path: str, content: bytes) -> None:
        """Write binary content to a file."""
        ...

    def size(self, path: str) -> int:
        """Get a file's size in bytes."""
        ...

    def getcwd(self) -> str:
        """Get the process working directory."""
        ...

    def getenv(self, name: str) -> str | None:
        """Get an environment variable, or None when unset or empty."""
        ...

    def user_home(self) -> str | None:
        """Get the current user's home from the user database, if any."""
        ...
