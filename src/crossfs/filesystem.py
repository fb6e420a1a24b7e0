"""Production filesystem capability.

RealFileSystem wraps ``os`` and ``shutil`` primitives and satisfies the
FileSystem protocol structurally. It performs no error translation and
no caching: every call goes straight to the operating system.
"""

from __future__ import annotations

import os
import shutil
import sys


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file."""
        return os.path.isfile(path)

    def list_names(self, path: str) -> list[str]:
        """List immediate entry names in OS enumeration order."""
        with os.scandir(path) as entries:
            return [entry.name for entry in entries]

    def mkdir(self, path: str, parents: bool = False) -> None:
        """Create a directory."""
        if parents:
            os.makedirs(path)
        else:
            os.mkdir(path)

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        os.rmdir(path)

    def unlink(self, path: str) -> None:
        """Remove a file."""
        os.unlink(path)

    def rename(self, src: str, dst: str) -> None:
        """Rename a file, replacing any existing destination."""
        os.replace(src, dst)

    def copy_file(self, src: str, dst: str) -> None:
        """Copy file content."""
        shutil.copyfile(src, dst)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        with open(path, encoding=encoding, newline="") as f:
            return f.read()

    def read_bytes(self, path: str) -> bytes:
        """Read binary content from a file."""
        with open(path, "rb") as f:
            return f.read()

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)

    def write_bytes(self, path: str, content: bytes) -> None:
        """Write binary content to a file."""
        with open(path, "wb") as f:
            f.write(content)

    def size(self, path: str) -> int:
        """Get file size in bytes."""
        return os.stat(path).st_size

    def getcwd(self) -> str:
        """Get the process working directory."""
        return os.getcwd()

    def getenv(self, name: str) -> str | None:
        """Get a non-empty environment variable."""
        return os.environ.get(name) or None

    def user_home(self) -> str | None:
        """Get the home directory from the password database."""
        if sys.platform == "win32":
            return None

        import pwd

        try:
            return pwd.getpwuid(os.getuid()).pw_dir or None
        except KeyError:
            return None
