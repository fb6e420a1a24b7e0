"""POSIX (Linux, macOS) platform implementation."""

from __future__ import annotations

from collections.abc import Iterator

from crossfs.platforms.base import BasePlatform
from crossfs.protocols import FileSystem

DEFAULT_TEMP_DIR = "/tmp"


class PosixPlatform(BasePlatform):
    """POSIX path rules: ``/`` separator, ``.`` as the orphan parent."""

    name = "posix"
    separator = "/"

    def orphan_parent(self) -> str:
        """A bare name lives in the current directory."""
        return "."

    def root_child_parent(self) -> str:
        """``/etc`` has ``/`` as its parent."""
        return "/"

    def home_candidates(self, fs: FileSystem) -> Iterator[str | None]:
        """Try ``$HOME``, then the password database."""
        yield fs.getenv("HOME")
        yield fs.user_home()

    def temp_candidates(self, fs: FileSystem) -> Iterator[str | None]:
        """Try ``$TMPDIR``, then fall back to ``/tmp``."""
        yield fs.getenv("TMPDIR")
        yield DEFAULT_TEMP_DIR
