"""Windows platform implementation."""

from __future__ import annotations

from collections.abc import Iterator

from crossfs.platforms.base import BasePlatform
from crossfs.protocols import FileSystem


class WindowsPlatform(BasePlatform):
    """Windows path rules: ``\\`` separator, empty orphan parent.

    Parent is always the literal prefix before the last separator, so a
    path like ``\\foo`` has an empty parent rather than a root.
    """

    name = "windows"
    separator = "\\"

    def orphan_parent(self) -> str:
        """A bare name has an empty parent."""
        return ""

    def root_child_parent(self) -> str:
        """The prefix before index 0 is empty."""
        return ""

    def home_candidates(self, fs: FileSystem) -> Iterator[str | None]:
        """Try ``%USERPROFILE%``, then ``%HOMEDRIVE%%HOMEPATH%``."""
        yield fs.getenv("USERPROFILE")
        drive = fs.getenv("HOMEDRIVE")
        path = fs.getenv("HOMEPATH")
        yield drive + path if drive and path else None

    def temp_candidates(self, fs: FileSystem) -> Iterator[str | None]:
        """Follow the GetTempPath order: TMP, TEMP, USERPROFILE."""
        yield fs.getenv("TMP")
        yield fs.getenv("TEMP")
        yield fs.getenv("USERPROFILE")
