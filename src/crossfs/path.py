"""Immutable path value with per-platform normalization.

A Path is only a string in canonical form plus the platform rules that
produced it. It holds no OS handle. The existence queries and the static
accessors ask the filesystem capability afresh on every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from crossfs.filesystem import RealFileSystem
from crossfs.platforms import Platform, detect_platform
from crossfs.protocols import FileSystem

PathLike = Union["Path", str]


@dataclass(frozen=True, init=False, eq=False)
class Path:
    """A filesystem location in canonical form.

    Construction replaces every ``/`` and ``\\`` with the platform's
    separator and drops one trailing separator unless the whole value is
    the root. ``.`` and ``..`` segments and repeated separators are kept
    as given; this is not a resolving path library.

    Attributes:
        value: Normalized path string.
        platform: Platform rules used for normalization and derivations.
    """

    value: str
    platform: Platform

    def __init__(self, raw: PathLike = "", platform: Platform | None = None) -> None:
        """Create a normalized path.

        Args:
            raw: Path string in any separator style, or another Path.
            platform: Platform rules. Defaults to the raw Path's platform,
                or the host platform for strings.
        """
        if isinstance(raw, Path):
            platform = platform or raw.platform
            raw = raw.value
        platform = platform or detect_platform()
        object.__setattr__(self, "platform", platform)
        object.__setattr__(self, "value", platform.normalize(raw))

    def to_string(self) -> str:
        """Get the normalized path string."""
        return self.value

    def native(self) -> str:
        """Get the path string in the platform's native form."""
        return self.value

    def filename(self) -> str:
        """Final component; the whole value when there is no separator."""
        return self.platform.filename(self.value)

    def extension(self) -> str:
        """Suffix of the filename from its last dot, or empty string."""
        return self.platform.extension(self.value)

    def parent(self) -> Path:
        """Get the parent path using the platform's edge rules."""
        return Path(self.platform.parent(self.value), self.platform)

    def join(self, *names: str) -> Path:
        """Get a new path with ``names`` appended.

        Args:
            *names: Components to append, in order.

        Returns:
            Normalized joined path.
        """
        if not names:
            return self
        return Path(self.platform.join(self.value, *names), self.platform)

    def __truediv__(self, name: str) -> Path:
        if not isinstance(name, str):
            return NotImplemented
        return self.join(name)

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Path({self.value!r}, platform={self.platform.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.value == other.value and self.platform.name == other.platform.name

    def __hash__(self) -> int:
        return hash((self.value, self.platform.name))

    # ========================================================================
    # Queries
    # ========================================================================

    def exists(self, filesystem: FileSystem | None = None) -> bool:
        """Check whether anything exists at this path."""
        return (filesystem or RealFileSystem()).exists(self.value)

    def is_directory(self, filesystem: FileSystem | None = None) -> bool:
        """Check whether this path is an existing directory."""
        return (filesystem or RealFileSystem()).is_dir(self.value)

    def is_file(self, filesystem: FileSystem | None = None) -> bool:
        """Check whether this path is an existing regular file."""
        return (filesystem or RealFileSystem()).is_file(self.value)

    # ========================================================================
    # Static accessors
    # ========================================================================

    @classmethod
    def current_directory(
        cls, filesystem: FileSystem | None = None, platform: Platform | None = None
    ) -> Path:
        """Get the process working directory.

        Raises:
            DirectoryUnavailable: If the OS reports no working directory.
        """
        platform = platform or detect_platform()
        return cls(platform.current_directory(filesystem or RealFileSystem()), platform)

    @classmethod
    def home_directory(
        cls, filesystem: FileSystem | None = None, platform: Platform | None = None
    ) -> Path:
        """Get the current user's home directory.

        Raises:
            DirectoryUnavailable: If neither the environment nor the user
                database names a home directory.
        """
        platform = platform or detect_platform()
        return cls(platform.home_directory(filesystem or RealFileSystem()), platform)

    @classmethod
    def temp_directory(
        cls, filesystem: FileSystem | None = None, platform: Platform | None = None
    ) -> Path:
        """Get the system temp directory.

        Raises:
            DirectoryUnavailable: If the environment names no temp directory.
        """
        platform = platform or detect_platform()
        return cls(platform.temp_directory(filesystem or RealFileSystem()), platform)

    @staticmethod
    def separator(platform: Platform | None = None) -> str:
        """Get the canonical separator character."""
        return (platform or detect_platform()).separator


def as_path(value: PathLike, platform: Platform | None = None) -> Path:
    """Coerce a string or Path into a Path.

    A Path passes through unchanged unless a different platform is given.
    """
    if isinstance(value, Path) and (platform is None or platform.name == value.platform.name):
        return value
    return Path(value, platform)
