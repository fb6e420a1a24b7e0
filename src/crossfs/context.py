"""Application context for dependency injection.

Separates object creation from object use: commands and callers receive a
context holding the platform rules and filesystem capability, and build
Path, File and Directory values through it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path as StdPath

from crossfs.config import Settings
from crossfs.directory import Directory
from crossfs.files import DEFAULT_ENCODING, File
from crossfs.path import Path, PathLike
from crossfs.platforms import Platform, detect_platform, get_platform
from crossfs.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from crossfs.filesystem import RealFileSystem

    return RealFileSystem()


@dataclass
class FsContext:
    """Container for filesystem dependencies.

    Dependencies are typed using Protocol interfaces, not concrete classes,
    so test doubles can be injected without inheritance.
    """

    platform: Platform = field(default_factory=detect_platform)
    filesystem: FileSystem = field(default_factory=_default_filesystem)
    encoding: str = DEFAULT_ENCODING
    log_level: str = "WARNING"

    def path(self, raw: PathLike) -> Path:
        """Build a Path under this context's platform rules."""
        return Path(raw, self.platform)

    def file(self, raw: PathLike) -> File:
        """Build a File handle bound to this context."""
        return File(self.path(raw), self.filesystem, encoding=self.encoding)

    def directory(self, raw: PathLike) -> Directory:
        """Build a Directory handle bound to this context."""
        return Directory(self.path(raw), self.filesystem)

    def current_directory(self) -> Path:
        """Get the working directory under this context."""
        return Path.current_directory(self.filesystem, self.platform)

    def home_directory(self) -> Path:
        """Get the home directory under this context."""
        return Path.home_directory(self.filesystem, self.platform)

    def temp_directory(self) -> Path:
        """Get the temp directory under this context."""
        return Path.temp_directory(self.filesystem, self.platform)


def create_context(
    settings: Settings | None = None,
    config_path: StdPath | None = None,
) -> FsContext:
    """Factory for filesystem dependencies.

    Creates the production wiring. For tests, construct FsContext directly
    with test doubles. Foreign path rules are only usable as plain Path
    values, since the real filesystem receives host paths.

    Args:
        settings: Explicit settings. Loaded from file and environment if None.
        config_path: Optional YAML settings file (ignored when settings given).

    Returns:
        Configured FsContext.

    Raises:
        ValueError: If the configured platform's separator is not the host's.
    """
    from crossfs.filesystem import RealFileSystem

    settings = settings or Settings.load(config_path)
    platform = get_platform(settings.platform)
    if platform.separator != os.sep:
        raise ValueError(
            f"Platform {platform.name!r} cannot drive the real filesystem on this host "
            f"(separator {platform.separator!r}, host uses {os.sep!r})"
        )
    return FsContext(
        platform=platform,
        filesystem=RealFileSystem(),
        encoding=settings.encoding,
        log_level=settings.log_level,
    )
