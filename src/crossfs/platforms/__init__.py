"""Platform-specific path rules."""

from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable

from crossfs.protocols import FileSystem

from .base import BasePlatform
from .posix import PosixPlatform
from .windows import WindowsPlatform


@runtime_checkable
class Platform(Protocol):
    """Protocol defining the interface for platform implementations.

    Every divergence between operating systems lives behind this
    interface, so new platforms can be added without touching the
    path model or traversal code.
    """

    name: str
    separator: str

    def normalize(self, raw: str) -> str:
        """Normalize separators and strip one trailing separator."""
        raise NotImplementedError

    def filename(self, normalized: str) -> str:
        """Get the final path component."""
        raise NotImplementedError

    def extension(self, normalized: str) -> str:
        """Get the filename suffix from its last dot."""
        raise NotImplementedError

    def parent(self, normalized: str) -> str:
        """Get the parent path string."""
        raise NotImplementedError

    def join(self, normalized: str, *names: str) -> str:
        """Join names onto a path."""
        raise NotImplementedError

    def home_directory(self, fs: FileSystem) -> str:
        """Resolve the user's home directory."""
        raise NotImplementedError

    def temp_directory(self, fs: FileSystem) -> str:
        """Resolve the system temp directory."""
        raise NotImplementedError

    def current_directory(self, fs: FileSystem) -> str:
        """Resolve the process working directory."""
        raise NotImplementedError


__all__ = [
    "BasePlatform",
    "Platform",
    "PosixPlatform",
    "WindowsPlatform",
    "detect_platform",
    "get_platform",
]


PLATFORMS: dict[str, type[BasePlatform]] = {
    "posix": PosixPlatform,
    "windows": WindowsPlatform,
}


def get_platform(name: str) -> Platform:
    """Get a platform instance by name.

    Args:
        name: Platform name (posix, windows) or "auto" for the host.

    Returns:
        Platform instance.

    Raises:
        ValueError: If platform is not supported.
    """
    if name == "auto":
        return detect_platform()
    if name not in PLATFORMS:
        raise ValueError(f"Unknown platform: {name}. Supported: {list(PLATFORMS.keys())}")
    return PLATFORMS[name]()


def detect_platform() -> Platform:
    """Get the platform matching the running interpreter."""
    if sys.platform == "win32":
        return WindowsPlatform()
    return PosixPlatform()
