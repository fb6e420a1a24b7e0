"""Base platform implementation with shared path rules.

All platforms share the same normalization and component-splitting
algorithm; they vary only in the canonical separator, in what ``parent``
returns at the edges, and in where the environment keeps the home and
temp directories.

Pattern: Template Method - base class defines the algorithm skeleton,
subclasses provide the platform-specific steps.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from crossfs.exceptions import DirectoryUnavailable
from crossfs.protocols import FileSystem

SEPARATORS = "/\\"


class BasePlatform(ABC):
    """Base class for platform implementations.

    Subclasses set ``name`` and ``separator`` and override the edge-case
    hooks for ``parent`` and the environment lookups.
    """

    name: str
    separator: str

    def normalize(self, raw: str) -> str:
        """Normalize a raw path string.

        Every ``/`` and ``\\`` becomes the canonical separator, then one
        trailing separator is dropped unless the string is a lone root.
        Nothing else is touched: ``.``, ``..`` and repeated separators
        are kept verbatim.

        Args:
            raw: Path string in any separator style.

        Returns:
            Normalized path string.
        """
        normalized = raw.translate({ord(sep): self.separator for sep in SEPARATORS})
        if len(normalized) > 1 and normalized.endswith(self.separator):
            normalized = normalized[:-1]
        return normalized

    def filename(self, normalized: str) -> str:
        """Get the component after the last separator."""
        return normalized[normalized.rfind(self.separator) + 1 :]

    def extension(self, normalized: str) -> str:
        """Get the filename suffix starting at its last dot.

        A dotfile without a further dot yields the whole name.
        """
        name = self.filename(normalized)
        pos = name.rfind(".")
        if pos == -1:
            return ""
        return name[pos:]

    def parent(self, normalized: str) -> str:
        """Get the prefix before the last separator.

        Template Method: the common split, with platform hooks for a path
        without separators and for a separator at index 0.
        """
        pos = normalized.rfind(self.separator)
        if pos == -1:
            return self.orphan_parent()
        if pos == 0:
            return self.root_child_parent()
        return normalized[:pos]

    def join(self, normalized: str, *names: str) -> str:
        """Join names onto a path with the canonical separator."""
        return self.separator.join([normalized, *names])

    @abstractmethod
    def orphan_parent(self) -> str:
        """Parent of a path that contains no separator."""
        ...

    @abstractmethod
    def root_child_parent(self) -> str:
        """Parent of a path whose only separator is at index 0."""
        ...

    @abstractmethod
    def home_candidates(self, fs: FileSystem) -> Iterable[str | None]:
        """Yield home directory candidates in lookup order."""
        ...

    @abstractmethod
    def temp_candidates(self, fs: FileSystem) -> Iterable[str | None]:
        """Yield temp directory candidates in lookup order."""
        ...

    def home_directory(self, fs: FileSystem) -> str:
        """Resolve the user's home directory.

        Args:
            fs: Filesystem capability used for environment queries.

        Returns:
            First non-empty candidate.

        Raises:
            DirectoryUnavailable: If no candidate yields a value.
        """
        return self._first(self.home_candidates(fs), "home")

    def temp_directory(self, fs: FileSystem) -> str:
        """Resolve the system temp directory.

        Raises:
            DirectoryUnavailable: If no candidate yields a value.
        """
        return self._first(self.temp_candidates(fs), "temp")

    def current_directory(self, fs: FileSystem) -> str:
        """Resolve the process working directory.

        Raises:
            DirectoryUnavailable: If the OS reports no working directory.
        """
        try:
            cwd = fs.getcwd()
        except OSError as e:
            raise DirectoryUnavailable(f"Could not get current directory: {e}") from e
        if not cwd:
            raise DirectoryUnavailable("Could not get current directory")
        return cwd

    def _first(self, candidates: Iterable[str | None], label: str) -> str:
        for candidate in candidates:
            if candidate:
                return candidate
        raise DirectoryUnavailable(f"Could not get {label} directory")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
