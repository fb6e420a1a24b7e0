"""Async handles for event-loop callers, built on aiofiles.

AsyncFile and AsyncDirectory mirror File and Directory: the same error
taxonomy, the same empty-list policy for missing directories, the same
cross-device-only move fallback. Each OS call is awaited in turn, so
recursive listing stays pre-order and recursive removal still removes
children before their parent. Nothing coordinates concurrent calls over
overlapping trees.
"""

from __future__ import annotations

import errno
import logging
from collections.abc import AsyncIterator, Iterator

import aiofiles
import aiofiles.os

from crossfs.exceptions import (
    DirectoryCreateFailed,
    DirectoryRemoveFailed,
    FileCopyFailed,
    FileMoveFailed,
    FileReadFailed,
    FileRemoveFailed,
    FileSizeUnavailable,
    FileWriteFailed,
)
from crossfs.files import DEFAULT_ENCODING
from crossfs.path import Path, PathLike, as_path
from crossfs.traversal import PSEUDO_ENTRIES

logger = logging.getLogger(__name__)

COPY_CHUNK_SIZE = 1024 * 1024


async def _is_dir(path: Path) -> bool:
    return bool(await aiofiles.os.path.isdir(str(path)))


async def _child_names(directory: Path) -> list[str]:
    try:
        names: list[str] = await aiofiles.os.listdir(str(directory))
    except OSError as e:
        logger.debug("Cannot enumerate %s: %s", directory, e)
        return []
    return [name for name in names if name not in PSEUDO_ENTRIES]


async def _remove_file(path: Path) -> None:
    try:
        await aiofiles.os.remove(str(path))
    except OSError as e:
        raise FileRemoveFailed(f"Could not delete file {path}: {e}", str(path)) from e


async def _remove_empty_directory(path: Path) -> None:
    try:
        await aiofiles.os.rmdir(str(path))
    except OSError as e:
        raise DirectoryRemoveFailed(f"Could not remove directory {path}: {e}", str(path)) from e


class AsyncFile:
    """Async handle for a file at a path."""

    def __init__(self, path: PathLike, encoding: str = DEFAULT_ENCODING) -> None:
        """Initialize an async file handle.

        Args:
            path: Location of the file.
            encoding: Default text encoding.
        """
        self.path = as_path(path)
        self.encoding = encoding

    def __repr__(self) -> str:
        return f"AsyncFile({self.path.value!r})"

    async def exists(self) -> bool:
        """Check that the path exists and is a regular file."""
        target = str(self.path)
        return bool(await aiofiles.os.path.exists(target)) and bool(
            await aiofiles.os.path.isfile(target)
        )

    async def size(self) -> int:
        """Get the file size in bytes."""
        try:
            stat = await aiofiles.os.stat(str(self.path))
        except OSError as e:
            raise FileSizeUnavailable(
                f"Could not get file size of {self.path}: {e}", str(self.path)
            ) from e
        return stat.st_size

    async def read_text(self, encoding: str | None = None) -> str:
        """Read the whole file as text."""
        try:
            async with aiofiles.open(
                str(self.path), encoding=encoding or self.encoding, newline=""
            ) as f:
                content: str = await f.read()
                return content
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadFailed(f"Could not read file {self.path}: {e}", str(self.path)) from e

    async def read_binary(self) -> bytes:
        """Read the whole file as bytes."""
        try:
            async with aiofiles.open(str(self.path), "rb") as f:
                content: bytes = await f.read()
                return content
        except OSError as e:
            raise FileReadFailed(f"Could not read file {self.path}: {e}", str(self.path)) from e

    async def write_text(self, content: str, encoding: str | None = None) -> None:
        """Replace the file's content with text."""
        try:
            async with aiofiles.open(
                str(self.path), "w", encoding=encoding or self.encoding, newline=""
            ) as f:
                await f.write(content)
        except (OSError, UnicodeEncodeError) as e:
            raise FileWriteFailed(
                f"Could not write to file {self.path}: {e}", str(self.path)
            ) from e

    async def write_binary(self, content: bytes) -> None:
        """Replace the file's content with bytes."""
        try:
            async with aiofiles.open(str(self.path), "wb") as f:
                await f.write(bytes(content))
        except OSError as e:
            raise FileWriteFailed(
                f"Could not write to file {self.path}: {e}", str(self.path)
            ) from e

    async def copy(self, destination: PathLike) -> None:
        """Copy the file's bytes to ``destination`` in chunks."""
        dest = as_path(destination, self.path.platform)
        try:
            async with aiofiles.open(str(self.path), "rb") as src:
                async with aiofiles.open(str(dest), "wb") as dst:
                    while True:
                        chunk = await src.read(COPY_CHUNK_SIZE)
                        if not chunk:
                            break
                        await dst.write(chunk)
        except OSError as e:
            raise FileCopyFailed(
                f"Could not copy file {self.path} to {dest}: {e}", str(self.path)
            ) from e

    async def move(self, destination: PathLike) -> None:
        """Move the file, copying only on a cross-device rename failure."""
        dest = as_path(destination, self.path.platform)
        try:
            await aiofiles.os.replace(str(self.path), str(dest))
            return
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise FileMoveFailed(
                    f"Could not move file {self.path} to {dest}: {e}", str(self.path)
                ) from e

        logger.debug("Cross-device move of %s to %s, copying instead", self.path, dest)
        try:
            await self.copy(dest)
            await self.remove()
        except (FileCopyFailed, FileRemoveFailed) as e:
            raise FileMoveFailed(
                f"Could not move file {self.path} to {dest}: {e}", str(self.path)
            ) from e

    async def remove(self) -> None:
        """Delete the file."""
        await _remove_file(self.path)


class AsyncDirectory:
    """Async handle for a directory at a path."""

    def __init__(self, path: PathLike) -> None:
        self.path = as_path(path)

    def __repr__(self) -> str:
        return f"AsyncDirectory({self.path.value!r})"

    async def exists(self) -> bool:
        """Check that the path exists and is a directory."""
        target = str(self.path)
        return bool(await aiofiles.os.path.exists(target)) and await _is_dir(self.path)

    async def create(self, recursive: bool = False) -> None:
        """Create the directory; an existing directory is not an error."""
        try:
            if recursive:
                await aiofiles.os.makedirs(str(self.path))
            else:
                await aiofiles.os.mkdir(str(self.path))
        except FileExistsError:
            logger.debug("Directory %s already exists", self.path)
        except OSError as e:
            raise DirectoryCreateFailed(
                f"Could not create directory {self.path}: {e}", str(self.path)
            ) from e

    async def iter(self, recursive: bool = False) -> AsyncIterator[Path]:
        """Yield entries in pre-order, like Directory.iter."""
        stack: list[tuple[Path, Iterator[str]]] = [
            (self.path, iter(await _child_names(self.path)))
        ]
        while stack:
            directory, names = stack[-1]
            name = next(names, None)
            if name is None:
                stack.pop()
                continue

            entry = directory.join(name)
            yield entry

            if recursive and await _is_dir(entry):
                stack.append((entry, iter(await _child_names(entry))))

    async def list(self, recursive: bool = False) -> list[Path]:
        """List entries; a missing or unreadable directory lists as empty."""
        return [entry async for entry in self.iter(recursive=recursive)]

    async def remove(self, recursive: bool = False) -> None:
        """Remove the directory, bottom-up when ``recursive``."""
        if not recursive:
            await _remove_empty_directory(self.path)
            return

        stack: list[tuple[Path, Iterator[Path]]] = [
            (self.path, iter(await AsyncDirectory(self.path).list()))
        ]
        while stack:
            directory, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                await _remove_empty_directory(directory)
                continue

            if await _is_dir(child):
                stack.append((child, iter(await AsyncDirectory(child).list())))
            else:
                await _remove_file(child)
