"""Directory listing and recursive removal.

Both walks run on an explicit stack of pending directories instead of
call-stack recursion, so tree depth is limited by memory rather than the
interpreter's recursion limit. Ordering is the same as the recursive
formulation:

- listing is pre-order: a directory entry is emitted immediately before
  its own descendants, siblings in OS enumeration order;
- removal is post-order: a directory is removed only after every entry
  below it, and a subtree's root is the last thing removed in it.

Neither walk treats symbolic links specially. A link to a directory is
walked as a directory, and a link cycle never terminates.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from crossfs.exceptions import DirectoryRemoveFailed, FileRemoveFailed
from crossfs.path import Path
from crossfs.protocols import FileSystem

logger = logging.getLogger(__name__)

PSEUDO_ENTRIES = frozenset({".", ".."})


def child_names(directory: Path, fs: FileSystem) -> list[str]:
    """Get the immediate entry names of a directory.

    A directory that is missing or cannot be opened has no children.

    Args:
        directory: Directory to enumerate.
        fs: Filesystem capability.

    Returns:
        Names in OS enumeration order, without ``.`` and ``..``.
    """
    try:
        names = fs.list_names(str(directory))
    except OSError as e:
        logger.debug("Cannot enumerate %s: %s", directory, e)
        return []
    return [name for name in names if name not in PSEUDO_ENTRIES]


def iter_entries(root: Path, fs: FileSystem, recursive: bool = False) -> Iterator[Path]:
    """Iterate over the entries below a directory.

    Each entry is ``root`` joined with the entry name. With ``recursive``,
    every entry that is a directory at the moment it is reached (a fresh
    OS query) is followed by its own entries.

    Args:
        root: Directory to list.
        fs: Filesystem capability.
        recursive: Descend into subdirectories.

    Yields:
        Entry paths in pre-order.
    """
    stack: list[tuple[Path, Iterator[str]]] = [(root, iter(child_names(root, fs)))]
    while stack:
        directory, names = stack[-1]
        name = next(names, None)
        if name is None:
            stack.pop()
            continue

        entry = directory.join(name)
        yield entry

        if recursive and fs.is_dir(str(entry)):
            stack.append((entry, iter(child_names(entry, fs))))


def list_entries(root: Path, fs: FileSystem, recursive: bool = False) -> list[Path]:
    """List the entries below a directory.

    Returns:
        Entry paths in pre-order; empty if ``root`` is missing or unreadable.
    """
    return list(iter_entries(root, fs, recursive=recursive))


def remove_file(path: Path, fs: FileSystem) -> None:
    """Remove a single file.

    Raises:
        FileRemoveFailed: If the OS refuses the removal.
    """
    try:
        fs.unlink(str(path))
    except OSError as e:
        raise FileRemoveFailed(f"Could not delete file {path}: {e}", str(path)) from e


def remove_empty_directory(path: Path, fs: FileSystem) -> None:
    """Remove a directory that must already be empty.

    Raises:
        DirectoryRemoveFailed: If the directory is missing, non-empty,
            or otherwise cannot be removed.
    """
    try:
        fs.rmdir(str(path))
    except OSError as e:
        raise DirectoryRemoveFailed(
            f"Could not remove directory {path}: {e}", str(path)
        ) from e


def remove_tree(root: Path, fs: FileSystem) -> None:
    """Remove a directory and everything below it.

    Children are discovered one level at a time as the walk descends.
    Files are removed as they are reached; a directory is removed once
    its last child is gone. The first failure aborts the walk and
    propagates, leaving whatever was not yet removed in place. There is
    no rollback.

    Args:
        root: Directory to remove.
        fs: Filesystem capability.

    Raises:
        FileRemoveFailed: If a file below ``root`` cannot be removed.
        DirectoryRemoveFailed: If ``root`` or a subdirectory cannot be
            removed, including when ``root`` does not exist.
    """
    stack: list[tuple[Path, Iterator[Path]]] = [(root, iter_entries(root, fs))]
    while stack:
        directory, children = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            remove_empty_directory(directory, fs)
            logger.debug("Removed directory %s", directory)
            continue

        if fs.is_dir(str(child)):
            stack.append((child, iter_entries(child, fs)))
        else:
            remove_file(child, fs)
            logger.debug("Removed file %s", child)
