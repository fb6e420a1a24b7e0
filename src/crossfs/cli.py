"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path as StdPath
from typing import TYPE_CHECKING, Annotated

import typer
from rich.logging import RichHandler

from crossfs import __version__
from crossfs.console import Output
from crossfs.context import create_context
from crossfs.exceptions import FileSystemError

if TYPE_CHECKING:
    from crossfs.context import FsContext

app = typer.Typer(
    name="crossfs",
    help="Cross-platform file and directory operations",
    no_args_is_help=True,
)

output = Output()

# Set by the app callback, read when a command builds its context
_config_path: StdPath | None = None
_verbose = False

DEMO_DIR_NAME = "crossfs-demo"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"crossfs v{__version__}")
        raise typer.Exit()


def configure_logging(level: int | str) -> None:
    """Route library logs through Rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=output.console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log filesystem activity")
    ] = False,
    config: Annotated[
        StdPath | None, typer.Option("--config", "-c", help="YAML settings file")
    ] = None,
) -> None:
    """Cross-platform file and directory operations."""
    global _config_path, _verbose
    _config_path = config
    _verbose = verbose


def _get_context(context: FsContext | None) -> FsContext:
    """Return the injected context or build the production one."""
    if context is not None:
        return context
    try:
        ctx = create_context(config_path=_config_path)
    except (FileNotFoundError, ValueError) as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e
    configure_logging(logging.DEBUG if _verbose else ctx.log_level)
    return ctx


def _fail(error: FileSystemError) -> typer.Exit:
    """Report a filesystem error and build the exit to raise."""
    output.show_error(f"{error.kind.value}: {error}")
    return typer.Exit(1)


# ============================================================================
# Inspection Commands
# ============================================================================


@app.command("info")
def info(_context=None) -> None:
    """Show the working, home and temp directories and the separator."""
    ctx = _get_context(_context)
    try:
        locations = {
            "Current directory": str(ctx.current_directory()),
            "Home directory": str(ctx.home_directory()),
            "Temp directory": str(ctx.temp_directory()),
            "Path separator": ctx.platform.separator,
        }
    except FileSystemError as e:
        raise _fail(e) from e
    output.show_locations(locations)


@app.command("ls")
def list_directory(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Include subdirectory contents")
    ] = False,
    _context=None,
) -> None:
    """List a directory's entries."""
    ctx = _get_context(_context)
    directory = ctx.directory(path)
    entries = [
        (entry, ctx.directory(entry).exists()) for entry in directory.list(recursive=recursive)
    ]
    output.show_entries(directory.path, entries)


@app.command("cat")
def cat(
    path: Annotated[str, typer.Argument(help="File to print")],
    _context=None,
) -> None:
    """Print a file's text content."""
    ctx = _get_context(_context)
    try:
        output.show_text(ctx.file(path).read_text())
    except FileSystemError as e:
        raise _fail(e) from e


@app.command("size")
def size(
    path: Annotated[str, typer.Argument(help="File to measure")],
    _context=None,
) -> None:
    """Print a file's size in bytes."""
    ctx = _get_context(_context)
    try:
        output.console.print(ctx.file(path).size())
    except FileSystemError as e:
        raise _fail(e) from e


# ============================================================================
# Mutating Commands
# ============================================================================


@app.command("mkdir")
def make_directory(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parent directories")
    ] = False,
    _context=None,
) -> None:
    """Create a directory (existing directories are fine)."""
    ctx = _get_context(_context)
    try:
        ctx.directory(path).create(recursive=parents)
    except FileSystemError as e:
        raise _fail(e) from e
    output.show_success(f"Created {ctx.path(path)}")


@app.command("rm")
def remove(
    path: Annotated[str, typer.Argument(help="File or directory to remove")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Remove directory contents too")
    ] = False,
    _context=None,
) -> None:
    """Remove a file or a directory."""
    ctx = _get_context(_context)
    file = ctx.file(path)
    try:
        if file.exists():
            file.remove()
        else:
            ctx.directory(path).remove(recursive=recursive)
    except FileSystemError as e:
        raise _fail(e) from e
    output.show_success(f"Removed {file.path}")


@app.command("cp")
def copy(
    source: Annotated[str, typer.Argument(help="File to copy")],
    destination: Annotated[str, typer.Argument(help="Destination path")],
    _context=None,
) -> None:
    """Copy a file."""
    ctx = _get_context(_context)
    try:
        ctx.file(source).copy(ctx.path(destination))
    except FileSystemError as e:
        raise _fail(e) from e
    output.show_success(f"Copied {ctx.path(source)} to {ctx.path(destination)}")


@app.command("mv")
def move(
    source: Annotated[str, typer.Argument(help="File to move")],
    destination: Annotated[str, typer.Argument(help="Destination path")],
    _context=None,
) -> None:
    """Move a file, across devices if needed."""
    ctx = _get_context(_context)
    try:
        ctx.file(source).move(ctx.path(destination))
    except FileSystemError as e:
        raise _fail(e) from e
    output.show_success(f"Moved {ctx.path(source)} to {ctx.path(destination)}")


# ============================================================================
# Demo
# ============================================================================


@app.command("demo")
def demo(
    keep: Annotated[
        bool, typer.Option("--keep", help="Leave the demo directory in place")
    ] = False,
    _context=None,
) -> None:
    """Walk through the library's operations in a scratch directory."""
    ctx = _get_context(_context)
    try:
        _run_demo(ctx, keep)
    except FileSystemError as e:
        raise _fail(e) from e


def _run_demo(ctx: FsContext, keep: bool) -> None:
    """Create, inspect, copy, list and remove a small tree under temp."""
    root = ctx.temp_directory() / DEMO_DIR_NAME
    directory = ctx.directory(root)
    if directory.exists():
        output.show_info(f"{root} already exists, removing it first")
        directory.remove(recursive=True)

    directory.create()
    output.show_success(f"Created {root}")

    first = ctx.file(root / "test1.txt")
    first.write_text("Hello from crossfs!\nThis is a test file.")
    ctx.file(root / "test2.txt").write_text("Another test file.\nWith multiple lines.")
    output.show_info(f"{first.path.filename()} holds {first.size()} bytes")

    copied = root / "test1-copy.txt"
    first.copy(copied)
    output.show_success(f"Copied {first.path.filename()} to {copied.filename()}")

    subdir = ctx.directory(root / "subdir")
    subdir.create()
    ctx.file(subdir.path / "subfile.txt").write_text("This is a file in a subdirectory.")

    moved = subdir.path / "moved.txt"
    ctx.file(root / "test2.txt").move(moved)
    output.show_success(f"Moved test2.txt to {moved.filename()}")

    entries = [(entry, ctx.directory(entry).exists()) for entry in directory.list(recursive=True)]
    output.show_entries(root, entries)

    if keep:
        output.show_info(f"Kept {root}")
        return

    directory.remove(recursive=True)
    output.show_success(f"Removed {root} (exists: {'yes' if directory.exists() else 'no'})")
