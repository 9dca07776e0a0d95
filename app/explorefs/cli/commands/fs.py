"""File operation commands.

Every command accepts local paths and device paths (adb://SERIAL/...)
interchangeably.
"""

import json
import time
from collections.abc import Callable
from typing import Annotated, Any

import typer
from rich.markup import escape

from explorefs.cli.types import OutputFormat, get_explorer
from explorefs.core.fingerprint import ChangeDetector
from explorefs.core.worker import run_detached
from explorefs.models.items import FileSystemItem
from explorefs.utils.formatting import (
    console,
    create_entry_table,
    format_entry_row,
    print_error,
    print_info,
    print_success,
)
from explorefs.vfs.router import MalformedPathError

app = typer.Typer(
    help="List, copy, move, delete and compress files.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command("ls")
def list_entries(
    path: Annotated[str, typer.Argument(help="Directory to list.")],
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include hidden entries."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """List a local or device directory."""
    explorer = get_explorer()
    items = _guarded(explorer.list_entries, path, show_hidden=True if show_all else None)
    items = sorted(items, key=lambda i: (not i.is_directory, i.name.lower()))

    if output_format == OutputFormat.JSON:
        _print_json(items)
        return

    if not items:
        print_info(f"No entries in {path}")
        return

    table = create_entry_table(path)
    for item in items:
        table.add_row(*format_entry_row(item))
    console.print(table)
    console.print(f"\n[dim]{len(items)} entries[/dim]")


@app.command("cp")
def copy(
    src: Annotated[str, typer.Argument(help="Source file or directory.")],
    dest: Annotated[str, typer.Argument(help="Destination path.")],
) -> None:
    """Copy a file or directory tree."""
    explorer = get_explorer()
    ok = _run_with_status(f"Copying {src}", explorer.copy, src, dest)
    _report(ok, f"Copied {src} -> {dest}", f"Copy failed: {src} -> {dest}")


@app.command("mv")
def move(
    src: Annotated[str, typer.Argument(help="Source file or directory.")],
    dest: Annotated[str, typer.Argument(help="Destination path.")],
) -> None:
    """Move a file or directory tree (copy, then delete the source)."""
    explorer = get_explorer()
    ok = _run_with_status(f"Moving {src}", explorer.move, src, dest)
    _report(ok, f"Moved {src} -> {dest}", f"Move failed: {src} -> {dest}")


@app.command("rename")
def rename(
    old: Annotated[str, typer.Argument(help="Existing path.")],
    new: Annotated[str, typer.Argument(help="New path on the same backend.")],
) -> None:
    """Rename a path. The destination must not exist."""
    explorer = get_explorer()
    ok = _guarded(explorer.rename, old, new)
    _report(ok, f"Renamed {old} -> {new}", f"Rename failed: {old} -> {new}")


@app.command("rm")
def remove(
    paths: Annotated[list[str], typer.Argument(help="Paths to delete.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete files and directory trees."""
    if not yes:
        for path in paths:
            console.print(f"  [error]-[/] {escape(path)}")
        confirmed = typer.confirm(f"\nDelete {len(paths)} path(s)?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    explorer = get_explorer()
    failed = 0
    for path in paths:
        if _guarded(explorer.delete, path):
            print_success(f"Deleted {path}")
        else:
            print_error(f"Could not delete {path}")
            failed += 1

    if failed:
        raise typer.Exit(code=1)


@app.command("zip")
def compress(
    archive: Annotated[str, typer.Argument(help="Archive to create (must not exist).")],
    inputs: Annotated[list[str], typer.Argument(help="Files and directories to store.")],
) -> None:
    """Compress local files and directories into a new ZIP archive."""
    explorer = get_explorer()
    ok = _run_with_status(f"Writing {archive}", explorer.compress, inputs, archive)
    _report(ok, f"Created {archive}", f"Could not create {archive}")


@app.command("fingerprint")
def show_fingerprint(
    path: Annotated[str, typer.Argument(help="Local directory.")],
) -> None:
    """Print the change fingerprint of a directory."""
    explorer = get_explorer()
    typer.echo(str(explorer.fingerprint(path)))


@app.command("watch")
def watch(
    path: Annotated[str, typer.Argument(help="Local directory to watch.")],
    interval: Annotated[
        float,
        typer.Option("--interval", "-i", min=0.1, help="Seconds between polls."),
    ] = 2.0,
    count: Annotated[
        int | None,
        typer.Option("--count", "-n", min=1, help="Stop after this many polls."),
    ] = None,
) -> None:
    """Poll a directory and report when its contents change."""
    explorer = get_explorer()
    detector = ChangeDetector(scheme=explorer.router.scheme)
    detector.has_changed(path)
    print_info(f"Watching {path} (Ctrl+C to stop)")

    polls = 0
    try:
        while count is None or polls < count:
            time.sleep(interval)
            polls += 1
            if detector.has_changed(path):
                console.print(f"[warning]changed[/] {escape(path)}")
    except KeyboardInterrupt:
        raise typer.Exit(code=0) from None


# === Private helper functions ===


def _guarded(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Call fn, turning a malformed device path into a CLI error."""
    try:
        return fn(*args, **kwargs)
    except MalformedPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _run_with_status(message: str, fn: Callable[..., bool], *args: Any) -> bool:
    """Run a blocking operation on a worker thread behind a spinner."""
    with console.status(escape(message)):
        future = run_detached(fn, *args)
        return bool(_guarded(future.result))


def _report(ok: bool, success: str, failure: str) -> None:
    if ok:
        print_success(success)
        return
    print_error(failure)
    raise typer.Exit(code=1)


def _print_json(items: list[FileSystemItem]) -> None:
    data = [
        {"name": item.name, "path": item.path, "is_directory": item.is_directory}
        for item in items
    ]
    console.print_json(json.dumps(data))
