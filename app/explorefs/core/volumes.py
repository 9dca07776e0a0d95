"""Filesystem roots and removable volume discovery."""

import getpass
import logging
import os
import string
import sys
from pathlib import Path

from explorefs.models.items import FileSystemItem

logger = logging.getLogger(__name__)

# macOS boot volume, always mounted and never removable
_SYSTEM_VOLUMES: frozenset[str] = frozenset({"Macintosh HD"})


def list_roots() -> list[FileSystemItem]:
    """List filesystem roots: drive letters on Windows, ``/`` elsewhere."""
    if sys.platform == "win32":
        roots = [f"{letter}:\\" for letter in string.ascii_uppercase if os.path.exists(f"{letter}:\\")]
    else:
        roots = ["/"]
    return [FileSystemItem(name=root, path=root, is_directory=True) for root in roots]


def default_mount_bases(platform: str | None = None, user: str | None = None) -> list[Path]:
    """Directories under which removable volumes get mounted on this platform.

    Args:
        platform: sys.platform value. Defaults to the running platform.
        user: Login name for per-user Linux mount points.
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return [Path("/Volumes")]
    if platform.startswith("linux"):
        if user is None:
            try:
                user = getpass.getuser()
            except (KeyError, OSError):
                return []
        return [Path("/media") / user, Path("/run/media") / user]
    return []


def list_volumes(bases: list[Path] | None = None) -> list[FileSystemItem]:
    """List mounted removable volumes such as USB drives or MTP mounts.

    Args:
        bases: Mount base directories to inspect. Defaults to
            default_mount_bases().

    Returns:
        One directory item per mounted volume, sorted by name.
    """
    volumes: list[FileSystemItem] = []
    for base in default_mount_bases() if bases is None else bases:
        if not base.is_dir():
            continue
        try:
            entries = sorted(base.iterdir())
        except PermissionError:
            logger.warning("Permission denied reading mount base: %s", base)
            continue
        for entry in entries:
            if entry.name in _SYSTEM_VOLUMES or not entry.is_dir():
                continue
            volumes.append(FileSystemItem(name=entry.name, path=str(entry), is_directory=True))
    return volumes
