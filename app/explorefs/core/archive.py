"""ZIP archive creation.

Directories keep their own name as the first path segment inside the
archive; plain files land at the archive root.
"""

import logging
import os
import zipfile
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def compress(inputs: Iterable[str | os.PathLike[str]], archive_path: str | os.PathLike[str]) -> bool:
    """Write local files and directory trees into a new ZIP archive.

    Only leaf files are stored, each under its directory chain relative to
    the archive root, e.g. ``photos/2024/a.jpg`` for input ``photos``.
    A partially written archive is left on disk if writing fails.

    Args:
        inputs: Local files and directories to store.
        archive_path: Destination archive. Must not exist yet.

    Returns:
        True if every input was written, False otherwise.
    """
    archive = Path(archive_path)
    if archive.exists():
        logger.warning("Archive already exists: %s", archive)
        return False

    try:
        # mode "x" refuses to clobber a file created after the check above
        with zipfile.ZipFile(archive, "x", compression=zipfile.ZIP_DEFLATED) as zf:
            for item in inputs:
                source = Path(item)
                if source.is_dir():
                    _add_folder(zf, source, "", set())
                else:
                    _add_file(zf, source, "")
    except (OSError, zipfile.LargeZipFile) as e:
        logger.error("Failed to write archive %s: %s", archive, e)
        return False

    logger.info("Wrote archive %s", archive)
    return True


def _add_file(zf: zipfile.ZipFile, file: Path, prefix: str) -> None:
    zf.write(file, arcname=f"{prefix}{file.name}")


def _add_folder(zf: zipfile.ZipFile, folder: Path, prefix: str, ancestors: set[str]) -> None:
    # ancestors holds the real paths of the directories above folder only
    real = os.path.realpath(folder)
    if real in ancestors:
        logger.warning("Skipping %s: directory cycle through symlink", folder)
        return
    ancestors.add(real)

    child_prefix = f"{prefix}{folder.name}/"
    try:
        for child in folder.iterdir():
            if child.is_dir():
                _add_folder(zf, child, child_prefix, ancestors)
            else:
                _add_file(zf, child, child_prefix)
    finally:
        ancestors.discard(real)
