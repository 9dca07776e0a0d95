"""Local disk node."""

from __future__ import annotations

import logging
import os
import posixpath
import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from explorefs.models.items import RemoteBackend
from explorefs.vfs.base import VirtualFile

if TYPE_CHECKING:
    from explorefs.vfs.router import PathRouter

logger = logging.getLogger(__name__)


class LocalFile(VirtualFile):
    """Node backed by a path on the local disk.

    Args:
        path: OS path, absolute or relative to the working directory.
        router: Router used to classify copy and rename destinations.
    """

    def __init__(self, path: str | os.PathLike[str], router: PathRouter) -> None:
        super().__init__(router)
        self._path = Path(path)

    @property
    def name(self) -> str:
        return self._path.name or str(self._path)

    @property
    def path(self) -> str:
        return os.path.abspath(self._path)

    @property
    def is_directory(self) -> bool:
        return self._path.is_dir()

    def list_files(self) -> list[VirtualFile]:
        if not self._path.is_dir():
            return []
        try:
            return [LocalFile(child, self._router) for child in self._path.iterdir()]
        except OSError as e:
            logger.warning("Cannot list %s: %s", self._path, e)
            return []

    def rename_to(self, new_path: str) -> bool:
        """Rename with the OS rename call.

        Fails if the source is missing, the destination already exists, or
        the destination is on a device.
        """
        if self._router.is_remote(new_path):
            logger.warning("Cannot rename local %s to device path %s", self._path, new_path)
            return False

        dest = Path(new_path)
        if not self._path.exists() and not self._path.is_symlink():
            return False
        if dest.exists() or dest.is_symlink():
            return False

        try:
            self._path.rename(dest)
        except OSError as e:
            logger.error("Rename %s -> %s failed: %s", self._path, dest, e)
            return False
        return True

    def copy_to(self, dest_path: str) -> bool:
        """Copy to a local path, or push to a device one leaf file at a time.

        Partially written destination files are left in place on failure.
        """
        backend = self._router.classify(dest_path)
        if isinstance(backend, RemoteBackend):
            return self._push_tree(self._path, backend.serial, backend.device_path, set())

        dest = Path(dest_path)
        try:
            if self._path.is_dir():
                if _is_within(dest, self._path):
                    logger.error("Cannot copy %s into itself (%s)", self._path, dest)
                    return False
                self._copy_tree(self._path, dest, set())
            else:
                if dest.exists() and os.path.samefile(self._path, dest):
                    logger.error("Cannot copy %s onto itself", self._path)
                    return False
                _copy_file(self._path, dest)
        except OSError as e:
            logger.error("Copy %s -> %s failed: %s", self._path, dest, e)
            return False
        return True

    def delete(self) -> bool:
        """Delete a file, symlink or whole directory tree.

        Returns:
            False if the path does not exist or deletion fails.
        """
        try:
            # Directories (but not symlinks to directories)
            if self._path.is_dir() and not self._path.is_symlink():
                shutil.rmtree(self._path)
                return True

            # Files, symlinks, and dead symlinks
            if self._path.exists() or self._path.is_symlink():
                self._path.unlink()
                return True

            return False
        except OSError as e:
            logger.error("Delete %s failed: %s", self._path, e)
            return False

    def _copy_tree(self, src: Path, dest: Path, ancestors: set[str]) -> None:
        # ancestors holds the real paths of the directories above src only
        real = os.path.realpath(src)
        if real in ancestors:
            logger.warning("Skipping %s: directory cycle through symlink", src)
            return
        ancestors.add(real)
        try:
            dest.mkdir(parents=True, exist_ok=True)
            for child in src.iterdir():
                target = dest / child.name
                if child.is_dir():
                    self._copy_tree(child, target, ancestors)
                else:
                    _copy_file(child, target)
        finally:
            ancestors.discard(real)

    def _push_tree(self, src: Path, serial: str, device_path: str, ancestors: set[str]) -> bool:
        client = self._router.client

        if not src.is_dir():
            if not src.exists():
                logger.error("Cannot push %s: no such file", src)
                return False
            return client.push(str(src), serial, device_path)

        real = os.path.realpath(src)
        if real in ancestors:
            logger.warning("Skipping %s: directory cycle through symlink", src)
            return True

        if not client.make_directory(serial, device_path):
            return False
        try:
            children = list(src.iterdir())
        except OSError as e:
            logger.error("Cannot list %s: %s", src, e)
            return False

        ancestors.add(real)
        try:
            return all(
                self._push_tree(child, serial, posixpath.join(device_path, child.name), ancestors)
                for child in children
            )
        finally:
            ancestors.discard(real)


def _copy_file(src: Path, dest: Path) -> None:
    with open(src, "rb") as source, open(dest, "wb") as target:
        shutil.copyfileobj(source, target)


def _is_within(path: Path, parent: Path) -> bool:
    return path.resolve().is_relative_to(parent.resolve())
