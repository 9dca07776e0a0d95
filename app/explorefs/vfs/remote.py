"""Device node backed by adb commands.

Each operation is one or more blocking adb invocations. Listing a
directory costs one ``ls`` plus one directory test per child.
"""

from __future__ import annotations

import logging
import os
import posixpath
from pathlib import Path
from typing import TYPE_CHECKING

from explorefs.models.items import RemoteBackend
from explorefs.vfs.base import VirtualFile

if TYPE_CHECKING:
    from explorefs.vfs.router import PathRouter

logger = logging.getLogger(__name__)


class RemoteFile(VirtualFile):
    """Node for a path on an attached device.

    Args:
        serial: Device serial.
        device_path: POSIX path on the device.
        router: Router supplying the bridge client and path formatting.
        is_directory: Known directory flag. If None, it is queried from the
            device on first access and remembered.
    """

    def __init__(
        self,
        serial: str,
        device_path: str,
        router: PathRouter,
        *,
        is_directory: bool | None = None,
    ) -> None:
        super().__init__(router)
        self._serial = serial
        self._device_path = device_path
        self._is_directory = is_directory

    @property
    def serial(self) -> str:
        return self._serial

    @property
    def device_path(self) -> str:
        return self._device_path

    @property
    def name(self) -> str:
        return posixpath.basename(self._device_path.rstrip("/")) or "/"

    @property
    def path(self) -> str:
        return self._router.device_path(self._serial, self._device_path)

    @property
    def is_directory(self) -> bool:
        if self._is_directory is None:
            self._is_directory = self._router.client.is_directory(self._serial, self._device_path)
        return self._is_directory

    def list_files(self) -> list[VirtualFile]:
        return self._children() or []

    def rename_to(self, new_path: str) -> bool:
        """Rename within the same device with ``mv``."""
        target = self._router.classify(new_path)
        if not isinstance(target, RemoteBackend):
            logger.warning("Cannot rename device path %s to local %s", self.path, new_path)
            return False
        if target.serial != self._serial:
            logger.warning("Cannot rename across devices: %s -> %s", self.path, new_path)
            return False
        return self._router.client.rename(self._serial, self._device_path, target.device_path)

    def copy_to(self, dest_path: str) -> bool:
        """Copy to another device path, or pull to the local disk.

        Device-to-device copies stage through a local temp directory.
        Device-to-local copies of directories recreate the tree and pull
        one leaf file at a time, stopping at the first failure. A directory
        that cannot be listed fails the copy.
        """
        client = self._router.client
        target = self._router.classify(dest_path)
        if isinstance(target, RemoteBackend):
            return client.copy(self._serial, self._device_path, target.serial, target.device_path)

        if not self.is_directory:
            return client.pull(self._serial, self._device_path, dest_path)

        children = self._children()
        if children is None:
            logger.error("Cannot list %s; nothing copied", self.path)
            return False
        try:
            Path(dest_path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Cannot create %s: %s", dest_path, e)
            return False
        return all(child.copy_to(os.path.join(dest_path, child.name)) for child in children)

    def delete(self) -> bool:
        return self._router.client.delete(self._serial, self._device_path)

    def _children(self) -> list[VirtualFile] | None:
        client = self._router.client
        names = client.read_directory(self._serial, self._device_path)
        if names is None:
            return None
        children: list[VirtualFile] = []
        for name in names:
            child_path = posixpath.join(self._device_path, name)
            children.append(
                RemoteFile(
                    self._serial,
                    child_path,
                    self._router,
                    is_directory=client.is_directory(self._serial, child_path),
                )
            )
        return children
