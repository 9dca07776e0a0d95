"""Entry point for callers: path-string operations over both backends.

Every method takes plain path strings, picks the backend with the
PathRouter and reports the outcome as a bool or a list. Only a malformed
device path raises (MalformedPathError). Callers re-list the directory
after a mutating operation to refresh their view.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from explorefs.bridge.client import DeviceBridgeClient
from explorefs.bridge.discovery import find_bridge_binary
from explorefs.core import archive, volumes
from explorefs.core.config import ExplorerConfig
from explorefs.core.fingerprint import fingerprint
from explorefs.models.items import AndroidDevice, FileSystemItem
from explorefs.vfs.router import PathRouter

logger = logging.getLogger(__name__)

# Directory a device is opened at when picked from the device list
DEFAULT_DEVICE_ROOT = "/sdcard"


class FileExplorer:
    """Facade over the path router, bridge client, archive writer and fingerprinting.

    Args:
        router: Router that classifies paths and builds nodes.
        show_hidden: Default for including dot-entries in listings.
    """

    def __init__(self, router: PathRouter, *, show_hidden: bool = False) -> None:
        self._router = router
        self._show_hidden = show_hidden

    @classmethod
    def from_config(cls, config: ExplorerConfig | None = None) -> FileExplorer:
        """Build an explorer, locating adb once unless the config names it."""
        config = config or ExplorerConfig()
        bridge_path = config.adb_path or find_bridge_binary()
        if bridge_path is None:
            logger.warning("adb not found; device paths will be unavailable")
        client = DeviceBridgeClient(bridge_path, timeout=config.command_timeout)
        router = PathRouter(
            client,
            scheme=config.scheme,
            repair_double_prefix=config.repair_double_prefix,
        )
        return cls(router, show_hidden=config.show_hidden)

    @property
    def router(self) -> PathRouter:
        return self._router

    @property
    def client(self) -> DeviceBridgeClient:
        return self._router.client

    def list_entries(self, path: str, show_hidden: bool | None = None) -> list[FileSystemItem]:
        """List a directory.

        Args:
            path: Local or device directory.
            show_hidden: Include dot-entries. Defaults to the explorer setting.

        Returns:
            Entries of the directory; empty if it is missing or not a directory.
        """
        include_hidden = self._show_hidden if show_hidden is None else show_hidden
        items = [child.to_item() for child in self._router.resolve(path).list_files()]
        if include_hidden:
            return items
        return [item for item in items if not item.name.startswith(".")]

    def rename(self, old_path: str, new_path: str) -> bool:
        return self._router.resolve(old_path).rename_to(new_path)

    def copy(self, src_path: str, dest_path: str) -> bool:
        logger.info("Copying %s -> %s", src_path, dest_path)
        return self._router.resolve(src_path).copy_to(dest_path)

    def move(self, src_path: str, dest_path: str) -> bool:
        logger.info("Moving %s -> %s", src_path, dest_path)
        return self._router.resolve(src_path).move_to(dest_path)

    def delete(self, path: str) -> bool:
        logger.info("Deleting %s", path)
        return self._router.resolve(path).delete()

    def compress(self, paths: Sequence[str], archive_path: str) -> bool:
        """Compress local paths into a new ZIP archive.

        Device paths are not supported as inputs or as the archive location.
        """
        for path in (*paths, archive_path):
            if self._router.is_remote(path):
                logger.warning("Cannot compress device path: %s", path)
                return False
        return archive.compress(paths, archive_path)

    def list_devices(self) -> list[AndroidDevice]:
        return self.client.list_devices()

    def device_root(self, device: AndroidDevice) -> str:
        """Path a device is opened at, e.g. ``adb://SERIAL/sdcard``."""
        return self._router.device_path(device.serial, DEFAULT_DEVICE_ROOT)

    def fingerprint(self, path: str) -> int:
        return fingerprint(path, scheme=self._router.scheme)

    def list_roots(self) -> list[FileSystemItem]:
        return volumes.list_roots()

    def list_volumes(self) -> list[FileSystemItem]:
        return volumes.list_volumes()
