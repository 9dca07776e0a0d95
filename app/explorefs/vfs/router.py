"""Path classification and node dispatch.

A path is a device path iff it contains the scheme prefix (``adb://`` by
default) anywhere in the string; everything else is a local path handed to
the OS unchanged.
"""

import logging
import re

from explorefs.bridge.client import DeviceBridgeClient
from explorefs.models.items import Backend, LocalBackend, RemoteBackend
from explorefs.vfs.base import VirtualFile
from explorefs.vfs.local import LocalFile
from explorefs.vfs.remote import RemoteFile

logger = logging.getLogger(__name__)


class MalformedPathError(ValueError):
    """Raised when a device path has no usable serial.

    This signals a bug in whatever built the path, so it is raised rather
    than folded into a False result.
    """


class PathRouter:
    """Classifies path strings and builds the matching node.

    Args:
        client: Bridge client shared by every RemoteFile this router creates.
        scheme: Scheme name marking device paths.
        repair_double_prefix: If True, ``adb://X/adb://X/p`` is collapsed to
            ``adb://X/p``. If False, such paths raise MalformedPathError.
    """

    def __init__(
        self,
        client: DeviceBridgeClient,
        *,
        scheme: str = "adb",
        repair_double_prefix: bool = True,
    ) -> None:
        self._client = client
        self._scheme = scheme
        self._prefix = f"{scheme}://"
        self._repair = repair_double_prefix
        self._pattern = re.compile(re.escape(self._prefix) + r"([^/]+)(/.*)?\Z", re.DOTALL)

    @property
    def client(self) -> DeviceBridgeClient:
        """Bridge client used for device operations."""
        return self._client

    @property
    def scheme(self) -> str:
        """Scheme name, without ``://``."""
        return self._scheme

    @property
    def prefix(self) -> str:
        """Scheme prefix including ``://``."""
        return self._prefix

    def is_remote(self, path: str) -> bool:
        """Check whether a path addresses a device."""
        return self._prefix in path

    def canonicalize(self, path: str) -> str:
        """Collapse a doubly-prefixed device path to a single prefix.

        The first prefix occurrence is stripped; if the remainder still holds
        the prefix, the payload after the second occurrence is re-wrapped
        with one prefix. Otherwise the path is returned unchanged.

        Raises:
            MalformedPathError: If the path is doubly prefixed and repair
                is disabled.
        """
        if not self.is_remote(path):
            return path
        remainder = path.replace(self._prefix, "", 1)
        if self._prefix not in remainder:
            return path

        if not self._repair:
            raise MalformedPathError(f"Doubly-prefixed device path: {path}")

        payload = path.split(self._prefix, 2)[2]
        repaired = self._prefix + payload
        logger.warning("Repaired doubly-prefixed path %s -> %s", path, repaired)
        return repaired

    def classify(self, path: str) -> Backend:
        """Decide which backend a path belongs to.

        Returns:
            LocalBackend with the path verbatim, or RemoteBackend with the
            serial and device path (``/`` when none is given).

        Raises:
            MalformedPathError: If a device path has no serial.
        """
        if not self.is_remote(path):
            return LocalBackend(path=path)

        canonical = self.canonicalize(path)
        match = self._pattern.search(canonical)
        if match is None:
            raise MalformedPathError(f"Invalid device path: {path}")

        serial, device_path = match.group(1), match.group(2) or "/"
        return RemoteBackend(scheme=self._scheme, serial=serial, device_path=device_path)

    def resolve(self, path: str, is_directory: bool | None = None) -> VirtualFile:
        """Build the node for a path.

        Args:
            path: Local or device path.
            is_directory: Known directory flag for device paths, saving the
                round trip a lazy check would cost. Ignored for local paths.

        Raises:
            MalformedPathError: If a device path has no serial.
        """
        backend = self.classify(path)
        if isinstance(backend, RemoteBackend):
            return RemoteFile(backend.serial, backend.device_path, self, is_directory=is_directory)
        return LocalFile(backend.path, self)

    def device_path(self, serial: str, device_path: str) -> str:
        """Build the canonical path string for a device location."""
        return RemoteBackend(scheme=self._scheme, serial=serial, device_path=device_path).path
