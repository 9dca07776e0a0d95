"""adb command client.

Every call spawns one adb subprocess and blocks until it exits. Exit code 0
means success; anything else, including a missing binary or a timeout,
folds into False or an empty list. stderr only ever reaches the log.
"""

import logging
import posixpath
import shlex
import subprocess
import tempfile
from pathlib import Path

from explorefs.models.items import AndroidDevice
from explorefs.utils.shell import CommandResult, run_command

logger = logging.getLogger(__name__)

# Trailing token of an `adb devices` line for a usable device
READY_STATE = "device"
_DEVICES_HEADER = "List of devices attached"
_MODEL_PROPERTY = "ro.product.model"


class DeviceBridgeClient:
    """Runs adb commands against attached devices.

    Args:
        bridge_path: Path to the adb executable, or None if it was not found.
            With no path every operation fails closed.
        manager_path: Executable used for device enumeration and property
            queries. Defaults to bridge_path.
        timeout: Seconds to wait for a single command.

    Example:
        >>> client = DeviceBridgeClient("/usr/bin/adb")
        >>> for device in client.list_devices():
        ...     print(device.serial, client.list_directory(device.serial, "/sdcard"))
    """

    def __init__(
        self,
        bridge_path: str | None,
        *,
        manager_path: str | None = None,
        timeout: float = 300.0,
    ) -> None:
        self._bridge_path = bridge_path
        self._manager_path = manager_path or bridge_path
        self._timeout = timeout

    @property
    def bridge_path(self) -> str | None:
        """Path of the adb executable in use."""
        return self._bridge_path

    def is_available(self) -> bool:
        """Check if a bridge executable was configured or discovered."""
        return self._bridge_path is not None

    # -- file operations ---------------------------------------------------

    def is_directory(self, serial: str, path: str) -> bool:
        """Test whether a device path is a directory.

        Returns:
            True only if the device shell answered ``dir``.
        """
        result = self._shell(serial, f"[ -d {shlex.quote(path)} ] && echo dir || echo not")
        if result is None or not result.success:
            return False
        lines = result.lines
        return bool(lines) and lines[0].strip() == "dir"

    def list_directory(self, serial: str, path: str) -> list[str]:
        """List the entry names of a device directory.

        The ``.`` and ``..`` pseudo-entries and blank lines are dropped.

        Returns:
            Entry names in device order, or an empty list on failure.
        """
        return self.read_directory(serial, path) or []

    def read_directory(self, serial: str, path: str) -> list[str] | None:
        """Like list_directory, but None when ``ls`` fails.

        Callers that delete after copying need this to tell an empty
        directory from one that could not be read.
        """
        result = self._shell(serial, f"ls -1a {shlex.quote(path)}")
        if result is None or not result.success:
            return None
        names: list[str] = []
        for line in result.lines:
            name = line.rstrip("\r")
            if not name.strip() or name in (".", ".."):
                continue
            names.append(name)
        return names

    def make_directory(self, serial: str, path: str) -> bool:
        """Create a device directory and any missing parents."""
        result = self._shell(serial, f"mkdir -p {shlex.quote(path)}")
        return result is not None and result.success

    def pull(self, serial: str, remote_path: str, local_path: str) -> bool:
        """Copy a device file or directory to the local disk."""
        result = self._run_bridge(["-s", serial, "pull", remote_path, local_path])
        if result is not None and not result.success:
            logger.error("Error pulling %s from %s: %s", remote_path, serial, result.stderr.strip())
        return result is not None and result.success

    def push(self, local_path: str, serial: str, remote_path: str) -> bool:
        """Copy a local file or directory to the device."""
        result = self._run_bridge(["-s", serial, "push", local_path, remote_path])
        if result is not None and not result.success:
            logger.error("Error pushing %s to %s: %s", local_path, serial, result.stderr.strip())
        return result is not None and result.success

    def delete(self, serial: str, path: str) -> bool:
        """Recursively delete a device path."""
        result = self._shell(serial, f"rm -rf {shlex.quote(path)}")
        return result is not None and result.success

    def rename(self, serial: str, old_path: str, new_path: str) -> bool:
        """Move or rename a path on one device."""
        result = self._shell(serial, f"mv {shlex.quote(old_path)} {shlex.quote(new_path)}")
        return result is not None and result.success

    def copy(self, src_serial: str, src_path: str, dst_serial: str, dst_path: str) -> bool:
        """Copy between device paths by pulling to a local temp dir and pushing back.

        This works the same whether both paths are on one device or on two.
        """
        if not self.is_available():
            return False
        name = posixpath.basename(src_path.rstrip("/")) or "root"
        with tempfile.TemporaryDirectory(prefix="explorefs-") as tmp_dir:
            staged = str(Path(tmp_dir) / name)
            if not self.pull(src_serial, src_path, staged):
                return False
            return self.push(staged, dst_serial, dst_path)

    # -- device discovery --------------------------------------------------

    def list_devices(self) -> list[AndroidDevice]:
        """List attached devices in the ready state.

        Returns:
            One AndroidDevice per ready device; empty when none are attached
            or the management tool is unavailable.
        """
        result = self._run(self._manager_path, ["devices"])
        if result is None or not result.success:
            return []

        devices: list[AndroidDevice] = []
        for raw in result.lines:
            line = raw.strip()
            if not line or line.startswith(_DEVICES_HEADER):
                continue
            if not line.endswith(READY_STATE):
                continue
            serial = line.split("\t")[0].split()[0]
            name = self.get_device_name(serial) or serial
            devices.append(AndroidDevice(serial=serial, name=name))
        return devices

    def get_device_name(self, serial: str) -> str | None:
        """Read the device model name, or None if the query fails."""
        result = self._run(
            self._manager_path,
            ["-s", serial, "shell", "getprop", _MODEL_PROPERTY],
        )
        if result is None or not result.success or not result.lines:
            return None
        return result.lines[0].strip() or None

    # -- plumbing ----------------------------------------------------------

    def _shell(self, serial: str, command: str) -> CommandResult | None:
        return self._run_bridge(["-s", serial, "shell", command])

    def _run_bridge(self, args: list[str]) -> CommandResult | None:
        return self._run(self._bridge_path, args)

    def _run(self, executable: str | None, args: list[str]) -> CommandResult | None:
        """Run one command, returning None when it could not run to completion."""
        if executable is None:
            logger.warning("adb is not available; skipping: %s", " ".join(args))
            return None

        command = [executable, *args]
        logger.debug("Executing: %s", " ".join(command))
        try:
            result = run_command(command, timeout=self._timeout)
        except subprocess.TimeoutExpired:
            logger.error("Command timed out after %ss: %s", self._timeout, " ".join(command))
            return None
        except OSError as e:
            logger.error("Cannot run %s: %s", executable, e)
            return None

        if not result.success:
            logger.debug(
                "Command exited with %d: %s (%s)",
                result.returncode,
                " ".join(command),
                result.stderr.strip(),
            )
        return result
