"""Value types shared across the filesystem layers.

Items are created fresh for every directory listing and never mutated;
equality is structural so they can key a multi-selection set.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileSystemItem:
    """One entry of a directory listing.

    Attributes:
        name: Display name (last path segment).
        path: Full addressable path; scheme-prefixed for device entries.
        is_directory: Whether the entry is a directory.
    """

    name: str
    path: str
    is_directory: bool


@dataclass(frozen=True, slots=True)
class AndroidDevice:
    """An attached device in the ready state.

    Attributes:
        serial: Opaque device identifier used for every bridge call.
        name: Human-readable model name, or the serial if unavailable.
    """

    serial: str
    name: str


@dataclass(frozen=True, slots=True)
class LocalBackend:
    """Classification result for a local disk path."""

    path: str


@dataclass(frozen=True, slots=True)
class RemoteBackend:
    """Classification result for a device path.

    Attributes:
        scheme: Scheme name without the ``://`` separator.
        serial: Device serial.
        device_path: POSIX path on the device, always starting with ``/``.
    """

    scheme: str
    serial: str
    device_path: str

    @property
    def path(self) -> str:
        """Canonical path string for this device location."""
        return f"{self.scheme}://{self.serial}{self.device_path}"


Backend = LocalBackend | RemoteBackend
