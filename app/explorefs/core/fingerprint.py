"""Cheap directory change detection.

A fingerprint hashes each direct child's name and size in enumeration
order. It is not sorted, so it changes if the OS reorders entries, which
in practice it does not. Device paths are never fingerprinted.
"""

import hashlib
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Returned for device paths and for anything that is not a local directory
NO_FINGERPRINT = 0


def fingerprint(path: str, *, scheme: str = "adb") -> int:
    """Compute the change fingerprint of a local directory.

    Args:
        path: Directory to fingerprint.
        scheme: Device scheme name; paths containing it return NO_FINGERPRINT.

    Returns:
        A non-negative 64-bit integer, stable across processes.
    """
    if f"{scheme}://" in path:
        return NO_FINGERPRINT

    directory = Path(path)
    if not directory.is_dir():
        return NO_FINGERPRINT

    try:
        with os.scandir(directory) as entries:
            joined = "|".join(f"{entry.name}{_entry_size(entry)}" for entry in entries)
    except OSError as e:
        logger.warning("Cannot fingerprint %s: %s", directory, e)
        return NO_FINGERPRINT

    digest = hashlib.blake2b(joined.encode("utf-8", "surrogateescape"), digest_size=8)
    return int.from_bytes(digest.digest(), "big")


def _entry_size(entry: os.DirEntry[str]) -> int:
    try:
        return entry.stat().st_size
    except OSError:
        # dangling symlink
        return 0


class ChangeDetector:
    """Remembers the last fingerprint per path for polling loops.

    Example:
        >>> detector = ChangeDetector()
        >>> detector.has_changed("/home/me/Downloads")  # first call sets the baseline
        False
    """

    def __init__(self, *, scheme: str = "adb") -> None:
        self._scheme = scheme
        self._last: dict[str, int] = {}

    def has_changed(self, path: str) -> bool:
        """Fingerprint path and compare with the previous call for the same path.

        Returns:
            False on the first call for a path, then True whenever the
            fingerprint differs from the one seen last time.
        """
        current = fingerprint(path, scheme=self._scheme)
        previous = self._last.get(path)
        self._last[path] = current
        return previous is not None and previous != current

    def forget(self, path: str) -> None:
        """Drop the stored baseline for path."""
        self._last.pop(path, None)
