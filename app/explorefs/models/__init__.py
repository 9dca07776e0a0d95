"""Data models for explorefs.

This module exports the value types used by the filesystem layers.
"""

from explorefs.models.items import (
    AndroidDevice,
    Backend,
    FileSystemItem,
    LocalBackend,
    RemoteBackend,
)

__all__ = [
    "AndroidDevice",
    "Backend",
    "FileSystemItem",
    "LocalBackend",
    "RemoteBackend",
]
