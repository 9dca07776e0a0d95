"""Virtual filesystem over local disk and adb devices.

This module exports the path router and the two node implementations.
"""

from explorefs.vfs.base import VirtualFile
from explorefs.vfs.local import LocalFile
from explorefs.vfs.remote import RemoteFile
from explorefs.vfs.router import MalformedPathError, PathRouter

__all__ = [
    "LocalFile",
    "MalformedPathError",
    "PathRouter",
    "RemoteFile",
    "VirtualFile",
]
