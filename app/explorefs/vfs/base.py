"""Abstract base class for filesystem nodes.

A node is a stateless view over one path. Nodes are built on demand by
PathRouter.resolve() and own no persistent resource.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from explorefs.models.items import FileSystemItem

if TYPE_CHECKING:
    from explorefs.vfs.router import PathRouter

logger = logging.getLogger(__name__)


class VirtualFile(ABC):
    """Uniform operations over a local or device path.

    Exactly two implementations exist: LocalFile and RemoteFile. Operations
    report failure by returning False (or an empty list) and never raise for
    ordinary runtime problems.

    Example:
        >>> node = router.resolve("adb://ABC123/sdcard/DCIM")
        >>> for child in node.list_files():
        ...     print(child.name, child.is_directory)
        >>> node.copy_to("/home/me/Pictures/DCIM")
    """

    def __init__(self, router: PathRouter) -> None:
        self._router = router

    @property
    @abstractmethod
    def name(self) -> str:
        """Last path segment."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Full addressable path string."""

    @property
    @abstractmethod
    def is_directory(self) -> bool:
        """Whether this node is a directory."""

    @abstractmethod
    def list_files(self) -> list[VirtualFile]:
        """List children; empty when the node is missing or not a directory."""

    @abstractmethod
    def rename_to(self, new_path: str) -> bool:
        """Rename this node to new_path on the same backend."""

    @abstractmethod
    def copy_to(self, dest_path: str) -> bool:
        """Copy this node (recursively for directories) to dest_path."""

    @abstractmethod
    def delete(self) -> bool:
        """Delete this node (recursively for directories)."""

    def move_to(self, dest_path: str) -> bool:
        """Copy to dest_path, then delete the source if the copy succeeded.

        A failed copy leaves the source untouched.
        """
        if not self.copy_to(dest_path):
            return False
        if not self.delete():
            logger.warning("Copied %s to %s but could not remove the source", self.path, dest_path)
        return True

    def to_item(self) -> FileSystemItem:
        """Snapshot this node as a FileSystemItem."""
        return FileSystemItem(name=self.name, path=self.path, is_directory=self.is_directory)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"
