"""
Service protocol definitions for fsgateway.

Date: 2026-10-19

Protocol classes that serve as interfaces for the filesystem gateway and its
native path-resolution capability. Consumers depend on these protocols and
receive an implementation through their constructor, which lets tests pass a
double instead of touching the disk.

All protocols are runtime-checkable, meaning isinstance() works with them.

Usage:
    from fsgateway.services.interfaces import FilesystemGatewayProtocol

    class ServiceDirectory:
        def __init__(self, fs: FilesystemGatewayProtocol) -> None:
            self._fs = fs
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

__all__ = [
    "FilesystemGatewayProtocol",
    "PathLikeStr",
    "PathResolverProtocol",
]

PathLikeStr = Union[str, "PathLike[str]"]


@runtime_checkable
class PathResolverProtocol(Protocol):
    """Capability to resolve the final canonical form of a path.

    Implementations open the path as a native handle and ask the platform
    for the path the handle actually refers to, which resolves symlinks,
    junctions and other reparse points.
    """

    def resolve_final_path(self, path: PathLikeStr) -> str | None:
        """Resolve the final path of an existing filesystem object.

        Args:
            path: Path to resolve.

        Returns:
            The final path string, or None when the handle cannot be
            obtained or the platform lacks the capability.
        """
        ...


@runtime_checkable
class FilesystemGatewayProtocol(Protocol):
    """Protocol for fault-tolerant filesystem access.

    No method raises on a filesystem fault. Failures come back as False, an
    empty string, an empty list or the unmodified input path.
    """

    def read(self, path: PathLikeStr) -> str:
        """Read a whole text file, or return "" on any fault."""
        ...

    def write(self, path: PathLikeStr, content: str) -> bool:
        """Replace a file's content atomically through a ".new" sibling."""
        ...

    def change_directory(self, path: PathLikeStr) -> bool:
        """Change the process working directory."""
        ...

    def directory_exists(self, path: PathLikeStr) -> bool:
        """True only for an existing directory."""
        ...

    def create_directory(self, path: PathLikeStr) -> bool:
        """Create a single directory level; existing directories succeed."""
        ...

    def rename(self, source: PathLikeStr, target: PathLikeStr) -> bool:
        """Atomically move source over target."""
        ...

    def remove(self, path: PathLikeStr) -> bool:
        """Remove a file or an empty directory."""
        ...

    def file_exists(self, path: PathLikeStr) -> bool:
        """True only for an existing regular file."""
        ...

    def absolute(self, path: PathLikeStr) -> Path:
        """Canonical absolute path, or the input unchanged on fault."""
        ...

    def canonical_unc_path(self, path: PathLikeStr) -> Path:
        """Handle-based final path, falling back to absolute()."""
        ...

    def get_directories(self, path: PathLikeStr) -> list[Path]:
        """Immediate children that are directories."""
        ...

    def get_files(self, path: PathLikeStr) -> list[Path]:
        """Immediate children that are not directories."""
        ...
