"""Filesystem gateway implementation.

Date: 2026-10-19

Every disk interaction of the supervision tools goes through this module.
Each operation is a single call into the OS wrapped in a fault boundary:
platform faults are logged and mapped to a safe default (False, "", [] or
the unmodified input path) so call sites never handle exceptions.

Each operation exists in two forms. ``try_<name>`` returns an
:class:`~fsgateway.models.fs_result.FsResult` that carries the fault reason;
the plain form returns only the value.

Writes go through a sibling "<path>.new" file that is renamed over the
target, so a concurrent reader sees either the old or the new complete
content.

Usage:
    from fsgateway.services.filesystem_gateway import FilesystemGateway

    fs = FilesystemGateway()
    if fs.write(state_dir / "status", "up"):
        status = fs.read(state_dir / "status")
"""

from __future__ import annotations

import os
import stat
import threading
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from fsgateway.config import (
    CLEANUP_TEMP_ON_FAILURE,
    LINE_TERMINATOR,
    TEMP_FILE_SUFFIX,
    TEXT_ENCODING,
)
from fsgateway.models.fs_result import FaultKind, FsResult
from fsgateway.services.path_resolver import default_path_resolver
from fsgateway.utils.logging.logger_factory import get_cached_logger
from fsgateway.utils.logging.logger_helper import log_verbose

if TYPE_CHECKING:
    from fsgateway.services.interfaces import (
        FilesystemGatewayProtocol,
        PathLikeStr,
        PathResolverProtocol,
    )

logger = get_cached_logger(__name__)

# A missing path (or a missing parent) is "nothing found", not a fault
_MISSING_ERRORS = (FileNotFoundError, NotADirectoryError)


class FilesystemGateway:
    """Fault-tolerant filesystem facade.

    Implements FilesystemGatewayProtocol. Holds no mutable state and caches
    nothing it observes on disk, so one instance can be shared freely across
    threads. Prefer passing an instance to the components that need it;
    get_instance() provides the process-wide one for top-level wiring.
    """

    _instance: ClassVar[FilesystemGateway | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, path_resolver: PathResolverProtocol | None = None) -> None:
        """Initialize the gateway.

        Args:
            path_resolver: Native final-path capability used by
                canonical_unc_path(). Defaults to the one for this platform.

        """
        self._path_resolver = path_resolver if path_resolver is not None else default_path_resolver()

    @classmethod
    def get_instance(cls) -> FilesystemGateway:
        """Get the process-wide gateway, creating it on first use.

        Returns:
            The shared FilesystemGateway instance.

        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Created shared filesystem gateway")
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide gateway (useful for testing)."""
        with cls._instance_lock:
            cls._instance = None

    @property
    def path_resolver(self) -> PathResolverProtocol:
        return self._path_resolver

    @staticmethod
    def temp_path_for(path: PathLikeStr) -> Path:
        """Sibling path a write to ``path`` is staged through."""
        return Path(os.fspath(path) + TEMP_FILE_SUFFIX)

    # ---- read / write ----------------------------------------------------

    def try_read(self, path: PathLikeStr) -> FsResult[str]:
        log_verbose(logger, 5, "Reading file %s", path)
        try:
            with open(path, encoding=TEXT_ENCODING, newline="") as infile:
                return FsResult.success(infile.read())
        except (OSError, ValueError) as e:
            logger.warning("Failed to read file %s: %s", path, e)
            return FsResult.failure("", e)

    def read(self, path: PathLikeStr) -> str:
        """Read a whole text file.

        Args:
            path: File to read.

        Returns:
            The file content, or "" on any fault (missing file, directory,
            permission, undecodable content).

        """
        return self.try_read(path).value

    def try_write(self, path: PathLikeStr, content: str) -> FsResult[bool]:
        temp_path = self.temp_path_for(path)
        log_verbose(logger, 5, "Writing file %s", temp_path)
        opened = False
        try:
            with open(temp_path, "w", encoding=TEXT_ENCODING, newline="") as outfile:
                opened = True
                outfile.write(content)
                outfile.write(LINE_TERMINATOR)
                outfile.flush()
                os.fsync(outfile.fileno())
        except (OSError, ValueError) as e:
            logger.warning("Failed to write file %s: %s", temp_path, e)
            # A .new file this call never opened belongs to someone else
            if opened:
                self._discard_temp(temp_path)
            return FsResult.failure(False, e)

        result = self.try_rename(temp_path, path)
        if not result.ok:
            self._discard_temp(temp_path)
        return result

    def write(self, path: PathLikeStr, content: str) -> bool:
        """Replace a file's content atomically.

        The content plus a trailing line terminator is written to
        "<path>.new", which is then renamed over ``path``. If either step
        fails the temp file is removed and False is returned; the original
        file is left untouched.

        Args:
            path: Target file.
            content: Text to store.

        Returns:
            True if the new content is in place.

        """
        return self.try_write(path, content).value

    def _discard_temp(self, temp_path: Path) -> None:
        if CLEANUP_TEMP_ON_FAILURE and self.file_exists(temp_path):
            self.remove(temp_path)

    # ---- directories -----------------------------------------------------

    def try_change_directory(self, path: PathLikeStr) -> FsResult[bool]:
        try:
            os.chdir(path)
        except (OSError, ValueError) as e:
            logger.warning("Could not change directory %s: %s", path, e)
            return FsResult.failure(False, e)

        log_verbose(logger, 1, "Changed directory to %s", path)
        return FsResult.success(True)

    def change_directory(self, path: PathLikeStr) -> bool:
        """Set the process working directory; False if missing or inaccessible."""
        return self.try_change_directory(path).value

    def try_directory_exists(self, path: PathLikeStr) -> FsResult[bool]:
        return self._check_type(path, stat.S_ISDIR)

    def directory_exists(self, path: PathLikeStr) -> bool:
        """True only if ``path`` exists and is a directory (symlinks followed)."""
        return self.try_directory_exists(path).value

    def try_create_directory(self, path: PathLikeStr) -> FsResult[bool]:
        if self.directory_exists(path):
            return FsResult.success(True)

        try:
            os.mkdir(path)
        except FileExistsError as e:
            # Lost a race with another creator, or a non-directory is in the way
            if self.directory_exists(path):
                return FsResult.success(True)
            log_verbose(logger, 6, "Could not create directory %s", path)
            return FsResult(False, FaultKind.NOT_APPLICABLE, e)
        except (OSError, ValueError) as e:
            logger.warning("Could not create directory %s: %s", path, e)
            return FsResult.failure(False, e)

        log_verbose(logger, 1, "Created directory %s", path)
        return FsResult.success(True)

    def create_directory(self, path: PathLikeStr) -> bool:
        """Create a single directory level.

        Existing directories succeed without change. Parents are not created.

        Args:
            path: Directory to create.

        Returns:
            True if the directory exists afterwards.

        """
        return self.try_create_directory(path).value

    # ---- rename / remove -------------------------------------------------

    def try_rename(self, source: PathLikeStr, target: PathLikeStr) -> FsResult[bool]:
        log_verbose(logger, 5, "Renaming file %s to %s", source, target)
        try:
            os.replace(source, target)
        except (OSError, ValueError) as e:
            logger.warning("Could not rename %s to %s: %s", source, target, e)
            return FsResult.failure(False, e)
        return FsResult.success(True)

    def rename(self, source: PathLikeStr, target: PathLikeStr) -> bool:
        """Atomically move ``source`` over ``target``.

        Returns:
            False on any fault (missing source, cross-device move, locked
            target).

        """
        return self.try_rename(source, target).value

    def try_remove(self, path: PathLikeStr) -> FsResult[bool]:
        log_verbose(logger, 4, "Removing path %s", path)
        try:
            if stat.S_ISDIR(os.lstat(path).st_mode):
                os.rmdir(path)
            else:
                os.remove(path)
        except _MISSING_ERRORS:
            return FsResult.success(True)
        except (OSError, ValueError) as e:
            logger.warning("Could not remove path %s: %s", path, e)
            return FsResult.failure(False, e)
        return FsResult.success(True)

    def remove(self, path: PathLikeStr) -> bool:
        """Remove a file, a symlink or an empty directory.

        A path that does not exist counts as removed.

        Returns:
            False if the platform refused (non-empty directory, permission).

        """
        return self.try_remove(path).value

    # ---- existence -------------------------------------------------------

    def try_file_exists(self, path: PathLikeStr) -> FsResult[bool]:
        return self._check_type(path, stat.S_ISREG)

    def file_exists(self, path: PathLikeStr) -> bool:
        """True only if ``path`` exists and is a regular file (symlinks followed)."""
        return self.try_file_exists(path).value

    def _check_type(self, path: PathLikeStr, predicate) -> FsResult[bool]:
        try:
            mode = os.stat(path).st_mode
        except _MISSING_ERRORS:
            return FsResult.success(False)
        except (OSError, ValueError) as e:
            # Permission problems mean the path cannot be seen, so it does not exist
            logger.warning("Could not check path exists %s: %s", path, e)
            return FsResult.failure(False, e)

        if predicate(mode):
            return FsResult.success(True)
        return FsResult.not_applicable(False)

    # ---- canonicalization ------------------------------------------------

    def try_absolute(self, path: PathLikeStr) -> FsResult[Path]:
        try:
            return FsResult.success(Path(os.path.realpath(path, strict=True)))
        except (OSError, ValueError) as e:
            logger.warning("Could not get canonical path %s: %s", path, e)
            return FsResult.failure(Path(path), e)

    def absolute(self, path: PathLikeStr) -> Path:
        """Canonical absolute form of an existing path.

        Symlinks and relative segments are resolved.

        Returns:
            The canonical path, or ``Path(path)`` unchanged on fault.

        """
        return self.try_absolute(path).value

    def try_canonical_unc_path(self, path: PathLikeStr) -> FsResult[Path]:
        try:
            final_path = self._path_resolver.resolve_final_path(path)
        except (OSError, ValueError) as e:
            logger.warning("Native path resolution failed for %s: %s", path, e)
            final_path = None

        if final_path is None:
            return self.try_absolute(path)
        return FsResult.success(Path(final_path))

    def canonical_unc_path(self, path: PathLikeStr) -> Path:
        """Platform-canonical path resolved through an open handle.

        Falls back to absolute() when no handle can be obtained (missing
        path, permission denied, unsupported platform).

        Args:
            path: Path to canonicalize.

        Returns:
            The final path as the platform reports it.

        """
        return self.try_canonical_unc_path(path).value

    # ---- enumeration -----------------------------------------------------

    def try_get_directories(self, path: PathLikeStr) -> FsResult[list[Path]]:
        return self._list_children(path, want_directories=True)

    def get_directories(self, path: PathLikeStr) -> list[Path]:
        """Immediate children of ``path`` that are directories, sorted by name."""
        return self.try_get_directories(path).value

    def try_get_files(self, path: PathLikeStr) -> FsResult[list[Path]]:
        return self._list_children(path, want_directories=False)

    def get_files(self, path: PathLikeStr) -> list[Path]:
        """Immediate children of ``path`` that are not directories, sorted by name.

        Special files (sockets, FIFOs, devices) count as files.
        """
        return self.try_get_files(path).value

    def _list_children(self, path: PathLikeStr, want_directories: bool) -> FsResult[list[Path]]:
        kind = "directories" if want_directories else "files"
        children: list[Path] = []
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    try:
                        is_directory = entry.is_dir()
                    except OSError:
                        is_directory = False

                    if is_directory == want_directories:
                        children.append(Path(entry.path))
                    else:
                        log_verbose(
                            logger,
                            6,
                            "Skipping %s %s",
                            "directory" if is_directory else "non-directory",
                            entry.path,
                        )
        except (OSError, ValueError) as e:
            logger.warning("Could not iterate %s in %s: %s", kind, path, e)
            return FsResult.failure(self._ordered(children), e)

        return FsResult.success(self._ordered(children))

    @staticmethod
    def _ordered(children: list[Path]) -> list[Path]:
        return sorted(children, key=lambda child: child.name)


# Type assertion to verify protocol compliance
def _verify_protocol_compliance() -> None:
    """Verify that FilesystemGateway implements FilesystemGatewayProtocol."""
    gateway: FilesystemGatewayProtocol = FilesystemGateway()
    _ = gateway
