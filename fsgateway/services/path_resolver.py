"""Module: path_resolver.py

Date: 2026-10-19

Native final-path resolution through an open handle.

The gateway asks a resolver for the final form of a path and falls back to
generic canonicalization when the resolver returns None. Resolvers never
raise for an unavailable path.

Implementations:
    WindowsFinalPathResolver: CreateFileW + GetFinalPathNameByHandleW
    ProcFdPathResolver: open descriptor + /proc/self/fd readlink (Linux)
    UnsupportedPathResolver: always unavailable
"""

from __future__ import annotations

import ctypes
import os
import platform

from fsgateway.services.interfaces import PathLikeStr
from fsgateway.utils.logging.logger_factory import get_cached_logger
from fsgateway.utils.logging.logger_helper import log_verbose

logger = get_cached_logger(__name__)

# Win32 constants
GENERIC_READ = 0x80000000
FILE_SHARE_READ = 0x00000001
FILE_SHARE_WRITE = 0x00000002
OPEN_EXISTING = 3
FILE_FLAG_BACKUP_SEMANTICS = 0x02000000
VOLUME_NAME_DOS = 0x0

_PROC_FD_DIR = "/proc/self/fd"
_DELETED_MARKER = " (deleted)"


class UnsupportedPathResolver:
    """Resolver for platforms without a handle-based final-path query."""

    def resolve_final_path(self, path: PathLikeStr) -> str | None:
        _ = path
        return None


class WindowsFinalPathResolver:
    """Final-path resolver backed by the Win32 handle APIs.

    Directories are opened with FILE_FLAG_BACKUP_SEMANTICS so junctions and
    directory symlinks resolve too. The result keeps the volume-qualified
    ``\\\\?\\`` prefix the platform returns.

    The three kernel32 entry points can be passed in; any left as None are
    bound from kernel32, which is only possible on Windows.
    """

    def __init__(self, create_file=None, get_final_path=None, close_handle=None) -> None:
        if create_file is None or get_final_path is None or close_handle is None:
            bound_create, bound_query, bound_close = self._bind_kernel32()
            create_file = create_file or bound_create
            get_final_path = get_final_path or bound_query
            close_handle = close_handle or bound_close

        self._create_file = create_file
        self._get_final_path = get_final_path
        self._close_handle = close_handle
        self._invalid_handle = ctypes.c_void_p(-1).value

    @staticmethod
    def _bind_kernel32():
        from ctypes import wintypes

        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore[attr-defined]

        create_file = kernel32.CreateFileW
        create_file.argtypes = [
            wintypes.LPCWSTR,
            wintypes.DWORD,
            wintypes.DWORD,
            wintypes.LPVOID,
            wintypes.DWORD,
            wintypes.DWORD,
            wintypes.HANDLE,
        ]
        create_file.restype = wintypes.HANDLE

        get_final_path = kernel32.GetFinalPathNameByHandleW
        get_final_path.argtypes = [
            wintypes.HANDLE,
            wintypes.LPWSTR,
            wintypes.DWORD,
            wintypes.DWORD,
        ]
        get_final_path.restype = wintypes.DWORD

        close_handle = kernel32.CloseHandle
        close_handle.argtypes = [wintypes.HANDLE]
        close_handle.restype = wintypes.BOOL

        return create_file, get_final_path, close_handle

    @staticmethod
    def _last_error() -> int:
        # get_last_error only exists on Windows builds of ctypes
        get_last_error = getattr(ctypes, "get_last_error", None)
        return get_last_error() if get_last_error is not None else 0

    def resolve_final_path(self, path: PathLikeStr) -> str | None:
        path_str = os.fspath(path)
        handle = self._create_file(
            path_str,
            GENERIC_READ,
            FILE_SHARE_READ | FILE_SHARE_WRITE,
            None,
            OPEN_EXISTING,
            FILE_FLAG_BACKUP_SEMANTICS,
            None,
        )
        if handle is None or handle == self._invalid_handle:
            log_verbose(
                logger,
                5,
                "Could not open handle for %s (error %d)",
                path_str,
                self._last_error(),
            )
            return None

        try:
            bufsize = max(len(path_str) * 2, 1)
            while True:
                buffer = ctypes.create_unicode_buffer(bufsize + 1)
                length = self._get_final_path(handle, buffer, bufsize, VOLUME_NAME_DOS)
                if length == 0:
                    log_verbose(
                        logger,
                        5,
                        "Could not query final path for %s (error %d)",
                        path_str,
                        self._last_error(),
                    )
                    return None
                if length <= bufsize:
                    return buffer.value
                # Buffer too small; length is the size required
                bufsize = length
        finally:
            self._close_handle(handle)


class ProcFdPathResolver:
    """Final-path resolver reading the kernel's view of an open descriptor."""

    def __init__(self, proc_fd_dir: str = _PROC_FD_DIR) -> None:
        self._proc_fd_dir = proc_fd_dir
        # O_PATH only needs search permission on the parents
        self._open_flags = getattr(os, "O_PATH", os.O_RDONLY) | getattr(os, "O_CLOEXEC", 0)

    @property
    def available(self) -> bool:
        return os.path.isdir(self._proc_fd_dir)

    def resolve_final_path(self, path: PathLikeStr) -> str | None:
        if not self.available:
            return None

        try:
            fd = os.open(path, self._open_flags)
        except (OSError, ValueError) as e:
            log_verbose(logger, 5, "Could not open handle for %s: %s", path, e)
            return None

        try:
            final_path = os.readlink(os.path.join(self._proc_fd_dir, str(fd)))
        except OSError as e:
            log_verbose(logger, 5, "Could not query final path for %s: %s", path, e)
            return None
        finally:
            os.close(fd)

        # Anonymous or unlinked objects have no usable path
        if not final_path.startswith("/") or final_path.endswith(_DELETED_MARKER):
            return None
        return final_path


def default_path_resolver():
    """Pick the resolver for the running platform.

    Returns:
        A PathResolverProtocol implementation.

    """
    system = platform.system()
    if system == "Windows":
        return WindowsFinalPathResolver()
    if system == "Linux" and os.path.isdir(_PROC_FD_DIR):
        return ProcFdPathResolver()
    logger.debug("No native final-path resolver for %s, using generic fallback", system)
    return UnsupportedPathResolver()
