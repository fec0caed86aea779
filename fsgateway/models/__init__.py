"""Value types returned by fsgateway services."""

from fsgateway.models.fs_result import FaultKind, FsResult

__all__ = ["FaultKind", "FsResult"]
