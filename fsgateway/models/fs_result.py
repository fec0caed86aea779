"""Module: fs_result.py

Date: 2026-10-19

Result type for filesystem operations.

Every gateway operation has a ``try_*`` form returning an :class:`FsResult`.
The value is always the safe default the plain form returns, so callers can
ignore the fault entirely or inspect ``fault`` and ``error`` when they need
the reason.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class FaultKind(Enum):
    """Categories every filesystem failure collapses into."""

    NONE = "none"
    IO_FAULT = "io_fault"  # Permission denied, missing path, device error, cross-device
    NOT_APPLICABLE = "not_applicable"  # Path exists but is the wrong type


@dataclass(frozen=True)
class FsResult(Generic[T]):
    """Outcome of a filesystem operation.

    Attributes:
        value: The operation result, or its safe default on failure
        fault: Which failure category applies, NONE on success
        error: The absorbed exception, if any

    """

    value: T
    fault: FaultKind = FaultKind.NONE
    error: OSError | ValueError | None = None

    @property
    def ok(self) -> bool:
        """True when the operation completed without a fault."""
        return self.fault is FaultKind.NONE

    @property
    def reason(self) -> str:
        """Human-readable fault reason, empty on success."""
        if self.error is not None:
            return str(self.error)
        if self.fault is FaultKind.NOT_APPLICABLE:
            return "not applicable"
        return ""

    @classmethod
    def success(cls, value: T) -> FsResult[T]:
        return cls(value)

    @classmethod
    def failure(cls, default: T, error: OSError | ValueError | None = None) -> FsResult[T]:
        return cls(default, FaultKind.IO_FAULT, error)

    @classmethod
    def not_applicable(cls, value: T) -> FsResult[T]:
        return cls(value, FaultKind.NOT_APPLICABLE)
