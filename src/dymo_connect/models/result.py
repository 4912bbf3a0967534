"""Uniform result type returned by every client operation."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of a client operation.

    On success ``data`` holds the operation's payload. On failure it holds
    the exception that stopped the operation, so callers must check
    ``success`` before trusting ``data``.
    """

    success: bool
    data: T | Exception

    @classmethod
    def ok(cls, data: T) -> "OperationResult[T]":
        """Build a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: Exception) -> "OperationResult[T]":
        """Build a failed result carrying the error."""
        return cls(success=False, data=error)

    @property
    def error(self) -> Exception | None:
        """The error on failure, None on success."""
        if self.success:
            return None
        return self.data  # type: ignore[return-value]
