"""Uniform outcome type returned by every store operation."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    """
    Outcome of a repository operation.
    
    Anticipated failures (unknown branch, empty stage, ...) are reported
    as a Result with ``success=False`` instead of raising.
    
    Attributes:
        message: Human-readable description of what happened.
        success: Whether the operation succeeded.
        payload: Optional value produced by the operation (a commit,
            a branch, a stored object, ...). Always None on failure.
    """
    
    message: str
    success: bool = True
    payload: T | None = None
    
    @classmethod
    def ok(cls, message: str, payload: T | None = None) -> "Result[T]":
        """Build a successful result."""
        return cls(message=message, success=True, payload=payload)
    
    @classmethod
    def fail(cls, message: str) -> "Result[T]":
        """Build a failed result. Failures never carry a payload."""
        return cls(message=message, success=False)
    
    def is_success(self) -> bool:
        return self.success
    
    def is_error(self) -> bool:
        return not self.success
    
    def __bool__(self) -> bool:
        return self.success
    
    def __str__(self) -> str:
        return self.message
