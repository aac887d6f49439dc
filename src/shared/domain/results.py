"""Two-state outcome wrapper for expected failures such as "not found"."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a success carrying a payload or a failure carrying a message.

    Use the ``success`` / ``failure`` constructors. A success may carry
    ``None`` as payload (operations with nothing to return), a failure
    always carries a non-empty message.
    """
    is_success: bool
    data: Optional[T] = None
    error_message: str = ""

    def __post_init__(self):
        if self.is_success and self.error_message:
            raise ValueError("A successful result cannot carry an error message")
        if not self.is_success:
            if self.data is not None:
                raise ValueError("A failed result cannot carry a payload")
            if not self.error_message:
                raise ValueError("A failed result requires an error message")

    @classmethod
    def success(cls, data: Optional[T] = None) -> Result[T]:
        return cls(is_success=True, data=data)

    @classmethod
    def failure(cls, error_message: str) -> Result[T]:
        return cls(is_success=False, error_message=error_message)

    @property
    def is_failure(self) -> bool:
        return not self.is_success
