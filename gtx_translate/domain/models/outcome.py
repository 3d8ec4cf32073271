from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Success/failure value returned by the ``*_catching`` translator calls."""

    value: Optional[T] = None
    error: Optional[Exception] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome requires exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> Outcome[T]:
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def get_or_raise(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value

    def get_or_none(self) -> Optional[T]:
        return self.value
