"""
Result type returned by the ladder service.

The ladder never raises for bad input: it hands back a failed Result whose
error_code comes from services.error_codes, e.g.

    result = ladder.record_game("Alice", True, "standard")
    if not result:
        print(f"{result.error_code}: {result.error}")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a ladder operation: a value on success, an error otherwise."""

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: str | None = None) -> "Result[T]":
        return cls(success=False, error=error, error_code=code)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """Return the value, or raise ValueError carrying the failure message."""
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore

    def map(self, fn: Callable[[T], "Result"]) -> "Result":
        """Feed a player (or other value) into the next lookup; failures pass through."""
        if not self.success:
            return self
        return fn(self.value)
