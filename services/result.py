"""
Result type returned by match setup services.

Services report user-correctable failures (wrong phase, bad input, missing
permission) as values instead of exceptions so that command handlers can reply
to the invoking player without any state having been touched.

Usage:
    return Result.ok(entry)
    return Result.fail("You are not in the queue.", code=NOT_QUEUED)

    result = await queue_service.leave(player_id)
    if not result:
        await safe_reply(ctx, result.error)
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a service call.

    Attributes:
        success: Whether the operation was applied
        value: Payload on success (None for void operations)
        error: Player-facing message on failure
        error_code: One of the codes in services.error_codes
    """

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
        """
        Get the value, raising ValueError if the result is a failure.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore

    def unwrap_or(self, default: T) -> T:
        return self.value if self.success else default  # type: ignore

    def map(self, fn: Callable[[T], "Result"]) -> "Result":
        """Chain a follow-up operation onto a successful result."""
        if not self.success:
            return self
        return fn(self.value)
