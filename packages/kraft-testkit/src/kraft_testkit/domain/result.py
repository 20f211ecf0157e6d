"""Per-entry result value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from kraft_testkit.domain.api_error import ApiError

T = TypeVar("T")


@dataclass(frozen=True)
class ResultOrError(Generic[T]):
    """Either a successful result or an ApiError, never both.

    Used as the value type of per-entry result mappings: a miss for one key
    is carried here instead of failing the whole operation.

    Attributes:
        result: The successful value, or None when this is an error.
        error: The error, or None when this is a result.

    Example:
        >>> ResultOrError.of("alpha").is_result()
        True
    """

    result: T | None = None
    error: ApiError | None = None

    def __post_init__(self) -> None:
        """Validate that exactly one side is populated."""
        if (self.result is None) == (self.error is None):
            raise ValueError("ResultOrError requires exactly one of result or error")

    @classmethod
    def of(cls, result: T) -> ResultOrError[T]:
        """Create a successful entry."""
        return cls(result=result)

    @classmethod
    def failed(cls, error: ApiError) -> ResultOrError[T]:
        """Create an error entry."""
        return cls(error=error)

    def is_result(self) -> bool:
        return self.error is None

    def is_error(self) -> bool:
        return self.error is not None
