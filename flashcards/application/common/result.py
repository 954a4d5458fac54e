"""
Outcome type for services that report failures as values.

Example:
    result = parse_flashcard(payload)
    if result.is_failure:
        logger.warning("rejected", error=result.unwrap_error().message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Outcome holding a value."""

    value: T

    is_success = True
    is_failure = False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        raise ValueError("Success has no error")


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Outcome holding an error."""

    error: E

    is_success = False
    is_failure = True

    def unwrap(self) -> None:
        raise ValueError("Failure has no value")

    def unwrap_error(self) -> E:
        return self.error


Result = Success[T] | Failure[E]
