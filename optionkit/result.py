# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Success` and `Failure`, the two variants of an option evaluation result.

A `Result` is exactly one of:
- `Success(value)`: the evaluation produced a value.
- `Failure(error)`: the evaluation failed with a `CommandError` or `CompoundError`.

There are no partial states. Both variants are frozen.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from optionkit.errors import Error
from optionkit.exceptions import ResultUnwrapError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful evaluation holding `value`."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> Success[U]:
        return Success(func(self.value))


@dataclass(frozen=True)
class Failure:
    """A failed evaluation holding `error`."""

    error: Error

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ResultUnwrapError(f"Tried to unwrap a failed result: {self.error}")

    def map(self, func: Callable[[Any], Any]) -> Failure:
        return self


Result = Success[T] | Failure
