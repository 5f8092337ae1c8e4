# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Combinators that build one result out of several independent option results.

- `fmap(func, result)`: Apply `func` to a successful value.
- `apply(func_result, value_result)`: Apply a wrapped function to a wrapped
  value. When both sides failed, the two errors are merged so that no
  option's error is lost.
- `combine(constructor, *results)`: Chain `fmap` and `apply` left to right
  and call `constructor(*values)` once every result succeeded.

Results must be combined in declaration order so merged errors read in that
order too.

Example:
    @dataclass
    class LogOptions:
        verbosity: int
        output_filename: str
        log_name: str

        @classmethod
        def evaluate(cls, mode):
            return combine(
                cls,
                evaluate(mode, Option(key="verbose", default=0, usage="...", type=int)),
                evaluate(mode, Option(key="outputFilename", default="", usage="...")),
                evaluate(mode, Option(usage="the log to read")),
            )
"""
from __future__ import annotations

from typing import Any, Callable, TypeVar

from optionkit.errors import combine_errors
from optionkit.result import Failure, Result, Success

T = TypeVar("T")
U = TypeVar("U")


def fmap(func: Callable[[T], U], result: Result[T]) -> Result[U]:
    """Apply `func` to the value in `result`; failures pass through unchanged."""
    if isinstance(result, Failure):
        return result
    return Success(func(result.value))


def apply(func_result: Result[Callable[[T], U]], value_result: Result[T]) -> Result[U]:
    """
    Apply the function in `func_result` to the value in `value_result`.

    - Both failed: a single failure merging both errors, left first.
    - One failed: that failure, unchanged.
    - Both succeeded: `Success(func(value))`.
    """
    if isinstance(func_result, Failure) and isinstance(value_result, Failure):
        return Failure(combine_errors(func_result.error, value_result.error))
    if isinstance(func_result, Failure):
        return func_result
    if isinstance(value_result, Failure):
        return value_result
    return Success(func_result.value(value_result.value))


def _append(values: tuple[Any, ...]) -> Callable[[Any], tuple[Any, ...]]:
    return lambda value: (*values, value)


def combine(constructor: Callable[..., T], *results: Result[Any]) -> Result[T]:
    """
    Combine independent results into `constructor(*values)`.

    Every result is inspected, so a failure anywhere does not hide failures
    that come after it.

    Raises:
        ValueError: If no results are given.
    """
    if not results:
        raise ValueError("combine() requires at least one result.")

    first, *rest = results
    collected: Result[tuple[Any, ...]] = fmap(lambda value: (value,), first)
    for result in rest:
        collected = apply(fmap(_append, collected), result)
    return fmap(lambda values: constructor(*values), collected)
