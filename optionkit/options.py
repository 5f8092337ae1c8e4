# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionsType` protocol and helpers that drive it.

An options record is any class with a classmethod `evaluate(mode)` returning a
`Result` of an instance of itself. The record wires its options through
`combine` (or `fmap` / `apply`) in declaration order; Optionkit supplies only
the combinators and the helpers below.

Helpers:
- `parse_options(options_type, arguments)`: Parse a raw argument list.
- `collect_usage(options_type)`: Gather the usage error of every option.
"""
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from optionkit.argument_parser import ArgumentParser
from optionkit.errors import CommandError, ErrorKind, leaf_errors
from optionkit.logger import logger
from optionkit.mode import Arguments, CommandMode, Usage
from optionkit.result import Failure, Result


@runtime_checkable
class OptionsType(Protocol):
    @classmethod
    def evaluate(cls, mode: CommandMode) -> Result[Any]: ...


def _check_options_type(options_type: Any) -> None:
    if not isinstance(options_type, OptionsType):
        raise TypeError(
            f"'{getattr(options_type, '__name__', options_type)}' does not define "
            "a classmethod evaluate(mode)."
        )


def parse_options(options_type: type, arguments: Sequence[str]) -> Result[Any]:
    """
    Parse `arguments` into an instance of `options_type`.

    Args:
        options_type (type): A class implementing `OptionsType`.
        arguments (Sequence[str]): Raw command-line arguments, without the
            program name.

    Returns:
        Result: The populated record, or a failure describing every problem.
    """
    _check_options_type(options_type)
    store = ArgumentParser(arguments)
    result = options_type.evaluate(Arguments(store))
    if store.remaining:
        logger.debug(
            "Unconsumed arguments after parsing %s: %s",
            options_type.__name__,
            store.remaining,
        )
    return result


def collect_usage(options_type: type) -> list[CommandError]:
    """
    Evaluate `options_type` in `Usage` mode and return each option's usage error.

    The errors are returned in declaration order.
    """
    _check_options_type(options_type)
    result = options_type.evaluate(Usage())
    if not isinstance(result, Failure):
        logger.debug("%s evaluated successfully in usage mode", options_type.__name__)
        return []
    return [
        error
        for error in leaf_errors(result.error)
        if error.kind is ErrorKind.INFORMATIVE_USAGE
    ]
