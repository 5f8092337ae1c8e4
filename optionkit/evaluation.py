# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Evaluates a single option in a given `CommandMode`.

There are two entry points:
- `evaluate(mode, option)`: For any `Option` whose value is converted from a
  string by its `ArgumentType`.
- `evaluate_bool(mode, option)`: For `BoolOption` flags, which are read from the
  store as `--key` / `--no-key` rather than converted from a string.

In `Usage` mode both return an informative usage failure. In `Arguments` mode,
an option that received no value falls back to its default, or fails with a
missing-argument error when it has none.
"""
from __future__ import annotations

from typing import Any, TypeVar

from optionkit.errors import (
    informative_usage_error,
    invalid_argument_error,
    missing_argument_error,
)
from optionkit.logger import logger
from optionkit.mode import Arguments, CommandMode, Usage
from optionkit.option import BoolOption, Option
from optionkit.result import Failure, Result, Success

T = TypeVar("T")


def _usage_failure(option: Option[Any] | BoolOption, type_name: str) -> Failure:
    return Failure(
        informative_usage_error(
            option.description,
            option.usage,
            key=option.key,
            required=option.required,
            type_name=type_name,
            default=option.default,
        )
    )


def _default_or_missing(option: Option[Any] | BoolOption) -> Result[Any]:
    if option.default is not None:
        logger.debug("%s not supplied, using default %r", option, option.default)
        return Success(option.default)
    logger.debug("%s not supplied and has no default", option)
    return Failure(missing_argument_error(option.description))


def evaluate(mode: CommandMode, option: Option[T]) -> Result[T]:
    """
    Evaluate `option` in `mode`.

    If parsing arguments and no value was specified on the command line,
    the option's `default` is used.

    Args:
        mode (CommandMode): `Arguments(store)` or `Usage()`.
        option (Option): The option to evaluate.

    Returns:
        Result: `Success(value)`, or a `Failure` carrying an invalid-argument,
        missing-argument, informative-usage or store error.
    """
    if not isinstance(option, Option):
        raise TypeError(f"Expected an Option, got '{type(option).__name__}'.")

    if isinstance(mode, Usage):
        return _usage_failure(option, option.argument_type.name)

    if not isinstance(mode, Arguments):
        raise TypeError(f"Expected a CommandMode, got '{type(mode).__name__}'.")

    store = mode.store
    if option.key is not None:
        consumed = store.consume_value_for_key(option.key)
        if isinstance(consumed, Failure):
            return consumed
        string_value = consumed.value
    else:
        string_value = store.consume_positional_argument()

    if string_value is None:
        return _default_or_missing(option)

    value = option.argument_type.from_string(string_value)
    if value is None:
        logger.debug("%s rejected %r as %s", option, string_value, option.argument_type)
        return Failure(
            invalid_argument_error(
                option.description, string_value, option.argument_type.name
            )
        )
    logger.debug("%s -> %r", option, value)
    return Success(value)


def evaluate_bool(mode: CommandMode, option: BoolOption) -> Result[bool]:
    """
    Evaluate the boolean flag `option` in `mode`.

    If parsing arguments and neither `--key` nor `--no-key` was given, the
    option's `default` is used.
    """
    if not isinstance(option, BoolOption):
        raise TypeError(
            f"Expected a BoolOption, got '{type(option).__name__}'; "
            "boolean flags need a key and are declared with BoolOption."
        )

    if isinstance(mode, Usage):
        return _usage_failure(option, option.type_name)

    if not isinstance(mode, Arguments):
        raise TypeError(f"Expected a CommandMode, got '{type(mode).__name__}'.")

    value = mode.store.consume_boolean_key(option.key)
    if value is None:
        return _default_or_missing(option)
    logger.debug("%s -> %s", option, value)
    return Success(value)
