# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the error values carried by failed option evaluations.

Errors are plain, immutable values. They are returned inside a `Failure`,
never raised, so that several independent option evaluations can all report
what went wrong in a single pass.

Contents:
- `ErrorKind`: Tag describing what went wrong.
- `CommandError`: A single error produced by one option evaluation.
- `CompoundError`: An ordered group of errors merged by the `apply` combinator.
- `combine_errors`: Merge two errors, flattening nested compounds.
- Factories used by evaluation: `invalid_argument_error`,
  `missing_argument_error`, `informative_usage_error`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from optionkit.logger import logger


class ErrorKind(Enum):
    """
    Tag for the reason an option evaluation failed.

    Members:
        INVALID_ARGUMENT: A supplied value failed type conversion.
        MISSING_ARGUMENT: A required option received no value.
        INFORMATIVE_USAGE: Not a user mistake; usage text was requested.
        COMPOUND: Several errors merged together.
    """

    INVALID_ARGUMENT = "invalid_argument"
    MISSING_ARGUMENT = "missing_argument"
    INFORMATIVE_USAGE = "informative_usage"
    COMPOUND = "compound"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CommandError:
    """
    Represents one failed option evaluation.

    Attributes:
        kind (ErrorKind): What went wrong.
        message (str): Human-readable message.
        option (str | None): Description of the option involved (`--key` or
            the positional usage text).
        usage (str | None): The option's usage text, set for informative
            usage errors.
        key (str | None): The option's key, if it is flag-style.
        required (bool): True if the option has no default.
        type_name (str | None): Display name of the option's value type.
        default (Any): The option's default value, if any.
    """

    kind: ErrorKind
    message: str
    option: str | None = None
    usage: str | None = None
    key: str | None = None
    required: bool = False
    type_name: str | None = None
    default: Any = None

    @property
    def errors(self) -> tuple[CommandError, ...]:
        return (self,)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class CompoundError:
    """An ordered, flat group of errors produced by merging failures."""

    errors: tuple[CommandError, ...]

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.COMPOUND

    @property
    def message(self) -> str:
        return "\n".join(error.message for error in self.errors)

    @property
    def kinds(self) -> tuple[ErrorKind, ...]:
        return tuple(error.kind for error in self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        return self.message


Error = CommandError | CompoundError


def leaf_errors(error: Error) -> tuple[CommandError, ...]:
    """Return the individual errors contained in `error`, in order."""
    return error.errors


def combine_errors(left: Error, right: Error) -> CompoundError:
    """
    Merge two errors into one compound error.

    Nested compounds are flattened so the result always lists the original
    errors in the order they were produced.
    """
    merged = CompoundError(errors=left.errors + right.errors)
    logger.debug("Merged errors -> %d total", len(merged))
    return merged


def invalid_argument_error(
    description: str, value: str, type_name: str | None = None
) -> CommandError:
    message = f"Invalid value for '{description}': {value}"
    if type_name:
        message = f"{message} (expected {type_name})"
    return CommandError(
        kind=ErrorKind.INVALID_ARGUMENT, message=message, option=description
    )


def missing_argument_error(description: str) -> CommandError:
    return CommandError(
        kind=ErrorKind.MISSING_ARGUMENT,
        message=f"Missing argument for {description}",
        option=description,
    )


def missing_value_error(key: str) -> CommandError:
    description = f"--{key}"
    return CommandError(
        kind=ErrorKind.INVALID_ARGUMENT,
        message=f"Missing value for `{description}`",
        option=description,
    )


def duplicate_key_error(key: str) -> CommandError:
    description = f"--{key}"
    return CommandError(
        kind=ErrorKind.INVALID_ARGUMENT,
        message=f"`{description}` was given more than once",
        option=description,
    )


def informative_usage_error(
    description: str,
    usage: str,
    *,
    key: str | None = None,
    required: bool = False,
    type_name: str | None = None,
    default: Any = None,
) -> CommandError:
    """
    Build the error returned for every option evaluated in `Usage` mode.

    The message reads `--key (default)` followed by the usage text on the
    next line, or just the usage text for positional options.
    """
    if key is None:
        message = usage
    elif default is not None:
        message = f"{description} ({default})\n\t{usage}"
    else:
        message = f"{description}\n\t{usage}"
    return CommandError(
        kind=ErrorKind.INFORMATIVE_USAGE,
        message=message,
        option=description,
        usage=usage,
        key=key,
        required=required,
        type_name=type_name,
        default=default,
    )
