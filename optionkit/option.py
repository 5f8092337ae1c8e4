# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Option` and `BoolOption`, the immutable descriptors for one command-line
parameter.

Each descriptor carries:
- `key`: The flag name. `key="verbose"` is supplied as `--verbose`. An `Option`
  without a key is positional.
- `default`: The value used when nothing is supplied. `None` makes the option
  required.
- `usage`: Human-readable help text shown in usage screens.

`Option` additionally carries the `ArgumentType` used to convert the raw token.
`BoolOption` is a flag (`--key` / `--no-key`) and therefore always has a key;
declaring one without a key fails immediately with `OptionDefinitionError`.

For boolean options the usage text should describe the effect of flipping the
flag away from its default.

Example:
    Option(key="verbose", default=0, usage="the verbosity level", type=int)
    Option(usage="the log to read")
    BoolOption(key="dry-run", default=False, usage="print what would happen")
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from optionkit.argument_type import ArgumentType, get_argument_type
from optionkit.exceptions import OptionDefinitionError, UnknownArgumentTypeError

T = TypeVar("T")


def _validate_usage(usage: str) -> None:
    if not isinstance(usage, str) or not usage.strip():
        raise OptionDefinitionError("Option usage text must be a non-empty string.")


def _validate_key(key: str | None) -> None:
    if key is None:
        return
    if not isinstance(key, str) or not key.strip():
        raise OptionDefinitionError("Option key must be a non-empty string or None.")
    if key.startswith("-"):
        raise OptionDefinitionError(
            f"Option key '{key}' must not include leading dashes; use '{key.lstrip('-')}'."
        )


@dataclass(frozen=True)
class Option(Generic[T]):
    """
    Describes an option that can be provided on the command line.

    Attributes:
        key (str | None): Flag name without dashes, or None for a positional option.
        default (T | None): Default value; None means the option is required.
        usage (str): Help text for the option.
        type (ArgumentType | type): Converter for the raw token, or a Python
            type resolved through the `ArgumentType` registry.
    """

    usage: str
    key: str | None = None
    default: T | None = None
    type: Any = str
    argument_type: ArgumentType[T] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _validate_usage(self.usage)
        _validate_key(self.key)
        try:
            argument_type = get_argument_type(self.type)
        except UnknownArgumentTypeError as error:
            raise OptionDefinitionError(
                f"Option '{self.key or self.usage}' has an unsupported type: {error}"
            ) from error
        object.__setattr__(self, "argument_type", argument_type)

    @property
    def required(self) -> bool:
        return self.default is None

    @property
    def positional(self) -> bool:
        return self.key is None

    @property
    def description(self) -> str:
        """`--key` for flag-style options, the usage text for positional ones."""
        if self.key is not None:
            return f"--{self.key}"
        return self.usage

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True)
class BoolOption:
    """
    Describes a boolean flag.

    Attributes:
        key (str): Flag name without dashes. Required.
        default (bool | None): Default value; None means the flag is required.
        usage (str): Help text describing the effect of toggling the flag.
    """

    key: str
    usage: str
    default: bool | None = None

    def __post_init__(self) -> None:
        if self.key is None:
            raise OptionDefinitionError(
                f"Boolean option '{self.usage}' must have a key; "
                "booleans have no positional form."
            )
        _validate_key(self.key)
        _validate_usage(self.usage)
        if self.default is not None and not isinstance(self.default, bool):
            raise OptionDefinitionError(
                f"Default for '--{self.key}' must be a bool, "
                f"got '{type(self.default).__name__}'."
            )

    @property
    def required(self) -> bool:
        return self.default is None

    @property
    def type_name(self) -> str:
        return "boolean"

    @property
    def description(self) -> str:
        return f"--{self.key}"

    def __str__(self) -> str:
        return self.description
