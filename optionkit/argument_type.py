# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentType` conversion contract and the registry of built-in types.

An `ArgumentType` turns one raw command-line token into a typed value. It has a
fixed display `name` used in error messages and generated usage text, and a
`from_string` method that returns `None` when the token cannot be converted.
Conversion never raises on malformed input.

Built-in types:
- IntegerArgument ("integer"): strict base-10 integers; "12abc" is rejected.
- StringArgument ("string"): identity.
- FloatArgument ("float")
- PathArgument ("path")
- DateTimeArgument ("datetime"): parsed with `python-dateutil`.
- EnumArgument: resolves an `Enum` member by name, then by value.

Booleans are deliberately absent. Boolean options are flags, handled by
`BoolOption` and `evaluate_bool`, never string-converted.

Example:
    get_argument_type(int).from_string("42")     → 42
    get_argument_type(int).from_string("12abc")  → None
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum, EnumMeta
from pathlib import Path
from typing import Any, Generic, TypeVar

from dateutil import parser as date_parser

from optionkit.exceptions import UnknownArgumentTypeError
from optionkit.logger import logger

T = TypeVar("T")


class ArgumentType(ABC, Generic[T]):
    """Converts a raw command-line token into a value of type `T`."""

    name: str = ""

    @abstractmethod
    def from_string(self, raw: str) -> T | None:
        """Return the converted value, or None if `raw` is not valid."""

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class IntegerArgument(ArgumentType[int]):
    name = "integer"

    def from_string(self, raw: str) -> int | None:
        # int() would accept digit separators like "1_000"
        if "_" in raw:
            return None
        try:
            return int(raw, 10)
        except ValueError:
            return None


class StringArgument(ArgumentType[str]):
    name = "string"

    def from_string(self, raw: str) -> str | None:
        return raw


class FloatArgument(ArgumentType[float]):
    name = "float"

    def from_string(self, raw: str) -> float | None:
        try:
            return float(raw)
        except ValueError:
            return None


class PathArgument(ArgumentType[Path]):
    name = "path"

    def from_string(self, raw: str) -> Path | None:
        if not raw:
            return None
        return Path(raw)


class DateTimeArgument(ArgumentType[datetime]):
    name = "datetime"

    def from_string(self, raw: str) -> datetime | None:
        try:
            return date_parser.parse(raw)
        except (ValueError, OverflowError):
            return None


class EnumArgument(ArgumentType[Enum]):
    """
    Converts a token into a member of `enum_type`.

    Resolution tries the member name first, then the member value, coercing
    the token to the type of the first member's value.
    """

    def __init__(self, enum_type: EnumMeta) -> None:
        self.enum_type = enum_type
        self.name = enum_type.__name__.lower()

    def from_string(self, raw: str) -> Enum | None:
        try:
            return self.enum_type[raw]
        except KeyError:
            pass

        first_member = next(iter(self.enum_type), None)
        if first_member is None:
            return None
        base_type = type(first_member.value)
        try:
            return self.enum_type(base_type(raw))
        except (ValueError, TypeError):
            return None

    @property
    def choices(self) -> list[str]:
        return [str(member.value) for member in self.enum_type]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EnumArgument) and self.enum_type is other.enum_type

    def __hash__(self) -> int:
        return hash((EnumArgument, self.enum_type))


INTEGER = IntegerArgument()
STRING = StringArgument()
FLOAT = FloatArgument()
PATH = PathArgument()
DATETIME = DateTimeArgument()

_REGISTRY: dict[type, ArgumentType[Any]] = {
    int: INTEGER,
    str: STRING,
    float: FLOAT,
    Path: PATH,
    datetime: DATETIME,
}


def register_argument_type(value_type: type, argument_type: ArgumentType[Any]) -> None:
    """
    Register `argument_type` as the converter for `value_type`.

    Registering `bool` is rejected because boolean options are flags.
    """
    if value_type is bool:
        raise UnknownArgumentTypeError(
            "bool cannot be registered; use BoolOption for boolean flags."
        )
    if not isinstance(argument_type, ArgumentType):
        raise TypeError(
            f"Expected an ArgumentType instance, got '{type(argument_type).__name__}'."
        )
    if value_type in _REGISTRY:
        logger.warning(
            "Replacing ArgumentType for %s: %r -> %r",
            value_type.__name__,
            _REGISTRY[value_type],
            argument_type,
        )
    _REGISTRY[value_type] = argument_type


def get_argument_type(value_type: Any) -> ArgumentType[Any]:
    """
    Resolve the `ArgumentType` for `value_type`.

    Args:
        value_type: An `ArgumentType` instance (returned as-is), an `Enum`
            subclass, or a type registered with `register_argument_type`.

    Raises:
        UnknownArgumentTypeError: If no converter is known for `value_type`.
    """
    if isinstance(value_type, ArgumentType):
        return value_type
    if isinstance(value_type, EnumMeta):
        return EnumArgument(value_type)
    if value_type is bool:
        raise UnknownArgumentTypeError(
            "bool has no string conversion; use BoolOption for boolean flags."
        )
    try:
        return _REGISTRY[value_type]
    except (KeyError, TypeError):
        name = getattr(value_type, "__name__", repr(value_type))
        raise UnknownArgumentTypeError(
            f"No ArgumentType registered for '{name}'."
        ) from None


def get_argument_type_by_name(name: str) -> ArgumentType[Any]:
    """Resolve a registered `ArgumentType` by its display name (e.g. "integer")."""
    normalized = name.strip().lower()
    for argument_type in _REGISTRY.values():
        if argument_type.name == normalized:
            return argument_type
    valid = ", ".join(sorted(argument_type.name for argument_type in _REGISTRY.values()))
    raise UnknownArgumentTypeError(
        f"Unknown argument type '{name}'. Must be one of: {valid}"
    )
