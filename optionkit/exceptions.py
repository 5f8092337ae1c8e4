# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the exception classes raised by Optionkit for programmer errors.

Parse-time problems (a missing argument, a value that fails conversion, a
usage request) are never raised; they are returned as `Failure` results
carrying a `CommandError`. The exceptions below signal mistakes made while
*declaring* options or while misusing a result.

Exception Hierarchy:
- OptionKitError
    ├── OptionDefinitionError
    ├── UnknownArgumentTypeError
    ├── ResultUnwrapError
    └── ConfigError
"""


class OptionKitError(Exception):
    """Base exception for Optionkit."""


class OptionDefinitionError(OptionKitError):
    """Exception raised when an option is declared with invalid fields."""


class UnknownArgumentTypeError(OptionKitError):
    """Exception raised when no `ArgumentType` is registered for a value type."""


class ResultUnwrapError(OptionKitError):
    """Exception raised when unwrapping the value of a failed result."""


class ConfigError(OptionKitError):
    """Exception raised when an options configuration file cannot be loaded."""
