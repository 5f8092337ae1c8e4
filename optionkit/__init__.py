"""
Optionkit CLI Options Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_parser import ArgumentParser, ArgumentStore
from .argument_type import ArgumentType, get_argument_type, register_argument_type
from .combinators import apply, combine, fmap
from .errors import CommandError, CompoundError, ErrorKind
from .evaluation import evaluate, evaluate_bool
from .logger import logger
from .mode import Arguments, CommandMode, Usage
from .option import BoolOption, Option
from .options import OptionsType, collect_usage, parse_options
from .result import Failure, Result, Success

__all__ = [
    "ArgumentParser",
    "ArgumentStore",
    "ArgumentType",
    "Arguments",
    "BoolOption",
    "CommandError",
    "CommandMode",
    "CompoundError",
    "ErrorKind",
    "Failure",
    "Option",
    "OptionsType",
    "Result",
    "Success",
    "Usage",
    "apply",
    "collect_usage",
    "combine",
    "evaluate",
    "evaluate_bool",
    "fmap",
    "get_argument_type",
    "logger",
    "parse_options",
    "register_argument_type",
]
