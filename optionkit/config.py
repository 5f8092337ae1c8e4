# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for options records declared in YAML or TOML.

Example (YAML):
    name: LogOptions
    options:
      - name: verbosity
        key: verbose
        type: integer
        default: 0
        usage: the verbosity level with which to read the logs
      - name: log_name
        usage: the log to read

`loader(path)` returns a dataclass implementing `OptionsType`, whose fields are
evaluated in the order they are declared in the file.
"""
from __future__ import annotations

import keyword
from dataclasses import make_dataclass
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from optionkit.argument_type import get_argument_type_by_name
from optionkit.combinators import combine
from optionkit.evaluation import evaluate, evaluate_bool
from optionkit.exceptions import (
    ConfigError,
    OptionDefinitionError,
    UnknownArgumentTypeError,
)
from optionkit.logger import logger
from optionkit.mode import CommandMode
from optionkit.option import BoolOption, Option
from optionkit.result import Result

BOOLEAN_TYPE_NAMES = ("boolean", "bool")
RESERVED_NAMES = ("evaluate",)


class RawOption(BaseModel):
    """Raw option model for an options configuration file."""

    name: str
    usage: str
    key: str | None = None
    type: str = "string"
    default: Any = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"'{value}' is not a valid field name.")
        if keyword.iskeyword(value) or value in RESERVED_NAMES:
            raise ValueError(f"'{value}' is reserved and cannot be a field name.")
        return value

    @field_validator("usage")
    @classmethod
    def validate_usage(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("usage must be a non-empty string.")
        return value

    @field_validator("key")
    @classmethod
    def validate_key(cls, value: str | None) -> str | None:
        if value is not None and (not value.strip() or value.startswith("-")):
            raise ValueError(
                f"key '{value}' must be non-empty and written without leading dashes."
            )
        return value

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized in BOOLEAN_TYPE_NAMES:
            return "boolean"
        try:
            get_argument_type_by_name(normalized)
        except UnknownArgumentTypeError as error:
            raise ValueError(str(error)) from None
        return normalized

    @model_validator(mode="after")
    def validate_boolean_key(self) -> RawOption:
        if self.type == "boolean" and not self.key:
            raise ValueError(f"Boolean option '{self.name}' requires a key.")
        if self.type == "boolean" and self.default is not None:
            if not isinstance(self.default, bool):
                raise ValueError(f"Default for '{self.name}' must be true or false.")
        return self

    def to_option(self) -> Option[Any] | BoolOption:
        if self.type == "boolean":
            return BoolOption(key=self.key, usage=self.usage, default=self.default)
        argument_type = get_argument_type_by_name(self.type)
        default = self.default
        if default is not None and not isinstance(default, str):
            default = str(default)
        if default is not None:
            default = argument_type.from_string(default)
            if default is None:
                raise ConfigError(
                    f"Default for '{self.name}' is not a valid {argument_type.name}: "
                    f"{self.default!r}"
                )
        return Option(key=self.key, default=default, usage=self.usage, type=argument_type)


class OptionsConfig(BaseModel):
    """Options record declared in a configuration file."""

    name: str = "ConfiguredOptions"
    options: list[RawOption] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self) -> OptionsConfig:
        names = [option.name for option in self.options]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate option names: {', '.join(duplicates)}")
        if not self.options:
            raise ValueError("At least one option must be declared.")
        return self

    def to_options_type(self) -> type:
        """Build a dataclass implementing `OptionsType` from this configuration."""
        try:
            declared = [(raw.name, raw.to_option()) for raw in self.options]
        except OptionDefinitionError as error:
            logger.error("Invalid option in %s: %s", self.name, error)
            raise ConfigError(f"Invalid option in '{self.name}': {error}") from error

        def evaluate_options(cls, mode: CommandMode) -> Result[Any]:
            results = [
                (
                    evaluate_bool(mode, option)
                    if isinstance(option, BoolOption)
                    else evaluate(mode, option)
                )
                for _, option in declared
            ]
            return combine(cls, *results)

        options_type = make_dataclass(
            self.name,
            [(name, Any) for name, _ in declared],
            namespace={"evaluate": classmethod(evaluate_options)},
            frozen=True,
        )
        logger.debug(
            "Built options type %s with %d options", self.name, len(declared)
        )
        return options_type


def loader(file_path: Path | str) -> type:
    """
    Load an options record from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        type: A dataclass implementing `OptionsType`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ConfigError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of options.\n"
            "Example:\n"
            "name: 'LogOptions'\n"
            "options:\n"
            "  - name: 'log_name'\n"
            "    usage: 'the log to read'"
        )

    try:
        config = OptionsConfig(**raw_config)
    except ValidationError as error:
        logger.error("Invalid options config '%s': %s", path, error)
        raise ConfigError(f"Invalid options config '{path}':\n{error}") from error
    return config.to_options_type()
