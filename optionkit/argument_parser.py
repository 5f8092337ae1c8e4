# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the consumable argument store that option evaluation reads from.

`ArgumentStore` is the protocol `evaluate` depends on. `ArgumentParser` is the
bundled implementation: it tokenizes a raw argument vector once, then hands out
values as options ask for them, removing every token it returns.

Tokenization rules:
- `--key` is a key token.
- `--key=value` is a key token followed by a value token.
- A bare `--` ends key parsing; every later token is a value.
- Anything else (including negative numbers like `-3`) is a value token.

Consumption:
- `consume_value_for_key("out")` removes `--out VALUE` and returns VALUE.
  `--out` with no following value is a failure, and so is `--out` given more
  than once (every occurrence and its value is removed). An absent key is
  `Success(None)`.
- `consume_boolean_key("force")` removes every `--force` / `--no-force` and
  returns the sense of the last one, or None if neither was given.
- `consume_positional_argument()` removes and returns the first remaining value.

Example:
    store = ArgumentParser(["--verbose", "3", "mylog"])
    store.consume_value_for_key("verbose")   # Success("3")
    store.consume_positional_argument()      # "mylog"
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence, runtime_checkable

from optionkit.errors import duplicate_key_error, missing_value_error
from optionkit.logger import logger
from optionkit.result import Failure, Result, Success


@runtime_checkable
class ArgumentStore(Protocol):
    def consume_value_for_key(self, key: str) -> Result[str | None]: ...

    def consume_boolean_key(self, key: str) -> bool | None: ...

    def consume_positional_argument(self) -> str | None: ...


class TokenKind(Enum):
    KEY = "key"
    VALUE = "value"


@dataclass(frozen=True)
class RawArgument:
    """One tokenized command-line argument."""

    kind: TokenKind
    text: str

    def __str__(self) -> str:
        if self.kind is TokenKind.KEY:
            return f"--{self.text}"
        return self.text


def tokenize(arguments: Sequence[str]) -> list[RawArgument]:
    """Split raw command-line strings into key and value tokens."""
    tokens: list[RawArgument] = []
    keys_allowed = True
    for argument in arguments:
        if keys_allowed and argument == "--":
            keys_allowed = False
            continue
        if keys_allowed and argument.startswith("--") and len(argument) > 2:
            key, separator, value = argument[2:].partition("=")
            tokens.append(RawArgument(TokenKind.KEY, key))
            if separator:
                tokens.append(RawArgument(TokenKind.VALUE, value))
            continue
        tokens.append(RawArgument(TokenKind.VALUE, argument))
    return tokens


class ArgumentParser:
    """
    Consumable store of tokenized command-line arguments.

    Each consume method removes what it returns, so a value can only be
    handed to one option. Evaluate keyed options before positional ones so
    that values bound to keys are gone before positionals are read.
    """

    def __init__(self, arguments: Sequence[str]) -> None:
        self._tokens: list[RawArgument] = tokenize(arguments)
        logger.debug("Tokenized %d arguments -> %s", len(arguments), self._tokens)

    @property
    def remaining(self) -> list[str]:
        """The raw text of every token not yet consumed."""
        return [str(token) for token in self._tokens]

    def _index_of_key(self, key: str) -> int | None:
        for index, token in enumerate(self._tokens):
            if token.kind is TokenKind.KEY and token.text == key:
                return index
        return None

    def _remove_key_with_value(self, index: int) -> str | None:
        del self._tokens[index]
        if index < len(self._tokens) and self._tokens[index].kind is TokenKind.VALUE:
            return self._tokens.pop(index).text
        return None

    def consume_value_for_key(self, key: str) -> Result[str | None]:
        index = self._index_of_key(key)
        if index is None:
            return Success(None)

        occurrences = sum(
            1
            for token in self._tokens
            if token.kind is TokenKind.KEY and token.text == key
        )
        if occurrences > 1:
            while index is not None:
                self._remove_key_with_value(index)
                index = self._index_of_key(key)
            logger.debug("Key --%s was given %d times", key, occurrences)
            return Failure(duplicate_key_error(key))

        value = self._remove_key_with_value(index)
        if value is not None:
            logger.debug("Consumed --%s -> %r", key, value)
            return Success(value)

        logger.debug("Key --%s was given without a value", key)
        return Failure(missing_value_error(key))

    def consume_boolean_key(self, key: str) -> bool | None:
        negated = f"no-{key}"
        result: bool | None = None
        kept: list[RawArgument] = []
        for token in self._tokens:
            if token.kind is TokenKind.KEY and token.text == key:
                result = True
            elif token.kind is TokenKind.KEY and token.text == negated:
                result = False
            else:
                kept.append(token)
        self._tokens = kept
        if result is not None:
            logger.debug("Consumed boolean --%s -> %s", key, result)
        return result

    def consume_positional_argument(self) -> str | None:
        for index, token in enumerate(self._tokens):
            if token.kind is TokenKind.VALUE:
                del self._tokens[index]
                logger.debug("Consumed positional -> %r", token.text)
                return token.text
        return None

    def __str__(self) -> str:
        return f"ArgumentParser(remaining={self.remaining})"

    def __repr__(self) -> str:
        return str(self)
