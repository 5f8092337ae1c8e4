# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandMode`, the two ways a set of options can be evaluated.

- `Arguments(store)`: Parse real arguments, consuming tokens from `store`.
- `Usage()`: Produce usage text; every option evaluates to an informative
  usage failure.

A mode is built once per parse attempt. In `Arguments` mode the store is owned
by the mode and consumed in declaration order, so one mode instance should not
be reused for a second parse.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optionkit.argument_parser import ArgumentStore


@dataclass(frozen=True, eq=False)
class Arguments:
    """Evaluate options against the tokens held by `store`."""

    store: ArgumentStore


@dataclass(frozen=True)
class Usage:
    """Evaluate options to collect their usage text."""


CommandMode = Arguments | Usage
