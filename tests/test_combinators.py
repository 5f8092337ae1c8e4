import pytest

from optionkit.combinators import apply, combine, fmap
from optionkit.errors import (
    CompoundError,
    ErrorKind,
    invalid_argument_error,
    missing_argument_error,
)
from optionkit.result import Failure, Success

MISSING_LOG = Failure(missing_argument_error("the log to read"))
MISSING_OUT = Failure(missing_argument_error("--out"))
INVALID_VERBOSE = Failure(invalid_argument_error("--verbose", "12abc", "integer"))


def test_fmap_success():
    assert fmap(lambda value: value * 2, Success(21)) == Success(42)


def test_fmap_failure_passes_through():
    assert fmap(lambda value: value * 2, MISSING_LOG) is MISSING_LOG


def test_apply_both_succeed():
    assert apply(Success(lambda value: value + 1), Success(1)) == Success(2)


def test_apply_left_failure_unchanged():
    assert apply(MISSING_OUT, Success(1)) is MISSING_OUT


def test_apply_right_failure_unchanged():
    assert apply(Success(lambda value: value), MISSING_LOG) is MISSING_LOG


def test_apply_merges_both_failures():
    result = apply(MISSING_OUT, MISSING_LOG)
    assert isinstance(result, Failure)
    assert isinstance(result.error, CompoundError)
    assert result.error.kind is ErrorKind.COMPOUND
    assert "--out" in result.error.message
    assert "the log to read" in result.error.message
    assert result.error.errors == (MISSING_OUT.error, MISSING_LOG.error)


def test_combine_all_succeed():
    result = combine(lambda a, b, c: (a, b, c), Success(1), Success("x"), Success(True))
    assert result == Success((1, "x", True))


def test_combine_single_result():
    assert combine(str, Success(5)) == Success("5")


def test_combine_single_failure_unchanged():
    result = combine(lambda a, b, c: (a, b, c), Success(1), MISSING_OUT, Success(3))
    assert result is MISSING_OUT


def test_combine_keeps_declaration_order():
    result = combine(
        lambda a, b, c: (a, b, c), INVALID_VERBOSE, MISSING_OUT, MISSING_LOG
    )
    assert isinstance(result, Failure)
    assert result.error.kinds == (
        ErrorKind.INVALID_ARGUMENT,
        ErrorKind.MISSING_ARGUMENT,
        ErrorKind.MISSING_ARGUMENT,
    )
    assert [error.option for error in result.error.errors] == [
        "--verbose",
        "--out",
        "the log to read",
    ]


def test_combine_requires_results():
    with pytest.raises(ValueError):
        combine(tuple)
