import pytest

from optionkit.argument_parser import ArgumentParser
from optionkit.errors import ErrorKind
from optionkit.evaluation import evaluate_bool
from optionkit.mode import Arguments, Usage
from optionkit.option import BoolOption, Option
from optionkit.result import Failure, Success


def arguments(*tokens: str) -> Arguments:
    return Arguments(ArgumentParser(list(tokens)))


def test_required_flag_missing():
    option = BoolOption(key="verbose", usage="print more output")
    result = evaluate_bool(arguments(), option)
    assert isinstance(result, Failure)
    assert result.error.kind is ErrorKind.MISSING_ARGUMENT
    assert "--verbose" in result.error.message


def test_flag_enabled():
    option = BoolOption(key="verbose", default=False, usage="print more output")
    assert evaluate_bool(arguments("--verbose"), option) == Success(True)


def test_flag_disabled():
    option = BoolOption(key="color", default=True, usage="disable colored output")
    assert evaluate_bool(arguments("--no-color"), option) == Success(False)


@pytest.mark.parametrize("default", [True, False])
def test_flag_default(default):
    option = BoolOption(key="verbose", default=default, usage="print more output")
    assert evaluate_bool(arguments("other"), option) == Success(default)


@pytest.mark.parametrize("default", [None, True, False])
def test_usage_mode(default):
    option = BoolOption(key="verbose", default=default, usage="print more output")
    result = evaluate_bool(Usage(), option)
    assert result.error.kind is ErrorKind.INFORMATIVE_USAGE
    assert result.error.option == "--verbose"
    assert result.error.type_name == "boolean"


def test_unknown_mode_rejected():
    option = BoolOption(key="verbose", default=False, usage="print more output")
    with pytest.raises(TypeError):
        evaluate_bool(None, option)


@pytest.mark.parametrize("mode", [Usage(), Arguments(ArgumentParser([]))])
def test_keyless_option_rejected(mode):
    with pytest.raises(TypeError):
        evaluate_bool(mode, Option(usage="the log to read"))
