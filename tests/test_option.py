from dataclasses import FrozenInstanceError

import pytest

from optionkit.argument_type import INTEGER, STRING
from optionkit.exceptions import OptionDefinitionError
from optionkit.option import BoolOption, Option


def test_keyed_description():
    option = Option(key="verbose", default=0, usage="the verbosity level", type=int)
    assert option.description == "--verbose"
    assert str(option) == "--verbose"
    assert option.argument_type is INTEGER
    assert not option.required
    assert not option.positional


def test_positional_description_is_usage():
    option = Option(usage="the log to read")
    assert option.description == "the log to read"
    assert option.argument_type is STRING
    assert option.required
    assert option.positional


def test_option_is_immutable():
    option = Option(usage="the log to read")
    with pytest.raises(FrozenInstanceError):
        option.key = "log"


def test_options_compare_by_value():
    assert Option(key="a", usage="x") == Option(key="a", usage="x")
    assert Option(key="a", usage="x") != Option(key="b", usage="x")


@pytest.mark.parametrize("usage", ["", "   "])
def test_empty_usage_rejected(usage):
    with pytest.raises(OptionDefinitionError):
        Option(key="verbose", usage=usage)


def test_leading_dashes_rejected():
    with pytest.raises(OptionDefinitionError):
        Option(key="--verbose", usage="the verbosity level")


def test_unsupported_type_rejected():
    with pytest.raises(OptionDefinitionError):
        Option(key="data", usage="raw bytes", type=bytes)


def test_bool_type_rejected_on_option():
    with pytest.raises(OptionDefinitionError):
        Option(key="force", usage="force it", type=bool)


def test_bool_option():
    option = BoolOption(key="force", default=False, usage="overwrite existing files")
    assert option.description == "--force"
    assert option.type_name == "boolean"
    assert not option.required


def test_bool_option_requires_key():
    with pytest.raises(OptionDefinitionError):
        BoolOption(key=None, usage="overwrite existing files")


def test_bool_option_requires_bool_default():
    with pytest.raises(OptionDefinitionError):
        BoolOption(key="force", default="yes", usage="overwrite existing files")
