from optionkit.argument_parser import RawArgument, TokenKind, tokenize


def test_keys_and_values():
    assert tokenize(["--verbose", "3", "mylog"]) == [
        RawArgument(TokenKind.KEY, "verbose"),
        RawArgument(TokenKind.VALUE, "3"),
        RawArgument(TokenKind.VALUE, "mylog"),
    ]


def test_equals_form_splits():
    assert tokenize(["--out=file.txt"]) == [
        RawArgument(TokenKind.KEY, "out"),
        RawArgument(TokenKind.VALUE, "file.txt"),
    ]


def test_equals_form_with_empty_value():
    assert tokenize(["--out="]) == [
        RawArgument(TokenKind.KEY, "out"),
        RawArgument(TokenKind.VALUE, ""),
    ]


def test_double_dash_ends_keys():
    assert tokenize(["--a", "--", "--b", "c"]) == [
        RawArgument(TokenKind.KEY, "a"),
        RawArgument(TokenKind.VALUE, "--b"),
        RawArgument(TokenKind.VALUE, "c"),
    ]


def test_negative_numbers_are_values():
    assert tokenize(["--level", "-3"]) == [
        RawArgument(TokenKind.KEY, "level"),
        RawArgument(TokenKind.VALUE, "-3"),
    ]


def test_raw_argument_str():
    assert str(RawArgument(TokenKind.KEY, "verbose")) == "--verbose"
    assert str(RawArgument(TokenKind.VALUE, "x")) == "x"
