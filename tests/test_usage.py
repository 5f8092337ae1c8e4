from dataclasses import dataclass
from io import StringIO

from rich.console import Console

from optionkit import BoolOption, Option, combine, evaluate, evaluate_bool
from optionkit.console import OPTIONKIT_THEME
from optionkit.errors import combine_errors, invalid_argument_error, missing_argument_error
from optionkit.usage import get_usage_text, render_error, render_usage


@dataclass
class ServeOptions:
    port: int
    reload: bool
    root: str

    @classmethod
    def evaluate(cls, mode):
        return combine(
            cls,
            evaluate(mode, Option(key="port", default=8000, usage="port to bind", type=int)),
            evaluate_bool(mode, BoolOption(key="reload", usage="reload on change")),
            evaluate(mode, Option(usage="directory to serve")),
        )


def make_console() -> Console:
    return Console(file=StringIO(), width=100, color_system=None, theme=OPTIONKIT_THEME)


def test_usage_text():
    assert get_usage_text(ServeOptions, "serve") == (
        "serve [--port INTEGER] --reload <directory to serve>"
    )


def test_usage_text_without_program():
    assert get_usage_text(ServeOptions).startswith("[--port INTEGER]")


def test_render_usage():
    console = make_console()
    render_usage(ServeOptions, "serve", console=console)
    output = console.file.getvalue()
    assert "usage:" in output
    assert "--port" in output
    assert "port to bind" in output
    assert "default: 8000" in output
    assert "reload on change" in output
    assert "directory to serve" in output


def test_render_error_prints_every_leaf():
    console = make_console()
    error = combine_errors(
        invalid_argument_error("--port", "http", "integer"),
        missing_argument_error("directory to serve"),
    )
    render_error(error, console=console)
    lines = console.file.getvalue().splitlines()
    assert lines == [
        "Invalid value for '--port': http (expected integer)",
        "Missing argument for directory to serve",
    ]


def test_render_error_on_plain_console():
    console = Console(file=StringIO(), width=100)
    render_error(missing_argument_error("--port"), console=console)
    assert console.file.getvalue() == "Missing argument for --port\n"


def test_render_usage_on_plain_console():
    console = Console(file=StringIO(), width=100)
    render_usage(ServeOptions, "serve", console=console)
    assert "port to bind" in console.file.getvalue()
