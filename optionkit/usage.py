# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich rendering of usage screens and parse errors.

The usage screen is built entirely from the informative usage errors an
options record produces in `Usage` mode, so any `OptionsType` can be rendered
without extra declarations.

Functions:
- get_usage_text: One-line usage synopsis.
- render_usage: Print the synopsis and an option table.
- render_error: Print every error contained in a (possibly compound) error.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from optionkit.console import OPTIONKIT_THEME
from optionkit.console import console as default_console
from optionkit.errors import CommandError, Error, ErrorKind, leaf_errors
from optionkit.options import collect_usage

ERROR_STYLES = {
    ErrorKind.INVALID_ARGUMENT: "error.invalid",
    ErrorKind.MISSING_ARGUMENT: "error.missing",
    ErrorKind.INFORMATIVE_USAGE: "error.usage",
}


def get_option_synopsis(error: CommandError) -> str:
    """Render one usage error as it appears in the synopsis line."""
    if error.key is None:
        text = f"<{error.usage}>"
    elif error.type_name == "boolean":
        text = f"--{error.key}"
    else:
        text = f"--{error.key} {(error.type_name or 'value').upper()}"
    if not error.required:
        text = f"[{text}]"
    return text


def get_usage_text(options_type: type, program: str = "") -> str:
    """
    Build the usage synopsis for `options_type`.

    Keyed options come first, in declaration order, followed by positionals.
    """
    errors = collect_usage(options_type)
    keyed = [get_option_synopsis(error) for error in errors if error.key is not None]
    positional = [get_option_synopsis(error) for error in errors if error.key is None]
    return " ".join(part for part in [program, *keyed, *positional] if part)


def render_usage(
    options_type: type, program: str = "", console: Console | None = None
) -> None:
    """Print the usage synopsis and an option table for `options_type`."""
    console = console or default_console
    synopsis = escape(get_usage_text(options_type, program))

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("option", no_wrap=True)
    table.add_column("help")
    for error in collect_usage(options_type):
        if error.key is None:
            name = f"[positional]{escape(error.usage or '')}[/]"
            help_text = ""
        else:
            name = f"[option]{escape(error.option or '')}[/]"
            help_text = escape(error.usage or "")
            if error.default is not None:
                help_text = f"{help_text} [help](default: {escape(repr(error.default))})[/]"
        table.add_row(name, help_text)

    with console.use_theme(OPTIONKIT_THEME):
        console.print(f"[usage]usage:[/] {synopsis}\n")
        console.print(table)


def render_error(error: Error, console: Console | None = None) -> None:
    """Print every error contained in `error`, one per line, styled by kind."""
    console = console or default_console
    with console.use_theme(OPTIONKIT_THEME):
        for leaf in leaf_errors(error):
            console.print(escape(leaf.message), style=ERROR_STYLES.get(leaf.kind))
