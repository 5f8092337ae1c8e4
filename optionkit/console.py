# Optionkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Optionkit usage and error rendering."""
from rich.console import Console
from rich.theme import Theme

OPTIONKIT_THEME = Theme(
    {
        "usage": "bold",
        "option": "bold cyan",
        "positional": "bold magenta",
        "help": "dim",
        "error.invalid": "bold red",
        "error.missing": "bold yellow",
        "error.usage": "cyan",
    }
)

console = Console(theme=OPTIONKIT_THEME)
