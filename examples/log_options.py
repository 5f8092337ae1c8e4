import sys
from dataclasses import dataclass
from enum import Enum

from optionkit import (
    BoolOption,
    ErrorKind,
    Failure,
    Option,
    combine,
    evaluate,
    evaluate_bool,
    parse_options,
)
from optionkit.usage import render_error, render_usage


class Format(Enum):
    """Output formats for the log reader."""

    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class LogOptions:
    verbosity: int
    output_filename: str
    format: Format
    follow: bool
    log_name: str

    @classmethod
    def evaluate(cls, mode):
        return combine(
            cls,
            evaluate(
                mode,
                Option(
                    key="verbose",
                    default=0,
                    usage="the verbosity level with which to read the logs",
                    type=int,
                ),
            ),
            evaluate(
                mode,
                Option(
                    key="outputFilename",
                    default="",
                    usage="a file to print output to, instead of stdout",
                ),
            ),
            evaluate(
                mode,
                Option(key="format", default=Format.TEXT, usage="output format", type=Format),
            ),
            evaluate_bool(
                mode,
                BoolOption(key="follow", default=False, usage="keep reading as the log grows"),
            ),
            evaluate(mode, Option(usage="the log to read")),
        )


def main(argv: list[str]) -> int:
    if "--help" in argv:
        render_usage(LogOptions, "log")
        return 0

    result = parse_options(LogOptions, argv)
    if isinstance(result, Failure):
        render_error(result.error)
        if any(error.kind is ErrorKind.MISSING_ARGUMENT for error in result.error.errors):
            render_usage(LogOptions, "log")
        return 1

    print(result.value)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
