import sys
from pathlib import Path

from optionkit import Failure, parse_options
from optionkit.config import loader
from optionkit.usage import render_error, render_usage

LogOptions = loader(Path(__file__).parent / "log_options.yaml")

if "--help" in sys.argv[1:]:
    render_usage(LogOptions, "log")
    sys.exit(0)

result = parse_options(LogOptions, sys.argv[1:])
if isinstance(result, Failure):
    render_error(result.error)
    sys.exit(1)
print(result.value)
