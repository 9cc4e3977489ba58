"""Command-line entry point of the viewer: option parsing and start-up report."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Sequence

from labviewer.params import ParameterFileError, ViewerParameters, load_parameters

_PROG = "viewer"
_HOST_RE = re.compile(r"([^:]{1,79})(?::\s*([+-]?\d+))?")

_USAGE = (
    "viewer-1.1.0       [--host simulatorAddress:port]\n"
    "                   [--lowercolor color]\n"
    "                   [--highercolor color]\n"
    "                   [--paramfile file.xml]\n"
    "                   [--nocontrol]\n"
    "                   [--autoconnect]\n"
    "                   [--autostart]\n"
    "                   [--noresetonconnect]\n"
    "                   [--help]\n"
)

_BANNER = "\n\tViewer v2.0\n"


class UsageError(ValueError):
    """Raised when the command line holds an unknown option or a missing value."""


@dataclass
class Options:
    """The result of parsing a command line."""

    parameters: ViewerParameters = field(default_factory=ViewerParameters)
    parameter_file: str | None = None
    show_help: bool = False


def _apply_host(params: ViewerParameters, value: str) -> None:
    match = _HOST_RE.match(value)
    if match is None:
        return
    params.server_addr = match.group(1)
    if match.group(2) is not None:
        params.port = int(match.group(2)) & 0xFFFF


def parse_args(argv: Sequence[str]) -> Options:
    """Parse viewer options; parsing stops at ``--help``."""
    options = Options()
    params = options.parameters
    args = iter(argv)

    def value_of(option: str) -> str:
        value = next(args, None)
        if value is None or value.startswith("-"):
            raise UsageError(f"option {option} needs a value")
        return value

    for arg in args:
        if arg == "--host":
            _apply_host(params, value_of(arg))
        elif arg == "--lowercolor":
            params.lower_color = value_of(arg)
        elif arg == "--highercolor":
            params.higher_color = value_of(arg)
        elif arg == "--nocontrol":
            params.control = False
        elif arg == "--autostart":
            params.auto_start = True
        elif arg == "--autoconnect":
            params.auto_connect = True
        elif arg == "--noresetonconnect":
            params.reset_on_connect = False
        elif arg == "--paramfile":
            options.parameter_file = value_of(arg)
        elif arg == "--help":
            options.show_help = True
            break
        else:
            raise UsageError(f"unknown option {arg}")
    return options


def _describe(params: ViewerParameters) -> str:
    lines = [
        f"\tServer: {params.server_addr}:{params.port}\n",
        f"\tLower walls colour: {params.lower_color}\n",
        f"\tHigher walls colour: {params.higher_color}\n",
    ]
    flags = (
        ("Control", params.control),
        ("Auto connect", params.auto_connect),
        ("Auto start", params.auto_start),
        ("Reset on connect", params.reset_on_connect),
    )
    lines.extend(f"\t{label}: {'yes' if flag else 'no'}\n" for label, flag in flags)
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, load any parameter file and report the settings."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except UsageError:
        print(
            "\n\tInvalid parameters\n"
            f"\tTry `{_PROG} -help' for more information.\n",
            file=sys.stderr,
        )
        return 1
    if options.show_help:
        print(_USAGE, end="")
        return 0

    print(_BANNER)
    params = options.parameters
    if options.parameter_file is not None:
        # A parameter file replaces every setting given on the command line.
        try:
            params = load_parameters(options.parameter_file)
        except ParameterFileError as exc:
            print(f"Failure when sourcing parameters file: {exc}", file=sys.stderr)
            return 1
    print(_describe(params), end="")
    return 0