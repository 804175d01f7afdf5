"""touchcal command-line interface"""

from __future__ import annotations

import argparse
import re
import sys
from typing import Any, NoReturn, Sequence

from touchcal import __version__
from touchcal.calibration.rules import rules_render
from touchcal.cli_logging import logging_setup
from touchcal.common.errors import CalibrationError, UnknownOptionError
from touchcal.common.settings import settings
from touchcal.common.types import ParseResult, ScreenGeometry, Touchscreen
from touchcal.input.parser import parseResult_build, screen_parse, touchscreen_parse

USAGE = (
    "%(prog)s -s <W>x<H>|1|2 "
    "-t <vendor> <product> <x_off> <y_off> <w> <h> [rotation] [...]"
)

EPILOG = """\
screen presets:
  1 = 1920x1080 (default)
  2 = 1280x800

touchscreen arguments:
  vendor_id product_id x_offset y_offset width height [rotation]
  ids are hex, the rest decimal pixels; rotation is 0, 90, 180 or 270

example:
  %(prog)s --screen 1 \\
      --touchscreen 0x1234 0xabcd 0 0 960 1080 \\
      --touchscreen 0x5678 0xef01 960 0 960 1080 90
"""

_NEGATIVE_NUMBER = re.compile(r"-[0-9]+|-[0-9]*\.[0-9]+")


class CalibrationArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad options as `UnknownOptionError`"""

    EXIT_OPTION_STRINGS: frozenset[str] = frozenset({"-h", "--help", "--version"})
    """Options that print and exit as soon as argparse reaches them"""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.known_option_strings: set[str] = set()
        super().__init__(*args, **kwargs)

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        """Register the argument and remember its option strings"""
        action = super().add_argument(*args, **kwargs)
        self.known_option_strings.update(action.option_strings)
        return action

    def error(self, message: str) -> NoReturn:
        """
        Raise instead of exiting with argparse's status 2

        Args:
            message: argparse diagnostic text.
        """
        raise UnknownOptionError(message)

    def optionString_resolve(self, token: str) -> str | None:
        """
        Resolve an option token the way argparse matches it.

        Args:
            token: Command-line token starting with `-`.

        Returns:
            Canonical option string, or None when unknown or ambiguous.
        """
        option: str = token.split("=", 1)[0]
        if option in self.known_option_strings:
            return option
        if not option.startswith("--"):
            # Short option with attached value, e.g. `-s1`
            short: str = option[:2]
            return short if short in self.known_option_strings else None
        if not self.allow_abbrev:
            return None
        matches = [known for known in self.known_option_strings if known.startswith(option)]
        return matches[0] if len(matches) == 1 else None

    def unknownBeforeExit_check(self, argv: Sequence[str]) -> None:
        """
        Reject an unknown option that precedes `--help` or `--version`.

        argparse reports unknown options only after the whole command line is
        consumed, so a later help or version action would otherwise exit 0.

        Args:
            argv: Raw argument list.

        Raises:
            UnknownOptionError: Raised for the first unknown option string.
        """
        unknown: str | None = None
        for token in argv:
            if token == "--":
                return
            if not token.startswith("-") or token == "-" or _NEGATIVE_NUMBER.fullmatch(token):
                continue
            option: str | None = self.optionString_resolve(token)
            if option is None:
                if unknown is None:
                    unknown = token
            elif option in self.EXIT_OPTION_STRINGS:
                if unknown is not None:
                    raise UnknownOptionError(f"unrecognized arguments: {unknown}")
                return


class ScreenAction(argparse.Action):
    """Parse `--screen` as soon as it is seen and record it in order"""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        screens: list[ScreenGeometry] = list(getattr(namespace, self.dest) or [])
        screens.append(screen_parse(values))
        setattr(namespace, self.dest, screens)


class TouchscreenAction(argparse.Action):
    """Parse the plain tokens following one `--touchscreen` flag"""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        touchscreens: list[Touchscreen] = list(getattr(namespace, self.dest) or [])
        tokens: list[str] = list(values)
        parsed = touchscreen_parse(tokens, index=len(touchscreens))

        leftover: list[str] = tokens[parsed.tokens_consumed:]
        if leftover:
            raise UnknownOptionError(f"unrecognized arguments: {' '.join(leftover)}")

        touchscreens.append(parsed.touchscreen)
        setattr(namespace, self.dest, touchscreens)


def parser_create() -> CalibrationArgumentParser:
    """
    Create fully populated argument parser

    Returns:
        Configured argument parser.
    """
    parser = CalibrationArgumentParser(
        prog="touchcal",
        usage=USAGE,
        description="Generate udev libinput calibration rules for touchscreens",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"touchcal {__version__}")

    parser.add_argument(
        "-s",
        "--screen",
        action=ScreenAction,
        dest="screens",
        metavar="WxH",
        default=None,
        help="Total screen resolution (e.g., 1920x1080) or preset 1/2",
    )

    parser.add_argument(
        "-t",
        "--touchscreen",
        action=TouchscreenAction,
        dest="touchscreens",
        nargs="*",
        metavar="ARG",
        default=None,
        help="Followed by 6 or 7 args: vendor_id product_id x_offset y_offset "
        "width height [rotation]",
    )

    logLevelArgs_populate(parser)
    return parser


def logLevelArgs_populate(parser: argparse.ArgumentParser) -> None:
    """
    Populate log level override arguments.

    Args:
        parser: Target argument parser.
    """
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--info", action="store_true", help="Enable info logging")
    parser.add_argument(
        "--warning", action="store_true", help="Enable warning logging (default)"
    )
    parser.add_argument("--error", action="store_true", help="Enable error logging")


def logLevelParser_create() -> CalibrationArgumentParser:
    """
    Create a parser that only understands the log level flags.

    Logging must be configured before the full parse, because screen and
    touchscreen values are validated (and logged) while argparse runs.

    Returns:
        Log level argument parser.
    """
    parser = CalibrationArgumentParser(prog="touchcal", add_help=False)
    logLevelArgs_populate(parser)
    return parser


def arguments_parse(
    parser: CalibrationArgumentParser, argv: Sequence[str] | None = None
) -> argparse.Namespace:
    """
    Parse command line arguments

    Args:
        parser: Parser from `parser_create()`.
        argv: Argument list, defaults to `sys.argv[1:]`.

    Returns:
        Parsed CLI arguments.

    Raises:
        CalibrationError: Raised on the first invalid argument.
    """
    tokens: list[str] = list(sys.argv[1:] if argv is None else argv)
    parser.unknownBeforeExit_check(tokens)
    return parser.parse_args(tokens)


def logLevel_get(argv: Sequence[str] | None = None) -> str:
    """
    Resolve the effective log level from the command line alone.

    Args:
        argv: Argument list, defaults to `sys.argv[1:]`.

    Returns:
        Log level name.
    """
    tokens: list[str] = list(sys.argv[1:] if argv is None else argv)
    args, _ = logLevelParser_create().parse_known_args(tokens)
    return logLevelOverride_get(args) or settings.DEFAULT_LOG_LEVEL


def logLevelOverride_get(args: argparse.Namespace) -> str | None:
    """
    Resolve explicit log level override flags.

    Args:
        args: Parsed CLI args.

    Returns:
        Selected log level or None.
    """
    if args.error:
        return "ERROR"
    if args.warning:
        return "WARNING"
    if args.info:
        return "INFO"
    if args.debug:
        return "DEBUG"
    return None


def parseResult_get(args: argparse.Namespace) -> ParseResult:
    """
    Collapse parsed arguments into a single parse result.

    Args:
        args: Parsed CLI args.

    Returns:
        Parse result with the effective screen and all touchscreens.
    """
    return parseResult_build(args.screens or [], args.touchscreens or [])


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """
    Main entry point for the touchcal command

    Args:
        argv: Argument list, defaults to `sys.argv[1:]`.
    """
    parser = parser_create()
    try:
        logging_setup(logLevel_get(argv), settings.LOG_FORMAT)
        args = arguments_parse(parser, argv)
    except UnknownOptionError as e:
        parser.print_usage(sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except CalibrationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for line in rules_render(parseResult_get(args)):
        print(line)
    sys.exit(0)


if __name__ == "__main__":
    main()
