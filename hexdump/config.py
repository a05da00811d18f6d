"""
Command-line configuration for hexdump.
"""

import argparse
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import InvalidArgument

UNBOUNDED = -1
DEFAULT_WIDTH = 16

HELP_TEXT = """\
Usage: hexdump [FLAGS] [OPTIONS] ARGUMENTS

Arguments:
  <file>     file to dump (default: stdin)

Options:
  -l <int>   bytes per line in output (default: 16)
  -n <int>   number of bytes to read (default: all)
  -o <int>   byte offset at which to begin reading

Flags:
  --help     display this help text and exit
  --version  display version number and exit"""

HELP_FLAG = '--help'
HELP_HINT = "try 'hexdump --help' for usage"
VERSION_FLAG = '--version'


@dataclass(frozen=True)
class Configuration:
    """Options for a single dump."""
    offset: int = 0
    limit: int = UNBOUNDED
    width: int = DEFAULT_WIDTH
    path: Optional[str] = None


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message):
        raise InvalidArgument(f"{message} ({HELP_HINT})")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog='hexdump', add_help=False, allow_abbrev=False)
    parser.add_argument('-o', dest='offset', type=int, default=0, metavar='<int>')
    parser.add_argument('-n', dest='limit', type=int, default=UNBOUNDED, metavar='<int>')
    parser.add_argument('-l', dest='width', type=int, default=DEFAULT_WIDTH, metavar='<int>')
    parser.add_argument('path', nargs='?', default=None, metavar='<file>')
    return parser


def requested_action(argv: Sequence[str]) -> Optional[str]:
    """Return the first '--help' or '--version' token in argv, if any."""
    for arg in argv:
        if arg in (HELP_FLAG, VERSION_FLAG):
            return arg
    return None


def parse_args(argv: Sequence[str]) -> Configuration:
    """
    Parse command-line arguments into a Configuration.

    Args:
        argv: Arguments without the program name

    Returns:
        Validated Configuration

    Raises:
        InvalidArgument: on unknown options, missing or non-integer values,
            more than one input path, or out-of-range values
    """
    args = _build_parser().parse_args(list(argv))

    errors: List[str] = []
    if args.width <= 0:
        errors.append(f"bytes per line must be positive, got {args.width}")
    if args.offset < 0:
        errors.append(f"offset must not be negative, got {args.offset}")
    if args.limit < 0 and args.limit != UNBOUNDED:
        errors.append(f"number of bytes must not be negative, got {args.limit}")
    if errors:
        raise InvalidArgument('; '.join(errors))

    return Configuration(offset=args.offset, limit=args.limit, width=args.width, path=args.path)
