"""
Command-line interface for hexdump.
"""

import logging
import os
import sys
from typing import Optional, Sequence

from . import __version__
from .byte_source import open_source
from .config import HELP_FLAG, HELP_TEXT, parse_args, requested_action
from .dumper import dump
from .errors import HexdumpError

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = 'HEXDUMP_LOG_LEVEL'


def setup_logging():
    """Send log records to stderr at the level named by HEXDUMP_LOG_LEVEL."""
    level = getattr(logging, os.environ.get(LOG_LEVEL_ENV, 'WARNING').upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='hexdump: %(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run hexdump and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    action = requested_action(argv)
    if action == HELP_FLAG:
        print(HELP_TEXT)
        return 0
    if action is not None:
        print(__version__)
        return 0

    setup_logging()

    try:
        config = parse_args(argv)
        logger.debug("configuration: %s", config)
        with open_source(config.path) as source:
            total = dump(source, config.offset, config.limit, config.width)
        logger.debug("dumped %d bytes", total)
    except HexdumpError as e:
        sys.stdout.flush()
        print(f"hexdump: error: {e}", file=sys.stderr)
        return e.exit_code
    except BrokenPipeError:
        # Reader went away; silence the flush at interpreter exit.
        try:
            fd = sys.stdout.fileno()
        except (AttributeError, OSError, ValueError):
            pass
        else:
            os.dup2(os.open(os.devnull, os.O_WRONLY), fd)
        return 1

    return 0
