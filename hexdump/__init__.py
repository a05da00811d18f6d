"""
Hex dump of files and standard input.
"""

__version__ = '0.2.0'

from .byte_source import ByteSource, open_source
from .config import Configuration, parse_args
from .dumper import Line, dump, iter_lines
from .errors import (
    CannotOpen,
    HexdumpError,
    InvalidArgument,
    NotSeekable,
    ReadFailed,
    SeekFailed,
)
from .formatter import format_line, write_line
