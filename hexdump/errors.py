"""
Errors raised while dumping.

Every error is terminal: the command-line handler prints the message once
and exits with ``exit_code``.
"""


class HexdumpError(Exception):
    """Base class for all hexdump failures."""

    exit_code = 1


class InvalidArgument(HexdumpError):
    """Bad, missing or out-of-range command-line value."""


class CannotOpen(HexdumpError):
    """The input path does not exist or cannot be read."""


class NotSeekable(HexdumpError):
    """An offset was requested on a source that cannot seek."""


class SeekFailed(HexdumpError):
    """The source rejected the seek."""


class ReadFailed(HexdumpError):
    """I/O error while reading the source."""
