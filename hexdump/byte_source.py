"""
Byte sources for the dumper: a named file or standard input.
"""

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional

from .errors import CannotOpen, NotSeekable, ReadFailed, SeekFailed

logger = logging.getLogger(__name__)

STDIN_NAME = '-'


class ByteSource:
    """Sequential reader over a binary stream with optional absolute seeking."""

    def __init__(self, stream: BinaryIO, name: str, seekable: bool = True, owned: bool = True):
        """
        Initialize byte source.

        Args:
            stream: Open binary stream
            name: Display name used in error messages
            seekable: False forces the source to refuse seeking
            owned: Whether closing the source closes the stream
        """
        self.stream = stream
        self.name = name
        self.owned = owned
        self._seekable = seekable
        self.closed = False

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self):
        """Release the stream. Borrowed streams such as stdin stay open."""
        if self.closed:
            return
        self.closed = True
        if self.owned:
            self.stream.close()
        logger.debug("closed %s", self.name)

    def seekable(self) -> bool:
        """Whether absolute seeking is supported."""
        if not self._seekable:
            return False
        try:
            return self.stream.seekable()
        except (OSError, ValueError):
            return False

    def seek(self, position: int) -> int:
        """Seek to absolute position."""
        if not self.seekable():
            raise NotSeekable(f"cannot seek in {self.name}")
        try:
            result = self.stream.seek(position)
        except (OSError, ValueError, OverflowError) as e:
            raise SeekFailed(f"cannot seek to offset {position} in {self.name}: {e}") from e
        logger.debug("seeked %s to %d", self.name, result)
        return result

    def read(self, count: int) -> bytes:
        """Read up to ``count`` bytes. An empty result means end of source."""
        try:
            return self.stream.read(count)
        except (OSError, ValueError, OverflowError, MemoryError) as e:
            raise ReadFailed(f"cannot read {self.name}: {e}") from e


def open_source(path: Optional[str] = None) -> ByteSource:
    """
    Open the input for a dump.

    Args:
        path: File to read; None or '-' selects standard input

    Returns:
        ByteSource owned by the caller
    """
    if path is None or path == STDIN_NAME:
        logger.debug("reading from stdin")
        return ByteSource(sys.stdin.buffer, '<stdin>', seekable=False, owned=False)

    file_path = Path(path)
    try:
        stream = open(file_path, 'rb')
    except OSError as e:
        reason = e.strerror or str(e)
        raise CannotOpen(f"cannot open file '{path}': {reason}") from e
    logger.debug("opened %s", file_path)
    return ByteSource(stream, str(file_path))
