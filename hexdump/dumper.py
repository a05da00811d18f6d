"""
The read-format loop.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from .byte_source import ByteSource
from .config import UNBOUNDED
from .formatter import write_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Line:
    """Bytes read in one iteration and where they start."""
    offset: int
    data: bytes
    width: int

    @property
    def count(self) -> int:
        return len(self.data)


def iter_lines(source: ByteSource, offset: int = 0, limit: int = UNBOUNDED,
               width: int = 16) -> Iterator[Line]:
    """
    Read the source one line at a time.

    Seeks to ``offset`` first when it is non-zero. Each read asks for ``width``
    bytes, or only the remaining ``limit`` when that is smaller. The loop ends
    on the first empty read, so a limit of 0 still performs one zero-length
    read.

    Args:
        source: Open byte source
        offset: Absolute offset to start at
        limit: Maximum number of bytes to read, or -1 for no limit
        width: Bytes per line

    Yields:
        Line for every non-empty read

    Raises:
        NotSeekable, SeekFailed: if the offset cannot be reached
        ReadFailed: on I/O errors while reading
    """
    if offset != 0:
        source.seek(offset)

    while True:
        cap = width
        if limit != UNBOUNDED and limit < width:
            cap = limit

        data = source.read(cap)
        if not data:
            break

        yield Line(offset, data, width)
        offset += len(data)
        if limit != UNBOUNDED:
            limit -= len(data)

    logger.debug("end of %s at offset %d", source.name, offset)


def dump(source: ByteSource, offset: int = 0, limit: int = UNBOUNDED, width: int = 16,
         out: Optional[TextIO] = None) -> int:
    """
    Write a hex dump of the source to ``out`` (stdout by default).

    Returns:
        Number of bytes dumped
    """
    if out is None:
        out = sys.stdout
    total = 0
    for line in iter_lines(source, offset, limit, width):
        write_line(out, line.data, line.offset, line.width)
        total += line.count
    return total
