"""
Formatting of a single hex dump line.

A line has three columns: the offset in hex, the byte grid grouped in fours,
and the printable ASCII rendering of the bytes::

         0 | 48 65 6C 6C  6F 2C 20 77  6F 72 6C 64  21 0A       | Hello, world!.
"""

from typing import TextIO

GROUP_SIZE = 4
PLACEHOLDER = '   '


def printable(data: bytes) -> str:
    """Render bytes in the printable ASCII range as themselves, others as '.'."""
    return ''.join(chr(b) if 32 <= b <= 126 else '.' for b in data)


def format_line(data: bytes, offset: int, width: int) -> str:
    """
    Format one line of output without the trailing newline.

    Args:
        data: Bytes for this line, at most ``width`` of them
        offset: Absolute offset of the first byte
        width: Bytes per line; short lines are padded to keep columns aligned

    Returns:
        Formatted line
    """
    parts = [f"{offset:6X} |"]
    for i in range(width):
        if i > 0 and i % GROUP_SIZE == 0:
            parts.append(' ')
        if i < len(data):
            parts.append(f" {data[i]:02X}")
        else:
            parts.append(PLACEHOLDER)
    parts.append(' | ')
    parts.append(printable(data))
    return ''.join(parts)


def write_line(out: TextIO, data: bytes, offset: int, width: int):
    """Write one formatted line followed by a newline."""
    out.write(format_line(data, offset, width) + '\n')
