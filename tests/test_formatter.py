"""
Tests for line formatting.
"""

import io
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from hexdump.formatter import format_line, printable, write_line

HELLO = b'Hello, world!\n'


def test_hello_world_line():
    expected = '     0 | 48 65 6C 6C  6F 2C 20 77  6F 72 6C 64  21 0A       | Hello, world!.'
    assert format_line(HELLO, 0, 16) == expected


def test_full_line():
    data = bytes(range(0x40, 0x50))
    expected = '    10 | 40 41 42 43  44 45 46 47  48 49 4A 4B  4C 4D 4E 4F | @ABCDEFGHIJKLMNO'
    assert format_line(data, 16, 16) == expected


def test_short_line_keeps_alignment():
    """Missing bytes are padded so the ASCII column lines up."""
    full = format_line(b'A' * 16, 0, 16)
    short = format_line(b'A', 0, 16)
    assert short.index('|', 8) == full.index('|', 8)
    assert short.endswith(' | A')


def test_width_one_has_no_group_space():
    assert format_line(b'A', 0, 1) == '     0 | 41 | A'


def test_uneven_width():
    assert format_line(b'abcde', 0, 5) == '     0 | 61 62 63 64  65 | abcde'


def test_empty_chunk():
    assert format_line(b'', 0, 4) == '     0 |             | '


def test_offset_is_uppercase_hex():
    assert format_line(b'\xff', 0xABCDEF, 1) == 'ABCDEF | FF | .'


def test_wide_offset_is_not_truncated():
    assert format_line(b'\x00', 0x1234567, 1).startswith('1234567 |')


def test_printable():
    assert printable(b' ~') == ' ~'
    assert printable(b'\x1f\x7f\x80\xff\t') == '.....'
    assert printable(b'') == ''


def test_write_line():
    out = io.StringIO()
    write_line(out, b'Hi', 32, 2)
    assert out.getvalue() == '    20 | 48 69 | Hi\n'


if __name__ == '__main__':
    pytest.main([__file__])
