"""Character conversion helpers built on the character range.

Case conversion here is ASCII-only: letters outside A-Z/a-z, including
non-ASCII letters, pass through unchanged.
"""

from typing import Callable, Iterator, TypeVar, Union

from .encoding import BufferLike, CharInfo, as_buffer
from .stream import make_char_range

T = TypeVar("T")

CASE_OFFSET = ord("a") - ord("A")
MAX_SCALAR_EXCLUSIVE = 0x110000

Delimiter = Union[str, bytes, int]


def to_lower_ascii(info: CharInfo) -> int:
    """Lowercase code point for ASCII A-Z, the unchanged code point otherwise."""
    if info.is_ascii and ord("A") <= info.scalar_value <= ord("Z"):
        return info.scalar_value + CASE_OFFSET
    return info.scalar_value


def to_upper_ascii(info: CharInfo) -> int:
    """Uppercase code point for ASCII a-z, the unchanged code point otherwise."""
    if info.is_ascii and ord("a") <= info.scalar_value <= ord("z"):
        return info.scalar_value - CASE_OFFSET
    return info.scalar_value


def encode_scalar(codepoint: int) -> bytes:
    """UTF-8 bytes for ``codepoint``; empty for values above U+10FFFF.

    Surrogate halves are encoded like any other three-byte scalar.
    """
    if codepoint < 0x80:
        return bytes((codepoint,))
    if codepoint < 0x800:
        return bytes((0xC0 | (codepoint >> 6), 0x80 | (codepoint & 0x3F)))
    if codepoint < 0x10000:
        return bytes((
            0xE0 | (codepoint >> 12),
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        ))
    if codepoint < MAX_SCALAR_EXCLUSIVE:
        return bytes((
            0xF0 | (codepoint >> 18),
            0x80 | ((codepoint >> 12) & 0x3F),
            0x80 | ((codepoint >> 6) & 0x3F),
            0x80 | (codepoint & 0x3F),
        ))
    return b""


def to_string(info: CharInfo) -> bytes:
    """Re-encode the descriptor's scalar value as UTF-8."""
    return encode_scalar(info.scalar_value)


def to_lower_ascii_str(info: CharInfo) -> bytes:
    if info.is_ascii:
        return bytes((to_lower_ascii(info) & 0xFF,))
    return to_string(info)


def to_upper_ascii_str(info: CharInfo) -> bytes:
    if info.is_ascii:
        return bytes((to_upper_ascii(info) & 0xFF,))
    return to_string(info)


def transform_chars(
    buffer: BufferLike,
    transformer: Callable[[CharInfo], T]
) -> Iterator[T]:
    """Lazily apply ``transformer`` to each character of ``buffer``.

    A leading BOM is skipped.
    """
    return map(transformer, make_char_range(buffer))


def _delimiter_byte(value: Delimiter) -> int:
    if isinstance(value, int):
        byte = value
    elif len(value) == 1:
        byte = ord(value) if isinstance(value, str) else value[0]
    else:
        raise ValueError(f"Delimiter must be a single character, got {value!r}")
    if not 0 <= byte < 0x80:
        raise ValueError(f"Delimiter must be an ASCII character, got {value!r}")
    return byte


def quoted_str(
    buffer: BufferLike,
    start_delim: Delimiter = '"',
    end_delim: Delimiter = '"',
    escape: Delimiter = "\\"
) -> bytes:
    """Wrap ``buffer`` in delimiters, escaping delimiter and escape characters.

    Multi-byte characters are copied through verbatim. A leading BOM is
    dropped.

    Example:
        >>> quoted_str('A"B')
        b'"A\\\\"B"'
    """
    data = as_buffer(buffer)
    start_byte = _delimiter_byte(start_delim)
    end_byte = _delimiter_byte(end_delim)
    escape_byte = _delimiter_byte(escape)
    special = {start_byte, end_byte, escape_byte}

    result = bytearray((start_byte,))
    for info in make_char_range(data):
        if info.is_ascii:
            if info.scalar_value in special:
                result.append(escape_byte)
            result.append(info.scalar_value)
        else:
            result += data[info.start_offset:info.end_offset]
    result.append(end_byte)
    return bytes(result)
