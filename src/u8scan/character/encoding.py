"""UTF-8 byte decoder and byte order mark detection.

The decoder is total: for any buffer and offset it returns a ``CharInfo``
describing the character that starts there, never raising on malformed
input. Invalid sequences are reported through ``is_valid`` and always
occupy at least one byte, so a caller that keeps adding ``byte_length`` to
its offset is guaranteed to reach the end of the buffer.

Validation is structural only. Overlong forms, surrogate halves and
scalars above U+10FFFF decode without complaint when their byte pattern is
well formed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

Buffer = Union[bytes, bytearray, memoryview]
BufferLike = Union[bytes, bytearray, memoryview, str]

# UTF-8 byte constants
ASCII_MAX = 0x80
UTF8_CONTINUATION_MASK = 0xC0
UTF8_CONTINUATION_TAG = 0x80
UTF8_PAYLOAD_MASK = 0x3F

# (mask, tag, sequence length) for multi-byte leading bytes
UTF8_LEAD_PATTERNS = (
    (0xE0, 0xC0, 2),
    (0xF0, 0xE0, 3),
    (0xF8, 0xF0, 4),
)

UTF8_BOM = b"\xef\xbb\xbf"
UTF8_BOM_SIZE = len(UTF8_BOM)


def as_buffer(data: BufferLike) -> Buffer:
    """Return a byte buffer for ``data`` without copying byte input.

    Text is encoded as UTF-8. Memoryviews with a non-byte format are cast to
    unsigned bytes.

    Raises:
        TypeError: If ``data`` is not bytes-like or str
    """
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, memoryview):
        return data if data.format == "B" else data.cast("B")
    raise TypeError(
        f"Expected bytes, bytearray, memoryview or str, got {type(data).__name__}"
    )


@dataclass(frozen=True, eq=False)
class CharInfo:
    """Description of one character in a byte buffer.

    Attributes:
        start_offset: Byte offset where the character begins
        byte_length: Number of bytes the character occupies (1-4, never 0)
        scalar_value: Decoded code point, or the leading byte when invalid
        is_ascii: True for single-byte characters below 0x80 (and every
            byte in ASCII mode)
        is_valid: True if the bytes form a structurally valid sequence
        is_bom: Reserved; a BOM is never yielded as a character

    Descriptors compare and order by ``scalar_value`` alone, so the same
    character taken from two different buffers or offsets compares equal.
    """

    start_offset: int = 0
    byte_length: int = 1
    scalar_value: int = 0
    is_ascii: bool = True
    is_valid: bool = True
    is_bom: bool = False

    @property
    def end_offset(self) -> int:
        """Byte offset just past this character."""
        return self.start_offset + self.byte_length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharInfo):
            return NotImplemented
        return self.scalar_value == other.scalar_value

    def __lt__(self, other: "CharInfo") -> bool:
        if not isinstance(other, CharInfo):
            return NotImplemented
        return self.scalar_value < other.scalar_value

    def __hash__(self) -> int:
        return hash(self.scalar_value)


def _invalid(offset: int, lead: int) -> CharInfo:
    return CharInfo(
        start_offset=offset,
        byte_length=1,
        scalar_value=lead,
        is_ascii=False,
        is_valid=False,
    )


def decode(
    buffer: BufferLike,
    offset: int,
    utf8_mode: bool = True,
    validate: bool = True
) -> CharInfo:
    """Decode the character starting at ``offset``.

    Args:
        buffer: Byte buffer to read from (text is encoded as UTF-8)
        offset: Byte offset of the character
        utf8_mode: Decode multi-byte sequences; when False every byte is
            its own ASCII-mode character
        validate: Check continuation bytes; when False they are trusted

    Returns:
        CharInfo for the character. Offsets at or past the end produce an
        invalid one-byte sentinel with scalar value 0.
    """
    buffer = as_buffer(buffer)
    buffer_length = len(buffer)
    if offset >= buffer_length:
        return CharInfo(start_offset=offset, is_valid=False)

    lead = buffer[offset]
    if not utf8_mode or lead < ASCII_MAX:
        return CharInfo(start_offset=offset, scalar_value=lead)

    for mask, tag, sequence_length in UTF8_LEAD_PATTERNS:
        if lead & mask == tag:
            break
    else:
        # Stray continuation byte or 0xF8-0xFF
        return _invalid(offset, lead)

    if offset + sequence_length > buffer_length:
        return _invalid(offset, lead)

    scalar = lead & ((1 << (7 - sequence_length)) - 1)
    for position in range(offset + 1, offset + sequence_length):
        byte = buffer[position]
        if validate and byte & UTF8_CONTINUATION_MASK != UTF8_CONTINUATION_TAG:
            return _invalid(offset, lead)
        scalar = (scalar << 6) | (byte & UTF8_PAYLOAD_MASK)

    return CharInfo(
        start_offset=offset,
        byte_length=sequence_length,
        scalar_value=scalar,
        is_ascii=False,
    )


def get_char_info(buffer: BufferLike, offset: int, validate: bool = True) -> CharInfo:
    """Decode the UTF-8 character at a byte offset of ``buffer``."""
    return decode(buffer, offset, True, validate)


class BOMAction(Enum):
    """How a scan disposes of a leading byte order mark."""
    IGNORE = "ignore"
    COPY = "copy"
    CUSTOM = "custom"


@dataclass
class BOMInfo:
    """Result of byte order mark detection.

    Attributes:
        found: Whether the buffer starts with a UTF-8 BOM
        size: BOM length in bytes (3 when found, 0 otherwise)
        action_taken: Disposition applied by the scan that detected it
    """
    found: bool = False
    size: int = 0
    action_taken: BOMAction = BOMAction.IGNORE


def detect_bom(buffer: BufferLike) -> BOMInfo:
    """Detect a UTF-8 byte order mark at the start of ``buffer``."""
    data = as_buffer(buffer)
    if len(data) >= UTF8_BOM_SIZE and bytes(data[:UTF8_BOM_SIZE]) == UTF8_BOM:
        return BOMInfo(found=True, size=UTF8_BOM_SIZE)
    return BOMInfo()


def has_bom(buffer: BufferLike) -> bool:
    """Check whether ``buffer`` starts with a UTF-8 byte order mark."""
    return detect_bom(buffer).found


def bom_str() -> bytes:
    """Return the UTF-8 byte order mark sequence."""
    return UTF8_BOM


def content_start(buffer: BufferLike) -> int:
    """Byte offset of the first character after an optional BOM."""
    return detect_bom(buffer).size
