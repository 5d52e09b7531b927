"""Lazy, forward-only character ranges over UTF-8 byte buffers.

A ``CharRange`` is a view of a caller-owned buffer between two byte offsets.
Iterating it decodes one character at a time; nothing is materialized until
the caller collects it. Ranges borrow their buffer, so a buffer must not be
mutated while a range or cursor over it is in use.
"""

from typing import Iterator, Optional

from .encoding import (
    Buffer,
    BufferLike,
    CharInfo,
    as_buffer,
    content_start,
    decode,
)


class CharIterator:
    """Forward cursor over the characters of a buffer.

    The descriptor for the current position is decoded on first access and
    cached until the cursor advances. Two cursors are equal when they walk the
    same buffer object and sit at the same byte offset; decoding options and
    stop bounds do not take part in the comparison.
    """

    def __init__(
        self,
        buffer: BufferLike,
        position: int,
        utf8_mode: bool = True,
        validate: bool = True,
        end: Optional[int] = None
    ) -> None:
        self._buffer = as_buffer(buffer)
        self._position = position
        self._utf8_mode = utf8_mode
        self._validate = validate
        self._end = len(self._buffer) if end is None else end
        self._current: Optional[CharInfo] = None

    @property
    def buffer(self) -> Buffer:
        return self._buffer

    @property
    def position(self) -> int:
        """Byte offset of the current character."""
        return self._position

    @property
    def current(self) -> CharInfo:
        """Descriptor of the character at the current position."""
        if self._current is None:
            self._current = decode(
                self._buffer, self._position, self._utf8_mode, self._validate
            )
        return self._current

    def advance(self) -> "CharIterator":
        """Move past the current character and return the cursor."""
        self._position += self.current.byte_length
        self._current = None
        return self

    def at_end(self) -> bool:
        """Whether the cursor has reached its stop bound."""
        return self._position >= self._end

    def copy(self) -> "CharIterator":
        """Return an independent cursor at the same position."""
        clone = CharIterator(
            self._buffer, self._position, self._utf8_mode, self._validate, self._end
        )
        clone._current = self._current
        return clone

    __copy__ = copy

    def __iter__(self) -> "CharIterator":
        return self

    def __next__(self) -> CharInfo:
        if self.at_end():
            raise StopIteration
        info = self.current
        self.advance()
        return info

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharIterator):
            return NotImplemented
        return self._buffer is other._buffer and self._position == other._position

    def __hash__(self) -> int:
        return hash((id(self._buffer), self._position))

    def __repr__(self) -> str:
        return f"CharIterator(position={self._position}, end={self._end})"


class CharRange:
    """View of the characters between two byte offsets of a buffer.

    When the range starts at offset 0 and ``skip_bom`` is set, a leading
    UTF-8 BOM is excluded from the range. The range holds no iteration
    state: every call to ``begin()`` or ``iter()`` starts a fresh walk.
    """

    def __init__(
        self,
        buffer: BufferLike,
        start: int = 0,
        end: Optional[int] = None,
        utf8_mode: bool = True,
        validate: bool = True,
        skip_bom: bool = True
    ) -> None:
        buffer = as_buffer(buffer)
        buffer_length = len(buffer)
        if end is None:
            end = buffer_length
        if not 0 <= start <= end <= buffer_length:
            raise ValueError(
                f"Invalid byte bounds [{start}, {end}) for buffer of length "
                f"{buffer_length}"
            )

        if skip_bom and start == 0:
            start = min(content_start(buffer), end)

        self._buffer = buffer
        self._start = start
        self._end = end
        self._utf8_mode = utf8_mode
        self._validate = validate

    @property
    def buffer(self) -> Buffer:
        return self._buffer

    @property
    def start_offset(self) -> int:
        return self._start

    @property
    def end_offset(self) -> int:
        return self._end

    @property
    def utf8_mode(self) -> bool:
        return self._utf8_mode

    @property
    def validate(self) -> bool:
        return self._validate

    def begin(self) -> CharIterator:
        """Cursor positioned at the first character of the range."""
        return CharIterator(
            self._buffer, self._start, self._utf8_mode, self._validate, self._end
        )

    def end(self) -> CharIterator:
        """Cursor positioned at the end bound of the range."""
        return CharIterator(
            self._buffer, self._end, self._utf8_mode, self._validate, self._end
        )

    def size(self) -> int:
        """Number of characters in the range (walks the whole range)."""
        return sum(1 for _ in self)

    def empty(self) -> bool:
        return self._start >= self._end

    def slice_of(self, info: CharInfo) -> bytes:
        """Raw bytes of a character yielded by this range."""
        return bytes(self._buffer[info.start_offset:info.end_offset])

    def __iter__(self) -> Iterator[CharInfo]:
        return self.begin()

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.empty()

    def __repr__(self) -> str:
        mode = "utf8" if self._utf8_mode else "ascii"
        return f"CharRange(start={self._start}, end={self._end}, mode={mode})"


def make_char_range(
    buffer: BufferLike,
    start: Optional[int] = None,
    end: Optional[int] = None,
    utf8_mode: bool = True,
    validate: bool = True,
    skip_bom: bool = True
) -> CharRange:
    """Create a character range over ``buffer``.

    Args:
        buffer: Bytes-like object or text (encoded as UTF-8)
        start: First byte offset (defaults to 0)
        end: Byte offset past the last character (defaults to the length)
        utf8_mode: Decode multi-byte UTF-8 sequences
        validate: Validate continuation bytes
        skip_bom: Exclude a leading BOM when the range starts at offset 0

    Returns:
        CharRange view over the buffer

    Raises:
        ValueError: If the bounds are not ``0 <= start <= end <= len(buffer)``
    """
    return CharRange(
        buffer,
        0 if start is None else start,
        end,
        utf8_mode,
        validate,
        skip_bom,
    )
