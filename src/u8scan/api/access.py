"""Character-indexed access to UTF-8 buffers.

Positions are character indices, not byte offsets, and a leading BOM is never
counted. Every function walks the buffer forward from the start, so ``at``,
``back`` and ``length`` are linear in the size of the input.
"""

from ..character.encoding import BufferLike, CharInfo
from ..character.stream import CharRange
from ..shared.errors import CharIndexError
from ..shared.logging import get_logger

logger = get_logger(__name__, component="access")


def _content_range(buffer: BufferLike, utf8_mode: bool, validate: bool) -> CharRange:
    return CharRange(buffer, utf8_mode=utf8_mode, validate=validate)


def length(buffer: BufferLike, utf8_mode: bool = True, validate: bool = True) -> int:
    """Count the characters in ``buffer``, excluding a leading BOM.

    In ASCII mode every byte counts as one character.
    """
    return _content_range(buffer, utf8_mode, validate).size()


def is_empty(buffer: BufferLike, utf8_mode: bool = True, validate: bool = True) -> bool:
    """True if ``buffer`` holds no characters; a BOM-only buffer is empty."""
    return _content_range(buffer, utf8_mode, validate).empty()


empty = is_empty


def at(
    buffer: BufferLike,
    index: int,
    utf8_mode: bool = True,
    validate: bool = True
) -> CharInfo:
    """Return the descriptor of the character at ``index``.

    Raises:
        CharIndexError: If ``index`` is negative or not below the length
    """
    if index < 0:
        raise CharIndexError(f"Character index must be >= 0, got {index}", index=index)

    cursor = _content_range(buffer, utf8_mode, validate).begin()
    walked = 0
    while walked < index and not cursor.at_end():
        cursor.advance()
        walked += 1

    if cursor.at_end():
        logger.debug(
            "Character index out of range",
            extra={"index": index, "characters": walked},
        )
        raise CharIndexError("Index out of range", index=index, length=walked)
    return cursor.current


def front(buffer: BufferLike, utf8_mode: bool = True, validate: bool = True) -> CharInfo:
    """Return the first character after an optional BOM.

    Raises:
        CharIndexError: If the buffer holds no characters
    """
    cursor = _content_range(buffer, utf8_mode, validate).begin()
    if cursor.at_end():
        raise CharIndexError("String is empty", length=0)
    return cursor.current


def back(buffer: BufferLike, utf8_mode: bool = True, validate: bool = True) -> CharInfo:
    """Return the last character, found by a full forward walk.

    Raises:
        CharIndexError: If the buffer holds no characters
    """
    last = None
    for last in _content_range(buffer, utf8_mode, validate):
        pass
    if last is None:
        raise CharIndexError("String is empty", length=0)
    return last
