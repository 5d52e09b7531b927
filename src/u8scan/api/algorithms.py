"""Copy-family algorithms over the characters of a UTF-8 buffer.

Each function selects characters from the BOM-skipped range and returns the
concatenation of their original bytes. Characters are never re-encoded, so
invalid bytes that are selected are copied through unchanged.
"""

from itertools import dropwhile, islice, takewhile
from typing import Callable, Iterable, Iterator

from ..character.encoding import Buffer, BufferLike, CharInfo, as_buffer
from ..character.predicates import CharPredicate
from ..character.stream import CharRange


def _join(data: Buffer, chars: Iterable[CharInfo]) -> bytes:
    output = bytearray()
    for info in chars:
        output += data[info.start_offset:info.end_offset]
    return bytes(output)


Selector = Callable[[CharRange], Iterator[CharInfo]]


def _select(
    buffer: BufferLike, utf8_mode: bool, validate: bool, select: Selector
) -> bytes:
    data = as_buffer(buffer)
    return _join(data, select(CharRange(data, utf8_mode=utf8_mode, validate=validate)))


def copy(buffer: BufferLike, utf8_mode: bool = True, validate: bool = True) -> bytes:
    """Copy every character; a well-formed input without BOM is reproduced."""
    return _select(buffer, utf8_mode, validate, iter)


def copy_if(
    buffer: BufferLike,
    predicate: CharPredicate,
    utf8_mode: bool = True,
    validate: bool = True
) -> bytes:
    """Copy the characters for which ``predicate`` holds."""
    return _select(
        buffer, utf8_mode, validate, lambda chars: filter(predicate, chars)
    )


def copy_until(
    buffer: BufferLike,
    predicate: CharPredicate,
    utf8_mode: bool = True,
    validate: bool = True
) -> bytes:
    """Copy the characters before the first match; the match is excluded."""
    return _select(
        buffer,
        utf8_mode,
        validate,
        lambda chars: takewhile(lambda info: not predicate(info), chars),
    )


def copy_from(
    buffer: BufferLike,
    predicate: CharPredicate,
    utf8_mode: bool = True,
    validate: bool = True
) -> bytes:
    """Copy from the first match (included) to the end; empty without a match."""
    return _select(
        buffer,
        utf8_mode,
        validate,
        lambda chars: dropwhile(lambda info: not predicate(info), chars),
    )


def copy_n(
    buffer: BufferLike,
    n: int,
    utf8_mode: bool = True,
    validate: bool = True
) -> bytes:
    """Copy the first ``n`` characters, or all of them if there are fewer.

    Raises:
        ValueError: If ``n`` is negative
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return _select(buffer, utf8_mode, validate, lambda chars: islice(chars, n))


def copy_while(
    buffer: BufferLike,
    predicate: CharPredicate,
    utf8_mode: bool = True,
    validate: bool = True
) -> bytes:
    """Copy the leading run of characters for which ``predicate`` holds."""
    return _select(
        buffer, utf8_mode, validate, lambda chars: takewhile(predicate, chars)
    )
