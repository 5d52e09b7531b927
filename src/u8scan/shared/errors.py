"""Exception types raised by u8scan.

Decoding, scanning and predicates never raise on malformed input; invalid
bytes are reported in-band through ``CharInfo.is_valid``. The only error
surfaced to callers is a character position that does not exist.
"""

from typing import Optional


class U8ScanError(Exception):
    """Base exception for u8scan errors."""


class CharIndexError(U8ScanError, IndexError):
    """Raised when a character position is outside the BOM-skipped range.

    Attributes:
        index: Requested character index (None for front/back on empty input)
        length: Number of characters walked before the range was exhausted
    """

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        length: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.index = index
        self.length = length
