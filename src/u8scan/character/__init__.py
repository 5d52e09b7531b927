"""Character layer for u8scan.

This module provides the UTF-8 decoder, byte order mark detection, lazy
character ranges, character predicates and conversion helpers.
"""

from . import predicates
from .encoding import (
    UTF8_BOM,
    BOMAction,
    BOMInfo,
    CharInfo,
    bom_str,
    decode,
    detect_bom,
    get_char_info,
    has_bom,
)
from .stream import CharIterator, CharRange, make_char_range
from .transformation import (
    quoted_str,
    to_lower_ascii,
    to_lower_ascii_str,
    to_string,
    to_upper_ascii,
    to_upper_ascii_str,
    transform_chars,
)

__all__ = [
    # Modules
    "encoding",
    "predicates",
    "stream",
    "transformation",
    # Decoding and BOM handling
    "UTF8_BOM",
    "BOMAction",
    "BOMInfo",
    "CharInfo",
    "bom_str",
    "decode",
    "detect_bom",
    "get_char_info",
    "has_bom",
    # Ranges
    "CharIterator",
    "CharRange",
    "make_char_range",
    # Conversions
    "quoted_str",
    "to_lower_ascii",
    "to_lower_ascii_str",
    "to_string",
    "to_upper_ascii",
    "to_upper_ascii_str",
    "transform_chars",
]
