"""u8scan: character-level scanning of UTF-8 and ASCII byte buffers.

Walks nominally UTF-8 bytes one character at a time without decoding the
whole buffer, with validation, BOM handling, predicates and handler-driven
rewriting. Malformed input never raises; it is reported per character.

Progressive API Disclosure:
- Level 1: Access functions - length(), at(), front(), back(), is_empty()
- Level 2: Copy algorithms and predicates - copy_if(), copy_n(), predicates.is_digit_ascii
- Level 3: Ranges and scanning - make_char_range(), scan_utf8(), scan_string()
"""

__version__ = "0.1.0"
__author__ = "u8scan Team"

# Level 1: character-indexed access
from .api.access import at, back, empty, front, is_empty, length

# Level 2: copy algorithms and predicates
from .api.algorithms import copy, copy_from, copy_if, copy_n, copy_until, copy_while
from .character import predicates

# Level 3: ranges, conversions and scanning
from .character.encoding import (
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
from .character.stream import CharIterator, CharRange, make_char_range
from .character.transformation import (
    quoted_str,
    to_lower_ascii,
    to_lower_ascii_str,
    to_string,
    to_upper_ascii,
    to_upper_ascii_str,
    transform_chars,
)
from .scanning.scanner import (
    CharScanner,
    ProcessResult,
    ScanAction,
    replace_invalid,
    scan_ascii,
    scan_string,
    scan_string_ascii,
    scan_utf8,
)

# Configuration, errors and results
from .shared.config import ScanConfig
from .shared.errors import CharIndexError, U8ScanError
from .shared.result import ScanMetrics

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: access
    "at",
    "back",
    "empty",
    "front",
    "is_empty",
    "length",

    # Level 2: copy algorithms and predicates
    "copy",
    "copy_from",
    "copy_if",
    "copy_n",
    "copy_until",
    "copy_while",
    "predicates",

    # Level 3: decoding, ranges, conversions and scanning
    "UTF8_BOM",
    "BOMAction",
    "BOMInfo",
    "CharInfo",
    "bom_str",
    "decode",
    "detect_bom",
    "get_char_info",
    "has_bom",
    "CharIterator",
    "CharRange",
    "make_char_range",
    "quoted_str",
    "to_lower_ascii",
    "to_lower_ascii_str",
    "to_string",
    "to_upper_ascii",
    "to_upper_ascii_str",
    "transform_chars",
    "CharScanner",
    "ProcessResult",
    "ScanAction",
    "replace_invalid",
    "scan_ascii",
    "scan_string",
    "scan_string_ascii",
    "scan_utf8",

    # Configuration, errors and results
    "ScanConfig",
    "CharIndexError",
    "U8ScanError",
    "ScanMetrics",
]
