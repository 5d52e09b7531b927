"""Character predicates for filtering and counting.

Every predicate is a pure function of a single ``CharInfo``. Parameterless
predicates are plain functions; ``has_codepoint`` and ``in_range`` build a
predicate for the given code points.

The ASCII classes only match ASCII code points. Emoji detection uses a fixed
table of code point ranges that approximates the Unicode emoji property;
plain text symbols such as the copyright, registered and trademark signs are
not included.
"""

from bisect import bisect_right
from typing import Callable, Dict, List, Tuple

from .encoding import CharInfo

CharPredicate = Callable[[CharInfo], bool]

ASCII_WHITESPACE = frozenset((0x20, 0x09, 0x0A, 0x0D))

# Sorted, non-overlapping inclusive ranges
EMOJI_RANGES: List[Tuple[int, int]] = [
    (0x203C, 0x203C),    # Double exclamation mark
    (0x2049, 0x2049),    # Exclamation question mark
    (0x2139, 0x2139),    # Information source
    (0x2190, 0x2199),    # Basic arrows
    (0x21A9, 0x21AA),    # Hooked arrows
    (0x231A, 0x231B),    # Watch, hourglass
    (0x2328, 0x2328),    # Keyboard
    (0x23CF, 0x23CF),    # Eject
    (0x23E9, 0x23F3),    # Media controls, alarm clock
    (0x23F8, 0x23FA),    # Pause, stop, record
    (0x24C2, 0x24C2),    # Circled M
    (0x25AA, 0x25AB),    # Small squares
    (0x25B6, 0x25B6),    # Play button
    (0x25C0, 0x25C0),    # Reverse button
    (0x25FB, 0x25FE),    # Medium squares
    (0x2600, 0x26FF),    # Miscellaneous Symbols
    (0x2702, 0x2705),    # Scissors, check mark button
    (0x2708, 0x270F),    # Airplane, envelope, pencil
    (0x2712, 0x2714),    # Nib, check mark
    (0x2716, 0x2716),    # Heavy multiplication x
    (0x271D, 0x271D),    # Latin cross
    (0x2721, 0x2721),    # Star of David
    (0x2728, 0x2728),    # Sparkles
    (0x2733, 0x2734),    # Eight-pointed stars
    (0x2744, 0x2744),    # Snowflake
    (0x2747, 0x2747),    # Sparkle
    (0x274C, 0x274C),    # Cross mark
    (0x274E, 0x274E),    # Negative squared cross mark
    (0x2753, 0x2755),    # Question marks
    (0x2757, 0x2757),    # Heavy exclamation mark
    (0x2763, 0x2764),    # Hearts
    (0x2795, 0x2797),    # Plus, minus, divide
    (0x27A1, 0x27A1),    # Right arrow
    (0x27B0, 0x27B0),    # Curly loop
    (0x27BF, 0x27BF),    # Double curly loop
    (0x2934, 0x2935),    # Curved arrows
    (0x2B05, 0x2B07),    # Left, up, down arrows
    (0x2B1B, 0x2B1C),    # Large squares
    (0x2B50, 0x2B50),    # Star
    (0x2B55, 0x2B55),    # Heavy large circle
    (0x3030, 0x3030),    # Wavy dash
    (0x303D, 0x303D),    # Part alternation mark
    (0x3297, 0x3297),    # Circled ideograph congratulation
    (0x3299, 0x3299),    # Circled ideograph secret
    (0x1F004, 0x1F004),  # Mahjong red dragon
    (0x1F0CF, 0x1F0CF),  # Joker
    (0x1F1E6, 0x1F1FF),  # Regional indicators
    (0x1F300, 0x1F5FF),  # Miscellaneous Symbols and Pictographs
    (0x1F600, 0x1F64F),  # Emoticons
    (0x1F680, 0x1F6FF),  # Transport and Map Symbols
    (0x1F900, 0x1F9FF),  # Supplemental Symbols and Pictographs
    (0x1FA70, 0x1FAFF),  # Symbols and Pictographs Extended-A
]

_EMOJI_STARTS = [low for low, _ in EMOJI_RANGES]


def is_ascii(info: CharInfo) -> bool:
    return info.is_ascii


def is_utf8(info: CharInfo) -> bool:
    """Multi-byte (or invalid non-ASCII) character."""
    return not info.is_ascii


def is_valid(info: CharInfo) -> bool:
    return info.is_valid


def has_codepoint(codepoint: int) -> CharPredicate:
    """Build a predicate matching exactly ``codepoint``."""
    def predicate(info: CharInfo) -> bool:
        return info.scalar_value == codepoint
    return predicate


def in_range(min_cp: int, max_cp: int) -> CharPredicate:
    """Build a predicate matching code points in ``[min_cp, max_cp]``."""
    def predicate(info: CharInfo) -> bool:
        return min_cp <= info.scalar_value <= max_cp
    return predicate


is_digit_ascii = in_range(ord("0"), ord("9"))
is_lowercase_ascii = in_range(ord("a"), ord("z"))
is_uppercase_ascii = in_range(ord("A"), ord("Z"))


def is_alpha_ascii(info: CharInfo) -> bool:
    return is_lowercase_ascii(info) or is_uppercase_ascii(info)


def is_alphanum_ascii(info: CharInfo) -> bool:
    return is_alpha_ascii(info) or is_digit_ascii(info)


def is_whitespace_ascii(info: CharInfo) -> bool:
    """Space, tab, line feed or carriage return."""
    return info.scalar_value in ASCII_WHITESPACE


def is_emoji(info: CharInfo) -> bool:
    """Check membership in the emoji range table."""
    codepoint = info.scalar_value
    index = bisect_right(_EMOJI_STARTS, codepoint) - 1
    return index >= 0 and codepoint <= EMOJI_RANGES[index][1]


def negate(predicate: CharPredicate) -> CharPredicate:
    def negated(info: CharInfo) -> bool:
        return not predicate(info)
    return negated


def any_of(*predicates: CharPredicate) -> CharPredicate:
    def combined(info: CharInfo) -> bool:
        return any(predicate(info) for predicate in predicates)
    return combined


def all_of(*predicates: CharPredicate) -> CharPredicate:
    def combined(info: CharInfo) -> bool:
        return all(predicate(info) for predicate in predicates)
    return combined


PREDICATES: Dict[str, CharPredicate] = {
    "ascii": is_ascii,
    "utf8": is_utf8,
    "valid": is_valid,
    "invalid": negate(is_valid),
    "digit": is_digit_ascii,
    "alpha": is_alpha_ascii,
    "alphanum": is_alphanum_ascii,
    "lower": is_lowercase_ascii,
    "upper": is_uppercase_ascii,
    "whitespace": is_whitespace_ascii,
    "emoji": is_emoji,
}
