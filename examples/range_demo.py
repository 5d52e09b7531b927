#!/usr/bin/env python3
"""
Character Range Examples

This script demonstrates lazy ranges and cursors, predicate composition and
ASCII case conversion.
"""

import sys
from pathlib import Path

# Add src to path for running examples directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from u8scan.character.predicates import any_of, in_range, is_emoji, is_whitespace_ascii
from u8scan.character.stream import make_char_range
from u8scan.character.transformation import quoted_str, to_upper_ascii_str, transform_chars


def example_iteration():
    """Example 1: Walking a range."""
    print("=== Example 1: Iteration ===")

    data = "a é 世 \U0001F30D".encode("utf-8")
    for info in make_char_range(data):
        print(
            f"  offset {info.start_offset:2d}  len {info.byte_length}  "
            f"U+{info.scalar_value:04X}  ascii={info.is_ascii}"
        )
    print()


def example_cursors():
    """Example 2: Manual cursor control."""
    print("=== Example 2: Cursors ===")

    char_range = make_char_range("日本語テキスト")
    cursor = char_range.begin()
    marker = cursor.copy()
    cursor.advance().advance()
    print(f"marker at byte {marker.position}, cursor at byte {cursor.position}")
    print(f"cursor character: U+{cursor.current.scalar_value:04X}")
    print(f"range size: {char_range.size()}, ascii-mode size: "
          f"{make_char_range('日本語テキスト', utf8_mode=False).size()}")
    print()


def example_predicates():
    """Example 3: Composing predicates."""
    print("=== Example 3: Predicates ===")

    katakana = in_range(0x30A0, 0x30FF)
    interesting = any_of(katakana, is_emoji)
    char_range = make_char_range("テキスト and \U0001F680 rockets")
    picked = [char_range.slice_of(info) for info in char_range if interesting(info)]
    print(f"katakana or emoji: {b''.join(picked).decode()}")
    spaces = sum(1 for info in char_range if is_whitespace_ascii(info))
    print(f"spaces: {spaces}")
    print()


def example_transforms():
    """Example 4: Case conversion and quoting."""
    print("=== Example 4: Transforms ===")

    text = 'say "grüß dich"'
    print(f"upper:  {b''.join(transform_chars(text, to_upper_ascii_str)).decode()}")
    print(f"quoted: {quoted_str(text).decode()}")
    print(f"custom: {quoted_str('a<b>c', '<', '>', '~').decode()}")
    print()


def main():
    """Run all examples."""
    example_iteration()
    example_cursors()
    example_predicates()
    example_transforms()


if __name__ == "__main__":
    main()
