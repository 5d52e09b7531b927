#!/usr/bin/env python3
"""
Character Access Examples

This script demonstrates character-indexed access, counting and the copy
algorithms on text that mixes ASCII, CJK, emoji and a byte order mark.
"""

import sys
from pathlib import Path

# Add src to path for running examples directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import u8scan
from u8scan import predicates


def example_counting():
    """Example 1: Characters versus bytes."""
    print("=== Example 1: Counting ===")

    text = "Hello 世界! 123"
    data = text.encode("utf-8")
    print(f"Input: {text!r}")
    print(f"  bytes:      {len(data)}")
    print(f"  characters: {u8scan.length(data)}")
    print(f"  digits:     {u8scan.copy_if(data, predicates.is_digit_ascii).decode()}")
    print()


def example_bom():
    """Example 2: A leading BOM is invisible to access functions."""
    print("=== Example 2: BOM Handling ===")

    data = u8scan.bom_str() + b"Hello"
    print(f"has_bom:  {u8scan.has_bom(data)}")
    print(f"length:   {u8scan.length(data)}")
    print(f"front:    {chr(u8scan.front(data).scalar_value)!r}")
    print(f"at(4):    {chr(u8scan.at(data, 4).scalar_value)!r}")

    try:
        u8scan.at(data, 5)
    except u8scan.CharIndexError as e:
        print(f"at(5):    {e} (length {e.length})")

    print(f"BOM only is empty: {u8scan.is_empty(u8scan.bom_str())}")
    print()


def example_copy_algorithms():
    """Example 3: Selecting characters by predicate."""
    print("=== Example 3: Copy Algorithms ===")

    data = "name = Grüße \U0001F30D".encode("utf-8")
    equals = predicates.has_codepoint(ord("="))

    print(f"copy_until '=': {u8scan.copy_until(data, equals).decode()!r}")
    print(f"copy_from '=':  {u8scan.copy_from(data, equals).decode()!r}")
    print(f"copy_n 9:       {u8scan.copy_n(data, 9).decode()!r}")
    print(f"copy_while alpha: {u8scan.copy_while(data, predicates.is_alpha_ascii).decode()!r}")
    print(f"emoji:          {u8scan.copy_if(data, predicates.is_emoji).decode()!r}")
    print()


def example_invalid_input():
    """Example 4: Malformed bytes are reported, never raised."""
    print("=== Example 4: Invalid Input ===")

    data = b"Hello\xff\xfeWorld"
    for index in range(u8scan.length(data)):
        info = u8scan.at(data, index)
        if not info.is_valid:
            print(
                f"  index {index}: invalid byte 0x{info.scalar_value:02X} "
                f"at offset {info.start_offset}"
            )
    print(f"valid only: {u8scan.copy_if(data, predicates.is_valid)!r}")
    print()


def main():
    """Run all examples."""
    example_counting()
    example_bom()
    example_copy_algorithms()
    example_invalid_input()


if __name__ == "__main__":
    main()
