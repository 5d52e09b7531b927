#!/usr/bin/env python3
"""
Scanning Examples

This script demonstrates handler-driven rewriting with the scan engines,
including BOM dispositions, output limits and scan metrics.
"""

import sys
from pathlib import Path

# Add src to path for running examples directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from u8scan.character.encoding import BOMAction, bom_str
from u8scan.character.predicates import is_digit_ascii
from u8scan.scanning.scanner import (
    CharScanner,
    ProcessResult,
    ScanAction,
    replace_invalid,
    scan_ascii,
    scan_string,
    scan_utf8,
)
from u8scan.shared.config import ScanConfig


def example_stop_and_skip():
    """Example 1: Stopping and skipping characters."""
    print("=== Example 1: Stop and Skip ===")

    def stop_at_bang(info, raw):
        return ScanAction.STOP if info.scalar_value == ord("!") else ScanAction.COPY

    def drop_digits(info, raw):
        return ScanAction.SKIP if is_digit_ascii(info) else ScanAction.COPY

    print(f"stop at '!':  {scan_utf8(b'Hello World! More', stop_at_bang)!r}")
    print(f"drop digits:  {scan_utf8(b'r2d2 c3po', drop_digits)!r}")
    print()


def example_replacement():
    """Example 2: Replacing invalid bytes."""
    print("=== Example 2: Replacement ===")

    data = b"Valid\xff\xfeMore"
    print(f"input:        {data!r}")
    print(f"UTF-8 scan:   {scan_utf8(data, replace_invalid('X'))!r}")
    print(f"ASCII scan:   {scan_ascii(data, replace_invalid('X'))!r}")

    def mask_non_ascii(info, raw):
        if info.is_ascii:
            return ProcessResult.copy()
        return ProcessResult.replace(f"<U+{info.scalar_value:04X}>")

    print(f"masked:       {scan_utf8('naïve 世界', mask_non_ascii)!r}")
    print()


def example_bom_actions():
    """Example 3: BOM dispositions."""
    print("=== Example 3: BOM Actions ===")

    data = bom_str() + b"text"
    keep = lambda info, raw: ScanAction.COPY  # noqa: E731

    print(f"ignore: {scan_string(data, keep)!r}")
    print(f"copy:   {scan_string(data, keep, ScanConfig.preserve_bom())!r}")

    config = ScanConfig(
        bom_action=BOMAction.CUSTOM,
        bom_handler=lambda info, raw: f"[BOM {info.size} bytes]".encode("ascii"),
    )
    print(f"custom: {scan_string(data, keep, config)!r}")
    print()


def example_metrics():
    """Example 4: Output limits and metrics."""
    print("=== Example 4: Metrics ===")

    scanner = CharScanner(ScanConfig(max_output_size=16), correlation_id="demo")
    output = scanner.scan(b"abc\xffdef\xfe" * 4, replace_invalid("?"))
    print(f"output: {output!r}")
    for key, value in scanner.last_metrics.to_dict().items():
        print(f"  {key}: {value}")
    print()


def main():
    """Run all examples."""
    example_stop_and_skip()
    example_replacement()
    example_bom_actions()
    example_metrics()


if __name__ == "__main__":
    main()
