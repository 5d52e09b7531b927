"""Scan engines for u8scan."""

from .scanner import (
    CharProcessor,
    CharScanner,
    ProcessResult,
    ScanAction,
    replace_invalid,
    scan_ascii,
    scan_string,
    scan_string_ascii,
    scan_utf8,
)

__all__ = [
    "CharProcessor",
    "CharScanner",
    "ProcessResult",
    "ScanAction",
    "replace_invalid",
    "scan_ascii",
    "scan_string",
    "scan_string_ascii",
    "scan_utf8",
]
