"""Tests for the scan engines."""

import logging

import pytest

from u8scan.character.encoding import UTF8_BOM, BOMAction, BOMInfo
from u8scan.scanning.scanner import (
    CharScanner,
    ProcessResult,
    ScanAction,
    replace_invalid,
    scan_ascii,
    scan_string,
    scan_string_ascii,
    scan_utf8,
)
from u8scan.shared.config import ScanConfig


def copy_all(info, raw):
    return ScanAction.COPY


def stop_at(codepoint):
    def handler(info, raw):
        if info.scalar_value == codepoint:
            return ProcessResult.stop()
        return ProcessResult.copy()
    return handler


class RecordingHandler:
    """Handler that records what it was called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, info, raw):
        self.calls.append((info, bytes(raw)))
        return ProcessResult.copy()


class TestProcessResult:
    """Test handler directive objects."""

    def test_factories(self):
        assert ProcessResult.copy().action is ScanAction.COPY
        assert ProcessResult.skip().action is ScanAction.SKIP
        assert ProcessResult.stop().action is ScanAction.STOP
        replaced = ProcessResult.replace(b"xy")
        assert replaced.action is ScanAction.REPLACE
        assert replaced.replacement == b"xy"

    def test_text_replacement_is_encoded(self):
        assert ProcessResult.replace("é").replacement == b"\xc3\xa9"

    def test_bytearray_replacement_is_converted(self):
        assert ProcessResult.replace(bytearray(b"q")).replacement == b"q"

    def test_default_is_copy(self):
        result = ProcessResult()
        assert result.action is ScanAction.COPY
        assert result.replacement == b""


class TestScanUtf8:
    """Test the UTF-8 scan engine."""

    def test_copy_all_reproduces_input(self):
        data = "Hello 世界 \U0001F30D".encode("utf-8")
        assert scan_utf8(data, copy_all) == data

    def test_stop_excludes_stop_character(self):
        assert scan_utf8(b"Hello World! More", stop_at(ord("!"))) == b"Hello World"

    def test_replace_invalid_per_byte(self):
        result = scan_utf8(b"Valid\xff\xfeMore", replace_invalid("X"))
        assert result == b"ValidXXMore"

    def test_truncated_sequence_replaced_once_per_byte(self):
        result = scan_utf8(b"a\xe4\xb8b", replace_invalid("?"))
        assert result == b"a??b"

    def test_bom_never_reaches_handler(self):
        handler = RecordingHandler()
        result = scan_utf8(UTF8_BOM + b"ab", handler)
        assert result == b"ab"
        assert [info.scalar_value for info, _ in handler.calls] == [0x61, 0x62]

    def test_handler_receives_raw_bytes(self):
        handler = RecordingHandler()
        scan_utf8("a世".encode("utf-8"), handler)
        assert [raw for _, raw in handler.calls] == [b"a", "世".encode("utf-8")]

    def test_skip(self):
        def drop_spaces(info, raw):
            return ScanAction.SKIP if info.scalar_value == 0x20 else ScanAction.COPY
        assert scan_utf8(b"a b c", drop_spaces) == b"abc"

    def test_replace_with_text(self):
        def redact_digits(info, raw):
            if 0x30 <= info.scalar_value <= 0x39:
                return ProcessResult.replace("#")
            return ProcessResult.copy()
        assert scan_utf8("pin 1234", redact_digits) == b"pin ####"

    def test_accepts_text_input(self):
        assert scan_utf8("héllo", copy_all) == "héllo".encode("utf-8")

    def test_bad_handler_return_raises(self):
        with pytest.raises(TypeError, match="must return ProcessResult"):
            scan_utf8(b"a", lambda info, raw: "copy")

    def test_empty_input(self):
        assert scan_utf8(b"", copy_all) == b""


class TestScanAscii:
    """Test the ASCII scan engine."""

    def test_each_byte_is_a_character(self):
        handler = RecordingHandler()
        scan_ascii("é".encode("utf-8"), handler)
        assert [info.scalar_value for info, _ in handler.calls] == [0xC3, 0xA9]
        assert all(info.is_ascii for info, _ in handler.calls)

    def test_bom_bytes_reach_handler(self):
        handler = RecordingHandler()
        assert scan_ascii(UTF8_BOM + b"a", handler) == UTF8_BOM + b"a"
        assert len(handler.calls) == 4

    def test_nothing_is_invalid(self):
        result = scan_ascii(b"\xff\xfe", replace_invalid("X"))
        assert result == b"\xff\xfe"


class TestScanString:
    """Test the configurable scan entry point."""

    def test_default_drops_bom(self):
        assert scan_string(UTF8_BOM + b"hi", copy_all) == b"hi"

    def test_copy_bom(self):
        config = ScanConfig.preserve_bom()
        assert scan_string(UTF8_BOM + b"hi", copy_all, config) == UTF8_BOM + b"hi"

    def test_custom_bom_handler(self):
        seen = []

        def bom_handler(info, raw):
            seen.append((info, raw))
            return b"<BOM>"

        config = ScanConfig(bom_action=BOMAction.CUSTOM, bom_handler=bom_handler)
        assert scan_string(UTF8_BOM + b"hi", copy_all, config) == b"<BOM>hi"
        info, raw = seen[0]
        assert info == BOMInfo(found=True, size=3, action_taken=BOMAction.CUSTOM)
        assert raw == UTF8_BOM

    def test_custom_without_handler_drops_bom(self):
        config = ScanConfig(bom_action=BOMAction.CUSTOM)
        assert scan_string(UTF8_BOM + b"hi", copy_all, config) == b"hi"

    def test_custom_handler_text_return(self):
        config = ScanConfig(
            bom_action=BOMAction.CUSTOM, bom_handler=lambda info, raw: "[bom]"
        )
        assert scan_string(UTF8_BOM + b"x", copy_all, config) == b"[bom]x"

    def test_bom_excluded_from_handler_in_copy_mode(self):
        handler = RecordingHandler()
        scan_string(UTF8_BOM + b"a", handler, ScanConfig.preserve_bom())
        assert len(handler.calls) == 1

    def test_bom_excluded_in_ascii_mode(self):
        handler = RecordingHandler()
        scan_string(UTF8_BOM + b"a", handler, ScanConfig.ascii_fast_path())
        assert len(handler.calls) == 1

    def test_ascii_mode(self):
        handler = RecordingHandler()
        scan_string("世".encode("utf-8"), handler, ScanConfig(utf8_mode=False))
        assert len(handler.calls) == 3

    def test_trusted_input_skips_validation(self):
        result = scan_string(b"\xc3\x28", replace_invalid("X"), ScanConfig.trusted_input())
        assert result == b"\xc3\x28"

    def test_max_output_size_stops_scan(self):
        handler = RecordingHandler()
        config = ScanConfig(max_output_size=3)
        assert scan_string(b"abcdef", handler, config) == b"abc"
        assert len(handler.calls) == 3

    def test_max_output_size_cuts_multibyte_character(self):
        config = ScanConfig(max_output_size=4)
        result = scan_string("ab世".encode("utf-8"), copy_all, config)
        assert result == "ab世".encode("utf-8")[:4]

    def test_max_output_size_counts_bom(self):
        config = ScanConfig(bom_action=BOMAction.COPY, max_output_size=4)
        assert scan_string(UTF8_BOM + b"xyz", copy_all, config) == UTF8_BOM + b"x"

    def test_zero_max_output_is_unlimited(self):
        data = b"x" * 1000
        assert scan_string(data, copy_all, ScanConfig(max_output_size=0)) == data


class TestScanStringAscii:
    """Test the size-limited ASCII entry point."""

    def test_unlimited(self):
        assert scan_string_ascii(b"abc", copy_all) == b"abc"

    def test_truncates_result(self):
        assert scan_string_ascii(b"abcdef", copy_all, 2) == b"ab"

    def test_negative_limit(self):
        with pytest.raises(ValueError, match="max_output_size"):
            scan_string_ascii(b"abc", copy_all, -1)


class TestCharScanner:
    """Test the stateful scanner and its metrics."""

    def test_metrics(self):
        scanner = CharScanner()
        output = scanner.scan(UTF8_BOM + b"ok\xff!", replace_invalid("?"))
        assert output == b"ok?!"
        metrics = scanner.last_metrics
        assert metrics.bytes_in == 7
        assert metrics.bytes_out == 4
        assert metrics.characters_processed == 4
        assert metrics.invalid_sequences == 1
        assert metrics.replacements == 1
        assert metrics.bom_found
        assert not metrics.stopped_early
        assert not metrics.truncated
        assert metrics.processing_time_ms >= 0

    def test_stop_metrics(self):
        scanner = CharScanner()
        scanner.scan(b"ab!cd", stop_at(ord("!")))
        assert scanner.last_metrics.stopped_early
        assert scanner.last_metrics.characters_processed == 3

    def test_skip_metrics(self):
        scanner = CharScanner()
        scanner.scan(b"abc", lambda info, raw: ScanAction.SKIP)
        assert scanner.last_metrics.skipped == 3
        assert scanner.last_metrics.bytes_out == 0

    def test_truncated_metrics(self):
        scanner = CharScanner(ScanConfig(max_output_size=2))
        scanner.scan(b"abcd", copy_all)
        assert scanner.last_metrics.truncated

    def test_correlation_id_override(self):
        config = ScanConfig(correlation_id="from-config")
        assert CharScanner(config).correlation_id == "from-config"
        assert CharScanner(config, "explicit").correlation_id == "explicit"

    def test_debug_logging(self, caplog):
        scanner = CharScanner(correlation_id="scan-1")
        with caplog.at_level(logging.DEBUG, logger="u8scan.scanning.scanner"):
            scanner.scan(UTF8_BOM + b"x", copy_all)
        messages = [record.getMessage() for record in caplog.records]
        assert "Leading BOM detected" in messages
        assert "Scan completed" in messages
        assert all(record.correlation_id == "scan-1" for record in caplog.records)
