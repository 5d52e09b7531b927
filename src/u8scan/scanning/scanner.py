"""Scan engines that rebuild a buffer from per-character directives.

A scan walks the input one character at a time and asks a caller-supplied
handler what to do with each one: copy its raw bytes, replace it, skip it or
stop. The engines never raise on malformed input; invalid sequences reach the
handler as descriptors with ``is_valid`` set to False and the handler decides
how to treat them.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from ..character.encoding import (
    Buffer,
    BufferLike,
    BOMAction,
    CharInfo,
    as_buffer,
    content_start,
    decode,
    detect_bom,
)
from ..shared.config import ScanConfig
from ..shared.logging import get_logger
from ..shared.result import ScanMetrics


class ScanAction(Enum):
    """Per-character directive returned by a scan handler."""
    COPY = "copy"
    REPLACE = "replace"
    SKIP = "skip"
    STOP = "stop"


@dataclass(frozen=True)
class ProcessResult:
    """Handler decision for one character.

    Attributes:
        action: What to do with the character
        replacement: Bytes appended instead of the character for REPLACE;
            text is encoded as UTF-8
    """
    action: ScanAction = ScanAction.COPY
    replacement: bytes = b""

    def __post_init__(self) -> None:
        if isinstance(self.replacement, str):
            object.__setattr__(self, "replacement", self.replacement.encode("utf-8"))
        elif not isinstance(self.replacement, bytes):
            object.__setattr__(self, "replacement", bytes(self.replacement))

    @classmethod
    def copy(cls) -> "ProcessResult":
        return cls(ScanAction.COPY)

    @classmethod
    def replace(cls, data: Union[bytes, str]) -> "ProcessResult":
        return cls(ScanAction.REPLACE, data)

    @classmethod
    def skip(cls) -> "ProcessResult":
        return cls(ScanAction.SKIP)

    @classmethod
    def stop(cls) -> "ProcessResult":
        return cls(ScanAction.STOP)


HandlerResult = Union[ProcessResult, ScanAction]
CharProcessor = Callable[[CharInfo, memoryview], HandlerResult]


def _resolve(result: HandlerResult) -> ProcessResult:
    if isinstance(result, ProcessResult):
        return result
    if isinstance(result, ScanAction):
        return ProcessResult(result)
    raise TypeError(
        f"Scan handler must return ProcessResult or ScanAction, "
        f"got {type(result).__name__}"
    )


def _scan_loop(
    data: Buffer,
    position: int,
    handler: CharProcessor,
    utf8_mode: bool,
    validate: bool,
    output: bytearray,
    metrics: ScanMetrics,
    max_output_size: int = 0
) -> bytearray:
    view = memoryview(data)
    end = len(data)

    while position < end:
        if max_output_size and len(output) >= max_output_size:
            metrics.truncated = True
            break

        info = decode(data, position, utf8_mode, validate)
        next_position = info.end_offset
        metrics.characters_processed += 1
        if not info.is_valid:
            metrics.invalid_sequences += 1

        result = _resolve(handler(info, view[position:next_position]))
        action = result.action
        if action is ScanAction.COPY:
            output += view[position:next_position]
        elif action is ScanAction.REPLACE:
            output += result.replacement
            metrics.replacements += 1
        elif action is ScanAction.SKIP:
            metrics.skipped += 1
        else:
            metrics.stopped_early = True
            break

        position = next_position

    return output


def scan_utf8(buffer: BufferLike, handler: CharProcessor) -> bytes:
    """Scan ``buffer`` as validated UTF-8, dropping a leading BOM.

    Args:
        buffer: Input bytes (text is encoded as UTF-8)
        handler: Called with each descriptor and a view of its raw bytes

    Returns:
        Output assembled from the handler's directives; a STOP directive
        returns what was assembled before the stopping character.
    """
    data = as_buffer(buffer)
    output = _scan_loop(
        data, content_start(data), handler, True, True, bytearray(), ScanMetrics()
    )
    return bytes(output)


def scan_ascii(buffer: BufferLike, handler: CharProcessor) -> bytes:
    """Scan ``buffer`` treating every byte as one ASCII-mode character.

    No BOM handling is done; BOM bytes reach the handler like any others.
    """
    data = as_buffer(buffer)
    output = _scan_loop(data, 0, handler, False, True, bytearray(), ScanMetrics())
    return bytes(output)


class CharScanner:
    """Configurable scan engine that records metrics for each run.

    Examples:
        >>> scanner = CharScanner(ScanConfig.preserve_bom())
        >>> scanner.scan(b"\\xef\\xbb\\xbfab", lambda info, raw: ScanAction.COPY)
        b'\\xef\\xbb\\xbfab'
        >>> scanner.last_metrics.characters_processed
        2
    """

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the scanner.

        Args:
            config: Scan configuration (defaults to ``ScanConfig()``)
            correlation_id: Overrides the configuration's correlation ID
        """
        self.config = config or ScanConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "scanner")
        self.last_metrics = ScanMetrics()

    def scan(self, buffer: BufferLike, handler: CharProcessor) -> bytes:
        """Scan ``buffer`` according to the configuration.

        A leading BOM is never passed to the handler. Depending on
        ``bom_action`` it is dropped, copied to the output, or replaced by
        whatever ``bom_handler`` returns. Once the output reaches
        ``max_output_size`` the scan stops and the output is cut to exactly
        that size, even inside a multi-byte character.
        """
        config = self.config
        data = as_buffer(buffer)
        metrics = ScanMetrics(bytes_in=len(data))
        start_time = time.perf_counter()

        output = bytearray()
        bom_info = detect_bom(data)
        if bom_info.found:
            metrics.bom_found = True
            bom_info.action_taken = config.bom_action
            if config.bom_action is BOMAction.COPY:
                output += data[:bom_info.size]
            elif config.bom_action is BOMAction.CUSTOM and config.bom_handler:
                replacement = config.bom_handler(bom_info, bytes(data[:bom_info.size]))
                if isinstance(replacement, str):
                    replacement = replacement.encode("utf-8")
                output += replacement
            self.logger.debug(
                "Leading BOM detected",
                extra={"bom_action": config.bom_action.value},
            )

        _scan_loop(
            data,
            bom_info.size,
            handler,
            config.utf8_mode,
            config.validate_utf8,
            output,
            metrics,
            config.max_output_size,
        )

        if config.max_output_size and len(output) > config.max_output_size:
            del output[config.max_output_size:]
            metrics.truncated = True

        metrics.bytes_out = len(output)
        metrics.processing_time_ms = (time.perf_counter() - start_time) * 1000
        self.last_metrics = metrics

        if metrics.stopped_early:
            self.logger.debug(
                "Scan stopped by handler",
                extra={"characters_processed": metrics.characters_processed},
            )
        if metrics.truncated:
            self.logger.debug(
                "Scan output reached size limit",
                extra={"max_output_size": config.max_output_size},
            )
        if self.logger.is_debug_enabled():
            self.logger.debug("Scan completed", extra=metrics.to_dict())
        return bytes(output)


def scan_string(
    buffer: BufferLike,
    handler: CharProcessor,
    config: Optional[ScanConfig] = None
) -> bytes:
    """Scan ``buffer`` with full control over BOM, mode, validation and size.

    See ``CharScanner.scan`` for the semantics.
    """
    return CharScanner(config).scan(buffer, handler)


def scan_string_ascii(
    buffer: BufferLike,
    handler: CharProcessor,
    max_output_size: int = 0
) -> bytes:
    """ASCII scan whose result is cut to ``max_output_size`` bytes (0 = unlimited)."""
    if max_output_size < 0:
        raise ValueError("max_output_size must be >= 0")
    result = scan_ascii(buffer, handler)
    if max_output_size and len(result) > max_output_size:
        return result[:max_output_size]
    return result


def replace_invalid(replacement: Union[bytes, str] = "\uFFFD") -> CharProcessor:
    """Build a handler that replaces each invalid byte and copies the rest."""
    substitute = ProcessResult.replace(replacement)
    keep = ProcessResult.copy()

    def handler(info: CharInfo, raw: memoryview) -> ProcessResult:
        return keep if info.is_valid else substitute
    return handler
