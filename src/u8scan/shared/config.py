"""Configuration classes for u8scan.

This module provides configuration objects for the configurable scan entry
point and for process-wide settings such as logging.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from ..character.encoding import BOMAction, BOMInfo

BOMHandler = Callable[[BOMInfo, bytes], bytes]

VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class ScanConfig:
    """Configuration for ``scan_string`` and ``CharScanner``.

    Attributes:
        utf8_mode: Decode UTF-8 sequences (False treats every byte as ASCII)
        bom_action: Disposition of a leading BOM
        bom_handler: Produces replacement bytes when ``bom_action`` is CUSTOM
        validate_utf8: Validate continuation bytes while decoding
        max_output_size: Output size cutoff in bytes (0 means unlimited)
        correlation_id: Optional correlation ID attached to log records
    """

    utf8_mode: bool = True
    bom_action: BOMAction = BOMAction.IGNORE
    bom_handler: Optional[BOMHandler] = None
    validate_utf8: bool = True
    max_output_size: int = 0
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate scan configuration."""
        if not isinstance(self.bom_action, BOMAction):
            raise ValueError(
                f"bom_action must be a BOMAction, got {self.bom_action!r}"
            )
        if self.max_output_size < 0:
            raise ValueError("max_output_size must be >= 0")
        if self.bom_handler is not None and not callable(self.bom_handler):
            raise ValueError("bom_handler must be callable or None")

    @classmethod
    def default(cls) -> "ScanConfig":
        """UTF-8 scanning with validation; a BOM is dropped."""
        return cls()

    @classmethod
    def preserve_bom(cls) -> "ScanConfig":
        """Copy a leading BOM through to the output."""
        return cls(bom_action=BOMAction.COPY)

    @classmethod
    def ascii_fast_path(cls) -> "ScanConfig":
        """Treat every byte as a single character."""
        return cls(utf8_mode=False)

    @classmethod
    def trusted_input(cls) -> "ScanConfig":
        """Skip continuation byte validation for input known to be well formed."""
        return cls(validate_utf8=False)


@dataclass
class GlobalConfig:
    """Process-wide settings for command-line use."""

    logging_level: str = "WARNING"
    enable_correlation_tracking: bool = True

    def __post_init__(self) -> None:
        """Validate global configuration."""
        if self.logging_level not in VALID_LOGGING_LEVELS:
            raise ValueError(f"logging_level must be one of {VALID_LOGGING_LEVELS}")
