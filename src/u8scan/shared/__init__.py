"""Shared utilities for u8scan.

This module provides configuration objects, error types, metrics and logging
used across the character, scanning and API layers.
"""

from .config import BOMHandler, GlobalConfig, ScanConfig
from .errors import CharIndexError, U8ScanError
from .logging import CorrelationLogger, configure_logging, get_logger
from .result import ScanMetrics

__all__ = [
    "BOMHandler",
    "GlobalConfig",
    "ScanConfig",
    "CharIndexError",
    "U8ScanError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "ScanMetrics",
]
