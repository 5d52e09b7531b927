"""Result and metrics types for u8scan operations."""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class ScanMetrics:
    """Counters collected by a single scan run."""

    bytes_in: int = 0
    bytes_out: int = 0
    characters_processed: int = 0
    invalid_sequences: int = 0
    replacements: int = 0
    skipped: int = 0
    stopped_early: bool = False
    truncated: bool = False
    bom_found: bool = False
    processing_time_ms: float = 0.0

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms

    @property
    def invalid_rate(self) -> float:
        """Fraction of processed characters that were invalid sequences."""
        if self.characters_processed == 0:
            return 0.0
        return self.invalid_sequences / self.characters_processed

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["characters_per_second"] = self.characters_per_second
        data["invalid_rate"] = self.invalid_rate
        return data
