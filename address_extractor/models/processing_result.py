from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .address import Address

"""Processing result models for batch runs.

This module defines the models aggregating per-file statistics and the
overall outcome of a batch run over several export files.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics (internal helper for BatchResult)."""
    file_name: str
    status: str  # success/failed
    addresses: int  # extracted address count
    errors: int  # recorded error count
    platform: str  # PlatformType value, or AMAZON_SELLER_FIXED after a fixed-column fallback
    confidence: float
    elapsed_seconds: float


@dataclass(frozen=True)
class BatchResult:
    """Aggregated results and summary output for a batch run."""
    success_files: int
    failed_files: int
    total_addresses: int
    total_errors: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] = field(default_factory=list)
    addresses: list[Address] = field(default_factory=list)  # all files, in processing order

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files
