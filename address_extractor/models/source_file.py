from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from .address import ParsedAddresses

"""SourceFile domain model and FileStatus enum.

A SourceFile is the processing context of one export file in a batch
run, from discovery through the engine call to success or failure.
"""


class FileStatus(Enum):
    """Status enum for SourceFile processing lifecycle.

    State transitions: pending → processing → (success | failed)

    - SUCCESS: the file was read and yielded at least one address
    - FAILED: unreadable file, or nothing extracted from it
    """
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceFile:
    """Processing context for a single export file."""
    path: Path
    name: str
    result: ParsedAddresses | None = None  # None when the file could not be read
    platform: str = "UNKNOWN"
    confidence: float = 0.0
    start_time: datetime | None = None  # UTC
    end_time: datetime | None = None  # UTC
    status: FileStatus = FileStatus.PENDING
    error: str | None = None  # failure reason summary

    @property
    def address_count(self) -> int:
        return len(self.result.addresses) if self.result is not None else 0

    @property
    def error_count(self) -> int:
        return len(self.result.errors) if self.result is not None else 0
