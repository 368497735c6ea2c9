from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for error logging.

Row errors reach callers of the engine as plain French strings
("Erreur ligne 4: ..."). The batch layer turns each of those strings
into an ErrorRecord so it can be written as one JSON line per error.
row=-1 is the sentinel for file-level errors (unreadable file, empty
file, no address found) where no specific line applies.
"""

__all__ = [
    "ErrorRecord",
    "format_row_error",
    "ROW_ERROR_PATTERN",
]

ROW_ERROR_TEMPLATE = "Erreur ligne {row}: {reason}"
ROW_ERROR_PATTERN = re.compile(r"^Erreur ligne (\d+): (.*)$", re.DOTALL)


def format_row_error(row: int, reason: str) -> str:
    return ROW_ERROR_TEMPLATE.format(row=row, reason=reason)


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: export filename being processed
        row: line number (1-based). -1 for file-level errors
        error_type: error classification in UPPER_SNAKE_CASE format
        message: human readable reason
    """
    timestamp: str
    file: str
    row: int
    error_type: str
    message: str

    @staticmethod
    def create(file: str, row: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord with current UTC timestamp."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            row=row,
            error_type=error_type,
            message=message,
        )

    @staticmethod
    def from_message(file: str, message: str) -> ErrorRecord:
        """Build a record from an engine error string.

        "Erreur ligne N: reason" becomes a ROW_FORMAT_ERROR on row N; any
        other message is treated as a file-level PARSE_WARNING.
        """
        m = ROW_ERROR_PATTERN.match(message)
        if m:
            return ErrorRecord.create(file, int(m.group(1)), "ROW_FORMAT_ERROR", m.group(2))
        return ErrorRecord.create(file, -1, "PARSE_WARNING", message)

    def to_json_line(self) -> str:
        """Serialize to a JSON line with exactly the dataclass keys."""
        return json.dumps(asdict(self), ensure_ascii=False)
