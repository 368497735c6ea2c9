from __future__ import annotations

from dataclasses import dataclass

"""RowData model for the address extractor.

RowData represents the values pulled out of a single data line after
column mapping and field cleaning, before the validation gate decides
whether an Address gets assembled from it.
"""

__all__ = [
    "RowData",
]


@dataclass(frozen=True)
class RowData:
    """Cleaned field values of one data line.

    row_number follows the error message numbering of the path that
    produced it (header line = 1 on the universal path).
    """
    row_number: int
    first_name: str = ""
    last_name: str = ""
    address_line1: str = ""
    address_line2: str | None = None
    city: str = ""
    postal_code: str = ""
    country: str = ""

    @property
    def has_name(self) -> bool:
        return bool(self.first_name or self.last_name)
