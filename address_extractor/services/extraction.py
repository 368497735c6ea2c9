from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from ..models.column_mapping import ColumnMapping
from ..models.config_models import DEFAULT_CONFIG, ExtractorConfig
from ..models.fields import SemanticField
from ..models.row_data import RowData
from ..parsing.tokenizer import strip_wrapping_quotes
from .country import normalize_country

"""Row extraction and field cleaning.

Given the ColumnMapping resolved from the header line and one tokenized
data row, extract_row produces a RowData with cleaned values. The
validation gates decide afterwards whether an Address is built from it.

Platform quirks handled here:
- Shopify exports sometimes carry the full street in the column just
  before "Shipping Address1", with the mapped column holding a fragment.
- An address containing a comma that was split across two CSV cells
  leaves a stray quote in address line 1; lines 1 and 2 are recombined.
- Amazon reports with 29 headers but only 20 data columns have the
  address block shifted one or more columns to the left.
"""

__all__ = [
    "FormatError",
    "get_column",
    "split_full_name",
    "clean_address_field",
    "clean_postal_code",
    "correct_mapping_for_missing_columns",
    "reconcile_address_lines",
    "extract_row",
    "passes_universal_gate",
    "passes_legacy_gate",
]

logger = logging.getLogger(__name__)

F = SemanticField

_NUMERIC_ONLY = re.compile(r"^[\d.]+$")
_POSTAL_EDGE_QUOTES = re.compile(r"^['\"]|['\"]$")

SHOPIFY_HEADER_MARKERS = ("shipping street", "shipping name")
SHOPIFY_STREET_NOISE = "Payments"
SHOPIFY_STREET_MIN_LENGTH = 10

AMAZON_HEADER_COUNT = 29
AMAZON_SHORT_ROW_WIDTH = 20
# column shifts observed on short Amazon rows: field -> (expected index, actual index)
_AMAZON_SHORT_ROW_SHIFTS: dict[SemanticField, tuple[int, int | None]] = {
    F.FULL_NAME: (16, 15),
    F.ADDRESS_LINE1: (17, 16),
    F.ADDRESS_LINE2: (18, None),  # usually empty, dropped
    F.CITY: (20, 17),
    F.POSTAL_CODE: (22, 18),
    F.COUNTRY: (23, 19),
}


class FormatError(Exception):
    """Raised when a data row cannot be read as delimited text."""


def get_column(columns: Sequence[str], index: int | None) -> str:
    """Trimmed value at index; '' when unmapped or out of range."""
    if index is None or index < 0 or index >= len(columns):
        return ""
    return columns[index].strip()


def split_full_name(full_name: str) -> tuple[str, str]:
    """Split on the first whitespace run: (first token, remaining tokens)."""
    parts = full_name.split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def clean_address_field(value: str, config: ExtractorConfig = DEFAULT_CONFIG) -> str:
    """Strip wrapping quotes and blank out values that are not address text.

    Purely numeric values (a shipping cost landing in the wrong column),
    values containing a noise marker and values longer than
    config.max_field_length all become ''.
    """
    if not value:
        return ""
    cleaned = strip_wrapping_quotes(value.strip())
    if (
        _NUMERIC_ONLY.match(cleaned)
        or config.is_noise(cleaned)
        or len(cleaned) > config.max_field_length
    ):
        return ""
    return cleaned


def clean_postal_code(value: str) -> str:
    return _POSTAL_EDGE_QUOTES.sub("", value)


def _is_shopify_header(headers: Sequence[str], width: int) -> bool:
    for header in headers[:width]:
        lowered = header.lower()
        if any(marker in lowered for marker in SHOPIFY_HEADER_MARKERS):
            return True
    return False


def correct_mapping_for_missing_columns(
    mapping: ColumnMapping, headers: Sequence[str], columns: Sequence[str]
) -> ColumnMapping:
    """Realign the mapping for Amazon rows shorter than their header."""
    if len(columns) >= len(headers):
        return mapping
    if len(headers) != AMAZON_HEADER_COUNT or len(columns) != AMAZON_SHORT_ROW_WIDTH:
        return mapping

    corrected = mapping
    for semantic_field, (expected, actual) in _AMAZON_SHORT_ROW_SHIFTS.items():
        if mapping.get(semantic_field) == expected:
            corrected = corrected.with_index(semantic_field, actual)
    logger.debug("short amazon row realigned: %s", corrected.as_dict())
    return corrected


def reconcile_address_lines(
    columns: Sequence[str],
    mapping: ColumnMapping,
    headers: Sequence[str],
    config: ExtractorConfig = DEFAULT_CONFIG,
) -> tuple[str, str | None]:
    """Choose address lines 1 and 2 for one row.

    Returns:
        (address_line1, address_line2) with line 2 None when empty
    """
    line1_index = mapping.address_line1
    raw1 = get_column(columns, line1_index)
    raw2 = get_column(columns, mapping.address_line2)

    if line1_index is not None and _is_shopify_header(headers, len(columns)):
        street = get_column(columns, line1_index - 1)
        if (
            street
            and len(street) > SHOPIFY_STREET_MIN_LENGTH
            and SHOPIFY_STREET_NOISE not in street
        ):
            line1 = clean_address_field(street, config)
            line2 = clean_address_field(raw2, config) if raw2 else ""
            if line2 == line1:
                line2 = ""
            return line1, line2 or None

    if '"' in raw1 and raw2:
        clean1 = clean_address_field(raw1, config)
        clean2 = clean_address_field(raw2, config)
        if clean1 and clean2:
            return f"{clean1}, {clean2}", None
        return clean1 or clean2, None

    line1 = clean_address_field(raw1, config)
    line2 = clean_address_field(raw2, config) if raw2 else ""
    return line1, line2 or None


def extract_row(
    columns: Sequence[str],
    mapping: ColumnMapping,
    headers: Sequence[str],
    row_number: int,
    config: ExtractorConfig = DEFAULT_CONFIG,
) -> RowData:
    """Extract and clean one data row.

    Raises:
        FormatError: the row holds NUL characters (binary content)
    """
    if any("\x00" in value for value in columns):
        raise FormatError("caractère nul dans la ligne (contenu binaire ?)")

    mapping = correct_mapping_for_missing_columns(mapping, headers, columns)

    first_name = ""
    last_name = ""
    if mapping.full_name is not None:
        full_name = get_column(columns, mapping.full_name)
        if full_name:
            first_name, last_name = split_full_name(full_name)
    else:
        first_name = get_column(columns, mapping.first_name)
        last_name = get_column(columns, mapping.last_name)

    line1, line2 = reconcile_address_lines(columns, mapping, headers, config)

    return RowData(
        row_number=row_number,
        first_name=first_name,
        last_name=last_name,
        address_line1=line1,
        address_line2=line2,
        city=clean_address_field(get_column(columns, mapping.city), config),
        postal_code=clean_postal_code(get_column(columns, mapping.postal_code)),
        country=normalize_country(get_column(columns, mapping.country), config),
    )


def passes_universal_gate(row: RowData) -> bool:
    return (
        row.has_name
        and len(row.address_line1) > 5
        and len(row.city) > 2
        and len(row.postal_code) >= 4
    )


def passes_legacy_gate(row: RowData) -> bool:
    return bool(
        row.first_name
        and row.address_line1
        and row.postal_code
        and row.city
        and row.country
    )
