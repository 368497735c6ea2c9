from __future__ import annotations

import logging

from ..detection.strategy import ColumnResolver, PriorityColumnResolver
from ..models.address import Address, UniversalParseResult
from ..models.column_mapping import ColumnMapping, DetectionResult
from ..models.config_models import DEFAULT_CONFIG, ExtractorConfig
from ..models.error_record import format_row_error
from ..models.fields import PlatformType
from ..parsing.separator import detect_separator
from ..parsing.tokenizer import parse_row
from .assembler import build_address, clean_address_data
from .extraction import FormatError, extract_row, passes_universal_gate

"""Universal parsing service.

Entry point for arbitrary delimited exports. The caller does not say
which platform produced the file: the separator comes from the first
non-blank line, the ColumnMapping from the header tokens, and every
following line goes through extraction, cleaning and the validation gate.

Error policy:
- a row raising while read is recorded as "Erreur ligne N: reason"
- a row failing the validation gate is dropped without an error entry
- no address and no error at all gives a single NO_ADDRESS_WARNING
- no non-blank line gives a single EMPTY_FILE_ERROR
"""

__all__ = [
    "parse_universal_file",
    "EMPTY_FILE_ERROR",
    "NO_ADDRESS_WARNING",
    "INVALID_FORMAT_REASON",
]

logger = logging.getLogger(__name__)

EMPTY_FILE_ERROR = "Fichier vide"
NO_ADDRESS_WARNING = "Aucune adresse valide trouvée dans le fichier"
INVALID_FORMAT_REASON = "Format invalide"


def parse_universal_file(
    content: str,
    config: ExtractorConfig = DEFAULT_CONFIG,
    resolver: ColumnResolver | None = None,
) -> UniversalParseResult:
    """Extract addresses from a whole delimited export held in memory.

    Args:
        content: decoded file content
        config: extraction tunables
        resolver: column resolution strategy (priority lists by default)

    Returns:
        UniversalParseResult with addresses, errors and the detection used
    """
    lines = [line for line in content.split("\n") if line.strip()]
    if not lines:
        return UniversalParseResult(
            addresses=[],
            errors=[EMPTY_FILE_ERROR],
            detection=DetectionResult(
                mapping=ColumnMapping(),
                confidence=0.0,
                platform=PlatformType.UNKNOWN,
                separator=",",
                has_headers=False,
            ),
        )

    separator = detect_separator(lines[0])
    headers = parse_row(lines[0], separator)
    if resolver is None:
        resolver = PriorityColumnResolver()
    detection = resolver.resolve_with_separator(headers, separator)
    logger.debug(
        "resolver=%s separator=%r platform=%s confidence=%.1f mapping=%s",
        resolver.name,
        separator,
        detection.platform.value,
        detection.confidence,
        detection.mapping.as_dict(),
    )

    addresses: list[Address] = []
    errors: list[str] = []
    skipped = 0

    # header is line 1, so data lines are numbered from 2
    for row_number, line in enumerate(lines[1:], start=2):
        try:
            columns = parse_row(line, detection.separator)
            row = extract_row(columns, detection.mapping, headers, row_number, config)
        except FormatError as e:
            errors.append(format_row_error(row_number, str(e)))
            continue
        except Exception:
            logger.debug("row %d failed", row_number, exc_info=True)
            errors.append(format_row_error(row_number, INVALID_FORMAT_REASON))
            continue

        if not passes_universal_gate(row):
            skipped += 1
            continue
        addresses.append(build_address(row, len(addresses) + 1, config.default_country))

    if not addresses and not errors:
        errors.append(NO_ADDRESS_WARNING)

    logger.debug(
        "universal parse lines=%d addresses=%d errors=%d skipped=%d",
        len(lines) - 1,
        len(addresses),
        len(errors),
        skipped,
    )
    return UniversalParseResult(
        addresses=clean_address_data(addresses),
        errors=errors,
        detection=detection,
    )
