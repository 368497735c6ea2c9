from __future__ import annotations

import logging

from ..detection.strategy import ScoredColumnResolver
from ..models.address import Address, ParsedAddresses
from ..models.column_mapping import DetectionResult
from ..models.config_models import DEFAULT_CONFIG, ExtractorConfig
from ..models.error_record import format_row_error
from ..models.fields import PlatformType
from ..models.row_data import RowData
from ..parsing.tokenizer import split_tab
from .assembler import build_address, clean_address_data, dedupe_key
from .country import normalize_country
from .extraction import FormatError, get_column, passes_legacy_gate, split_full_name
from .universal import INVALID_FORMAT_REASON, parse_universal_file

"""Legacy Amazon Seller report parsing.

Amazon order reports are tab separated with a fixed column layout, so
this path reads columns by position instead of resolving headers:

    [16] recipient-name   [17] ship-address-1   [18] ship-address-2
    [19] ship-address-3   [20] ship-city        [21] ship-state
    [22] ship-postal-code [23] ship-country

Amazon reports list one line per order item, so the same recipient often
appears several times; duplicates are skipped here (and only here).
"""

__all__ = [
    "parse_amazon_seller_report",
    "parse_amazon_seller_report_universal",
    "parse_amazon_report_with_detection",
]

logger = logging.getLogger(__name__)

AMAZON_HEADER_MARKER = "order-id"

COL_RECIPIENT_NAME = 16
COL_ADDRESS_1 = 17
COL_ADDRESS_2 = 18
COL_ADDRESS_3 = 19
COL_CITY = 20
COL_STATE = 21
COL_POSTAL_CODE = 22
COL_COUNTRY = 23


def parse_amazon_seller_report(
    content: str, config: ExtractorConfig = DEFAULT_CONFIG
) -> ParsedAddresses:
    """Parse a fixed-column Amazon Seller TSV report.

    An empty input gives empty addresses and errors (no "Fichier vide").
    """
    lines = [line.strip() for line in content.split("\n")]
    lines = [line for line in lines if line]
    data_lines = [
        line for i, line in enumerate(lines) if not (i == 0 and AMAZON_HEADER_MARKER in line)
    ]

    addresses: list[Address] = []
    errors: list[str] = []
    seen: set[str] = set()
    duplicates = 0

    for row_number, line in enumerate(data_lines, start=1):
        try:
            if "\x00" in line:
                raise FormatError("caractère nul dans la ligne (contenu binaire ?)")
            columns = split_tab(line)
            recipient = get_column(columns, COL_RECIPIENT_NAME)
            address1 = get_column(columns, COL_ADDRESS_1)
            if not recipient or not address1:
                continue

            address2 = get_column(columns, COL_ADDRESS_2)
            address3 = get_column(columns, COL_ADDRESS_3)
            ship_city = get_column(columns, COL_CITY)
            state = get_column(columns, COL_STATE)
            postal_code = get_column(columns, COL_POSTAL_CODE)
            country = get_column(columns, COL_COUNTRY)

            key = dedupe_key(recipient, address1, postal_code, ship_city)
            if key in seen:
                duplicates += 1
                continue

            first_name, last_name = split_full_name(recipient)
            city = ship_city
            if state and state != ship_city:
                city = f"{ship_city} {state}".strip()

            row = RowData(
                row_number=row_number,
                first_name=first_name,
                last_name=last_name,
                address_line1=address1,
                address_line2=", ".join(p for p in (address2, address3) if p) or None,
                city=city,
                postal_code=postal_code,
                country=normalize_country(country, config),
            )
        except FormatError as e:
            errors.append(format_row_error(row_number, str(e)))
            continue
        except Exception:
            logger.debug("amazon row %d failed", row_number, exc_info=True)
            errors.append(format_row_error(row_number, INVALID_FORMAT_REASON))
            continue

        if passes_legacy_gate(row):
            addresses.append(build_address(row, len(addresses) + 1, config.default_country))
            seen.add(key)

    logger.debug(
        "amazon parse lines=%d addresses=%d duplicates=%d errors=%d",
        len(data_lines),
        len(addresses),
        duplicates,
        len(errors),
    )
    return ParsedAddresses(addresses=clean_address_data(addresses), errors=errors)


def parse_amazon_report_with_detection(
    content: str, config: ExtractorConfig = DEFAULT_CONFIG
) -> tuple[ParsedAddresses, DetectionResult | None]:
    """Try header-driven parsing first, fall back to fixed columns.

    The universal result is kept only when the scored resolver recognises
    an Amazon Seller header with confidence above
    config.amazon_fallback_confidence.

    Returns:
        (addresses and errors, header detection), detection being None
        when the fixed-column reader produced the result
    """
    result = parse_universal_file(content, config, ScoredColumnResolver(config))
    if (
        result.platform is PlatformType.AMAZON_SELLER
        and result.confidence > config.amazon_fallback_confidence
    ):
        return ParsedAddresses(addresses=result.addresses, errors=result.errors), result.detection
    logger.debug(
        "amazon fallback platform=%s confidence=%.1f",
        result.platform.value,
        result.confidence,
    )
    return parse_amazon_seller_report(content, config), None


def parse_amazon_seller_report_universal(
    content: str, config: ExtractorConfig = DEFAULT_CONFIG
) -> ParsedAddresses:
    """Amazon entry point: header-driven parsing with fixed-column fallback."""
    result, _ = parse_amazon_report_with_detection(content, config)
    return result
