from __future__ import annotations

from enum import Enum

"""Enumerations shared by the column resolvers and the row extractor.

SemanticField is the closed set of address roles a raw column can be
mapped to. PlatformType names the export source a header row was
recognised as.
"""

__all__ = [
    "SemanticField",
    "PlatformType",
]


class SemanticField(Enum):
    """Normalized address role a raw column is mapped to.

    The value doubles as the attribute name on ColumnMapping.
    """
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    FULL_NAME = "full_name"
    ADDRESS_LINE1 = "address_line1"
    ADDRESS_LINE2 = "address_line2"
    ADDRESS_LINE3 = "address_line3"
    CITY = "city"
    STATE = "state"
    POSTAL_CODE = "postal_code"
    COUNTRY = "country"


class PlatformType(Enum):
    """Export source guessed from the header row.

    - AMAZON_SELLER / SHOPIFY / EBAY / GENERIC: scored registry entries
    - UNIVERSAL: priority-list resolution (no platform guess)
    - UNKNOWN: nothing matched, or the file was empty
    """
    AMAZON_SELLER = "AMAZON_SELLER"
    SHOPIFY = "SHOPIFY"
    EBAY = "EBAY"
    GENERIC = "GENERIC"
    UNIVERSAL = "UNIVERSAL"
    UNKNOWN = "UNKNOWN"
