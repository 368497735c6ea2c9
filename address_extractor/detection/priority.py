from __future__ import annotations

from collections.abc import Sequence

from ..models.column_mapping import ColumnMapping
from ..models.fields import SemanticField
from ..parsing.headers import normalize_header

"""Priority-list column resolver (universal path).

One flat candidate list per field, merged across platforms. Shipping and
billing specific names come before generic ones, and a bare "name" is
tried last. First match wins: an exact normalized match anywhere in the
list beats any substring match.
"""

__all__ = [
    "COLUMN_PATTERNS",
    "find_column_match",
    "find_address_columns",
]

F = SemanticField

COLUMN_PATTERNS: dict[SemanticField, tuple[str, ...]] = {
    F.FULL_NAME: (
        "shipping_name",
        "billing_name",
        "recipient_name",
        "ship_to_name",
        "buyer_name",
        "full_name",
        "customer_name",
        "contact_name",
        "nom_complet",
        "name",
        "nom",
    ),
    F.FIRST_NAME: (
        "first_name",
        "firstname",
        "given_name",
        "prénom",
        "prenom",
        "shipping_first_name",
        "billing_first_name",
    ),
    F.LAST_NAME: (
        "last_name",
        "lastname",
        "family_name",
        "surname",
        "nom_famille",
        "shipping_last_name",
        "billing_last_name",
    ),
    F.ADDRESS_LINE1: (
        "address",
        "address1",
        "address_1",
        "street",
        "street1",
        "adresse",
        "rue",
        "shipping_address1",
        "billing_address1",
        "ship_address_1",
        "ship_address1",
        "street_address",
        "address_line_1",
    ),
    F.ADDRESS_LINE2: (
        "address2",
        "address_2",
        "street2",
        "adresse2",
        "complement_adresse",
        "shipping_address2",
        "billing_address2",
        "ship_address_2",
        "ship_address2",
        "address_line_2",
    ),
    F.CITY: (
        "city",
        "ville",
        "town",
        "locality",
        "city_name",
        "shipping_city",
        "billing_city",
        "ship_city",
    ),
    F.POSTAL_CODE: (
        "postal_code",
        "zip",
        "zip_code",
        "code_postal",
        "postcode",
        "zipcode",
        "shipping_zip",
        "billing_zip",
        "ship_postal_code",
        "postal",
    ),
    F.STATE: (
        "state",
        "province",
        "region",
        "état",
        "etat",
        "shipping_province",
        "billing_province",
        "ship_state",
    ),
    F.COUNTRY: (
        "country",
        "pays",
        "nation",
        "country_name",
        "shipping_country",
        "billing_country",
        "ship_country",
    ),
}

# Resolved after the name fields, in this order.
_ADDRESS_FIELDS = (F.ADDRESS_LINE1, F.ADDRESS_LINE2, F.CITY, F.POSTAL_CODE, F.STATE, F.COUNTRY)


def find_column_match(headers: Sequence[str], patterns: Sequence[str]) -> int | None:
    """Return the first header index matching patterns, or None.

    Pass 1 looks for exact normalized equality, pass 2 for containment
    either way. Empty headers never take part in pass 2.
    """
    normalized = [normalize_header(h) for h in headers]
    normalized_patterns = [normalize_header(p) for p in patterns]

    for pattern in normalized_patterns:
        for i, header in enumerate(normalized):
            if header == pattern:
                return i

    for pattern in normalized_patterns:
        for i, header in enumerate(normalized):
            if header and (pattern in header or header in pattern):
                return i

    return None


def find_address_columns(headers: Sequence[str]) -> ColumnMapping:
    """Resolve a ColumnMapping with the flat priority lists.

    A full-name column, when present, suppresses first/last name lookup.
    """
    indices: dict[SemanticField, int] = {}

    name_index = find_column_match(headers, COLUMN_PATTERNS[F.FULL_NAME])
    if name_index is not None:
        indices[F.FULL_NAME] = name_index
    else:
        for name_field in (F.FIRST_NAME, F.LAST_NAME):
            idx = find_column_match(headers, COLUMN_PATTERNS[name_field])
            if idx is not None:
                indices[name_field] = idx

    for semantic_field in _ADDRESS_FIELDS:
        idx = find_column_match(headers, COLUMN_PATTERNS[semantic_field])
        if idx is not None:
            indices[semantic_field] = idx

    return ColumnMapping.from_fields(indices)
