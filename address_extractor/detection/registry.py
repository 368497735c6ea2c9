from __future__ import annotations

from ..models.fields import PlatformType, SemanticField
from ..models.platform_pattern import PlatformPattern

"""Platform pattern registry for the scored column resolver.

Order matters: when two platforms reach the same score the earlier entry
wins, so the tuple below is the tie-break order.
"""

__all__ = [
    "PLATFORM_REGISTRY",
    "get_platform_pattern",
]

F = SemanticField

AMAZON_SELLER = PlatformPattern(
    id=PlatformType.AMAZON_SELLER,
    name="Amazon Seller",
    base_confidence=95,
    field_patterns=(
        (F.FULL_NAME, ("recipient-name", "ship-to-name")),
        (F.ADDRESS_LINE1, ("ship-address-1", "shipping-address-1")),
        (F.ADDRESS_LINE2, ("ship-address-2", "shipping-address-2")),
        (F.ADDRESS_LINE3, ("ship-address-3", "shipping-address-3")),
        (F.CITY, ("ship-city", "shipping-city")),
        (F.STATE, ("ship-state", "shipping-state")),
        (F.POSTAL_CODE, ("ship-postal-code", "shipping-postal-code")),
        (F.COUNTRY, ("ship-country", "shipping-country")),
    ),
)

SHOPIFY = PlatformPattern(
    id=PlatformType.SHOPIFY,
    name="Shopify",
    base_confidence=90,
    field_patterns=(
        (F.FULL_NAME, ("shipping_name", "shipping name", "name")),
        (F.ADDRESS_LINE1, ("shipping_address1", "shipping address1", "shipping_street", "shipping street")),
        (F.ADDRESS_LINE2, ("shipping_address2", "shipping address2")),
        (F.CITY, ("shipping_city", "shipping city")),
        (F.STATE, ("shipping_province", "shipping province")),
        (F.POSTAL_CODE, ("shipping_zip", "shipping zip")),
        (F.COUNTRY, ("shipping_country", "shipping country")),
    ),
)

EBAY = PlatformPattern(
    id=PlatformType.EBAY,
    name="eBay",
    base_confidence=85,
    field_patterns=(
        (F.FULL_NAME, ("buyer_name", "buyer name", "name")),
        (F.ADDRESS_LINE1, ("street1", "address_line_1")),
        (F.ADDRESS_LINE2, ("street2", "address_line_2")),
        (F.CITY, ("city_name", "city")),
        (F.STATE, ("state_or_province", "state")),
        (F.POSTAL_CODE, ("postal_code", "zip_code")),
        (F.COUNTRY, ("country_name", "country")),
    ),
)

GENERIC = PlatformPattern(
    id=PlatformType.GENERIC,
    name="Generic",
    base_confidence=70,
    field_patterns=(
        (F.FIRST_NAME, ("first_name", "firstname", "prénom", "prenom", "given_name")),
        (F.LAST_NAME, ("last_name", "lastname", "nom", "family_name", "surname")),
        (F.FULL_NAME, ("name", "full_name", "nom_complet", "customer_name", "recipient")),
        (F.ADDRESS_LINE1, ("address", "address1", "address_1", "adresse", "street", "rue")),
        (F.ADDRESS_LINE2, ("address2", "address_2", "adresse2", "complement")),
        (F.CITY, ("city", "ville", "town", "locality")),
        (F.STATE, ("state", "province", "region", "état", "etat")),
        (F.POSTAL_CODE, ("postal_code", "zip", "zip_code", "code_postal", "postcode")),
        (F.COUNTRY, ("country", "pays", "nation", "country_name")),
    ),
)

PLATFORM_REGISTRY: tuple[PlatformPattern, ...] = (AMAZON_SELLER, SHOPIFY, EBAY, GENERIC)


def get_platform_pattern(platform: PlatformType) -> PlatformPattern:
    for pattern in PLATFORM_REGISTRY:
        if pattern.id is platform:
            return pattern
    raise KeyError(f"no registry entry for platform {platform.value}")
