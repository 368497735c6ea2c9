from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from ..models.address import Address
from ..models.row_data import RowData

"""Address assembly and the final cleanup pass."""

__all__ = [
    "build_address",
    "clean_address_data",
    "dedupe_key",
    "renumber_addresses",
]


def build_address(row: RowData, position: int, default_country: str = "France") -> Address:
    """Build the Address for a validated row.

    position is the 1-based index in the output list, not the line number.
    """
    return Address(
        id=f"address-{position}",
        first_name=row.first_name,
        last_name=row.last_name,
        address_line1=row.address_line1,
        address_line2=row.address_line2,
        postal_code=row.postal_code,
        city=row.city,
        country=row.country or default_country,
    )


def clean_address_data(addresses: Iterable[Address]) -> list[Address]:
    """Trim every string field once more; address_line2 None stays None."""
    return [
        Address(
            id=a.id,
            first_name=a.first_name.strip(),
            last_name=a.last_name.strip(),
            address_line1=a.address_line1.strip(),
            address_line2=a.address_line2.strip() if a.address_line2 is not None else None,
            postal_code=a.postal_code.strip(),
            city=a.city.strip(),
            country=a.country.strip(),
        )
        for a in addresses
    ]


def dedupe_key(recipient_name: str, address_line1: str, postal_code: str, city: str) -> str:
    """Composite duplicate key of the legacy Amazon path (case-insensitive)."""
    return "-".join((recipient_name, address_line1, postal_code, city)).lower()


def renumber_addresses(addresses: Iterable[Address], start: int = 1) -> list[Address]:
    """Reassign "address-N" ids from start, keeping order.

    Ids are positions in one output list; joining the lists of several
    files needs fresh ids.
    """
    return [replace(a, id=f"address-{n}") for n, a in enumerate(addresses, start=start)]
