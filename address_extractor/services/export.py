from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from ..models.address import Address

"""CSV export of extracted addresses.

Column headers are the French labels used by the label printing side;
every cell is quoted so addresses containing commas survive a reload.
"""

__all__ = [
    "EXPORT_COLUMNS",
    "addresses_to_frame",
    "write_addresses_csv",
]

# Address attribute -> exported column header
EXPORT_COLUMNS: dict[str, str] = {
    "first_name": "Prénom",
    "last_name": "Nom",
    "address_line1": "Adresse 1",
    "address_line2": "Adresse 2",
    "postal_code": "Code Postal",
    "city": "Ville",
    "country": "Pays",
}


def addresses_to_frame(addresses: Iterable[Address]) -> pd.DataFrame:
    """Build a DataFrame with one row per address and the export headers."""
    records = []
    for a in addresses:
        values = a.to_dict()
        records.append({header: values[attr] or "" for attr, header in EXPORT_COLUMNS.items()})
    # dtype=str keeps postal codes such as "01000" intact
    return pd.DataFrame(records, columns=list(EXPORT_COLUMNS.values()), dtype=str)


def write_addresses_csv(addresses: Iterable[Address], path: Path) -> Path:
    df = addresses_to_frame(addresses)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, quoting=csv.QUOTE_ALL, encoding="utf-8")
    return path
