from __future__ import annotations

import re

from rapidfuzz.distance import Levenshtein

"""Header normalization and fuzzy similarity scoring.

normalize_header folds a raw header ("Shipping Address1", "ship-city",
"Code Postal") to a lowercase underscore form. similarity compares two
headers on a 0-100 scale: exact match, known raw platform alias,
substring containment, then a Levenshtein ratio.
"""

__all__ = [
    "normalize_header",
    "similarity",
    "levenshtein_distance",
    "EXACT_ALIASES",
]

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

EXACT_MATCH_SCORE = 100
CONTAINMENT_SCORE = 80

# Raw Shopify headers, keyed by the normalized pattern they must satisfy.
EXACT_ALIASES: dict[str, tuple[str, ...]] = {
    "shipping_name": ("Shipping Name",),
    "shipping_address1": ("Shipping Address1",),
    "shipping_address2": ("Shipping Address2",),
    "shipping_city": ("Shipping City",),
    "shipping_zip": ("Shipping Zip",),
    "shipping_country": ("Shipping Country",),
}


def normalize_header(header: str) -> str:
    """Lowercase, trim, collapse non [a-z0-9] runs to '_' and strip edge '_'.

    Idempotent: normalize_header(normalize_header(h)) == normalize_header(h).
    """
    return _NON_ALNUM.sub("_", header.lower().strip()).strip("_")


def levenshtein_distance(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Score how well header a matches candidate pattern b (0-100).

    An empty normalized operand only scores when both sides are empty;
    otherwise '' would be contained in every pattern.
    """
    na = normalize_header(a)
    nb = normalize_header(b)

    if na == nb:
        return EXACT_MATCH_SCORE
    if not na or not nb:
        return 0.0

    for raw in EXACT_ALIASES.get(nb, ()):
        if normalize_header(raw) == na:
            return EXACT_MATCH_SCORE

    if na in nb or nb in na:
        return CONTAINMENT_SCORE

    # (max_len - distance) / max_len, scaled to 0-100
    return Levenshtein.normalized_similarity(na, nb) * 100
