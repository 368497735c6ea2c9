from __future__ import annotations

import pytest

from address_extractor.parsing.headers import (
    EXACT_ALIASES,
    levenshtein_distance,
    normalize_header,
    similarity,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Shipping Address1", "shipping_address1"),
        ("ship-postal-code", "ship_postal_code"),
        ("  Code Postal ", "code_postal"),
        ("__Zip__", "zip"),
        ("Prénom", "pr_nom"),
        ("", ""),
    ],
)
def test_normalize_header(raw, expected):
    assert normalize_header(raw) == expected


def test_normalize_header_idempotent():
    for raw in ["Shipping Name", "recipient-name", "  État / Province ", "A--B__C"]:
        once = normalize_header(raw)
        assert normalize_header(once) == once


def test_levenshtein_distance():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("abc", "") == 3
    assert levenshtein_distance("city", "city") == 0


def test_similarity_exact_after_normalization():
    assert similarity("ship-city", "ship_city") == 100
    assert similarity("Shipping Name", "shipping_name") == 100


def test_similarity_alias_table_covers_raw_shopify_headers():
    for normalized, raws in EXACT_ALIASES.items():
        for raw in raws:
            assert similarity(raw, normalized) == 100


def test_similarity_containment():
    assert similarity("Shipping City", "city") == 80
    assert similarity("zip", "shipping_zip") == 80


def test_similarity_empty_header_never_matches():
    assert similarity("", "city") == 0
    assert similarity("---", "zip") == 0


def test_similarity_levenshtein_ratio_bounds():
    score = similarity("postcode", "postal_code")
    assert 0 <= score < 80
    assert similarity("abc", "wxyz") == 0


@pytest.mark.parametrize(
    "header, pattern, distance",
    [
        ("postcode", "postal_code", 3),
        ("pr_nom", "prenom", 1),
        ("ship_cty", "ship_city", 1),
    ],
)
def test_similarity_ratio_from_edit_distance(header, pattern, distance):
    assert levenshtein_distance(header, pattern) == distance
    max_len = max(len(header), len(pattern))
    assert similarity(header, pattern) == pytest.approx((max_len - distance) / max_len * 100)
