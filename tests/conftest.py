# Shared pytest fixtures
from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import pytest

from address_extractor.logging.init import LOGGER_NAME, reset_logging

SHOPIFY_HEADER = (
    "Name,Email,Shipping Name,Shipping Street,Shipping Address1,Shipping Address2,"
    "Shipping City,Shipping Zip,Shipping Province,Shipping Country"
)

AMAZON_HEADER_COLUMNS = [
    "order-id", "order-item-id", "purchase-date", "payments-date", "buyer-email",
    "buyer-name", "buyer-phone-number", "sku", "product-name", "quantity-purchased",
    "currency", "item-price", "item-tax", "shipping-price", "shipping-tax",
    "ship-service-level", "recipient-name", "ship-address-1", "ship-address-2",
    "ship-address-3", "ship-city", "ship-state", "ship-postal-code", "ship-country",
]


def amazon_line(
    order_id: str,
    recipient: str,
    address1: str,
    city: str,
    postal_code: str,
    country: str = "FR",
    *,
    address2: str = "",
    address3: str = "",
    state: str = "",
) -> str:
    """Build one 24-column Amazon Seller report line."""
    prefix = [
        order_id, "item-1", "2024-01-05", "2024-01-05", "buyer@example.com",
        "Buyer", "0600000000", "SKU-1", "Mug", "1",
        "EUR", "12.50", "2.50", "4.90", "0.98", "Standard",
    ]
    tail = [recipient, address1, address2, address3, city, state, postal_code, country]
    return "\t".join(prefix + tail)


@pytest.fixture(autouse=True)
def clean_logging():
    """Give every test a fresh application logger bound to the current stdout."""
    reset_logging()
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def shopify_csv() -> str:
    return "\n".join(
        [
            SHOPIFY_HEADER,
            "#1001,jean@example.com,Jean Dupont,12 rue de la Paix,12 rue de la Paix,,Paris,75002,,FR",
            '#1002,marie@example.com,Marie Curie,"5 avenue Victor Hugo",5 avenue Victor Hugo,Bât B,Lyon,69002,,France',
        ]
    )


@pytest.fixture()
def generic_semicolon_csv() -> str:
    return "\n".join(
        [
            "Full Name;Address1;Address2;City;Zip;Country",
            "Paul Martin;8 boulevard Saint-Michel;;Paris;75005;France",
            "Anna Schmidt;Hauptstrasse 10;Etage 2;Berlin;10115;DE",
        ]
    )


@pytest.fixture()
def amazon_report() -> str:
    return "\n".join(
        [
            "\t".join(AMAZON_HEADER_COLUMNS),
            amazon_line("402-1", "Jean Dupont", "12 rue de la Paix", "Paris", "75002"),
            amazon_line("402-2", "Marie Curie", "5 avenue Victor Hugo", "Lyon", "69002", address2="Bât B"),
        ]
    )


@pytest.fixture()
def sample_config_yaml() -> str:
    return """default_country: Belgique
match_threshold: 70
max_field_length: 120
noise_markers:
  - Shopify Payments
  - PayPal Express
amazon_fallback_confidence: 80
accepted_extensions: [.csv, .txt]
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "extractor.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def export_files(temp_workdir: Path, shopify_csv: str, generic_semicolon_csv: str) -> list[Path]:
    files = []
    for name, content in [("shopify.csv", shopify_csv), ("generic.txt", generic_semicolon_csv)]:
        f = temp_workdir / "data" / name
        f.write_text(content, encoding="utf-8")
        files.append(f)
    return files


@pytest.fixture()
def make_amazon_line():
    return amazon_line


@pytest.fixture()
def amazon_header() -> str:
    return "\t".join(AMAZON_HEADER_COLUMNS)
