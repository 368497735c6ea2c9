from __future__ import annotations

from address_extractor.models.address import ParsedAddresses
from address_extractor.models.config_models import ExtractorConfig
from address_extractor.services import amazon
from address_extractor.services.amazon import (
    parse_amazon_seller_report,
    parse_amazon_seller_report_universal,
)


def test_parse_report(amazon_report):
    result = parse_amazon_seller_report(amazon_report)
    assert result.errors == []
    assert len(result.addresses) == 2
    jean, marie = result.addresses
    assert jean.id == "address-1"
    assert (jean.first_name, jean.last_name) == ("Jean", "Dupont")
    assert jean.address_line1 == "12 rue de la Paix"
    assert jean.address_line2 is None
    assert (jean.postal_code, jean.city, jean.country) == ("75002", "Paris", "France")
    assert marie.address_line2 == "Bât B"


def test_header_line_optional(amazon_report):
    data_only = "\n".join(amazon_report.split("\n")[1:])
    assert len(parse_amazon_seller_report(data_only).addresses) == 2


def test_duplicates_skipped_case_insensitively(amazon_header, make_amazon_line):
    content = "\n".join(
        [
            amazon_header,
            make_amazon_line("402-1", "Jean Dupont", "12 rue de la Paix", "Paris", "75002"),
            make_amazon_line("402-1", "JEAN DUPONT", "12 RUE DE LA PAIX", "paris", "75002"),
            make_amazon_line("402-9", "Jean Dupont", "12 rue de la Paix", "Paris", "75002", state="IDF"),
        ]
    )
    result = parse_amazon_seller_report(content)
    assert len(result.addresses) == 1
    assert result.errors == []


def test_state_appended_to_city(amazon_header, make_amazon_line):
    content = "\n".join(
        [
            amazon_header,
            make_amazon_line("1", "John Smith", "1 Main St", "Springfield", "62701", "US", state="IL"),
            make_amazon_line("2", "Ann Lee", "5 Oak Ave", "Monaco", "98000", "MC", state="Monaco"),
        ]
    )
    john, ann = parse_amazon_seller_report(content).addresses
    assert john.city == "Springfield IL"
    assert john.country == "États-Unis"
    assert ann.city == "Monaco"
    assert ann.country == "MC"


def test_address_lines_two_and_three_joined(amazon_header, make_amazon_line):
    content = "\n".join(
        [
            amazon_header,
            make_amazon_line("1", "Jean Dupont", "12 rue X", "Paris", "75002", address2="Bât B", address3="Porte 2"),
            make_amazon_line("2", "Marie Curie", "5 av Y", "Lyon", "69002", address3="Porte 4"),
        ]
    )
    jean, marie = parse_amazon_seller_report(content).addresses
    assert jean.address_line2 == "Bât B, Porte 2"
    assert marie.address_line2 == "Porte 4"


def test_rows_without_recipient_or_address_skipped(amazon_header, make_amazon_line):
    content = "\n".join(
        [
            amazon_header,
            make_amazon_line("1", "", "12 rue X", "Paris", "75002"),
            make_amazon_line("2", "Jean Dupont", "", "Paris", "75002"),
            "short\tline",
        ]
    )
    result = parse_amazon_seller_report(content)
    assert result.addresses == []
    assert result.errors == []


def test_legacy_gate_is_looser_than_universal(amazon_header, make_amazon_line):
    content = "\n".join(
        [amazon_header, make_amazon_line("1", "Jean Dupont", "1", "75", "750", country="")]
    )
    (address,) = parse_amazon_seller_report(content).addresses
    assert address.city == "75"
    assert address.postal_code == "750"
    assert address.country == "France"


def test_default_country_from_config(amazon_header, make_amazon_line):
    content = "\n".join([amazon_header, make_amazon_line("1", "Jean Dupont", "1 rue X", "Liège", "4000", country="")])
    result = parse_amazon_seller_report(content, ExtractorConfig(default_country="Belgique"))
    assert result.addresses[0].country == "Belgique"


def test_nul_byte_row_recorded(amazon_header, make_amazon_line):
    content = "\n".join(
        [
            amazon_header,
            make_amazon_line("1", "Jean\x00Dupont", "12 rue X", "Paris", "75002"),
            make_amazon_line("2", "Marie Curie", "5 av Y", "Lyon", "69002"),
        ]
    )
    result = parse_amazon_seller_report(content)
    assert len(result.errors) == 1
    assert result.errors[0].startswith("Erreur ligne 1: caractère nul")
    assert result.addresses[0].id == "address-1"
    assert result.addresses[0].first_name == "Marie"


def test_empty_report():
    result = parse_amazon_seller_report("")
    assert result == ParsedAddresses(addresses=[], errors=[])


def test_universal_entry_keeps_confident_header_result(monkeypatch, amazon_report):
    def legacy_not_expected(*args, **kwargs):
        raise AssertionError("fixed-column fallback should not run")

    monkeypatch.setattr(amazon, "parse_amazon_seller_report", legacy_not_expected)
    result = parse_amazon_seller_report_universal(amazon_report)
    assert [a.first_name for a in result.addresses] == ["Jean", "Marie"]


def test_universal_entry_falls_back_without_header(amazon_report):
    data_only = "\n".join(amazon_report.split("\n")[1:])
    result = parse_amazon_seller_report_universal(data_only)
    # the fixed-column reader does not consume the first line as a header
    assert len(result.addresses) == 2


def test_universal_entry_fallback_threshold(monkeypatch, amazon_report):
    calls = []
    original = amazon.parse_amazon_seller_report

    def spy(content, config):
        calls.append(content)
        return original(content, config)

    monkeypatch.setattr(amazon, "parse_amazon_seller_report", spy)
    result = parse_amazon_seller_report_universal(amazon_report, ExtractorConfig(amazon_fallback_confidence=95))
    assert len(calls) == 1
    assert len(result.addresses) == 2
