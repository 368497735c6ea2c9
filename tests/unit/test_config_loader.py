from __future__ import annotations

from pathlib import Path

import pytest

from address_extractor.config.loader import ConfigError, config_from_dict, load_config
from address_extractor.models.config_models import DEFAULT_CONFIG, ExtractorConfig


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.default_country == "Belgique"
    assert cfg.match_threshold == 70
    assert cfg.max_field_length == 120
    assert cfg.noise_markers == ("Shopify Payments", "PayPal Express")
    assert cfg.amazon_fallback_confidence == 80
    assert cfg.accepted_extensions == (".csv", ".txt")


def test_load_config_missing_file(temp_workdir: Path):
    with pytest.raises(ConfigError, match="config file not found"):
        load_config(temp_workdir / "config" / "absent.yml")


def test_load_config_invalid_yaml(temp_workdir: Path):
    p = temp_workdir / "config" / "broken.yml"
    p.write_text("noise_markers: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid yaml"):
        load_config(p)


def test_load_config_root_must_be_mapping(temp_workdir: Path):
    p = temp_workdir / "config" / "list.yml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(p)


def test_load_config_empty_file_gives_defaults(temp_workdir: Path):
    p = temp_workdir / "config" / "empty.yml"
    p.write_text("", encoding="utf-8")
    assert load_config(p) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "data",
    [
        {"unknown_key": 1},
        {"match_threshold": 150},
        {"match_threshold": "high"},
        {"max_field_length": 0},
        {"noise_markers": "Shopify Payments"},
        {"accepted_extensions": ["csv"]},
        {"accepted_extensions": []},
        {"default_country": ""},
    ],
)
def test_config_validation_failures(data):
    with pytest.raises(ConfigError, match="config validation failed"):
        config_from_dict(data)


def test_config_from_dict_partial_and_extension_case():
    cfg = config_from_dict({"accepted_extensions": [".CSV"], "match_threshold": 75})
    assert cfg == ExtractorConfig(accepted_extensions=(".csv",), match_threshold=75)
