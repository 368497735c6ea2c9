from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import DEFAULT_CONFIG, ExtractorConfig

"""Config loader.

Responsibilities:
- Load a YAML config file (e.g. config/extractor.yml)
- Validate it against config_schema.json shipped next to this module
- Apply defaults for every key left out
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or invalid, or the data violates it
            (unknown keys, wrong types, out-of-range values)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def config_from_dict(data: dict[str, Any]) -> ExtractorConfig:
    """Validate a raw mapping and build an ExtractorConfig from it."""
    _validate_config_schema(data)
    return ExtractorConfig(
        default_country=data.get("default_country", DEFAULT_CONFIG.default_country),
        match_threshold=data.get("match_threshold", DEFAULT_CONFIG.match_threshold),
        max_field_length=data.get("max_field_length", DEFAULT_CONFIG.max_field_length),
        noise_markers=tuple(data.get("noise_markers", DEFAULT_CONFIG.noise_markers)),
        amazon_fallback_confidence=data.get(
            "amazon_fallback_confidence", DEFAULT_CONFIG.amazon_fallback_confidence
        ),
        accepted_extensions=tuple(
            ext.lower() for ext in data.get("accepted_extensions", DEFAULT_CONFIG.accepted_extensions)
        ),
    )


def load_config(path: Path) -> ExtractorConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")
    return config_from_dict(data)
