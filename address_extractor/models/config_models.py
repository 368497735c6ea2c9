from __future__ import annotations

from dataclasses import dataclass

"""Config dataclass for the address extractor.

This module holds the typed configuration consumed by the engine. The
YAML loading and schema validation live in address_extractor/config/loader.py;
every engine entry point takes an ExtractorConfig and defaults to
DEFAULT_CONFIG so the pure functions stay usable without any file.
"""

__all__ = [
    "ExtractorConfig",
    "DEFAULT_CONFIG",
]


@dataclass(frozen=True)
class ExtractorConfig:
    """Tunables for detection, cleaning and the batch layer."""
    default_country: str = "France"  # used when the country cell is empty
    match_threshold: int = 60  # minimum similarity for a scored header match
    max_field_length: int = 200  # longer cleaned values are treated as noise
    noise_markers: tuple[str, ...] = ("Shopify Payments",)
    amazon_fallback_confidence: int = 80  # scored Amazon detection must exceed this
    accepted_extensions: tuple[str, ...] = (".txt", ".csv", ".tsv")

    def is_noise(self, value: str) -> bool:
        return any(marker in value for marker in self.noise_markers)


DEFAULT_CONFIG = ExtractorConfig()
