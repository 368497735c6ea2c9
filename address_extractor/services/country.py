from __future__ import annotations

from ..models.config_models import DEFAULT_CONFIG, ExtractorConfig

"""Country normalization to French display names."""

__all__ = [
    "COUNTRY_NAMES",
    "normalize_country",
]

COUNTRY_NAMES: dict[str, str] = {
    # ISO alpha-2 codes (plus common aliases)
    "fr": "France",
    "be": "Belgique",
    "ch": "Suisse",
    "ca": "Canada",
    "us": "États-Unis",
    "usa": "États-Unis",
    "de": "Allemagne",
    "it": "Italie",
    "es": "Espagne",
    "gb": "Royaume-Uni",
    "uk": "Royaume-Uni",
    "nl": "Pays-Bas",
    # English names
    "france": "France",
    "belgium": "Belgique",
    "switzerland": "Suisse",
    "canada": "Canada",
    "united states": "États-Unis",
    "germany": "Allemagne",
    "italy": "Italie",
    "spain": "Espagne",
    "united kingdom": "Royaume-Uni",
    "netherlands": "Pays-Bas",
    # French names
    "belgique": "Belgique",
    "suisse": "Suisse",
    "états-unis": "États-Unis",
    "etats-unis": "États-Unis",
    "allemagne": "Allemagne",
    "italie": "Italie",
    "espagne": "Espagne",
    "royaume-uni": "Royaume-Uni",
    "pays-bas": "Pays-Bas",
}


def normalize_country(country: str | None, config: ExtractorConfig = DEFAULT_CONFIG) -> str:
    """Map a code or name to its French display name.

    Blank input gives config.default_country; an unknown value is
    returned trimmed but otherwise unchanged.
    """
    if not country or not country.strip():
        return config.default_country
    value = country.strip()
    return COUNTRY_NAMES.get(value.lower(), value)
