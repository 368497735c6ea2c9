from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from .column_mapping import DetectionResult
from .fields import PlatformType

"""Address records and parse result envelopes.

An Address is only ever constructed after its row passed the validation
gate of the path that produced it. Records are immutable; the final
cleanup pass builds new instances.
"""

__all__ = [
    "Address",
    "ParsedAddresses",
    "UniversalParseResult",
]


@dataclass(frozen=True)
class Address:
    """Normalized postal address."""
    id: str  # "address-N", 1-based position in the output list
    first_name: str
    last_name: str
    address_line1: str
    postal_code: str
    city: str
    country: str
    address_line2: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ParsedAddresses:
    addresses: list[Address] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass
class UniversalParseResult(ParsedAddresses):
    """ParsedAddresses plus the structure detected from the header line."""
    detection: DetectionResult = field(default_factory=DetectionResult)

    @property
    def confidence(self) -> float:
        return self.detection.confidence

    @property
    def platform(self) -> PlatformType:
        return self.detection.platform
