from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import replace

from ..models.column_mapping import DetectionResult
from ..models.config_models import DEFAULT_CONFIG, ExtractorConfig
from ..models.fields import PlatformType
from .priority import find_address_columns
from .scored import detect_columns

"""Column resolution strategies.

Both resolvers answer the same question (which column holds which
address field) behind one interface so the universal parser can run
with either of them:

- PriorityColumnResolver: flat first-match lists, always confidence 100
- ScoredColumnResolver: platform registry with weighted match ratio
"""

__all__ = [
    "ColumnResolver",
    "PriorityColumnResolver",
    "ScoredColumnResolver",
    "get_resolver",
]


class ColumnResolver(ABC):
    """Turns a tokenized header row into a DetectionResult."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy name (for logging and the CLI)."""

    @abstractmethod
    def resolve(self, headers: Sequence[str]) -> DetectionResult:
        """Resolve headers; separator is left at its default."""

    def resolve_with_separator(self, headers: Sequence[str], separator: str) -> DetectionResult:
        return replace(self.resolve(headers), separator=separator)


class PriorityColumnResolver(ColumnResolver):
    """Confidence is reported as 100 whatever the match quality."""

    @property
    def name(self) -> str:
        return "priority"

    def resolve(self, headers: Sequence[str]) -> DetectionResult:
        return DetectionResult(
            mapping=find_address_columns(headers),
            confidence=100.0,
            platform=PlatformType.UNIVERSAL,
            has_headers=True,
        )


class ScoredColumnResolver(ColumnResolver):
    def __init__(self, config: ExtractorConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    @property
    def name(self) -> str:
        return "scored"

    def resolve(self, headers: Sequence[str]) -> DetectionResult:
        return detect_columns(headers, self.config)


def get_resolver(name: str, config: ExtractorConfig = DEFAULT_CONFIG) -> ColumnResolver:
    """Build a resolver from its CLI name ('priority' or 'scored')."""
    if name == "priority":
        return PriorityColumnResolver()
    if name == "scored":
        return ScoredColumnResolver(config)
    raise ValueError(f"unknown resolver strategy: {name}")
