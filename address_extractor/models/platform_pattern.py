from __future__ import annotations

from dataclasses import dataclass

from .fields import PlatformType, SemanticField

"""PlatformPattern model: one export source's header vocabulary."""

__all__ = [
    "PlatformPattern",
]


@dataclass(frozen=True)
class PlatformPattern:
    """Declarative fuzzy-match rule set for one export platform.

    field_patterns keeps declaration order; it is a tuple of pairs rather
    than a dict so the record stays hashable and immutable.
    """
    id: PlatformType
    name: str
    base_confidence: int  # 0..100, platform weight
    field_patterns: tuple[tuple[SemanticField, tuple[str, ...]], ...]

    def __post_init__(self) -> None:
        if not 0 <= self.base_confidence <= 100:
            raise ValueError(f"{self.name}: base_confidence out of range: {self.base_confidence}")

    @property
    def possible_fields(self) -> int:
        return len(self.field_patterns)
