from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace

from .fields import PlatformType, SemanticField

"""ColumnMapping and DetectionResult models.

A ColumnMapping holds one optional 0-based column index per SemanticField.
A DetectionResult is computed once per file from the header line only and
carries the mapping together with the separator and the platform guess.
"""

__all__ = [
    "ColumnMapping",
    "DetectionResult",
]


@dataclass(frozen=True)
class ColumnMapping:
    """Partial mapping from SemanticField to column index.

    Indices may point past the end of a short data row; readers treat
    that as an empty value.
    """
    first_name: int | None = None
    last_name: int | None = None
    full_name: int | None = None
    address_line1: int | None = None
    address_line2: int | None = None
    address_line3: int | None = None
    city: int | None = None
    state: int | None = None
    postal_code: int | None = None
    country: int | None = None

    @classmethod
    def from_fields(cls, indices: Mapping[SemanticField, int]) -> ColumnMapping:
        return cls(**{f.value: idx for f, idx in indices.items()})

    def get(self, semantic_field: SemanticField) -> int | None:
        return getattr(self, semantic_field.value)

    def with_index(self, semantic_field: SemanticField, index: int | None) -> ColumnMapping:
        return replace(self, **{semantic_field.value: index})

    def items(self) -> Iterator[tuple[SemanticField, int]]:
        """Yield (field, index) pairs for mapped fields only, in enum order."""
        for f in SemanticField:
            idx = self.get(f)
            if idx is not None:
                yield f, idx

    def as_dict(self) -> dict[str, int]:
        return {f.value: idx for f, idx in self.items()}

    def __len__(self) -> int:
        return sum(1 for _ in self.items())


@dataclass(frozen=True)
class DetectionResult:
    """Structure guess for one file: mapping, confidence (0-100), platform."""
    mapping: ColumnMapping = field(default_factory=ColumnMapping)
    confidence: float = 0.0  # 0..100
    platform: PlatformType = PlatformType.UNKNOWN
    separator: str = "\t"
    has_headers: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"confidence out of range: {self.confidence}")
