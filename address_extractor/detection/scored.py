from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models.column_mapping import ColumnMapping, DetectionResult
from ..models.config_models import DEFAULT_CONFIG, ExtractorConfig
from ..models.fields import PlatformType, SemanticField
from ..models.platform_pattern import PlatformPattern
from ..parsing.headers import similarity
from ..parsing.separator import detect_separator
from ..parsing.tokenizer import clean_quotes
from .registry import PLATFORM_REGISTRY

"""Scored column resolver.

Every registry entry is tried against the header row. For each of its
fields the best scoring header (similarity >= match_threshold) becomes
that field's column, and the platform score is

    matched_fields / possible_fields * base_confidence

The highest score wins; on an exact tie the earlier registry entry is kept.
"""

__all__ = [
    "detect_columns",
    "analyze_file_structure",
    "match_platform",
]

logger = logging.getLogger(__name__)


def _best_header(
    headers: Sequence[str], patterns: Sequence[str], threshold: float
) -> int | None:
    best_index: int | None = None
    best_score = 0.0
    for pattern in patterns:
        for i, header in enumerate(headers):
            score = similarity(header, pattern)
            if score > best_score and score >= threshold:
                best_score = score
                best_index = i
    return best_index


def match_platform(
    headers: Sequence[str],
    platform: PlatformPattern,
    config: ExtractorConfig = DEFAULT_CONFIG,
) -> tuple[ColumnMapping, float]:
    """Resolve one platform's fields against headers.

    Returns:
        (mapping, score) where score is the weighted match ratio
    """
    indices: dict[SemanticField, int] = {}
    for semantic_field, patterns in platform.field_patterns:
        idx = _best_header(headers, patterns, config.match_threshold)
        if idx is not None:
            indices[semantic_field] = idx
    if not platform.possible_fields:
        return ColumnMapping(), 0.0
    score = len(indices) / platform.possible_fields * platform.base_confidence
    return ColumnMapping.from_fields(indices), score


def detect_columns(
    headers: Sequence[str], config: ExtractorConfig = DEFAULT_CONFIG
) -> DetectionResult:
    """Pick the registry platform whose vocabulary best matches headers."""
    best = DetectionResult(
        mapping=ColumnMapping(),
        confidence=0.0,
        platform=PlatformType.UNKNOWN,
        separator="\t",
        has_headers=True,
    )
    for platform in PLATFORM_REGISTRY:
        mapping, score = match_platform(headers, platform, config)
        logger.debug("platform=%s score=%.1f mapped=%s", platform.id.value, score, mapping.as_dict())
        if score > best.confidence:
            best = DetectionResult(
                mapping=mapping,
                confidence=score,
                platform=platform.id,
                separator="\t",
                has_headers=True,
            )
    return best


def _split_header_line(line: str, separator: str) -> list[str]:
    return [clean_quotes(h) for h in line.split(separator)]


def _looks_like_header(header: str) -> bool:
    try:
        float(header)
    except ValueError:
        return len(header) > 2
    return False


def analyze_file_structure(
    content: str, config: ExtractorConfig = DEFAULT_CONFIG
) -> DetectionResult:
    """Detect separator, platform and mapping from a whole file's header line."""
    lines = [line for line in content.split("\n") if line.strip()]
    if not lines:
        return DetectionResult(
            mapping=ColumnMapping(),
            confidence=0.0,
            platform=PlatformType.UNKNOWN,
            separator="\t",
            has_headers=False,
        )

    separator = detect_separator(lines[0])
    headers = _split_header_line(lines[0], separator)
    detection = detect_columns(headers, config)
    has_headers = any(_looks_like_header(h) for h in headers)
    logger.debug(
        "structure separator=%r platform=%s confidence=%.1f has_headers=%s",
        separator,
        detection.platform.value,
        detection.confidence,
        has_headers,
    )
    return DetectionResult(
        mapping=detection.mapping,
        confidence=detection.confidence,
        platform=detection.platform,
        separator=separator,
        has_headers=has_headers,
    )
