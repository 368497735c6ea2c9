"""Postal address extraction from e-commerce order exports.

The engine works on decoded text held in memory:

- parse_universal_file: any delimited export, columns resolved from the header
- parse_amazon_seller_report: Amazon Seller fixed-column TSV report
- parse_amazon_seller_report_universal: header-driven first, fixed columns as fallback
- analyze_file_structure: separator / platform / mapping guess without extraction

The batch layer (services.orchestrator) and the CLI sit on top of it.
"""

from .detection.scored import analyze_file_structure, detect_columns
from .detection.strategy import PriorityColumnResolver, ScoredColumnResolver, get_resolver
from .models import (
    DEFAULT_CONFIG,
    Address,
    ColumnMapping,
    DetectionResult,
    ExtractorConfig,
    ParsedAddresses,
    PlatformType,
    SemanticField,
    UniversalParseResult,
)
from .services.amazon import parse_amazon_seller_report, parse_amazon_seller_report_universal
from .services.universal import parse_universal_file

__all__ = [
    "parse_universal_file",
    "parse_amazon_seller_report",
    "parse_amazon_seller_report_universal",
    "analyze_file_structure",
    "detect_columns",
    "get_resolver",
    "PriorityColumnResolver",
    "ScoredColumnResolver",
    "Address",
    "ParsedAddresses",
    "UniversalParseResult",
    "ColumnMapping",
    "DetectionResult",
    "PlatformType",
    "SemanticField",
    "ExtractorConfig",
    "DEFAULT_CONFIG",
]
