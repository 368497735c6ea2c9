"""Domain models for the address extractor.

This package contains the domain model classes used throughout the
application: detection structures, address records and the batch-run
bookkeeping models.
"""

from .address import Address, ParsedAddresses, UniversalParseResult
from .column_mapping import ColumnMapping, DetectionResult
from .config_models import DEFAULT_CONFIG, ExtractorConfig
from .fields import PlatformType, SemanticField
from .platform_pattern import PlatformPattern
from .row_data import RowData

__all__ = [
    # Detection models
    "SemanticField",
    "PlatformType",
    "ColumnMapping",
    "DetectionResult",
    "PlatformPattern",
    # Address models
    "Address",
    "ParsedAddresses",
    "UniversalParseResult",
    "RowData",
    # Configuration
    "ExtractorConfig",
    "DEFAULT_CONFIG",
]
