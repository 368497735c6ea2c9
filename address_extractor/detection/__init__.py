"""Column detection: platform registry and the two resolution strategies."""

from .priority import find_address_columns
from .registry import PLATFORM_REGISTRY
from .scored import analyze_file_structure, detect_columns
from .strategy import ColumnResolver, PriorityColumnResolver, ScoredColumnResolver, get_resolver

__all__ = [
    "PLATFORM_REGISTRY",
    "detect_columns",
    "analyze_file_structure",
    "find_address_columns",
    "ColumnResolver",
    "PriorityColumnResolver",
    "ScoredColumnResolver",
    "get_resolver",
]
