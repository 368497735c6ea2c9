"""Text-level parsing: line tokenizers, separator detection, header scoring."""

from .headers import levenshtein_distance, normalize_header, similarity
from .separator import detect_separator
from .tokenizer import clean_quotes, parse_row, split_tab

__all__ = [
    "parse_row",
    "split_tab",
    "clean_quotes",
    "detect_separator",
    "normalize_header",
    "similarity",
    "levenshtein_distance",
]
