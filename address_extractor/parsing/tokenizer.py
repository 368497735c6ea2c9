from __future__ import annotations

import logging

"""Line tokenizers.

parse_row is the quote-aware splitter used by the universal path and by
header parsing. split_tab is the plain tab split of the legacy Amazon
path; that export is a rigid fixed-column TSV, so no quoting applies.

Neither function raises: ragged lines simply give fewer or more fields.
"""

__all__ = [
    "parse_row",
    "split_tab",
    "clean_quotes",
    "strip_wrapping_quotes",
]

logger = logging.getLogger(__name__)

QUOTE_CHARS = ('"', "'")


def strip_wrapping_quotes(value: str) -> str:
    """Remove one layer of matching quotes; the value is not trimmed."""
    if value and value[0] in QUOTE_CHARS and value.endswith(value[0]):
        return value[1:-1]
    return value


def clean_quotes(field: str) -> str:
    return strip_wrapping_quotes(field.strip())


def parse_row(line: str, separator: str) -> list[str]:
    """Split one line on separator, honouring double-quoted sections.

    Parameters
    ----------
    line: a single line of the export (no newline handling here)
    separator: single-character field delimiter

    Returns
    -------
    list[str]: trimmed fields with one layer of wrapping quotes removed

    >>> parse_row('a,"b,c",d', ',')
    ['a', 'b,c', 'd']
    >>> parse_row('a,"b""c"', ',')
    ['a', 'b"c']
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                # escaped quote inside a quoted section
                current.append('"')
                i += 2
                continue
            in_quotes = not in_quotes
            i += 1
            continue
        if char == separator and not in_quotes:
            fields.append("".join(current).strip())
            current = []
            i += 1
            continue
        current.append(char)
        i += 1

    fields.append("".join(current).strip())
    if in_quotes:
        logger.debug("unterminated quote in line (fields=%d)", len(fields))
    return [clean_quotes(f) for f in fields]


def split_tab(line: str) -> list[str]:
    return line.split("\t")
