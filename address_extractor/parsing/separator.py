from __future__ import annotations

"""Field separator detection from the first line of a file.

Occurrences are counted on the raw line, quoted sections included. A
comma file whose first quoted field holds more tabs than there are
commas is therefore detected as tab separated.
"""

__all__ = [
    "SEPARATOR_CANDIDATES",
    "detect_separator",
]

# Priority order: earlier entries win ties.
SEPARATOR_CANDIDATES: tuple[str, ...] = ("\t", ",", ";", "|")


def detect_separator(line: str) -> str:
    """Return the candidate separator occurring most often in line.

    Ties, including a line containing none of the candidates, resolve to
    the earliest candidate (tab).
    """
    best = SEPARATOR_CANDIDATES[0]
    best_count = -1
    for candidate in SEPARATOR_CANDIDATES:
        count = line.count(candidate)
        if count > best_count:
            best = candidate
            best_count = count
    return best
