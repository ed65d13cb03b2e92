"""Quantity detection for order lines."""
import re
from typing import List, Optional, Tuple


# Tried in order, first match wins
QUANTITY_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"(\d+)\s*x", re.IGNORECASE),  # "2x ribs"
    re.compile(r"x\s*(\d+)", re.IGNORECASE),  # "ribs x2"
    re.compile(r"(\d+)\s*-"),  # "2- ribs"
    re.compile(r"-\s*(\d+)"),  # "ribs - 2"
    re.compile(r"^(\d+)\s+"),  # "2 ribs"
    re.compile(r"\s+(\d+)$"),  # "ribs 2"
)

# English and Tagalog, checked in this order
WRITTEN_NUMBERS: Tuple[Tuple[str, int], ...] = (
    ("one", 1), ("isa", 1),
    ("two", 2), ("dalawa", 2),
    ("three", 3), ("tatlo", 3),
    ("four", 4), ("apat", 4),
    ("five", 5), ("lima", 5),
    ("six", 6), ("anim", 6),
    ("seven", 7), ("pito", 7),
    ("eight", 8), ("walo", 8),
    ("nine", 9), ("siyam", 9),
    ("ten", 10), ("sampu", 10),
)

_WRITTEN_PATTERNS: List[Tuple[re.Pattern, int]] = [
    (re.compile(rf"\b{word}\b", re.IGNORECASE), number)
    for word, number in WRITTEN_NUMBERS
]

DEFAULT_QUANTITY = 1


def _find_written_number(text: str) -> Optional[Tuple[re.Match, int]]:
    for pattern, number in _WRITTEN_PATTERNS:
        match = pattern.search(text)
        if match:
            return match, number
    return None


def extract_quantity(text: str) -> int:
    """
    Detect the quantity ordered on a line.

    Numeric patterns are tried first in priority order, then written
    numbers as whole words. Lines without a quantity count as one.
    A literal "0" is kept as one so every line orders something.
    """
    for pattern in QUANTITY_PATTERNS:
        match = pattern.search(text)
        if match:
            return max(DEFAULT_QUANTITY, int(match.group(1)))

    found = _find_written_number(text)
    if found:
        return found[1]

    return DEFAULT_QUANTITY


def strip_quantity(text: str) -> str:
    """
    Remove quantity markers from a line, leaving the item phrase.

    Every numeric pattern is removed wherever it occurs. A written number
    is only removed when it is what supplied the quantity.
    """
    had_numeric = any(pattern.search(text) for pattern in QUANTITY_PATTERNS)

    cleaned = text
    for pattern in QUANTITY_PATTERNS:
        cleaned = pattern.sub("", cleaned)

    if not had_numeric:
        found = _find_written_number(cleaned)
        if found:
            match = found[0]
            cleaned = cleaned[:match.start()] + cleaned[match.end():]

    return re.sub(r"\s+", " ", cleaned).strip()
