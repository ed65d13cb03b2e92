"""Customer detail extraction from pasted order messages."""
import re
from typing import Optional, Tuple

from homekitchen.services.ordering.models import Confidence, ParsedCustomerInfo


MAX_NAME_LINE_LENGTH = 40
MAX_NAME_LENGTH = 30

_NAME_LABEL = re.compile(r"^(?:name|customer)\b[:\s-]*", re.IGNORECASE)

# Each list is tried in order, first match wins. Separators never cross a line break.
PHONE_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"\+?971[^\S\n]*\d{1,2}[^\S\n]*\d{3}[^\S\n]*\d{4}"),
    re.compile(r"(?<!\d)0?5[0-8][^\S\n]*\d{3}[^\S\n]*\d{4}"),  # "050 123 4567"
    re.compile(r"(\+?971|05)\d{8,9}"),
)

UNIT_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"\b(?:unit|apt|apartment|room)[^\S\n]*#?[^\S\n]*(\d+[A-Z]?)", re.IGNORECASE),
    re.compile(r"#[^\S\n]*(\d{3,4})\b"),
    re.compile(r"\bunit[^\S\n]*(\d{3,4})", re.IGNORECASE),
)

BUILDING_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"\b(?:building|bldg|tower)[^\S\n]*([A-Z0-9]+)", re.IGNORECASE),
    re.compile(r"\b(tower[^\S\n]*[A-Z])", re.IGNORECASE),
)

FLOOR_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"\b(?:floor|flr|level|lvl)[^\S\n]*(\d+)", re.IGNORECASE),
    re.compile(r"\b(\d{1,2})(?:st|nd|rd|th)[^\S\n]*floor", re.IGNORECASE),
)

# +971 5X..., 971 5X..., 05X..., 5X... followed by seven digits
LOCAL_MOBILE_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"^\+971(50|52|54|55|56|58)\d{7}$"),
    re.compile(r"^971(50|52|54|55|56|58)\d{7}$"),
    re.compile(r"^(050|052|054|055|056|058)\d{7}$"),
    re.compile(r"^(50|52|54|55|56|58)\d{7}$"),
)


def _first_match(patterns: Tuple[re.Pattern, ...], text: str) -> Optional[re.Match]:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match
    return None


def _extract_name(text: str) -> Optional[str]:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        return None

    first = lines[0]
    if len(first) >= MAX_NAME_LINE_LENGTH or re.search(r"\d", first):
        return None

    cleaned = _NAME_LABEL.sub("", first).strip()
    if 0 < len(cleaned) < MAX_NAME_LENGTH:
        return cleaned
    return None


def extract_customer_info(text: str) -> ParsedCustomerInfo:
    """
    Pull name, phone and address details out of a pasted message.

    Works on the whole text at once. The name only comes from the first
    line. Confidence rises to medium for a name or phone and to high once
    a unit or building is found; the floor does not change it.
    """
    info = ParsedCustomerInfo()

    name = _extract_name(text)
    if name:
        info.name = name
        info.confidence = Confidence.MEDIUM

    match = _first_match(PHONE_PATTERNS, text)
    if match:
        info.phone = re.sub(r"\s", "", match.group(0))
        if info.confidence != Confidence.HIGH:
            info.confidence = Confidence.MEDIUM

    match = _first_match(UNIT_PATTERNS, text)
    if match:
        info.unit_number = match.group(1)
        info.confidence = Confidence.HIGH

    match = _first_match(BUILDING_PATTERNS, text)
    if match:
        info.building = match.group(1)
        info.confidence = Confidence.HIGH

    match = _first_match(FLOOR_PATTERNS, text)
    if match:
        info.floor = match.group(1)

    return info


def is_local_mobile(phone: Optional[str]) -> bool:
    """Check whether ``phone`` looks like a local mobile number."""
    if not phone or phone == "N/A":
        return False

    cleaned = re.sub(r"[\s\-()]", "", phone)
    return any(pattern.match(cleaned) for pattern in LOCAL_MOBILE_PATTERNS)
